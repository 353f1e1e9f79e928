"""Unit converter API with standardized responses."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Blueprint, Response, current_app

from common.errors import NotFoundAppError, ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_json_body

from ..core import (
    DEFAULT_MAX_BYTES,
    UnknownCategoryError,
    convert_text,
    describe_catalog,
    list_units,
)

logger = get_logger("quantio.unit_converter")


class ConvertPayload(SchemaModel):
    category: str
    value: str | float | int | None = None
    from_index: int
    to_index: int


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")


def _settings() -> Mapping[str, Any]:
    return current_app.config.get("PLUGIN_SETTINGS", {}).get("unit_converter", {}) or {}


def _max_bytes() -> int:
    raw = _settings().get("max_bytes", DEFAULT_MAX_BYTES)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("ignoring invalid unit_converter.max_bytes %r", raw)
        return DEFAULT_MAX_BYTES
    return max(value, 1)


@api_bp.get("/categories")
def categories() -> Response:
    data = describe_catalog()
    default_category = _settings().get("default_category")
    if default_category not in data["catalog"]:
        default_category = data["categories"][0]
    data["default_category"] = default_category
    data["max_bytes"] = _max_bytes()
    return ok(data)


@api_bp.get("/units/<category>")
def units_endpoint(category: str) -> Response:
    try:
        units = list_units(category)
    except UnknownCategoryError as exc:
        return fail(NotFoundAppError(message=str(exc), code="unit.invalid_category"))
    return ok({"category": category, "units": units})


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    try:
        payload = parse_json_body(ConvertPayload)
    except ValidationError as exc:
        logger.debug("invalid conversion request: %s", exc)
        return fail(ValidationAppError.from_exception(exc, code="unit.invalid_request"))
    try:
        list_units(payload.category)
    except UnknownCategoryError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_category"))

    raw_value = payload.value
    if raw_value is not None and not isinstance(raw_value, str):
        raw_value = repr(raw_value)
    result = convert_text(
        payload.category,
        raw_value,
        payload.from_index,
        payload.to_index,
        max_bytes=_max_bytes(),
    )
    return ok(result)


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "categories",
    "units_endpoint",
    "convert_endpoint",
]
