"""Validation primitives for plugin APIs."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

import pydantic
from flask import request
from pydantic import BaseModel


class ValidationError(ValueError):
    """Raised when validation fails."""

    def __init__(self, message: str, *, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaModel(BaseModel):
    """Strict base model for request/response validation."""

    model_config = pydantic.ConfigDict(extra="forbid")


TModel = TypeVar("TModel", bound=SchemaModel)


def _json_safe_errors(exc: pydantic.ValidationError) -> list[dict[str, Any]]:
    errors = []
    for error in exc.errors(include_url=False, include_context=False):
        errors.append(
            {
                "loc": [str(part) for part in error.get("loc", ())],
                "msg": error.get("msg", ""),
                "type": error.get("type", ""),
            }
        )
    return errors


def parse_model(model: type[TModel], payload: Mapping[str, Any] | None) -> TModel:
    payload = payload or {}
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            "Invalid request payload", details={"errors": _json_safe_errors(exc)}
        ) from exc


def parse_json_body(model: type[TModel]) -> TModel:
    """Validate the current request's JSON body against ``model``."""

    payload = request.get_json(silent=True)
    if payload is not None and not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return parse_model(model, payload)


__all__ = [
    "ValidationError",
    "SchemaModel",
    "parse_model",
    "parse_json_body",
]
