"""API routes for the Calculator plugin.

The server keeps no calculator state: the browser posts the current session
with every key press and renders the session that comes back.
"""

from __future__ import annotations

import math

from flask import Blueprint, Response

from common.errors import ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_json_body

from ..core import (
    KEY_MAP,
    CalculatorSession,
    InvalidTokenError,
    Numeric,
    Token,
    evaluate,
    map_key,
)

logger = get_logger("quantio.calculator")


class SessionPayload(SchemaModel):
    current_input: str = "0"
    expression: str = ""
    should_reset_input: bool = False


class PressPayload(SchemaModel):
    token: str
    state: SessionPayload | None = None


class KeyPayload(SchemaModel):
    key: str
    state: SessionPayload | None = None


class EvaluatePayload(SchemaModel):
    a: float
    operator: str
    b: float


api_bp = Blueprint("calculator_api", __name__, url_prefix="/api/calculator")


def _invalid_request(exc: ValidationError) -> Response:
    logger.debug("invalid calculator request: %s", exc)
    return fail(ValidationAppError.from_exception(exc, code="calc.invalid_request"))


def _session(state: SessionPayload | None) -> CalculatorSession:
    return CalculatorSession.from_dict(state.model_dump() if state else None)


@api_bp.get("/tokens")
def tokens() -> Response:
    return ok(
        {
            "tokens": [token.value for token in Token],
            "keys": {key: token.value for key, token in KEY_MAP.items()},
        }
    )


@api_bp.post("/press")
def press() -> Response:
    try:
        payload = parse_json_body(PressPayload)
    except ValidationError as exc:
        return _invalid_request(exc)
    session = _session(payload.state)
    try:
        session.press(payload.token)
    except InvalidTokenError as exc:
        logger.info("rejected calculator token %r", payload.token)
        return fail(ValidationAppError(message=str(exc), code="calc.invalid_token"))
    return ok({"state": session.to_dict()})


@api_bp.post("/key")
def key() -> Response:
    try:
        payload = parse_json_body(KeyPayload)
    except ValidationError as exc:
        return _invalid_request(exc)
    session = _session(payload.state)
    token = map_key(payload.key)
    if token is None:
        return ok({"ignored": True, "state": session.to_dict()})
    session.press(token)
    return ok({"ignored": False, "token": token.value, "state": session.to_dict()})


@api_bp.post("/evaluate")
def evaluate_endpoint() -> Response:
    try:
        payload = parse_json_body(EvaluatePayload)
    except ValidationError as exc:
        return _invalid_request(exc)
    result = evaluate(payload.a, payload.operator, payload.b)
    if isinstance(result, Numeric):
        value = result.value if math.isfinite(result.value) else None
        return ok({"kind": "numeric", "value": value, "display": result.render()})
    return ok({"kind": "division_by_zero", "value": None, "display": result.render()})


blueprints = [api_bp]


__all__ = ["blueprints", "tokens", "press", "key", "evaluate_endpoint"]
