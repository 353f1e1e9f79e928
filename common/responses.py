"""Standardized JSON response helpers."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Response, jsonify

from .errors import AppError
from .logging import get_logger

logger = get_logger("quantio.responses")


def ok(data: Any, *, status: int = 200) -> Response:
    """Return a success envelope."""

    response = jsonify({"success": True, "data": data})
    response.status_code = status
    return response


def fail(error: AppError | Mapping[str, Any], *, status: int | None = None) -> Response:
    """Return a failure envelope; ``status`` overrides the error's own code."""

    if isinstance(error, AppError):
        body = error.to_dict()
        status_code = status or error.status_code
    else:
        body = dict(error)
        status_code = status or 400
    if status_code >= 500:
        logger.error("responding %s: %s", status_code, body.get("code"))
    else:
        logger.debug("responding %s: %s", status_code, body.get("code"))
    response = jsonify({"success": False, "error": body})
    response.status_code = status_code
    return response


__all__ = ["ok", "fail"]
