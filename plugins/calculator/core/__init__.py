"""Exports for the calculator core."""

from .engine import (
    ERROR_MARKER,
    DivisionByZero,
    EvaluationResult,
    Numeric,
    Operator,
    evaluate,
)
from .keymap import KEY_MAP, Token, map_key, parse_token
from .session import INITIAL_INPUT, CalculatorSession, InvalidTokenError

__all__ = [
    "CalculatorSession",
    "DivisionByZero",
    "ERROR_MARKER",
    "EvaluationResult",
    "INITIAL_INPUT",
    "InvalidTokenError",
    "KEY_MAP",
    "Numeric",
    "Operator",
    "Token",
    "evaluate",
    "map_key",
    "parse_token",
]
