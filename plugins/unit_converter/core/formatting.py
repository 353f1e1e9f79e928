"""Byte-budgeted rendering of converter values."""

from __future__ import annotations

import math

from common.numbers import format_number, parse_float, to_exponential, to_fixed

DEFAULT_MAX_BYTES = 8
MAX_FIXED_PRECISION = 10
EXPONENT_DIGITS = 2
# Partial entries left alone so the user can keep typing.
_TRANSIENT_INPUTS = frozenset({"", "-", "."})


def byte_size(text: str) -> int:
    """Return the UTF-8 encoded length of ``text``."""

    return len(text.encode("utf-8"))


def _check_budget(max_bytes: int) -> None:
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        raise ValueError("max_bytes must be a positive integer.")


def _fit(value: float, max_bytes: int) -> str:
    text = format_number(value)
    if byte_size(text) <= max_bytes:
        return text

    for precision in range(MAX_FIXED_PRECISION, -1, -1):
        # Re-parse to drop the trailing zeros toFixed pads with.
        text = format_number(parse_float(to_fixed(value, precision)))
        if byte_size(text) <= max_bytes:
            return text

    text = to_exponential(value, EXPONENT_DIGITS)
    if byte_size(text) <= max_bytes:
        return text
    # Display-only fallback; may no longer parse as a number.
    return text[: max_bytes - 1]


def limit_output_size(value: float | None, max_bytes: int = DEFAULT_MAX_BYTES) -> str:
    """Render ``value`` in at most ``max_bytes`` bytes.

    Precision is reduced from ten fraction digits down to none, then
    exponential notation with two fraction digits is tried, and as a last
    resort the text is cut to ``max_bytes - 1`` characters. ``None`` and NaN
    render as an empty string.
    """

    _check_budget(max_bytes)
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        return ""
    if math.isnan(value):
        return ""
    return _fit(float(value), max_bytes)


def validate_and_limit_input(raw_text: str | None, max_bytes: int = DEFAULT_MAX_BYTES) -> str:
    """Normalise what the user typed into the converter input field.

    ``""``, ``"-"`` and ``"."`` pass through untouched. Text without a numeric
    prefix is kept while it fits the budget and dropped otherwise. Anything
    else is parsed and re-rendered under the same budget as the output.
    """

    _check_budget(max_bytes)
    text = (raw_text or "").strip()
    if text in _TRANSIENT_INPUTS:
        return text
    value = parse_float(text)
    if math.isnan(value):
        return text if byte_size(text) <= max_bytes else ""
    return _fit(value, max_bytes)


__all__ = [
    "DEFAULT_MAX_BYTES",
    "byte_size",
    "limit_output_size",
    "validate_and_limit_input",
]
