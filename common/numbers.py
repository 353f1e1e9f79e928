"""Number parsing and rendering compatible with the browser widgets.

The UI displays numbers exactly the way JavaScript renders them, so the
helpers here reproduce ``parseFloat``, ``Number#toString``,
``Number#toFixed`` and ``Number#toExponential`` on top of :mod:`decimal`.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Doubles expand to at most ~770 significant decimal digits.
_EXACT_PRECISION = 1200
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)
_ROUND_SCALE = 1e9


def parse_float(text: object) -> float:
    """Parse the longest numeric prefix of ``text``; ``nan`` when there is none."""

    if isinstance(text, bool):
        return math.nan
    if isinstance(text, (int, float)):
        return float(text)
    if text is None:
        return math.nan
    match = _FLOAT_PREFIX.match(str(text).lstrip())
    if match is None:
        return math.nan
    literal = match.group(0)
    if literal.endswith("Infinity"):
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


def _digits_and_point(value: float) -> tuple[str, int]:
    """Return the shortest round-trip digits of ``value`` and the decimal point position."""

    normalized = Decimal(repr(abs(value))).normalize()
    _, digits, exponent = normalized.as_tuple()
    text = "".join(str(digit) for digit in digits)
    return text, exponent + len(text)


def format_number(value: float) -> str:
    """Render ``value`` the way ``Number.prototype.toString`` does."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_number(-value)

    digits, point = _digits_and_point(value)
    count = len(digits)
    if count <= point <= 21:
        return digits + "0" * (point - count)
    if 0 < point <= 21:
        return f"{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return "0." + "0" * (-point) + digits
    exponent = point - 1
    sign = "+" if exponent >= 0 else "-"
    mantissa = digits[0] if count == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{sign}{abs(exponent)}"


def to_fixed(value: float, digits: int) -> str:
    """Render ``value`` with ``digits`` fraction digits like ``Number#toFixed``."""

    if not 0 <= digits <= 100:
        raise ValueError("digits must be between 0 and 100")
    if math.isnan(value):
        return "NaN"
    if abs(value) >= 1e21 or math.isinf(value):
        return format_number(value)
    with localcontext() as ctx:
        ctx.prec = _EXACT_PRECISION
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(abs(value)).quantize(quantum, rounding=ROUND_HALF_UP)
        text = f"{rounded:f}"
    if value < 0:
        return "-" + text
    return text


def to_exponential(value: float, digits: int) -> str:
    """Render ``value`` in exponential form like ``Number#toExponential``."""

    if not 0 <= digits <= 100:
        raise ValueError("digits must be between 0 and 100")
    if math.isnan(value) or math.isinf(value):
        return format_number(value)
    prefix = "-" if value < 0 else ""
    if value == 0:
        mantissa = "0" if digits == 0 else "0." + "0" * digits
        return f"{mantissa}e+0"
    with localcontext() as ctx:
        ctx.prec = _EXACT_PRECISION
        exact = Decimal(abs(value))
        exponent = exact.adjusted()
        scaled = exact.scaleb(digits - exponent).quantize(
            Decimal(1), rounding=ROUND_HALF_UP
        )
        if scaled >= Decimal(10) ** (digits + 1):
            scaled = scaled / 10
            exponent += 1
    text = str(int(scaled))
    mantissa = text if digits == 0 else f"{text[0]}.{text[1:]}"
    sign = "+" if exponent >= 0 else "-"
    return f"{prefix}{mantissa}e{sign}{abs(exponent)}"


def round_result(value: float) -> float:
    """Suppress floating point noise by rounding to nine decimal places.

    Matches ``Math.round(value * 1e9) / 1e9``: halves round toward positive
    infinity and non-finite values pass through.
    """

    scaled = value * _ROUND_SCALE
    if not math.isfinite(scaled):
        return scaled / _ROUND_SCALE
    floor = math.floor(scaled)
    if scaled - floor >= 0.5:
        floor += 1
    return floor / _ROUND_SCALE


__all__ = [
    "format_number",
    "parse_float",
    "round_result",
    "to_exponential",
    "to_fixed",
]
