"""Pure arithmetic for the calculator panel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from common.numbers import format_number, round_result

ERROR_MARKER = "Error"


class Operator(str, Enum):
    """Binary operators offered by the keypad, keyed by their display symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator | None":
        try:
            return cls(symbol)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Numeric:
    """A finished arithmetic result."""

    value: float

    def render(self) -> str:
        return format_number(round_result(self.value))


@dataclass(frozen=True, slots=True)
class DivisionByZero:
    """Marker result for a division whose divisor was zero."""

    def render(self) -> str:
        return ERROR_MARKER


EvaluationResult = Union[Numeric, DivisionByZero]


def evaluate(a: float, operator: Operator | str, b: float) -> EvaluationResult:
    """Apply ``operator`` to ``a`` and ``b``.

    Unknown operators produce ``Numeric(nan)``; they indicate a caller bug
    rather than a user mistake.
    """

    op = operator if isinstance(operator, Operator) else Operator.from_symbol(operator)
    if op is Operator.ADD:
        return Numeric(a + b)
    if op is Operator.SUBTRACT:
        return Numeric(a - b)
    if op is Operator.MULTIPLY:
        return Numeric(a * b)
    if op is Operator.DIVIDE:
        if b == 0:
            return DivisionByZero()
        return Numeric(a / b)
    return Numeric(math.nan)


__all__ = [
    "DivisionByZero",
    "ERROR_MARKER",
    "EvaluationResult",
    "Numeric",
    "Operator",
    "evaluate",
]
