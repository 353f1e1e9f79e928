"""Stateful calculator session driven by keypad tokens.

The session holds three pieces of state:

* ``current_input`` - the operand being typed, or the last result;
* ``expression`` - ``"<first operand> <operator>"`` while an operation waits
  for its second operand, otherwise empty;
* ``should_reset_input`` - set after an operator or equals so the next digit
  starts a fresh operand.

Operations chain strictly left to right: ``5 + 3 +`` evaluates ``5 + 3``
before recording the second ``+``. There is no operator precedence.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from common.numbers import format_number, parse_float

from .engine import Operator, evaluate
from .keymap import Token, parse_token

INITIAL_INPUT = "0"


class InvalidTokenError(ValueError):
    """Raised when a token outside the keypad vocabulary is pressed."""


@dataclass(slots=True)
class CalculatorSession:
    current_input: str = INITIAL_INPUT
    expression: str = ""
    should_reset_input: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "CalculatorSession":
        if not data:
            return cls()
        return cls(
            current_input=str(data.get("current_input", INITIAL_INPUT)),
            expression=str(data.get("expression", "")),
            should_reset_input=bool(data.get("should_reset_input", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    # ---- Entry ------------------------------------------------------------
    def input_digit(self, token: str) -> None:
        """Append a digit or decimal point to the operand being typed."""

        if self.should_reset_input:
            self.current_input = token
            self.should_reset_input = False
        elif self.current_input == INITIAL_INPUT and token != ".":
            self.current_input = token
        elif token == "." and "." in self.current_input:
            return
        else:
            self.current_input += token

    def input_operator(self, operator: Operator | str) -> None:
        """Record ``operator``, first resolving a pending operation that has its second operand."""

        symbol = operator.value if isinstance(operator, Operator) else operator
        if self.expression and not self.should_reset_input:
            self.equals()
        self.expression = f"{self.current_input} {symbol}"
        self.should_reset_input = True

    def equals(self) -> None:
        if not self.expression:
            return
        first, _, symbol = self.expression.partition(" ")
        operator = Operator.from_symbol(symbol)
        if operator is None:
            return
        result = evaluate(parse_float(first), operator, parse_float(self.current_input))
        self.current_input = result.render()
        self.expression = ""
        self.should_reset_input = True

    # ---- Editing ----------------------------------------------------------
    def clear(self) -> None:
        self.current_input = INITIAL_INPUT
        self.expression = ""
        self.should_reset_input = False

    def toggle_sign(self) -> None:
        if self.current_input == INITIAL_INPUT:
            return
        if self.current_input.startswith("-"):
            self.current_input = self.current_input[1:]
        else:
            self.current_input = "-" + self.current_input

    def percentage(self) -> None:
        # Unlike equals(), the quotient is not rounded to nine decimals.
        self.current_input = format_number(parse_float(self.current_input) / 100)

    def backspace(self) -> None:
        self.current_input = self.current_input[:-1] or INITIAL_INPUT

    # ---- Dispatch ---------------------------------------------------------
    def press(self, token: Token | str) -> None:
        """Apply a keypad ``token`` to the session."""

        resolved = token if isinstance(token, Token) else parse_token(token)
        if resolved is None:
            raise InvalidTokenError(f"Unknown calculator token '{token}'.")
        if resolved is Token.CLEAR:
            self.clear()
        elif resolved is Token.TOGGLE_SIGN:
            self.toggle_sign()
        elif resolved is Token.PERCENT:
            self.percentage()
        elif resolved is Token.BACKSPACE:
            self.backspace()
        elif resolved is Token.EQUALS:
            self.equals()
        elif resolved.is_operator:
            self.input_operator(Operator(resolved.value))
        elif resolved.is_digit_entry:
            self.input_digit(resolved.value)


__all__ = ["CalculatorSession", "INITIAL_INPUT", "InvalidTokenError"]
