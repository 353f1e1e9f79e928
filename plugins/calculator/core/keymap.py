"""Keypad vocabulary and the keyboard shortcut table."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Token(str, Enum):
    """Every input the calculator understands, valued by its button label."""

    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"
    DECIMAL = "."
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    EQUALS = "="
    CLEAR = "C"
    TOGGLE_SIGN = "±"
    PERCENT = "%"
    BACKSPACE = "Backspace"

    @property
    def is_digit_entry(self) -> bool:
        return self.value.isdigit() or self is Token.DECIMAL

    @property
    def is_operator(self) -> bool:
        return self in _OPERATORS


_OPERATORS = frozenset({Token.ADD, Token.SUBTRACT, Token.MULTIPLY, Token.DIVIDE})

KEY_MAP: Mapping[str, Token] = MappingProxyType(
    {
        **{str(digit): Token(str(digit)) for digit in range(10)},
        ".": Token.DECIMAL,
        ",": Token.DECIMAL,
        "+": Token.ADD,
        "-": Token.SUBTRACT,
        "*": Token.MULTIPLY,
        "x": Token.MULTIPLY,
        "X": Token.MULTIPLY,
        "/": Token.DIVIDE,
        "Enter": Token.EQUALS,
        "=": Token.EQUALS,
        "Escape": Token.CLEAR,
        "c": Token.CLEAR,
        "C": Token.CLEAR,
        "Delete": Token.CLEAR,
        "%": Token.PERCENT,
        "Backspace": Token.BACKSPACE,
    }
)


def map_key(key: str) -> Token | None:
    """Translate a keyboard ``key`` identifier; ``None`` means ignore the key."""

    return KEY_MAP.get(key)


def parse_token(value: str) -> Token | None:
    """Return the token whose button label is ``value``."""

    try:
        return Token(value)
    except ValueError:
        return None


__all__ = ["KEY_MAP", "Token", "map_key", "parse_token"]
