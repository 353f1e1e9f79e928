import pytest

from plugins.calculator.core import KEY_MAP, Token, map_key, parse_token


def test_number_keys_map_to_digits():
    for digit in "0123456789":
        assert map_key(digit).value == digit


def test_operator_keys():
    assert map_key("+") is Token.ADD
    assert map_key("-") is Token.SUBTRACT
    assert map_key("*") is Token.MULTIPLY
    assert map_key("x") is Token.MULTIPLY
    assert map_key("X") is Token.MULTIPLY
    assert map_key("/") is Token.DIVIDE


def test_comma_maps_to_decimal_point():
    assert map_key(",") is Token.DECIMAL
    assert map_key(".") is Token.DECIMAL


@pytest.mark.parametrize("key", ["Enter", "="])
def test_equals_keys(key):
    assert map_key(key) is Token.EQUALS


@pytest.mark.parametrize("key", ["Escape", "c", "C", "Delete"])
def test_clear_keys(key):
    assert map_key(key) is Token.CLEAR


def test_backspace_and_percent():
    assert map_key("Backspace") is Token.BACKSPACE
    assert map_key("%") is Token.PERCENT


@pytest.mark.parametrize("key", ["a", "F1", " ", "Shift", "±"])
def test_unmapped_keys_are_ignored(key):
    assert map_key(key) is None


def test_key_map_is_read_only():
    with pytest.raises(TypeError):
        KEY_MAP["q"] = Token.CLEAR  # type: ignore[index]


def test_parse_token_uses_button_labels():
    assert parse_token("±") is Token.TOGGLE_SIGN
    assert parse_token("÷") is Token.DIVIDE
    assert parse_token("Backspace") is Token.BACKSPACE
    assert parse_token("Enter") is None
    assert Token.DIGIT_7.is_digit_entry
    assert Token.DECIMAL.is_digit_entry
    assert Token.MULTIPLY.is_operator
    assert not Token.EQUALS.is_operator
