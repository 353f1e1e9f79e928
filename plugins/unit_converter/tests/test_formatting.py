import math

import pytest

from plugins.unit_converter.core import byte_size, limit_output_size, validate_and_limit_input


def test_byte_size_counts_utf8_bytes():
    assert byte_size("") == 0
    assert byte_size("123") == 3
    assert byte_size("°") == 2
    assert byte_size("m³") == 3


@pytest.mark.parametrize("value", [math.nan, None, "12", True])
def test_limit_output_size_blank_for_non_numbers(value):
    assert limit_output_size(value) == ""


def test_short_values_render_unchanged():
    assert limit_output_size(0) == "0"
    assert limit_output_size(42) == "42"
    assert limit_output_size(3.14) == "3.14"
    assert limit_output_size(-0.5) == "-0.5"


def test_precision_is_reduced_to_fit():
    assert limit_output_size(3.14159265358979) == "3.141593"
    assert limit_output_size(1234.5678, max_bytes=4) == "1235"


def test_falls_back_to_exponential_notation():
    assert limit_output_size(123456789012345) == "1.23e+14"
    assert limit_output_size(-123456789.5) == "-1.23e+8"


def test_tiny_values_collapse_to_zero():
    assert limit_output_size(1.2345e-300) == "0"
    assert limit_output_size(-1.5e-300) == "0"


def test_hard_truncation_is_last_resort():
    result = limit_output_size(-1.5e300)
    assert result == "-1.50e+"
    assert len(result) == 7


@pytest.mark.parametrize(
    "value",
    [0.1 + 0.2, 1 / 3, 2 / 3 * 1e7, 98765.4321, -0.000123456, 1e21, 6.02214076e23, -9.99e99, math.pi],
)
def test_output_never_exceeds_budget(value):
    assert byte_size(limit_output_size(value)) <= 8


def test_invalid_budget_rejected():
    with pytest.raises(ValueError):
        limit_output_size(1.0, max_bytes=0)


@pytest.mark.parametrize("text", ["", "-", "."])
def test_partial_input_passes_through(text):
    assert validate_and_limit_input(text) == text


def test_input_is_trimmed_and_normalised():
    assert validate_and_limit_input("  42  ") == "42"
    assert validate_and_limit_input("12.50") == "12.5"
    assert validate_and_limit_input("1e3") == "1000"
    assert validate_and_limit_input("12abc") == "12"
    assert validate_and_limit_input(None) == ""


def test_long_input_is_shortened():
    assert validate_and_limit_input("3.14159265358979") == "3.141593"


def test_non_numeric_input_kept_only_within_budget():
    assert validate_and_limit_input("abc") == "abc"
    assert validate_and_limit_input("abcdefghij") == ""


def test_non_ascii_digits_are_not_reinterpreted():
    assert validate_and_limit_input("٣٣") == "٣٣"
    assert validate_and_limit_input("٣٣٣٣٣") == ""
