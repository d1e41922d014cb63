"""Tests for amount parsing utilities."""

import pytest
from decimal import Decimal
from ledgerimport.utils.amount_parser import parse_amount, round_to_cents


@pytest.mark.parametrize(
    "value,expected",
    [
        ("123.45", Decimal("123.45")),
        ("-120.00", Decimal("-120.00")),
        ("+7", Decimal("7.00")),
        ("-45.5", Decimal("-45.50")),
        ("-12,34", Decimal("-12.34")),
        ("1,234.56", Decimal("1234.56")),
        (" 0.00 ", Decimal("0.00")),
    ],
)
def test_parse_amount(value, expected):
    """Test the amount formats found in statement exports."""
    assert parse_amount(value) == expected


def test_parse_amount_keeps_precision():
    """Test that sub-cent digits and the sign survive parsing."""
    assert parse_amount("-10.005") == Decimal("-10.005")
    assert parse_amount("-0.004") < 0


def test_lone_comma_is_decimal_separator():
    """Test that a comma without a dot is read as the decimal point."""
    assert parse_amount("1,234") == Decimal("1.234")
    assert round_to_cents(parse_amount("1,234")) == Decimal("1.23")


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("10.005"), Decimal("10.01")),
        (Decimal("10.015"), Decimal("10.02")),
        (Decimal("0.004"), Decimal("0.00")),
        (Decimal("3.1"), Decimal("3.10")),
    ],
)
def test_round_to_cents(value, expected):
    """Test that halves round away from zero."""
    result = round_to_cents(value)

    assert result == expected
    assert result.as_tuple().exponent == -2


@pytest.mark.parametrize("value", ["", "   ", "abc", "1-2", "NaN", "Infinity", "--5"])
def test_parse_amount_invalid(value):
    """Test that malformed amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(value)
