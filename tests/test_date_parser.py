"""Tests for date parsing utilities."""

import pytest
from datetime import date, timedelta
from ledgerimport.utils.date_parser import parse_date, parse_compact_date


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2024-01-15")
    assert result == date(2024, 1, 15)


def test_parse_written_date():
    """Test parsing a written-out date."""
    result = parse_date("January 15, 2024")
    assert result == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    result = parse_date("today")
    assert result == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    result = parse_date(" Yesterday ")
    assert result == date.today() - timedelta(days=1)


def test_parse_invalid_date():
    """Test that garbage raises ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_parse_compact_date():
    """Test parsing YYYYMMDD statement dates."""
    assert parse_compact_date("20240105") == date(2024, 1, 5)
    assert parse_compact_date("20240229") == date(2024, 2, 29)


def test_parse_compact_date_impossible_day():
    """Test that a well-shaped but impossible date is rejected."""
    with pytest.raises(ValueError, match="Invalid date '20230229'"):
        parse_compact_date("20230229")


@pytest.mark.parametrize("value", ["2024015", "2024-01-05", "202401051", ""])
def test_parse_compact_date_wrong_shape(value):
    """Test that anything but eight digits is rejected."""
    with pytest.raises(ValueError, match="Expected YYYYMMDD"):
        parse_compact_date(value)
