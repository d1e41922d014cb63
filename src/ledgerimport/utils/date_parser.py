"""Date parsing utilities."""

from datetime import date, timedelta
import re

from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a user-supplied date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024", ...) and the
    relative words "today" and "yesterday".

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_compact_date(date_str: str) -> date:
    """Parse an 8-digit ``YYYYMMDD`` statement date.

    Args:
        date_str: Exactly eight digits

    Returns:
        Date object

    Raises:
        ValueError: If the string is not eight digits or not a real date
    """
    if not re.fullmatch(r"\d{8}", date_str):
        raise ValueError(f"Expected YYYYMMDD date, got '{date_str}'")

    iso = f"{date_str[0:4]}-{date_str[4:6]}-{date_str[6:8]}"
    try:
        return date.fromisoformat(iso)
    except ValueError as e:
        raise ValueError(f"Invalid date '{date_str}': {e}")
