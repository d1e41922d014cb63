"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

CENTS = Decimal("0.01")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a signed statement amount into an exact Decimal.

    Handles the formats banks put in amount tags:
    - "123.45"
    - "-123.45"
    - "+123.45"
    - "-123,45" (comma as decimal separator when there is no dot)
    - "1,234.56" (comma as thousands separator)

    A lone comma is always a decimal separator, so "1,234" reads as 1.234.
    Thousands separators without a decimal part are not supported.

    Args:
        amount_str: Amount string

    Returns:
        Signed Decimal amount, not rounded

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    if "," in amount_str and "." not in amount_str:
        amount_str = amount_str.replace(",", ".")
    else:
        amount_str = amount_str.replace(",", "")

    if not re.fullmatch(r"[-+]?(\d+(\.\d*)?|\.\d+)", amount_str):
        raise ValueError(f"Could not parse amount '{amount_str}'")

    try:
        return Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")


def round_to_cents(amount: Decimal) -> Decimal:
    """Round to two places, halves away from zero."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
