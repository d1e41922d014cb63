"""Shared formatting for CLI output."""

from decimal import Decimal

from ledgerimport.domain.entities import Direction


def format_signed_amount(amount: Decimal, direction: Direction) -> str:
    """Render a magnitude with a minus sign for outflows."""
    sign = "-" if direction == Direction.OUTFLOW else ""
    return f"{sign}{amount:.2f}"


def format_category(category_id: int | None) -> str:
    return "Uncategorized" if category_id is None else f"#{category_id}"
