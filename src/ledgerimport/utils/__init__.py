"""Utility functions for ledgerimport."""

from ledgerimport.utils.date_parser import parse_date, parse_compact_date
from ledgerimport.utils.amount_parser import parse_amount, round_to_cents

__all__ = ["parse_date", "parse_compact_date", "parse_amount", "round_to_cents"]
