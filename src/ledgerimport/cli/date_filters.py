"""CLI helpers for date range resolution."""

import click

from ledgerimport.cli.error_handling import fail
from ledgerimport.domain.entities import DateRange
from ledgerimport.utils.date_parser import parse_date


def resolve_cli_date_range(
    ctx: click.Context,
    *,
    start_date: str | None,
    end_date: str | None,
) -> DateRange | None:
    """Resolve --start-date/--end-date into an inclusive DateRange.

    Returns None when neither option is given.
    """
    start = None
    end = None

    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            fail(ctx, f"Invalid start date: {e}")

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            fail(ctx, f"Invalid end date: {e}")

    if start is None and end is None:
        return None

    if start is not None and end is not None and start > end:
        fail(ctx, f"Start date {start} is after end date {end}")

    return DateRange(start=start, end=end)
