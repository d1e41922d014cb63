"""Tests for domain entities."""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, date, UTC
from decimal import Decimal

from ledgerimport.domain.entities import (
    CommitResult,
    DateRange,
    Direction,
    ImportBatch,
    ParseResult,
    RawRecord,
)


class TestDirection:
    """Tests for Direction."""

    def test_from_amount(self):
        """Test that only negative amounts are outflows."""
        assert Direction.from_amount(Decimal("-0.01")) == Direction.OUTFLOW
        assert Direction.from_amount(Decimal("0.00")) == Direction.INFLOW
        assert Direction.from_amount(Decimal("12.00")) == Direction.INFLOW

    def test_string_values(self):
        """Test that directions compare equal to their stored strings."""
        assert Direction("inflow") == Direction.INFLOW
        assert Direction.OUTFLOW == "outflow"


class TestDateRange:
    """Tests for DateRange."""

    def test_inclusive_bounds(self):
        """Test that both bounds are inclusive."""
        date_range = DateRange(date(2024, 1, 1), date(2024, 1, 31))

        assert date_range.contains(date(2024, 1, 1))
        assert date_range.contains(date(2024, 1, 31))
        assert not date_range.contains(date(2023, 12, 31))
        assert not date_range.contains(date(2024, 2, 1))

    def test_open_range(self):
        """Test that a range without bounds contains everything."""
        assert DateRange().contains(date(1999, 1, 1))


class TestRawRecord:
    """Tests for RawRecord."""

    def test_defaults(self):
        """Test that a new record is uncategorized and unreconciled."""
        record = RawRecord(
            date=date(2024, 1, 5),
            description="COFFEE",
            amount=Decimal("3.50"),
            direction=Direction.OUTFLOW,
        )

        assert record.is_uncategorized
        assert record.reconciled is False

    def test_immutability(self):
        """Test that RawRecord entities are immutable."""
        record = RawRecord(
            date=date(2024, 1, 5),
            description="COFFEE",
            amount=Decimal("3.50"),
            direction=Direction.OUTFLOW,
        )
        with pytest.raises(FrozenInstanceError):
            record.category_id = 4


class TestResults:
    """Tests for result value objects."""

    def test_parse_result_error_count(self):
        """Test that error_count follows the error list."""
        assert ParseResult(records=[], errors=["Block 1: Missing MEMO"]).error_count == 1

    def test_commit_result_noop(self):
        """Test is_noop."""
        assert CommitResult(None, inserted=0, removed=0, ignored=3, kept=2).is_noop
        assert not CommitResult(1, inserted=1, removed=0, ignored=0, kept=0).is_noop

    def test_import_batch_equality(self):
        """Test ImportBatch entity equality."""
        created_at = datetime.now(UTC)
        batch1 = ImportBatch(1, "a.ofx", 1, 2, "text", created_at)
        batch2 = ImportBatch(1, "a.ofx", 1, 2, "text", created_at)

        assert batch1 == batch2
