"""Tests for Database interface returning domain models."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from ledgerimport.domain import entities
from ledgerimport.domain.errors import NotFoundError, PersistenceError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_rule_returns_domain_model(self, temp_db):
        """Test that get_rule returns a domain CategorizationRule entity."""
        rule_id = temp_db.create_rule(
            keyword="market", direction=entities.Direction.OUTFLOW, category_id=2, account_id=1
        )

        rule = temp_db.get_rule(rule_id)

        assert isinstance(rule, entities.CategorizationRule)
        assert rule.direction is entities.Direction.OUTFLOW
        assert rule.account_id == 1
        assert isinstance(rule.created_at, datetime)

    def test_get_ledger_entry_returns_domain_model(self, temp_db):
        """Test that get_ledger_entry returns a domain LedgerEntry entity."""
        entry_id = temp_db.create_ledger_entry(
            account_id=1,
            date=date(2024, 1, 5),
            amount=Decimal("120.00"),
            direction=entities.Direction.OUTFLOW,
            description="SUPERMERCADO CENTRAL",
        )

        entry = temp_db.get_ledger_entry(entry_id)

        assert isinstance(entry, entities.LedgerEntry)
        assert entry.amount == Decimal("120.00")
        assert entry.date == date(2024, 1, 5)
        assert entry.import_batch_id is None
        assert entry.reconciled is False

    def test_get_import_batch_returns_domain_model(self, temp_db):
        """Test that get_import_batch returns a domain ImportBatch entity."""
        batch_id = temp_db.create_import_batch(
            filename="jan.ofx", account_id=1, record_count=0, source_text="<OFX>"
        )

        batch = temp_db.get_import_batch(batch_id)

        assert isinstance(batch, entities.ImportBatch)
        assert batch.source_text == "<OFX>"

    def test_missing_rows(self, temp_db):
        """Test lookups and deletes of unknown IDs."""
        assert temp_db.get_rule(1) is None
        assert temp_db.get_ledger_entry(1) is None
        assert temp_db.get_import_batch(1) is None
        with pytest.raises(NotFoundError):
            temp_db.delete_ledger_entry(1)
        with pytest.raises(NotFoundError):
            temp_db.delete_import_batch(1)

    def test_list_ledger_entries_filters(self, temp_db, add_entry):
        """Test filtering entries by account and batch."""
        batch_id = temp_db.create_import_batch("a.ofx", 1, 1, "")
        first = add_entry(date(2024, 1, 6), "1.00")
        second = add_entry(date(2024, 1, 5), "2.00", import_batch_id=batch_id)
        add_entry(date(2024, 1, 5), "3.00", account_id=2)

        assert [e.id for e in temp_db.list_ledger_entries(account_id=1)] == [second, first]
        assert [e.id for e in temp_db.list_ledger_entries(import_batch_id=batch_id)] == [second]

    def test_delete_ledger_entries_for_batch(self, temp_db, add_entry):
        """Test that only entries of the batch are removed."""
        batch_id = temp_db.create_import_batch("a.ofx", 1, 2, "")
        add_entry(date(2024, 1, 5), "1.00", import_batch_id=batch_id)
        add_entry(date(2024, 1, 5), "1.00", import_batch_id=batch_id)
        keep_id = add_entry(date(2024, 1, 5), "1.00")

        assert temp_db.delete_ledger_entries_for_batch(batch_id) == 2
        assert [e.id for e in temp_db.list_ledger_entries()] == [keep_id]


class TestTransaction:
    """Tests for grouped writes."""

    def test_commit_on_success(self, temp_db, add_entry):
        """Test that writes inside a transaction persist."""
        with temp_db.transaction():
            add_entry(date(2024, 1, 5), "1.00")
            add_entry(date(2024, 1, 6), "2.00")

        assert len(temp_db.list_ledger_entries()) == 2

    def test_rollback_on_error(self, temp_db, add_entry):
        """Test that an exception discards every write of the transaction."""
        add_entry(date(2024, 1, 1), "9.00")

        with pytest.raises(RuntimeError):
            with temp_db.transaction():
                add_entry(date(2024, 1, 5), "1.00")
                temp_db.create_import_batch("a.ofx", 1, 1, "")
                raise RuntimeError("boom")

        assert len(temp_db.list_ledger_entries()) == 1
        assert temp_db.list_import_batches() == []

    def test_nested_transaction_joins_outer(self, temp_db, add_entry):
        """Test that an inner block does not commit on its own."""
        with pytest.raises(RuntimeError):
            with temp_db.transaction():
                with temp_db.transaction():
                    add_entry(date(2024, 1, 5), "1.00")
                raise RuntimeError("boom")

        assert temp_db.list_ledger_entries() == []

    def test_storage_error_is_wrapped(self, temp_db, monkeypatch):
        """Test that SQLAlchemy errors surface as PersistenceError."""
        from sqlalchemy.exc import OperationalError

        def fail(*args, **kwargs):
            raise OperationalError("INSERT", {}, Exception("database is locked"))

        monkeypatch.setattr(temp_db, "create_import_batch", fail)

        with pytest.raises(PersistenceError, match="database is locked"):
            with temp_db.transaction():
                temp_db.create_import_batch("a.ofx", 1, 1, "")
