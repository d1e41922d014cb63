"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, including the string storage of
``Direction`` values.
"""

from ledgerimport.domain import entities as domain
from ledgerimport.database.models import (
    CategorizationRule as ORMCategorizationRule,
    ImportBatch as ORMImportBatch,
    LedgerEntry as ORMLedgerEntry,
)


def rule_to_domain(orm_rule: ORMCategorizationRule) -> domain.CategorizationRule:
    """Convert SQLAlchemy CategorizationRule model to domain entity."""
    return domain.CategorizationRule(
        id=orm_rule.id,
        keyword=orm_rule.keyword,
        direction=domain.Direction(orm_rule.direction),
        category_id=orm_rule.category_id,
        account_id=orm_rule.account_id,
        created_at=orm_rule.created_at,
    )


def ledger_entry_to_domain(orm_entry: ORMLedgerEntry) -> domain.LedgerEntry:
    """Convert SQLAlchemy LedgerEntry model to domain LedgerEntry entity."""
    return domain.LedgerEntry(
        id=orm_entry.id,
        account_id=orm_entry.account_id,
        date=orm_entry.date,
        amount=orm_entry.amount,
        direction=domain.Direction(orm_entry.direction),
        description=orm_entry.description,
        category_id=orm_entry.category_id,
        reconciled=orm_entry.reconciled,
        import_batch_id=orm_entry.import_batch_id,
        created_at=orm_entry.created_at,
    )


def import_batch_to_domain(orm_batch: ORMImportBatch) -> domain.ImportBatch:
    """Convert SQLAlchemy ImportBatch model to domain ImportBatch entity."""
    return domain.ImportBatch(
        id=orm_batch.id,
        filename=orm_batch.filename,
        account_id=orm_batch.account_id,
        record_count=orm_batch.record_count,
        source_text=orm_batch.source_text,
        created_at=orm_batch.created_at,
    )
