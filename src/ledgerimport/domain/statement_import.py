"""Statement import domain service.

An import runs in two caller-driven phases. ``parse_and_match`` reads the
statement, categorizes its records and pairs them with probable duplicates
already in the ledger, without writing anything. After the caller has
decided every conflict, ``commit`` applies the inserts and replacements in a
single transaction recorded as one import batch. ``delete_batch`` reverts a
batch by removing exactly the entries it created.
"""

import logging
import time
from typing import Callable, Mapping, Optional, Sequence

from ledgerimport.config import get_max_statement_bytes
from ledgerimport.database.base import Database
from ledgerimport.domain.entities import (
    CategorizationRule,
    CommitResult,
    ConflictDecision,
    ConflictPair,
    DateRange,
    DeleteBatchResult,
    ImportBatch,
    ImportMetadata,
    ImportPreview,
    RawRecord,
)
from ledgerimport.domain.errors import (
    CommitTimeoutError,
    ImportCancelledError,
    NotFoundError,
    PersistenceError,
    UnresolvedConflictError,
    ValidationError,
)
from ledgerimport.domain.matcher import match_duplicates
from ledgerimport.domain.rules import categorize_records
from ledgerimport.domain.statement_parser import parse_statement

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
CancelCheck = Callable[[], bool]


class StatementImportService:
    """Service for importing bank statements into the ledger."""

    def __init__(self, db: Database, max_statement_bytes: Optional[int] = None):
        """Initialize statement import service.

        Args:
            db: Database instance
            max_statement_bytes: Size ceiling for statement text. If None, read
                from configuration when a statement is parsed.
        """
        self.db = db
        self.max_statement_bytes = max_statement_bytes

    def parse_and_match(
        self,
        raw_text: str,
        account_id: int,
        rules: Sequence[CategorizationRule],
        date_range: Optional[DateRange] = None,
    ) -> ImportPreview:
        """Parse a statement and detect duplicates against the account's ledger.

        Nothing is written. Rules are evaluated in the order given.

        Args:
            raw_text: Statement text
            account_id: Account the statement belongs to
            rules: Categorization rules in evaluation order
            date_range: Optional inclusive date filter

        Returns:
            ImportPreview with clean records, conflict pairs and parse accounting

        Raises:
            ValidationError: If date_range starts after it ends
            OversizeError: If the statement exceeds the size ceiling
            EmptyResultError: If no record survives parsing and filtering
        """
        if (
            date_range is not None
            and date_range.start is not None
            and date_range.end is not None
            and date_range.start > date_range.end
        ):
            raise ValidationError(
                f"Start date {date_range.start} is after end date {date_range.end}"
            )

        max_bytes = self.max_statement_bytes
        if max_bytes is None:
            max_bytes = get_max_statement_bytes()

        parsed = parse_statement(raw_text, date_range=date_range, max_bytes=max_bytes)
        candidates = categorize_records(parsed.records, rules, account_id)
        existing = self.db.list_ledger_entries(account_id=account_id)
        matched = match_duplicates(candidates, existing)

        logger.info(
            "Statement for account %d: %d clean, %d conflicts, %d ignored, %d parse errors",
            account_id,
            len(matched.clean),
            len(matched.conflicts),
            parsed.ignored_count,
            parsed.error_count,
        )
        return ImportPreview(
            clean=matched.clean,
            conflicts=matched.conflicts,
            ignored_count=parsed.ignored_count,
            parse_errors=parsed.errors,
        )

    def commit(
        self,
        clean: Sequence[RawRecord],
        conflicts: Sequence[ConflictPair],
        decisions: Mapping[int, ConflictDecision],
        metadata: ImportMetadata,
        *,
        ignored_count: int = 0,
        progress: Optional[ProgressCallback] = None,
        should_cancel: Optional[CancelCheck] = None,
        timeout: Optional[float] = None,
    ) -> CommitResult:
        """Apply an import atomically.

        Clean records and the candidates of pairs decided ``REPLACE_WITH_NEW``
        are inserted under one new import batch; the existing entries of those
        pairs are removed. Either everything is applied or nothing is.

        Args:
            clean: Records without a probable duplicate
            conflicts: Conflict pairs from ``parse_and_match``
            decisions: Decision for every conflict pair, keyed by pair key
            metadata: Filename, account and raw text stored on the batch
            ignored_count: Records the parser filtered out, echoed in the result
            progress: Called with (inserted so far, total) after each insert
            should_cancel: Polled before deletes start; True aborts the commit
            timeout: Seconds allowed for the write phase

        Returns:
            CommitResult; ``import_batch_id`` is None when nothing changed

        Raises:
            UnresolvedConflictError: If a conflict pair has no decision
            ValidationError: If a decision is not a ConflictDecision
            ImportCancelledError: If cancelled before the delete phase
            PersistenceError: If writing failed; nothing was applied
        """
        self._check_decisions(conflicts, decisions)

        replaced = [
            pair for pair in conflicts
            if decisions[pair.key] == ConflictDecision.REPLACE_WITH_NEW
        ]
        final_insert = list(clean) + [pair.candidate for pair in replaced]
        delete_ids = [pair.existing.id for pair in replaced]
        kept = len(conflicts) - len(replaced)

        if not final_insert and not delete_ids:
            logger.info("Nothing to import for '%s'", metadata.filename)
            return CommitResult(
                import_batch_id=None,
                inserted=0,
                removed=0,
                ignored=ignored_count,
                kept=kept,
            )

        self._check_cancelled(should_cancel)
        deadline = time.monotonic() + timeout if timeout is not None else None

        try:
            with self.db.transaction():
                batch_id = None
                if final_insert:
                    batch_id = self.db.create_import_batch(
                        filename=metadata.filename,
                        account_id=metadata.account_id,
                        record_count=len(final_insert),
                        source_text=metadata.source_text,
                    )

                # Last point where cancelling is allowed
                self._check_cancelled(should_cancel)

                for entry_id in delete_ids:
                    self._check_deadline(deadline)
                    try:
                        self.db.delete_ledger_entry(entry_id)
                    except NotFoundError as e:
                        raise PersistenceError(
                            f"Cannot replace ledger entry {entry_id}: {e}"
                        ) from e

                total = len(final_insert)
                for done, record in enumerate(final_insert, start=1):
                    self._check_deadline(deadline)
                    self.db.create_ledger_entry(
                        account_id=metadata.account_id,
                        date=record.date,
                        amount=record.amount,
                        direction=record.direction,
                        description=record.description,
                        category_id=record.category_id,
                        reconciled=record.reconciled,
                        import_batch_id=batch_id,
                    )
                    if progress is not None:
                        progress(done, total)
        except ImportCancelledError:
            logger.info("Import of '%s' cancelled, nothing written", metadata.filename)
            raise
        except PersistenceError as e:
            logger.warning("Import of '%s' rolled back: %s", metadata.filename, e)
            raise

        logger.info(
            "Imported '%s' as batch %s: %d inserted, %d removed, %d kept",
            metadata.filename,
            batch_id,
            len(final_insert),
            len(delete_ids),
            kept,
        )
        return CommitResult(
            import_batch_id=batch_id,
            inserted=len(final_insert),
            removed=len(delete_ids),
            ignored=ignored_count,
            kept=kept,
        )

    def delete_batch(self, batch_id: int) -> DeleteBatchResult:
        """Revert an import by deleting its entries and then the batch itself.

        Entries created by other batches or by hand are never touched, even
        when they share date and amount with the batch's entries.

        Args:
            batch_id: Import batch ID

        Returns:
            DeleteBatchResult; ``found`` is False for an unknown ID

        Raises:
            PersistenceError: If deletion failed; nothing was removed
        """
        if self.db.get_import_batch(batch_id) is None:
            logger.info("Import batch %d not found, nothing to delete", batch_id)
            return DeleteBatchResult(batch_id=batch_id, removed_entry_count=0, found=False)

        try:
            with self.db.transaction():
                removed = self.db.delete_ledger_entries_for_batch(batch_id)
                self.db.delete_import_batch(batch_id)
        except NotFoundError as e:
            raise PersistenceError(f"Cannot delete import batch {batch_id}: {e}") from e

        logger.info("Deleted import batch %d and %d entries", batch_id, removed)
        return DeleteBatchResult(batch_id=batch_id, removed_entry_count=removed, found=True)

    def get_batch(self, batch_id: int) -> Optional[ImportBatch]:
        """Get import batch by ID.

        Args:
            batch_id: Import batch ID

        Returns:
            Batch entity or None if not found
        """
        return self.db.get_import_batch(batch_id)

    def list_batches(self, account_id: Optional[int] = None) -> list[ImportBatch]:
        """List import history, newest first.

        Args:
            account_id: Optional account ID to filter by

        Returns:
            List of batch entities
        """
        return self.db.list_import_batches(account_id=account_id)

    @staticmethod
    def _check_decisions(
        conflicts: Sequence[ConflictPair], decisions: Mapping[int, ConflictDecision]
    ) -> None:
        missing = [pair.key for pair in conflicts if pair.key not in decisions]
        if missing:
            raise UnresolvedConflictError(
                f"No decision for conflict{'s' if len(missing) != 1 else ''} "
                f"{', '.join(str(key) for key in missing)}"
            )
        for pair in conflicts:
            if not isinstance(decisions[pair.key], ConflictDecision):
                raise ValidationError(
                    f"Invalid decision for conflict {pair.key}: {decisions[pair.key]!r}"
                )

    @staticmethod
    def _check_cancelled(should_cancel: Optional[CancelCheck]) -> None:
        if should_cancel is not None and should_cancel():
            raise ImportCancelledError("Import cancelled")

    @staticmethod
    def _check_deadline(deadline: Optional[float]) -> None:
        if deadline is not None and time.monotonic() > deadline:
            raise CommitTimeoutError("Import timed out, changes rolled back")
