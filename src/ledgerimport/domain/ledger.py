"""Ledger entry domain service."""

from typing import Optional

from ledgerimport.database.base import Database
from ledgerimport.domain.entities import LedgerEntry


class LedgerService:
    """Read access to ledger entries."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_entry(self, entry_id: int) -> Optional[LedgerEntry]:
        """Get ledger entry by ID.

        Args:
            entry_id: Ledger entry ID

        Returns:
            Entry entity or None if not found
        """
        return self.db.get_ledger_entry(entry_id)

    def list_entries(
        self,
        account_id: Optional[int] = None,
        import_batch_id: Optional[int] = None,
    ) -> list[LedgerEntry]:
        """List ledger entries, oldest first.

        Args:
            account_id: Optional account ID filter
            import_batch_id: Optional import batch filter

        Returns:
            List of entry entities
        """
        return self.db.list_ledger_entries(
            account_id=account_id, import_batch_id=import_batch_id
        )
