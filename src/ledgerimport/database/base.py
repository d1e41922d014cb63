"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerimport.domain.entities import (
    CategorizationRule,
    Direction,
    ImportBatch,
    LedgerEntry,
)


class Database(ABC):
    """Abstract database interface for ledgerimport."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Open one all-or-nothing write scope.

        Writes made inside the block are committed together when it exits
        normally and rolled back together when it raises. Outside a
        transaction every write commits on its own.
        """
        pass

    # Categorization rule operations
    @abstractmethod
    def create_rule(
        self,
        keyword: str,
        direction: Direction,
        category_id: int,
        account_id: Optional[int] = None,
    ) -> int:
        """Create a categorization rule. Returns rule ID."""
        pass

    @abstractmethod
    def get_rule(self, rule_id: int) -> Optional[CategorizationRule]:
        """Get rule by ID."""
        pass

    @abstractmethod
    def list_rules(self) -> list[CategorizationRule]:
        """List all rules in evaluation order (creation order)."""
        pass

    @abstractmethod
    def delete_rule(self, rule_id: int) -> None:
        """Delete a rule."""
        pass

    # Ledger entry operations
    @abstractmethod
    def create_ledger_entry(
        self,
        account_id: int,
        date: date,
        amount: Decimal,
        direction: Direction,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
        reconciled: bool = False,
        import_batch_id: Optional[int] = None,
    ) -> int:
        """Create a ledger entry. Returns entry ID."""
        pass

    @abstractmethod
    def get_ledger_entry(self, entry_id: int) -> Optional[LedgerEntry]:
        """Get ledger entry by ID."""
        pass

    @abstractmethod
    def list_ledger_entries(
        self,
        account_id: Optional[int] = None,
        import_batch_id: Optional[int] = None,
    ) -> list[LedgerEntry]:
        """List ledger entries with optional filters.

        Args:
            account_id: Optional account ID filter
            import_batch_id: Optional provenance filter
        """
        pass

    @abstractmethod
    def delete_ledger_entry(self, entry_id: int) -> None:
        """Delete a ledger entry."""
        pass

    @abstractmethod
    def delete_ledger_entries_for_batch(self, import_batch_id: int) -> int:
        """Delete every entry whose provenance is the given batch. Returns count."""
        pass

    # Import batch operations
    @abstractmethod
    def create_import_batch(
        self, filename: str, account_id: int, record_count: int, source_text: str
    ) -> int:
        """Create an import batch. Returns batch ID."""
        pass

    @abstractmethod
    def get_import_batch(self, batch_id: int) -> Optional[ImportBatch]:
        """Get import batch by ID."""
        pass

    @abstractmethod
    def list_import_batches(self, account_id: Optional[int] = None) -> list[ImportBatch]:
        """List import batches, newest first, optionally filtered by account."""
        pass

    @abstractmethod
    def delete_import_batch(self, batch_id: int) -> None:
        """Delete an import batch row."""
        pass
