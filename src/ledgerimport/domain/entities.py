"""Domain model entities for ledgerimport.

These are pure data classes representing business concepts, independent of
database schema. Parsed statement records and matcher output live here next
to the persisted entities so every layer speaks the same types.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class Direction(str, Enum):
    """Polarity of a monetary amount."""

    INFLOW = "inflow"
    OUTFLOW = "outflow"

    @classmethod
    def from_amount(cls, amount: Decimal) -> "Direction":
        """Negative amounts are outflows, zero and positive are inflows."""
        return cls.OUTFLOW if amount < 0 else cls.INFLOW


class ConflictDecision(str, Enum):
    """How a detected duplicate should be resolved at commit time."""

    KEEP_EXISTING = "keep_existing"
    REPLACE_WITH_NEW = "replace_with_new"


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range. Either bound may be open."""

    start: Optional[date] = None
    end: Optional[date] = None

    def contains(self, value: date) -> bool:
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True


@dataclass(frozen=True)
class RawRecord:
    """Transaction candidate parsed from a statement, not yet persisted.

    ``amount`` is always the non-negative magnitude; the sign lives in
    ``direction``. A record without a matching rule keeps
    ``category_id=None`` and ``reconciled=False``.
    """

    date: date
    description: str
    amount: Decimal
    direction: Direction
    category_id: Optional[int] = None
    reconciled: bool = False

    @property
    def is_uncategorized(self) -> bool:
        return self.category_id is None


@dataclass(frozen=True)
class CategorizationRule:
    """Keyword rule assigning a category to matching records.

    ``account_id=None`` means the rule applies to every account.
    """

    id: int
    keyword: str
    direction: Direction
    category_id: int
    account_id: Optional[int]
    created_at: datetime

    @property
    def is_global(self) -> bool:
        return self.account_id is None


@dataclass(frozen=True)
class LedgerEntry:
    """Persisted ledger entry domain entity."""

    id: int
    account_id: int
    date: date
    amount: Decimal
    direction: Direction
    description: Optional[str]
    category_id: Optional[int]
    reconciled: bool
    import_batch_id: Optional[int]
    created_at: datetime


@dataclass(frozen=True)
class ImportBatch:
    """One completed statement import, owning its ledger entries."""

    id: int
    filename: str
    account_id: int
    record_count: int
    source_text: str
    created_at: datetime


@dataclass(frozen=True)
class ImportMetadata:
    """Caller-supplied details stored on the import batch."""

    filename: str
    account_id: int
    source_text: str


@dataclass(frozen=True)
class ConflictPair:
    """Existing ledger entry judged a probable duplicate of a candidate.

    ``key`` is the candidate's position in the categorized record list and
    identifies the pair for the conflict resolver.
    """

    key: int
    existing: LedgerEntry
    candidate: RawRecord


@dataclass(frozen=True)
class ParseResult:
    """Records extracted from a statement plus non-fatal parse accounting."""

    records: list[RawRecord]
    ignored_count: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)


@dataclass(frozen=True)
class MatchResult:
    """Duplicate matcher output, both lists in candidate order."""

    clean: list[RawRecord]
    conflicts: list[ConflictPair]


@dataclass(frozen=True)
class ImportPreview:
    """Result of parsing and matching a statement, before any commit."""

    clean: list[RawRecord]
    conflicts: list[ConflictPair]
    ignored_count: int
    parse_errors: list[str] = field(default_factory=list)

    @property
    def parse_error_count(self) -> int:
        return len(self.parse_errors)


@dataclass(frozen=True)
class CommitResult:
    """Outcome of committing an import.

    ``import_batch_id`` is None when nothing was inserted.
    """

    import_batch_id: Optional[int]
    inserted: int
    removed: int
    ignored: int
    kept: int

    @property
    def is_noop(self) -> bool:
        return self.inserted == 0 and self.removed == 0


@dataclass(frozen=True)
class DeleteBatchResult:
    """Outcome of reverting an import batch."""

    batch_id: int
    removed_entry_count: int
    found: bool
