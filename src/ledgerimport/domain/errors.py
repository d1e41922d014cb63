"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ParseError(DomainError):
    """A single statement block could not be parsed.

    Never fatal on its own: the parser records the message and moves on.
    """


class EmptyResultError(DomainError):
    """No records survived parsing and date filtering."""

    def __init__(self, message: str, ignored_count: int = 0, error_count: int = 0):
        super().__init__(message)
        self.ignored_count = ignored_count
        self.error_count = error_count


class OversizeError(ValidationError):
    """Statement text exceeds the configured size ceiling."""

    def __init__(self, size: int, limit: int):
        super().__init__(statement_too_large(size, limit))
        self.size = size
        self.limit = limit


class UnresolvedConflictError(ValidationError):
    """A conflict pair reached commit without a decision."""


class PersistenceError(DomainError):
    """Storage failure during commit or batch deletion; nothing was applied."""


class CommitTimeoutError(PersistenceError):
    """Commit ran past the caller's timeout and was rolled back."""


class ImportCancelledError(DomainError):
    """Commit was cancelled before the delete phase started."""


def rule_not_found(rule_id: int) -> str:
    """Return message for missing categorization rule."""
    return f"Rule {rule_id} not found"


def ledger_entry_not_found(entry_id: int) -> str:
    """Return message for missing ledger entry."""
    return f"Ledger entry {entry_id} not found"


def import_batch_not_found(batch_id: int) -> str:
    """Return message for missing import batch."""
    return f"Import batch {batch_id} not found"


def conflict_not_found(key: int) -> str:
    """Return message for an unknown conflict pair key."""
    return f"Conflict {key} not found"


def statement_too_large(size: int, limit: int) -> str:
    """Return message when statement text exceeds the size ceiling."""
    return f"Statement is {size} bytes, larger than the {limit} byte limit"


def no_records_found(ignored_count: int, error_count: int) -> str:
    """Return message when nothing survived parsing and filtering."""
    parts = []
    if ignored_count > 0:
        parts.append(f"{ignored_count} outside the date range")
    if error_count > 0:
        parts.append(f"{error_count} unreadable block{'s' if error_count != 1 else ''}")
    detail = f" ({', '.join(parts)})" if parts else ""
    return f"No transactions found in statement{detail}"
