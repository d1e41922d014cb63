"""In-memory staging of keep/replace decisions for detected duplicates."""

from typing import Iterable, Iterator

from ledgerimport.domain.entities import ConflictDecision, ConflictPair
from ledgerimport.domain.errors import NotFoundError, ValidationError, conflict_not_found


class ConflictResolver:
    """Holds one decision per conflict pair until the caller commits.

    Every pair starts as ``KEEP_EXISTING`` so forwarding an untouched
    resolver to commit never overwrites anything. The resolver performs no
    I/O; dropping it discards the session.
    """

    def __init__(self, conflicts: Iterable[ConflictPair]):
        """Initialize resolver.

        Args:
            conflicts: Conflict pairs from the duplicate matcher
        """
        self.pairs = list(conflicts)
        self._decisions: dict[int, ConflictDecision] = {
            pair.key: ConflictDecision.KEEP_EXISTING for pair in self.pairs
        }

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[tuple[ConflictPair, ConflictDecision]]:
        for pair in self.pairs:
            yield pair, self._decisions[pair.key]

    def get(self, key: int) -> ConflictDecision:
        """Get the decision for a pair.

        Raises:
            NotFoundError: If no pair has this key
        """
        if key not in self._decisions:
            raise NotFoundError(conflict_not_found(key))
        return self._decisions[key]

    def set(self, key: int, decision: ConflictDecision) -> None:
        """Set the decision for a pair.

        Raises:
            NotFoundError: If no pair has this key
            ValidationError: If decision is not a ConflictDecision
        """
        self._check_decision(decision)
        if key not in self._decisions:
            raise NotFoundError(conflict_not_found(key))
        self._decisions[key] = decision

    def set_all(self, decision: ConflictDecision) -> None:
        """Apply the same decision to every pair."""
        self._check_decision(decision)
        for key in self._decisions:
            self._decisions[key] = decision

    def count(self, decision: ConflictDecision) -> int:
        """Number of pairs currently holding the given decision."""
        return sum(1 for value in self._decisions.values() if value == decision)

    @property
    def decisions(self) -> dict[int, ConflictDecision]:
        """Snapshot of all decisions keyed by pair key."""
        return dict(self._decisions)

    @staticmethod
    def _check_decision(decision: object) -> None:
        if not isinstance(decision, ConflictDecision):
            raise ValidationError(f"Invalid conflict decision: {decision!r}")
