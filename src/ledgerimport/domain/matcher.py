"""Duplicate detection between statement records and the existing ledger."""

from typing import Sequence

from ledgerimport.domain.entities import ConflictPair, LedgerEntry, MatchResult, RawRecord


def is_probable_duplicate(existing: LedgerEntry, candidate: RawRecord) -> bool:
    """Same date, same absolute amount and same direction.

    Descriptions are not compared: banks rewrite memo text between exports,
    so two distinct transactions sharing these three fields are offered as a
    conflict for the caller to decide.
    """
    return (
        existing.date == candidate.date
        and abs(existing.amount) == abs(candidate.amount)
        and existing.direction == candidate.direction
    )


def match_duplicates(
    candidates: Sequence[RawRecord], existing: Sequence[LedgerEntry]
) -> MatchResult:
    """Pair candidates with existing entries, consuming each entry at most once.

    Candidates are visited in order and each takes the first still-available
    equal entry, so N identical existing entries and N identical candidates
    produce N conflict pairs. Neither input sequence is modified.

    Args:
        candidates: Categorized statement records in statement order
        existing: Ledger entries of the target account

    Returns:
        MatchResult with clean records and conflict pairs, both in candidate order
    """
    consumed: set[int] = set()
    clean: list[RawRecord] = []
    conflicts: list[ConflictPair] = []

    for key, candidate in enumerate(candidates):
        match_index = next(
            (
                index
                for index, entry in enumerate(existing)
                if index not in consumed and is_probable_duplicate(entry, candidate)
            ),
            None,
        )
        if match_index is None:
            clean.append(candidate)
            continue

        consumed.add(match_index)
        conflicts.append(
            ConflictPair(key=key, existing=existing[match_index], candidate=candidate)
        )

    return MatchResult(clean=clean, conflicts=conflicts)
