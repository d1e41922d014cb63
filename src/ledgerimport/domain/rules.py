"""Keyword rule evaluation for parsed statement records.

Pure functions: the outcome depends only on the ordered rule list, the
record and the target account. The first applicable rule wins.
"""

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ledgerimport.domain.entities import CategorizationRule, RawRecord


def rule_applies(rule: CategorizationRule, record: RawRecord, account_id: int) -> bool:
    """Check whether a single rule matches a record for the target account."""
    if rule.direction != record.direction:
        return False
    if not rule.is_global and rule.account_id != account_id:
        return False
    keyword = rule.keyword.strip().lower()
    if not keyword:
        return False
    return keyword in record.description.lower()


def match_rule(
    rules: Iterable[CategorizationRule], record: RawRecord, account_id: int
) -> Optional[CategorizationRule]:
    """Return the first rule that applies to the record, or None.

    Args:
        rules: Rules in evaluation order
        record: Parsed record to categorize
        account_id: Account the statement is imported into

    Returns:
        Winning rule, or None if no rule applies
    """
    for rule in rules:
        if rule_applies(rule, record, account_id):
            return rule
    return None


def categorize_record(
    record: RawRecord, rules: Sequence[CategorizationRule], account_id: int
) -> RawRecord:
    """Return a copy of the record with category and reconciled flag set."""
    rule = match_rule(rules, record, account_id)
    if rule is None:
        return replace(record, category_id=None, reconciled=False)
    return replace(record, category_id=rule.category_id, reconciled=True)


def categorize_records(
    records: Iterable[RawRecord], rules: Sequence[CategorizationRule], account_id: int
) -> list[RawRecord]:
    """Categorize records, preserving their order.

    Args:
        records: Parsed records
        rules: Rules in evaluation order
        account_id: Account the statement is imported into

    Returns:
        New list of categorized records
    """
    return [categorize_record(record, rules, account_id) for record in records]
