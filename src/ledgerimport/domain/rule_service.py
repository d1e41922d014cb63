"""Categorization rule domain service."""

import logging
from typing import Optional

from ledgerimport.database.base import Database
from ledgerimport.domain.entities import CategorizationRule, Direction
from ledgerimport.domain.errors import NotFoundError, ValidationError, rule_not_found

logger = logging.getLogger(__name__)


class RuleService:
    """Service for managing keyword categorization rules."""

    def __init__(self, db: Database):
        """Initialize rule service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_rule(
        self,
        keyword: str,
        direction: Direction | str,
        category_id: int,
        account_id: Optional[int] = None,
    ) -> int:
        """Create a rule at the end of the evaluation order.

        Args:
            keyword: Text searched for (case-insensitive) in record descriptions
            direction: Direction the rule applies to ("inflow" or "outflow")
            category_id: Category assigned on match
            account_id: Optional account scope; None makes the rule global

        Returns:
            Rule ID

        Raises:
            ValidationError: If keyword is blank or direction is unknown
        """
        keyword = (keyword or "").strip()
        if not keyword:
            raise ValidationError("Rule keyword cannot be empty")

        try:
            direction = Direction(direction)
        except ValueError:
            raise ValidationError(
                f"Invalid direction '{direction}'. Must be one of: "
                f"{', '.join(d.value for d in Direction)}"
            )

        rule_id = self.db.create_rule(
            keyword=keyword,
            direction=direction,
            category_id=category_id,
            account_id=account_id,
        )
        logger.info("Created rule %d for keyword '%s'", rule_id, keyword)
        return rule_id

    def get_rule(self, rule_id: int) -> Optional[CategorizationRule]:
        """Get rule by ID.

        Args:
            rule_id: Rule ID

        Returns:
            Rule entity or None if not found
        """
        return self.db.get_rule(rule_id)

    def list_rules(self, account_id: Optional[int] = None) -> list[CategorizationRule]:
        """List rules in evaluation order.

        Args:
            account_id: If given, only rules that can apply to this account
                (global rules and rules scoped to it)

        Returns:
            List of rule entities
        """
        rules = self.db.list_rules()
        if account_id is None:
            return rules
        return [rule for rule in rules if rule.is_global or rule.account_id == account_id]

    def delete_rule(self, rule_id: int) -> None:
        """Delete a rule.

        Raises:
            NotFoundError: If rule doesn't exist
        """
        if self.db.get_rule(rule_id) is None:
            raise NotFoundError(rule_not_found(rule_id))

        self.db.delete_rule(rule_id)
        logger.info("Deleted rule %d", rule_id)
