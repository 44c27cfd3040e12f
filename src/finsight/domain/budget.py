"""Budget domain service."""

from typing import Optional
from finsight.database.base import Database
from finsight.domain.entities import Budget
from finsight.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    invalid_period,
)
from finsight.utils.date_parser import parse_period


class BudgetService:
    """Service for managing monthly budgets."""

    def __init__(self, db: Database, user_id: str):
        """Initialize budget service.

        Args:
            db: Database instance
            user_id: Owner of the budgets
        """
        self.db = db
        self.user_id = user_id

    def set_budget(
        self,
        amount: int,
        period: str,
        category_id: Optional[int] = None,
        name: Optional[str] = None,
    ) -> int:
        """Create or update the budget for a category and period.

        At most one budget exists per (category, period); setting it again
        replaces the amount, and the name when one is given.

        Args:
            amount: Budget amount in cents, positive
            period: "YYYY-MM" period
            category_id: Category ID, or None for all categories
            name: Display name; defaults to the category name or "Overall"

        Returns:
            Budget ID

        Raises:
            ValidationError: If amount or period is invalid
            NotFoundError: If the category doesn't exist for this user
        """
        if amount <= 0:
            raise ValidationError("Budget amount must be positive")
        try:
            period = parse_period(period)
        except ValueError:
            raise ValidationError(invalid_period(period))

        category_name = None
        if category_id is not None:
            category = self.db.get_category(category_id)
            if category is None or category.user_id != self.user_id:
                raise NotFoundError(category_not_found(category_id))
            category_name = category.name

        existing = self.db.find_budget(self.user_id, period, category_id)
        if existing is not None:
            self.db.update_budget(existing.id, amount, name=name or None)
            return existing.id

        return self.db.create_budget(
            user_id=self.user_id,
            name=name or category_name or "Overall",
            amount=amount,
            period=period,
            category_id=category_id,
        )

    def get_budget(self, budget_id: int) -> Optional[Budget]:
        """Get budget by ID."""
        return self.db.get_budget(budget_id)

    def list_budgets(self, period: str) -> list[Budget]:
        """List the user's budgets for a period."""
        return self.db.load_current_budgets(self.user_id, parse_period(period))
