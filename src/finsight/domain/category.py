"""Category domain service."""

from typing import Optional
from finsight.database.base import Database
from finsight.domain.entities import Category, TransactionKind
from finsight.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_name_not_found,
    duplicate_category_name,
)


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database, user_id: str):
        """Initialize category service.

        Args:
            db: Database instance
            user_id: Owner of the categories
        """
        self.db = db
        self.user_id = user_id

    def create_category(
        self, name: str, kind: TransactionKind = TransactionKind.EXPENSE
    ) -> int:
        """Create a category.

        Args:
            name: Category name, unique per user
            kind: Whether the category holds income or expenses

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty
            ConflictError: If the user already has a category with this name
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        if self.db.get_category_by_name(self.user_id, name) is not None:
            raise ConflictError(duplicate_category_name(name))

        return self.db.create_category(self.user_id, name, TransactionKind(kind))

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        return self.db.get_category(category_id)

    def require_category_by_name(self, name: str) -> Category:
        """Get category by name.

        Raises:
            NotFoundError: If no category has this name
        """
        category = self.db.get_category_by_name(self.user_id, name)
        if category is None:
            raise NotFoundError(category_name_not_found(name))
        return category

    def list_categories(self) -> list[Category]:
        """List the user's categories ordered by name."""
        return self.db.list_categories(self.user_id)
