"""Abstract ledger interfaces."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from finsight.domain.entities import (
    Budget,
    Category,
    LedgerEntry,
    Transaction,
    TransactionKind,
)


class LedgerLoader(ABC):
    """Read-only snapshot source consumed by the insights engine."""

    @abstractmethod
    def load_window(
        self, user_id: str, from_date: date, to_date: date
    ) -> list[LedgerEntry]:
        """Load a user's transactions in [from_date, to_date] with their categories.

        Entries are ordered by date descending, then by ID descending.
        """
        pass

    @abstractmethod
    def load_current_budgets(self, user_id: str, period: str) -> list[Budget]:
        """Load a user's budgets for a "YYYY-MM" period."""
        pass


class Database(LedgerLoader):
    """Abstract database interface for finsight."""

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

    # Category operations
    @abstractmethod
    def create_category(self, user_id: str, name: str, kind: TransactionKind) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, user_id: str, name: str) -> Optional[Category]:
        """Get a user's category by name."""
        pass

    @abstractmethod
    def list_categories(self, user_id: str) -> list[Category]:
        """List a user's categories ordered by name."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        user_id: str,
        amount: int,
        kind: TransactionKind,
        date: date,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List a user's transactions with optional filters, newest first."""
        pass

    # Budget operations
    @abstractmethod
    def create_budget(
        self,
        user_id: str,
        name: str,
        amount: int,
        period: str,
        category_id: Optional[int] = None,
    ) -> int:
        """Create a budget. Returns budget ID."""
        pass

    @abstractmethod
    def get_budget(self, budget_id: int) -> Optional[Budget]:
        """Get budget by ID."""
        pass

    @abstractmethod
    def find_budget(
        self, user_id: str, period: str, category_id: Optional[int]
    ) -> Optional[Budget]:
        """Get the budget for a (category, period) combination, if any."""
        pass

    @abstractmethod
    def update_budget(
        self, budget_id: int, amount: int, name: Optional[str] = None
    ) -> None:
        """Update a budget's amount, and its name when one is given."""
        pass
