"""Transaction domain service."""

from typing import Optional
from datetime import date
from finsight.database.base import Database
from finsight.domain.entities import Transaction, TransactionKind
from finsight.domain.errors import NotFoundError, ValidationError, category_not_found


class TransactionService:
    """Service for recording and listing transactions."""

    def __init__(self, db: Database, user_id: str):
        """Initialize transaction service.

        Args:
            db: Database instance
            user_id: Owner of the transactions
        """
        self.db = db
        self.user_id = user_id

    def create_transaction(
        self,
        amount: int,
        kind: TransactionKind,
        date: date,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> int:
        """Create a transaction.

        Args:
            amount: Amount in cents, non-negative
            kind: Income or expense
            date: Transaction date
            description: Optional description
            category_id: Optional category ID

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the amount is negative
            NotFoundError: If the category doesn't exist for this user
        """
        if amount < 0:
            raise ValidationError("Transaction amount must be non-negative")

        if category_id is not None:
            category = self.db.get_category(category_id)
            if category is None or category.user_id != self.user_id:
                raise NotFoundError(category_not_found(category_id))

        return self.db.create_transaction(
            user_id=self.user_id,
            amount=amount,
            kind=TransactionKind(kind),
            date=date,
            description=description,
            category_id=category_id,
        )

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get one of the user's transactions by ID."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None or txn.user_id != self.user_id:
            return None
        return txn

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List the user's transactions, newest first."""
        return self.db.list_transactions(
            self.user_id,
            start_date=start_date,
            end_date=end_date,
            category_id=category_id,
        )
