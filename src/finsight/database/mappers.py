"""Mapper functions to convert between domain models and SQLAlchemy models.

Kinds are stored as plain strings and converted to ``TransactionKind`` here,
so the schema stays readable from plain SQL.
"""

from typing import Optional

from finsight.domain import entities as domain
from finsight.database.models import (
    Budget as ORMBudget,
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        user_id=orm_category.user_id,
        name=orm_category.name,
        kind=domain.TransactionKind(orm_category.kind),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        user_id=orm_transaction.user_id,
        amount=orm_transaction.amount,
        kind=domain.TransactionKind(orm_transaction.kind),
        date=orm_transaction.date,
        description=orm_transaction.description,
        category_id=orm_transaction.category_id,
    )


def budget_to_domain(orm_budget: ORMBudget) -> domain.Budget:
    """Convert SQLAlchemy Budget model to domain Budget entity."""
    return domain.Budget(
        id=orm_budget.id,
        user_id=orm_budget.user_id,
        name=orm_budget.name,
        category_id=orm_budget.category_id,
        amount=orm_budget.amount,
        period=orm_budget.month,
    )


def ledger_entry_to_domain(
    orm_transaction: ORMTransaction, orm_category: Optional[ORMCategory]
) -> domain.LedgerEntry:
    """Convert a transaction/category join row to a domain LedgerEntry."""
    return domain.LedgerEntry(
        transaction=transaction_to_domain(orm_transaction),
        category=category_to_domain(orm_category) if orm_category is not None else None,
    )
