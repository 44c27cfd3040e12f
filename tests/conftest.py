"""Shared pytest fixtures for finsight tests."""

import tempfile
import os
from itertools import count

import pytest

from finsight.database.factories import create_sqlite_database
from finsight.domain.budget import BudgetService
from finsight.domain.category import CategoryService
from finsight.domain.entities import (
    Budget,
    Category,
    LedgerEntry,
    Transaction,
    TransactionKind,
)
from finsight.domain.transaction import TransactionService

USER_ID = "alice"
CURRENT_PERIOD = "2024-06"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db, USER_ID)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db, USER_ID)


@pytest.fixture
def budget_service(temp_db):
    """Create a BudgetService with a temporary database."""
    return BudgetService(temp_db, USER_ID)


@pytest.fixture
def sample_categories(category_service):
    """Create a few categories and return their IDs by name."""
    return {
        name: category_service.create_category(name, kind)
        for name, kind in [
            ("Groceries", TransactionKind.EXPENSE),
            ("Dining", TransactionKind.EXPENSE),
            ("Transport", TransactionKind.EXPENSE),
            ("Salary", TransactionKind.INCOME),
        ]
    }


@pytest.fixture
def ledger():
    """Build in-memory ledger entries without a database.

    Returns a factory ``make(amount, when, category=None, kind="expense",
    description=None)``; categories are created on first use and reused by
    name.
    """
    ids = count(1)
    categories: dict[str, Category] = {}

    def category_for(name: str, kind: TransactionKind) -> Category:
        if name not in categories:
            categories[name] = Category(id=next(ids), user_id=USER_ID, name=name, kind=kind)
        return categories[name]

    def make(amount, when, category=None, kind=TransactionKind.EXPENSE, description=None):
        kind = TransactionKind(kind)
        cat = category_for(category, kind) if category is not None else None
        txn = Transaction(
            id=next(ids),
            user_id=USER_ID,
            amount=amount,
            kind=kind,
            date=when,
            description=description,
            category_id=cat.id if cat is not None else None,
        )
        return LedgerEntry(transaction=txn, category=cat)

    make.category = category_for
    return make


@pytest.fixture
def make_budget():
    """Build in-memory budgets."""
    ids = count(1)

    def make(amount, category_id=None, name="Budget", period=CURRENT_PERIOD):
        return Budget(
            id=next(ids),
            user_id=USER_ID,
            name=name,
            category_id=category_id,
            amount=amount,
            period=period,
        )

    return make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
