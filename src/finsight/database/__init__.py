"""Database layer for finsight application."""

from finsight.database.base import Database, LedgerLoader
from finsight.database.factories import create_sqlite_database

__all__ = ["Database", "LedgerLoader", "create_sqlite_database"]
