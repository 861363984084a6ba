"""Store layer - state ownership and persistence for the application.

This module re-exports the public store API for easy importing.
"""

from splitbook.store.categories import CategoryStore
from splitbook.store.ledger import LedgerStore
from splitbook.store.persistence import (
    load_categories,
    load_expenses,
    save_categories,
    save_expenses,
)
from splitbook.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Persistence
    "load_categories",
    "load_expenses",
    "save_categories",
    "save_expenses",
    # Stores
    "CategoryStore",
    "LedgerStore",
]
