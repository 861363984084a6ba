"""Persistence adapter: the expense list stored as JSON under one key.

Loading never raises. A missing database, a missing key or malformed data all
load as an empty ledger. Saving always rewrites the whole list.
"""

import json
import logging
import sqlite3
from decimal import Decimal
from pathlib import Path
from typing import Any

from splitbook.domain.ledger import Expense
from splitbook.domain.models import CategoryName, ExpenseId, Money, PayerName
from splitbook.domain.validation import is_storable_amount
from splitbook.store.schema import get_db_path, init_database

logger = logging.getLogger(__name__)

EXPENSES_KEY = "expenses"
CATEGORIES_KEY = "categories"

# Field names used by the original browser app, accepted when loading
_LEGACY_FIELDS = {
    "description": "descricao",
    "amount": "valor",
    "payer": "quemPagou",
    "category": "categoria",
}


class DecodeError(ValueError):
    """Stored data could not be turned back into expenses."""


def read_value(key: str, db_path: Path | None = None) -> str | None:
    """Read the raw value stored under a key.

    Args:
        key: Storage key.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Stored text, or None if the key is absent.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    try:
        cursor = conn.cursor()
        cursor.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
        row = cursor.fetchone()
        return row[0] if row else None
    finally:
        conn.close()


def write_value(key: str, value: str, db_path: Path | None = None) -> None:
    """Store text under a key, replacing any previous value.

    Args:
        key: Storage key.
        value: Text to store.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    if db_path is None:
        db_path = get_db_path()
    init_database(db_path)

    conn = sqlite3.connect(db_path)
    try:
        conn.execute(
            """
            INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, datetime('now'))
            ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """,
            (key, value),
        )
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        conn.close()


def _field(record: dict[str, Any], name: str) -> Any:
    if name in record:
        return record[name]
    legacy = _LEGACY_FIELDS.get(name)
    if legacy and legacy in record:
        return record[legacy]
    raise DecodeError(f"missing field '{name}'")


def expense_to_record(expense: Expense) -> dict[str, Any]:
    """Convert an expense to a JSON-ready dictionary.

    Raises:
        ValueError: If the amount would not read back as the same value.
    """
    if not is_storable_amount(expense.amount):
        raise ValueError(f"amount {expense.amount} cannot be stored exactly")
    return {
        "id": expense.id,
        "description": expense.description,
        "amount": float(expense.amount),
        "payer": expense.payer,
        "category": expense.category,
    }


def expense_from_record(record: Any) -> Expense:
    """Convert a decoded JSON object to an expense.

    Accepts both the current field names and the original app's Portuguese ones.

    Args:
        record: Decoded JSON value.

    Returns:
        Expense built from the record.

    Raises:
        DecodeError: If the record is not a valid expense.
    """
    if not isinstance(record, dict):
        raise DecodeError("expense record is not an object")

    expense_id = record.get("id")
    if not isinstance(expense_id, int) or isinstance(expense_id, bool):
        raise DecodeError("expense id is not an integer")

    description = _field(record, "description")
    payer = _field(record, "payer")
    category = _field(record, "category")
    for name, value in (("description", description), ("payer", payer), ("category", category)):
        if not isinstance(value, str) or not value:
            raise DecodeError(f"'{name}' must be non-empty text")

    raw_amount = _field(record, "amount")
    if isinstance(raw_amount, bool) or not isinstance(raw_amount, (int, Decimal)):
        raise DecodeError("amount is not a number")
    amount = Decimal(raw_amount)
    if not amount.is_finite() or amount <= 0:
        raise DecodeError("amount must be positive")
    if not is_storable_amount(amount):
        raise DecodeError(f"amount {amount} is out of range")

    return Expense(
        id=ExpenseId(expense_id),
        description=description,
        amount=Money(amount),
        payer=PayerName(payer),
        category=CategoryName(category),
    )


def decode_expenses(text: str) -> list[Expense]:
    """Decode a JSON array of expense records.

    Numbers are parsed as Decimal so amounts keep the digits that were written.

    Args:
        text: JSON text.

    Returns:
        Decoded expenses in stored order.

    Raises:
        DecodeError: If the text is not a valid expense array.
    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except (json.JSONDecodeError, RecursionError) as e:
        raise DecodeError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise DecodeError("expected a JSON array")

    expenses = [expense_from_record(record) for record in data]
    if len({expense.id for expense in expenses}) != len(expenses):
        raise DecodeError("duplicate expense ids")
    return expenses


def encode_expenses(expenses: list[Expense]) -> str:
    """Encode expenses as a JSON array."""
    return json.dumps([expense_to_record(expense) for expense in expenses], ensure_ascii=False)


def load_expenses(db_path: Path | None = None) -> list[Expense]:
    """Load the stored expense list.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Stored expenses, or an empty list if nothing usable is stored.
    """
    if db_path is None:
        db_path = get_db_path()

    if not db_path.exists():
        logger.debug("No database at %s, starting with an empty ledger", db_path)
        return []

    try:
        text = read_value(EXPENSES_KEY, db_path)
    except sqlite3.Error as e:
        logger.warning("Could not read stored expenses, starting empty: %s", e)
        return []

    if text is None:
        return []

    try:
        expenses = decode_expenses(text)
    except DecodeError as e:
        logger.warning("Stored expenses are malformed, starting empty: %s", e)
        return []

    logger.debug("Loaded %d expenses from %s", len(expenses), db_path)
    return expenses


def save_expenses(expenses: list[Expense], db_path: Path | None = None) -> None:
    """Store the full expense list, overwriting what was there.

    Args:
        expenses: Expenses to store.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If the write fails.
    """
    write_value(EXPENSES_KEY, encode_expenses(expenses), db_path)
    logger.debug("Saved %d expenses", len(expenses))


def load_categories(db_path: Path | None = None) -> list[CategoryName] | None:
    """Load a stored category list.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Stored categories, or None if absent or malformed.
    """
    if db_path is None:
        db_path = get_db_path()

    if not db_path.exists():
        return None

    try:
        text = read_value(CATEGORIES_KEY, db_path)
    except sqlite3.Error as e:
        logger.warning("Could not read stored categories: %s", e)
        return None

    if text is None:
        return None

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.warning("Stored categories are malformed: %s", e)
        return None

    if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
        logger.warning("Stored categories are not a list of names")
        return None

    return [CategoryName(name) for name in data]


def save_categories(categories: list[CategoryName], db_path: Path | None = None) -> None:
    """Store the full category list.

    Args:
        categories: Categories to store.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If the write fails.
    """
    write_value(CATEGORIES_KEY, json.dumps(categories, ensure_ascii=False), db_path)
    logger.debug("Saved %d categories", len(categories))
