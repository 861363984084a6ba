"""Ledger store: owns the expense list and saves it after every change."""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from splitbook.domain.ledger import (
    Expense,
    ExpenseDraft,
    append_expense,
    build_expense,
    find_expense,
    next_expense_id,
    remove_expense,
    replace_expense,
)
from splitbook.store.persistence import load_expenses, save_expenses

logger = logging.getLogger(__name__)


def clock_ms() -> int:
    """Current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


class LedgerStore:
    """The expense collection plus the hook that persists it.

    Every successful mutation calls ``save`` with the full list before
    returning. If ``save`` raises, the in-memory change is kept and the error
    propagates to the caller.
    """

    def __init__(
        self,
        expenses: list[Expense] | None = None,
        save: Callable[[list[Expense]], None] | None = None,
        clock: Callable[[], int] = clock_ms,
    ) -> None:
        self._expenses: list[Expense] = list(expenses or [])
        self._save = save
        self._clock = clock

    @classmethod
    def open(cls, db_path: Path | None = None, clock: Callable[[], int] = clock_ms) -> "LedgerStore":
        """Load the stored ledger and bind saving to the same database.

        Args:
            db_path: Path to the database file. If None, uses default location.
            clock: Millisecond clock used for new ids.

        Returns:
            LedgerStore holding the stored expenses.
        """
        return cls(
            load_expenses(db_path),
            save=lambda expenses: save_expenses(expenses, db_path),
            clock=clock,
        )

    def _commit(self, expenses: list[Expense]) -> None:
        self._expenses = expenses
        if self._save is not None:
            self._save(list(expenses))

    def add(self, draft: ExpenseDraft) -> Expense:
        """Append a new expense with a fresh id.

        Args:
            draft: Validated expense fields.

        Returns:
            The created expense.
        """
        expense = build_expense(next_expense_id(self._expenses, self._clock()), draft)
        self._commit(append_expense(self._expenses, expense))
        logger.debug("Added expense %d", expense.id)
        return expense

    def update(self, expense_id: int, draft: ExpenseDraft) -> Expense | None:
        """Replace every field but the id of an expense.

        Args:
            expense_id: Id of the expense to update.
            draft: New field values.

        Returns:
            The updated expense, or None if no expense has that id.
        """
        expenses, updated = replace_expense(self._expenses, expense_id, draft)
        if updated is None:
            logger.debug("Update skipped, expense %d not found", expense_id)
            return None
        self._commit(expenses)
        logger.debug("Updated expense %d", expense_id)
        return updated

    def delete(self, expense_id: int) -> bool:
        """Remove an expense.

        Deleting an id that does not exist is a no-op and does not save.

        Args:
            expense_id: Id of the expense to remove.

        Returns:
            True if an expense was removed, False otherwise.
        """
        expenses, removed = remove_expense(self._expenses, expense_id)
        if not removed:
            logger.debug("Delete skipped, expense %d not found", expense_id)
            return False
        self._commit(expenses)
        logger.debug("Deleted expense %d", expense_id)
        return True

    def replace_all(self, expenses: list[Expense]) -> None:
        """Replace the whole collection, as when importing stored data."""
        self._commit(list(expenses))

    def get(self, expense_id: int) -> Expense | None:
        """Get one expense by id."""
        return find_expense(self._expenses, expense_id)

    def list(self) -> list[Expense]:
        """Snapshot of all expenses in insertion order."""
        return list(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)
