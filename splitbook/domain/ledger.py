"""Pure functions for the expense collection.

This module contains the functional core for ledger operations:
- No I/O operations (no database, no console, no clock)
- No side effects; every function returns a new list
- Insertion order is preserved by every operation

The stateful wrapper that persists after each change lives in
splitbook.store.ledger.
"""

from dataclasses import dataclass

from splitbook.domain.models import CategoryName, ExpenseId, Money, PayerName


@dataclass(frozen=True)
class ExpenseDraft:
    """Validated expense fields, ready to be committed."""

    description: str
    amount: Money
    payer: PayerName
    category: CategoryName


@dataclass(frozen=True)
class Expense:
    """Immutable expense record."""

    id: ExpenseId
    description: str
    amount: Money
    payer: PayerName
    category: CategoryName


def next_expense_id(expenses: list[Expense], clock_ms: int) -> ExpenseId:
    """Allocate an id for a new expense.

    The clock value is used when it is strictly greater than every existing id,
    otherwise the id after the current maximum is used, so ids never repeat.

    Args:
        expenses: Current expense collection.
        clock_ms: Current time in milliseconds.

    Returns:
        A new unique expense id.
    """
    if not expenses:
        return ExpenseId(clock_ms)
    highest = max(expense.id for expense in expenses)
    return ExpenseId(max(clock_ms, highest + 1))


def build_expense(expense_id: ExpenseId, draft: ExpenseDraft) -> Expense:
    """Create an expense record from a draft."""
    return Expense(
        id=expense_id,
        description=draft.description,
        amount=draft.amount,
        payer=draft.payer,
        category=draft.category,
    )


def find_expense(expenses: list[Expense], expense_id: int) -> Expense | None:
    """Find an expense by id.

    Args:
        expenses: Expense collection to search.
        expense_id: Id to look for.

    Returns:
        The matching expense or None if not found.
    """
    return next((expense for expense in expenses if expense.id == expense_id), None)


def append_expense(expenses: list[Expense], expense: Expense) -> list[Expense]:
    """Return a new list with the expense appended at the end."""
    return [*expenses, expense]


def replace_expense(
    expenses: list[Expense], expense_id: int, draft: ExpenseDraft
) -> tuple[list[Expense], Expense | None]:
    """Replace every field but the id of one expense, keeping its position.

    Args:
        expenses: Current expense collection.
        expense_id: Id of the expense to update.
        draft: New field values.

    Returns:
        Tuple of (new_expenses, updated):
        - new_expenses: Collection with the record replaced (unchanged if not found)
        - updated: The updated record, or None if no record has that id
    """
    existing = find_expense(expenses, expense_id)
    if existing is None:
        return expenses, None

    updated = build_expense(existing.id, draft)
    return [updated if expense.id == expense_id else expense for expense in expenses], updated


def remove_expense(expenses: list[Expense], expense_id: int) -> tuple[list[Expense], bool]:
    """Remove one expense by id.

    Removing a missing id is not an error; the collection comes back unchanged.

    Args:
        expenses: Current expense collection.
        expense_id: Id of the expense to remove.

    Returns:
        Tuple of (new_expenses, removed).
    """
    remaining = [expense for expense in expenses if expense.id != expense_id]
    return remaining, len(remaining) != len(expenses)
