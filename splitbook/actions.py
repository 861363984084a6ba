"""Actions the user interface performs on the stores.

These functions sit between the console and the stores. Anything that needs
an answer from the user (a confirmation, a replacement name) is passed in as
a callable, so the same actions run from the CLI, the interactive session and
the tests.
"""

from collections.abc import Callable
from typing import Any

from splitbook.domain.ledger import Expense
from splitbook.domain.models import CategoryName, PayerName
from splitbook.domain.validation import validate_draft
from splitbook.money import format_amount_input
from splitbook.store.categories import CategoryStore
from splitbook.store.ledger import LedgerStore

DELETE_EXPENSE_PROMPT = "Are you sure you want to delete this expense?"
REMOVE_CATEGORY_PROMPT = "Do you really want to delete this category?"
RENAME_CATEGORY_PROMPT = "New category name"


def submit_draft(
    ledger: LedgerStore,
    description: str,
    amount_text: str,
    payer: str,
    category: str,
    payers: list[PayerName],
    categories: list[CategoryName] | None = None,
    editing_id: int | None = None,
) -> tuple[Expense | None, str | None]:
    """Validate a draft and commit it as a new or edited expense.

    Args:
        ledger: Ledger store to commit to.
        description: Description as typed.
        amount_text: Amount as typed.
        payer: Selected payer.
        category: Selected category.
        payers: Configured payers.
        categories: Current categories. If None, any non-empty category is accepted.
        editing_id: Id of the expense being edited, or None to add.

    Returns:
        Tuple of (expense, error): the committed expense, or None with the
        message to show.

    Raises:
        sqlite3.Error: If the change was applied but could not be saved.
    """
    draft, error = validate_draft(description, amount_text, payer, category, payers, categories)
    if draft is None:
        return None, error

    if editing_id is None:
        return ledger.add(draft), None

    updated = ledger.update(editing_id, draft)
    if updated is None:
        return None, f"Expense {editing_id} not found."
    return updated, None


def request_edit(ledger: LedgerStore, expense_id: int) -> dict[str, Any] | None:
    """Read an expense as form values for editing.

    Args:
        ledger: Ledger store.
        expense_id: Expense to edit.

    Returns:
        Dictionary with description, amount_text, payer and category, or None
        if the expense does not exist.
    """
    expense = ledger.get(expense_id)
    if expense is None:
        return None
    return {
        "description": expense.description,
        "amount_text": format_amount_input(expense.amount),
        "payer": expense.payer,
        "category": expense.category,
    }


def request_delete(ledger: LedgerStore, expense_id: int, confirm: Callable[[str], bool]) -> bool:
    """Delete an expense once the user confirms.

    Args:
        ledger: Ledger store.
        expense_id: Expense to delete.
        confirm: Asks the user a yes/no question.

    Returns:
        True if an expense was deleted. Declining, or an id that does not
        exist, changes nothing and returns False.
    """
    if not confirm(DELETE_EXPENSE_PROMPT):
        return False
    return ledger.delete(expense_id)


def request_add_category(store: CategoryStore, name: str) -> bool:
    """Add a category typed by the user."""
    return store.add(name)


def request_rename_category(
    store: CategoryStore, index: int, ask_name: Callable[[str, str], str | None]
) -> bool:
    """Rename a category with a name supplied by the user.

    Args:
        store: Category store.
        index: Zero-based position of the category.
        ask_name: Asks for the new name given a prompt and the current name;
            returns None when the user cancels.

    Returns:
        True if the category was renamed.
    """
    categories = store.list()
    if not 0 <= index < len(categories):
        return False
    return store.rename_at(index, ask_name(RENAME_CATEGORY_PROMPT, categories[index]))


def request_remove_category(store: CategoryStore, index: int, confirm: Callable[[str], bool]) -> bool:
    """Remove a category once the user confirms.

    Expenses that use the category keep its name.

    Args:
        store: Category store.
        index: Zero-based position of the category.
        confirm: Asks the user a yes/no question.

    Returns:
        True if the category was removed.
    """
    if not 0 <= index < len(store) or not confirm(REMOVE_CATEGORY_PROMPT):
        return False
    return store.remove_at(index)
