"""Expense commands (add, edit, delete, list)."""

import sqlite3
import sys

import typer

from splitbook.actions import request_delete, request_edit, submit_draft
from splitbook.commands.shared import (
    console,
    expense_table,
    load_settings_or_exit,
    open_categories,
    print_save_failure,
)
from splitbook.domain.validation import CATEGORY_REQUIRED, PAYER_REQUIRED
from splitbook.money import format_money
from splitbook.store.ledger import LedgerStore
from splitbook.store.schema import get_db_path


def add_command(
    description: str,
    amount: str,
    payer: str,
    category: str,
) -> None:
    """Add an expense.

    Args:
        description: Expense description.
        amount: Amount as text (e.g. 25.50 or 25,50).
        payer: Who paid.
        category: Expense category.
    """
    settings = load_settings_or_exit()
    ledger = LedgerStore.open(get_db_path())
    categories = open_categories(settings)

    try:
        expense, error = submit_draft(
            ledger, description, amount, payer, category, settings.payers, categories.list()
        )
    except sqlite3.Error as e:
        print_save_failure(e)
        sys.exit(1)

    if expense is None:
        console.print(f"[red]{error}[/red]")
        if error == PAYER_REQUIRED:
            console.print(f"[dim]Payers: {', '.join(settings.payers)}[/dim]")
        elif error == CATEGORY_REQUIRED:
            console.print(f"[dim]Categories: {', '.join(categories.list())}[/dim]")
        sys.exit(1)

    console.print("[green]✓[/green] Expense added:")
    console.print(f"  ID: {expense.id}")
    console.print(f"  Description: {expense.description}")
    console.print(f"  Amount: {format_money(expense.amount)}")
    console.print(f"  Paid by: {expense.payer}")
    console.print(f"  Category: {expense.category}")


def edit_command(
    expense_id: int,
    description: str | None = None,
    amount: str | None = None,
    payer: str | None = None,
    category: str | None = None,
) -> None:
    """Edit an expense, keeping any field that is not given.

    The category is not checked against the category list when it is left
    unchanged, so an expense whose category was removed can still be edited.

    Args:
        expense_id: Expense to edit.
        description: New description.
        amount: New amount as text.
        payer: New payer.
        category: New category.
    """
    settings = load_settings_or_exit()
    ledger = LedgerStore.open(get_db_path())

    form = request_edit(ledger, expense_id)
    if form is None:
        console.print(f"[red]Expense {expense_id} not found[/red]")
        sys.exit(1)

    if description is not None:
        form["description"] = description
    if amount is not None:
        form["amount_text"] = amount
    if payer is not None:
        form["payer"] = payer

    allowed_categories = None
    if category is not None:
        form["category"] = category
        allowed_categories = open_categories(settings).list()

    try:
        expense, error = submit_draft(
            ledger,
            form["description"],
            form["amount_text"],
            form["payer"],
            form["category"],
            settings.payers,
            allowed_categories,
            editing_id=expense_id,
        )
    except sqlite3.Error as e:
        print_save_failure(e)
        sys.exit(1)

    if expense is None:
        console.print(f"[red]{error}[/red]")
        sys.exit(1)

    console.print(f"[green]✓[/green] Expense {expense.id} updated:")
    console.print(f"  Description: {expense.description}")
    console.print(f"  Amount: {format_money(expense.amount)}")
    console.print(f"  Paid by: {expense.payer}")
    console.print(f"  Category: {expense.category}")


def delete_command(expense_id: int, yes: bool = False) -> None:
    """Delete an expense after confirmation.

    Args:
        expense_id: Expense to delete.
        yes: Skip the confirmation prompt.
    """
    ledger = LedgerStore.open(get_db_path())

    expense = ledger.get(expense_id)
    if expense is None:
        console.print(f"[yellow]Expense {expense_id} not found, nothing to delete[/yellow]")
        return

    console.print(f"{expense.description} - {format_money(expense.amount)} ({expense.payer}, {expense.category})")

    def confirm(prompt: str) -> bool:
        return yes or typer.confirm(prompt, default=False)

    try:
        deleted = request_delete(ledger, expense_id, confirm)
    except sqlite3.Error as e:
        print_save_failure(e)
        sys.exit(1)

    if deleted:
        console.print(f"[green]✓[/green] Expense {expense_id} deleted")
    else:
        console.print("[dim]Cancelled[/dim]")


def list_command() -> None:
    """List expenses in the order they were added."""
    expenses = LedgerStore.open(get_db_path()).list()

    if not expenses:
        console.print("[yellow]No expenses yet[/yellow]")
        return

    console.print(expense_table(expenses, f"Expenses ({len(expenses)})"))
