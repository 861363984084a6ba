"""Interactive session covering every ledger action.

Categories added or edited here last for the session unless category
persistence is enabled in the config file.
"""

import sqlite3
from typing import Any

import typer

from splitbook.actions import (
    request_add_category,
    request_delete,
    request_edit,
    request_remove_category,
    request_rename_category,
    submit_draft,
)
from splitbook.commands.report import render_report
from splitbook.commands.shared import (
    console,
    expense_table,
    load_settings_or_exit,
    open_categories,
    parse_position,
    print_save_failure,
)
from splitbook.config import Settings
from splitbook.domain.report import create_ledger_report
from splitbook.store.categories import CategoryStore
from splitbook.store.ledger import LedgerStore
from splitbook.store.schema import get_db_path

MAIN_MENU = "l = list | a = add | e = edit | d = delete | r = report | c = categories | q = quit"
CATEGORY_MENU = "n = new | r = rename | x = remove | b = back"


def confirm(prompt: str) -> bool:
    """Ask a yes/no question, defaulting to no."""
    answer: bool = typer.confirm(prompt, default=False)
    return answer


def ask_name(prompt: str, current: str) -> str | None:
    """Ask for a replacement name; an empty answer cancels."""
    answer: str = typer.prompt(prompt, type=str, default=current)
    return answer or None


def choose(label: str, options: list[str], current: str) -> str:
    """Prompt for one of the options by number or by name.

    Args:
        label: Prompt label.
        options: Options to show, numbered from 1.
        current: Pre-selected value (empty for none).

    Returns:
        Selected option, or the raw answer if it does not match one.
    """
    for idx, option in enumerate(options, 1):
        console.print(f"  {idx}. {option}")
    answer: str = typer.prompt(label, type=str, default=current, show_default=bool(current))
    answer = answer.strip()
    if answer.isdigit():
        index = parse_position(int(answer), len(options))
        if index is not None:
            return options[index]
    return answer


def prompt_expense_form(settings: Settings, categories: CategoryStore, values: dict[str, Any]) -> dict[str, Any]:
    """Collect the expense form, starting from the given values.

    Args:
        settings: Current settings (for payers).
        categories: Session category store.
        values: Starting values (description, amount_text, payer, category).

    Returns:
        Values as entered.
    """
    description: str = typer.prompt(
        "Description", type=str, default=values["description"], show_default=bool(values["description"])
    )
    amount_text: str = typer.prompt(
        "Amount", type=str, default=values["amount_text"], show_default=bool(values["amount_text"])
    )
    console.print("[cyan]Who paid?[/cyan]")
    payer = choose("Payer", list(settings.payers), values["payer"])
    console.print("[cyan]Category[/cyan]")
    category = choose("Category", categories.list(), values["category"])
    return {
        "description": description,
        "amount_text": amount_text,
        "payer": payer,
        "category": category,
    }


def handle_expense_form(
    ledger: LedgerStore,
    settings: Settings,
    categories: CategoryStore,
    values: dict[str, Any],
    editing_id: int | None = None,
) -> None:
    """Show the form until the draft is accepted or the user gives up."""
    title = f"Edit expense {editing_id}" if editing_id is not None else "New expense"
    console.print(f"\n[bold]{title}[/bold]")

    while True:
        values = prompt_expense_form(settings, categories, values)
        try:
            expense, error = submit_draft(
                ledger,
                values["description"],
                values["amount_text"],
                values["payer"],
                values["category"],
                settings.payers,
                categories.list(),
                editing_id=editing_id,
            )
        except sqlite3.Error as e:
            print_save_failure(e)
            return

        if expense is not None:
            action = "updated" if editing_id is not None else "added"
            console.print(f"[green]✓[/green] Expense {expense.id} {action}\n")
            return

        console.print(f"[red]{error}[/red]")
        if not typer.confirm("Try again?", default=True):
            console.print("[dim]Discarded[/dim]\n")
            return


def prompt_expense_id(ledger: LedgerStore) -> int | None:
    """Ask for an expense by its position in the listing."""
    expenses = ledger.list()
    if not expenses:
        console.print("[yellow]No expenses yet[/yellow]\n")
        return None

    console.print(expense_table(expenses, "Expenses"))
    choice: str = typer.prompt(f"Select expense (1-{len(expenses)}, or q to cancel)", type=str, default="q")
    if choice.lower() == "q":
        return None
    try:
        index = parse_position(int(choice), len(expenses))
    except ValueError:
        index = None
    if index is None:
        console.print("[red]Invalid selection[/red]\n")
        return None
    return expenses[index].id


def handle_delete(ledger: LedgerStore) -> None:
    expense_id = prompt_expense_id(ledger)
    if expense_id is None:
        return
    try:
        if request_delete(ledger, expense_id, confirm):
            console.print("[green]✓[/green] Deleted\n")
        else:
            console.print("[dim]Cancelled[/dim]\n")
    except sqlite3.Error as e:
        print_save_failure(e)


def handle_edit(ledger: LedgerStore, settings: Settings, categories: CategoryStore) -> None:
    expense_id = prompt_expense_id(ledger)
    if expense_id is None:
        return
    values = request_edit(ledger, expense_id)
    if values is None:
        console.print(f"[red]Expense {expense_id} not found[/red]\n")
        return
    handle_expense_form(ledger, settings, categories, values, editing_id=expense_id)


def prompt_category_index(categories: CategoryStore) -> int | None:
    choice: str = typer.prompt(f"Select category (1-{len(categories)})", type=str)
    try:
        index = parse_position(int(choice), len(categories))
    except ValueError:
        index = None
    if index is None:
        console.print("[red]Invalid selection[/red]")
    return index


def categories_menu(categories: CategoryStore) -> None:
    """Manage categories until the user goes back."""
    while True:
        console.print("\n[cyan]Categories:[/cyan]")
        for idx, name in enumerate(categories.list(), 1):
            console.print(f"  {idx}. {name}")

        choice: str = typer.prompt(CATEGORY_MENU, type=str, default="b")
        choice = choice.lower()

        try:
            if choice == "b":
                return
            elif choice == "n":
                name: str = typer.prompt("New category", type=str, default="", show_default=False)
                if not request_add_category(categories, name):
                    console.print("[yellow]Not added (empty or already exists)[/yellow]")
            elif choice == "r":
                index = prompt_category_index(categories)
                if index is not None and not request_rename_category(categories, index, ask_name):
                    console.print("[dim]Unchanged[/dim]")
            elif choice == "x":
                index = prompt_category_index(categories)
                if index is not None and not request_remove_category(categories, index, confirm):
                    console.print("[dim]Cancelled[/dim]")
            else:
                console.print("[red]Invalid input[/red]")
        except sqlite3.Error as e:
            print_save_failure(e)


def session_command() -> None:
    """Run the interactive session."""
    settings = load_settings_or_exit()
    ledger = LedgerStore.open(get_db_path())
    categories = open_categories(settings)

    empty_form = {"description": "", "amount_text": "", "payer": "", "category": ""}

    while True:
        choice: str = typer.prompt(MAIN_MENU, type=str, default="l")
        choice = choice.lower()

        if choice == "q":
            console.print("[yellow]Exiting[/yellow]")
            return
        elif choice == "l":
            expenses = ledger.list()
            if expenses:
                console.print(expense_table(expenses, f"Expenses ({len(expenses)})"))
            else:
                console.print("[yellow]No expenses yet[/yellow]")
        elif choice == "a":
            handle_expense_form(ledger, settings, categories, dict(empty_form))
        elif choice == "e":
            handle_edit(ledger, settings, categories)
        elif choice == "d":
            handle_delete(ledger)
        elif choice == "r":
            render_report(create_ledger_report(ledger.list(), settings.payers))
            console.print()
        elif choice == "c":
            categories_menu(categories)
        else:
            console.print("[red]Invalid input[/red]")
