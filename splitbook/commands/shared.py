"""Helpers shared by the command modules."""

import sys
import tomllib

from rich.console import Console
from rich.table import Table

from splitbook.config import Settings, get_config_path, load_settings
from splitbook.domain.ledger import Expense
from splitbook.money import format_money
from splitbook.store.categories import CategoryStore
from splitbook.store.schema import get_db_path

console = Console()


def load_settings_or_exit() -> Settings:
    """Load settings, exiting with a message if the config file is broken."""
    try:
        return load_settings()
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file {get_config_path()}: {e}[/red]", style="bold")
        sys.exit(1)


def open_categories(settings: Settings) -> CategoryStore:
    """Open the category store for this run."""
    return CategoryStore.open(settings.categories, settings.persist_categories, get_db_path())


def parse_position(position: int, count: int) -> int | None:
    """Convert a 1-based position shown to the user to a list index.

    Args:
        position: Position as shown in listings (starting at 1).
        count: Number of items.

    Returns:
        Zero-based index, or None if out of range.
    """
    if 1 <= position <= count:
        return position - 1
    return None


def expense_table(expenses: list[Expense], title: str) -> Table:
    """Build the expense listing table."""
    table = Table(title=title)
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right", style="green")
    table.add_column("Paid by", style="cyan")
    table.add_column("Category", style="magenta")

    for expense in expenses:
        table.add_row(
            str(expense.id),
            expense.description,
            format_money(expense.amount),
            expense.payer,
            expense.category,
        )
    return table


def print_save_failure(error: Exception) -> None:
    """Report a change that was applied in memory but not written to disk."""
    console.print(f"[yellow]Change applied but not saved: {error}[/yellow]", style="bold")
