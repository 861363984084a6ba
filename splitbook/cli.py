"""CLI entry point for splitbook."""

import typer

from splitbook.commands.admin import backup_command, export_command, import_command, init_command
from splitbook.commands.categories import (
    categories_add_command,
    categories_list_command,
    categories_remove_command,
    categories_rename_command,
)
from splitbook.commands.expenses import add_command, delete_command, edit_command, list_command
from splitbook.commands.report import report_command
from splitbook.commands.session import session_command
from splitbook.logs import setup_logging

app = typer.Typer(
    name="splitbook",
    help="splitbook - A shared expense ledger",
    add_completion=False,
)

categories_app = typer.Typer(help="Manage expense categories.")
app.add_typer(categories_app, name="categories")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """splitbook - A shared expense ledger."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing database and config"),
) -> None:
    """Initialize splitbook database and configuration."""
    init_command(force)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory (default: ~/.splitbook/backups)"),
) -> None:
    """Backup your database and configuration files."""
    backup_command(output_dir)


@app.command()
def add(
    description: str,
    amount: str,
    payer: str = typer.Option("", "--payer", "-p", help="Who paid"),
    category: str = typer.Option("", "--category", "-c", help="Expense category"),
) -> None:
    """Add an expense."""
    add_command(description, amount, payer, category)


@app.command()
def edit(
    expense_id: int,
    description: str = typer.Option(None, "--description", "-d", help="New description"),
    amount: str = typer.Option(None, "--amount", "-a", help="New amount"),
    payer: str = typer.Option(None, "--payer", "-p", help="New payer"),
    category: str = typer.Option(None, "--category", "-c", help="New category"),
) -> None:
    """Edit an expense. Fields not given keep their current value."""
    edit_command(expense_id, description, amount, payer, category)


@app.command()
def delete(
    expense_id: int,
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Delete an expense."""
    delete_command(expense_id, yes)


@app.command(name="list")
def list_expenses() -> None:
    """List your expenses."""
    list_command()


@app.command()
def report(
    by_category: bool = typer.Option(True, help="Show the breakdown by category"),
) -> None:
    """Show total spending overall and per payer."""
    report_command(by_category)


@app.command()
def session() -> None:
    """Manage expenses and categories interactively."""
    session_command()


@app.command(name="import")
def import_expenses(
    file_path: str,
    yes: bool = typer.Option(False, "--yes", "-y", help="Replace stored expenses without asking"),
) -> None:
    """Replace your expenses with a JSON export."""
    import_command(file_path, yes)


@app.command(name="export")
def export_expenses(file_path: str) -> None:
    """Export your expenses to CSV."""
    export_command(file_path)


@categories_app.command(name="list")
def categories_list() -> None:
    """List categories."""
    categories_list_command()


@categories_app.command(name="add")
def categories_add(name: str) -> None:
    """Add a category."""
    categories_add_command(name)


@categories_app.command(name="rename")
def categories_rename(
    position: int,
    new_name: str = typer.Argument(None, help="New name (prompted if omitted)"),
) -> None:
    """Rename a category by its position in the list."""
    categories_rename_command(position, new_name)


@categories_app.command(name="remove")
def categories_remove(
    position: int,
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Remove a category by its position in the list."""
    categories_remove_command(position, yes)


if __name__ == "__main__":
    app()
