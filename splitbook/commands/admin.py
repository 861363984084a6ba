"""Admin commands for init, backup, import and export."""

import shutil
import sqlite3
import sys
from datetime import datetime
from pathlib import Path

import pandas as pd
import typer

from splitbook.commands.shared import console, print_save_failure
from splitbook.config import create_default_config, get_config_path
from splitbook.store.ledger import LedgerStore
from splitbook.store.persistence import DecodeError, decode_expenses, expense_to_record
from splitbook.store.schema import get_db_path, init_database


def init_command(force: bool = False) -> None:
    """Initialize splitbook database and configuration."""
    db_path = get_db_path()
    config_path = get_config_path()

    db_exists = db_path.exists()
    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (db_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if db_exists:
                console.print(f"  Database already exists: {db_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'splitbook init --force' to overwrite[/yellow]")
            sys.exit(1)

        if force and db_exists:
            db_path.unlink()

        console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
        init_database(db_path)
        console.print("[green]✓[/green] Database initialized")

        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

        console.print("\n[green]Initialization complete![/green]", style="bold")
        console.print(f"[dim]Database: {db_path}[/dim]")
        console.print(f"[dim]Config: {config_path}[/dim]")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def backup_command(output_dir: str | None = None) -> None:
    """Backup database and configuration files."""
    db_path = get_db_path()
    config_path = get_config_path()

    if not db_path.exists():
        console.print("[red]Database not found. Run 'splitbook init' first.[/red]", style="bold")
        sys.exit(1)

    if output_dir:
        backup_dir = Path(output_dir).expanduser()
    else:
        backup_dir = Path.home() / ".splitbook" / "backups"

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    db_backup = backup_dir / f"splitbook_{timestamp}.db"
    config_backup = backup_dir / f"config_{timestamp}.toml"

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)

        shutil.copy2(db_path, db_backup)
        console.print(f"[green]✓[/green] Database backed up to: {db_backup}")

        if config_path.exists():
            shutil.copy2(config_path, config_backup)
            console.print(f"[green]✓[/green] Config backed up to: {config_backup}")
        else:
            console.print("[dim]No config file to back up[/dim]")

        console.print("\n[green]Backup complete![/green]", style="bold")
        console.print(f"[dim]Backup directory: {backup_dir}[/dim]")

    except OSError as e:
        console.print(f"[red]Backup failed: {e}[/red]", style="bold")
        sys.exit(1)


def import_command(file_path: str, yes: bool = False) -> None:
    """Replace the ledger with expenses from a JSON file.

    The file holds a JSON array of expense objects, using either the current
    field names or the original app's (descricao, valor, quemPagou, categoria).

    Args:
        file_path: JSON file to import.
        yes: Skip the confirmation prompt when the ledger is not empty.
    """
    path = Path(file_path).expanduser()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Could not read {path}: {e}[/red]", style="bold")
        sys.exit(1)

    try:
        expenses = decode_expenses(text)
    except DecodeError as e:
        console.print(f"[red]Invalid expense file: {e}[/red]", style="bold")
        sys.exit(1)

    ledger = LedgerStore.open(get_db_path())
    if len(ledger) and not yes:
        replace = typer.confirm(f"Replace the {len(ledger)} stored expenses with {len(expenses)} from {path.name}?")
        if not replace:
            console.print("[dim]Cancelled[/dim]")
            return

    try:
        ledger.replace_all(expenses)
    except sqlite3.Error as e:
        print_save_failure(e)
        sys.exit(1)

    console.print(f"[green]✓[/green] Imported {len(expenses)} expenses from {path}")


def export_command(file_path: str) -> None:
    """Write the ledger to a CSV file.

    Args:
        file_path: CSV file to write.
    """
    path = Path(file_path).expanduser()
    expenses = LedgerStore.open(get_db_path()).list()

    records = [expense_to_record(expense) for expense in expenses]
    df = pd.DataFrame(records, columns=["id", "description", "amount", "payer", "category"])

    try:
        df.to_csv(path, index=False)
    except OSError as e:
        console.print(f"[red]Export failed: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Exported {len(expenses)} expenses to {path}")
