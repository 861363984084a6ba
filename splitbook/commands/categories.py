"""Category management commands."""

import sqlite3
import sys

import typer

from splitbook.actions import request_add_category, request_remove_category, request_rename_category
from splitbook.commands.shared import (
    console,
    load_settings_or_exit,
    open_categories,
    parse_position,
    print_save_failure,
)
from splitbook.config import Settings


def warn_if_session_only(settings: Settings) -> None:
    """Remind the user that category changes are not kept between runs."""
    if not settings.persist_categories:
        console.print(
            "[dim]Categories are not saved between runs. "
            "Set persist_categories = true in the config file to keep them.[/dim]"
        )


def categories_list_command() -> None:
    """List categories with their positions."""
    settings = load_settings_or_exit()
    categories = open_categories(settings).list()

    if not categories:
        console.print("[yellow]No categories[/yellow]")
        return

    console.print("[cyan]Categories:[/cyan]")
    for idx, name in enumerate(categories, 1):
        console.print(f"  {idx}. {name}")


def categories_add_command(name: str) -> None:
    """Add a category.

    Args:
        name: Category name (trimmed).
    """
    settings = load_settings_or_exit()
    store = open_categories(settings)

    try:
        added = request_add_category(store, name)
    except sqlite3.Error as e:
        print_save_failure(e)
        sys.exit(1)

    if not added:
        console.print(f"[yellow]Category '{name.strip()}' not added (empty or already exists)[/yellow]")
        sys.exit(1)

    console.print(f"[green]✓[/green] Added category: {name.strip()}")
    warn_if_session_only(settings)


def categories_rename_command(position: int, new_name: str | None = None) -> None:
    """Rename the category at a position.

    Args:
        position: 1-based position from 'splitbook categories list'.
        new_name: New name. If None, the user is prompted.
    """
    settings = load_settings_or_exit()
    store = open_categories(settings)

    index = parse_position(position, len(store))
    if index is None:
        console.print(f"[red]No category at position {position}[/red]")
        sys.exit(1)

    old_name = store.list()[index]

    def ask_name(prompt: str, current: str) -> str | None:
        if new_name is not None:
            return new_name
        answer: str = typer.prompt(prompt, type=str, default=current)
        return answer or None

    try:
        renamed = request_rename_category(store, index, ask_name)
    except sqlite3.Error as e:
        print_save_failure(e)
        sys.exit(1)

    if not renamed:
        console.print("[red]Category name cannot be empty[/red]")
        sys.exit(1)

    console.print(f"[green]✓[/green] Renamed '{old_name}' to '{store.list()[index]}'")
    console.print("[dim]Expenses keep the category name they were saved with[/dim]")
    warn_if_session_only(settings)


def categories_remove_command(position: int, yes: bool = False) -> None:
    """Remove the category at a position after confirmation.

    Args:
        position: 1-based position from 'splitbook categories list'.
        yes: Skip the confirmation prompt.
    """
    settings = load_settings_or_exit()
    store = open_categories(settings)

    index = parse_position(position, len(store))
    if index is None:
        console.print(f"[yellow]No category at position {position}, nothing to remove[/yellow]")
        return

    name = store.list()[index]

    def confirm(prompt: str) -> bool:
        return yes or typer.confirm(f"{prompt} ({name})", default=False)

    try:
        removed = request_remove_category(store, index, confirm)
    except sqlite3.Error as e:
        print_save_failure(e)
        sys.exit(1)

    if removed:
        console.print(f"[green]✓[/green] Removed category: {name}")
        warn_if_session_only(settings)
    else:
        console.print("[dim]Cancelled[/dim]")
