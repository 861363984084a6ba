"""Report command for ledger totals."""

from rich.table import Table

from splitbook.commands.shared import console, load_settings_or_exit
from splitbook.domain.models import Money
from splitbook.domain.report import LedgerReport, create_ledger_report
from splitbook.money import format_money
from splitbook.store.ledger import LedgerStore
from splitbook.store.schema import get_db_path

BAR_WIDTH = 30


def calculate_bar_length(amount: Money, max_amount: Money, bar_width: int) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Largest amount in the breakdown.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((amount / max_amount) * bar_width)


def render_report(report: LedgerReport, by_category: bool = True) -> None:
    """Print ledger totals.

    Args:
        report: Totals to print.
        by_category: Also print the per-category breakdown.
    """
    console.print("[bold cyan]Report[/bold cyan]\n")
    console.print(f"  [bold]Total:[/bold] {format_money(report.total)}")

    for payer, amount in report.by_payer.items():
        console.print(f"  {payer}: {format_money(amount)}")

    if by_category and report.by_category:
        table = Table(title="By category")
        table.add_column("Category", style="magenta")
        table.add_column("Amount", justify="right", style="green")
        table.add_column("")

        max_amount = max(report.by_category.values())
        for category, amount in report.by_category.items():
            bar = "█" * calculate_bar_length(amount, max_amount, BAR_WIDTH)
            table.add_row(category, format_money(amount), bar)

        console.print()
        console.print(table)


def report_command(by_category: bool = True) -> None:
    """Show total spending overall and per payer."""
    settings = load_settings_or_exit()
    expenses = LedgerStore.open(get_db_path()).list()

    if not expenses:
        console.print("[dim]No expenses yet[/dim]")

    render_report(create_ledger_report(expenses, settings.payers), by_category)
