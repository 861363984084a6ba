"""Pure functions for ledger totals.

This module contains the functional core for reporting:
- No I/O operations (no database, no console, no files)
- No side effects
- Totals are recomputed from the expense list on every call; nothing is cached
"""

from dataclasses import dataclass
from decimal import Decimal

from splitbook.domain.ledger import Expense
from splitbook.domain.models import CategoryName, Money, PayerName

ZERO = Money(Decimal("0"))


@dataclass(frozen=True)
class LedgerReport:
    """Immutable totals for one snapshot of the ledger."""

    total: Money
    by_payer: dict[PayerName, Money]
    by_category: dict[CategoryName, Money]
    count: int


def total_overall(expenses: list[Expense]) -> Money:
    """Sum every expense amount.

    Args:
        expenses: Expense list.

    Returns:
        Total amount (zero for an empty list).
    """
    return Money(sum((expense.amount for expense in expenses), ZERO))


def total_by_payer(expenses: list[Expense], payers: list[PayerName]) -> dict[PayerName, Money]:
    """Sum amounts per configured payer.

    Every configured payer appears in the result, with zero when they paid
    nothing. Expenses paid by someone outside the list are not counted.

    Args:
        expenses: Expense list.
        payers: Configured payers, in display order.

    Returns:
        Dictionary of payer to total.
    """
    return {payer: total_overall([expense for expense in expenses if expense.payer == payer]) for payer in payers}


def total_by_category(expenses: list[Expense]) -> dict[CategoryName, Money]:
    """Sum amounts per category name stored on the expenses.

    Names are taken from the expenses themselves, so a category that was since
    renamed or removed still shows up under its old name.

    Args:
        expenses: Expense list.

    Returns:
        Dictionary of category to total, in first-seen order.
    """
    totals: dict[CategoryName, Money] = {}
    for expense in expenses:
        totals[expense.category] = Money(totals.get(expense.category, ZERO) + expense.amount)
    return totals


def create_ledger_report(expenses: list[Expense], payers: list[PayerName]) -> LedgerReport:
    """Create the full set of totals for a ledger snapshot.

    Args:
        expenses: Expense list.
        payers: Configured payers.

    Returns:
        LedgerReport with overall, per-payer and per-category totals.
    """
    return LedgerReport(
        total=total_overall(expenses),
        by_payer=total_by_payer(expenses, payers),
        by_category=total_by_category(expenses),
        count=len(expenses),
    )
