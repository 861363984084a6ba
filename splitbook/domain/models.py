"""Domain type definitions for splitbook.

These NewTypes provide semantic clarity and help with type checking:
- Money: Exact decimal amount (rounded to two places only for display)
- ExpenseId: Millisecond-clock derived expense identifier
- CategoryName: Name of an expense category
- PayerName: Name of one of the configured payers
"""

from decimal import Decimal
from typing import NewType

# Money amounts are Decimals to avoid floating point errors when summing
Money = NewType("Money", Decimal)

# Expense ids come from a millisecond clock and are never reused
ExpenseId = NewType("ExpenseId", int)

# Category name (free text, managed by the user)
CategoryName = NewType("CategoryName", str)

# Payer name (fixed configuration)
PayerName = NewType("PayerName", str)

DEFAULT_PAYERS: list[PayerName] = [PayerName("Luiz"), PayerName("Michely")]

DEFAULT_CATEGORIES: list[CategoryName] = [
    CategoryName("Alimentação"),
    CategoryName("Hospedagem"),
    CategoryName("Lazer"),
    CategoryName("Transporte"),
]
