"""Domain models and types for splitbook.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Ledger rules separated from storage and console
"""

from splitbook.domain.models import CategoryName, ExpenseId, Money, PayerName

__all__ = ["Money", "ExpenseId", "CategoryName", "PayerName"]
