"""Money formatting helpers.

Pure functions; amounts are only rounded here, never in storage.
"""

from decimal import ROUND_HALF_UP, Decimal

from splitbook.domain.models import Money

CURRENCY_SYMBOL = "R$"

_CENTS = Decimal("0.01")


def round_money(amount: Money) -> Money:
    """Round an amount to two decimal places (half up)."""
    return Money(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_money(amount: Money) -> str:
    """Format an amount for display.

    Args:
        amount: Amount to format.

    Returns:
        String such as "R$ 25.50".
    """
    return f"{CURRENCY_SYMBOL} {round_money(amount):,.2f}"


def format_amount_input(amount: Money) -> str:
    """Format an amount for pre-filling an edit form, without rounding."""
    return format(amount.normalize(), "f")
