"""Validation gate for expense drafts.

Rules are checked in a fixed order and only the first failure is reported.
"""

import math
from decimal import Decimal, InvalidOperation

from splitbook.domain.ledger import ExpenseDraft
from splitbook.domain.models import CategoryName, Money, PayerName

DESCRIPTION_REQUIRED = "Fill in the Description field."
AMOUNT_INVALID = "Fill in the Amount field correctly."
PAYER_REQUIRED = "Choose who paid."
CATEGORY_REQUIRED = "Choose a category."


def parse_amount(amount_text: str) -> Money | None:
    """Parse amount text into a finite decimal.

    Accepts surrounding whitespace and a decimal comma ("25,50"). Underscore
    digit separators ("1_000") are rejected.

    Args:
        amount_text: Raw amount as typed by the user.

    Returns:
        Parsed amount, or None if the text is not a finite number.
    """
    text = amount_text.strip().replace(",", ".")
    if not text or "_" in text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return Money(value)


def is_storable_amount(amount: Decimal) -> bool:
    """Check that an amount is positive and survives being stored as a JSON number.

    Amounts are written as floats, so values that overflow, underflow to zero
    or carry more digits than a float keeps are not storable.
    """
    as_float = float(amount)
    return math.isfinite(as_float) and as_float > 0 and Decimal(repr(as_float)) == amount


def validate_draft(
    description: str,
    amount_text: str,
    payer: str,
    category: str,
    payers: list[PayerName] | None = None,
    categories: list[CategoryName] | None = None,
) -> tuple[ExpenseDraft | None, str | None]:
    """Check a candidate expense against the ledger rules.

    Args:
        description: Expense description (not trimmed).
        amount_text: Amount as text.
        payer: Selected payer.
        category: Selected category.
        payers: If given, the payer must be one of these.
        categories: If given, the category must be one of these.

    Returns:
        Tuple of (draft, error):
        - draft: Validated draft when accepted, otherwise None
        - error: Message for the first violated rule, otherwise None
    """
    if not description:
        return None, DESCRIPTION_REQUIRED

    amount = parse_amount(amount_text)
    if amount is None or amount <= 0 or not is_storable_amount(amount):
        return None, AMOUNT_INVALID

    if not payer or (payers is not None and payer not in payers):
        return None, PAYER_REQUIRED

    if not category or (categories is not None and category not in categories):
        return None, CATEGORY_REQUIRED

    draft = ExpenseDraft(
        description=description,
        amount=amount,
        payer=PayerName(payer),
        category=CategoryName(category),
    )
    return draft, None
