"""Tests for splitbook.money pure functions."""

from decimal import Decimal

from splitbook.domain.models import Money
from splitbook.money import format_amount_input, format_money, round_money


class TestRoundMoney:
    """Tests for round_money."""

    def test_rounds_half_up(self) -> None:
        """Should round halves away from zero."""
        assert round_money(Money(Decimal("2.345"))) == Decimal("2.35")
        assert round_money(Money(Decimal("2.344"))) == Decimal("2.34")


class TestFormatMoney:
    """Tests for format_money."""

    def test_two_decimals(self) -> None:
        """Should always show two decimals."""
        assert format_money(Money(Decimal("25.5"))) == "R$ 25.50"
        assert format_money(Money(Decimal("0"))) == "R$ 0.00"

    def test_thousands_separator(self) -> None:
        """Should group thousands."""
        assert format_money(Money(Decimal("1234.5"))) == "R$ 1,234.50"


class TestFormatAmountInput:
    """Tests for format_amount_input."""

    def test_drops_trailing_zeros(self) -> None:
        """Should show the amount the way a user would type it."""
        assert format_amount_input(Money(Decimal("25.50"))) == "25.5"

    def test_whole_numbers_without_exponent(self) -> None:
        """Should not use scientific notation for round numbers."""
        assert format_amount_input(Money(Decimal("100"))) == "100"
