"""Tests for splitbook.domain.report pure functions."""

from decimal import Decimal

from splitbook.domain.ledger import Expense
from splitbook.domain.models import CategoryName, ExpenseId, Money, PayerName
from splitbook.domain.report import create_ledger_report, total_by_category, total_by_payer, total_overall

PAYERS = [PayerName("Luiz"), PayerName("Michely")]


def make_expense(expense_id: int, amount: str, payer: str = "Luiz", category: str = "Alimentação") -> Expense:
    return Expense(
        id=ExpenseId(expense_id),
        description=f"Expense {expense_id}",
        amount=Money(Decimal(amount)),
        payer=PayerName(payer),
        category=CategoryName(category),
    )


class TestTotalOverall:
    """Tests for total_overall."""

    def test_empty_ledger(self) -> None:
        """Should return zero for no expenses."""
        assert total_overall([]) == Decimal("0")

    def test_sums_amounts_exactly(self) -> None:
        """Should sum without floating point drift."""
        expenses = [make_expense(1, "0.10"), make_expense(2, "0.20")]
        assert total_overall(expenses) == Decimal("0.30")

    def test_single_lunch(self) -> None:
        """Should report the single expense amount."""
        assert total_overall([make_expense(1, "25.50")]) == Decimal("25.50")


class TestTotalByPayer:
    """Tests for total_by_payer."""

    def test_lunch_scenario(self) -> None:
        """Should show 25.50 for Luiz and zero for Michely."""
        totals = total_by_payer([make_expense(1, "25.50", "Luiz")], PAYERS)

        assert totals == {"Luiz": Decimal("25.50"), "Michely": Decimal("0")}

    def test_sums_same_payer(self) -> None:
        """Should add up every expense of one payer."""
        expenses = [make_expense(1, "10.00", "Michely"), make_expense(2, "15.25", "Michely")]

        totals = total_by_payer(expenses, PAYERS)

        assert totals["Michely"] == Decimal("25.25")
        assert totals["Luiz"] == Decimal("0")

    def test_every_payer_present_for_empty_ledger(self) -> None:
        """Should list every configured payer even with no expenses."""
        assert total_by_payer([], PAYERS) == {"Luiz": Decimal("0"), "Michely": Decimal("0")}

    def test_payer_totals_sum_to_overall(self) -> None:
        """Should add up to the overall total when all payers are configured."""
        expenses = [
            make_expense(1, "12.34", "Luiz"),
            make_expense(2, "0.66", "Michely"),
            make_expense(3, "100", "Luiz"),
        ]

        totals = total_by_payer(expenses, PAYERS)

        assert sum(totals.values()) == total_overall(expenses)

    def test_ignores_unknown_payers(self) -> None:
        """Should not count expenses of payers outside the list."""
        totals = total_by_payer([make_expense(1, "5", "Someone")], PAYERS)
        assert totals == {"Luiz": Decimal("0"), "Michely": Decimal("0")}


class TestTotalByCategory:
    """Tests for total_by_category."""

    def test_groups_in_first_seen_order(self) -> None:
        """Should sum per category keeping first-seen order."""
        expenses = [
            make_expense(1, "10", category="Lazer"),
            make_expense(2, "5", category="Alimentação"),
            make_expense(3, "2.5", category="Lazer"),
        ]

        totals = total_by_category(expenses)

        assert list(totals) == ["Lazer", "Alimentação"]
        assert totals["Lazer"] == Decimal("12.5")
        assert totals["Alimentação"] == Decimal("5")


class TestCreateLedgerReport:
    """Tests for create_ledger_report."""

    def test_bundles_all_totals(self) -> None:
        """Should include overall, per payer, per category and count."""
        expenses = [make_expense(1, "10", "Luiz"), make_expense(2, "5", "Michely", "Lazer")]

        report = create_ledger_report(expenses, PAYERS)

        assert report.total == Decimal("15")
        assert report.by_payer == {"Luiz": Decimal("10"), "Michely": Decimal("5")}
        assert report.by_category == {"Alimentação": Decimal("10"), "Lazer": Decimal("5")}
        assert report.count == 2
