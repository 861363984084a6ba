"""Tests for splitbook.domain.validation."""

from decimal import Decimal

from splitbook.domain.models import CategoryName, PayerName
from splitbook.domain.validation import (
    AMOUNT_INVALID,
    CATEGORY_REQUIRED,
    DESCRIPTION_REQUIRED,
    PAYER_REQUIRED,
    is_storable_amount,
    parse_amount,
    validate_draft,
)

PAYERS = [PayerName("Luiz"), PayerName("Michely")]
CATEGORIES = [CategoryName("Alimentação"), CategoryName("Lazer")]


class TestParseAmount:
    """Tests for parse_amount."""

    def test_parses_decimal_point(self) -> None:
        """Should parse a plain decimal."""
        assert parse_amount("25.50") == Decimal("25.50")

    def test_parses_decimal_comma(self) -> None:
        """Should accept a comma as the decimal separator."""
        assert parse_amount("25,50") == Decimal("25.50")

    def test_strips_whitespace(self) -> None:
        """Should ignore surrounding whitespace."""
        assert parse_amount("  10 ") == Decimal("10")

    def test_rejects_text(self) -> None:
        """Should reject non-numeric text."""
        assert parse_amount("abc") is None

    def test_rejects_empty(self) -> None:
        """Should reject empty and blank text."""
        assert parse_amount("") is None
        assert parse_amount("   ") is None

    def test_rejects_non_finite(self) -> None:
        """Should reject NaN and infinity."""
        assert parse_amount("NaN") is None
        assert parse_amount("Infinity") is None

    def test_rejects_underscore_separators(self) -> None:
        """Should not read "1_000" as a thousand."""
        assert parse_amount("1_000") is None

    def test_keeps_negative_sign(self) -> None:
        """Should parse negatives (the gate rejects them, not the parser)."""
        assert parse_amount("-5") == Decimal("-5")


class TestValidateDraft:
    """Tests for validate_draft."""

    def test_accepts_valid_draft(self) -> None:
        """Should return a draft with the parsed amount."""
        draft, error = validate_draft("Lunch", "25.50", "Luiz", "Alimentação")

        assert error is None
        assert draft is not None
        assert draft.description == "Lunch"
        assert draft.amount == Decimal("25.50")
        assert draft.payer == "Luiz"
        assert draft.category == "Alimentação"

    def test_empty_description(self) -> None:
        """Should reject an empty description."""
        draft, error = validate_draft("", "10", "Luiz", "Lazer")

        assert draft is None
        assert error == DESCRIPTION_REQUIRED

    def test_blank_description_is_not_trimmed(self) -> None:
        """Should accept a whitespace-only description (no trimming)."""
        draft, error = validate_draft("   ", "10", "Luiz", "Lazer")

        assert error is None
        assert draft is not None
        assert draft.description == "   "

    def test_negative_amount(self) -> None:
        """Should reject a negative amount."""
        draft, error = validate_draft("Lunch", "-5", "Luiz", "Lazer")

        assert draft is None
        assert error == AMOUNT_INVALID

    def test_zero_amount(self) -> None:
        """Should reject zero."""
        _, error = validate_draft("Lunch", "0", "Luiz", "Lazer")
        assert error == AMOUNT_INVALID

    def test_unparsable_amount(self) -> None:
        """Should reject text that is not a number."""
        _, error = validate_draft("Lunch", "ten", "Luiz", "Lazer")
        assert error == AMOUNT_INVALID

    def test_empty_payer(self) -> None:
        """Should reject a missing payer."""
        _, error = validate_draft("Lunch", "10", "", "Lazer")
        assert error == PAYER_REQUIRED

    def test_empty_category(self) -> None:
        """Should reject a missing category."""
        _, error = validate_draft("Lunch", "10", "Luiz", "")
        assert error == CATEGORY_REQUIRED

    def test_reports_first_failure_only(self) -> None:
        """Should report only the first violated rule, in order."""
        _, error = validate_draft("", "-1", "", "")
        assert error == DESCRIPTION_REQUIRED

        _, error = validate_draft("Lunch", "-1", "", "")
        assert error == AMOUNT_INVALID

        _, error = validate_draft("Lunch", "1", "", "")
        assert error == PAYER_REQUIRED

    def test_unknown_payer_when_payers_given(self) -> None:
        """Should reject a payer outside the configured list."""
        _, error = validate_draft("Lunch", "10", "Someone", "Lazer", payers=PAYERS)
        assert error == PAYER_REQUIRED

    def test_unknown_category_when_categories_given(self) -> None:
        """Should reject a category outside the given list."""
        _, error = validate_draft("Lunch", "10", "Luiz", "Hospedagem", PAYERS, CATEGORIES)
        assert error == CATEGORY_REQUIRED

    def test_any_category_without_list(self) -> None:
        """Should accept any non-empty category when no list is given."""
        draft, error = validate_draft("Lunch", "10", "Luiz", "Anything", PAYERS)
        assert error is None
        assert draft is not None


class TestIsStorableAmount:
    """Tests for is_storable_amount."""

    def test_typical_amounts(self) -> None:
        """Should accept amounts a user types."""
        for text in ("25.50", "0.01", "1234567.89", "100"):
            assert is_storable_amount(Decimal(text)) is True

    def test_out_of_range(self) -> None:
        """Should reject amounts that overflow, underflow or lose digits."""
        for text in ("1e400", "1e-400", "0.12345678901234567890"):
            assert is_storable_amount(Decimal(text)) is False

    def test_gate_rejects_unstorable(self) -> None:
        """Should report the amount message for an unstorable amount."""
        _, error = validate_draft("Lunch", "1e400", "Luiz", "Lazer")
        assert error == AMOUNT_INVALID
