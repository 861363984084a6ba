"""Tests for splitbook.domain.categories pure functions."""

from splitbook.domain.categories import add_category, remove_category_at, rename_category_at
from splitbook.domain.models import DEFAULT_CATEGORIES, CategoryName

SEED = [CategoryName("Alimentação"), CategoryName("Lazer")]


class TestAddCategory:
    """Tests for add_category."""

    def test_appends_new_name(self) -> None:
        """Should append a new category at the end."""
        result, added = add_category(SEED, "Mercado")

        assert added is True
        assert result == ["Alimentação", "Lazer", "Mercado"]

    def test_trims_name(self) -> None:
        """Should store the trimmed name."""
        result, added = add_category(SEED, "  Mercado  ")

        assert added is True
        assert result[-1] == "Mercado"

    def test_rejects_empty_and_blank(self) -> None:
        """Should reject empty and whitespace-only names."""
        for name in ("", "  "):
            result, added = add_category(SEED, name)
            assert added is False
            assert result == SEED

    def test_rejects_existing(self) -> None:
        """Should reject an exact duplicate, also after trimming."""
        for name in ("Lazer", " Lazer "):
            result, added = add_category(SEED, name)
            assert added is False
            assert result == SEED

    def test_duplicate_check_is_case_sensitive(self) -> None:
        """Should treat a different case as a new category."""
        result, added = add_category(SEED, "lazer")

        assert added is True
        assert result[-1] == "lazer"


class TestRenameCategoryAt:
    """Tests for rename_category_at."""

    def test_renames_in_place(self) -> None:
        """Should replace the name at the index, keeping order."""
        result, renamed = rename_category_at(SEED, 0, "Comida")

        assert renamed is True
        assert result == ["Comida", "Lazer"]
        assert SEED == ["Alimentação", "Lazer"]

    def test_allows_duplicates(self) -> None:
        """Should not check the new name against other entries."""
        result, renamed = rename_category_at(SEED, 0, "Lazer")

        assert renamed is True
        assert result == ["Lazer", "Lazer"]

    def test_rejects_empty_or_none(self) -> None:
        """Should reject an empty or missing name."""
        for name in ("", None):
            result, renamed = rename_category_at(SEED, 0, name)
            assert renamed is False
            assert result == SEED

    def test_rejects_out_of_range(self) -> None:
        """Should reject indexes outside the list, including negatives."""
        for index in (2, -1):
            result, renamed = rename_category_at(SEED, index, "X")
            assert renamed is False
            assert result == SEED


class TestRemoveCategoryAt:
    """Tests for remove_category_at."""

    def test_removes_at_index(self) -> None:
        """Should remove only the entry at the index."""
        result, removed = remove_category_at(list(DEFAULT_CATEGORIES), 1)

        assert removed is True
        assert result == ["Alimentação", "Lazer", "Transporte"]

    def test_rejects_out_of_range(self) -> None:
        """Should leave the list unchanged for a bad index."""
        for index in (5, -1):
            result, removed = remove_category_at(SEED, index)
            assert removed is False
            assert result == SEED
