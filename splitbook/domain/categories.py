"""Pure functions for the ordered category list.

Every function returns (new_categories, changed). When nothing changes the
original list is returned as-is.
"""

from splitbook.domain.models import CategoryName


def add_category(categories: list[CategoryName], name: str) -> tuple[list[CategoryName], bool]:
    """Append a category if it is new.

    The name is trimmed first. Empty names and exact (case-sensitive) duplicates
    are rejected.

    Args:
        categories: Current category list.
        name: Candidate category name.

    Returns:
        Tuple of (new_categories, added).
    """
    trimmed = name.strip()
    if not trimmed or trimmed in categories:
        return categories, False
    return [*categories, CategoryName(trimmed)], True


def rename_category_at(
    categories: list[CategoryName], index: int, new_name: str | None
) -> tuple[list[CategoryName], bool]:
    """Rename the category at a position.

    The new name is used as given: it is not trimmed and may duplicate another
    entry. Expenses that use the old name keep it.

    Args:
        categories: Current category list.
        index: Zero-based position.
        new_name: Replacement name.

    Returns:
        Tuple of (new_categories, renamed).
    """
    if not new_name or not 0 <= index < len(categories):
        return categories, False
    updated = list(categories)
    updated[index] = CategoryName(new_name)
    return updated, True


def remove_category_at(categories: list[CategoryName], index: int) -> tuple[list[CategoryName], bool]:
    """Remove the category at a position.

    Expenses that use the removed name keep it.

    Args:
        categories: Current category list.
        index: Zero-based position.

    Returns:
        Tuple of (new_categories, removed).
    """
    if not 0 <= index < len(categories):
        return categories, False
    return categories[:index] + categories[index + 1 :], True
