"""Category store: owns the ordered category list."""

import logging
from collections.abc import Callable
from pathlib import Path

from splitbook.domain.categories import add_category, remove_category_at, rename_category_at
from splitbook.domain.models import DEFAULT_CATEGORIES, CategoryName
from splitbook.store.persistence import load_categories, save_categories

logger = logging.getLogger(__name__)


class CategoryStore:
    """The category list, seeded with defaults.

    Without a ``save`` hook the list only lives as long as the store object,
    so each session starts again from the seed.
    """

    def __init__(
        self,
        categories: list[CategoryName] | None = None,
        save: Callable[[list[CategoryName]], None] | None = None,
    ) -> None:
        self._categories: list[CategoryName] = list(DEFAULT_CATEGORIES if categories is None else categories)
        self._save = save

    @classmethod
    def open(
        cls,
        seed: list[CategoryName] | None = None,
        persist: bool = False,
        db_path: Path | None = None,
    ) -> "CategoryStore":
        """Create the store for a session.

        Args:
            seed: Starting categories. If None, uses the defaults.
            persist: Load from and save to the database instead of starting
                from the seed every session.
            db_path: Path to the database file. If None, uses default location.

        Returns:
            CategoryStore for the session.
        """
        if not persist:
            return cls(seed)

        stored = load_categories(db_path)
        return cls(
            stored if stored is not None else seed,
            save=lambda categories: save_categories(categories, db_path),
        )

    def _commit(self, categories: list[CategoryName]) -> None:
        self._categories = categories
        if self._save is not None:
            self._save(list(categories))

    def add(self, name: str) -> bool:
        """Append a trimmed, non-empty, not yet present category."""
        categories, added = add_category(self._categories, name)
        if added:
            self._commit(categories)
            logger.debug("Added category %r", categories[-1])
        return added

    def rename_at(self, index: int, new_name: str | None) -> bool:
        """Rename the category at a zero-based position."""
        categories, renamed = rename_category_at(self._categories, index, new_name)
        if renamed:
            logger.debug("Renamed category %r to %r", self._categories[index], new_name)
            self._commit(categories)
        return renamed

    def remove_at(self, index: int) -> bool:
        """Remove the category at a zero-based position."""
        categories, removed = remove_category_at(self._categories, index)
        if removed:
            logger.debug("Removed category %r", self._categories[index])
            self._commit(categories)
        return removed

    def list(self) -> list[CategoryName]:
        """Snapshot of the categories in display order."""
        return list(self._categories)

    def __len__(self) -> int:
        return len(self._categories)
