"""Category repository protocol."""

from __future__ import annotations

import uuid
from typing import Optional, Protocol, Sequence

from ...models.category import Category
from ..predicates import Predicate, SortKey


class CategoryRepository(Protocol):
    """Repository for managing category entities."""

    def fetch_all(self) -> list[Category]:
        """List all categories ordered by name ascending."""
        ...

    def fetch(
        self, predicate: Optional[Predicate] = None, order: Sequence[SortKey] = ()
    ) -> list[Category]:
        """General query over categories."""
        ...

    def get(self, category_id: uuid.UUID) -> Optional[Category]:
        """Retrieve a category by ID."""
        ...

    def create(
        self, name: str, icon: Optional[str] = None, color: Optional[str] = None
    ) -> Category:
        """Create a new category from a trimmed, non-empty name."""
        ...

    def update(self, category: Category) -> bool:
        """Persist mutations already applied to ``category``."""
        ...

    def delete(self, category: Category) -> None:
        """Delete a category without touching the transactions that reference it."""
        ...

    def fetch_by_name(self, name: str) -> Optional[Category]:
        """Return the first category whose name equals ``name``."""
        ...
