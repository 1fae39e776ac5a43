"""Store-backed implementation of the Category repository."""

from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ...domain.predicates import Predicate, SortKey, field
from ...domain.store import EntityStore
from ...logging_config import get_logger
from ...models.category import Category
from ...models.transaction import Transaction
from ...services.validation import validate_category_name

logger = get_logger(__name__)

NAME_ORDER: tuple[SortKey, ...] = (("name", True),)


class SQLModelCategoryRepository:
    """Category repository over an explicit entity store handle."""

    def __init__(self, store: EntityStore):
        """Initialize with the store every call goes through."""
        self.store = store

    def fetch_all(self) -> list[Category]:
        """List all categories ordered by name (binary, case-sensitive collation)."""
        return self.fetch(None, NAME_ORDER)

    def fetch(
        self, predicate: Optional[Predicate] = None, order: Sequence[SortKey] = ()
    ) -> list[Category]:
        return self.store.query(Category, predicate, order)

    def get(self, category_id: uuid.UUID) -> Optional[Category]:
        return self.store.get(Category, category_id)

    def fetch_by_name(self, name: str) -> Optional[Category]:
        """Exact, case-sensitive name lookup; a convenience, not a uniqueness check."""
        matches = self.fetch(field("name") == name, NAME_ORDER)
        return matches[0] if matches else None

    def create(
        self, name: str, icon: Optional[str] = None, color: Optional[str] = None
    ) -> Category:
        """Create a new category after trimming ``name``."""
        category = Category(name=validate_category_name(name), icon=icon, color=color)
        created = self.store.insert(category)
        logger.info(f"Category created: {created.name}", extra={"category_id": str(created.id)})
        return created

    def update(self, category: Category) -> bool:
        """Persist in-memory edits; returns False when nothing changed."""
        category.name = validate_category_name(category.name)
        changed = self.store.save(category)
        if changed:
            logger.info(f"Category updated: {category.name}", extra={"category_id": str(category.id)})
        return changed

    def delete(self, category: Category) -> None:
        """Delete ``category``; referencing transactions become uncategorized.

        Raises ``NotFound`` if the category was already deleted.
        """
        self.store.delete(Category, category.id, nullify=((Transaction, "category_id"),))
        logger.info(f"Category deleted: {category.name}", extra={"category_id": str(category.id)})
