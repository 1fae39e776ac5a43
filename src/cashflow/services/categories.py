"""Category form binding plus create/edit/delete helpers for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..constants.categories import DEFAULT_COLOR, DEFAULT_ICON
from ..domain.repositories import CategoryRepository
from ..errors import LedgerError, NotFound, ValidationError
from ..logging_config import get_logger
from ..models.category import Category
from .validation import validate_category_name

logger = get_logger(__name__)


@dataclass(slots=True)
class CategoryForm:
    """Represents category input prior to validation."""

    name: str = ""
    icon: str = DEFAULT_ICON
    color: str = DEFAULT_COLOR
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)

    @classmethod
    def from_category(cls, category: Category) -> CategoryForm:
        """Prefill the form for editing ``category``."""

        return cls(
            name=category.name or "",
            icon=category.icon or DEFAULT_ICON,
            color=category.color or DEFAULT_COLOR,
        )

    @property
    def is_valid(self) -> bool:
        return bool(self.name.strip())

    def validate(self) -> bool:
        self.errors.clear()
        try:
            self.name = validate_category_name(self.name)
        except ValidationError as exc:
            self.errors.setdefault("name", []).append(exc.message)
        return not self.errors

    def reset(self) -> None:
        self.name = ""
        self.icon = DEFAULT_ICON
        self.color = DEFAULT_COLOR
        self.errors.clear()


def save_category(
    repository: CategoryRepository,
    form: CategoryForm,
    *,
    existing: Optional[Category] = None,
) -> Category:
    """Create a category from ``form``, or apply it to ``existing``.

    If the update fails, ``existing`` gets its previous values back.
    """

    if not form.validate():
        raise ValidationError("; ".join(form.errors["name"]))

    if existing is None:
        return repository.create(form.name, form.icon, form.color)

    previous = (existing.name, existing.icon, existing.color)
    existing.name, existing.icon, existing.color = form.name, form.icon, form.color
    try:
        repository.update(existing)
    except LedgerError:
        existing.name, existing.icon, existing.color = previous
        raise
    return existing


def delete_category(repository: CategoryRepository, category: Category) -> bool:
    """Delete ``category``. Returns False when it was already gone, which counts as success."""

    try:
        repository.delete(category)
    except NotFound:
        logger.info(f"Category already deleted: {category.name}")
        return False
    return True


__all__ = ["CategoryForm", "delete_category", "save_category"]
