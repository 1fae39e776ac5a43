"""Concrete repository implementations over the entity store."""

from .category import SQLModelCategoryRepository
from .transaction import SQLModelTransactionRepository

__all__ = ["SQLModelCategoryRepository", "SQLModelTransactionRepository"]
