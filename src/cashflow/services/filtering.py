"""Type filter and free-text search over transaction lists."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional

from ..domain.predicates import Predicate, field
from ..errors import ValidationError
from ..models.transaction import Transaction, TransactionType


class TransactionFilter(str, Enum):
    """Ledger list filter; each member maps to a store predicate."""

    ALL = "all"
    INCOME = "income"
    EXPENSE = "expense"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def predicate(self) -> Optional[Predicate]:
        """Predicate to push down to the store; ``None`` means no filtering."""
        if self is TransactionFilter.ALL:
            return None
        return field("type") == TransactionType(self.value).value

    @classmethod
    def coerce(cls, value: TransactionFilter | str) -> TransactionFilter:
        if isinstance(value, cls):
            return value
        raw = value.value if isinstance(value, Enum) else value
        try:
            return cls(str(raw).strip().lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown transaction filter: {value!r}.") from exc


def filter_by_type(
    transactions: Iterable[Transaction], kind: TransactionFilter | str = TransactionFilter.ALL
) -> list[Transaction]:
    """In-memory equivalent of pushing ``kind.predicate`` down to the store."""

    predicate = TransactionFilter.coerce(kind).predicate
    if predicate is None:
        return list(transactions)
    return [tx for tx in transactions if predicate.matches(tx)]


def _contains(haystack: Any, needle: str) -> bool:
    return isinstance(haystack, str) and needle in haystack.casefold()


def search(transactions: Iterable[Transaction], query: Optional[str]) -> list[Transaction]:
    """Case-insensitive match of ``query`` against the note or the category name.

    A blank query returns the input unchanged.
    """

    needle = (query or "").strip().casefold()
    if not needle:
        return list(transactions)

    results = []
    for tx in transactions:
        category = getattr(tx, "category", None)
        category_name = getattr(category, "name", None) if category is not None else None
        if _contains(getattr(tx, "note", None), needle) or _contains(category_name, needle):
            results.append(tx)
    return results


__all__ = ["TransactionFilter", "filter_by_type", "search"]
