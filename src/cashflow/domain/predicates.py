"""Composable filter expressions over entity fields.

A predicate can be evaluated in memory with :meth:`Predicate.matches` or pushed
down to the store with :meth:`Predicate.to_clause`. Both paths agree on the
records they select, which keeps in-memory filtering usable for tests.

Example::

    kind = field("type") == "income"
    recent = field("date").between(start, end)
    rows = store.query(Transaction, kind & recent, [("date", False)])
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence

from sqlalchemy import and_, not_, or_, true

from ..errors import ValidationError

SortKey = tuple[str, bool]

_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "eq": operator.eq,
    "ne": operator.ne,
    "lt": operator.lt,
    "le": operator.le,
    "gt": operator.gt,
    "ge": operator.ge,
}


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def column_for(model: type, name: str):
    """Return the mapped column for ``name`` or raise ValidationError."""

    if name not in getattr(model, "model_fields", {}):
        raise ValidationError(f"{model.__name__} has no field named {name!r}.")
    return getattr(model, name)


class Predicate:
    """Base class for filter expressions."""

    def matches(self, record: Any) -> bool:  # pragma: no cover - interface
        raise NotImplementedError

    def to_clause(self, model: type):  # pragma: no cover - interface
        raise NotImplementedError

    def __and__(self, other: Predicate) -> Predicate:
        return And((self, other))

    def __or__(self, other: Predicate) -> Predicate:
        return Or((self, other))

    def __invert__(self) -> Predicate:
        return Not(self)


@dataclass(frozen=True, eq=False)
class Comparison(Predicate):
    name: str
    op: str
    value: Any

    def matches(self, record: Any) -> bool:
        actual = _plain(getattr(record, self.name, None))
        expected = _plain(self.value)
        if self.op in {"eq", "ne"}:
            return _OPERATORS[self.op](actual, expected)
        if actual is None or expected is None:
            return False
        try:
            return _OPERATORS[self.op](actual, expected)
        except TypeError:
            return False

    def to_clause(self, model: type):
        column = column_for(model, self.name)
        return _OPERATORS[self.op](column, _plain(self.value))


@dataclass(frozen=True, eq=False)
class Between(Predicate):
    """Inclusive range test on both bounds."""

    name: str
    low: Any
    high: Any

    def matches(self, record: Any) -> bool:
        actual = getattr(record, self.name, None)
        if actual is None:
            return False
        try:
            return self.low <= actual <= self.high
        except TypeError:
            return False

    def to_clause(self, model: type):
        column = column_for(model, self.name)
        return and_(column >= self.low, column <= self.high)


@dataclass(frozen=True, eq=False)
class Contains(Predicate):
    """Case-insensitive substring test."""

    name: str
    text: str

    def matches(self, record: Any) -> bool:
        actual = getattr(record, self.name, None)
        if not isinstance(actual, str):
            return False
        return self.text.casefold() in actual.casefold()

    def to_clause(self, model: type):
        escaped = self.text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return column_for(model, self.name).ilike(f"%{escaped}%", escape="\\")


@dataclass(frozen=True, eq=False)
class IsNone(Predicate):
    name: str

    def matches(self, record: Any) -> bool:
        return getattr(record, self.name, None) is None

    def to_clause(self, model: type):
        return column_for(model, self.name).is_(None)


@dataclass(frozen=True, eq=False)
class And(Predicate):
    parts: tuple[Predicate, ...]

    def matches(self, record: Any) -> bool:
        return all(part.matches(record) for part in self.parts)

    def to_clause(self, model: type):
        return and_(*(part.to_clause(model) for part in self.parts))


@dataclass(frozen=True, eq=False)
class Or(Predicate):
    parts: tuple[Predicate, ...]

    def matches(self, record: Any) -> bool:
        return any(part.matches(record) for part in self.parts)

    def to_clause(self, model: type):
        return or_(*(part.to_clause(model) for part in self.parts))


@dataclass(frozen=True, eq=False)
class Not(Predicate):
    inner: Predicate

    def matches(self, record: Any) -> bool:
        return not self.inner.matches(record)

    def to_clause(self, model: type):
        return not_(self.inner.to_clause(model))


class FieldRef:
    """Builder returned by :func:`field`; comparison operators yield predicates."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, value: Any) -> Predicate:  # type: ignore[override]
        return Comparison(self.name, "eq", value)

    def __ne__(self, value: Any) -> Predicate:  # type: ignore[override]
        return Comparison(self.name, "ne", value)

    def __lt__(self, value: Any) -> Predicate:
        return Comparison(self.name, "lt", value)

    def __le__(self, value: Any) -> Predicate:
        return Comparison(self.name, "le", value)

    def __gt__(self, value: Any) -> Predicate:
        return Comparison(self.name, "gt", value)

    def __ge__(self, value: Any) -> Predicate:
        return Comparison(self.name, "ge", value)

    def between(self, low: Any, high: Any) -> Predicate:
        return Between(self.name, low, high)

    def contains(self, text: str) -> Predicate:
        return Contains(self.name, text)

    def is_none(self) -> Predicate:
        return IsNone(self.name)


def field(name: str) -> FieldRef:
    """Start a predicate over the entity field ``name``."""

    return FieldRef(name)


def to_where(predicate: Predicate | None, model: type):
    """Translate an optional predicate to a SQL clause (``TRUE`` when absent)."""

    if predicate is None:
        return true()
    return predicate.to_clause(model)


def to_order_by(sort_keys: Sequence[SortKey], model: type) -> list:
    """Translate ``(field, ascending)`` pairs to ORDER BY expressions."""

    clauses = []
    for name, ascending in sort_keys:
        column = column_for(model, name)
        clauses.append(column.asc() if ascending else column.desc())
    return clauses


__all__ = [
    "And",
    "Between",
    "Comparison",
    "Contains",
    "FieldRef",
    "IsNone",
    "Not",
    "Or",
    "Predicate",
    "SortKey",
    "column_for",
    "field",
    "to_order_by",
    "to_where",
]
