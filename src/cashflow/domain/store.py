"""Entity store boundary required by the repositories."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, TypeVar

from .predicates import Predicate, SortKey

RecordT = TypeVar("RecordT")


class EntityStore(Protocol):
    """Durable object store with predicate and ordering support.

    Implementations raise ``StorageError`` on I/O failure and ``NotFound`` when
    ``save`` or ``delete`` target a record that is no longer present.
    """

    def query(
        self,
        kind: type[RecordT],
        predicate: Optional[Predicate] = None,
        sort_keys: Sequence[SortKey] = (),
    ) -> list[RecordT]:
        """Return every record of ``kind`` matching ``predicate`` in ``sort_keys`` order."""
        ...

    def get(self, kind: type[RecordT], record_id: Any) -> Optional[RecordT]:
        """Return the record with ``record_id`` or ``None``."""
        ...

    def insert(self, record: RecordT) -> RecordT:
        """Persist a new record, assigning identity if absent."""
        ...

    def save(self, record: RecordT) -> bool:
        """Persist in-place mutations; return False when nothing changed."""
        ...

    def delete(
        self,
        kind: type[Any],
        record_id: Any,
        *,
        nullify: Sequence[tuple[type[Any], str]] = (),
    ) -> None:
        """Remove the record with ``record_id`` after clearing the ``(kind, field)`` references in ``nullify``."""
        ...
