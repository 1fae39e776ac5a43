"""SQLModel implementation of the entity store boundary."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence, TypeVar

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from ..domain.predicates import Predicate, SortKey, column_for, to_order_by, to_where
from ..errors import NotFound, StorageError
from ..logging_config import get_logger
from .database import SessionFactory

logger = get_logger(__name__)

RecordT = TypeVar("RecordT")


def _load_relationships(record: Any) -> None:
    """Touch every relationship so it is populated before the record is detached."""
    for relationship in sa_inspect(type(record)).relationships:
        getattr(record, relationship.key)


class SQLModelEntityStore:
    """Entity store over SQLModel sessions.

    Every call runs in its own session scope and returns detached objects.
    Writes are serialized through an internal lock.
    """

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory
        self._write_lock = threading.RLock()

    @contextmanager
    def _storage_errors(self, action: str, kind: type) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error(f"Failed to {action} {kind.__name__}: {exc}", exc_info=True)
            raise StorageError(f"Could not {action} {kind.__name__.lower()}: {exc}") from exc

    def query(
        self,
        kind: type[RecordT],
        predicate: Optional[Predicate] = None,
        sort_keys: Sequence[SortKey] = (),
    ) -> list[RecordT]:
        """Return every record of ``kind`` matching ``predicate`` in ``sort_keys`` order."""
        statement = select(kind).where(to_where(predicate, kind))
        order_by = to_order_by(sort_keys, kind)
        if order_by:
            statement = statement.order_by(*order_by)

        with self._storage_errors("query", kind):
            with self.session_factory() as session:
                rows = list(session.exec(statement).all())
                session.expunge_all()
                return rows

    def get(self, kind: type[RecordT], record_id: Any) -> Optional[RecordT]:
        """Return the record with ``record_id`` or ``None``."""
        with self._storage_errors("load", kind):
            with self.session_factory() as session:
                obj = session.get(kind, record_id)
                if obj is not None:
                    _load_relationships(obj)
                    session.expunge_all()
                return obj

    def insert(self, record: RecordT) -> RecordT:
        """Persist a new record and return it refreshed from the store."""
        kind = type(record)
        with self._write_lock, self._storage_errors("create", kind):
            with self.session_factory() as session:
                session.add(record)
                session.commit()
                session.refresh(record)
                _load_relationships(record)
                session.expunge_all()
                return record

    def save(self, record: RecordT) -> bool:
        """Copy changed columns of ``record`` onto its persisted row.

        Returns False without writing when nothing changed. Raises ``NotFound``
        if the row was deleted since ``record`` was read; it is never re-created.
        """
        kind = type(record)
        record_id = getattr(record, "id", None)
        with self._write_lock, self._storage_errors("update", kind):
            with self.session_factory() as session:
                current = session.get(kind, record_id)
                if current is None:
                    raise NotFound(kind.__name__, record_id)

                changes = {
                    name: getattr(record, name)
                    for name in kind.model_fields  # type: ignore[attr-defined]
                    if getattr(current, name) != getattr(record, name)
                }
                if not changes:
                    return False

                for name, value in changes.items():
                    setattr(current, name, value)
                session.add(current)
                session.commit()
                return True

    def delete(
        self,
        kind: type[Any],
        record_id: Any,
        *,
        nullify: Sequence[tuple[type[Any], str]] = (),
    ) -> None:
        """Delete a record; ``nullify`` lists ``(kind, field)`` references to clear first.

        Raises ``NotFound`` when the record is already gone.
        """
        with self._write_lock, self._storage_errors("delete", kind):
            with self.session_factory() as session:
                current = session.get(kind, record_id)
                if current is None:
                    raise NotFound(kind.__name__, record_id)

                for ref_kind, ref_field in nullify:
                    column = column_for(ref_kind, ref_field)
                    for row in session.exec(select(ref_kind).where(column == record_id)).all():
                        setattr(row, ref_field, None)
                        session.add(row)

                session.delete(current)
                session.commit()
