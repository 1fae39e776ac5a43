"""Store-backed implementation of the Transaction repository."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ...domain.predicates import Predicate, SortKey, field
from ...domain.store import EntityStore
from ...errors import ValidationError
from ...logging_config import get_logger
from ...models.category import Category
from ...models.transaction import Transaction, TransactionType
from ...services.filtering import TransactionFilter
from ...services.validation import ensure_positive_amount, parse_transaction_type

logger = get_logger(__name__)

RECENT_FIRST: tuple[SortKey, ...] = (("date", False),)


class SQLModelTransactionRepository:
    """Transaction repository over an explicit entity store handle."""

    def __init__(self, store: EntityStore):
        """Initialize with the store every call goes through."""
        self.store = store

    def fetch_all(self) -> list[Transaction]:
        """List all transactions, most recent first."""
        return self.fetch(None, RECENT_FIRST)

    def fetch(
        self, predicate: Optional[Predicate] = None, order: Sequence[SortKey] = ()
    ) -> list[Transaction]:
        return self.store.query(Transaction, predicate, order)

    def fetch_by_filter(self, kind: TransactionFilter | str) -> list[Transaction]:
        """Push the all/income/expense filter down to the store."""
        return self.fetch(TransactionFilter.coerce(kind).predicate, RECENT_FIRST)

    def fetch_by_date_range(self, start: datetime, end: datetime) -> list[Transaction]:
        """Transactions dated within ``[start, end]``, most recent first."""
        if start > end:
            raise ValidationError("Start date must not be after end date.")
        return self.fetch(field("date").between(start, end), RECENT_FIRST)

    def get(self, transaction_id: uuid.UUID) -> Optional[Transaction]:
        return self.store.get(Transaction, transaction_id)

    def create(
        self,
        amount: Decimal | int | float | str,
        type: TransactionType | str,
        date: Optional[datetime] = None,
        note: Optional[str] = None,
        category: Optional[Category] = None,
    ) -> Transaction:
        """Create a transaction; ``amount`` must be positive whatever the caller validated."""
        transaction = Transaction(
            amount=ensure_positive_amount(amount),
            type=parse_transaction_type(type).value,
            date=date or datetime.now(),
            note=note,
            category_id=category.id if category is not None else None,
        )
        created = self.store.insert(transaction)
        logger.info(
            f"Transaction created: {created.type} {created.amount}",
            extra={"transaction_id": str(created.id)},
        )
        return created

    def update(self, transaction: Transaction) -> bool:
        """Persist in-memory edits; returns False when nothing changed.

        The ``category`` relationship is authoritative for the stored reference.
        A category deleted since ``transaction`` was read resolves to no category.
        """
        transaction.amount = ensure_positive_amount(transaction.amount)
        transaction.type = parse_transaction_type(transaction.type).value
        category = transaction.category
        if category is not None and self.store.get(Category, category.id) is None:
            logger.info(
                f"Dropping deleted category from transaction: {category.name}",
                extra={"transaction_id": str(transaction.id), "category_id": str(category.id)},
            )
            transaction.category = category = None
        transaction.category_id = category.id if category is not None else None

        changed = self.store.save(transaction)
        if changed:
            logger.info(
                f"Transaction updated: {transaction.type} {transaction.amount}",
                extra={"transaction_id": str(transaction.id)},
            )
        return changed

    def delete(self, transaction: Transaction) -> None:
        """Delete ``transaction``; raises ``NotFound`` if it was already deleted."""
        self.store.delete(Transaction, transaction.id)
        logger.info("Transaction deleted", extra={"transaction_id": str(transaction.id)})
