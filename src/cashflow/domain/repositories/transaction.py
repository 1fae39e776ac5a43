"""Transaction repository protocol."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Protocol, Sequence

from ...models.category import Category
from ...models.transaction import Transaction, TransactionType
from ..predicates import Predicate, SortKey


class TransactionRepository(Protocol):
    """Repository for managing transaction entities."""

    def fetch_all(self) -> list[Transaction]:
        """List all transactions, most recent first."""
        ...

    def fetch(
        self, predicate: Optional[Predicate] = None, order: Sequence[SortKey] = ()
    ) -> list[Transaction]:
        """General query over transactions."""
        ...

    def get(self, transaction_id: uuid.UUID) -> Optional[Transaction]:
        """Retrieve a transaction by ID."""
        ...

    def create(
        self,
        amount: Decimal | int | float | str,
        type: TransactionType | str,
        date: Optional[datetime] = None,
        note: Optional[str] = None,
        category: Optional[Category] = None,
    ) -> Transaction:
        """Create a new transaction with a positive amount."""
        ...

    def update(self, transaction: Transaction) -> bool:
        """Persist mutations already applied to ``transaction``."""
        ...

    def delete(self, transaction: Transaction) -> None:
        """Delete a transaction."""
        ...

    def fetch_by_date_range(self, start: datetime, end: datetime) -> list[Transaction]:
        """Transactions with ``start <= date <= end``, most recent first."""
        ...

    def fetch_by_filter(self, kind: Any) -> list[Transaction]:
        """Transactions of one type (or all), most recent first."""
        ...
