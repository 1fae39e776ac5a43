"""Transaction list workflow: filtered loading, search, day grouping and deletes."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..domain.repositories import TransactionRepository
from ..errors import LedgerError, NotFound
from ..logging_config import get_logger
from ..models.transaction import Transaction
from . import aggregation
from .filtering import TransactionFilter, search

logger = get_logger(__name__)


def delete_transaction(repository: TransactionRepository, transaction: Transaction) -> bool:
    """Delete ``transaction``. Returns False when it was already gone, which counts as success."""

    try:
        repository.delete(transaction)
    except NotFound:
        logger.info(
            "Transaction already deleted",
            extra={"transaction_id": str(transaction.id)},
        )
        return False
    return True


class TransactionList:
    """Backs the transaction list screen.

    ``load`` pushes the type filter down to the repository, then applies the
    free-text search in memory. Deletes reload the list afterwards.
    """

    def __init__(self, repository: TransactionRepository) -> None:
        self.repository = repository
        self.kind = TransactionFilter.ALL
        self.query = ""
        self.transactions: list[Transaction] = []
        self.error_message: Optional[str] = None

    def load(
        self,
        kind: Optional[TransactionFilter | str] = None,
        query: Optional[str] = None,
    ) -> list[Transaction]:
        if kind is not None:
            self.kind = TransactionFilter.coerce(kind)
        if query is not None:
            self.query = query
        try:
            fetched = self.repository.fetch_by_filter(self.kind)
        except LedgerError as exc:
            logger.error(f"Failed to load transactions: {exc}", exc_info=True)
            self.error_message = exc.message
            return self.transactions
        self.error_message = None
        self.transactions = search(fetched, self.query)
        return self.transactions

    def grouped(self, *, now: Optional[datetime] = None) -> list[aggregation.DayGroup]:
        return aggregation.group_by_day(self.transactions, now=now)

    def delete(self, transaction: Transaction) -> bool:
        """Delete one transaction and reload; an already deleted one is not an error."""

        deleted = delete_transaction(self.repository, transaction)
        self.load()
        return deleted

    def delete_at(self, positions: Iterable[int]) -> int:
        """Delete the transactions at ``positions`` of the current list; returns how many were removed."""

        targets = [self.transactions[index] for index in sorted(set(positions))]
        removed = sum(delete_transaction(self.repository, tx) for tx in targets)
        self.load()
        return removed


__all__ = ["TransactionList", "delete_transaction"]
