"""Sample data seed used for previews and demos."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from ..constants.categories import SAMPLE_CATEGORIES, SAMPLE_TRANSACTIONS
from ..domain.repositories import CategoryRepository, TransactionRepository
from ..logging_config import get_logger
from ..models.transaction import TransactionType

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SeedSummary:
    categories: int
    transactions: int


def seed_sample_data(
    category_repo: CategoryRepository,
    transaction_repo: TransactionRepository,
    *,
    now: Optional[datetime] = None,
) -> SeedSummary:
    """Create the sample categories and transactions.

    Existing categories with the same name are reused, so running it twice does
    not duplicate categories (transactions are always added).
    """

    now = now or datetime.now()
    by_name = {}
    created_categories = 0
    for name, icon, color in SAMPLE_CATEGORIES:
        category = category_repo.fetch_by_name(name)
        if category is None:
            category = category_repo.create(name, icon, color)
            created_categories += 1
        by_name[name] = category

    for note, signed, category_name, days_ago in SAMPLE_TRANSACTIONS:
        value = Decimal(signed)
        transaction_repo.create(
            amount=abs(value),
            type=TransactionType.INCOME if value > 0 else TransactionType.EXPENSE,
            date=now - timedelta(days=days_ago),
            note=note,
            category=by_name[category_name],
        )

    summary = SeedSummary(categories=created_categories, transactions=len(SAMPLE_TRANSACTIONS))
    logger.info(
        "Sample data seeded",
        extra={"categories": summary.categories, "transactions": summary.transactions},
    )
    return summary
