"""Dashboard summary assembled on request from the transaction repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..domain.repositories import TransactionRepository
from ..models.transaction import Transaction
from . import aggregation


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    """Aggregate figures shown on the dashboard."""

    balance: Decimal = Decimal("0")
    monthly_income: Decimal = Decimal("0")
    monthly_expense: Decimal = Decimal("0")
    recent_transactions: list[Transaction] = field(default_factory=list)
    top_categories: list[aggregation.CategoryTotal] = field(default_factory=list)


def load_dashboard(
    repository: TransactionRepository,
    *,
    now: Optional[datetime] = None,
    recent_limit: int = 10,
    top_n: int = 5,
) -> DashboardSummary:
    """Read the ledger and compute the dashboard figures.

    Balance and recent activity cover every transaction. Monthly totals and
    the category ranking cover the current month up to ``now``.
    """

    start, end = aggregation.current_month_range(now)
    all_transactions = repository.fetch_all()
    month_transactions = repository.fetch_by_date_range(start, end)

    return DashboardSummary(
        balance=aggregation.balance(all_transactions),
        monthly_income=aggregation.monthly_income(month_transactions),
        monthly_expense=aggregation.monthly_expense(month_transactions),
        recent_transactions=aggregation.recent(all_transactions, recent_limit),
        top_categories=aggregation.top_categories(month_transactions, top_n),
    )
