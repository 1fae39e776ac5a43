"""Derived ledger figures computed from an already-fetched transaction list.

Nothing here touches the store. Degenerate input (empty lists, missing dates,
missing amounts, unknown types) yields a defined result instead of raising.
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable, NamedTuple, Optional, Sequence

from ..models.category import Category
from ..models.transaction import Transaction, TransactionType

ZERO = Decimal("0")


class CategoryTotal(NamedTuple):
    """Expense total for one category."""

    category: Category
    total: Decimal


class DayGroup(NamedTuple):
    """Transactions sharing the same calendar day."""

    day: datetime
    transactions: list[Transaction]


def _amount(tx: Any) -> Decimal:
    value = getattr(tx, "amount", None)
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    try:
        parsed = Decimal(str(value))
    except InvalidOperation:
        return ZERO
    return parsed if parsed.is_finite() else ZERO


def _type(tx: Any) -> Any:
    value = getattr(tx, "type", None)
    return value.value if isinstance(value, Enum) else value


def signed_amount(tx: Any) -> Decimal:
    """``amount`` for income, ``-amount`` for anything else."""

    amount = _amount(tx)
    return amount if _type(tx) == TransactionType.INCOME.value else -amount


def balance(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of signed values; 0 for an empty list."""

    return sum((signed_amount(tx) for tx in transactions), ZERO)


def _total_for(transactions: Iterable[Transaction], kind: TransactionType) -> Decimal:
    return sum((_amount(tx) for tx in transactions if _type(tx) == kind.value), ZERO)


def monthly_income(transactions: Iterable[Transaction]) -> Decimal:
    """Total income of a caller-filtered set (see :func:`current_month_range`)."""

    return _total_for(transactions, TransactionType.INCOME)


def monthly_expense(transactions: Iterable[Transaction]) -> Decimal:
    """Total expense of a caller-filtered set (see :func:`current_month_range`)."""

    return _total_for(transactions, TransactionType.EXPENSE)


def current_month_range(now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """Return ``(start_of_month, now)`` in the local calendar."""

    now = now or datetime.now()
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return start, now


def top_categories(transactions: Iterable[Transaction], n: int = 5) -> list[CategoryTotal]:
    """Rank categories by expense total, highest first.

    Uncategorized expenses are left out. Equal totals are ordered by category
    name, then by id, so the ranking is deterministic.
    """

    if n <= 0:
        return []

    categories: dict[Any, Category] = {}
    totals: dict[Any, Decimal] = {}
    for tx in transactions:
        if _type(tx) != TransactionType.EXPENSE.value:
            continue
        category = getattr(tx, "category", None)
        if category is None:
            continue
        key = getattr(category, "id", None) or id(category)
        categories.setdefault(key, category)
        totals[key] = totals.get(key, ZERO) + _amount(tx)

    ranked = sorted(
        totals,
        key=lambda key: (
            -totals[key],
            getattr(categories[key], "name", None) or "",
            str(getattr(categories[key], "id", "")),
        ),
    )
    return [CategoryTotal(categories[key], totals[key]) for key in ranked[:n]]


def _start_of_day(value: Any, fallback: datetime) -> datetime:
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.min)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return datetime.combine(fallback.date(), time.min)


def group_by_day(
    transactions: Iterable[Transaction], *, now: Optional[datetime] = None
) -> list[DayGroup]:
    """Group by calendar day, newest day first.

    Transactions keep their input order within a day. An item without a date
    is grouped under today.
    """

    fallback = now or datetime.now()
    groups: dict[datetime, list[Transaction]] = {}
    for tx in transactions:
        day = _start_of_day(getattr(tx, "date", None), fallback)
        groups.setdefault(day, []).append(tx)
    return [DayGroup(day, groups[day]) for day in sorted(groups, reverse=True)]


def recent(transactions: Sequence[Transaction], limit: int = 10) -> list[Transaction]:
    """First ``limit`` items of an already date-descending list."""

    return list(transactions[: max(limit, 0)])


__all__ = [
    "CategoryTotal",
    "DayGroup",
    "balance",
    "current_month_range",
    "group_by_day",
    "monthly_expense",
    "monthly_income",
    "recent",
    "signed_amount",
    "top_categories",
]
