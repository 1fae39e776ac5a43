"""Tests for the pure aggregation functions."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from cashflow.services import aggregation
from tests.conftest import make_category, make_tx


def _ledger():
    food = make_category("Food")
    travel = make_category("Travel")
    return food, travel, [
        make_tx("3500.00", "income", datetime(2026, 10, 16, 9), "Salary"),
        make_tx("85.50", "expense", datetime(2026, 10, 15, 18), "Grocery Store", food),
        make_tx("40.00", "expense", datetime(2026, 10, 15, 8), "Lunch", food),
        make_tx("120.00", "expense", datetime(2026, 10, 12, 7), "Train", travel),
        make_tx("15.00", "expense", datetime(2026, 10, 10, 12), "Cash"),
    ]


def test_balance_sums_signed_values():
    _, _, txs = _ledger()

    expected = sum(
        (t.amount if t.type == "income" else -t.amount for t in txs), Decimal("0")
    )
    assert aggregation.balance(txs) == expected == Decimal("3239.50")


def test_balance_of_empty_list_is_zero():
    assert aggregation.balance([]) == Decimal("0")


def test_balance_is_order_independent():
    _, _, txs = _ledger()

    assert aggregation.balance(list(reversed(txs))) == aggregation.balance(txs)


def test_balance_tolerates_malformed_items():
    txs = [make_tx(None, "income"), make_tx("5.00", None), make_tx(3, "income")]

    assert aggregation.balance(txs) == Decimal("-2")


def test_monthly_totals_are_non_negative_and_split_by_type():
    _, _, txs = _ledger()

    assert aggregation.monthly_income(txs) == Decimal("3500.00")
    assert aggregation.monthly_expense(txs) == Decimal("260.50")
    assert aggregation.monthly_income([]) == Decimal("0")
    assert aggregation.monthly_expense([]) == Decimal("0")


def test_current_month_range_starts_at_first_of_month():
    now = datetime(2026, 10, 18, 14, 5, 33)

    start, end = aggregation.current_month_range(now)

    assert start == datetime(2026, 10, 1)
    assert end == now


def test_top_categories_ranks_expenses_and_skips_uncategorized():
    food, travel, txs = _ledger()

    ranking = aggregation.top_categories(txs)

    assert ranking == [(food, Decimal("125.50")), (travel, Decimal("120.00"))]
    assert ranking[0].category is food
    assert ranking[0].total == Decimal("125.50")


def test_top_categories_ignores_income_in_categories():
    food = make_category("Food")
    txs = [make_tx("500.00", "income", category=food)]

    assert aggregation.top_categories(txs) == []


def test_top_categories_tie_break_by_name():
    alpha, beta, gamma = make_category("Alpha"), make_category("Beta"), make_category("Gamma")
    txs = [
        make_tx("10.00", category=gamma),
        make_tx("10.00", category=beta),
        make_tx("10.00", category=alpha),
        make_tx("99.00", category=beta),
    ]

    ranking = aggregation.top_categories(txs)

    assert [entry.category.name for entry in ranking] == ["Beta", "Alpha", "Gamma"]


def test_top_categories_truncates_to_n():
    cats = [make_category(f"Cat {i}") for i in range(8)]
    txs = [make_tx(f"{i + 1}.00", category=cat) for i, cat in enumerate(cats)]

    ranking = aggregation.top_categories(txs, n=3)

    assert len(ranking) == 3
    totals = [entry.total for entry in ranking]
    assert totals == sorted(totals, reverse=True)
    assert aggregation.top_categories(txs, n=0) == []


def test_group_by_day_keeps_order_and_counts():
    _, _, txs = _ledger()

    groups = aggregation.group_by_day(txs)

    assert [g.day for g in groups] == [
        datetime(2026, 10, 16),
        datetime(2026, 10, 15),
        datetime(2026, 10, 12),
        datetime(2026, 10, 10),
    ]
    assert [t.note for t in groups[1].transactions] == ["Grocery Store", "Lunch"]
    assert sum(len(g.transactions) for g in groups) == len(txs)


def test_group_by_day_puts_undated_items_under_today():
    now = datetime(2026, 10, 18, 20, 0)
    txs = [make_tx(date=None, note="undated"), make_tx(date=datetime(2026, 10, 17, 9))]

    groups = aggregation.group_by_day(txs, now=now)

    assert groups[0].day == datetime(2026, 10, 18)
    assert groups[0].transactions[0].note == "undated"


def test_group_by_day_empty():
    assert aggregation.group_by_day([]) == []


def test_recent_takes_prefix():
    _, _, txs = _ledger()

    assert aggregation.recent(txs, 2) == txs[:2]
    assert aggregation.recent(txs, 0) == []
