"""Pytest configuration and shared fixtures for CashFlow tests.

Each test gets its own temporary SQLite database, so repositories and the
store can be tested without touching a real data directory.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest

from cashflow.config import BaseConfig
from cashflow.infra.database import create_db_engine, create_session_factory, init_database
from cashflow.infra.repositories import (
    SQLModelCategoryRepository,
    SQLModelTransactionRepository,
)
from cashflow.infra.store import SQLModelEntityStore
from cashflow.models import Category, Transaction, TransactionType

# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Point configuration at a per-test data directory."""

    monkeypatch.setenv("CASHFLOW_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.delenv("CASHFLOW_DATABASE_URL", raising=False)
    monkeypatch.delenv("CASHFLOW_IN_MEMORY", raising=False)
    monkeypatch.delenv("CASHFLOW_DEV_MODE", raising=False)
    yield
    logging.getLogger("cashflow").handlers.clear()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> BaseConfig:
    """Configuration backed by a temporary SQLite file."""

    monkeypatch.setenv("CASHFLOW_DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    return BaseConfig()


@pytest.fixture
def db_engine(config):
    """Engine with the schema created; disposed after the test."""

    engine = create_db_engine(config)
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
def store(session_factory) -> SQLModelEntityStore:
    return SQLModelEntityStore(session_factory)


@pytest.fixture
def category_repo(store) -> SQLModelCategoryRepository:
    return SQLModelCategoryRepository(store)


@pytest.fixture
def transaction_repo(store) -> SQLModelTransactionRepository:
    return SQLModelTransactionRepository(store)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def category_factory(category_repo):
    """Factory for persisted categories."""

    def _create_category(
        name: str = "Groceries",
        icon: str | None = "cart.fill",
        color: str | None = "#FF6B6B",
    ) -> Category:
        return category_repo.create(name, icon, color)

    return _create_category


@pytest.fixture
def transaction_factory(transaction_repo):
    """Factory for persisted transactions."""

    def _create_transaction(
        amount: str | Decimal = "10.00",
        type: TransactionType | str = TransactionType.EXPENSE,
        date: datetime | None = None,
        note: str | None = "Test transaction",
        category: Category | None = None,
    ) -> Transaction:
        return transaction_repo.create(
            amount=Decimal(amount),
            type=type,
            date=date or datetime(2026, 10, 15, 9, 30),
            note=note,
            category=category,
        )

    return _create_transaction


# =============================================================================
# Helper Utilities
# =============================================================================


def make_category(name: str = "Food") -> Category:
    """Unpersisted category for pure-function tests."""

    return Category(name=name, icon="fork.knife", color="#FF6B6B")


def make_tx(
    amount: str | Decimal | None = "10.00",
    type: str | None = "expense",
    date: datetime | None = datetime(2026, 10, 15, 9, 30),
    note: str | None = None,
    category: Category | None = None,
) -> Transaction:
    """Unpersisted transaction for pure-function tests."""

    return Transaction(
        amount=Decimal(amount) if isinstance(amount, str) else amount,
        type=type,
        date=date,
        note=note,
        category=category,
    )
