"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import SQLModelCategoryRepository, SQLModelTransactionRepository
from .infra.store import SQLModelEntityStore


@dataclass
class AppContext:
    """Explicitly constructed bundle of the store and its repositories."""

    config: BaseConfig
    engine: Engine
    session_factory: SessionFactory
    store: SQLModelEntityStore
    category_repo: SQLModelCategoryRepository
    transaction_repo: SQLModelTransactionRepository

    def dispose(self) -> None:
        self.engine.dispose()


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create the engine, initialize the schema and wire the repositories."""

    config = config or BaseConfig()
    engine, session_factory = bootstrap_database(config)
    store = SQLModelEntityStore(session_factory)
    return AppContext(
        config=config,
        engine=engine,
        session_factory=session_factory,
        store=store,
        category_repo=SQLModelCategoryRepository(store),
        transaction_repo=SQLModelTransactionRepository(store),
    )
