"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy.pool import StaticPool

load_dotenv()

IN_MEMORY_URL = "sqlite://"


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "CashFlow"
    DB_FILENAME = "cashflow.db"
    SQLITE_PRAGMAS = {"journal_mode": "wal", "foreign_keys": "on"}

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("CASHFLOW_DEV_MODE", default=True)
        self.IN_MEMORY = _env_bool("CASHFLOW_IN_MEMORY", default=False)
        if self.IN_MEMORY:
            self.DATABASE_URL = IN_MEMORY_URL
        else:
            self.DATABASE_URL = os.getenv("CASHFLOW_DATABASE_URL", self._build_sqlite_url())

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("CASHFLOW_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        return self.DATABASE_URL in {IN_MEMORY_URL, "sqlite:///:memory:"}

    def sqlite_pragmas(self) -> dict[str, str]:
        """Pragmas to apply on each new SQLite connection.

        WAL journaling is meaningless for an in-memory database, so it is dropped.
        """

        pragmas = dict(self.SQLITE_PRAGMAS)
        if self.is_in_memory:
            pragmas.pop("journal_mode", None)
        return pragmas

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        engine_options: dict[str, Any] = {}
        if self.is_sqlite:
            engine_options["connect_args"] = {"check_same_thread": False}
        if self.is_in_memory:
            # A single shared connection keeps the in-memory schema alive.
            engine_options["poolclass"] = StaticPool
        return engine_options


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True
    TESTING = False


class InMemoryConfig(BaseConfig):
    """Isolated configuration backed by an in-memory database."""

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.IN_MEMORY = True
        self.DATABASE_URL = IN_MEMORY_URL
