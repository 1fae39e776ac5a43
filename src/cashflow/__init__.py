"""CashFlow ledger core package."""

from __future__ import annotations

from .config import BaseConfig, DevConfig, InMemoryConfig
from .context import AppContext, create_app_context

__all__ = ["AppContext", "BaseConfig", "DevConfig", "InMemoryConfig", "create_app_context"]
