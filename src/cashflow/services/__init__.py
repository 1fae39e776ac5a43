"""Service module exports."""

from . import (
    aggregation,
    categories,
    dashboard,
    filtering,
    seed,
    transaction_form,
    transaction_list,
    validation,
)

__all__ = [
    "aggregation",
    "categories",
    "dashboard",
    "filtering",
    "seed",
    "transaction_form",
    "transaction_list",
    "validation",
]
