"""SQLModel table exports."""

from .category import Category
from .transaction import Transaction, TransactionType

__all__ = ["Category", "Transaction", "TransactionType"]
