"""SQLModel definitions for ledger transactions."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy import CheckConstraint, DateTime
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover - import guard for circular dependency
    from .category import Category


class TransactionType(str, Enum):
    """Direction of a transaction; the stored amount is always a magnitude."""

    INCOME = "income"
    EXPENSE = "expense"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Transaction(SQLModel, table=True):
    """A single income or expense entry."""

    __tablename__: ClassVar[str] = "transaction"
    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_transaction_type"),
        CheckConstraint("amount >= 0", name="ck_transaction_amount"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    amount: Decimal = Field(
        nullable=False,
        max_digits=14,
        decimal_places=2,
        description="Positive magnitude; the sign comes from type",
    )
    type: str = Field(default=TransactionType.EXPENSE.value, nullable=False, max_length=16, index=True)
    # Naive local time.
    date: datetime = Field(default_factory=datetime.now, nullable=False, index=True, sa_type=DateTime)
    note: Optional[str] = Field(default=None, max_length=255)

    # Weak reference: deleting the category nulls this column instead of cascading.
    category_id: Optional[uuid.UUID] = Field(
        default=None, foreign_key="category.id", ondelete="SET NULL", index=True
    )
    category: Optional["Category"] = Relationship(
        sa_relationship=relationship("Category", lazy="selectin")
    )
