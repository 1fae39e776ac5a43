"""Ledger category definitions."""

from __future__ import annotations

import uuid
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    """User-defined label shared by many transactions.

    ``name`` is a lookup key but not a uniqueness constraint.
    """

    __tablename__: ClassVar[str] = "category"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(index=True, nullable=False, max_length=64)
    icon: Optional[str] = Field(default=None, max_length=64)
    color: Optional[str] = Field(default=None, max_length=9)
