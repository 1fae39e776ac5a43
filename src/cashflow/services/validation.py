"""Input validation and normalization shared by forms and repositories.

The repositories call the same helpers as the forms, so a value accepted by a
form is always accepted at the repository boundary and vice versa.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any

from ..errors import ValidationError
from ..models.transaction import TransactionType

CENTS = Decimal("0.01")
THOUSANDS_SEPARATOR = ","


def validate_category_name(name: Any) -> str:
    """Return ``name`` trimmed, rejecting empty input."""

    cleaned = name.strip() if isinstance(name, str) else ""
    if not cleaned:
        raise ValidationError("Category name is required.")
    return cleaned


def validate_note(note: Any) -> str:
    """Form rule: the description must not be blank."""

    cleaned = note.strip() if isinstance(note, str) else ""
    if not cleaned:
        raise ValidationError("Description is required.")
    if len(cleaned) > 255:
        raise ValidationError("Description must be 255 characters or fewer.")
    return cleaned


def _require_positive(amount: Decimal) -> Decimal:
    if not amount.is_finite():
        raise ValidationError("Enter a valid number for the amount.")
    try:
        quantized = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValidationError("Amount is too large.") from exc
    if quantized <= 0:
        raise ValidationError("Amount must be greater than zero.")
    return quantized


def parse_amount(text: Any) -> Decimal:
    """Parse user-facing amount text such as ``"1,250.50"`` into a positive Decimal."""

    raw = text.strip() if isinstance(text, str) else ""
    if not raw:
        raise ValidationError("Amount is required.")
    try:
        parsed = Decimal(raw.replace(THOUSANDS_SEPARATOR, ""))
    except InvalidOperation as exc:
        raise ValidationError("Enter a valid number for the amount.") from exc
    return _require_positive(parsed)


def ensure_positive_amount(value: Any) -> Decimal:
    """Normalize a programmatic amount to a positive Decimal rounded to cents."""

    if isinstance(value, str):
        return parse_amount(value)
    if isinstance(value, bool) or value is None:
        raise ValidationError("Enter a valid number for the amount.")
    if isinstance(value, Decimal):
        return _require_positive(value)
    if isinstance(value, (int, float)):
        return _require_positive(Decimal(str(value)))
    raise ValidationError("Enter a valid number for the amount.")


def parse_transaction_type(value: Any) -> TransactionType:
    """Accept a TransactionType or its string value; anything else is rejected."""

    if isinstance(value, TransactionType):
        return value
    raw = value.value if isinstance(value, Enum) else value
    if isinstance(raw, str):
        try:
            return TransactionType(raw.strip().lower())
        except ValueError:
            pass
    raise ValidationError("Transaction type must be 'income' or 'expense'.")


__all__ = [
    "CENTS",
    "ensure_positive_amount",
    "parse_amount",
    "parse_transaction_type",
    "validate_category_name",
    "validate_note",
]
