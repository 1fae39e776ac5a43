"""Transaction entry form: field binding, validation and the save workflow.

State flow::

    EMPTY -> EDITING -> VALID | INVALID -> SAVING -> SAVED | FAILED

Any field change moves the form back to EDITING. FAILED is reported through
``error_message`` and immediately falls back to EDITING so the input survives.
"""

from __future__ import annotations

import threading
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from ..domain.repositories import CategoryRepository, TransactionRepository
from ..errors import LedgerError, ValidationError
from ..logging_config import get_logger
from ..models.category import Category
from ..models.transaction import Transaction, TransactionType
from .validation import parse_amount, validate_note

logger = get_logger(__name__)


class FormState(str, Enum):
    EMPTY = "empty"
    EDITING = "editing"
    VALID = "valid"
    INVALID = "invalid"
    SAVING = "saving"
    SAVED = "saved"
    FAILED = "failed"


EDITABLE_FIELDS = ("amount_text", "note", "date", "category", "transaction_type")


class TransactionForm:
    """Form model for creating a transaction or editing an existing one."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: Optional[CategoryRepository] = None,
        *,
        transaction: Optional[Transaction] = None,
    ) -> None:
        self.transaction_repository = transaction_repository
        self.category_repository = category_repository
        self.amount_text = ""
        self.note = ""
        self.date = datetime.now()
        self.category: Optional[Category] = None
        self.transaction_type = TransactionType.EXPENSE
        self.categories: list[Category] = []
        self.errors: dict[str, list[str]] = {}
        self.error_message: Optional[str] = None
        self.state = FormState.EMPTY
        self.history: list[FormState] = [FormState.EMPTY]
        self._existing = transaction
        self._save_lock = threading.Lock()

        if transaction is not None:
            self.amount_text = f"{Decimal(transaction.amount):.2f}"
            self.note = transaction.note or ""
            self.date = transaction.date or datetime.now()
            self.category = transaction.category
            if transaction.type == TransactionType.INCOME.value:
                self.transaction_type = TransactionType.INCOME
            self._transition(FormState.EDITING)

    @property
    def is_edit_mode(self) -> bool:
        return self._existing is not None

    @property
    def navigation_title(self) -> str:
        return "Edit Transaction" if self.is_edit_mode else "New Transaction"

    @property
    def save_button_title(self) -> str:
        return "Update" if self.is_edit_mode else "Add"

    @property
    def amount_value(self) -> Optional[Decimal]:
        """Parsed amount, or None while the text is not a positive number."""
        try:
            return parse_amount(self.amount_text)
        except ValidationError:
            return None

    @property
    def is_valid(self) -> bool:
        return self.amount_value is not None and bool(self.note.strip())

    def _transition(self, state: FormState) -> None:
        self.state = state
        self.history.append(state)

    def load_categories(self) -> list[Category]:
        """Load the category picker; preselect the first category on a blank form."""
        if self.category_repository is None:
            return self.categories
        try:
            self.categories = self.category_repository.fetch_all()
        except LedgerError as exc:
            logger.error(f"Failed to load categories: {exc}", exc_info=True)
            self.error_message = exc.message
            return self.categories
        if self.category is None and self.categories and not self.is_edit_mode:
            self.category = self.categories[0]
        return self.categories

    def update(self, **changes: Any) -> FormState:
        """Apply field changes and re-validate."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown form fields: {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            setattr(self, name, value)
        if self.state is FormState.SAVING:
            return self.state
        self._transition(FormState.EDITING)
        self.validate()
        return self.state

    def validate(self) -> bool:
        """Check every field, filling ``errors`` and moving to VALID or INVALID."""
        self.errors = {}
        try:
            parse_amount(self.amount_text)
        except ValidationError as exc:
            self.errors.setdefault("amount", []).append(exc.message)
        try:
            validate_note(self.note)
        except ValidationError as exc:
            self.errors.setdefault("note", []).append(exc.message)
        if not isinstance(self.transaction_type, TransactionType):
            self.errors.setdefault("transaction_type", []).append(
                "Transaction type must be income or expense."
            )

        if self.state is not FormState.SAVING:
            self._transition(FormState.INVALID if self.errors else FormState.VALID)
        return not self.errors

    def save(self) -> Optional[Transaction]:
        """Persist the form. Returns the saved transaction, or None.

        A call made while another save is in flight is ignored and returns None.
        """
        if not self._save_lock.acquire(blocking=False):
            logger.warning("Save ignored: a save is already in progress")
            return None
        try:
            if not self.validate():
                return None
            self._transition(FormState.SAVING)
            self.error_message = None
            try:
                saved = self._persist()
            except LedgerError as exc:
                logger.error(f"Failed to save transaction: {exc}", exc_info=True)
                self.error_message = exc.message
                self._transition(FormState.FAILED)
                self._transition(FormState.EDITING)
                return None
            self._transition(FormState.SAVED)
            return saved
        finally:
            self._save_lock.release()

    def _persist(self) -> Transaction:
        amount = parse_amount(self.amount_text)
        note = validate_note(self.note)
        existing = self._existing

        if existing is None:
            return self.transaction_repository.create(
                amount=amount,
                type=self.transaction_type,
                date=self.date,
                note=note,
                category=self.category,
            )

        restorable = ("amount", "type", "date", "note", "category", "category_id")
        previous = {name: getattr(existing, name) for name in restorable}
        existing.amount = amount
        existing.type = self.transaction_type.value
        existing.date = self.date
        existing.note = note
        existing.category = self.category
        try:
            self.transaction_repository.update(existing)
        except LedgerError:
            for name, value in previous.items():
                setattr(existing, name, value)
            raise
        return existing


__all__ = ["FormState", "TransactionForm"]
