"""Tests for the transaction form workflow."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from cashflow.errors import StorageError
from cashflow.models import Transaction, TransactionType
from cashflow.services.transaction_form import FormState, TransactionForm


class _FailingRepo:
    def create(self, **kwargs):
        raise StorageError("disk full")

    def update(self, transaction):
        raise StorageError("disk full")


class _ReentrantRepo:
    """Calls back into the form while its own save is still in flight."""

    def __init__(self):
        self.form = None
        self.nested_result = "not called"
        self.calls = 0

    def create(self, **kwargs):
        self.calls += 1
        self.nested_result = self.form.save()
        return Transaction(**{k: v for k, v in kwargs.items() if k != "category"})


def test_new_form_starts_empty(transaction_repo):
    form = TransactionForm(transaction_repo)

    assert form.state is FormState.EMPTY
    assert form.navigation_title == "New Transaction"
    assert form.save_button_title == "Add"
    assert not form.is_valid


def test_field_changes_move_through_editing_to_valid_or_invalid(transaction_repo):
    form = TransactionForm(transaction_repo)

    assert form.update(amount_text="abc", note="Lunch") is FormState.INVALID
    assert "amount" in form.errors
    assert form.history[-2:] == [FormState.EDITING, FormState.INVALID]

    assert form.update(amount_text="1,250.00") is FormState.VALID
    assert form.amount_value == Decimal("1250.00")
    assert form.errors == {}


def test_blank_note_is_invalid(transaction_repo):
    form = TransactionForm(transaction_repo)

    assert form.update(amount_text="5", note="   ") is FormState.INVALID
    assert "note" in form.errors


def test_unknown_field_is_rejected(transaction_repo):
    form = TransactionForm(transaction_repo)

    with pytest.raises(ValueError):
        form.update(colour="red")


def test_save_creates_transaction(category_factory, transaction_repo):
    food = category_factory(name="Food")
    form = TransactionForm(transaction_repo)
    form.update(
        amount_text="85.50",
        note="  Grocery Store ",
        category=food,
        date=datetime(2026, 10, 15, 18, 0),
    )

    saved = form.save()

    assert saved is not None
    assert form.state is FormState.SAVED
    assert FormState.SAVING in form.history
    stored = transaction_repo.fetch_all()
    assert len(stored) == 1
    assert stored[0].note == "Grocery Store"
    assert stored[0].amount == Decimal("85.50")
    assert stored[0].type == "expense"
    assert stored[0].category.name == "Food"


def test_invalid_form_does_not_save(transaction_repo):
    form = TransactionForm(transaction_repo)
    form.update(amount_text="-10", note="Refund")

    assert form.save() is None
    assert form.state is FormState.INVALID
    assert transaction_repo.fetch_all() == []


def test_failed_save_returns_to_editing_and_keeps_input():
    form = TransactionForm(_FailingRepo())
    form.update(amount_text="12.00", note="Taxi", transaction_type=TransactionType.EXPENSE)

    assert form.save() is None

    assert form.history[-3:] == [FormState.SAVING, FormState.FAILED, FormState.EDITING]
    assert form.state is FormState.EDITING
    assert form.error_message == "disk full"
    assert (form.amount_text, form.note) == ("12.00", "Taxi")


def test_save_is_not_reentrant():
    repo = _ReentrantRepo()
    form = TransactionForm(repo)
    repo.form = form
    form.update(amount_text="3.00", note="Coffee")

    saved = form.save()

    assert saved is not None
    assert repo.calls == 1
    assert repo.nested_result is None
    assert form.state is FormState.SAVED


def test_edit_mode_prefills_and_updates(category_factory, transaction_factory, transaction_repo):
    tx = transaction_factory(amount="3500", type="income", note="Salary")
    form = TransactionForm(transaction_repo, transaction=tx)

    assert form.is_edit_mode
    assert form.navigation_title == "Edit Transaction"
    assert form.save_button_title == "Update"
    assert form.amount_text == "3500.00"
    assert form.transaction_type is TransactionType.INCOME
    assert form.state is FormState.EDITING

    form.update(amount_text="3600.00")
    assert form.save() is tx
    assert transaction_repo.get(tx.id).amount == Decimal("3600.00")


def test_edit_of_deleted_transaction_fails_and_restores_entity(transaction_factory, transaction_repo):
    tx = transaction_factory(amount="20.00", note="Books")
    transaction_repo.delete(transaction_repo.get(tx.id))
    form = TransactionForm(transaction_repo, transaction=tx)
    form.update(amount_text="25.00", note="More books")

    assert form.save() is None

    assert form.state is FormState.EDITING
    assert "no longer exists" in form.error_message
    assert tx.amount == Decimal("20.00")
    assert tx.note == "Books"
    assert form.note == "More books"
    assert transaction_repo.fetch_all() == []


def test_load_categories_preselects_first(category_factory, category_repo, transaction_repo):
    category_factory(name="Travel")
    category_factory(name="Food")
    form = TransactionForm(transaction_repo, category_repo)

    categories = form.load_categories()

    assert [c.name for c in categories] == ["Food", "Travel"]
    assert form.category.name == "Food"


def test_edit_after_category_deleted_saves_uncategorized(
    category_factory, transaction_factory, category_repo, transaction_repo
):
    food = category_factory(name="Food")
    tx = transaction_factory(amount="85.50", note="Grocery Store", category=food)
    form = TransactionForm(transaction_repo, category_repo, transaction=tx)
    category_repo.delete(food)

    form.update(note="Grocery Store (edited)")

    assert form.save() is tx
    assert form.state is FormState.SAVED
    assert form.error_message is None
    fetched = transaction_repo.get(tx.id)
    assert fetched.note == "Grocery Store (edited)"
    assert fetched.category is None
