"""Mini README: Tests covering the transaction store and its write-through.

Structure:
    * add/remove/clear ordering and identity behaviour.
    * rejection of invalid input without state changes.
    * failed writes keep the in-memory ledger authoritative.
"""

from __future__ import annotations

import itertools
import json
from decimal import Decimal

import pytest

from budgettracker.finance import TransactionKind, TransactionStore, ValidationError
from budgettracker.storage import InMemoryKeyValueStore, TransactionRepository


def _store(backend: InMemoryKeyValueStore | None = None, **kwargs) -> TransactionStore:
    repository = TransactionRepository(backend or InMemoryKeyValueStore())
    return TransactionStore(repository, **kwargs)


def test_add_prepends_newest_transaction() -> None:
    """New entries go to the head of the ledger and grow it by one."""

    store = _store()
    first = store.add("Salary May", "500", "Salary", TransactionKind.INCOME)
    second = store.add("Groceries", Decimal("42.50"), "Food", "expense")

    transactions = store.all()
    assert len(transactions) == 2
    assert transactions[0] == second
    assert transactions[1] == first
    assert second.kind is TransactionKind.EXPENSE
    assert second.amount == Decimal("42.50")
    assert second.timestamp.tzinfo is not None


@pytest.mark.parametrize("amount", ["0", "-5", 0, -1.5, float("nan"), "nan", "inf", "abc", ""])
def test_add_rejects_invalid_amounts(amount: object) -> None:
    """Non-positive or non-numeric amounts never reach the ledger."""

    backend = InMemoryKeyValueStore()
    store = _store(backend)
    store.add("Existing", "10", "Food", "expense")
    before = store.all()
    saved_before = backend.get("budget_tracker_transactions")

    with pytest.raises(ValidationError):
        store.add("Bad", amount, "Food", "expense")

    assert store.all() == before
    assert backend.get("budget_tracker_transactions") == saved_before


def test_add_rejects_missing_description_category_and_kind() -> None:
    """Blank descriptions, missing categories and unknown kinds are rejected."""

    store = _store()
    with pytest.raises(ValidationError):
        store.add("   ", "10", "Food", "expense")
    with pytest.raises(ValidationError):
        store.add("Lunch", "10", "", "expense")
    with pytest.raises(ValidationError) as excinfo:
        store.add("Lunch", "10", "Food", "refund")
    assert excinfo.value.field == "kind"
    assert store.is_empty


def test_ids_are_unique_even_when_factory_repeats() -> None:
    """Colliding generated ids are retried so two adds never share an id."""

    repeated = itertools.chain(["dup", "dup", "dup"], (f"id-{n}" for n in itertools.count()))
    store = _store(id_factory=lambda: next(repeated))

    first = store.add("One", "1", "Food", "expense")
    second = store.add("Two", "2", "Food", "expense")

    assert first.id == "dup"
    assert second.id != first.id


def test_removed_ids_are_not_reused() -> None:
    """Identifiers stay reserved after the transaction is deleted."""

    ids = iter(["a", "a", "b"])
    store = _store(id_factory=lambda: next(ids))
    first = store.add("One", "1", "Food", "expense")
    store.remove(first.id)

    second = store.add("Two", "2", "Food", "expense")
    assert second.id == "b"


def test_remove_unknown_id_is_noop() -> None:
    """Removing an absent id leaves the ledger untouched and skips writing."""

    store = _store()
    store.add("One", "1", "Food", "expense")
    before = store.all()
    last_save = store.last_save

    assert store.remove("missing") is False
    assert store.all() == before
    assert store.last_save is last_save


def test_remove_deletes_matching_transaction() -> None:
    store = _store()
    keep = store.add("Keep", "1", "Food", "expense")
    drop = store.add("Drop", "2", "Food", "expense")

    assert store.remove(drop.id) is True
    assert store.all() == (keep,)
    with pytest.raises(KeyError):
        store.get(drop.id)


def test_clear_empties_the_ledger_and_persists() -> None:
    """Clearing always yields an empty ledger, persisted as an empty array."""

    backend = InMemoryKeyValueStore()
    store = _store(backend)
    store.add("One", "1", "Food", "expense")
    store.add("Two", "2", "Salary", "income")

    store.clear()

    assert store.all() == ()
    assert json.loads(backend.get("budget_tracker_transactions")) == []
    store.clear()
    assert len(store) == 0


def test_store_hydrates_from_repository() -> None:
    """A fresh store over the same slot sees the previous session's ledger."""

    backend = InMemoryKeyValueStore()
    original = _store(backend)
    original.add("Rent", "900", "Bills", "expense")
    original.add("Pay", "2000", "Salary", "income")

    reopened = _store(backend)
    assert reopened.all() == original.all()


def test_failed_write_keeps_memory_state() -> None:
    """Quota failures are reported without losing the in-memory change."""

    backend = InMemoryKeyValueStore(quota_bytes=10)
    store = _store(backend)

    transaction = store.add("Coffee", "3.20", "Food", "expense")

    assert store.all() == (transaction,)
    assert store.last_save is not None
    assert store.last_save.ok is False
    assert store.is_synchronised is False
    assert backend.get("budget_tracker_transactions") is None

    backend.quota_bytes = None
    store.remove(transaction.id)
    assert store.is_synchronised is True
