"""Mini README: Tests for new-entry validation rules and their messages."""

from __future__ import annotations

from decimal import Decimal

import pytest

from budgettracker.finance import ValidationError, validate_entry


def test_validate_entry_cleans_input() -> None:
    entry = validate_entry("  Weekly shop ", " 1200.5 ", " Food ")

    assert entry.description == "Weekly shop"
    assert entry.amount == Decimal("1200.5")
    assert entry.category == "Food"


@pytest.mark.parametrize(
    ("description", "amount", "category", "message"),
    [
        ("", "10", "Food", "Please enter a description for this transaction."),
        ("Lunch", "", "Food", "Please enter an amount."),
        ("Lunch", None, "Food", "Please enter an amount."),
        ("Lunch", "ten", "Food", "Amount must be a valid number."),
        ("Lunch", True, "Food", "Amount must be a valid number."),
        ("Lunch", "0", "Food", "Amount must be greater than zero."),
        ("Lunch", -3, "Food", "Amount must be greater than zero."),
        ("Lunch", "10", None, "Please select a category."),
    ],
)
def test_validate_entry_reports_first_problem(
    description: str, amount: object, category: str, message: str
) -> None:
    """Each rule has a fixed message and runs in form order."""

    with pytest.raises(ValidationError) as excinfo:
        validate_entry(description, amount, category)
    assert excinfo.value.message == message


def test_description_is_checked_before_amount() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_entry("", "-1", "")
    assert excinfo.value.field == "description"


@pytest.mark.parametrize("amount", ["1e30", "123456789012345678901234567", Decimal("9E+40")])
def test_amounts_too_large_to_hold_cents_are_rejected(amount: object) -> None:
    """Amounts that cannot be kept to the cent never reach the ledger."""

    with pytest.raises(ValidationError) as excinfo:
        validate_entry("Lottery", amount, "Gift")
    assert excinfo.value.message == "Amount is too large."


def test_large_but_representable_amount_is_accepted() -> None:
    entry = validate_entry("House sale", "12345678901234567890123456", "Other Income")

    assert entry.amount == Decimal("12345678901234567890123456")
