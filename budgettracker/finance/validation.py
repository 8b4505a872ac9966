"""Mini README: Input validation for new ledger entries.

Structure:
    * ValidatedEntry - cleaned description, amount and category.
    * parse_amount - coerce raw user input into a positive ``Decimal``.
    * validate_entry - apply the form rules in order, raising ``ValidationError``.

The rules run in a fixed order so the first problem reported to the user is
always the same for the same input.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from .errors import ValidationError

Amount = str | int | float | Decimal

# Amounts must be representable to the cent in the default decimal context.
CENT = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class ValidatedEntry:
    """User input that passed validation."""

    description: str
    amount: Decimal
    category: str


def parse_amount(value: Optional[Amount]) -> Decimal:
    """Return a strictly positive, finite amount or raise ``ValidationError``.

    Amounts too large to be held to the cent in the default decimal context
    are rejected as well.
    """

    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("Please enter an amount.", field="amount")
    if isinstance(value, bool):
        raise ValidationError("Amount must be a valid number.", field="amount")

    try:
        amount = Decimal(value.strip()) if isinstance(value, str) else Decimal(str(value))
    except (InvalidOperation, ValueError) as error:
        raise ValidationError("Amount must be a valid number.", field="amount") from error

    if not amount.is_finite():
        raise ValidationError("Amount must be a valid number.", field="amount")
    if amount <= 0:
        raise ValidationError("Amount must be greater than zero.", field="amount")
    try:
        amount.quantize(CENT)
    except InvalidOperation as error:
        raise ValidationError("Amount is too large.", field="amount") from error
    return amount


def validate_entry(
    description: Optional[str],
    amount: Optional[Amount],
    category: Optional[str],
) -> ValidatedEntry:
    """Validate raw form input for a new transaction."""

    cleaned_description = (description or "").strip()
    if not cleaned_description:
        raise ValidationError(
            "Please enter a description for this transaction.", field="description"
        )

    parsed_amount = parse_amount(amount)

    cleaned_category = (category or "").strip()
    if not cleaned_category:
        raise ValidationError("Please select a category.", field="category")

    return ValidatedEntry(
        description=cleaned_description,
        amount=parsed_amount,
        category=cleaned_category,
    )
