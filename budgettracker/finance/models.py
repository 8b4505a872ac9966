"""Mini README: Ledger entry model for the budget tracker.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * Transaction - frozen dataclass storing a single ledger entry.
    * EXPENSE_CATEGORIES / INCOME_CATEGORIES - conventional category sets.
    * category_colour - display colour lookup used by the chart projection.

Amounts are kept as ``Decimal`` magnitudes; the sign of an entry is implied by
its kind and never stored. ``as_dict``/``from_dict`` define the persisted
record layout used by the repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Mapping, Tuple

EXPENSE_CATEGORIES: Tuple[str, ...] = (
    "Food",
    "Transport",
    "Shopping",
    "Bills",
    "Entertainment",
    "Health",
    "Education",
    "Other Expense",
)

INCOME_CATEGORIES: Tuple[str, ...] = (
    "Salary",
    "Freelance",
    "Investment",
    "Gift",
    "Other Income",
)

CATEGORY_COLOURS: Dict[str, str] = {
    "Food": "#f97316",
    "Transport": "#3b82f6",
    "Shopping": "#ec4899",
    "Bills": "#eab308",
    "Entertainment": "#8b5cf6",
    "Health": "#14b8a6",
    "Education": "#06b6d4",
    "Other Expense": "#6b7280",
    "Salary": "#22c55e",
    "Freelance": "#10b981",
    "Investment": "#0ea5e9",
    "Gift": "#f472b6",
    "Other Income": "#a3e635",
}

FALLBACK_COLOUR = "#6b7280"


def category_colour(category: str) -> str:
    """Return the display colour for a category, falling back to grey."""

    return CATEGORY_COLOURS.get(category, FALLBACK_COLOUR)


class TransactionKind(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction kind: {value}") from error

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def categories(self) -> Tuple[str, ...]:
        """Categories conventionally offered for this kind."""

        return INCOME_CATEGORIES if self is TransactionKind.INCOME else EXPENSE_CATEGORIES


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single immutable ledger entry."""

    id: str
    kind: TransactionKind
    description: str
    amount: Decimal
    category: str
    timestamp: datetime

    @property
    def is_income(self) -> bool:
        return self.kind is TransactionKind.INCOME

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign implied by the kind applied."""

        return self.amount if self.is_income else -self.amount

    def as_dict(self) -> Dict[str, str]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.id,
            "kind": self.kind.value,
            "description": self.description,
            "amount": str(self.amount),
            "category": self.category,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "Transaction":
        """Rebuild a transaction from its persisted record.

        Raises ``ValueError`` (or ``KeyError`` for missing fields) when the
        record is not a valid ledger entry.
        """

        amount = _parse_amount(payload["amount"])
        description = str(payload["description"]).strip()
        category = str(payload["category"]).strip()
        identifier = str(payload["id"])
        if not identifier or not description or not category:
            raise ValueError("Transaction records require id, description and category.")
        return cls(
            id=identifier,
            kind=TransactionKind.from_str(str(payload["kind"])),
            description=description,
            amount=amount,
            category=category,
            timestamp=_parse_timestamp(payload["timestamp"]),
        )


def _parse_amount(value: object) -> Decimal:
    """Parse persisted amounts, accepting decimal strings and JSON numbers."""

    if isinstance(value, bool):
        raise ValueError("Amounts must be numeric.")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as error:
        raise ValueError(f"Invalid amount: {value!r}") from error
    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Amounts must be positive: {value!r}")
    return amount


def _parse_timestamp(value: object) -> datetime:
    """Parse ISO formatted timestamps, assuming UTC for naive values."""

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    else:
        raise ValueError("Timestamps must be provided as ISO strings or datetime instances.")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
