"""Mini README: Ledger core for the budget tracker.

This package groups the transaction model, the ordered in-memory store, the
aggregation engine and the display projection. Persistence lives in
``budgettracker.storage`` and is handed to the store explicitly so the core
stays free of any particular storage backend.
"""

from .aggregation import AggregationEngine, AggregationResult, CategoryShare
from .errors import (
    BudgetTrackerError,
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
    ValidationError,
)
from .models import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    Transaction,
    TransactionKind,
    category_colour,
)
from .store import TransactionStore
from .validation import ValidatedEntry, validate_entry

__all__ = [
    "AggregationEngine",
    "AggregationResult",
    "BudgetTrackerError",
    "CategoryShare",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "PersistenceError",
    "PersistenceReadError",
    "PersistenceWriteError",
    "Transaction",
    "TransactionKind",
    "TransactionStore",
    "ValidatedEntry",
    "ValidationError",
    "category_colour",
    "validate_entry",
]
