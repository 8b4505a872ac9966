"""Mini README: Error taxonomy shared by the budget tracker core.

Structure:
    * BudgetTrackerError - base class for every domain error.
    * ValidationError - rejected user input, raised before any mutation.
    * PersistenceError - base for failures of the durable key-value slot.
    * PersistenceReadError - stored data is missing, unreadable or corrupt.
    * PersistenceWriteError - the slot refused a write (quota, disk, ...).

Read errors are absorbed by the repository (the ledger restarts empty) and
write errors are reported through ``SaveResult`` so that no failure mode ever
terminates the session.
"""

from __future__ import annotations


class BudgetTrackerError(Exception):
    """Base class for budget tracker errors."""


class ValidationError(BudgetTrackerError, ValueError):
    """Raised when user supplied data cannot become a transaction."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class PersistenceError(BudgetTrackerError, IOError):
    """Raised when the persistence layer cannot complete an operation."""


class PersistenceReadError(PersistenceError):
    """Stored transactions could not be read or parsed."""


class PersistenceWriteError(PersistenceError):
    """Transactions could not be written to the durable slot."""
