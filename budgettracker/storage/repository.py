"""Mini README: Persistence adapter for the transaction collection.

Structure:
    * SaveResult - success/failure signal returned from every write.
    * TransactionRepository - loads and saves the whole ledger to one slot.

Loading fails soft: a missing slot, corrupt JSON or an invalid record all
yield an empty ledger (the data loss is accepted and logged). Saving always
serialises the full collection and never raises; failures come back as a
``SaveResult`` the caller may surface to the user.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..finance.errors import PersistenceReadError, PersistenceWriteError
from ..finance.models import Transaction
from ..logging_utils import get_logger
from .keyvalue import KeyValueStore

LOGGER = get_logger(__name__)

DEFAULT_STORAGE_KEY = "budget_tracker_transactions"


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Outcome of a write-through."""

    ok: bool
    error: Optional[PersistenceWriteError] = None

    @property
    def message(self) -> str:
        if self.ok:
            return "Saved."
        return f"Could not save transactions: {self.error}"


class TransactionRepository:
    """Read and write the ledger as a JSON array in a named slot."""

    def __init__(self, backend: KeyValueStore, *, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.backend = backend
        self.key = key

    def load(self) -> List[Transaction]:
        """Return the persisted transactions in stored order, or ``[]``."""

        try:
            raw = self.backend.get(self.key)
        except (PersistenceReadError, OSError) as error:
            LOGGER.warning("Stored transactions unreadable, starting empty: %s", error)
            return []
        if not raw:
            LOGGER.debug("No stored transactions under '%s'", self.key)
            return []

        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise ValueError("Stored transactions must be a JSON array.")
            transactions = [Transaction.from_dict(record) for record in payload]
        except (ValueError, KeyError, TypeError) as error:
            LOGGER.warning("Stored transactions corrupt, starting empty: %s", error)
            return []

        LOGGER.debug("Loaded %s transactions from '%s'", len(transactions), self.key)
        return transactions

    def save(self, transactions: Sequence[Transaction]) -> SaveResult:
        """Serialise and write the full collection."""

        raw = json.dumps([transaction.as_dict() for transaction in transactions], ensure_ascii=False)
        try:
            self.backend.set(self.key, raw)
        except PersistenceWriteError as error:
            LOGGER.error("Failed to save %s transactions: %s", len(transactions), error)
            return SaveResult(ok=False, error=error)
        except OSError as error:
            LOGGER.error("Failed to save %s transactions: %s", len(transactions), error)
            return SaveResult(ok=False, error=PersistenceWriteError(str(error)))
        LOGGER.debug("Saved %s transactions to '%s'", len(transactions), self.key)
        return SaveResult(ok=True)
