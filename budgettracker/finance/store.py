"""Mini README: Ordered in-memory transaction store with write-through.

Structure:
    * TransactionStore - owns the session's ledger and mirrors every change
      to the repository.

Transactions are kept newest-first in insertion order and never re-sorted.
Each mutation writes the full ledger through the repository immediately. A
failed write leaves the in-memory ledger authoritative; the failure is kept
on ``last_save`` until the next successful write.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, List, Optional, Set, Tuple

from ..logging_utils import get_logger
from .models import Transaction, TransactionKind
from .validation import Amount, validate_entry
from .errors import ValidationError

if TYPE_CHECKING:
    from ..storage.repository import SaveResult, TransactionRepository

LOGGER = get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _uuid_hex() -> str:
    return uuid.uuid4().hex


class TransactionStore:
    """Manage the session ledger and persist it after every mutation."""

    def __init__(
        self,
        repository: "TransactionRepository",
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        id_factory: Callable[[], str] = _uuid_hex,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._repository = repository
        self._id_factory = id_factory
        self._clock = clock
        self._transactions: List[Transaction] = []
        self._issued_ids: Set[str] = set()
        self.last_save: Optional["SaveResult"] = None

        initial = repository.load() if transactions is None else transactions
        for transaction in initial:
            self._register(transaction)
        LOGGER.debug("Transaction store initialised with %s transactions", len(self._transactions))

    def _register(self, transaction: Transaction) -> None:
        """Append a hydrated transaction, dropping duplicate identifiers."""

        if transaction.id in self._issued_ids:
            LOGGER.warning("Skipping duplicate transaction id %s", transaction.id)
            return
        self._issued_ids.add(transaction.id)
        self._transactions.append(transaction)

    def _next_id(self) -> str:
        """Return an identifier never issued during this store's lifetime."""

        identifier = self._id_factory()
        while identifier in self._issued_ids:
            identifier = self._id_factory()
        self._issued_ids.add(identifier)
        return identifier

    def _write_through(self) -> "SaveResult":
        self.last_save = self._repository.save(self._transactions)
        return self.last_save

    @property
    def is_synchronised(self) -> bool:
        """False while the last write-through has failed."""

        return self.last_save is None or self.last_save.ok

    def add(
        self,
        description: Optional[str],
        amount: Optional[Amount],
        category: Optional[str],
        kind: TransactionKind | str,
    ) -> Transaction:
        """Record a new transaction at the head of the ledger."""

        entry = validate_entry(description, amount, category)
        try:
            resolved_kind = (
                kind if isinstance(kind, TransactionKind) else TransactionKind.from_str(kind)
            )
        except ValueError as error:
            raise ValidationError(str(error), field="kind") from error

        transaction = Transaction(
            id=self._next_id(),
            kind=resolved_kind,
            description=entry.description,
            amount=entry.amount,
            category=entry.category,
            timestamp=self._clock(),
        )
        self._transactions.insert(0, transaction)
        LOGGER.info(
            "Added %s %s (%s) in %s",
            transaction.kind.value,
            transaction.id,
            transaction.amount,
            transaction.category,
        )
        self._write_through()
        return transaction

    def remove(self, transaction_id: str) -> bool:
        """Delete a transaction by id; unknown ids are ignored."""

        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                del self._transactions[index]
                LOGGER.info("Removed transaction %s", transaction_id)
                self._write_through()
                return True
        LOGGER.debug("Remove ignored, transaction %s not found", transaction_id)
        return False

    def clear(self) -> None:
        """Remove every transaction."""

        count = len(self._transactions)
        self._transactions.clear()
        LOGGER.info("Cleared %s transactions", count)
        self._write_through()

    def all(self) -> Tuple[Transaction, ...]:
        """Return transactions newest-first."""

        return tuple(self._transactions)

    def get(self, transaction_id: str) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        raise KeyError(f"Transaction {transaction_id} not found")

    @property
    def is_empty(self) -> bool:
        return not self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._transactions))
