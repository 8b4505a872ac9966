"""Mini README: Session wiring for the budget tracker.

Structure:
    * BudgetSession - owns the store, engine and currency symbol for one
      logical user session and recomputes the dashboard on demand.

A session is constructed at start-up (hydrating from the configured storage
file), used by the web interface or CLI for the lifetime of the process, and
discarded implicitly at exit. Aggregates are never cached; every read
recomputes them from the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from .configuration import BudgetTrackerSettings, get_settings
from .finance import AggregationEngine, AggregationResult, TransactionStore
from .finance.projection import DEFAULT_CURRENCY_SYMBOL, build_dashboard
from .logging_utils import get_logger
from .storage import JsonFileKeyValueStore, TransactionRepository

LOGGER = get_logger(__name__)


@dataclass
class BudgetSession:
    """Explicit owner of the session ledger."""

    store: TransactionStore
    engine: AggregationEngine = field(default_factory=AggregationEngine)
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    @classmethod
    def from_settings(cls, settings: Optional[BudgetTrackerSettings] = None) -> "BudgetSession":
        """Open the configured storage file and hydrate a store from it."""

        settings = settings or get_settings()
        backend = JsonFileKeyValueStore(settings.storage_path)
        repository = TransactionRepository(backend, key=settings.storage_key)
        store = TransactionStore(repository)
        LOGGER.info(
            "Opened ledger %s with %s transactions", settings.storage_path, len(store)
        )
        return cls(store=store, currency_symbol=settings.currency_symbol)

    def aggregate(self) -> AggregationResult:
        return self.engine.compute(self.store.all())

    def dashboard(self) -> Dict[str, object]:
        """Recompute aggregates and project them for display."""

        return build_dashboard(self.store.all(), self.aggregate(), self.currency_symbol)
