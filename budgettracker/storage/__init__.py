"""Mini README: Local persistence for the budget tracker ledger.

Exports the key-value slot implementations and the repository that maps the
transaction collection onto a single named slot.
"""

from .keyvalue import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from .repository import DEFAULT_STORAGE_KEY, SaveResult, TransactionRepository

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "SaveResult",
    "TransactionRepository",
]
