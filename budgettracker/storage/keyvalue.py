"""Mini README: Durable key-value slots backing the transaction repository.

Structure:
    * KeyValueStore - abstract interface mirroring browser-style local storage.
    * InMemoryKeyValueStore - dict-backed slots with an optional byte quota.
    * JsonFileKeyValueStore - all slots kept in one JSON document on disk.

The file store writes atomically (temporary file, fsync, replace) so a crash
mid-write never leaves a half written document behind. Both stores raise
``PersistenceReadError``/``PersistenceWriteError`` so callers only deal with
the budget tracker error taxonomy.
"""

from __future__ import annotations

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..finance.errors import PersistenceReadError, PersistenceWriteError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class KeyValueStore(ABC):
    """Minimal string-to-string storage interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or ``None`` when the slot is empty."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""


class InMemoryKeyValueStore(KeyValueStore):
    """Volatile slots, handy for tests and throwaway sessions."""

    def __init__(self, *, quota_bytes: Optional[int] = None) -> None:
        self._values: Dict[str, str] = {}
        self.quota_bytes = quota_bytes

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            projected = self._used_bytes(excluding=key) + len(value.encode("utf-8"))
            if projected > self.quota_bytes:
                raise PersistenceWriteError(
                    f"Storage quota exceeded: {projected} bytes > {self.quota_bytes} bytes"
                )
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def _used_bytes(self, *, excluding: str) -> int:
        return sum(
            len(value.encode("utf-8")) for key, value in self._values.items() if key != excluding
        )


class JsonFileKeyValueStore(KeyValueStore):
    """Persist every slot inside a single JSON object file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            document = self._read()
        except PersistenceReadError:
            LOGGER.warning("Overwriting unreadable storage file %s", self.path)
            document = {}
        document[key] = value
        self._write(document)

    def delete(self, key: str) -> None:
        document = self._read()
        if document.pop(key, None) is not None:
            self._write(document)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as error:
            raise PersistenceReadError(f"Unable to read {self.path}: {error}") from error
        if not raw.strip():
            return {}
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as error:
            raise PersistenceReadError(f"Storage file {self.path} is not valid JSON") from error
        if not isinstance(document, dict):
            raise PersistenceReadError(f"Storage file {self.path} must contain a JSON object")
        return {str(key): value for key, value in document.items() if isinstance(value, str)}

    def _write(self, document: Dict[str, str]) -> None:
        tmp_path: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(document, handle, ensure_ascii=False, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as error:
            raise PersistenceWriteError(f"Unable to write {self.path}: {error}") from error
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
        LOGGER.debug("Wrote %s slot(s) to %s", len(document), self.path)
