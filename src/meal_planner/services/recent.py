"""Memory of the most recently accepted meal plan."""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Persistence interface for small string values."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local key-value store."""

    _values: dict[str, str]

    def __init__(self) -> None:
        self._values = {}

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""
        self._values[key] = value


@dataclass
class RecentSelectionMemory:
    """Tracks which meal ids were accepted last time."""

    store: KeyValueStore
    key: str = "lastAcceptedMeals"

    def load(self) -> set[str]:
        """Return the previously accepted ids, or an empty set on any problem."""
        try:
            raw = self.store.get(self.key)
        except Exception:
            _logger.exception(
                "Failed to read recent selection", extra={"key": self.key}
            )
            return set()
        if not raw:
            return set()
        try:
            decoded = json.loads(raw)
        except ValueError:
            _logger.warning("Ignoring unparseable recent selection: %r", raw)
            return set()
        if not isinstance(decoded, list):
            _logger.warning("Ignoring recent selection that is not a list: %r", raw)
            return set()
        return {str(item) for item in decoded if isinstance(item, str | int)}

    def save(self, ids: Iterable[str]) -> None:
        """Persist the accepted ids as a JSON string array."""
        self.store.set(self.key, json.dumps(list(ids)))
