"""Process-wide memo tables keyed by small integers."""

from __future__ import annotations

import logging
import threading
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")


class MemoTable(Generic[V]):
    """Lock-protected mapping from an integer key to an immutable result.

    The lock is held only for a single lookup or insert. Callers compute a
    missing value (including any recursion on smaller keys) without holding
    it, then ``record`` the result; the first value recorded for a key wins.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[int, V] = {}
        self._lock = threading.Lock()

    def get(self, key: int) -> V | None:
        with self._lock:
            return self._entries.get(key)

    def record(self, key: int, value: V) -> V:
        """Store ``value`` unless ``key`` is already present; return the stored value."""

        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing
            self._entries[key] = value
        logger.debug("%s: cached key %d", self.name, key)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: int) -> bool:
        with self._lock:
            return key in self._entries
