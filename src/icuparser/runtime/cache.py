"""Get-or-populate memo for locale-keyed plural data.

No eviction and no invalidation: values are pure functions of their keys,
so a concurrent double computation is harmless (last writer wins). The
lock only protects the dict itself; factories run outside it.

Python 3.13+.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

__all__ = ["LocaleCache"]


class LocaleCache[K, V]:
    """Thread-safe memo with populate-once semantics."""

    __slots__ = ("_data", "_hits", "_lock", "_misses")

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_or_populate(self, key: K, factory: Callable[[], V]) -> V:
        """Return the cached value for key, computing it with factory on a miss."""
        with self._lock:
            if key in self._data:
                self._hits += 1
                return self._data[key]
            self._misses += 1
        value = factory()
        with self._lock:
            self._data[key] = value
        return value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
