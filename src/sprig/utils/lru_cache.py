"""Thread-safe LRU cache for compiled templates.

A small OrderedDict-backed cache with hit/miss accounting. Every operation
takes the lock, so one cache can be shared by all threads rendering through
the same Environment.

Example:
    >>> cache = LRUCache(maxsize=2)
    >>> cache.set("a", 1)
    >>> cache.set("b", 2)
    >>> cache.get("b")
    2
    >>> cache.stats()["size"]
    2
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Any


class LRUCache:
    """Least-recently-used mapping with a fixed capacity.

    ``get`` returns None on a miss, so None cannot be cached.

    Args:
        maxsize: Maximum number of entries; 0 disables caching entirely
    """

    __slots__ = ("_data", "_hits", "_lock", "_misses", "maxsize")

    def __init__(self, maxsize: int = 128):
        if maxsize < 0:
            raise ValueError(f"maxsize must be >= 0, got {maxsize}")
        self.maxsize = maxsize
        self._data: OrderedDict[Any, Any] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: Any) -> Any:
        with self._lock:
            try:
                value = self._data[key]
            except KeyError:
                self._misses += 1
                return None
            self._data.move_to_end(key)
            self._hits += 1
            return value

    def set(self, key: Any, value: Any) -> None:
        if self.maxsize == 0:
            return
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            while len(self._data) > self.maxsize:
                self._data.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict[str, Any]:
        """Cache statistics: size, max_size, hits, misses, hit_rate."""
        with self._lock:
            total = self._hits + self._misses
            return {
                "size": len(self._data),
                "max_size": self.maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": self._hits / total if total else 0.0,
            }

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
