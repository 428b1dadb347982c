"""Bounded LRU cache for parse results."""

import logging
import threading
from collections import OrderedDict

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 100


class LRUCache:
    """Thread-safe LRU cache mapping input strings to parsed milliseconds."""

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._cache: OrderedDict[str, float] = OrderedDict()
        self._max_size = max_size
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, key: str) -> float | None:
        """Get a cached value, marking it most recently used."""
        with self._lock:
            value = self._cache.get(key)
            if value is not None:
                self._cache.move_to_end(key)  # LRU touch
            return value

    def set(self, key: str, value: float) -> None:
        """Store a value, evicting the least recently used entry when full."""
        with self._lock:
            self._cache[key] = value
            self._cache.move_to_end(key)
            if len(self._cache) > self._max_size:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("evicted %r from parse cache", evicted)

    def clear(self) -> None:
        """Clear all cached entries."""
        with self._lock:
            self._cache.clear()

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
