"""
Prediction cache.

Maps a cache key to a previously computed result for a bounded time. When the
cache is full the entry inserted longest ago is evicted.
"""

import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from forge.core.logging import get_logger

logger = get_logger(__name__)


class PredictionCache:
    """A thread-safe TTL cache with a maximum number of entries.

    Attributes:
        max_entries: Capacity of the cache.
        ttl_seconds: Lifetime of an entry.
    """

    def __init__(
        self,
        max_entries: int,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[Hashable, Tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        """Returns the cached value, or None when missing or expired.

        Expired entries are removed on access.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            value, inserted_at = entry
            if self._clock() - inserted_at < self.ttl_seconds:
                return value

            del self._entries[key]
            return None

    def insert(self, key: Hashable, value: Any) -> None:
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_entries:
                self._evict_oldest()
            self._entries[key] = (value, self._clock())

    def _evict_oldest(self) -> None:
        oldest_key = min(self._entries, key=lambda k: self._entries[k][1], default=None)
        if oldest_key is not None:
            del self._entries[oldest_key]
            logger.debug("Evicted oldest cache entry", cache_size=len(self._entries))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
