"""In-process LRU cache for client tag sets.

Entries expire after a fixed TTL and the least recently used entry is evicted
once the cache grows past its capacity. The cache is owned by a single
`ValidationEngine` instance; it is not shared across processes and is not
safe for concurrent writers from multiple threads.
"""

import time
from collections import OrderedDict
from typing import Callable, Generic, Hashable, Optional, Tuple, TypeVar

from core.logger import get_logger

logger = get_logger("services.tag_cache")

V = TypeVar("V")


class TTLCache(Generic[V]):
    """Capacity-bounded, time-expiring key/value cache.

    Args:
        max_size: Maximum number of live entries.
        ttl_seconds: How long an entry stays valid after it was stored.
        clock: Monotonic time source; injectable for tests.
    """

    def __init__(self, max_size: int = 50, ttl_seconds: float = 300.0, clock: Callable[[], float] = time.monotonic):
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[Hashable, Tuple[V, float]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        entry = self._entries.get(key)
        return entry is not None and not self._expired(entry[1])

    def _expired(self, stored_at: float) -> bool:
        return self._clock() - stored_at >= self.ttl_seconds

    def get(self, key: Hashable) -> Optional[V]:
        """Return the cached value and mark it most recently used.

        Expired entries are dropped and reported as a miss.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, stored_at = entry
        if self._expired(stored_at):
            del self._entries[key]
            logger.debug("Cache entry expired: %s", key)
            return None
        self._entries.move_to_end(key)
        return value

    def set(self, key: Hashable, value: V) -> None:
        """Store a value, evicting the least recently used entry when full."""
        if key in self._entries:
            del self._entries[key]
        self._entries[key] = (value, self._clock())
        while len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Cache full, evicted: %s", evicted)

    def invalidate(self, key: Hashable) -> bool:
        """Drop a single entry. Unknown or expired keys are ignored."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()


class ClientTagCache(TTLCache):
    """`TTLCache` keyed by client id and holding `ClientTagSet` values."""
