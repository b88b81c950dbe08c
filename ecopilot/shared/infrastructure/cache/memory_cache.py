# 📄 File: ecopilot/shared/infrastructure/cache/memory_cache.py
# 🧭 Purpose (Layman Explanation):
# A short-term memory that remembers recent weather and address answers for a while
# so EcoPilot does not ask the outside services the same question over and over.
# It only holds a limited number of answers and forgets the oldest first.
# 🧪 Purpose (Technical Summary):
# Process-local, size-bounded TTL cache built on cachetools.TTLCache, guarded by a
# lock and reporting hit/miss statistics.
# 🔗 Dependencies:
# cachetools, threading, time
# 🔄 Connected Modules / Calls From:
# WeatherService (10 minute weather cache), GeocodingService (24 hour address cache)

import logging
import time
from threading import Lock
from typing import Any, Callable, Dict, Hashable, Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_MAXSIZE = 1024


class MemoryCache:
    """
    Bounded in-memory TTL cache.

    Expired entries are evicted on every write, and the least recently used entry
    makes room once ``maxsize`` is reached.
    """

    def __init__(
        self,
        ttl: float = 300,
        maxsize: int = DEFAULT_MAXSIZE,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self.maxsize = maxsize
        self._cache: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)
        self._lock = Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            value = self._cache.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._cache[key] = value

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            return self._cache.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
        logger.debug("🧹 Memory cache cleared")

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    def get_stats(self) -> Dict[str, Any]:
        total = self.hits + self.misses
        return {
            "entries": len(self),
            "maxsize": self.maxsize,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": (self.hits / total * 100) if total else 0.0,
        }
