"""Short-lived cache for generated learning content."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from threading import Lock
from typing import Any

from config import get_settings


@dataclass
class CacheEntry:
    value: Any
    timestamp: float


class ResultCache:
    """Thread-safe TTL cache keyed by request shape and a coarse time bucket.

    Keys embed the current time bucket, so identical requests inside the same
    minute share a result and later requests miss on key alone. Entries also
    expire after `ttl_seconds`. When the cache grows past `max_entries`, every
    expired entry is swept; live entries are never evicted early.

    Example:
        cache = ResultCache(ttl_seconds=300)
        key = cache.make_key("quiz", "basic", len(posts), 3, "mixed")
        if (hit := cache.get(key)) is None:
            cache.set(key, generated)
    """

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_entries: int = 50,
        bucket_seconds: int = 60,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the cache.

        Args:
            ttl_seconds: Lifetime of an entry.
            max_entries: Size above which expired entries are swept on write.
            bucket_seconds: Width of the time bucket folded into keys.
            clock: Returns the current time in seconds. Injected by tests.
        """
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._bucket = bucket_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = Lock()

    def make_key(
        self,
        kind: str,
        strategy: str,
        cardinality: Any,
        count: int,
        difficulty: str | None = None,
    ) -> str:
        """Build a key such as ``quiz_basic_3_5_mixed_1700000040``."""
        bucket = math.floor(self._clock() / self._bucket) * self._bucket
        return f"{kind}_{strategy}_{cardinality}_{count}_{difficulty or 'none'}_{bucket}"

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.timestamp >= self._ttl

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._expired(entry, self._clock()):
                del self._entries[key]
                return None
            return entry.value

    def set(self, key: str, value: Any) -> None:
        """Store a value, sweeping expired entries once the size cap is passed."""
        with self._lock:
            now = self._clock()
            self._entries[key] = CacheEntry(value=value, timestamp=now)

            if len(self._entries) > self._max_entries:
                expired = [k for k, e in self._entries.items() if self._expired(e, now)]
                for k in expired:
                    del self._entries[k]

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        """Number of stored entries, possibly including expired ones."""
        return len(self._entries)

    @property
    def stats(self) -> dict:
        """Return cache statistics."""
        with self._lock:
            now = self._clock()
            return {
                "size": len(self._entries),
                "max_entries": self._max_entries,
                "ttl_seconds": self._ttl,
                "expired_count": sum(1 for e in self._entries.values() if self._expired(e, now)),
            }


@lru_cache(maxsize=1)
def get_default_cache() -> ResultCache:
    """Process-wide cache shared by the convenience generators."""
    settings = get_settings()
    return ResultCache(**settings.get_cache_config())
