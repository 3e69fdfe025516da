"""In-memory response cache implementation."""

import time
from threading import Lock
from typing import Optional

import metrics
from cache.cache import ResponseCache, ValueT
from log import get_logger
from models.cache_entry import CacheEntry
from runners.cache_sweeper import CacheSweeper
from utils.types import Clock

logger = get_logger("cache.in_memory_cache")


class InMemoryResponseCache(ResponseCache[ValueT]):
    """In-memory response cache implementation.

    Entries are kept in a dictionary guarded by a lock, one critical section
    per operation, so the cache stays consistent when requests are dispatched
    onto multiple threads. Expired entries are removed lazily by `lookup` and
    periodically by a background sweeper started in `init`.
    """

    def __init__(
        self,
        name: str,
        sweep_interval: float,
        max_entries: Optional[int] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        """Create a new instance of in-memory response cache.

        Parameters:
            name (str): Cache name used in logs and metrics labels.
            sweep_interval (float): Period of background sweeping in seconds.
            max_entries (Optional[int]): When set, the oldest stored entry is
            evicted to make room for a new one.
            clock (Clock): Source of current time in seconds.
        """
        self.name = name
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = Lock()
        self._sweeper = CacheSweeper(name, self.sweep, sweep_interval)

    def lookup(self, fingerprint: str) -> Optional[ValueT]:
        """Return cached value for the fingerprint.

        Parameters:
            fingerprint (str): Normalized request fingerprint.

        Returns:
            The cached value, or None when the entry is missing or expired.
        """
        now = self._clock()
        with self._lock:
            entry = self._entries.get(fingerprint)
            if entry is not None and not entry.is_valid(now):
                # lazy eviction
                del self._entries[fingerprint]
                entry = None

        if entry is None:
            metrics.response_cache_misses_total.labels(self.name).inc()
            logger.debug("Cache '%s' miss for %.60s", self.name, fingerprint)
            return None

        metrics.response_cache_hits_total.labels(self.name).inc()
        logger.debug("Cache '%s' hit for %.60s", self.name, fingerprint)
        return entry.value

    def store(self, fingerprint: str, value: ValueT, ttl: float) -> None:
        """Insert or overwrite the value for the fingerprint.

        The age of the entry is reset to zero.

        Parameters:
            fingerprint (str): Normalized request fingerprint.
            value: Value to be cached.
            ttl (float): Time-to-live of the entry in seconds.
        """
        entry = CacheEntry(value=value, stored_at=self._clock(), ttl=ttl)
        with self._lock:
            # re-inserting moves the key to the end of insertion order
            self._entries.pop(fingerprint, None)
            if self.max_entries is not None:
                while len(self._entries) >= self.max_entries:
                    oldest = next(iter(self._entries))
                    del self._entries[oldest]
            self._entries[fingerprint] = entry
        logger.debug(
            "Cache '%s' stored %.60s, expires at %.3f",
            self.name,
            fingerprint,
            entry.expires_at,
        )

    def sweep(self) -> int:
        """Remove all expired entries.

        Returns:
            int: Number of removed entries.
        """
        now = self._clock()
        with self._lock:
            expired = [
                fingerprint
                for fingerprint, entry in self._entries.items()
                if not entry.is_valid(now)
            ]
            for fingerprint in expired:
                del self._entries[fingerprint]
        if expired:
            logger.info(
                "Cache '%s' sweep removed %d expired entries", self.name, len(expired)
            )
        return len(expired)

    def clear(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._entries.clear()

    def init(self) -> None:
        """Start the background sweeper."""
        logger.info("Initializing response cache '%s'", self.name)
        self._sweeper.start()

    def shutdown(self) -> None:
        """Stop the background sweeper and drop all entries."""
        logger.info("Shutting down response cache '%s'", self.name)
        self._sweeper.stop()
        self.clear()

    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True (`bool`): Always `True` for this in-memory cache implementation.
        """
        return True

    def __len__(self) -> int:
        """Return number of stored entries."""
        with self._lock:
            return len(self._entries)
