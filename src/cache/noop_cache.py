"""No-operation response cache implementation."""

from typing import Optional

import metrics
from cache.cache import ResponseCache, ValueT
from log import get_logger

logger = get_logger("cache.noop_cache")


class NoopResponseCache(ResponseCache[ValueT]):
    """No-operation response cache implementation.

    Used when response caching is disabled: nothing is stored and every
    lookup is a miss, so each request reaches the generation API.
    """

    def __init__(self, name: str) -> None:
        """Create a new instance of no-op cache."""
        self.name = name

    def lookup(self, fingerprint: str) -> Optional[ValueT]:
        """Return None, nothing is ever cached."""
        metrics.response_cache_misses_total.labels(self.name).inc()
        return None

    def store(self, fingerprint: str, value: ValueT, ttl: float) -> None:
        """Discard the value."""

    def sweep(self) -> int:
        """Return 0, there is nothing to sweep."""
        return 0

    def clear(self) -> None:
        """Nothing to clear."""

    def init(self) -> None:
        """Log that caching is disabled."""
        logger.info("Response cache '%s' is disabled", self.name)

    def shutdown(self) -> None:
        """Nothing to shut down."""

    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True (`bool`): Always `True` for this implementation.
        """
        return True

    def __len__(self) -> int:
        """Return 0, nothing is stored."""
        return 0
