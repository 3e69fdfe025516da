"""Abstract class that is parent for all response cache implementations."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

ValueT = TypeVar("ValueT")


class ResponseCache(ABC, Generic[ValueT]):
    """Abstract class that is parent for all response cache implementations.

    Cache entries are identified by a request fingerprint. Each stored value
    has its own time-to-live; stale entries are logically absent. The cache is
    shared by all in-flight requests, so implementations must tolerate
    concurrent lookups and stores. No cross-operation atomicity is provided:
    two concurrent misses on the same fingerprint both compute the value and
    the second store wins.
    """

    @abstractmethod
    def lookup(self, fingerprint: str) -> Optional[ValueT]:
        """Return cached value for the fingerprint.

        Parameters:
            fingerprint (str): Normalized request fingerprint.

        Returns:
            The cached value, or None when the entry is missing or expired.
            Expired entries are removed as a side effect.
        """

    @abstractmethod
    def store(self, fingerprint: str, value: ValueT, ttl: float) -> None:
        """Insert or overwrite the value for the fingerprint.

        Parameters:
            fingerprint (str): Normalized request fingerprint.
            value: Value to be cached.
            ttl (float): Time-to-live of the entry in seconds.
        """

    @abstractmethod
    def sweep(self) -> int:
        """Remove all expired entries.

        Returns:
            int: Number of removed entries.
        """

    @abstractmethod
    def clear(self) -> None:
        """Drop all entries."""

    @abstractmethod
    def init(self) -> None:
        """Start the cache lifecycle (background sweeping, if any)."""

    @abstractmethod
    def shutdown(self) -> None:
        """Stop the cache lifecycle and release all entries."""

    @abstractmethod
    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True if the cache is ready, False otherwise.
        """

    @abstractmethod
    def __len__(self) -> int:
        """Return number of stored entries, including not yet swept stale ones."""
