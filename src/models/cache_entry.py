"""Model for response cache entry."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

ValueT = TypeVar("ValueT")


class CacheEntry(BaseModel, Generic[ValueT]):
    """Model representing a cache entry.

    Attributes:
        value: The cached response (generation result or chat reply)
        stored_at: Clock reading in seconds when the entry was stored
        ttl: Time-to-live in seconds
    """

    model_config = ConfigDict(frozen=True)

    value: ValueT
    stored_at: float
    ttl: float

    @property
    def expires_at(self) -> float:
        """Return clock reading after which the entry is stale."""
        return self.stored_at + self.ttl

    def is_valid(self, now: float) -> bool:
        """Check if the entry is still fresh at the given clock reading.

        An entry is valid up to and including the moment its age equals the TTL.
        """
        return now - self.stored_at <= self.ttl
