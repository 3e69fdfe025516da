"""Cache factory class."""

import logging

import constants
from cache.cache import ResponseCache, ValueT
from cache.in_memory_cache import InMemoryResponseCache
from cache.noop_cache import NoopResponseCache
from models.config import ResponseCacheConfiguration

logger = logging.getLogger(__name__)


class CacheFactory:  # pylint: disable=too-few-public-methods
    """Factory class for response cache implementations."""

    @staticmethod
    def response_cache(
        config: ResponseCacheConfiguration, name: str
    ) -> ResponseCache[ValueT]:
        """Create an instance of response cache based on the loaded configuration.

        Parameters:
            config (ResponseCacheConfiguration): Response cache configuration.
            name (str): Name of the cache used in logs and metrics.

        Returns:
            An instance of `ResponseCache` (either `InMemoryResponseCache` or
            `NoopResponseCache`).

        Raises:
            ValueError: If the cache type is not set or is not supported.
        """
        match config.type:
            case constants.CACHE_TYPE_MEMORY:
                logger.info("Creating in-memory response cache '%s'", name)
                return InMemoryResponseCache(
                    name,
                    sweep_interval=config.sweep_interval,
                    max_entries=config.max_entries,
                )
            case constants.CACHE_TYPE_NOOP:
                logger.info("Creating no-op response cache '%s'", name)
                return NoopResponseCache(name)
            case None:
                raise ValueError("Cache type must be set")
            case _:
                raise ValueError(
                    f"Invalid cache type: {config.type}. "
                    f"Should be one of {constants.CACHE_TYPE_MEMORY} "
                    f"or {constants.CACHE_TYPE_NOOP}"
                )
