"""Llama Stack client retrieval class."""

import logging

from typing import Any, Optional

from llama_stack_client import AsyncLlamaStackClient  # type: ignore
from models.config import LlamaStackConfiguration
from utils.types import Singleton


logger = logging.getLogger(__name__)


class AsyncLlamaStackClientHolder(metaclass=Singleton):
    """Container for an initialised AsyncLlamaStackClient used for generation."""

    _lsc: Optional[AsyncLlamaStackClient] = None

    def load(self, llama_stack_config: LlamaStackConfiguration) -> None:
        """
        Create the holder's AsyncLlamaStackClient according to the provided config.

        The client talks to a Llama Stack service running at
        `llama_stack_config.url` using the optional API key. When a timeout
        is configured it applies to every call made by the client.

        Parameters:
            llama_stack_config (LlamaStackConfiguration): Service connection
            details (URL, optional API key and timeout).
        """
        logger.info("Using Llama stack running as a service at %s", llama_stack_config.url)
        kwargs: dict[str, Any] = {}
        if llama_stack_config.timeout is not None:
            kwargs["timeout"] = llama_stack_config.timeout
        self._lsc = AsyncLlamaStackClient(
            base_url=llama_stack_config.url,
            api_key=(
                llama_stack_config.api_key.get_secret_value()
                if llama_stack_config.api_key is not None
                else None
            ),
            **kwargs,
        )

    def is_loaded(self) -> bool:
        """Check if the client has been created."""
        return self._lsc is not None

    def get_client(self) -> AsyncLlamaStackClient:
        """
        Get the initialized client held by this holder.

        Returns:
            AsyncLlamaStackClient: The initialized client instance.

        Raises:
            RuntimeError: If the client has not been initialized; call `load(...)` first.
        """
        if not self._lsc:
            raise RuntimeError(
                "AsyncLlamaStackClient has not been initialised. Ensure 'load(..)' has been called."
            )
        return self._lsc

    async def close(self) -> None:
        """Close the held client, if any."""
        if self._lsc is not None:
            await self._lsc.close()
            self._lsc = None
