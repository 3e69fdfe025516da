"""In-memory implementation of conversation store."""

import asyncio
import logging
from typing import Literal, Optional

from models.generation import ConversationTurn
from storage.conversation_store import ConversationStore

logger = logging.getLogger(__name__)


class InMemoryConversationStore(ConversationStore):
    """In-memory implementation of conversation store.

    Keeps conversation turns and the current prototype markup in dictionaries.
    Data is lost when the server process stops. This implementation is
    suitable for development and testing; production deployments plug in the
    store backed by the persistence layer.
    """

    def __init__(self) -> None:
        """Initialize the in-memory conversation store."""
        logger.debug("Initializing InMemoryConversationStore")
        self._turns: dict[str, list[ConversationTurn]] = {}
        self._artifacts: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def get_recent_turns(
        self, conversation_id: str, limit: int
    ) -> list[ConversationTurn]:
        """Retrieve the most recent turns of a conversation.

        Args:
            conversation_id: The conversation ID.
            limit: Maximum number of turns to return.

        Returns:
            Up to `limit` turns ordered from the oldest to the newest.
        """
        if limit <= 0:
            return []
        async with self._lock:
            turns = self._turns.get(conversation_id, [])
            return list(turns[-limit:])

    async def get_current_artifact(self, conversation_id: str) -> Optional[str]:
        """Retrieve markup of the current prototype of a conversation.

        Args:
            conversation_id: The conversation ID.

        Returns:
            The HTML markup, or None when there is no prototype.
        """
        async with self._lock:
            return self._artifacts.get(conversation_id)

    async def add_turn(
        self,
        conversation_id: str,
        role: Literal["user", "assistant"],
        content: str,
    ) -> None:
        """Append a turn to a conversation.

        Args:
            conversation_id: The conversation ID.
            role: Who produced the turn.
            content: Text of the turn.
        """
        async with self._lock:
            self._turns.setdefault(conversation_id, []).append(
                ConversationTurn(role=role, content=content)
            )
            logger.debug("Stored %s turn for conversation %s", role, conversation_id)

    async def set_current_artifact(self, conversation_id: str, markup: str) -> None:
        """Set markup of the current prototype of a conversation.

        Args:
            conversation_id: The conversation ID.
            markup: The HTML markup.
        """
        async with self._lock:
            self._artifacts[conversation_id] = markup
            logger.debug(
                "Stored prototype for conversation %s, length %d",
                conversation_id,
                len(markup),
            )

    def ready(self) -> bool:
        """Check if the store is ready for use.

        Returns:
            True, as in-memory store is always ready after construction.
        """
        return True
