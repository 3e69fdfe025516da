"""Abstract base class for conversation history and current prototype lookup."""

from abc import ABC, abstractmethod
from typing import Optional

from models.generation import ConversationTurn


class ConversationStore(ABC):
    """Read-only view of conversations used by the generation service.

    The store is owned by the persistence layer that handles conversations,
    messages and prototypes. The generation service only reads the most
    recent turns of a conversation and the markup of its current prototype
    and never mutates them.
    """

    @abstractmethod
    async def get_recent_turns(
        self, conversation_id: str, limit: int
    ) -> list[ConversationTurn]:
        """Retrieve the most recent turns of a conversation.

        Args:
            conversation_id: The conversation ID.
            limit: Maximum number of turns to return.

        Returns:
            Up to `limit` turns ordered from the oldest to the newest; empty
            list for unknown conversation.
        """

    @abstractmethod
    async def get_current_artifact(self, conversation_id: str) -> Optional[str]:
        """Retrieve markup of the current prototype of a conversation.

        Args:
            conversation_id: The conversation ID.

        Returns:
            The HTML markup, or None when the conversation has no prototype yet.
        """

    @abstractmethod
    def ready(self) -> bool:
        """Check if the store is ready for use.

        Returns:
            True if the store is initialized and ready, False otherwise.
        """
