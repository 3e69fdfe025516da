"""Conversation store components.

The generation service reads conversation history and the current prototype
through the `ConversationStore` interface. Persistence of conversations,
messages and prototypes is handled elsewhere; the in-memory implementation
is provided for development and tests.
"""

from storage.conversation_store import ConversationStore
from storage.in_memory_conversation_store import InMemoryConversationStore

__all__ = [
    "ConversationStore",
    "InMemoryConversationStore",
]
