"""Common types for the project."""

from typing import Callable, TypedDict

# Source of current time in seconds; injectable so tests can control it
Clock = Callable[[], float]


class ChatMessage(TypedDict):
    """One message of chat completion request."""

    role: str
    content: str


class Singleton(type):
    """Metaclass for Singleton support."""

    _instances = {}  # type: ignore

    def __call__(cls, *args, **kwargs):  # type: ignore
        """
        Return the single cached instance of the class, creating and caching it on first call.

        Returns:
            object: The singleton instance for this class.
        """
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]
