"""Errors raised by the generation service."""

from typing import Optional


class GenerationError(Exception):
    """Base class for errors raised while generating prototypes or chat replies."""


class ConfigurationError(GenerationError):
    """Required configuration (API credential) is missing.

    Raised before any network call is made.
    """


class UpstreamError(GenerationError):
    """The generation API call failed or returned content that can not be parsed.

    Attributes:
        cause: Message of the underlying failure.
        connection_failed: True when the generation API could not be reached.
    """

    def __init__(
        self, message: str, cause: Optional[str] = None, connection_failed: bool = False
    ) -> None:
        """Initialize the error.

        Parameters:
            message (str): Short summary of the failure.
            cause (Optional[str]): Message of the underlying failure.
            connection_failed (bool): Whether the API was unreachable.
        """
        super().__init__(f"{message}: {cause}" if cause else message)
        self.cause = cause if cause is not None else message
        self.connection_failed = connection_failed
