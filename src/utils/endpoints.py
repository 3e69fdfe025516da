"""Utility functions for endpoint handlers."""

import logging
from typing import Callable

from fastapi import HTTPException

from configuration import AppConfig, LogicError
from generation.errors import ConfigurationError, GenerationError, UpstreamError
from models.responses import (
    AbstractErrorResponse,
    InternalServerErrorResponse,
    ServiceUnavailableResponse,
)

logger = logging.getLogger(__name__)


def check_configuration_loaded(config: AppConfig) -> None:
    """Check that configuration is loaded and raise exception when it is not."""
    try:
        _ = config.configuration
    except LogicError as e:
        response = InternalServerErrorResponse.configuration_not_loaded()
        raise HTTPException(**response.model_dump()) from e


def generation_error_response(
    error: GenerationError,
    failed: Callable[[str], InternalServerErrorResponse],
) -> AbstractErrorResponse:
    """Translate generation error into structured error response.

    Parameters:
        error: The error raised by the generation service.
        failed: Builds the response used when the generation API call failed.

    Returns:
        AbstractErrorResponse: 500 for missing credential or failed call,
        503 when the generation API could not be reached.
    """
    match error:
        case ConfigurationError():
            return InternalServerErrorResponse.generation_not_configured(str(error))
        case UpstreamError(connection_failed=True):
            return ServiceUnavailableResponse(
                backend_name="Llama Stack", cause=error.cause
            )
        case UpstreamError():
            return failed(str(error))
        case _:
            return InternalServerErrorResponse.generic()
