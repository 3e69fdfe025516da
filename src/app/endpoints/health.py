"""Handler for health REST API endpoint.

The endpoint is used to check if service is live. It also reports whether
the credential needed to call the generation API is configured. Note that
the endpoint can be accessed using GET or HEAD HTTP methods. For HEAD HTTP
method, just the HTTP response code is used.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

from configuration import LogicError, configuration
from models.responses import HealthResponse

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["health"])


get_health_responses: dict[int | str, dict[str, Any]] = {
    200: HealthResponse.openapi_response(),
}


def generation_configured() -> bool:
    """Check if the generation API credential is configured."""
    try:
        return configuration.llama_stack_configuration.credential_configured
    except LogicError:
        logger.warning("Health check requested before configuration was loaded")
        return False


@router.get("/health", responses=get_health_responses)
@router.head("/health", include_in_schema=False)
async def health_endpoint_handler() -> HealthResponse:
    """
    Handle the health endpoint.

    Returns:
        HealthResponse: Service status, generation API credential flag and
        time of the check.
    """
    logger.debug("Response to /api/health endpoint")
    return HealthResponse(
        status="healthy",
        generation_configured=generation_configured(),
        timestamp=datetime.now(UTC).isoformat(),
    )
