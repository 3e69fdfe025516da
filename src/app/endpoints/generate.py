"""Handler for REST API call to generate or modify a prototype."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from configuration import configuration
from generation.errors import GenerationError
from models.requests import GenerateCodeRequest
from models.responses import (
    GenerateCodeResponse,
    InternalServerErrorResponse,
    ServiceUnavailableResponse,
    UnprocessableEntityResponse,
)
from utils.endpoints import check_configuration_loaded, generation_error_response

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["generate"])


generate_code_responses: dict[int | str, dict[str, Any]] = {
    200: GenerateCodeResponse.openapi_response(),
    422: UnprocessableEntityResponse.openapi_response(),
    500: InternalServerErrorResponse.openapi_response(
        examples=["configuration", "credential", "code generation"]
    ),
    503: ServiceUnavailableResponse.openapi_response(),
}


@router.post("/generate-code", responses=generate_code_responses)
async def generate_code_endpoint_handler(
    generate_request: GenerateCodeRequest,
) -> GenerateCodeResponse:
    """
    Handle request to generate a new prototype or modify the current one.

    When the conversation already has a prototype, only the change described
    by the prompt is applied to it; otherwise a complete new prototype is
    generated. Identical requests repeated within a short time are answered
    from the response cache.

    Returns:
        GenerateCodeResponse: The generated prototype or clarifying question.

    Raises:
        HTTPException: 500 when the service is not configured or generation
        fails, 503 when the generation API can not be reached.
    """
    check_configuration_loaded(configuration)

    logger.info(
        "Code generation request for conversation %s",
        generate_request.conversation_id,
    )
    try:
        result = await configuration.generation_service.generate_artifact(
            generate_request.prompt, generate_request.conversation_id
        )
    except GenerationError as e:
        logger.error("Code generation failed: %s", e)
        response = generation_error_response(
            e, InternalServerErrorResponse.code_generation_failed
        )
        raise HTTPException(**response.model_dump()) from e

    return GenerateCodeResponse.from_result(result)
