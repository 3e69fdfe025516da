"""Handler for REST API call to get a chat reply of the assistant."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from configuration import configuration
from generation.errors import GenerationError
from models.requests import ChatRequest
from models.responses import (
    ChatResponse,
    InternalServerErrorResponse,
    ServiceUnavailableResponse,
    UnprocessableEntityResponse,
)
from utils.endpoints import check_configuration_loaded, generation_error_response

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["chat"])


chat_responses: dict[int | str, dict[str, Any]] = {
    200: ChatResponse.openapi_response(),
    422: UnprocessableEntityResponse.openapi_response(),
    500: InternalServerErrorResponse.openapi_response(
        examples=["configuration", "credential", "chat"]
    ),
    503: ServiceUnavailableResponse.openapi_response(),
}


@router.post("/chat", responses=chat_responses)
async def chat_endpoint_handler(chat_request: ChatRequest) -> ChatResponse:
    """
    Handle request for a short conversational reply.

    Returns:
        ChatResponse: The assistant reply.

    Raises:
        HTTPException: 500 when the service is not configured or the reply
        can not be generated, 503 when the generation API can not be reached.
    """
    check_configuration_loaded(configuration)

    try:
        reply = await configuration.generation_service.generate_chat_reply(
            chat_request.prompt, chat_request.conversation_id
        )
    except GenerationError as e:
        logger.error("Chat reply failed: %s", e)
        response = generation_error_response(e, InternalServerErrorResponse.chat_failed)
        raise HTTPException(**response.model_dump()) from e

    return ChatResponse(response=reply)
