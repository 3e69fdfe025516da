"""Parsing of content returned by the generation API."""

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

import metrics
from generation.errors import UpstreamError
from models.generation import GenerationResult

logger = logging.getLogger(__name__)


def response_content(response: Any) -> Optional[str]:
    """Extract text of the first choice of chat completion response."""
    choices = getattr(response, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    if message is None:
        return None
    return getattr(message, "content", None)


def parse_generation_result(content: Optional[str]) -> GenerationResult:
    """Parse JSON object produced by the LLM into generation result.

    Parameters:
        content (Optional[str]): Raw text of the LLM reply.

    Returns:
        GenerationResult: The validated artifact.

    Raises:
        UpstreamError: When the reply is empty, is not a JSON object, or
        lacks the required fields.
    """
    if content is None or content.strip() == "":
        raise UpstreamError("Generation API returned no content")

    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        metrics.llm_calls_validation_errors_total.labels("generate").inc()
        logger.error("Generation API returned content that is not valid JSON: %s", e)
        raise UpstreamError(
            "Generation API returned content that is not valid JSON", str(e)
        ) from e

    if not isinstance(parsed, dict):
        metrics.llm_calls_validation_errors_total.labels("generate").inc()
        raise UpstreamError(
            "Generation API returned content that is not JSON object",
            f"got {type(parsed).__name__}",
        )

    try:
        return GenerationResult.model_validate(parsed)
    except ValidationError as e:
        metrics.llm_calls_validation_errors_total.labels("generate").inc()
        logger.error("Generation API returned malformed result: %s", e)
        raise UpstreamError(
            "Generation API returned malformed result", str(e)
        ) from e


def parse_chat_reply(content: Optional[str]) -> str:
    """Return the chat reply text, rejecting empty replies."""
    if content is None or content.strip() == "":
        metrics.llm_calls_validation_errors_total.labels("chat").inc()
        raise UpstreamError("Generation API returned an empty reply")
    return content
