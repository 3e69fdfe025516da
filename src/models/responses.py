"""Models for REST API responses."""

from typing import Any, ClassVar, Optional

from fastapi import status
from pydantic import BaseModel, Field
from pydantic_core import SchemaError

from models.generation import GenerationResult

UNPROCESSABLE_CONTENT_DESCRIPTION = "Request validation failed"
SERVICE_UNAVAILABLE_DESCRIPTION = "Service unavailable"
INTERNAL_SERVER_ERROR_DESCRIPTION = "Internal server error"


class AbstractSuccessfulResponse(BaseModel):
    """Base class for all successful response models."""

    @classmethod
    def openapi_response(cls) -> dict[str, Any]:
        """Generate FastAPI response dict with a single example from model_config."""
        schema = cls.model_json_schema()
        model_examples = schema.get("examples")
        if not model_examples:
            raise SchemaError(f"Examples not found in {cls.__name__}")
        example_value = model_examples[0]
        content = {"application/json": {"example": example_value}}

        return {
            "description": "Successful response",
            "model": cls,
            "content": content,
        }


class GenerateCodeResponse(AbstractSuccessfulResponse):
    """Model representing a generated or modified prototype.

    Attributes:
        markup: Complete HTML document, empty when a question is asked.
        styles: Optional standalone CSS.
        script: Optional standalone JavaScript.
        explanation: Short summary of what was generated or changed.
        clarifying_question: Question for the user when more input is needed.
    """

    markup: str = Field(..., description="Complete HTML document")
    styles: Optional[str] = Field(None, description="Standalone CSS")
    script: Optional[str] = Field(None, description="Standalone JavaScript")
    explanation: str = Field(..., description="Summary of the change")
    clarifying_question: Optional[str] = Field(
        None, description="Question asked when more input is needed"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "markup": "<!DOCTYPE html><html><head></head><body>"
                    "<h1>Jane Doe Photography</h1></body></html>",
                    "styles": None,
                    "script": None,
                    "explanation": "Changed the heading text",
                    "clarifying_question": None,
                },
                {
                    "markup": "",
                    "styles": None,
                    "script": None,
                    "explanation": "Need user name for personal website",
                    "clarifying_question": "What is your name?",
                },
            ]
        }
    }

    @classmethod
    def from_result(cls, result: GenerationResult) -> "GenerateCodeResponse":
        """Create response from generation result."""
        return cls(
            markup=result.markup,
            styles=result.styles,
            script=result.script,
            explanation=result.explanation,
            clarifying_question=result.clarifying_question,
        )


class ChatResponse(AbstractSuccessfulResponse):
    """Model representing a chat reply of the assistant.

    Attributes:
        response: The reply text.
    """

    response: str = Field(
        ...,
        description="Reply of the assistant",
        examples=["I'll update the heading to 'Jane Doe Photography' right away!"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "response": "I'll update the heading to 'Jane Doe Photography' right away!",
                }
            ]
        }
    }


class HealthResponse(AbstractSuccessfulResponse):
    """Model representing a response to a health request.

    Attributes:
        status: Service status.
        generation_configured: If the credential for the generation API is set.
        timestamp: Time of the check in ISO 8601 format.
    """

    status: str = Field(
        ...,
        description="Service status",
        examples=["healthy"],
    )

    generation_configured: bool = Field(
        ...,
        description="Flag indicating that the generation API credential is configured",
        examples=[True, False],
    )

    timestamp: str = Field(
        ...,
        description="Time of the health check",
        examples=["2025-01-01T12:00:00+00:00"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "generation_configured": True,
                    "timestamp": "2025-01-01T12:00:00+00:00",
                }
            ]
        }
    }


class DetailModel(BaseModel):
    """Nested detail model for error responses."""

    response: str = Field(..., description="Short summary of the error")
    cause: str = Field(..., description="Detailed explanation of what caused the error")


class AbstractErrorResponse(BaseModel):
    """
    Base class for error responses.

    Attributes:
        status_code (int): HTTP status code for the error response.
        detail (DetailModel): The detail model containing error summary and cause.
    """

    status_code: int
    detail: DetailModel

    def __init__(self, *, response: str, cause: str, status_code: int):
        """Initialize an AbstractErrorResponse.

        Args:
            response: Short summary of the error.
            cause: Detailed explanation of what caused the error.
            status_code: HTTP status code for the error response.
        """
        super().__init__(
            status_code=status_code, detail=DetailModel(response=response, cause=cause)
        )

    @classmethod
    def get_description(cls) -> str:
        """Get the description from the class attribute or docstring."""
        return getattr(cls, "description", cls.__doc__ or "")

    @classmethod
    def openapi_response(cls, examples: Optional[list[str]] = None) -> dict[str, Any]:
        """Generate FastAPI response dict with examples from model_config."""
        schema = cls.model_json_schema()
        model_examples = schema.get("examples", [])

        named_examples: dict[str, Any] = {}
        for ex in model_examples:
            label = ex.get("label", None)
            if label is None:
                raise SchemaError(f"Example {ex} in {cls.__name__} has no label")
            if examples is None or label in examples:
                detail = ex.get("detail")
                if detail is not None:
                    named_examples[label] = {"value": {"detail": detail}}

        content: dict[str, Any] = {
            "application/json": {"examples": named_examples or None}
        }

        return {
            "description": cls.get_description(),
            "model": cls,
            "content": content,
        }


class UnprocessableEntityResponse(AbstractErrorResponse):
    """422 Unprocessable Entity - Request validation failed."""

    description: ClassVar[str] = UNPROCESSABLE_CONTENT_DESCRIPTION
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "label": "missing prompt",
                    "detail": {
                        "response": "Invalid request",
                        "cause": "Prompt is required",
                    },
                },
            ]
        }
    }

    def __init__(self, *, response: str, cause: str):
        """Initialize an UnprocessableEntityResponse."""
        super().__init__(
            response=response,
            cause=cause,
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        )


class InternalServerErrorResponse(AbstractErrorResponse):
    """500 Internal Server Error."""

    description: ClassVar[str] = INTERNAL_SERVER_ERROR_DESCRIPTION

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "label": "internal",
                    "detail": {
                        "response": "Internal server error",
                        "cause": "An unexpected error occurred while processing the request.",
                    },
                },
                {
                    "label": "configuration",
                    "detail": {
                        "response": "Configuration is not loaded",
                        "cause": "Prototype Builder configuration has not been initialized.",
                    },
                },
                {
                    "label": "credential",
                    "detail": {
                        "response": "Generation service is not configured",
                        "cause": "API key for the generation API is not configured",
                    },
                },
                {
                    "label": "code generation",
                    "detail": {
                        "response": "Failed to generate code",
                        "cause": "Generation API returned content that is not valid JSON",
                    },
                },
                {
                    "label": "chat",
                    "detail": {
                        "response": "Failed to generate chat response",
                        "cause": "Generation API returned an empty reply",
                    },
                },
            ]
        }
    }

    @classmethod
    def generic(cls) -> "InternalServerErrorResponse":
        """Create a generic InternalServerErrorResponse."""
        return cls(
            response="Internal server error",
            cause="An unexpected error occurred while processing the request.",
        )

    @classmethod
    def configuration_not_loaded(cls) -> "InternalServerErrorResponse":
        """Create an InternalServerErrorResponse for configuration not loaded."""
        return cls(
            response="Configuration is not loaded",
            cause="Prototype Builder configuration has not been initialized.",
        )

    @classmethod
    def generation_not_configured(cls, cause: str) -> "InternalServerErrorResponse":
        """Create an InternalServerErrorResponse for missing credential."""
        return cls(
            response="Generation service is not configured",
            cause=cause,
        )

    @classmethod
    def code_generation_failed(cls, cause: str) -> "InternalServerErrorResponse":
        """Create an InternalServerErrorResponse for failed code generation."""
        return cls(
            response="Failed to generate code",
            cause=cause,
        )

    @classmethod
    def chat_failed(cls, cause: str) -> "InternalServerErrorResponse":
        """Create an InternalServerErrorResponse for failed chat reply."""
        return cls(
            response="Failed to generate chat response",
            cause=cause,
        )

    def __init__(self, *, response: str, cause: str) -> None:
        """Initialize an InternalServerErrorResponse."""
        super().__init__(
            response=response,
            cause=cause,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class ServiceUnavailableResponse(AbstractErrorResponse):
    """503 Backend Unavailable."""

    description: ClassVar[str] = SERVICE_UNAVAILABLE_DESCRIPTION
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "label": "llama stack",
                    "detail": {
                        "response": "Unable to connect to Llama Stack",
                        "cause": "Connection error while trying to reach backend service.",
                    },
                }
            ]
        }
    }

    def __init__(self, *, backend_name: str, cause: str):
        """Initialize a ServiceUnavailableResponse.

        Args:
            backend_name: The name of the backend service that is unavailable.
            cause: Detailed explanation of why the service is unavailable.
        """
        response = f"Unable to connect to {backend_name}"
        super().__init__(
            response=response,
            cause=cause,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
