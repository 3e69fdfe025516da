"""Models for REST API requests."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class PromptRequest(BaseModel):
    """Common part of generation requests.

    Attributes:
        prompt: Free-text description of what the user wants.
        conversation_id: Optional conversation the request belongs to.
    """

    prompt: str = Field(
        ...,
        description="User prompt",
        examples=["build a portfolio site for Jane, a photographer"],
    )

    conversation_id: Optional[str] = Field(
        None,
        description="Conversation ID used to look up history and current prototype",
        examples=["c5260aec-4d82-4370-9fdf-05cf908b3f16"],
    )

    model_config = {"extra": "forbid"}

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, value: str) -> str:
        """Validate prompt is not empty or whitespace-only.

        Args:
            value: The prompt string to validate.

        Returns:
            The prompt string unchanged.

        Raises:
            ValueError: If the prompt is empty or whitespace-only.
        """
        if not value.strip():
            raise ValueError("Prompt is required")
        return value


class GenerateCodeRequest(PromptRequest):
    """Model representing a request to generate or modify a prototype."""

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "prompt": "change the heading to 'Jane Doe Photography'",
                    "conversation_id": "c5260aec-4d82-4370-9fdf-05cf908b3f16",
                }
            ]
        },
    }


class ChatRequest(PromptRequest):
    """Model representing a request for a chat reply."""

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "prompt": "Can you make it feel more minimal?",
                    "conversation_id": "c5260aec-4d82-4370-9fdf-05cf908b3f16",
                }
            ]
        },
    }
