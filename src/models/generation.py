"""Models for generation requests, assembled context and generation results."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from typing_extensions import Self

from utils.types import ChatMessage


class ConversationTurn(BaseModel):
    """One turn of conversation history.

    Attributes:
        role: Who produced the turn.
        content: Free text of the turn.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str

    def to_message(self) -> ChatMessage:
        """Convert the turn into chat completion message."""
        return ChatMessage(role=self.role, content=self.content)


class FreshGenerationRequest(BaseModel):
    """Request producing a brand-new artifact from scratch."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fresh"] = "fresh"
    prompt: str
    history: tuple[ConversationTurn, ...] = ()


class ModificationRequest(BaseModel):
    """Request applying one targeted change to an existing artifact."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["modification"] = "modification"
    prompt: str
    history: tuple[ConversationTurn, ...] = ()
    current_artifact: str = Field(..., min_length=1)


GenerationRequest = Annotated[
    Union[FreshGenerationRequest, ModificationRequest], Field(discriminator="kind")
]


class ChatReplyRequest(BaseModel):
    """Request for conversational reply of the assistant."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    history: tuple[ConversationTurn, ...] = ()


class AssembledContext(BaseModel):
    """Everything needed to call the generation API for one request.

    Attributes:
        messages: Ordered chat messages: system, history, current user turn.
        fingerprint: Normalized cache key of the request.
        temperature: Sampling temperature.
        max_output_tokens: Output token budget.
    """

    model_config = ConfigDict(frozen=True)

    messages: list[dict[str, str]]
    fingerprint: str
    temperature: float
    max_output_tokens: int


class GenerationResult(BaseModel):
    """Artifact produced by the generation API.

    The LLM answers with JSON object using keys `html`, `css`, `js`,
    `explanation` and `question`; these are accepted as aliases of the
    field names. A result with empty markup is valid only when it carries a
    clarifying question for the user.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "markup": "<!DOCTYPE html><html><head></head><body>"
                    "<h1>Jane Doe Photography</h1></body></html>",
                    "styles": None,
                    "script": None,
                    "explanation": "Created a portfolio landing page",
                    "clarifying_question": None,
                }
            ]
        },
    )

    markup: str = Field(
        ...,
        validation_alias=AliasChoices("markup", "html"),
        description="Complete HTML document",
    )
    styles: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("styles", "css"),
        description="Optional standalone CSS",
    )
    script: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("script", "js"),
        description="Optional standalone JavaScript",
    )
    explanation: str = Field(
        ...,
        min_length=1,
        description="Human readable summary of the generated artifact",
    )
    clarifying_question: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("clarifying_question", "question"),
        description="Question asked when more input is needed before generating",
    )

    @field_validator("styles", "script", "clarifying_question", mode="before")
    @classmethod
    def empty_to_none(cls, value: Any) -> Any:
        """Treat empty strings as missing optional parts."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("explanation")
    @classmethod
    def check_explanation(cls, value: str) -> str:
        """Reject whitespace-only explanation."""
        if value.strip() == "":
            raise ValueError("Explanation must not be empty")
        return value

    @model_validator(mode="after")
    def check_markup_or_question(self) -> Self:
        """Check that the result carries either markup or clarifying question."""
        if self.markup.strip() == "" and self.clarifying_question is None:
            raise ValueError("Result contains neither markup nor clarifying question")
        return self

    @property
    def needs_clarification(self) -> bool:
        """Check if the model asked for more input instead of producing artifact."""
        return self.clarifying_question is not None and self.markup.strip() == ""
