"""Assembly of the message list sent to the generation API."""

from collections.abc import Sequence
from typing import Optional, Union

import constants
import prompts
from generation.fingerprint import chat_fingerprint, generation_fingerprint
from models.config import ContextConfiguration
from models.generation import (
    AssembledContext,
    ChatReplyRequest,
    ConversationTurn,
    FreshGenerationRequest,
    GenerationRequest,
    ModificationRequest,
)
from utils.types import ChatMessage


class ContextAssembler:
    """Turns a prompt, conversation history and current prototype into context.

    The assembler is pure: it performs no I/O and the same inputs always
    produce the same messages and fingerprint.
    """

    def __init__(self, config: Optional[ContextConfiguration] = None) -> None:
        """Initialize the assembler with context configuration."""
        self.config = config if config is not None else ContextConfiguration()

    def recent_history(
        self, history: Sequence[ConversationTurn]
    ) -> tuple[ConversationTurn, ...]:
        """Keep only the most recent turns of the history."""
        return tuple(history[-self.config.history_turns :])

    def build_generation_request(
        self,
        prompt: str,
        history: Sequence[ConversationTurn],
        current_artifact: Optional[str] = None,
    ) -> Union[FreshGenerationRequest, ModificationRequest]:
        """Decide between fresh generation and modification of current prototype.

        Parameters:
            prompt (str): The user prompt.
            history (Sequence[ConversationTurn]): Conversation history, oldest first.
            current_artifact (Optional[str]): Markup of the current prototype.

        Returns:
            ModificationRequest when a non-blank prototype exists,
            FreshGenerationRequest otherwise.
        """
        turns = self.recent_history(history)
        if current_artifact is None or current_artifact.strip() == "":
            return FreshGenerationRequest(prompt=prompt, history=turns)
        return ModificationRequest(
            prompt=prompt, history=turns, current_artifact=current_artifact
        )

    def build_chat_request(
        self, prompt: str, history: Sequence[ConversationTurn]
    ) -> ChatReplyRequest:
        """Build chat reply request from prompt and conversation history."""
        return ChatReplyRequest(prompt=prompt, history=self.recent_history(history))

    def assemble_generation(self, request: GenerationRequest) -> AssembledContext:
        """Assemble messages, fingerprint and sampling options of code generation.

        Modification requests embed the current prototype into the system
        prompt and use low temperature so that only the requested change is
        applied.
        """
        match request:
            case ModificationRequest():
                system_prompt = prompts.modification_system_prompt(
                    request.current_artifact
                )
                temperature = constants.MODIFICATION_TEMPERATURE
                current_artifact: Optional[str] = request.current_artifact
            case FreshGenerationRequest():
                system_prompt = prompts.FRESH_GENERATION_SYSTEM_PROMPT
                temperature = constants.FRESH_GENERATION_TEMPERATURE
                current_artifact = None
            case _:
                raise ValueError(f"Unsupported generation request {request!r}")

        return AssembledContext(
            messages=_messages(system_prompt, request.history, request.prompt),
            fingerprint=generation_fingerprint(
                request.prompt, request.history, current_artifact, self.config
            ),
            temperature=temperature,
            max_output_tokens=constants.CODE_GENERATION_MAX_OUTPUT_TOKENS,
        )

    def assemble_chat(self, request: ChatReplyRequest) -> AssembledContext:
        """Assemble messages, fingerprint and sampling options of chat reply."""
        return AssembledContext(
            messages=_messages(
                prompts.CHAT_SYSTEM_PROMPT, request.history, request.prompt
            ),
            fingerprint=chat_fingerprint(request.prompt, request.history, self.config),
            temperature=constants.CHAT_REPLY_TEMPERATURE,
            max_output_tokens=constants.CHAT_REPLY_MAX_OUTPUT_TOKENS,
        )


def _messages(
    system_prompt: str, history: Sequence[ConversationTurn], prompt: str
) -> list[ChatMessage]:
    """System prompt first, then history in order, then the current user turn."""
    messages: list[ChatMessage] = [{"role": "system", "content": system_prompt}]
    messages.extend(turn.to_message() for turn in history)
    messages.append({"role": "user", "content": prompt})
    return messages
