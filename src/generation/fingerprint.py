"""Fingerprints (cache keys) of generation requests.

A fingerprint is a normalized, human readable string built from the
truncated prompt, a short window of the most recent conversation turns and,
for code generation, a marker identifying the current prototype. It is not
reversible and it is not cryptographically guarded: two requests sharing the
same truncated prompt and context window share the fingerprint.
"""

import hashlib
import re
from collections.abc import Sequence
from typing import Optional

import constants
from models.config import ContextConfiguration
from models.generation import ConversationTurn

_WHITESPACE_RUN = re.compile(r"\s+")

GENERATION_KIND = "generate"
CHAT_KIND = "chat"


def normalize_whitespace(text: str) -> str:
    """Collapse every run of whitespace into a single space."""
    return _WHITESPACE_RUN.sub(" ", text)


def artifact_marker(current_artifact: Optional[str]) -> str:
    """Return marker identifying the current prototype.

    Two different prototypes yield different markers, so the same prompt
    applied to two prototypes never shares a cache entry.
    """
    if current_artifact is None or current_artifact.strip() == "":
        return constants.FINGERPRINT_NO_ARTIFACT_MARKER
    digest = hashlib.sha256(current_artifact.encode("utf-8")).hexdigest()
    return f"artifact:{digest[: constants.FINGERPRINT_ARTIFACT_DIGEST_LENGTH]}"


def context_window(
    history: Sequence[ConversationTurn],
    turns: int = constants.DEFAULT_FINGERPRINT_CONTEXT_TURNS,
    turn_length: int = constants.DEFAULT_FINGERPRINT_TURN_LENGTH,
) -> str:
    """Render the last `turns` turns as `role:content` joined by `|`."""
    if turns <= 0:
        return ""
    return "|".join(
        f"{turn.role}:{turn.content[:turn_length]}" for turn in history[-turns:]
    )


def build_fingerprint(  # pylint: disable=too-many-arguments
    kind: str,
    prompt: str,
    history: Sequence[ConversationTurn],
    marker: Optional[str] = None,
    prompt_length: int = constants.DEFAULT_FINGERPRINT_PROMPT_LENGTH,
    turns: int = constants.DEFAULT_FINGERPRINT_CONTEXT_TURNS,
    turn_length: int = constants.DEFAULT_FINGERPRINT_TURN_LENGTH,
) -> str:
    """Build normalized fingerprint of a request.

    Parameters:
        kind (str): Request class, `generate` or `chat`.
        prompt (str): User prompt; only its first `prompt_length` characters count.
        history (Sequence[ConversationTurn]): Conversation history, oldest first.
        marker (Optional[str]): Artifact marker, omitted for chat requests.
        prompt_length (int): Number of prompt characters used.
        turns (int): Number of most recent turns used.
        turn_length (int): Number of characters of each turn used.

    Returns:
        str: The fingerprint with all whitespace runs collapsed.
    """
    parts = [kind, prompt[:prompt_length], context_window(history, turns, turn_length)]
    if marker is not None:
        parts.append(marker)
    return normalize_whitespace("|".join(parts))


def generation_fingerprint(
    prompt: str,
    history: Sequence[ConversationTurn],
    current_artifact: Optional[str],
    config: ContextConfiguration,
) -> str:
    """Build fingerprint of a code generation request."""
    return build_fingerprint(
        GENERATION_KIND,
        prompt,
        history,
        marker=artifact_marker(current_artifact),
        prompt_length=config.fingerprint_prompt_length,
        turns=config.fingerprint_context_turns,
        turn_length=config.fingerprint_turn_length,
    )


def chat_fingerprint(
    prompt: str,
    history: Sequence[ConversationTurn],
    config: ContextConfiguration,
) -> str:
    """Build fingerprint of a chat reply request."""
    return build_fingerprint(
        CHAT_KIND,
        prompt,
        history,
        prompt_length=config.fingerprint_prompt_length,
        turns=config.fingerprint_context_turns,
        turn_length=config.fingerprint_turn_length,
    )
