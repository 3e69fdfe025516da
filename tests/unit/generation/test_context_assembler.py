"""Unit tests for ContextAssembler class."""

import pytest

import constants
import prompts
from generation.context_assembler import ContextAssembler
from models.config import ContextConfiguration
from models.generation import (
    ChatReplyRequest,
    ConversationTurn,
    FreshGenerationRequest,
    ModificationRequest,
)

CURRENT = "<!DOCTYPE html><html><body><h1>Jane</h1></body></html>"


@pytest.fixture(name="assembler")
def assembler_fixture() -> ContextAssembler:
    """Provide assembler with default configuration."""
    return ContextAssembler()


def history_of(count: int) -> list[ConversationTurn]:
    """Build history with the given number of turns."""
    return [
        ConversationTurn(
            role="user" if i % 2 == 0 else "assistant", content=f"turn {i}"
        )
        for i in range(count)
    ]


def test_fresh_request_without_artifact(assembler: ContextAssembler) -> None:
    """Test that missing prototype means fresh generation."""
    request = assembler.build_generation_request("make a page", [], None)
    assert isinstance(request, FreshGenerationRequest)
    assert request.kind == "fresh"


def test_fresh_request_with_blank_artifact(assembler: ContextAssembler) -> None:
    """Test that whitespace-only prototype means fresh generation."""
    request = assembler.build_generation_request("make a page", [], "  \n ")
    assert isinstance(request, FreshGenerationRequest)


def test_modification_request(assembler: ContextAssembler) -> None:
    """Test that existing prototype means modification."""
    request = assembler.build_generation_request("make it blue", [], CURRENT)
    assert isinstance(request, ModificationRequest)
    assert request.current_artifact == CURRENT


def test_history_truncated(assembler: ContextAssembler) -> None:
    """Test that only the most recent turns are kept."""
    request = assembler.build_generation_request("p", history_of(15), None)
    assert len(request.history) == constants.DEFAULT_HISTORY_TURNS
    assert request.history[0].content == "turn 5"
    assert request.history[-1].content == "turn 14"


def test_history_truncated_to_configured_turns() -> None:
    """Test that configured history length is honored."""
    assembler = ContextAssembler(
        ContextConfiguration(history_turns=4, fingerprint_context_turns=2)
    )
    request = assembler.build_chat_request("p", history_of(7))
    assert [turn.content for turn in request.history] == [
        "turn 3",
        "turn 4",
        "turn 5",
        "turn 6",
    ]


def test_assemble_fresh_generation(assembler: ContextAssembler) -> None:
    """Test messages and options of fresh generation."""
    history = history_of(2)
    request = FreshGenerationRequest(prompt="make a page", history=tuple(history))
    context = assembler.assemble_generation(request)

    assert context.messages[0] == {
        "role": "system",
        "content": prompts.FRESH_GENERATION_SYSTEM_PROMPT,
    }
    assert context.messages[1:3] == [turn.to_message() for turn in history]
    assert context.messages[-1] == {"role": "user", "content": "make a page"}
    assert len(context.messages) == 4
    assert context.temperature == 0.7
    assert context.max_output_tokens == 2000
    assert context.fingerprint.endswith("artifact:none")


def test_assemble_modification(assembler: ContextAssembler) -> None:
    """Test that current prototype is embedded and temperature is lowered."""
    request = ModificationRequest(prompt="make it blue", current_artifact=CURRENT)
    context = assembler.assemble_generation(request)

    system_prompt = context.messages[0]["content"]
    assert context.messages[0]["role"] == "system"
    assert CURRENT in system_prompt
    assert system_prompt == prompts.modification_system_prompt(CURRENT)
    assert context.messages[-1] == {"role": "user", "content": "make it blue"}
    assert context.temperature == 0.1
    assert context.max_output_tokens == 2000
    assert "artifact:none" not in context.fingerprint


def test_modification_temperature_lower_than_fresh(
    assembler: ContextAssembler,
) -> None:
    """Test that modification is sampled more conservatively."""
    fresh = assembler.assemble_generation(FreshGenerationRequest(prompt="p"))
    modification = assembler.assemble_generation(
        ModificationRequest(prompt="p", current_artifact=CURRENT)
    )
    assert modification.temperature < fresh.temperature
    assert modification.fingerprint != fresh.fingerprint


def test_assemble_chat(assembler: ContextAssembler) -> None:
    """Test messages and options of chat reply."""
    request = ChatReplyRequest(prompt="hello", history=tuple(history_of(1)))
    context = assembler.assemble_chat(request)

    assert context.messages[0] == {
        "role": "system",
        "content": prompts.CHAT_SYSTEM_PROMPT,
    }
    assert context.messages[1] == {"role": "user", "content": "turn 0"}
    assert context.messages[-1] == {"role": "user", "content": "hello"}
    assert context.temperature == 0.7
    assert context.max_output_tokens == 200
    assert context.fingerprint.startswith("chat|")


def test_assembly_is_deterministic(assembler: ContextAssembler) -> None:
    """Test that assembling the same request twice gives equal context."""
    request = assembler.build_generation_request("p", history_of(3), CURRENT)
    assert assembler.assemble_generation(request) == assembler.assemble_generation(
        request
    )
