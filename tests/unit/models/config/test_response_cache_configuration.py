"""Unit tests for ResponseCacheConfiguration and ContextConfiguration models."""

import pytest

from pydantic import ValidationError

from models.config import ContextConfiguration, ResponseCacheConfiguration


def test_response_cache_defaults() -> None:
    """Test default TTLs and sweep interval."""
    cfg = ResponseCacheConfiguration()
    assert cfg.type == "memory"
    assert cfg.code_generation_ttl == 300
    assert cfg.chat_reply_ttl == 120
    assert cfg.sweep_interval == 300
    assert cfg.max_entries is None


def test_response_cache_unknown_type() -> None:
    """Test that only supported cache types are accepted."""
    with pytest.raises(ValidationError):
        ResponseCacheConfiguration(type="redis")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "field", ["code_generation_ttl", "chat_reply_ttl", "sweep_interval", "max_entries"]
)
def test_response_cache_positive_values(field: str) -> None:
    """Test that durations and limits must be positive."""
    with pytest.raises(ValidationError, match="Input should be greater than 0"):
        ResponseCacheConfiguration(**{field: 0})


def test_context_defaults() -> None:
    """Test default context and fingerprint sizes."""
    cfg = ContextConfiguration()
    assert cfg.history_turns == 10
    assert cfg.fingerprint_prompt_length == 200
    assert cfg.fingerprint_context_turns == 3
    assert cfg.fingerprint_turn_length == 100


def test_context_fingerprint_turns_exceed_history() -> None:
    """Test that fingerprint can not use more turns than are sent."""
    with pytest.raises(ValidationError, match="can not exceed number of history"):
        ContextConfiguration(history_turns=2, fingerprint_context_turns=3)
