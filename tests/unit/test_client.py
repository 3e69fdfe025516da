"""Unit tests for functions defined in src/client.py."""

# pylint: disable=protected-access

import pytest
from pydantic import SecretStr

from client import AsyncLlamaStackClientHolder
from models.config import LlamaStackConfiguration
from utils.types import Singleton


@pytest.fixture(autouse=True)
def reset_singleton() -> None:
    """Reset singleton state between tests."""
    Singleton._instances = {}


def test_async_client_get_client_method() -> None:
    """Test how get_client method works for uninitialized client."""
    client = AsyncLlamaStackClientHolder()

    assert not client.is_loaded()
    with pytest.raises(
        RuntimeError,
        match=(
            "AsyncLlamaStackClient has not been initialised. "
            "Ensure 'load\\(..\\)' has been called."
        ),
    ):
        client.get_client()


async def test_get_async_llama_stack_remote_client() -> None:
    """Test the initialization of asynchronous Llama Stack client in server mode."""
    cfg = LlamaStackConfiguration(
        url="http://localhost:8321", api_key=SecretStr("secret"), timeout=15
    )
    client = AsyncLlamaStackClientHolder()
    client.load(cfg)
    assert client.is_loaded()

    ls_client = client.get_client()
    assert ls_client is not None
    assert str(ls_client.base_url).startswith("http://localhost:8321")
    assert ls_client.timeout == 15

    await client.close()
    assert not client.is_loaded()


def test_holder_is_singleton() -> None:
    """Test that the holder is shared."""
    assert AsyncLlamaStackClientHolder() is AsyncLlamaStackClientHolder()


def test_load_without_api_key() -> None:
    """Test that client can be created without API key."""
    client = AsyncLlamaStackClientHolder()
    client.load(LlamaStackConfiguration(url="http://localhost:8321"))
    assert client.is_loaded()
