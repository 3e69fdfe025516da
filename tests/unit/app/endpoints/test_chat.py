"""Unit tests for the /chat REST API endpoint."""

from typing import cast
from unittest.mock import Mock

import pytest
from fastapi import HTTPException, status
from pytest_mock import MockerFixture

from app.endpoints.chat import chat_endpoint_handler
from configuration import AppConfig
from generation.errors import ConfigurationError, UpstreamError
from models.requests import ChatRequest


@pytest.fixture(name="mock_service")
def mock_service_fixture(mocker: MockerFixture, minimal_config: AppConfig) -> Mock:
    """Replace generation service of loaded configuration with a mock."""
    service = mocker.Mock()
    service.generate_chat_reply = mocker.AsyncMock()
    mocker.patch("app.endpoints.chat.configuration", minimal_config)
    minimal_config._generation_service = service  # pylint: disable=protected-access
    return service


async def test_chat(mock_service: Mock) -> None:
    """Test that chat reply is returned."""
    mock_service.generate_chat_reply.return_value = "I'll make it blue!"

    response = await chat_endpoint_handler(ChatRequest(prompt="make it blue"))

    mock_service.generate_chat_reply.assert_awaited_once_with("make it blue", None)
    assert response.response == "I'll make it blue!"


async def test_chat_not_configured(mock_service: Mock) -> None:
    """Test that missing credential results in 500."""
    mock_service.generate_chat_reply.side_effect = ConfigurationError("no API key")

    with pytest.raises(HTTPException) as exc_info:
        await chat_endpoint_handler(ChatRequest(prompt="hello"))

    assert exc_info.value.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = cast(dict[str, str], exc_info.value.detail)
    assert detail["response"] == "Generation service is not configured"


async def test_chat_upstream_failure(mock_service: Mock) -> None:
    """Test that failed reply results in 500."""
    mock_service.generate_chat_reply.side_effect = UpstreamError(
        "Generation API returned an empty reply"
    )

    with pytest.raises(HTTPException) as exc_info:
        await chat_endpoint_handler(ChatRequest(prompt="hello"))

    assert exc_info.value.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = cast(dict[str, str], exc_info.value.detail)
    assert detail["response"] == "Failed to generate chat response"
    assert detail["cause"] == "Generation API returned an empty reply"


async def test_chat_connection_failure(mock_service: Mock) -> None:
    """Test that unreachable generation API results in 503."""
    mock_service.generate_chat_reply.side_effect = UpstreamError(
        "Unable to connect", "Connection error.", connection_failed=True
    )

    with pytest.raises(HTTPException) as exc_info:
        await chat_endpoint_handler(ChatRequest(prompt="hello"))

    assert exc_info.value.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
