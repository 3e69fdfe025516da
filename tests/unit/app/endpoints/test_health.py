"""Unit tests for the /health REST API endpoint."""

from datetime import datetime

from pytest_mock import MockerFixture

from app.endpoints.health import health_endpoint_handler
from configuration import AppConfig


async def test_health(mocker: MockerFixture, minimal_config: AppConfig) -> None:
    """Test health report of configured service."""
    mocker.patch("app.endpoints.health.configuration", minimal_config)

    response = await health_endpoint_handler()

    assert response.status == "healthy"
    assert response.generation_configured is True
    assert datetime.fromisoformat(response.timestamp).tzinfo is not None


async def test_health_without_credential(
    mocker: MockerFixture, minimal_config: AppConfig
) -> None:
    """Test that missing API key is reported."""
    minimal_config.init_from_dict(
        {
            "name": "test",
            "service": {},
            "llama_stack": {"url": "http://test.com:1234"},
        }
    )
    mocker.patch("app.endpoints.health.configuration", minimal_config)

    response = await health_endpoint_handler()

    assert response.status == "healthy"
    assert response.generation_configured is False


async def test_health_configuration_not_loaded(mocker: MockerFixture) -> None:
    """Test that service is live even without configuration."""
    mocker.patch("app.endpoints.health.configuration", AppConfig())

    response = await health_endpoint_handler()

    assert response.generation_configured is False
