"""Integration tests of the REST API served by the FastAPI application."""

from typing import Generator
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from configuration import AppConfig, configuration
from generation.errors import UpstreamError
from models.generation import GenerationResult

CONFIGURATION_FILE = "tests/configuration/prototype-builder.yaml"


@pytest.fixture(name="service")
def service_fixture(mocker: MockerFixture) -> Generator[Mock, None, None]:
    """Load configuration and replace generation service with a mock."""
    configuration.load_configuration(CONFIGURATION_FILE)
    service = mocker.Mock()
    service.generate_artifact = mocker.AsyncMock()
    service.generate_chat_reply = mocker.AsyncMock()
    configuration._generation_service = service  # pylint: disable=protected-access
    yield service
    # constructing the singleton drops loaded configuration and services
    AppConfig()


@pytest.fixture(name="client")
def client_fixture(service: Mock) -> TestClient:
    """Provide test client; lifespan is not run so no sweeper threads start."""
    _ = service
    from app.main import app  # pylint: disable=C0415

    return TestClient(app)


def test_generate_code(client: TestClient, service: Mock) -> None:
    """Test the generate-code endpoint."""
    service.generate_artifact.return_value = GenerationResult(
        markup="<html></html>", explanation="Created a page"
    )

    response = client.post(
        "/api/generate-code",
        json={"prompt": "build a page", "conversation_id": "conv"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "markup": "<html></html>",
        "styles": None,
        "script": None,
        "explanation": "Created a page",
        "clarifying_question": None,
    }
    service.generate_artifact.assert_awaited_once_with("build a page", "conv")


@pytest.mark.parametrize("endpoint", ["/api/generate-code", "/api/chat"])
@pytest.mark.parametrize("prompt", ["", "   "])
def test_blank_prompt_rejected(
    client: TestClient, service: Mock, endpoint: str, prompt: str
) -> None:
    """Test that empty prompts never reach the generation service."""
    response = client.post(endpoint, json={"prompt": prompt})

    assert response.status_code == 422
    service.generate_artifact.assert_not_called()
    service.generate_chat_reply.assert_not_called()


def test_chat_failure(client: TestClient, service: Mock) -> None:
    """Test structured error of failed chat reply."""
    service.generate_chat_reply.side_effect = UpstreamError(
        "Generation API returned an empty reply"
    )

    response = client.post("/api/chat", json={"prompt": "hello"})

    assert response.status_code == 500
    assert response.json() == {
        "detail": {
            "response": "Failed to generate chat response",
            "cause": "Generation API returned an empty reply",
        }
    }


def test_unexpected_error(client: TestClient, service: Mock) -> None:
    """Test that unexpected errors are turned into generic 500 response."""
    service.generate_chat_reply.side_effect = RuntimeError("boom")

    response = client.post("/api/chat", json={"prompt": "hello"})

    assert response.status_code == 500
    assert response.json()["detail"]["response"] == "Internal server error"


def test_health(client: TestClient) -> None:
    """Test the health endpoint."""
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["generation_configured"] is True


def test_metrics(client: TestClient) -> None:
    """Test the metrics endpoint."""
    response = client.get("/metrics")

    assert response.status_code == 200
    assert "llm_calls_total" in response.text


def test_openapi(client: TestClient) -> None:
    """Test that OpenAPI specification describes all endpoints."""
    response = client.get("/openapi.json")

    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "post" in paths["/api/generate-code"]
    assert "post" in paths["/api/chat"]
    assert "get" in paths["/api/health"]
