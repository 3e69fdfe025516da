"""Unit tests for the global exception middleware in main.py."""

import json
from typing import cast
from unittest.mock import Mock

import pytest
from fastapi import HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.requests import Request as StarletteRequest

from models.responses import InternalServerErrorResponse
from app.main import app, global_exception_middleware


async def test_global_exception_middleware_catches_unexpected_exception() -> None:
    """Test that global exception middleware catches unexpected exceptions."""
    mock_request = Mock(spec=StarletteRequest)
    mock_request.url.path = "/api/generate-code"

    async def mock_call_next_raises_error(request: Request) -> Response:
        """Mock call_next that raises an unexpected exception."""
        raise ValueError("This is an unexpected error for testing")

    response = await global_exception_middleware(
        mock_request, mock_call_next_raises_error
    )

    assert isinstance(response, JSONResponse)
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    response_body = json.loads(bytes(response.body).decode("utf-8"))
    detail = cast(dict[str, str], response_body["detail"])
    expected_detail = InternalServerErrorResponse.generic().model_dump()["detail"]
    assert detail["response"] == expected_detail["response"]
    assert detail["cause"] == expected_detail["cause"]


async def test_global_exception_middleware_passes_through_http_exception() -> None:
    """Test that global exception middleware passes through HTTPException unchanged."""
    mock_request = Mock(spec=StarletteRequest)
    mock_request.url.path = "/api/chat"

    async def mock_call_next_raises_http_exception(request: Request) -> Response:
        """Mock call_next that raises HTTPException."""
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"response": "Test error", "cause": "This is a test"},
        )

    with pytest.raises(HTTPException) as exc_info:
        await global_exception_middleware(
            mock_request, mock_call_next_raises_http_exception
        )

    assert exc_info.value.status_code == status.HTTP_400_BAD_REQUEST


def test_app_routes() -> None:
    """Test that the application exposes all REST API endpoints."""
    paths = {route.path for route in app.routes}  # type: ignore[attr-defined]
    assert {"/api/generate-code", "/api/chat", "/api/health", "/metrics"} <= paths
