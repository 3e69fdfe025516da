"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from typing import Generator

import pytest

from configuration import AppConfig
from models.generation import GenerationResult
from tests.unit.utils.clock import FakeClock


@pytest.fixture(name="clock")
def clock_fixture() -> FakeClock:
    """Provide manually advanced clock."""
    return FakeClock()


@pytest.fixture(name="minimal_config")
def minimal_config_fixture() -> Generator[AppConfig, None, None]:
    """Create a minimal AppConfig with only required fields.

    Yields:
        AppConfig: A minimal AppConfig instance with required fields only.
    """
    cfg = AppConfig()
    cfg.init_from_dict(
        {
            "name": "test",
            "service": {"host": "localhost", "port": 8080},
            "llama_stack": {
                "api_key": "test-key",
                "url": "http://test.com:1234",
            },
        }
    )
    yield cfg
    # constructing the singleton drops loaded configuration and services
    AppConfig()


@pytest.fixture(name="generation_result")
def generation_result_fixture() -> GenerationResult:
    """Provide generated prototype."""
    return GenerationResult(
        markup="<html><body><h1>Jane</h1></body></html>",
        explanation="Created a portfolio page",
    )
