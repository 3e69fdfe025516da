"""Unit tests for routers.py."""

from typing import Any, Optional

from fastapi import FastAPI

from app.routers import include_routers  # noqa:E402

from app.endpoints import chat, generate, health, metrics  # noqa:E402


class MockFastAPI(FastAPI):
    """Mock class for FastAPI."""

    def __init__(self) -> None:  # pylint: disable=super-init-not-called
        """Initialize mock class with empty router registry."""
        self.routers: list[tuple[Any, Optional[str]]] = []

    def include_router(  # type: ignore[override]
        self, router: Any, *, prefix: str = "", **_kwargs: Any
    ) -> None:
        """Register new router together with its prefix."""
        self.routers.append((router, prefix))

    def get_routers(self) -> list[Any]:
        """Retrieve all routers defined in mocked REST API."""
        return [r[0] for r in self.routers]

    def get_router_prefix(self, router: Any) -> Optional[str]:
        """Retrieve router prefix configured for mocked REST API."""
        return list(filter(lambda r: r[0] == router, self.routers))[0][1]


def test_include_routers() -> None:
    """Test the function include_routers."""
    app = MockFastAPI()
    include_routers(app)

    # are all routers added?
    assert len(app.routers) == 4
    assert generate.router in app.get_routers()
    assert chat.router in app.get_routers()
    assert health.router in app.get_routers()
    assert metrics.router in app.get_routers()


def test_check_prefixes() -> None:
    """Test the router prefixes."""
    app = MockFastAPI()
    include_routers(app)

    assert app.get_router_prefix(generate.router) == "/api"
    assert app.get_router_prefix(chat.router) == "/api"
    assert app.get_router_prefix(health.router) == "/api"
    assert app.get_router_prefix(metrics.router) == ""
