"""REST API routers."""

from fastapi import FastAPI

from app.endpoints import (
    chat,
    generate,
    health,
    metrics,
)


def include_routers(app: FastAPI) -> None:
    """Include FastAPI routers for different endpoints.

    Args:
        app: The `FastAPI` app instance.
    """
    app.include_router(generate.router, prefix="/api")
    app.include_router(chat.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    # Prometheus scrapes unversioned path
    app.include_router(metrics.router)
