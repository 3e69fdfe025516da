"""Definition of FastAPI based web service."""

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import constants
from app import routers
from client import AsyncLlamaStackClientHolder
from configuration import LogicError, configuration
from log import get_logger
from models.config import CORSConfiguration
from models.responses import InternalServerErrorResponse

logger = get_logger(__name__)

logger.info("Initializing app")

# worker processes do not share the context of the launcher process
config_path = os.environ.get(constants.CONFIGURATION_PATH_ENV_VAR)
if config_path is not None:
    configuration.load_configuration(config_path)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """
    Initialize resources needed by the service and release them on exit.

    Creates the generation API client and starts background sweeping of the
    response caches. On shutdown the sweepers are stopped, the caches are
    cleared and the client is closed.
    """
    logger.info("Creating generation API client")
    AsyncLlamaStackClientHolder().load(configuration.llama_stack_configuration)
    if not configuration.llama_stack_configuration.credential_configured:
        logger.warning(
            "API key for the generation API is not configured, "
            "generation requests will fail"
        )

    if not configuration.conversation_store.ready():
        logger.warning("Conversation store is not ready, history lookups may fail")

    logger.info("Initializing response caches")
    artifact_cache = configuration.artifact_cache
    chat_reply_cache = configuration.chat_reply_cache
    artifact_cache.init()
    chat_reply_cache.init()

    logger.info("App startup complete")
    yield

    logger.info("Shutting down response caches")
    artifact_cache.shutdown()
    chat_reply_cache.shutdown()

    holder = AsyncLlamaStackClientHolder()
    if holder.is_loaded():
        logger.info("Closing generation API client")
        await holder.close()


def create_app() -> FastAPI:
    """Create the FastAPI application with middlewares and routers."""
    try:
        service_name = configuration.configuration.name
        cors = configuration.service_configuration.cors
    except LogicError:
        # configuration is loaded later, typically in tests
        service_name = "Prototype Builder"
        cors = CORSConfiguration()

    new_app = FastAPI(
        title=f"{service_name} service - OpenAPI",
        summary=f"{service_name} service API specification.",
        description="Prototype Builder generates and modifies web prototypes "
        "from natural language prompts.",
        lifespan=lifespan,
    )

    new_app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.allow_origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    new_app.middleware("http")(global_exception_middleware)

    routers.include_routers(new_app)
    return new_app


async def global_exception_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Turn unexpected exceptions into generic structured error response."""
    try:
        return await call_next(request)
    except HTTPException:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.exception("Uncaught exception in endpoint %s: %s", request.url.path, exc)
        error_response = InternalServerErrorResponse.generic()
        return JSONResponse(
            status_code=error_response.status_code,
            content={"detail": error_response.detail.model_dump()},
        )


app = create_app()
