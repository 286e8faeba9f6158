"""API setup module."""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.settings import settings
from app.setup.event_loop import describe_event_loop, get_event_loop
from app.setup.log_config import configure_logging
from app.entrypoints.api.endpoints.metrics import actuator, status
from app.entrypoints.api.errors import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(
    app: FastAPI,
):
    """Context manager for the application's lifespan."""
    loop = await get_event_loop()
    logger.info(
        "Starting %s %s (%s) on %s",
        settings.application_name,
        settings.application_version,
        settings.environment,
        describe_event_loop(loop),
    )
    yield
    logger.info("Stopping %s", settings.application_name)


def create_app() -> FastAPI:
    """Creates the FastAPI application."""
    configure_logging(settings.log_level)

    fastapi_app = FastAPI(
        title=settings.application_title,
        description=settings.application_description,
        version=settings.application_version,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    fastapi_app.include_router(status.router, prefix=settings.api_prefix)
    fastapi_app.include_router(actuator.router, prefix=settings.actuator_prefix)
    register_exception_handlers(fastapi_app)

    @fastapi_app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        # A handler that raises is answered with a 500 further out.
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method,
                request.url.path,
                status_code,
                (time.perf_counter() - started) * 1000,
            )
        return response

    # CORS (Cross-Origin Resource Sharing)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return fastapi_app


app = create_app()


def entry() -> None:
    """Starts the order service."""

    uvicorn.run(
        "app.entrypoints.api.setup:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    entry()
