"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance, wires the
middleware, exception handlers and routers, and manages startup and
shutdown of shared resources.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_event_bus, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup builds the event bus so a registry event without a logging
    handler fails the boot in strict mode. Shutdown disposes the database
    engine when the database backend is in use.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    get_event_bus()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        storage_backend=settings.storage_backend,
    )

    yield

    if settings.storage_backend == "database":
        await get_database().close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Event registration admission and lifecycle service",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

# Non-versioned system endpoints and API v1 (registry-generated)
app.include_router(system_router)
app.include_router(v1_router)
