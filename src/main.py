"""
Main FastAPI application entry point.

Builds the FastAPI application, wires request tracing and RFC 7807 error
handling, and mounts the password reset routers under the v1 prefix.

Run locally:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Log configuration summary
    - Shutdown: Dispose database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )

    yield

    await get_database().close()
    logger.info("application_stopped", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Password reset service: reset tokens, emailed one-time codes "
    "and password replacement",
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

# Non-versioned endpoints (root, health)
app.include_router(system_router)

# API v1 routers (RESTful resource-based endpoints)
app.include_router(v1_router)
