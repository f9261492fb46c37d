"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance, wires the trace
middleware and global exception handlers, and mounts the v1 router generated
from the route registry.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from src.application.queries.user_profile_queries import CheckIdentityConsistency
from src.core.config import settings
from src.core.container import (
    create_check_identity_consistency_handler,
    get_cache,
    get_database,
    get_logger,
)
from src.core.result import Success
from src.domain.protocols import CacheProtocol
from src.infrastructure.persistence.database import Database
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


async def check_identity_consistency() -> None:
    """Log identities and profiles whose emails have no counterpart."""
    async with get_database().get_session() as session:
        handler = create_check_identity_consistency_handler(session)
        await handler.handle(CheckIdentityConsistency())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: optional identity/profile consistency check
    - Shutdown: dispose the database engine and close the cache pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_starting",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    if settings.check_identity_consistency_on_startup:
        await check_identity_consistency()

    yield

    await get_database().close()
    await get_cache().close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Product catalog and user profile API",
    version=settings.app_version,
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (standard error body)
register_exception_handlers(app)

# Include API v1 routers (generated from the route registry)
app.include_router(v1_router)


@app.get("/health")
async def health(
    database: Annotated[Database, Depends(get_database)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
) -> JSONResponse:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        JSONResponse: 200 when the database and (enabled) cache respond, 503 otherwise.
    """
    database_ok = await database.check_connection()
    if settings.redis_enabled:
        cache_ok = isinstance(await cache.ping(), Success)
        cache_status = "up" if cache_ok else "down"
    else:
        cache_ok, cache_status = True, "disabled"
    healthy = database_ok and cache_ok
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "degraded",
            "database": "up" if database_ok else "down",
            "cache": cache_status,
        },
    )
