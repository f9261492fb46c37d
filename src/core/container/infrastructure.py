"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Cache (Redis) and the response cache built on it
- Database (PostgreSQL)
- Password hashing (bcrypt)
- Token generation (JWT)
- Spreadsheet reading (openpyxl)
- Logging (structlog console)

Request-scoped:
- Database session
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        CacheProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        ResponseCacheProtocol,
        SpreadsheetReaderProtocol,
        TokenGenerationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns RedisAdapter with connection pooling. The pool is shared across
    the entire application.

    Usage:
        cache = get_cache()
        await cache.set("key", "value", ttl=60)
    """
    from redis.asyncio import ConnectionPool, Redis

    from src.infrastructure.cache.redis_adapter import RedisAdapter

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return RedisAdapter(redis_client=Redis(connection_pool=pool))


@lru_cache()
def get_response_cache_service() -> "ResponseCacheProtocol":
    """Get response cache service singleton (app-scoped).

    Disabled (always miss, never store) when ``redis_enabled`` is False.

    Usage:
        # Presentation Layer (FastAPI Depends)
        response_cache = Depends(get_response_cache_service)
    """
    from src.infrastructure.cache.response_cache_service import ResponseCacheService

    return ResponseCacheService(
        cache=get_cache(),
        logger=get_logger(),
        enabled=settings.redis_enabled,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    FastAPI caches this dependency per request, so every repository and the
    unit of work built for one request share the same session. Commits are
    explicit (unit of work); leftovers are rolled back when the request ends.

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Cost factor comes from ``bcrypt_rounds`` (12 by default).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns JWTService with HMAC-SHA256, the configured issuer/audience and
    a 120-minute lifetime by default.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expiration_minutes=settings.access_token_expire_minutes,
    )


@lru_cache()
def get_spreadsheet_reader() -> "SpreadsheetReaderProtocol":
    """Get spreadsheet reader singleton (app-scoped)."""
    from src.infrastructure.spreadsheet import OpenpyxlSpreadsheetReader

    return OpenpyxlSpreadsheetReader()


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        log_level=settings.log_level,
        service=settings.app_name,
    )
