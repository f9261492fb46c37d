"""Redis adapter implementing CacheProtocol.

This adapter provides the Redis-specific implementation of the cache
protocol defined in the domain layer. It wraps the async Redis client and
maps Redis exceptions to CacheError.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Maps Redis exceptions to CacheError with an InfrastructureErrorCode
- Returns Result types for all operations
- Callers decide how to fail open
"""

from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError

# Keys requested per SCAN round trip
_SCAN_BATCH_SIZE = 100


def _cache_error(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    error: Exception,
    **details: Any,
) -> Failure[CacheError]:
    details["error"] = str(error)
    if not isinstance(error, RedisError):
        details["type"] = type(error).__name__
    return Failure(
        error=CacheError(
            code=ErrorCode.CACHE_UNAVAILABLE,
            infrastructure_code=infrastructure_code,
            message=message,
            details=details,
        )
    )


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
        except Exception as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get key '{key}' from cache",
                e,
                key=key,
            )
        if value is None:
            return Success(value=None)
        return Success(value=value.decode("utf-8") if isinstance(value, bytes) else value)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[bool, CacheError]:
        """Set value in Redis.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with True on success, or CacheError.
        """
        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except Exception as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to set key '{key}' in cache",
                e,
                key=key,
                ttl=ttl,
            )
        return Success(value=True)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Returns:
            Result with True if deleted, False if key didn't exist, or CacheError.
        """
        try:
            deleted_count = await self._redis.delete(key)
        except Exception as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete key '{key}' from cache",
                e,
                key=key,
            )
        return Success(value=deleted_count > 0)

    async def delete_pattern(self, pattern: str) -> Result[int, CacheError]:
        """Delete all keys matching a glob pattern.

        Walks the keyspace with SCAN (never KEYS) and deletes each batch.

        Args:
            pattern: Glob-style pattern (e.g., "/api/v1/Products/GetAllProducts*").

        Returns:
            Result with number of keys deleted (0 if none matched), or CacheError.
        """
        deleted = 0
        cursor = 0
        try:
            while True:
                cursor, batch = await self._redis.scan(
                    cursor, match=pattern, count=_SCAN_BATCH_SIZE
                )
                if batch:
                    deleted += await self._redis.delete(*batch)
                if cursor == 0:
                    break
        except Exception as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete keys matching '{pattern}'",
                e,
                pattern=pattern,
                deleted=deleted,
            )
        return Success(value=deleted)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check).

        Returns:
            Result with True if Redis is reachable, or CacheError.
        """
        try:
            await self._redis.ping()  # type: ignore[misc]
        except Exception as e:
            return _cache_error(
                InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                "Redis health check failed",
                e,
            )
        return Success(value=True)

    async def close(self) -> None:
        """Close the client and its connection pool."""
        await self._redis.aclose()
