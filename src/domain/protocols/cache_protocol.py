"""Cache protocol for domain layer.

This module defines the cache interface the application needs, without
knowing about any specific implementation. Infrastructure adapters implement
this protocol to provide caching functionality.

Architecture:
- Protocol-based - uses structural typing
- All operations return Result types
- Fail-open: callers log failures and continue without the cache
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class CacheProtocol(Protocol):
    """Key-value cache backend.

    Values are strings (serialized response bodies).
    """

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get value from cache.

        Args:
            key: Cache key.

        Returns:
            Result with value if found, None if not found, or CacheError.

        Example:
            result = await cache.get("/api/v1/Products/GetAllProducts")
            match result:
                case Success(value=value) if value:
                    # Cache hit
                    ...
                case Success(value=None):
                    # Cache miss
                    ...
                case Failure(error=error):
                    # Cache error - fail open
                    logger.warning("Cache get failed", error=str(error))
        """
        ...

    async def set(
        self, key: str, value: str, ttl: int | None = None
    ) -> Result[bool, DomainError]:
        """Set value in cache.

        Args:
            key: Cache key.
            value: Value to store.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with True on success, or CacheError.
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete one key.

        Returns:
            Result with True if the key existed, or CacheError.
        """
        ...

    async def delete_pattern(self, pattern: str) -> Result[int, DomainError]:
        """Delete all keys matching a glob pattern.

        Args:
            pattern: Glob-style pattern (e.g., "/api/v1/Products/GetAllProducts*").

        Returns:
            Result with number of keys deleted (0 if none matched), or CacheError.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]:
        """Check cache connectivity.

        Returns:
            Result with True if reachable, or CacheError.
        """
        ...
