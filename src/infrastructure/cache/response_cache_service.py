"""Response cache service.

Stores serialized response bodies on top of CacheProtocol. Cache failures
are logged and treated as misses (fail-open): a broken cache never fails a
request.
"""

from src.core.result import Failure, Success
from src.domain.protocols import CacheProtocol, LoggerProtocol


class ResponseCacheService:
    """Read-through/invalidate-by-prefix response cache.

    Implements ResponseCacheProtocol.

    Attributes:
        is_enabled: False when caching is switched off; cached routes then
            always call their handler.

    Example:
        >>> service = ResponseCacheService(cache=get_cache(), logger=get_logger())
        >>> await service.set_cached_response(key, body, 3600)
        >>> await service.remove_cached_response("/api/v1/Products/GetAllProducts")
    """

    def __init__(
        self,
        cache: CacheProtocol,
        logger: LoggerProtocol,
        enabled: bool = True,
    ) -> None:
        self._cache = cache
        self._logger = logger
        self.is_enabled = enabled

    async def get_cached_response(self, cache_key: str) -> str | None:
        """Return the stored body, or None on miss or cache failure."""
        match await self._cache.get(cache_key):
            case Success(value=value):
                return value
            case Failure(error=error):
                self._logger.warning(
                    "response_cache_read_failed", cache_key=cache_key, error=str(error)
                )
        return None

    async def set_cached_response(
        self, cache_key: str, response: str | None, ttl_seconds: int
    ) -> None:
        """Store a body for ttl_seconds. A None response is not stored."""
        if response is None:
            return
        result = await self._cache.set(cache_key, response, ttl=ttl_seconds)
        if isinstance(result, Failure):
            self._logger.warning(
                "response_cache_write_failed",
                cache_key=cache_key,
                error=str(result.error),
            )

    async def remove_cached_response(self, pattern: str) -> int:
        """Remove every key starting with pattern.

        Args:
            pattern: Key prefix; ``*`` is appended to match every query variant.

        Returns:
            Number of keys removed. Always 0 while the cache is disabled.

        Raises:
            ValueError: If pattern is blank.
        """
        if not pattern or not pattern.strip():
            raise ValueError("Cache invalidation pattern cannot be empty")
        if not self.is_enabled:
            return 0

        match await self._cache.delete_pattern(f"{pattern}*"):
            case Success(value=count):
                if count:
                    self._logger.info(
                        "response_cache_invalidated", pattern=pattern, count=count
                    )
                return count
            case Failure(error=error):
                self._logger.warning(
                    "response_cache_invalidation_failed",
                    pattern=pattern,
                    error=str(error),
                )
        return 0
