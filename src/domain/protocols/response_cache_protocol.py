"""Response cache protocol.

Stores serialized HTTP response bodies keyed by request path and query.
"""

from typing import Protocol


class ResponseCacheProtocol(Protocol):
    """Response cache used by cached and invalidating routes.

    Attributes:
        is_enabled: False when caching is switched off in settings.
    """

    is_enabled: bool

    async def get_cached_response(self, cache_key: str) -> str | None:
        """Return the stored body, or None on miss or cache failure."""
        ...

    async def set_cached_response(
        self, cache_key: str, response: str | None, ttl_seconds: int
    ) -> None:
        """Store a body for ttl_seconds. A None response is not stored."""
        ...

    async def remove_cached_response(self, pattern: str) -> int:
        """Remove every key starting with pattern.

        Args:
            pattern: Key prefix (a trailing ``*`` is added).

        Returns:
            Number of keys removed (0 if nothing matched or cache failed).

        Raises:
            ValueError: If pattern is blank.
        """
        ...
