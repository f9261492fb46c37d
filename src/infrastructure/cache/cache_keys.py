"""Response cache key construction.

Keys are the request path followed by ``|{name}-{value}`` for every query
parameter, sorted by parameter name, so the same logical request always
maps to the same key regardless of parameter order.

Usage:
    from src.infrastructure.cache.cache_keys import build_response_cache_key

    key = build_response_cache_key(
        "/api/v1/Products/GetAllProducts", [("page", "2"), ("limit", "10")]
    )
    # "/api/v1/Products/GetAllProducts|limit-10|page-2"
"""

from collections.abc import Iterable

from src.core.constants import CACHE_QUERY_SEPARATOR


def build_response_cache_key(path: str, query_params: Iterable[tuple[str, str]]) -> str:
    """Build the cache key for a request.

    Args:
        path: Request path (e.g., "/api/v1/Products/GetAllProducts").
        query_params: Query parameter (name, value) pairs in any order.

    Returns:
        Cache key string.
    """
    parts = [path]
    for name, value in sorted(query_params, key=lambda item: item[0]):
        parts.append(f"{CACHE_QUERY_SEPARATOR}{name}-{value}")
    return "".join(parts)


def build_invalidation_pattern(api_prefix: str, controller: str, action: str) -> str:
    """Build the key prefix removed after a mutation.

    Args:
        api_prefix: Versioned API prefix (e.g., "/api/v1").
        controller: Controller segment (e.g., "Products").
        action: Action segment (e.g., "GetAllProducts").

    Returns:
        Prefix such as "/api/v1/Products/GetAllProducts".
    """
    return f"{api_prefix.rstrip('/')}/{controller}/{action}"
