"""Cache infrastructure.

- RedisAdapter: CacheProtocol over redis.asyncio
- ResponseCacheService: fail-open response cache used by routes
- cache_keys: request key and invalidation prefix builders
"""

from src.infrastructure.cache.cache_keys import (
    build_invalidation_pattern,
    build_response_cache_key,
)
from src.infrastructure.cache.redis_adapter import RedisAdapter
from src.infrastructure.cache.response_cache_service import ResponseCacheService

__all__ = [
    "RedisAdapter",
    "ResponseCacheService",
    "build_invalidation_pattern",
    "build_response_cache_key",
]
