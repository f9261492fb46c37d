"""Unit tests for the cache infrastructure.

Tests cover:
- Cache key construction (query pairs sorted by name)
- Invalidation prefix construction
- ResponseCacheService: hit/miss, fail-open on errors, blank pattern guard,
  prefix invalidation
- RedisAdapter: Result mapping and SCAN-based pattern deletion
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.cache import (
    RedisAdapter,
    ResponseCacheService,
    build_invalidation_pattern,
    build_response_cache_key,
)
from src.infrastructure.errors import CacheError


def cache_failure() -> Failure:
    return Failure(
        error=CacheError(code=ErrorCode.CACHE_UNAVAILABLE, message="Redis is down")
    )


@pytest.mark.unit
class TestCacheKeys:
    """Test cache key builders."""

    def test_key_without_query(self):
        assert (
            build_response_cache_key("/api/v1/Products/GetAllProducts", [])
            == "/api/v1/Products/GetAllProducts"
        )

    def test_query_pairs_are_sorted_by_name(self):
        """Parameter order does not change the key."""
        first = build_response_cache_key("/p", [("page", "2"), ("limit", "10")])
        second = build_response_cache_key("/p", [("limit", "10"), ("page", "2")])

        assert first == second == "/p|limit-10|page-2"

    def test_invalidation_pattern(self):
        assert (
            build_invalidation_pattern("/api/v1/", "Products", "GetAllProducts")
            == "/api/v1/Products/GetAllProducts"
        )


@pytest.mark.unit
class TestResponseCacheService:
    """Test fail-open response cache."""

    @pytest.mark.asyncio
    async def test_hit_returns_stored_body(self, mock_logger):
        cache = AsyncMock()
        cache.get.return_value = Success(value='{"data":[]}')
        service = ResponseCacheService(cache=cache, logger=mock_logger)

        assert await service.get_cached_response("k") == '{"data":[]}'

    @pytest.mark.asyncio
    async def test_read_failure_is_a_miss(self, mock_logger):
        cache = AsyncMock()
        cache.get.return_value = cache_failure()
        service = ResponseCacheService(cache=cache, logger=mock_logger)

        assert await service.get_cached_response("k") is None
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_set_stores_with_ttl(self, mock_logger):
        cache = AsyncMock()
        cache.set.return_value = Success(value=True)
        service = ResponseCacheService(cache=cache, logger=mock_logger)

        await service.set_cached_response("k", "body", 3600)

        cache.set.assert_awaited_once_with("k", "body", ttl=3600)

    @pytest.mark.asyncio
    async def test_none_response_is_not_stored(self, mock_logger):
        cache = AsyncMock()
        service = ResponseCacheService(cache=cache, logger=mock_logger)

        await service.set_cached_response("k", None, 3600)

        cache.set.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_write_failure_does_not_raise(self, mock_logger):
        cache = AsyncMock()
        cache.set.return_value = cache_failure()
        service = ResponseCacheService(cache=cache, logger=mock_logger)

        await service.set_cached_response("k", "body", 60)

        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_remove_appends_wildcard(self, mock_logger):
        # Arrange
        cache = AsyncMock()
        cache.delete_pattern.return_value = Success(value=3)
        service = ResponseCacheService(cache=cache, logger=mock_logger)

        # Act
        removed = await service.remove_cached_response("/api/v1/Products/GetAllProducts")

        # Assert
        assert removed == 3
        cache.delete_pattern.assert_awaited_once_with("/api/v1/Products/GetAllProducts*")

    @pytest.mark.asyncio
    async def test_remove_with_no_matches_is_noop(self, mock_logger):
        cache = AsyncMock()
        cache.delete_pattern.return_value = Success(value=0)
        service = ResponseCacheService(cache=cache, logger=mock_logger)

        assert await service.remove_cached_response("/api/v1/Nothing") == 0
        mock_logger.info.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("pattern", ["", "   "])
    async def test_blank_pattern_rejected(self, mock_logger, pattern):
        service = ResponseCacheService(cache=AsyncMock(), logger=mock_logger)

        with pytest.raises(ValueError):
            await service.remove_cached_response(pattern)

    @pytest.mark.asyncio
    async def test_disabled_cache_skips_redis_on_remove(self, mock_logger):
        cache = AsyncMock()
        service = ResponseCacheService(cache=cache, logger=mock_logger, enabled=False)

        assert await service.remove_cached_response("/api/v1/Products") == 0
        cache.delete_pattern.assert_not_awaited()
        mock_logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_remove_failure_returns_zero(self, mock_logger):
        cache = AsyncMock()
        cache.delete_pattern.return_value = cache_failure()
        service = ResponseCacheService(cache=cache, logger=mock_logger)

        assert await service.remove_cached_response("/api/v1/Products") == 0
        mock_logger.warning.assert_called_once()


@pytest.mark.unit
class TestRedisAdapter:
    """Test RedisAdapter Result mapping."""

    @pytest.mark.asyncio
    async def test_get_decodes_bytes(self):
        redis = AsyncMock()
        redis.get.return_value = b"value"

        result = await RedisAdapter(redis_client=redis).get("k")

        assert result == Success(value="value")

    @pytest.mark.asyncio
    async def test_get_missing_key(self):
        redis = AsyncMock()
        redis.get.return_value = None

        assert await RedisAdapter(redis_client=redis).get("k") == Success(value=None)

    @pytest.mark.asyncio
    async def test_get_connection_error_maps_to_cache_error(self):
        redis = AsyncMock()
        redis.get.side_effect = RedisConnectionError("refused")

        result = await RedisAdapter(redis_client=redis).get("k")

        assert isinstance(result, Failure)
        assert isinstance(result.error, CacheError)
        assert result.error.details["key"] == "k"

    @pytest.mark.asyncio
    async def test_set_with_ttl_uses_setex(self):
        redis = AsyncMock()

        result = await RedisAdapter(redis_client=redis).set("k", "v", ttl=60)

        assert result == Success(value=True)
        redis.setex.assert_awaited_once_with("k", 60, "v")

    @pytest.mark.asyncio
    async def test_delete_pattern_walks_every_scan_page(self):
        # Arrange
        redis = AsyncMock()
        redis.scan.side_effect = [
            (17, [b"/api/v1/Products/GetAllProducts"]),
            (0, [b"/api/v1/Products/GetAllProducts|page-2"]),
        ]
        redis.delete.side_effect = [1, 1]

        # Act
        result = await RedisAdapter(redis_client=redis).delete_pattern(
            "/api/v1/Products/GetAllProducts*"
        )

        # Assert
        assert result == Success(value=2)
        assert redis.scan.await_count == 2

    @pytest.mark.asyncio
    async def test_delete_pattern_without_matches(self):
        redis = AsyncMock()
        redis.scan.return_value = (0, [])

        result = await RedisAdapter(redis_client=redis).delete_pattern("/none*")

        assert result == Success(value=0)
        redis.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ping_failure(self):
        redis = AsyncMock()
        redis.ping.side_effect = RedisConnectionError("refused")

        result = await RedisAdapter(redis_client=redis).ping()

        assert isinstance(result, Failure)
