"""Shared fixtures for API endpoint tests.

Every test runs against the real application with:
- an in-memory response cache in place of Redis
- handler factories overridden per test (no database)
- authentication overridden through ``authenticate_as`` when a test needs
  a caller (tests that check 401 leave it alone)
"""

from collections.abc import Callable
from datetime import UTC, date, datetime
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.dtos import ProductResult, UserProfileResult
from src.core.container import get_response_cache_service
from src.core.result import Failure, Success
from src.main import app
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)


# =============================================================================
# Test Doubles
# =============================================================================


class InMemoryResponseCache:
    """Dictionary-backed ResponseCacheProtocol."""

    def __init__(self) -> None:
        self.is_enabled = True
        self.entries: dict[str, str] = {}
        self.removed_patterns: list[str] = []

    async def get_cached_response(self, cache_key: str) -> str | None:
        return self.entries.get(cache_key)

    async def set_cached_response(
        self, cache_key: str, response: str | None, ttl_seconds: int
    ) -> None:
        if response is not None:
            self.entries[cache_key] = response

    async def remove_cached_response(self, pattern: str) -> int:
        self.removed_patterns.append(pattern)
        matching = [key for key in self.entries if key.startswith(pattern)]
        for key in matching:
            del self.entries[key]
        return len(matching)


class StubHandler:
    """Handler double returning a fixed Result and recording commands."""

    def __init__(self, result: Success | Failure) -> None:
        self._result = result
        self.commands: list[object] = []

    async def handle(self, command):
        self.commands.append(command)
        return self._result

    @property
    def call_count(self) -> int:
        return len(self.commands)


def make_current_user(role: str = "User", **overrides) -> CurrentUser:
    values = {
        "email": "jane@example.com",
        "full_name": "Jane Doe",
        "user_profile_id": uuid7(),
        "role": role,
    }
    values.update(overrides)
    return CurrentUser(**values)


def make_product_result(name: str = "iphone 15 pro max") -> ProductResult:
    now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    return ProductResult(
        id=uuid7(),
        name=name,
        price=30000000,
        description="this is a iphone",
        created_by="Jane Admin",
        created_date=now,
        updated_by="",
        updated_date=now,
    )


def make_user_profile_result(
    user_profile_id: UUID | None = None, email: str = "jane@example.com"
) -> UserProfileResult:
    now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    return UserProfileResult(
        id=user_profile_id or uuid7(),
        full_name="Jane Doe",
        email=email,
        phone_number="0123456789",
        date_of_birth=date(1990, 1, 1),
        created_by=email,
        created_date=now,
        updated_by="",
        updated_date=now,
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def response_cache():
    """Replace the Redis-backed response cache for one test."""
    cache = InMemoryResponseCache()
    app.dependency_overrides[get_response_cache_service] = lambda: cache
    yield cache
    app.dependency_overrides.pop(get_response_cache_service, None)


@pytest.fixture
def client(response_cache):
    """Provide test client (lifespan not started, no database)."""
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def authenticate_as() -> Callable[..., CurrentUser]:
    """Authenticate every request of the test as the returned caller.

    Usage:
        def test_something(client, authenticate_as):
            admin = authenticate_as("Admin")
    """

    def _authenticate(role: str = "User", **overrides) -> CurrentUser:
        user = make_current_user(role, **overrides)
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    return _authenticate


@pytest.fixture
def override_handler() -> Callable[[Callable, StubHandler], StubHandler]:
    """Install a StubHandler in place of a handler factory.

    Usage:
        stub = override_handler(get_get_all_products_handler, StubHandler(Success(value=[])))
    """

    def _override(factory: Callable, stub: StubHandler) -> StubHandler:
        app.dependency_overrides[factory] = lambda: stub
        return stub

    return _override
