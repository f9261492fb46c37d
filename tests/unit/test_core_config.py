"""Unit tests for Settings (pydantic-settings).

Tests cover:
- Required values loaded from the environment
- Defaults for optional values
- Validators (secret key length, bcrypt rounds, prefix trailing slash)
- Environment helpers
"""

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.constants import DEFAULT_CACHE_TTL_SECONDS
from src.core.enums import Environment

REQUIRED = {
    "DATABASE_URL": "postgresql+asyncpg://u:p@localhost:5432/db",
    "REDIS_URL": "redis://localhost:6379/0",
    "SECRET_KEY": "s" * 32,
}


@pytest.fixture
def env(monkeypatch):
    """Start from the required variables only."""
    for name in (
        "ENVIRONMENT",
        "API_V1_PREFIX",
        "BCRYPT_ROUNDS",
        "REDIS_ENABLED",
        "ACCESS_TOKEN_EXPIRE_MINUTES",
    ):
        monkeypatch.delenv(name, raising=False)
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


@pytest.mark.unit
class TestSettings:
    """Test settings loading and validation."""

    def test_defaults(self, env):
        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.cache_ttl_seconds == DEFAULT_CACHE_TTL_SECONDS
        assert settings.access_token_expire_minutes == 120
        assert settings.redis_enabled is True
        assert settings.is_development is True

    def test_missing_required_value(self, env):
        env.delenv("DATABASE_URL")

        with pytest.raises(ValidationError):
            Settings()

    def test_short_secret_key_rejected(self, env):
        env.setenv("SECRET_KEY", "too-short")

        with pytest.raises(ValidationError):
            Settings()

    def test_bcrypt_rounds_range(self, env):
        env.setenv("BCRYPT_ROUNDS", "32")

        with pytest.raises(ValidationError):
            Settings()

    def test_prefix_trailing_slash_removed(self, env):
        env.setenv("API_V1_PREFIX", "/api/v1/")

        assert Settings().api_v1_prefix == "/api/v1"

    def test_environment_helpers(self, env):
        env.setenv("ENVIRONMENT", "production")

        settings = Settings()

        assert settings.is_production is True
        assert settings.is_testing is False

    def test_redis_can_be_disabled(self, env):
        env.setenv("REDIS_ENABLED", "false")

        assert Settings().redis_enabled is False
