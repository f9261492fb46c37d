"""Unit tests for RegisterUserHandler.

Tests cover:
- Successful registration (identity with User role + profile, one commit)
- Field validation errors (reported together, store untouched)
- Duplicate email (single error, nothing saved)
- Weak password (every unmet rule, nothing saved)
- Unexpected failure (rollback, generic error, logged)

Architecture:
- Unit tests for application handler (mocked dependencies)
- Mock repository protocols
- Test handler logic, not persistence
"""

from datetime import date
from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands.auth_commands import RegisterUser
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.core.enums import ErrorKind
from src.core.errors import ConflictError, InternalError
from src.core.result import Failure, Success
from src.domain.entities.identity_user import IdentityUser
from src.domain.enums import UserRole


def make_command(**overrides) -> RegisterUser:
    values = {
        "full_name": "Jane Doe",
        "email": "jane@example.com",
        "phone_number": "0123456789",
        "date_of_birth": date(1990, 1, 1),
        "password": "Str0ng!Pass",
    }
    values.update(overrides)
    return RegisterUser(**values)


@pytest.fixture
def identity_user_repo():
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    return repo


@pytest.fixture
def user_profile_repo():
    return AsyncMock()


@pytest.fixture
def password_service():
    service = Mock()
    service.hash_password.return_value = "$2b$12$hashed"
    return service


@pytest.fixture
def handler(
    user_profile_repo, identity_user_repo, password_service, mock_unit_of_work, mock_logger
):
    return RegisterUserHandler(
        user_profile_repo=user_profile_repo,
        identity_user_repo=identity_user_repo,
        password_service=password_service,
        unit_of_work=mock_unit_of_work,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestRegisterUserHandlerSuccess:
    """Test successful registration."""

    @pytest.mark.asyncio
    async def test_register_creates_identity_and_profile(
        self, handler, identity_user_repo, user_profile_repo, mock_unit_of_work
    ):
        # Act
        result = await handler.handle(make_command())

        # Assert
        assert isinstance(result, Success)
        assert result.value == "Register user success"

        identity = identity_user_repo.save.call_args.args[0]
        assert isinstance(identity, IdentityUser)
        assert identity.role == UserRole.USER
        assert identity.password_hash == "$2b$12$hashed"

        profile = user_profile_repo.save.call_args.args[0]
        assert profile.email == "jane@example.com"
        assert profile.full_name == "Jane Doe"

        mock_unit_of_work.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_password_is_hashed_not_stored(self, handler, password_service):
        await handler.handle(make_command())

        password_service.hash_password.assert_called_once_with("Str0ng!Pass")


@pytest.mark.unit
class TestRegisterUserHandlerFailures:
    """Test rejected registrations."""

    @pytest.mark.asyncio
    async def test_invalid_fields_reported_together_without_store_access(
        self, handler, identity_user_repo, mock_unit_of_work
    ):
        # Act
        result = await handler.handle(
            make_command(email="bad", phone_number="1", date_of_birth=None)
        )

        # Assert
        assert isinstance(result, Failure)
        assert len(result.error) >= 3
        assert all(error.kind == ErrorKind.BAD_REQUEST for error in result.error)
        identity_user_repo.find_by_email.assert_not_awaited()
        mock_unit_of_work.begin.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_email_returns_single_error(
        self, handler, identity_user_repo, user_profile_repo, mock_unit_of_work
    ):
        # Arrange
        identity_user_repo.find_by_email.return_value = IdentityUser(
            email="jane@example.com", password_hash="hash"
        )

        # Act
        result = await handler.handle(make_command(email="JANE@example.com"))

        # Assert
        assert isinstance(result, Failure)
        assert len(result.error) == 1
        assert isinstance(result.error[0], ConflictError)
        assert result.error[0].message == "This email has been registered"
        assert result.error[0].kind == ErrorKind.BAD_REQUEST
        identity_user_repo.save.assert_not_awaited()
        user_profile_repo.save.assert_not_awaited()
        mock_unit_of_work.rollback.assert_awaited_once()
        mock_unit_of_work.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_weak_password_reports_every_rule(
        self, handler, identity_user_repo, mock_unit_of_work
    ):
        # Act
        result = await handler.handle(make_command(password="abc"))

        # Assert
        assert isinstance(result, Failure)
        assert len(result.error) == 4
        identity_user_repo.save.assert_not_awaited()
        mock_unit_of_work.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_exception_returns_generic_error(
        self, handler, user_profile_repo, mock_unit_of_work, mock_logger
    ):
        # Arrange
        user_profile_repo.save.side_effect = RuntimeError("connection reset")

        # Act
        result = await handler.handle(make_command())

        # Assert
        assert isinstance(result, Failure)
        assert len(result.error) == 1
        assert isinstance(result.error[0], InternalError)
        assert "connection reset" not in result.error[0].message
        mock_unit_of_work.rollback.assert_awaited_once()
        mock_logger.error.assert_called_once()
