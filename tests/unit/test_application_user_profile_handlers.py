"""Unit tests for user profile handlers.

Tests cover:
- UpdateUserProfile: validation before store access, not found, success
- RemoveAccount: profile missing, identity missing, both rows removed
- GetAllUserProfiles / GetUserProfileById
- CheckIdentityConsistency: orphan reporting in both directions
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.remove_account_handler import (
    RemoveAccountHandler,
)
from src.application.commands.handlers.update_user_profile_handler import (
    UpdateUserProfileHandler,
)
from src.application.commands.user_profile_commands import (
    RemoveAccount,
    UpdateUserProfile,
)
from src.application.dtos import UserProfileResult
from src.application.queries.handlers.user_profile_handlers import (
    CheckIdentityConsistencyHandler,
    GetAllUserProfilesHandler,
    GetUserProfileByIdHandler,
)
from src.application.queries.user_profile_queries import (
    CheckIdentityConsistency,
    GetAllUserProfiles,
    GetUserProfileById,
)
from src.core.enums import ErrorCode, ErrorKind
from src.core.result import Failure, Success
from src.domain.entities.identity_user import IdentityUser
from src.domain.entities.user_profile import UserProfile


def create_profile(email: str = "jane@example.com") -> UserProfile:
    return UserProfile.create_user_profile(
        full_name="Jane Doe",
        email=email,
        phone_number="0123456789",
        date_of_birth=date(1990, 1, 1),
    )


@pytest.fixture
def user_profile_repo():
    return AsyncMock()


@pytest.fixture
def identity_user_repo():
    return AsyncMock()


@pytest.mark.unit
class TestUpdateUserProfileHandler:
    """Test UpdateUserProfile command handler."""

    @pytest.mark.asyncio
    async def test_update_success(self, user_profile_repo, mock_unit_of_work, mock_logger):
        # Arrange
        profile = create_profile()
        user_profile_repo.find_by_id.return_value = profile
        handler = UpdateUserProfileHandler(
            user_profile_repo=user_profile_repo,
            unit_of_work=mock_unit_of_work,
            logger=mock_logger,
        )

        # Act
        result = await handler.handle(
            UpdateUserProfile(
                user_profile_id=profile.id,
                full_name="Jane Smith",
                phone_number="0987654321",
                date_of_birth=date(1991, 2, 2),
                updated_by="Administrator",
            )
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value == "Update account success"
        updated = user_profile_repo.update.call_args.args[0]
        assert updated.full_name == "Jane Smith"
        assert updated.email == "jane@example.com"
        assert updated.updated_by == "Administrator"
        mock_unit_of_work.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_fields_do_not_touch_store(
        self, user_profile_repo, mock_unit_of_work, mock_logger
    ):
        handler = UpdateUserProfileHandler(
            user_profile_repo=user_profile_repo,
            unit_of_work=mock_unit_of_work,
            logger=mock_logger,
        )

        result = await handler.handle(
            UpdateUserProfile(
                user_profile_id=uuid7(),
                full_name="",
                phone_number="123",
                date_of_birth=None,
            )
        )

        assert isinstance(result, Failure)
        assert all(e.kind == ErrorKind.BAD_REQUEST for e in result.error)
        user_profile_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_profile(self, user_profile_repo, mock_unit_of_work, mock_logger):
        user_profile_repo.find_by_id.return_value = None
        handler = UpdateUserProfileHandler(
            user_profile_repo=user_profile_repo,
            unit_of_work=mock_unit_of_work,
            logger=mock_logger,
        )
        profile_id = uuid7()

        result = await handler.handle(
            UpdateUserProfile(
                user_profile_id=profile_id,
                full_name="Jane",
                phone_number="0123456789",
                date_of_birth=date(1990, 1, 1),
            )
        )

        assert isinstance(result, Failure)
        assert result.error[0].message == f"No find UserProfile with ID {profile_id}"
        user_profile_repo.update.assert_not_awaited()


@pytest.mark.unit
class TestRemoveAccountHandler:
    """Test RemoveAccount command handler."""

    @pytest.mark.asyncio
    async def test_removes_identity_and_profile(
        self, user_profile_repo, identity_user_repo, mock_unit_of_work, mock_logger
    ):
        # Arrange
        profile = create_profile()
        identity = IdentityUser(email="JANE@example.com", password_hash="hash")
        user_profile_repo.find_by_id.return_value = profile
        identity_user_repo.find_by_email.return_value = identity
        handler = RemoveAccountHandler(
            user_profile_repo=user_profile_repo,
            identity_user_repo=identity_user_repo,
            unit_of_work=mock_unit_of_work,
            logger=mock_logger,
        )

        # Act
        result = await handler.handle(RemoveAccount(user_profile_id=profile.id))

        # Assert
        assert isinstance(result, Success)
        assert result.value == "Remove account success"
        identity_user_repo.find_by_email.assert_awaited_once_with("jane@example.com")
        identity_user_repo.delete.assert_awaited_once_with(identity)
        user_profile_repo.delete.assert_awaited_once_with(profile)
        mock_unit_of_work.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_profile(
        self, user_profile_repo, identity_user_repo, mock_unit_of_work, mock_logger
    ):
        user_profile_repo.find_by_id.return_value = None
        handler = RemoveAccountHandler(
            user_profile_repo=user_profile_repo,
            identity_user_repo=identity_user_repo,
            unit_of_work=mock_unit_of_work,
            logger=mock_logger,
        )

        result = await handler.handle(RemoveAccount(user_profile_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error[0].code == ErrorCode.USER_PROFILE_NOT_FOUND
        identity_user_repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_identity_removes_nothing(
        self, user_profile_repo, identity_user_repo, mock_unit_of_work, mock_logger
    ):
        user_profile_repo.find_by_id.return_value = create_profile()
        identity_user_repo.find_by_email.return_value = None
        handler = RemoveAccountHandler(
            user_profile_repo=user_profile_repo,
            identity_user_repo=identity_user_repo,
            unit_of_work=mock_unit_of_work,
            logger=mock_logger,
        )

        result = await handler.handle(RemoveAccount(user_profile_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error[0].kind == ErrorKind.NOT_FOUND
        assert result.error[0].message == (
            "No find UserProfile with email jane@example.com"
        )
        user_profile_repo.delete.assert_not_awaited()
        mock_unit_of_work.rollback.assert_awaited_once()


@pytest.mark.unit
class TestUserProfileQueryHandlers:
    """Test profile query handlers."""

    @pytest.mark.asyncio
    async def test_get_all_user_profiles(self, user_profile_repo, mock_logger):
        user_profile_repo.find_all.return_value = [
            create_profile("a@example.com"),
            create_profile("b@example.com"),
        ]
        handler = GetAllUserProfilesHandler(
            user_profile_repo=user_profile_repo, logger=mock_logger
        )

        result = await handler.handle(GetAllUserProfiles())

        assert isinstance(result, Success)
        assert all(isinstance(dto, UserProfileResult) for dto in result.value)
        assert [dto.email for dto in result.value] == ["a@example.com", "b@example.com"]

    @pytest.mark.asyncio
    async def test_get_user_profile_by_id(self, user_profile_repo, mock_logger):
        profile = create_profile()
        user_profile_repo.find_by_id.return_value = profile
        handler = GetUserProfileByIdHandler(
            user_profile_repo=user_profile_repo, logger=mock_logger
        )

        result = await handler.handle(GetUserProfileById(user_profile_id=profile.id))

        assert isinstance(result, Success)
        assert result.value.id == profile.id
        assert result.value.date_of_birth == date(1990, 1, 1)

    @pytest.mark.asyncio
    async def test_get_user_profile_by_id_not_found(self, user_profile_repo, mock_logger):
        user_profile_repo.find_by_id.return_value = None
        handler = GetUserProfileByIdHandler(
            user_profile_repo=user_profile_repo, logger=mock_logger
        )

        result = await handler.handle(GetUserProfileById(user_profile_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error[0].kind == ErrorKind.NOT_FOUND


@pytest.mark.unit
class TestCheckIdentityConsistencyHandler:
    """Test identity/profile consistency check."""

    @pytest.mark.asyncio
    async def test_reports_orphans_both_ways(
        self, identity_user_repo, user_profile_repo, mock_logger
    ):
        # Arrange
        identity_user_repo.find_all_emails.return_value = {"a@x.com", "b@x.com"}
        user_profile_repo.find_all_emails.return_value = {"b@x.com", "c@x.com"}
        handler = CheckIdentityConsistencyHandler(
            identity_user_repo=identity_user_repo,
            user_profile_repo=user_profile_repo,
            logger=mock_logger,
        )

        # Act
        result = await handler.handle(CheckIdentityConsistency())

        # Assert
        assert isinstance(result, Success)
        assert result.value.identities_without_profile == ["a@x.com"]
        assert result.value.profiles_without_identity == ["c@x.com"]
        assert result.value.is_consistent is False
        assert mock_logger.warning.call_count == 2

    @pytest.mark.asyncio
    async def test_consistent_store_logs_nothing(
        self, identity_user_repo, user_profile_repo, mock_logger
    ):
        identity_user_repo.find_all_emails.return_value = {"a@x.com"}
        user_profile_repo.find_all_emails.return_value = {"a@x.com"}
        handler = CheckIdentityConsistencyHandler(
            identity_user_repo=identity_user_repo,
            user_profile_repo=user_profile_repo,
            logger=mock_logger,
        )

        result = await handler.handle(CheckIdentityConsistency())

        assert isinstance(result, Success)
        assert result.value.is_consistent is True
        mock_logger.warning.assert_not_called()
