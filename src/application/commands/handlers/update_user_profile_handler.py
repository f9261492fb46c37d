"""UpdateUserProfile command handler.

Validates the editable fields, loads the profile, applies
``update_user_profile`` and commits. Serves both the admin route (profile ID
from the path) and the self-service route (profile ID from the token).
"""

from src.application.commands.user_profile_commands import UpdateUserProfile
from src.application.messages import UserProfileMessages
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InternalError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    LoggerProtocol,
    UnitOfWorkProtocol,
    UserProfileRepository,
)
from src.domain.validators import validate_user_profile_update


class UpdateUserProfileHandler:
    """Handler for profile update command."""

    def __init__(
        self,
        user_profile_repo: UserProfileRepository,
        unit_of_work: UnitOfWorkProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_profile_repo = user_profile_repo
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: UpdateUserProfile) -> Result[str, list[DomainError]]:
        """Handle profile update command.

        Returns:
            Success(message) after commit.
            Failure(errors) with validation errors or NotFound.
        """
        validation_errors = validate_user_profile_update(
            cmd.full_name, cmd.phone_number, cmd.date_of_birth
        )
        if validation_errors:
            return Failure(error=list(validation_errors))

        try:
            await self._unit_of_work.begin()

            profile = await self._user_profile_repo.find_by_id(cmd.user_profile_id)
            if profile is None:
                await self._unit_of_work.rollback()
                return Failure(
                    error=[
                        NotFoundError(
                            code=ErrorCode.USER_PROFILE_NOT_FOUND,
                            message=UserProfileMessages.NOT_FOUND_BY_ID.format(
                                user_profile_id=cmd.user_profile_id
                            ),
                            resource_type="UserProfile",
                            resource_id=str(cmd.user_profile_id),
                        )
                    ]
                )

            profile.update_user_profile(
                full_name=cmd.full_name,
                phone_number=cmd.phone_number,
                date_of_birth=cmd.date_of_birth,
                updated_by=cmd.updated_by,
            )
            await self._user_profile_repo.update(profile)
            await self._unit_of_work.commit()

            self._logger.info("user_profile_updated", user_profile_id=str(profile.id))
            return Success(value=UserProfileMessages.UPDATE_SUCCESS)

        except Exception as e:
            await self._unit_of_work.rollback()
            self._logger.error(
                "update_user_profile_failed",
                error=e,
                user_profile_id=str(cmd.user_profile_id),
            )
            return Failure(error=[InternalError()])
