"""RemoveAccount command handler.

Deletes a profile together with the identity that shares its email, in one
transaction. Either both rows go or neither does.
"""

from src.application.commands.user_profile_commands import RemoveAccount
from src.application.messages import UserProfileMessages
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InternalError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    IdentityUserRepository,
    LoggerProtocol,
    UnitOfWorkProtocol,
    UserProfileRepository,
)


class RemoveAccountHandler:
    """Handler for account removal command."""

    def __init__(
        self,
        user_profile_repo: UserProfileRepository,
        identity_user_repo: IdentityUserRepository,
        unit_of_work: UnitOfWorkProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_profile_repo = user_profile_repo
        self._identity_user_repo = identity_user_repo
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: RemoveAccount) -> Result[str, list[DomainError]]:
        """Handle account removal command.

        Returns:
            Success(message) after both rows are deleted.
            Failure([NotFoundError]) if the profile or its identity is missing.
        """
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

            identity = await self._identity_user_repo.find_by_email(profile.email)
            if identity is None:
                await self._unit_of_work.rollback()
                return Failure(
                    error=[
                        NotFoundError(
                            code=ErrorCode.IDENTITY_NOT_FOUND,
                            message=UserProfileMessages.NOT_FOUND_BY_EMAIL.format(
                                email=profile.email
                            ),
                            resource_type="IdentityUser",
                            resource_id=profile.normalized_email,
                        )
                    ]
                )

            await self._identity_user_repo.delete(identity)
            await self._user_profile_repo.delete(profile)
            await self._unit_of_work.commit()

            self._logger.info("account_removed", user_profile_id=str(profile.id))
            return Success(value=UserProfileMessages.REMOVE_SUCCESS)

        except Exception as e:
            await self._unit_of_work.rollback()
            self._logger.error(
                "remove_account_failed",
                error=e,
                user_profile_id=str(cmd.user_profile_id),
            )
            return Failure(error=[InternalError()])
