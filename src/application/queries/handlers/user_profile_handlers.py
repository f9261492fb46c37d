"""User profile query handlers.

Return DTOs (not domain entities) to prevent leaking domain to presentation.
"""

from src.application.dtos import IdentityConsistencyReport, UserProfileResult
from src.application.messages import UserProfileMessages
from src.application.queries.user_profile_queries import (
    CheckIdentityConsistency,
    GetAllUserProfiles,
    GetUserProfileById,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InternalError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    IdentityUserRepository,
    LoggerProtocol,
    UserProfileRepository,
)


class GetAllUserProfilesHandler:
    """List every profile (admin view)."""

    def __init__(
        self, user_profile_repo: UserProfileRepository, logger: LoggerProtocol
    ) -> None:
        self._user_profile_repo = user_profile_repo
        self._logger = logger

    async def handle(
        self, query: GetAllUserProfiles
    ) -> Result[list[UserProfileResult], list[DomainError]]:
        try:
            profiles = await self._user_profile_repo.find_all()
        except Exception as e:
            self._logger.error("get_all_user_profiles_failed", error=e)
            return Failure(error=[InternalError()])
        return Success(value=[UserProfileResult.from_entity(p) for p in profiles])


class GetUserProfileByIdHandler:
    """Get a single profile.

    Serves both the admin route and the self-service route (profile ID taken
    from the caller's token).
    """

    def __init__(
        self, user_profile_repo: UserProfileRepository, logger: LoggerProtocol
    ) -> None:
        self._user_profile_repo = user_profile_repo
        self._logger = logger

    async def handle(
        self, query: GetUserProfileById
    ) -> Result[UserProfileResult, list[DomainError]]:
        try:
            profile = await self._user_profile_repo.find_by_id(query.user_profile_id)
        except Exception as e:
            self._logger.error(
                "get_user_profile_failed",
                error=e,
                user_profile_id=str(query.user_profile_id),
            )
            return Failure(error=[InternalError()])

        if profile is None:
            return Failure(
                error=[
                    NotFoundError(
                        code=ErrorCode.USER_PROFILE_NOT_FOUND,
                        message=UserProfileMessages.NOT_FOUND_BY_ID.format(
                            user_profile_id=query.user_profile_id
                        ),
                        resource_type="UserProfile",
                        resource_id=str(query.user_profile_id),
                    )
                ]
            )
        return Success(value=UserProfileResult.from_entity(profile))


class CheckIdentityConsistencyHandler:
    """Report identities and profiles that are not linked by email.

    The two tables are joined only by normalized email (no foreign key), so
    a partial failure outside this service can leave orphans. Each orphan
    set is logged as a warning.
    """

    def __init__(
        self,
        identity_user_repo: IdentityUserRepository,
        user_profile_repo: UserProfileRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._identity_user_repo = identity_user_repo
        self._user_profile_repo = user_profile_repo
        self._logger = logger

    async def handle(
        self, query: CheckIdentityConsistency
    ) -> Result[IdentityConsistencyReport, list[DomainError]]:
        try:
            identity_emails = await self._identity_user_repo.find_all_emails()
            profile_emails = await self._user_profile_repo.find_all_emails()
        except Exception as e:
            self._logger.error("identity_consistency_check_failed", error=e)
            return Failure(error=[InternalError()])

        report = IdentityConsistencyReport(
            identities_without_profile=sorted(identity_emails - profile_emails),
            profiles_without_identity=sorted(profile_emails - identity_emails),
        )
        if report.identities_without_profile:
            self._logger.warning(
                "identities_without_profile",
                count=len(report.identities_without_profile),
                emails=report.identities_without_profile,
            )
        if report.profiles_without_identity:
            self._logger.warning(
                "profiles_without_identity",
                count=len(report.profiles_without_identity),
                emails=report.profiles_without_identity,
            )
        return Success(value=report)
