"""User profile handler dependency factories.

Request-scoped handler instances for profile commands and queries, plus the
startup identity consistency check.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers.remove_account_handler import (
        RemoveAccountHandler,
    )
    from src.application.commands.handlers.update_user_profile_handler import (
        UpdateUserProfileHandler,
    )
    from src.application.queries.handlers.user_profile_handlers import (
        CheckIdentityConsistencyHandler,
        GetAllUserProfilesHandler,
        GetUserProfileByIdHandler,
    )


async def get_get_all_user_profiles_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetAllUserProfilesHandler":
    from src.application.queries.handlers.user_profile_handlers import (
        GetAllUserProfilesHandler,
    )
    from src.infrastructure.persistence.repositories import UserProfileRepository

    return GetAllUserProfilesHandler(
        user_profile_repo=UserProfileRepository(session=session),
        logger=get_logger(),
    )


async def get_get_user_profile_by_id_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetUserProfileByIdHandler":
    from src.application.queries.handlers.user_profile_handlers import (
        GetUserProfileByIdHandler,
    )
    from src.infrastructure.persistence.repositories import UserProfileRepository

    return GetUserProfileByIdHandler(
        user_profile_repo=UserProfileRepository(session=session),
        logger=get_logger(),
    )


async def get_update_user_profile_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateUserProfileHandler":
    from src.application.commands.handlers.update_user_profile_handler import (
        UpdateUserProfileHandler,
    )
    from src.infrastructure.persistence.repositories import UserProfileRepository
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return UpdateUserProfileHandler(
        user_profile_repo=UserProfileRepository(session=session),
        unit_of_work=SqlAlchemyUnitOfWork(session=session),
        logger=get_logger(),
    )


async def get_remove_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RemoveAccountHandler":
    """Get RemoveAccount command handler (request-scoped).

    Profile and identity repositories share the session so both deletes
    commit together.
    """
    from src.application.commands.handlers.remove_account_handler import (
        RemoveAccountHandler,
    )
    from src.infrastructure.persistence.repositories import (
        IdentityUserRepository,
        UserProfileRepository,
    )
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return RemoveAccountHandler(
        user_profile_repo=UserProfileRepository(session=session),
        identity_user_repo=IdentityUserRepository(session=session),
        unit_of_work=SqlAlchemyUnitOfWork(session=session),
        logger=get_logger(),
    )


def create_check_identity_consistency_handler(
    session: AsyncSession,
) -> "CheckIdentityConsistencyHandler":
    """Build the consistency check handler outside a request (startup).

    Usage:
        async with get_database().get_session() as session:
            handler = create_check_identity_consistency_handler(session)
            await handler.handle(CheckIdentityConsistency())
    """
    from src.application.queries.handlers.user_profile_handlers import (
        CheckIdentityConsistencyHandler,
    )
    from src.infrastructure.persistence.repositories import (
        IdentityUserRepository,
        UserProfileRepository,
    )

    return CheckIdentityConsistencyHandler(
        identity_user_repo=IdentityUserRepository(session=session),
        user_profile_repo=UserProfileRepository(session=session),
        logger=get_logger(),
    )
