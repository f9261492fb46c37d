"""Authentication handler dependency factories.

Request-scoped handler instances for registration and login.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )


async def get_register_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterUserHandler":
    """Get RegisterUser command handler (request-scoped).

    Creates new handler instance per request with all required dependencies:
    - UserProfileRepository and IdentityUserRepository (request session)
    - SqlAlchemyUnitOfWork (same session)
    - BcryptPasswordService and logger (app-scoped singletons)

    Usage:
        @router.post("/Register")
        async def register(
            handler: RegisterUserHandler = Depends(get_register_user_handler),
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.infrastructure.persistence.repositories import (
        IdentityUserRepository,
        UserProfileRepository,
    )
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return RegisterUserHandler(
        user_profile_repo=UserProfileRepository(session=session),
        identity_user_repo=IdentityUserRepository(session=session),
        password_service=get_password_service(),
        unit_of_work=SqlAlchemyUnitOfWork(session=session),
        logger=get_logger(),
    )


async def get_login_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped)."""
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.infrastructure.persistence.repositories import (
        IdentityUserRepository,
        UserProfileRepository,
    )

    return LoginUserHandler(
        identity_user_repo=IdentityUserRepository(session=session),
        user_profile_repo=UserProfileRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )
