"""LoginUser command handler.

Flow:
1. Validate email format and non-empty password
2. Look up the identity and verify the password (one generic message for
   unknown email and wrong password alike)
3. Load the profile linked by email
4. Issue a signed access token carrying email, full name, profile ID, and role

Architecture:
- Read-only: no unit of work
- Token issuing is delegated to TokenGenerationProtocol
"""

from src.application.commands.auth_commands import LoginUser
from src.application.messages import AuthMessages
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, InternalError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    IdentityUserRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserProfileRepository,
)
from src.domain.validators import validate_login


class LoginUserHandler:
    """Handler for login command.

    Returns the bearer token string on success.
    """

    def __init__(
        self,
        identity_user_repo: IdentityUserRepository,
        user_profile_repo: UserProfileRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._identity_user_repo = identity_user_repo
        self._user_profile_repo = user_profile_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[str, list[DomainError]]:
        """Handle login command.

        Args:
            cmd: LoginUser command.

        Returns:
            Success(access_token) on valid credentials.
            Failure(errors) otherwise.
        """
        validation_errors = validate_login(cmd.email, cmd.password)
        if validation_errors:
            return Failure(error=list(validation_errors))

        try:
            identity = await self._identity_user_repo.find_by_email(cmd.email)
            if identity is None or not self._password_service.verify_password(
                cmd.password, identity.password_hash
            ):
                self._logger.warning(
                    "login_failed", reason="invalid_credentials"
                )
                return Failure(
                    error=[
                        AuthenticationError(
                            code=ErrorCode.INVALID_CREDENTIALS,
                            message=AuthMessages.INVALID_CREDENTIALS,
                        )
                    ]
                )

            profile = await self._user_profile_repo.find_by_email(identity.email)
            if profile is None:
                self._logger.warning("login_failed", reason="profile_missing")
                return Failure(
                    error=[
                        AuthenticationError(
                            code=ErrorCode.EMAIL_NOT_REGISTERED,
                            message=AuthMessages.EMAIL_NOT_REGISTERED,
                        )
                    ]
                )

            token = self._token_service.generate_access_token(
                email=profile.email,
                full_name=profile.full_name,
                user_profile_id=profile.id,
                role=identity.role.value,
            )
            self._logger.info("user_logged_in", user_profile_id=str(profile.id))
            return Success(value=token)

        except Exception as e:
            self._logger.error("login_user_failed", error=e)
            return Failure(error=[InternalError()])
