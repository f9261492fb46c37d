"""RegisterUser command handler.

Flow:
1. Build the profile from the command and validate it (all field errors)
2. Check the email is not already registered as an identity
3. Check the password policy (each unmet rule reported)
4. Create the identity with the ``User`` role
5. Create the profile
6. Commit and return the success message

On any unexpected exception the transaction is rolled back and a single
generic InternalError is returned; the exception is logged.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, validators)
- NO infrastructure imports (repositories are injected via protocols)
"""

from src.application.commands.auth_commands import RegisterUser
from src.application.messages import AuthMessages
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, InternalError
from src.core.result import Failure, Result, Success
from src.domain.entities.identity_user import IdentityUser
from src.domain.entities.user_profile import UserProfile
from src.domain.enums import UserRole
from src.domain.protocols import (
    IdentityUserRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
    UserProfileRepository,
)
from src.domain.validators import validate_password_policy, validate_user_profile


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_profile_repo: UserProfileRepository,
        identity_user_repo: IdentityUserRepository,
        password_service: PasswordHashingProtocol,
        unit_of_work: UnitOfWorkProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_profile_repo: Profile repository.
            identity_user_repo: Identity (credential) repository.
            password_service: Password hashing service.
            unit_of_work: Transaction boundary.
            logger: Structured logger.
        """
        self._user_profile_repo = user_profile_repo
        self._identity_user_repo = identity_user_repo
        self._password_service = password_service
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[str, list[DomainError]]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command.

        Returns:
            Success(message) on successful registration.
            Failure(errors) with every validation error, a single
            "already registered" error, or the unmet password rules.
        """
        profile = UserProfile.create_user_profile(
            full_name=cmd.full_name,
            email=cmd.email,
            phone_number=cmd.phone_number,
            date_of_birth=cmd.date_of_birth,
        )
        validation_errors = validate_user_profile(profile)
        if validation_errors:
            return Failure(error=list(validation_errors))

        try:
            await self._unit_of_work.begin()

            existing = await self._identity_user_repo.find_by_email(profile.email)
            if existing is not None:
                await self._unit_of_work.rollback()
                self._logger.info("registration_rejected_duplicate_email")
                return Failure(
                    error=[
                        ConflictError(
                            code=ErrorCode.EMAIL_ALREADY_REGISTERED,
                            message=AuthMessages.EMAIL_ALREADY_REGISTERED,
                            resource_type="IdentityUser",
                            conflicting_field="email",
                        )
                    ]
                )

            password_errors = validate_password_policy(cmd.password or "")
            if password_errors:
                await self._unit_of_work.rollback()
                return Failure(error=list(password_errors))

            identity = IdentityUser(
                email=profile.email,
                password_hash=self._password_service.hash_password(cmd.password),
                role=UserRole.USER,
            )
            await self._identity_user_repo.save(identity)
            await self._user_profile_repo.save(profile)
            await self._unit_of_work.commit()

            self._logger.info("user_registered", user_profile_id=str(profile.id))
            return Success(value=AuthMessages.REGISTER_SUCCESS)

        except Exception as e:
            await self._unit_of_work.rollback()
            self._logger.error("register_user_failed", error=e)
            return Failure(error=[InternalError()])
