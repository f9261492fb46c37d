"""JWT authentication and role dependencies.

FastAPI dependencies for extracting and validating bearer tokens. The route
generator attaches them from each route's AuthPolicy; endpoints that need
the caller's identity also declare ``current_user: AuthenticatedUser``
(FastAPI resolves the dependency once per request).

Usage:
    async def get_information_of_user_profile(
        current_user: AuthenticatedUser,
        ...
    ): ...

    # Role-protected (attached by the generator)
    dependencies=[Depends(require_role("Admin"))]
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.constants import (
    CLAIM_EMAIL,
    CLAIM_FULL_NAME,
    CLAIM_ROLE,
    CLAIM_USER_PROFILE_ID,
)
from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.protocols import TokenGenerationProtocol

# Missing tokens are reported by get_current_user with the standard body
bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHORIZED_MESSAGE = "Access token is missing or invalid"
FORBIDDEN_MESSAGE = "You do not have permission to access this resource"


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller extracted from the access token.

    Attributes:
        email: Caller's email ('email' claim).
        full_name: Caller's display name ('full_name' claim).
        user_profile_id: Caller's profile ('user_profile_id' claim).
        role: Caller's single role ('role' claim).
    """

    email: str
    full_name: str
    user_profile_id: UUID
    role: str


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_MESSAGE,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get the current caller from the bearer token.

    Args:
        credentials: Bearer token from the Authorization header (None if absent).
        token_service: JWT token service (injected).

    Returns:
        CurrentUser built from the token claims.

    Raises:
        HTTPException 401: If the token is missing, invalid, expired, or
            lacks a required claim.
    """
    if credentials is None:
        raise _unauthorized()

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                return CurrentUser(
                    email=str(payload[CLAIM_EMAIL]),
                    full_name=str(payload[CLAIM_FULL_NAME]),
                    user_profile_id=UUID(str(payload[CLAIM_USER_PROFILE_ID])),
                    role=str(payload[CLAIM_ROLE]),
                )
            except (KeyError, ValueError) as e:
                raise _unauthorized() from e
        case Failure():
            raise _unauthorized()


# Type alias for cleaner endpoint signatures
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]


def require_role(role: str) -> Callable[..., Awaitable[CurrentUser]]:
    """Create a dependency that requires the token's role to equal ``role``.

    Args:
        role: Required role (e.g., "Admin").

    Returns:
        Dependency that returns the caller or raises 403.
    """

    async def role_checker(current_user: AuthenticatedUser) -> CurrentUser:
        if current_user.role != role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=FORBIDDEN_MESSAGE,
            )
        return current_user

    return role_checker
