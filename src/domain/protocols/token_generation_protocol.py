"""Token generation protocol for domain layer.

This protocol defines the interface for JWT access token generation and
validation. Infrastructure layer provides the concrete implementation
(JWTService).

Token Strategy:
    - Access tokens only (no refresh tokens)
    - Stateless validation (no database lookup)
    - A single role claim drives authorization
"""

from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Usage:
        token = token_service.generate_access_token(
            email=profile.email,
            full_name=profile.full_name,
            user_profile_id=profile.id,
            role="User",
        )

        match token_service.validate_access_token(token):
            case Success(value=payload):
                email = payload["email"]
            case Failure(error=error):
                # Invalid or expired token
                ...
    """

    def generate_access_token(
        self,
        *,
        email: str,
        full_name: str,
        user_profile_id: UUID,
        role: str,
    ) -> str:
        """Generate JWT access token.

        Args:
            email: User's email (also the 'sub' claim).
            full_name: Display name of the profile.
            user_profile_id: Profile identifier.
            role: Role name ("Admin" or "User").

        Returns:
            Signed JWT string (header.payload.signature).
        """
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        Args:
            token: JWT access token string to validate.

        Returns:
            Result with payload dict if valid, or an error string if the token
            is expired, malformed, or signed for another issuer/audience.
        """
        ...
