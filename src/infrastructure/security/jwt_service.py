"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Issuer and audience checked on validation
    - Unique JWT ID (jti) per token
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.constants import (
    CLAIM_EMAIL,
    CLAIM_FULL_NAME,
    CLAIM_ROLE,
    CLAIM_USER_PROFILE_ID,
)
from src.core.result import Failure, Result, Success

INVALID_TOKEN = "Invalid or expired access token"


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            email="jane@example.com",
            full_name="Jane Doe",
            user_profile_id=profile_id,
            role="User",
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        expiration_minutes: int = 120,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing (at least 32 bytes).
            issuer: Value of the 'iss' claim.
            audience: Value of the 'aud' claim.
            expiration_minutes: Token lifetime in minutes (default: 120).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

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
            email: User's email (subject and email claim).
            full_name: Profile display name.
            user_profile_id: Profile identifier.
            role: Role name.

        Returns:
            JWT access token string.

        Example:
            >>> service = JWTService("x" * 32, issuer="catalog-api", audience="clients")
            >>> token = service.generate_access_token(
            ...     email="jane@example.com",
            ...     full_name="Jane Doe",
            ...     user_profile_id=uuid7(),
            ...     role="User",
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": email,
            "jti": str(uuid7()),
            CLAIM_EMAIL: email,
            CLAIM_FULL_NAME: full_name,
            CLAIM_USER_PROFILE_ID: str(user_profile_id),
            CLAIM_ROLE: role,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        PyJWT checks the signature, expiration, issuer, and audience.

        Args:
            token: JWT access token string to validate.

        Returns:
            Result with payload dict if valid, or an error string if invalid.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                audience=self._audience,
            )
        except InvalidTokenError:
            return Failure(error=INVALID_TOKEN)
        return Success(value=payload)
