"""Bcrypt password hashing service (adapter).

This service implements the PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Injected via dependency container

Security:
    - Bcrypt with configurable cost factor (12 in production)
    - Random salt per hash
    - Constant-time verification
"""

import bcrypt

# bcrypt only uses the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("Str0ng!Pass")
        is_valid = password_service.verify_password("Str0ng!Pass", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (4-31). Each +1 doubles the
                hashing time; tests use the minimum.

        Raises:
            ValueError: If cost_factor is outside bcrypt's range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)
        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...), 60 characters.

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> service.hash_password("Str0ng!Pass") != service.hash_password("Str0ng!Pass")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise (including an
            invalid hash format).
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            return False
