"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers validate and execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register a new account (identity + profile).

    Attributes:
        full_name: Display name.
        email: Email address (login name and profile link).
        phone_number: Phone number.
        date_of_birth: Date of birth.
        password: Plaintext password (checked against the password policy,
            then hashed).

    Example:
        >>> command = RegisterUser(
        ...     full_name="Jane Doe",
        ...     email="jane@example.com",
        ...     phone_number="0123456789",
        ...     date_of_birth=date(1990, 1, 1),
        ...     password="Str0ng!Pass",
        ... )
        >>> result = await handler.handle(command)
    """

    full_name: str
    email: str
    phone_number: str
    date_of_birth: date | None
    password: str


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange credentials for an access token.

    Attributes:
        email: Email address.
        password: Plaintext password.
    """

    email: str
    password: str
