"""Common error classes used across all domains and layers.

Error Types:
- ValidationError: Input validation failures (400)
- ConflictError: Resource conflicts such as duplicate email (400)
- AuthenticationError: Credential check failures (400)
- NotFoundError: Resource not found (404)
- InternalError: Unexpected failure, generic message only (500)

Usage:
    from src.core.errors import ValidationError, NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=[ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Email is in wrong format",
        field="email",
    )])
"""

from dataclasses import dataclass
from typing import ClassVar

from src.core.enums import ErrorCode, ErrorKind
from src.core.errors.domain_error import DomainError

# Returned to clients in place of exception text
GENERIC_ERROR_MESSAGE = "An error occurred and try again"


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.BAD_REQUEST

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (UserProfile, Product, etc.).
        resource_id: ID (or email) of the resource that was not found.
        details: Additional context.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate email).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict.
        details: Additional context.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.BAD_REQUEST

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Credential check failure (wrong email or password).

    Surfaces as 400; missing/invalid bearer tokens are rejected by the
    HTTP layer before any handler runs.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.BAD_REQUEST


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalError(DomainError):
    """Unexpected failure. Message is always generic."""

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL_SERVER_ERROR

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    message: str = GENERIC_ERROR_MESSAGE
