"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for ALL application errors.
Domain errors represent business rule violations and validation failures.
They flow through the system as data (Result types), not exceptions.

Architecture:
- Base class for all error types (core, domain, infrastructure)
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Each subclass declares its ErrorKind, which decides the HTTP status

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorKind

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        kind: ClassVar[ErrorKind] = ErrorKind.BAD_REQUEST
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from src.core.enums import ErrorCode, ErrorKind


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
        kind: Error category (class-level, not a field).
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL_SERVER_ERROR

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
