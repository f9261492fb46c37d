"""Result types for railway-oriented programming.

Handlers return the tagged union ``Result[T, E]`` so callers cannot read a
payload out of a failed operation. ``OperationResult`` is the accumulating
envelope sent over the wire: it collects every error added to it and flips
``is_error`` the first time one is added.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    result = divide(10, 2)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from src.core.enums import ErrorKind

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationError:
    """Single error entry carried by an OperationResult.

    Attributes:
        kind: Error category (decides the HTTP status).
        message: Human-readable message.
    """

    kind: ErrorKind
    message: str


@dataclass(slots=True, kw_only=True)
class OperationResult(Generic[T]):
    """Accumulating success/error envelope.

    Errors are append-only. Once an error is added ``is_error`` stays True
    and ``data`` must be treated as undefined.

    Example:
        >>> result: OperationResult[str] = OperationResult()
        >>> result.add_error(ErrorKind.BAD_REQUEST, "Price cannot be empty")
        >>> result.add_error(ErrorKind.BAD_REQUEST, "Description cannot be empty")
        >>> result.is_error
        True
        >>> len(result.errors)
        2
    """

    data: T | None = None
    errors: list[OperationError] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        """True as soon as any error has been added."""
        return bool(self.errors)

    def add_error(self, kind: ErrorKind, message: str) -> None:
        """Append an error to the result.

        Args:
            kind: Error category.
            message: Human-readable message.
        """
        self.errors.append(OperationError(kind=kind, message=message))

    @classmethod
    def from_result(cls, result: "Result[T, list]") -> "OperationResult[T]":
        """Build an envelope from a handler Result.

        Args:
            result: Success with payload, or Failure with a list of DomainError.

        Returns:
            OperationResult carrying the payload or every error.
        """
        envelope: OperationResult[T] = cls()
        match result:
            case Success(value=value):
                envelope.data = value
            case Failure(error=errors):
                for error in errors:
                    envelope.add_error(error.kind, error.message)
        return envelope
