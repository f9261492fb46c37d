"""Error kinds exposed to API consumers.

Every DomainError subclass declares one kind. The kind decides the HTTP
status of a failed response.
"""

from enum import Enum


class ErrorKind(Enum):
    """Error categories with their HTTP status codes."""

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500

    @property
    def phrase(self) -> str:
        """Human-readable status phrase."""
        return _PHRASES[self]

    @property
    def label(self) -> str:
        """Machine-readable kind name used in response envelopes."""
        return _LABELS[self]


_PHRASES: dict[ErrorKind, str] = {
    ErrorKind.BAD_REQUEST: "Bad request",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.FORBIDDEN: "Forbidden",
    ErrorKind.NOT_FOUND: "Not found",
    ErrorKind.INTERNAL_SERVER_ERROR: "Internal server error",
}

_LABELS: dict[ErrorKind, str] = {
    ErrorKind.BAD_REQUEST: "BadRequest",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.FORBIDDEN: "Forbidden",
    ErrorKind.NOT_FOUND: "NotFound",
    ErrorKind.INTERNAL_SERVER_ERROR: "InternalServerError",
}
