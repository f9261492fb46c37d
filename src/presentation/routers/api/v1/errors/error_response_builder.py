"""Error response builder.

Converts handler failures and HTTP-layer rejections into the standard error
body ``{statusCode, statusPhrase, errors, timeStamp}``.

When a failure carries errors of mixed kinds, one status is chosen by
precedence: BadRequest, then NotFound, then the remaining kinds in
STATUS_PRECEDENCE order, otherwise InternalServerError.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from collections.abc import Sequence
from datetime import UTC, datetime
from http import HTTPStatus

from fastapi.responses import JSONResponse

from src.core.enums import ErrorKind
from src.core.errors import DomainError
from src.core.result import Failure, OperationResult
from src.schemas.common_schemas import ErrorResponse

STATUS_PRECEDENCE: tuple[ErrorKind, ...] = (
    ErrorKind.BAD_REQUEST,
    ErrorKind.NOT_FOUND,
    ErrorKind.UNAUTHORIZED,
    ErrorKind.FORBIDDEN,
)


def _status_phrase(status_code: int) -> str:
    try:
        return ErrorKind(status_code).phrase
    except ValueError:
        return HTTPStatus(status_code).phrase


class ErrorResponseBuilder:
    """Build standard error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_errors([
        ...     NotFoundError(
        ...         code=ErrorCode.PRODUCT_NOT_FOUND,
        ...         message="No find Product with ID 42",
        ...         resource_type="Product",
        ...         resource_id="42",
        ...     )
        ... ])
        >>> response.status_code
        404
    """

    @staticmethod
    def from_errors(errors: Sequence[DomainError]) -> JSONResponse:
        """Convert handler errors to an error response.

        Args:
            errors: Every error from a Failure result.

        Returns:
            JSONResponse with the dominant status and every message.
        """
        envelope: OperationResult[None] = OperationResult.from_result(
            Failure(error=list(errors))
        )
        kind = ErrorResponseBuilder.dominant_kind(envelope)
        return ErrorResponseBuilder.from_status(
            kind.value, [error.message for error in envelope.errors]
        )

    @staticmethod
    def from_status(
        status_code: int,
        messages: Sequence[str],
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Build an error response for a status code.

        Args:
            status_code: HTTP status code.
            messages: Error messages.
            headers: Optional response headers (e.g., WWW-Authenticate).

        Returns:
            JSONResponse with the standard error body.
        """
        body = ErrorResponse(
            status_code=status_code,
            status_phrase=_status_phrase(status_code),
            errors=list(messages),
            time_stamp=datetime.now(UTC),
        )
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(mode="json", by_alias=True),
            headers=headers,
        )

    @staticmethod
    def dominant_kind(envelope: OperationResult) -> ErrorKind:
        """Pick the single status for an errored envelope.

        Example:
            >>> envelope = OperationResult()
            >>> envelope.add_error(ErrorKind.NOT_FOUND, "missing")
            >>> envelope.add_error(ErrorKind.BAD_REQUEST, "invalid")
            >>> ErrorResponseBuilder.dominant_kind(envelope)
            <ErrorKind.BAD_REQUEST: 400>
        """
        kinds = {error.kind for error in envelope.errors}
        for kind in STATUS_PRECEDENCE:
            if kind in kinds:
                return kind
        return ErrorKind.INTERNAL_SERVER_ERROR
