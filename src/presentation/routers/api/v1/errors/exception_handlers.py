"""Global exception handlers for FastAPI application.

Every exception that escapes an endpoint or dependency is returned with
the standard error body.

Handlers:
    http_exception_handler: HTTPException (auth, role, GUID filters, 404/405)
    validation_exception_handler: RequestValidationError → 400
    generic_exception_handler: Any other exception → 500 (logged)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.core.errors import GENERIC_ERROR_MESSAGE
from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to the standard error body.

    ``detail`` may be a single message or a list of messages (the GUID
    filter reports one message per malformed parameter).
    """
    # Type narrowing: FastAPI registers this handler only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    if isinstance(exc.detail, list):
        messages = [str(message) for message in exc.detail]
    else:
        messages = [str(exc.detail)]

    return ErrorResponseBuilder.from_status(
        exc.status_code, messages, headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert request body/query validation errors to a 400 response.

    Example:
        >>> # POST /api/v1/Products/CreateProduct with {"price": "abc"}
        >>> # {
        >>> #   "statusCode": 400,
        >>> #   "statusPhrase": "Bad request",
        >>> #   "errors": ["name: Field required", "price: Input should be a valid number, ..."],
        >>> #   "timeStamp": "..."
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    messages: list[str] = []
    for error in exc.errors():
        # ["body", "price"] -> "price"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "body"
        messages.append(f"{field_name}: {error.get('msg', 'Validation failed')}")

    return ErrorResponseBuilder.from_status(status.HTTP_400_BAD_REQUEST, messages)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and return a generic 500.

    Exception text never reaches the client.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    return ErrorResponseBuilder.from_status(
        status.HTTP_500_INTERNAL_SERVER_ERROR, [GENERIC_ERROR_MESSAGE]
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
