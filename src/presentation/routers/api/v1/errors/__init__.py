"""Error responses and exception handlers.

Exports:
    ErrorResponseBuilder: Build the standard error body from handler errors
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
