"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Settings and the dependency container

The core module has NO dependencies on other application layers.
"""

from src.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from src.core.enums import ErrorCode, ErrorKind
from src.core.result import Failure, OperationResult, Result, Success

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "ErrorKind",
    "Failure",
    "InternalError",
    "NotFoundError",
    "OperationResult",
    "Result",
    "Success",
    "ValidationError",
]
