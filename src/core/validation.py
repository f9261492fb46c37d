"""Validation framework for input validation.

This module provides utility functions for common validation patterns.
All validation functions return Result types for consistent error handling,
so rule sets can run every rule and keep only the failures.

Usage:
    from src.core.validation import collect_errors, validate_not_empty

    errors = collect_errors(
        validate_not_empty(name, "name", "Product name cannot be empty"),
        validate_max_length(name, 50, "name", "Product name can contain at most 50 characters"),
    )
"""

import math
import re
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def _failure(
    field_name: str, message: str, code: ErrorCode = ErrorCode.VALIDATION_FAILED
) -> Failure[ValidationError]:
    return Failure(error=ValidationError(code=code, message=message, field=field_name))


def validate_not_empty(
    value: Any, field_name: str, message: str
) -> Result[Any, ValidationError]:
    """Validate that a value is not None and not blank.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.
        message: Message reported on failure.

    Returns:
        Success with value if not empty, Failure with ValidationError otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return _failure(field_name, message)
    return Success(value=value)


def validate_email(
    email: str | None, field_name: str = "email", message: str = "Email is in wrong format"
) -> Result[str | None, ValidationError]:
    """Validate email format.

    Empty values pass here; pair with validate_not_empty.

    Args:
        email: Email address to validate.
        field_name: Name of the field being validated.
        message: Message reported on failure.

    Returns:
        Success with email if valid, Failure with ValidationError otherwise.
    """
    if email and not EMAIL_PATTERN.match(email):
        return _failure(field_name, message, ErrorCode.INVALID_EMAIL)
    return Success(value=email)


def validate_min_length(
    value: str | None, min_length: int, field_name: str, message: str
) -> Result[str | None, ValidationError]:
    """Validate minimum string length.

    Args:
        value: String to validate (None is checked by validate_not_empty).
        min_length: Minimum required length.
        field_name: Name of the field being validated.
        message: Message reported on failure.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if value is not None and len(value) < min_length:
        return _failure(field_name, message)
    return Success(value=value)


def validate_max_length(
    value: str | None, max_length: int, field_name: str, message: str
) -> Result[str | None, ValidationError]:
    """Validate maximum string length.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated.
        message: Message reported on failure.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if value is not None and len(value) > max_length:
        return _failure(field_name, message)
    return Success(value=value)


def validate_positive(
    value: float | None, field_name: str, message: str
) -> Result[float | None, ValidationError]:
    """Validate that a number is finite and strictly greater than zero.

    Args:
        value: Number to validate (None is checked by validate_not_empty).
        field_name: Name of the field being validated.
        message: Message reported on failure.

    Returns:
        Success with value if positive, Failure with ValidationError otherwise.
    """
    if value is not None and not (math.isfinite(value) and value > 0):
        return _failure(field_name, message)
    return Success(value=value)


def collect_errors(*results: Result[Any, ValidationError]) -> list[ValidationError]:
    """Keep the errors of every failed rule, in order.

    Args:
        *results: Outcomes of individual rules.

    Returns:
        List of ValidationError (empty when every rule passed).
    """
    return [result.error for result in results if isinstance(result, Failure)]
