"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*, *_EMPTY)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_REGISTERED)
- Authentication errors (INVALID_CREDENTIALS, EMAIL_NOT_REGISTERED)
- Authorization errors (PERMISSION_*)
- Unexpected failures (INTERNAL_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_WEAK = "password_too_weak"
    VALIDATION_FAILED = "validation_failed"
    FILE_EMPTY = "file_empty"
    FILE_UNREADABLE = "file_unreadable"

    # Resource errors
    USER_PROFILE_NOT_FOUND = "user_profile_not_found"
    IDENTITY_NOT_FOUND = "identity_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"
    PRODUCT_IDS_EMPTY = "product_ids_empty"

    # Conflict errors
    EMAIL_ALREADY_REGISTERED = "email_already_registered"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_NOT_REGISTERED = "email_not_registered"

    # Unexpected failures
    INTERNAL_ERROR = "internal_error"
    CACHE_UNAVAILABLE = "cache_unavailable"
