"""Validators package exports."""

from src.domain.validators.functions import (
    validate_login,
    validate_password_policy,
    validate_product,
    validate_user_profile,
    validate_user_profile_update,
)

__all__ = [
    "validate_login",
    "validate_password_policy",
    "validate_product",
    "validate_user_profile",
    "validate_user_profile_update",
]
