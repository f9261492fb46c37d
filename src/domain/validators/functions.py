"""Centralized validation rule sets (DRY principle).

Each rule set runs every rule for every field and returns the full list of
ValidationError (empty means valid). Rule sets never touch the store.

Rule sets:
    validate_product: Product entity (after create/update)
    validate_user_profile: UserProfile entity built during registration
    validate_user_profile_update: Editable profile fields
    validate_login: Login credentials shape
    validate_password_policy: Password strength for new identities
"""

from datetime import date

from src.core.constants import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PHONE_MAX_LENGTH,
    PHONE_MIN_LENGTH,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.validation import (
    collect_errors,
    validate_email,
    validate_max_length,
    validate_min_length,
    validate_not_empty,
    validate_positive,
)
from src.domain.entities.product import Product
from src.domain.entities.user_profile import UserProfile


def _validate_name(value: str | None, field_name: str, label: str) -> list[ValidationError]:
    return collect_errors(
        validate_not_empty(value, field_name, f"{label} cannot be empty"),
        validate_min_length(
            value, 1, field_name, f"{label} must be at least 1 character long"
        ),
        validate_max_length(
            value,
            NAME_MAX_LENGTH,
            field_name,
            f"{label} can contain at most {NAME_MAX_LENGTH} characters",
        ),
    )


def _validate_phone_and_birth(
    phone_number: str | None, date_of_birth: date | None
) -> list[ValidationError]:
    return collect_errors(
        validate_not_empty(phone_number, "phone_number", "Phone number cannot be empty"),
        validate_min_length(
            phone_number,
            PHONE_MIN_LENGTH,
            "phone_number",
            f"Phone number must be at least {PHONE_MIN_LENGTH} characters long",
        ),
        validate_max_length(
            phone_number,
            PHONE_MAX_LENGTH,
            "phone_number",
            f"Phone number can contain at most {PHONE_MAX_LENGTH} characters",
        ),
        validate_not_empty(date_of_birth, "date_of_birth", "Date of birth cannot be empty"),
    )


def validate_product(product: Product) -> list[ValidationError]:
    """Validate a product entity.

    Args:
        product: Product after create_product/update_product.

    Returns:
        Every rule violation (empty list if valid).

    Example:
        >>> validate_product(Product.create_product(
        ...     name="", price=0, description="", created_by="admin"
        ... ))[0].message
        'Product name cannot be empty'
    """
    # Zero counts as "not provided" for a numeric price
    price = product.price if product.price else None
    return [
        *_validate_name(product.name, "name", "Product name"),
        *collect_errors(
            validate_not_empty(price, "price", "Price cannot be empty"),
            validate_positive(price, "price", "Price must be greater than 0"),
            validate_not_empty(
                product.description, "description", "Description cannot be empty"
            ),
        ),
    ]


def validate_user_profile(profile: UserProfile) -> list[ValidationError]:
    """Validate a profile built during registration.

    Args:
        profile: New UserProfile.

    Returns:
        Every rule violation (empty list if valid).
    """
    return [
        *_validate_name(profile.full_name, "full_name", "Full name"),
        *collect_errors(
            validate_not_empty(profile.email, "email", "Email cannot be empty"),
            validate_max_length(
                profile.email,
                EMAIL_MAX_LENGTH,
                "email",
                f"Email can contain at most {EMAIL_MAX_LENGTH} characters",
            ),
            validate_email(profile.email),
        ),
        *_validate_phone_and_birth(profile.phone_number, profile.date_of_birth),
    ]


def validate_user_profile_update(
    full_name: str | None,
    phone_number: str | None,
    date_of_birth: date | None,
) -> list[ValidationError]:
    """Validate editable profile fields.

    Returns:
        Every rule violation (empty list if valid).
    """
    return [
        *_validate_name(full_name, "full_name", "Full name"),
        *_validate_phone_and_birth(phone_number, date_of_birth),
    ]


def validate_login(email: str | None, password: str | None) -> list[ValidationError]:
    """Validate login credentials shape (not their correctness).

    Returns:
        Every rule violation (empty list if valid).
    """
    return collect_errors(
        validate_not_empty(email, "email", "Email cannot be empty"),
        validate_email(email),
        validate_not_empty(password, "password", "Password cannot be empty"),
    )


def validate_password_policy(password: str) -> list[ValidationError]:
    """Check password strength for a new identity.

    Policy: at least 8 characters with an uppercase letter, a lowercase
    letter, a digit, and a non-alphanumeric character. Each unmet rule is
    reported separately.

    Args:
        password: Plaintext password.

    Returns:
        Every unmet rule (empty list if strong enough).

    Example:
        >>> [e.message for e in validate_password_policy("abc")][0]
        'Passwords must be at least 8 characters'
    """
    checks = [
        (
            len(password) >= PASSWORD_MIN_LENGTH,
            f"Passwords must be at least {PASSWORD_MIN_LENGTH} characters",
        ),
        (
            any(c.isupper() for c in password),
            "Passwords must have at least one uppercase ('A'-'Z')",
        ),
        (
            any(c.islower() for c in password),
            "Passwords must have at least one lowercase ('a'-'z')",
        ),
        (
            any(c.isdigit() for c in password),
            "Passwords must have at least one digit ('0'-'9')",
        ),
        (
            any(not c.isalnum() for c in password),
            "Passwords must have at least one non alphanumeric character",
        ),
    ]
    return [
        ValidationError(
            code=ErrorCode.PASSWORD_TOO_WEAK, message=message, field="password"
        )
        for passed, message in checks
        if not passed
    ]
