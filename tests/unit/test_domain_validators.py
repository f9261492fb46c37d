"""Unit tests for domain validation rule sets.

Tests cover:
- Product name length boundaries (1 and 50 pass; 0 and 51 fail)
- Price emptiness and positivity
- Every violation reported together
- User profile fields (email format, phone length, date of birth)
- Login shape
- Password policy (each unmet rule reported separately)
"""

from datetime import date

import pytest

from src.domain.entities.product import Product
from src.domain.entities.user_profile import UserProfile
from src.domain.validators import (
    validate_login,
    validate_password_policy,
    validate_product,
    validate_user_profile,
    validate_user_profile_update,
)


def make_product(
    name: str = "iphone 15 pro max",
    price: float = 30000000,
    description: str = "this is a iphone",
) -> Product:
    """Build a product through its factory."""
    return Product.create_product(
        name=name, price=price, description=description, created_by="Jane Admin"
    )


def make_profile(
    full_name: str = "Jane Doe",
    email: str = "jane@example.com",
    phone_number: str = "0123456789",
    date_of_birth: date | None = date(1990, 1, 1),
) -> UserProfile:
    """Build a profile through its factory."""
    return UserProfile.create_user_profile(
        full_name=full_name,
        email=email,
        phone_number=phone_number,
        date_of_birth=date_of_birth,
    )


def messages(errors) -> list[str]:
    return [error.message for error in errors]


@pytest.mark.unit
class TestValidateProduct:
    """Test product rule set."""

    def test_valid_product_has_no_errors(self):
        assert validate_product(make_product()) == []

    @pytest.mark.parametrize("length", [1, 50])
    def test_name_length_boundaries_pass(self, length):
        """Names of exactly 1 and 50 characters are accepted."""
        assert validate_product(make_product(name="a" * length)) == []

    def test_name_of_51_characters_fails(self):
        errors = validate_product(make_product(name="a" * 51))

        assert messages(errors) == ["Product name can contain at most 50 characters"]
        assert errors[0].field == "name"

    def test_empty_name_fails(self):
        errors = validate_product(make_product(name=""))

        assert "Product name cannot be empty" in messages(errors)
        assert all(error.field == "name" for error in errors)

    def test_zero_price_is_reported_as_empty(self):
        assert messages(validate_product(make_product(price=0))) == [
            "Price cannot be empty"
        ]

    def test_negative_price_fails(self):
        assert messages(validate_product(make_product(price=-5))) == [
            "Price must be greater than 0"
        ]

    @pytest.mark.parametrize("price", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_price_fails(self, price):
        errors = validate_product(make_product(price=price))

        assert messages(errors) == ["Price must be greater than 0"]
        assert errors[0].field == "price"

    def test_every_violation_is_reported(self):
        """Price and description errors are reported together."""
        # Act
        errors = validate_product(make_product(price=0, description=""))

        # Assert
        assert messages(errors) == ["Price cannot be empty", "Description cannot be empty"]


@pytest.mark.unit
class TestValidateUserProfile:
    """Test registration profile rule set."""

    def test_valid_profile_has_no_errors(self):
        assert validate_user_profile(make_profile()) == []

    def test_wrong_email_format(self):
        assert messages(validate_user_profile(make_profile(email="not-an-email"))) == [
            "Email is in wrong format"
        ]

    def test_email_longer_than_255_characters(self):
        email = "a" * 250 + "@x.com"

        assert "Email can contain at most 255 characters" in messages(
            validate_user_profile(make_profile(email=email))
        )

    @pytest.mark.parametrize(
        ("phone_number", "expected"),
        [
            ("012345678", "Phone number must be at least 10 characters long"),
            ("0" * 21, "Phone number can contain at most 20 characters"),
        ],
    )
    def test_phone_number_length(self, phone_number, expected):
        assert messages(
            validate_user_profile(make_profile(phone_number=phone_number))
        ) == [expected]

    def test_missing_date_of_birth(self):
        assert messages(validate_user_profile(make_profile(date_of_birth=None))) == [
            "Date of birth cannot be empty"
        ]

    def test_all_field_errors_reported(self):
        """Several invalid fields produce one error each (at least)."""
        errors = validate_user_profile(
            make_profile(email="bad", phone_number="1", date_of_birth=None)
        )

        assert {error.field for error in errors} == {
            "email",
            "phone_number",
            "date_of_birth",
        }


@pytest.mark.unit
class TestValidateUserProfileUpdate:
    """Test editable profile field rule set."""

    def test_valid_update(self):
        assert validate_user_profile_update("Jane", "0123456789", date(1990, 1, 1)) == []

    def test_blank_full_name(self):
        assert "Full name cannot be empty" in messages(
            validate_user_profile_update("  ", "0123456789", date(1990, 1, 1))
        )


@pytest.mark.unit
class TestValidateLogin:
    """Test login shape rule set."""

    def test_valid_login(self):
        assert validate_login("jane@example.com", "whatever") == []

    def test_empty_fields(self):
        assert messages(validate_login("", "")) == [
            "Email cannot be empty",
            "Password cannot be empty",
        ]

    def test_wrong_email_format(self):
        assert messages(validate_login("jane", "pw")) == ["Email is in wrong format"]


@pytest.mark.unit
class TestValidatePasswordPolicy:
    """Test password strength policy."""

    def test_strong_password_passes(self):
        assert validate_password_policy("Str0ng!Pass") == []

    def test_each_unmet_rule_is_reported(self):
        """A short lowercase password misses four rules."""
        assert messages(validate_password_policy("abc")) == [
            "Passwords must be at least 8 characters",
            "Passwords must have at least one uppercase ('A'-'Z')",
            "Passwords must have at least one digit ('0'-'9')",
            "Passwords must have at least one non alphanumeric character",
        ]

    def test_missing_lowercase(self):
        assert messages(validate_password_policy("STR0NG!PASS")) == [
            "Passwords must have at least one lowercase ('a'-'z')"
        ]
