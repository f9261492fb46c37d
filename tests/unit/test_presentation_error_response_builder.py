"""Unit tests for ErrorResponseBuilder.

Covers:
- Standard body shape (camelCase keys, phrase, every message)
- Status precedence when a failure mixes error kinds
- Headers passed through (WWW-Authenticate)
"""

import json

import pytest

from src.core.enums import ErrorCode, ErrorKind
from src.core.errors import (
    AuthenticationError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from src.core.result import OperationResult
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


def _validation(message: str = "Price cannot be empty") -> ValidationError:
    return ValidationError(code=ErrorCode.VALIDATION_FAILED, message=message, field="price")


def _not_found() -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.PRODUCT_NOT_FOUND,
        message="No find Product with ID 42",
        resource_type="Product",
        resource_id="42",
    )


@pytest.mark.unit
class TestFromErrors:
    """Test conversion of handler failures."""

    def test_body_shape(self):
        response = ErrorResponseBuilder.from_errors([_validation(), _validation("Name")])

        body = json.loads(response.body)
        assert response.status_code == 400
        assert body["statusCode"] == 400
        assert body["statusPhrase"] == "Bad request"
        assert body["errors"] == ["Price cannot be empty", "Name"]
        assert "timeStamp" in body

    @pytest.mark.parametrize(
        ("errors", "status"),
        [
            ([_not_found(), _validation()], 400),
            ([InternalError(), _not_found()], 404),
            ([InternalError()], 500),
        ],
    )
    def test_status_precedence(self, errors, status):
        assert ErrorResponseBuilder.from_errors(errors).status_code == status

    def test_credential_errors_are_bad_request(self):
        error = AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS, message="Email or password is incorrect"
        )

        response = ErrorResponseBuilder.from_errors([error])

        assert response.status_code == 400

    def test_internal_error_has_generic_message(self):
        response = ErrorResponseBuilder.from_errors([InternalError()])

        body = json.loads(response.body)
        assert body["statusPhrase"] == "Internal server error"
        assert body["errors"] == ["An error occurred and try again"]


@pytest.mark.unit
class TestFromStatus:
    """Test responses built from a bare status code."""

    def test_unauthorized_keeps_headers(self):
        response = ErrorResponseBuilder.from_status(
            401,
            ["Access token is missing or invalid"],
            headers={"WWW-Authenticate": "Bearer"},
        )

        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert json.loads(response.body)["statusPhrase"] == "Unauthorized"

    def test_status_outside_error_kinds_uses_http_phrase(self):
        response = ErrorResponseBuilder.from_status(405, ["Method Not Allowed"])

        assert json.loads(response.body)["statusPhrase"] == "Method Not Allowed"


@pytest.mark.unit
def test_dominant_kind_of_envelope():
    envelope: OperationResult[None] = OperationResult()
    envelope.add_error(ErrorKind.FORBIDDEN, "no")
    envelope.add_error(ErrorKind.UNAUTHORIZED, "who")

    assert ErrorResponseBuilder.dominant_kind(envelope) == ErrorKind.UNAUTHORIZED


@pytest.mark.unit
def test_forbidden_outranks_internal_error():
    envelope: OperationResult[None] = OperationResult()
    envelope.add_error(ErrorKind.INTERNAL_SERVER_ERROR, "boom")
    envelope.add_error(ErrorKind.FORBIDDEN, "no")

    assert ErrorResponseBuilder.dominant_kind(envelope) == ErrorKind.FORBIDDEN
