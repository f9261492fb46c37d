"""Authentication request and response schemas.

Field contents (empty strings, email format, password strength) are checked
by the command handlers so every violation is reported together; the schemas
only fix the request shape.
"""

from datetime import date

from pydantic import Field

from src.schemas.common_schemas import CamelModel, OperationResultResponse


class RegisterRequest(CamelModel):
    """Request schema for user registration.

    Attributes:
        full_name: Display name.
        email: Email address (login name).
        phone_number: Phone number.
        date_of_birth: Date of birth.
        password: Plaintext password.
    """

    full_name: str = Field(..., description="Display name", examples=["Jane Doe"])
    email: str = Field(..., description="Email address", examples=["jane@example.com"])
    phone_number: str = Field(..., description="Phone number", examples=["0123456789"])
    date_of_birth: date | None = Field(None, description="Date of birth")
    password: str = Field(..., description="Password", examples=["Secur3P@ss"])


class LoginRequest(CamelModel):
    """Request schema for login.

    Attributes:
        email: Registered email.
        password: Plaintext password.
    """

    email: str = Field(..., description="Registered email")
    password: str = Field(..., description="Password")


# Register returns a message; Login returns the access token
MessageResponse = OperationResultResponse[str]
TokenResponse = OperationResultResponse[str]
