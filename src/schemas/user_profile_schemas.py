"""User profile request and response schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from src.application.dtos import UserProfileResult
from src.schemas.common_schemas import CamelModel, OperationResultResponse


class UpdateUserProfileRequest(CamelModel):
    """Editable profile fields (email cannot change).

    Attributes:
        full_name: New display name.
        phone_number: New phone number.
        date_of_birth: New date of birth.
    """

    full_name: str = Field(..., description="Display name")
    phone_number: str = Field(..., description="Phone number")
    date_of_birth: date | None = Field(None, description="Date of birth")


class UserProfileResponse(CamelModel):
    """Single profile response."""

    id: UUID = Field(..., description="Profile identifier")
    full_name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    phone_number: str = Field(..., description="Phone number")
    date_of_birth: date | None = Field(None, description="Date of birth")
    created_by: str = Field(..., description="Author of the record")
    created_date: datetime | None = Field(None, description="Creation timestamp")
    updated_by: str = Field(..., description="Author of the last update")
    updated_date: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: UserProfileResult) -> "UserProfileResponse":
        """Convert a UserProfileResult DTO to the response schema."""
        return cls(
            id=dto.id,
            full_name=dto.full_name,
            email=dto.email,
            phone_number=dto.phone_number,
            date_of_birth=dto.date_of_birth,
            created_by=dto.created_by,
            created_date=dto.created_date,
            updated_by=dto.updated_by,
            updated_date=dto.updated_date,
        )


UserProfileEnvelope = OperationResultResponse[UserProfileResponse]
UserProfileListEnvelope = OperationResultResponse[list[UserProfileResponse]]
