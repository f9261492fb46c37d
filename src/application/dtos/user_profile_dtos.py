"""User profile DTOs (Data Transfer Objects).

Result dataclasses returned by profile query handlers.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from src.domain.entities.user_profile import UserProfile


@dataclass(frozen=True, kw_only=True)
class UserProfileResult:
    """Profile as returned to the presentation layer.

    Attributes:
        id: Profile identifier.
        full_name: Display name.
        email: Email address.
        phone_number: Phone number.
        date_of_birth: Date of birth.
        created_by: Author of the record.
        created_date: Creation timestamp.
        updated_by: Author of the last update.
        updated_date: Last update timestamp.
    """

    id: UUID
    full_name: str
    email: str
    phone_number: str
    date_of_birth: date | None
    created_by: str
    created_date: datetime | None
    updated_by: str
    updated_date: datetime | None

    @classmethod
    def from_entity(cls, profile: UserProfile) -> "UserProfileResult":
        return cls(
            id=profile.id,
            full_name=profile.full_name,
            email=profile.email,
            phone_number=profile.phone_number,
            date_of_birth=profile.date_of_birth,
            created_by=profile.created_by,
            created_date=profile.created_date,
            updated_by=profile.updated_by,
            updated_date=profile.updated_date,
        )


@dataclass(frozen=True, kw_only=True)
class IdentityConsistencyReport:
    """Result of comparing identity emails with profile emails.

    Attributes:
        identities_without_profile: Normalized identity emails with no profile.
        profiles_without_identity: Normalized profile emails with no identity.
    """

    identities_without_profile: list[str] = field(default_factory=list)
    profiles_without_identity: list[str] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return not self.identities_without_profile and not self.profiles_without_identity
