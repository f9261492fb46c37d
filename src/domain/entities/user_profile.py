"""UserProfile domain entity.

Identity-independent profile record. The profile is linked to its
credential record (IdentityUser) only by normalized email.
"""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.audited_entity import AuditedEntity


def normalize_email(email: str) -> str:
    """Return the join key used between profiles and identities."""
    return email.strip().lower()


@dataclass(kw_only=True)
class UserProfile(AuditedEntity):
    """User profile.

    Business Rules:
        - Email is immutable after creation
        - Only full name, phone number, and date of birth can change

    Attributes:
        id: Unique profile identifier.
        full_name: Display name (1-50 characters).
        email: Email address (unique, at most 255 characters).
        phone_number: Phone number (10-20 characters).
        date_of_birth: Date of birth.
    """

    id: UUID = field(default_factory=uuid7)
    full_name: str = ""
    email: str = ""
    phone_number: str = ""
    date_of_birth: date | None = None

    @classmethod
    def create_user_profile(
        cls,
        *,
        full_name: str,
        email: str,
        phone_number: str,
        date_of_birth: date | None,
        created_by: str = "",
    ) -> "UserProfile":
        """Create a new profile with audit fields set.

        Args:
            full_name: Display name.
            email: Email address (stored trimmed).
            phone_number: Phone number.
            date_of_birth: Date of birth.
            created_by: Author of the record (defaults to the email).

        Returns:
            New UserProfile (not yet validated or persisted).
        """
        profile = cls(
            full_name=full_name,
            email=email.strip(),
            phone_number=phone_number,
            date_of_birth=date_of_birth,
        )
        profile._mark_created(created_by or profile.email)
        return profile

    @property
    def normalized_email(self) -> str:
        """Trimmed, lowercased email."""
        return normalize_email(self.email)

    def update_user_profile(
        self,
        *,
        full_name: str,
        phone_number: str,
        date_of_birth: date | None,
        updated_by: str = "",
    ) -> None:
        """Update editable profile fields.

        Args:
            full_name: New display name.
            phone_number: New phone number.
            date_of_birth: New date of birth.
            updated_by: Author of the change (defaults to the profile email).
        """
        self.full_name = full_name
        self.phone_number = phone_number
        self.date_of_birth = date_of_birth
        self._mark_updated(updated_by or self.email)
