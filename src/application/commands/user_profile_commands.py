"""User profile commands (CQRS write operations)."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class UpdateUserProfile:
    """Update the editable fields of a profile.

    Used both by admins (profile ID from the path) and by users editing
    their own profile (profile ID from the token).

    Attributes:
        user_profile_id: Profile to update.
        full_name: New display name.
        phone_number: New phone number.
        date_of_birth: New date of birth.
        updated_by: Author recorded in the audit fields.
    """

    user_profile_id: UUID
    full_name: str
    phone_number: str
    date_of_birth: date | None
    updated_by: str = ""


@dataclass(frozen=True, kw_only=True)
class RemoveAccount:
    """Delete a profile and its identity.

    Attributes:
        user_profile_id: Profile to remove.
    """

    user_profile_id: UUID
