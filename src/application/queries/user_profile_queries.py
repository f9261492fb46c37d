"""User profile queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetAllUserProfiles:
    """List every profile (admin view)."""


@dataclass(frozen=True, kw_only=True)
class GetUserProfileById:
    """Get a single profile.

    Attributes:
        user_profile_id: Profile to retrieve.
    """

    user_profile_id: UUID


@dataclass(frozen=True, kw_only=True)
class CheckIdentityConsistency:
    """Compare identity emails with profile emails.

    Reports identities without a profile and profiles without an identity.
    """
