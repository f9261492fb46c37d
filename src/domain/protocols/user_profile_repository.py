"""UserProfileRepository protocol for profile persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user_profile import UserProfile


class UserProfileRepository(Protocol):
    """User profile repository protocol (port).

    Email lookups compare normalized emails (trimmed, lowercased).

    Example Implementation:
        >>> class UserProfileRepository:
        ...     async def find_by_email(self, email: str) -> UserProfile | None:
        ...         # Database logic here
        ...         pass
    """

    async def find_all(self) -> list[UserProfile]:
        """List every profile."""
        ...

    async def find_by_id(self, user_profile_id: UUID) -> UserProfile | None:
        """Find profile by ID.

        Args:
            user_profile_id: Profile's unique identifier.

        Returns:
            UserProfile if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> UserProfile | None:
        """Find profile by email (case-insensitive).

        Args:
            email: Email address in any case or padding.

        Returns:
            UserProfile if found, None otherwise.
        """
        ...

    async def find_all_emails(self) -> set[str]:
        """Return every normalized profile email."""
        ...

    async def save(self, user_profile: UserProfile) -> None:
        """Stage a new profile for insertion."""
        ...

    async def update(self, user_profile: UserProfile) -> None:
        """Stage changes to an existing profile."""
        ...

    async def delete(self, user_profile: UserProfile) -> None:
        """Stage removal of a profile."""
        ...
