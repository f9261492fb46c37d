"""IdentityUserRepository protocol for credential persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from src.domain.entities.identity_user import IdentityUser


class IdentityUserRepository(Protocol):
    """Identity (credential) repository protocol (port).

    Identities are looked up by normalized email only; the profile link is
    that same email.
    """

    async def find_by_email(self, email: str) -> IdentityUser | None:
        """Find identity by email (case-insensitive).

        Args:
            email: Email address in any case or padding.

        Returns:
            IdentityUser if found, None otherwise.
        """
        ...

    async def find_all_emails(self) -> set[str]:
        """Return every normalized identity email."""
        ...

    async def save(self, identity_user: IdentityUser) -> None:
        """Stage a new identity for insertion."""
        ...

    async def delete(self, identity_user: IdentityUser) -> None:
        """Stage removal of an identity."""
        ...
