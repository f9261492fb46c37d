"""IdentityUser domain entity.

Credential holder keyed by email. Owns the password hash and the single
role carried into access tokens.
"""

from dataclasses import dataclass, field
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.user_profile import normalize_email
from src.domain.enums import UserRole


@dataclass(kw_only=True)
class IdentityUser:
    """Credential record.

    Attributes:
        id: Unique identity identifier.
        email: Email as registered.
        password_hash: Bcrypt hash (never plaintext).
        role: Role embedded in access tokens.
    """

    id: UUID = field(default_factory=uuid7)
    email: str
    password_hash: str
    role: UserRole = UserRole.USER

    @property
    def normalized_email(self) -> str:
        """Trimmed, lowercased email (join key to UserProfile)."""
        return normalize_email(self.email)
