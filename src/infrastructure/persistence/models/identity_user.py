"""IdentityUser database model (credential store).

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)

The profile link is ``normalized_email``; there is no foreign key to
``user_profiles``.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class IdentityUserModel(BaseMutableModel):
    """Credential record.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: Row timestamps (from BaseMutableModel)
        email: Email as registered
        normalized_email: Trimmed, lowercased email (unique, lookup key)
        password_hash: Bcrypt hash (NEVER plaintext)
        role: "Admin" or "User"
    """

    __tablename__ = "identity_users"

    email: Mapped[str] = mapped_column(String(255), nullable=False)

    normalized_email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Trimmed, lowercased email (join key to user_profiles)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="User",
        comment="Admin or User",
    )

    def __repr__(self) -> str:
        return f"<IdentityUser(id={self.id}, email={self.email!r}, role={self.role!r})>"
