"""UserProfile database model."""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import AuditMixin, BaseMutableModel


class UserProfileModel(AuditMixin, BaseMutableModel):
    """User profile row.

    Fields:
        full_name: Display name (max 50)
        email: Email as registered
        normalized_email: Trimmed, lowercased email (unique)
        phone_number: Phone number (max 20)
        date_of_birth: Date of birth
        created_by / created_date / updated_by / updated_date: Audit (AuditMixin)
    """

    __tablename__ = "user_profiles"

    full_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    normalized_email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True
    )
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
