"""Admin identity seeder.

Seeds the first Admin identity and its profile from ``ADMIN_EMAIL`` and
``ADMIN_PASSWORD``. Skipped when either is unset. Idempotent via
ON CONFLICT DO NOTHING on normalized_email - safe to run on every migration.

Further admins are promoted by updating ``identity_users.role`` directly;
there is no role-management endpoint.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from src.core.config import settings
from src.domain.entities.user_profile import normalize_email
from src.domain.enums import UserRole
from src.infrastructure.security import BcryptPasswordService

logger = structlog.get_logger(__name__)

ADMIN_FULL_NAME = "Administrator"
ADMIN_PHONE_NUMBER = "0000000000"


async def seed_admin_identity(session: AsyncSession) -> None:
    """Seed the configured Admin identity and profile.

    Args:
        session: Async database session.
    """
    if not settings.admin_email or not settings.admin_password:
        logger.info("admin_seed_skipped", reason="ADMIN_EMAIL/ADMIN_PASSWORD not set")
        return

    email = settings.admin_email.strip()
    normalized = normalize_email(email)
    password_hash = BcryptPasswordService(cost_factor=settings.bcrypt_rounds).hash_password(
        settings.admin_password
    )

    identity = await session.execute(
        text("""
            INSERT INTO identity_users (id, email, normalized_email, password_hash, role)
            VALUES (:id, :email, :normalized_email, :password_hash, :role)
            ON CONFLICT (normalized_email) DO NOTHING
        """),
        {
            "id": uuid7(),
            "email": email,
            "normalized_email": normalized,
            "password_hash": password_hash,
            "role": UserRole.ADMIN.value,
        },
    )
    profile = await session.execute(
        text("""
            INSERT INTO user_profiles (
                id, full_name, email, normalized_email, phone_number,
                created_by, created_date, updated_by, updated_date
            )
            VALUES (
                :id, :full_name, :email, :normalized_email, :phone_number,
                :created_by, now(), '', now()
            )
            ON CONFLICT (normalized_email) DO NOTHING
        """),
        {
            "id": uuid7(),
            "full_name": ADMIN_FULL_NAME,
            "email": email,
            "normalized_email": normalized,
            "phone_number": ADMIN_PHONE_NUMBER,
            "created_by": email,
        },
    )

    logger.info(
        "admin_seed_completed",
        email=normalized,
        identity_created=identity.rowcount == 1,
        profile_created=profile.rowcount == 1,
    )
