"""IdentityUserRepository - SQLAlchemy implementation of IdentityUserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain IdentityUser entities and database IdentityUserModel.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.identity_user import IdentityUser
from src.domain.entities.user_profile import normalize_email
from src.domain.enums import UserRole
from src.infrastructure.persistence.models.identity_user import IdentityUserModel


class IdentityUserRepository:
    """SQLAlchemy implementation of IdentityUserRepository protocol.

    Attributes:
        session: SQLAlchemy async session shared with the unit of work.

    Example:
        >>> repo = IdentityUserRepository(session)
        >>> identity = await repo.find_by_email("Jane@Example.com ")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_email(self, email: str) -> IdentityUser | None:
        """Find login account by email (case-insensitive).

        Args:
            email: Email address in any case or padding.

        Returns:
            Domain IdentityUser entity if found, None otherwise.
        """
        stmt = select(IdentityUserModel).where(
            IdentityUserModel.normalized_email == normalize_email(email)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._to_domain(model)

    async def find_all_emails(self) -> set[str]:
        """Return the normalized email of every stored row."""
        result = await self.session.execute(select(IdentityUserModel.normalized_email))
        return set(result.scalars().all())

    async def save(self, identity_user: IdentityUser) -> None:
        """Stage a new login account for insert.

        Args:
            identity_user: IdentityUser with a hashed password.
        """
        self.session.add(self._to_model(identity_user))

    async def delete(self, identity_user: IdentityUser) -> None:
        """Delete a login account.

        Args:
            identity_user: Account to remove.
        """
        await self.session.execute(
            delete(IdentityUserModel).where(IdentityUserModel.id == identity_user.id)
        )

    def _to_domain(self, model: IdentityUserModel) -> IdentityUser:
        return IdentityUser(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            role=UserRole(model.role),
        )

    def _to_model(self, identity_user: IdentityUser) -> IdentityUserModel:
        return IdentityUserModel(
            id=identity_user.id,
            email=identity_user.email,
            normalized_email=identity_user.normalized_email,
            password_hash=identity_user.password_hash,
            role=identity_user.role.value,
        )
