"""UserProfileRepository - SQLAlchemy implementation of UserProfileRepository protocol.

Adapter for hexagonal architecture.
Maps between domain UserProfile entities and database UserProfileModel.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user_profile import UserProfile, normalize_email
from src.infrastructure.persistence.models.user_profile import UserProfileModel


class UserProfileRepository:
    """SQLAlchemy implementation of UserProfileRepository protocol.

    Email lookups use the ``normalized_email`` column.

    Attributes:
        session: SQLAlchemy async session shared with the unit of work.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> list[UserProfile]:
        """Find every profile, oldest first.

        Returns:
            Domain UserProfile entities (empty list if none).
        """
        stmt = select(UserProfileModel).order_by(
            UserProfileModel.created_date, UserProfileModel.id
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, user_profile_id: UUID) -> UserProfile | None:
        """Find profile by ID.

        Args:
            user_profile_id: Profile identifier.

        Returns:
            Domain UserProfile entity if found, None otherwise.
        """
        model = await self.session.get(UserProfileModel, user_profile_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def find_by_email(self, email: str) -> UserProfile | None:
        """Find profile by email (case-insensitive).

        Args:
            email: Email address in any case or padding.

        Returns:
            Domain UserProfile entity if found, None otherwise.
        """
        stmt = select(UserProfileModel).where(
            UserProfileModel.normalized_email == normalize_email(email)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._to_domain(model)

    async def find_all_emails(self) -> set[str]:
        """Return the normalized email of every stored row."""
        result = await self.session.execute(select(UserProfileModel.normalized_email))
        return set(result.scalars().all())

    async def save(self, user_profile: UserProfile) -> None:
        """Stage a new profile for insert.

        Args:
            user_profile: Validated UserProfile entity.
        """
        self.session.add(self._to_model(user_profile))

    async def update(self, user_profile: UserProfile) -> None:
        """Copy editable and audit fields onto the stored row.

        Email is immutable and never written here.

        Raises:
            NoResultFound: If the profile doesn't exist.
        """
        stmt = select(UserProfileModel).where(UserProfileModel.id == user_profile.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.full_name = user_profile.full_name
        model.phone_number = user_profile.phone_number
        model.date_of_birth = user_profile.date_of_birth
        model.updated_by = user_profile.updated_by
        model.updated_date = user_profile.updated_date

    async def delete(self, user_profile: UserProfile) -> None:
        """Delete a profile row.

        Args:
            user_profile: Profile to remove.
        """
        await self.session.execute(
            delete(UserProfileModel).where(UserProfileModel.id == user_profile.id)
        )

    def _to_domain(self, model: UserProfileModel) -> UserProfile:
        return UserProfile(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            phone_number=model.phone_number,
            date_of_birth=model.date_of_birth,
            created_by=model.created_by,
            created_date=model.created_date,
            updated_by=model.updated_by,
            updated_date=model.updated_date,
        )

    def _to_model(self, user_profile: UserProfile) -> UserProfileModel:
        return UserProfileModel(
            id=user_profile.id,
            full_name=user_profile.full_name,
            email=user_profile.email,
            normalized_email=user_profile.normalized_email,
            phone_number=user_profile.phone_number,
            date_of_birth=user_profile.date_of_birth,
            created_by=user_profile.created_by,
            created_date=user_profile.created_date,
            updated_by=user_profile.updated_by,
            updated_date=user_profile.updated_date,
        )
