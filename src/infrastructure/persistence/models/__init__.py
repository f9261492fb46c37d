"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and are not imported by the
domain layer.

Models Organization:
    - identity_user.py: Credential store (email, password hash, role)
    - user_profile.py: User profiles
    - product.py: Catalog products

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.identity_user import IdentityUserModel
from src.infrastructure.persistence.models.product import ProductModel
from src.infrastructure.persistence.models.user_profile import UserProfileModel

__all__ = [
    "IdentityUserModel",
    "ProductModel",
    "UserProfileModel",
]
