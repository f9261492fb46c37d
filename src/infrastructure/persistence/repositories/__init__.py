"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.identity_user_repository import (
    IdentityUserRepository,
)
from src.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)
from src.infrastructure.persistence.repositories.user_profile_repository import (
    UserProfileRepository,
)

__all__ = [
    "IdentityUserRepository",
    "ProductRepository",
    "UserProfileRepository",
]
