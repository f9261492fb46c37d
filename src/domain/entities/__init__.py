"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.audited_entity import AuditedEntity
from src.domain.entities.identity_user import IdentityUser
from src.domain.entities.product import Product
from src.domain.entities.user_profile import UserProfile, normalize_email

__all__ = [
    "AuditedEntity",
    "IdentityUser",
    "Product",
    "UserProfile",
    "normalize_email",
]
