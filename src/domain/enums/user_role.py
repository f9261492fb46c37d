"""User roles carried in access tokens.

Each identity holds exactly one role. Role-protected routes compare the
token's role claim to a single required role (no hierarchy, no OR-matching).

Usage:
    from src.domain.enums import UserRole

    if current_user.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Roles assignable to an identity.

    String Enum:
        Inherits from str so values serialize directly into JWT claims.
    """

    ADMIN = "Admin"
    """Catalog administrator (bulk product operations, profile management)."""

    USER = "User"
    """Standard user (own profile, product CRUD)."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['Admin', 'User'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
