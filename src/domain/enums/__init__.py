"""Domain enums package."""

from src.domain.enums.user_role import UserRole

__all__ = ["UserRole"]
