"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by query handlers. They transfer data
from the application layer to the presentation layer without exposing
domain entities.

Usage:
    from src.application.dtos import ProductResult, UserProfileResult
"""

from src.application.dtos.product_dtos import ProductResult
from src.application.dtos.user_profile_dtos import (
    IdentityConsistencyReport,
    UserProfileResult,
)

__all__ = [
    "IdentityConsistencyReport",
    "ProductResult",
    "UserProfileResult",
]
