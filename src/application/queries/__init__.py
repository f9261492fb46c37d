"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetAllProducts, GetUserProfileById).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.product_queries import GetAllProducts, GetProductById
from src.application.queries.user_profile_queries import (
    CheckIdentityConsistency,
    GetAllUserProfiles,
    GetUserProfileById,
)

__all__ = [
    "CheckIdentityConsistency",
    "GetAllProducts",
    "GetAllUserProfiles",
    "GetProductById",
    "GetUserProfileById",
]
