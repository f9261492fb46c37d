"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Routing: Controller and action names shared by routes and cache patterns
- Cache: Defaults for response caching
- Token: Claim names carried by access tokens
- Limits: Field length limits enforced by validators and columns

Example:
    >>> from src.core.constants import PRODUCTS_CONTROLLER, GET_ALL_PRODUCTS
    >>> f"/api/v1/{PRODUCTS_CONTROLLER}/{GET_ALL_PRODUCTS}"
    '/api/v1/Products/GetAllProducts'
"""

# =============================================================================
# Routing
# =============================================================================

AUTHENTICATIONS_CONTROLLER: str = "Authentications"
PRODUCTS_CONTROLLER: str = "Products"
USER_PROFILES_CONTROLLER: str = "UserProfiles"

GET_ALL_PRODUCTS: str = "GetAllProducts"
GET_ALL_USER_PROFILES: str = "GetAllUserProfiles"
GET_USER_PROFILE_BY_ID: str = "GetUserProfileById"

# =============================================================================
# Cache
# =============================================================================

DEFAULT_CACHE_TTL_SECONDS: int = 3600
"""Time-to-live for cached GET responses (1 hour)."""

CACHE_QUERY_SEPARATOR: str = "|"
"""Separator placed before each key-value query pair in a cache key."""

# =============================================================================
# Token Claims
# =============================================================================

CLAIM_EMAIL: str = "email"
CLAIM_FULL_NAME: str = "full_name"
CLAIM_USER_PROFILE_ID: str = "user_profile_id"
CLAIM_ROLE: str = "role"

# =============================================================================
# Field Limits
# =============================================================================

NAME_MAX_LENGTH: int = 50
EMAIL_MAX_LENGTH: int = 255
PHONE_MIN_LENGTH: int = 10
PHONE_MAX_LENGTH: int = 20
PASSWORD_MIN_LENGTH: int = 8
