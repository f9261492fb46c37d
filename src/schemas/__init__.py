"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only)
and serialize with camelCase aliases.

Usage:
    from src.schemas import ProductRequest, ProductListEnvelope
"""

from src.schemas.auth_schemas import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)
from src.schemas.common_schemas import (
    CamelModel,
    ErrorResponse,
    OperationErrorResponse,
    OperationResultResponse,
)
from src.schemas.product_schemas import (
    ProductEnvelope,
    ProductListEnvelope,
    ProductRequest,
    ProductResponse,
)
from src.schemas.user_profile_schemas import (
    UpdateUserProfileRequest,
    UserProfileEnvelope,
    UserProfileListEnvelope,
    UserProfileResponse,
)

__all__ = [
    # Common
    "CamelModel",
    "ErrorResponse",
    "OperationErrorResponse",
    "OperationResultResponse",
    # Auth
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "TokenResponse",
    # Products
    "ProductEnvelope",
    "ProductListEnvelope",
    "ProductRequest",
    "ProductResponse",
    # User profiles
    "UpdateUserProfileRequest",
    "UserProfileEnvelope",
    "UserProfileListEnvelope",
    "UserProfileResponse",
]
