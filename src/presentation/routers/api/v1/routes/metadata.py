"""Route metadata types for the API Route Registry.

Each API endpoint is declared once as a RouteMetadata entry. The generator
turns the declaration into a FastAPI route and composes the request filters
(auth, GUID format, response cache, cache invalidation) from its fields.

Core types:
    RouteMetadata: Complete route declaration
    HTTPMethod: HTTP method enum (GET, POST, PUT, DELETE)
    AuthPolicy: Who may call the route (PUBLIC, AUTHENTICATED, ROLE)
    ErrorSpec: Documented error response for OpenAPI
    CacheTarget: (controller, action) listing cleared after a mutation

Usage:
    from src.presentation.routers.api.v1.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.GET,
        path="/Products/GetAllProducts",
        handler=get_all_products,
        resource="Products",
        tags=["Products"],
        summary="List products",
        response_model=ProductListResponse,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
        cache_ttl=3600,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods used by API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# =============================================================================
# Auth Policy
# =============================================================================


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required (registration, login)
        AUTHENTICATED: Requires a valid bearer token
        ROLE: Requires a valid bearer token whose role claim matches
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ROLE = "role"


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Attributes:
        level: Authentication level.
        role: Required role for ROLE routes (e.g., "Admin").

    Examples:
        >>> AuthPolicy(level=AuthLevel.PUBLIC)
        >>> AuthPolicy(level=AuthLevel.AUTHENTICATED)
        >>> AuthPolicy(level=AuthLevel.ROLE, role="Admin")
    """

    level: AuthLevel
    role: str | None = None

    def __post_init__(self) -> None:
        if self.level == AuthLevel.ROLE and not self.role:
            raise ValueError("ROLE auth policy requires a role")


# =============================================================================
# Error / Cache specs
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorSpec:
    """Documented error response for OpenAPI.

    Attributes:
        status: HTTP status code (e.g., 400, 404, 500)
        description: Human-readable error description
        model: Optional Pydantic model for the response body
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheTarget:
    """Cached listing cleared after a successful mutation.

    Attributes:
        controller: Controller segment (e.g., "Products").
        action: Action segment (e.g., "GetAllProducts").
    """

    controller: str
    action: str


# =============================================================================
# Route Metadata
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteMetadata:
    """Complete declaration of one API route.

    Attributes:
        method: HTTP method.
        path: Path relative to the version prefix (e.g., "/Products/GetAllProducts").
        handler: Endpoint function.
        resource: Controller name the route belongs to.
        tags: OpenAPI tags.
        summary: One-line OpenAPI summary.
        description: Longer OpenAPI description.
        operation_id: OpenAPI operation ID.
        response_model: Success response schema.
        status_code: Success status code.
        errors: Documented error responses.
        auth_policy: Authentication policy.
        guid_params: Path parameters that must parse as UUIDs.
        cache_ttl: Seconds to cache successful GET responses (None = not cached).
        invalidates: Cached listings cleared after a successful result.
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]
    resource: str
    tags: Sequence[str]
    summary: str
    auth_policy: AuthPolicy
    description: str | None = None
    operation_id: str | None = None
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: Sequence[ErrorSpec] = field(default_factory=tuple)
    guid_params: Sequence[str] = field(default_factory=tuple)
    cache_ttl: int | None = None
    invalidates: Sequence[CacheTarget] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.cache_ttl is not None and self.method != HTTPMethod.GET:
            raise ValueError(f"Only GET routes can be cached: {self.path}")
        if self.cache_ttl is not None and self.invalidates:
            raise ValueError(f"Cached routes cannot invalidate: {self.path}")
