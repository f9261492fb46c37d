"""API Route Registry package.

The registry is the single source of truth for all routes; the generator
turns it into FastAPI routes with their auth, GUID, and cache filters.

Modules:
    metadata: Core types (RouteMetadata, AuthPolicy, CacheTarget, etc.)
    registry: ROUTE_REGISTRY - List of all route declarations
    generator: register_routes_from_registry() - Generate FastAPI routes

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    CacheTarget,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)

__all__ = [
    "AuthLevel",
    "AuthPolicy",
    "CacheTarget",
    "ErrorSpec",
    "HTTPMethod",
    "RouteMetadata",
]
