"""API v1 routers.

All routes are generated from the Route Metadata Registry at startup.
See src/presentation/routers/api/v1/routes/registry.py for the route catalog.

Resources:
    /api/v1/Authentications  - Registration and login
    /api/v1/Products         - Product management
    /api/v1/UserProfiles     - Profile management (admin and self views)
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
