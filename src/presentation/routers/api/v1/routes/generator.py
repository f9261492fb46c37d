"""Route generator for the API Route Registry.

This module provides register_routes_from_registry(), which generates FastAPI
routes from RouteMetadata entries at application startup. Request filters are
composed from each entry in a fixed order:

    auth (401/403) → GUID path params (400) → response cache read
        → endpoint → response cache write | cache invalidation

Auth and GUID checks are route-level dependencies, so they run before the
endpoint's own dependencies build a handler. Cache read/write and
invalidation wrap the endpoint function itself.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_dependencies: Build FastAPI dependencies from auth policy and GUID params
    _with_response_cache: Wrap an endpoint with cache read/write/invalidate
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    v1_router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

import functools
import inspect
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.core.config import settings
from src.core.container import get_response_cache_service
from src.domain.protocols import ResponseCacheProtocol
from src.infrastructure.cache.cache_keys import (
    build_invalidation_pattern,
    build_response_cache_key,
)
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
    require_role,
)
from src.presentation.routers.api.middleware.guid_dependencies import (
    require_guid_params,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    CacheTarget,
    ErrorSpec,
    RouteMetadata,
)

JSON_MEDIA_TYPE = "application/json"


def register_routes_from_registry(
    router: APIRouter,
    registry: Sequence[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: RouteMetadata entries to convert into routes

    Example:
        >>> v1_router = APIRouter(prefix="/api/v1")
        >>> register_routes_from_registry(v1_router, ROUTE_REGISTRY)
    """
    for metadata in registry:
        dependencies = _build_dependencies(metadata.auth_policy, metadata.guid_params)
        responses = _build_responses(metadata.errors) if metadata.errors else None

        endpoint = metadata.handler
        if metadata.cache_ttl is not None or metadata.invalidates:
            endpoint = _with_response_cache(
                endpoint,
                cache_ttl=metadata.cache_ttl,
                invalidates=metadata.invalidates,
            )

        router.add_api_route(
            path=metadata.path,
            endpoint=endpoint,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=dependencies,
        )


def _build_dependencies(
    auth_policy: AuthPolicy, guid_params: Sequence[str]
) -> list[Any]:
    """Build route-level dependencies.

    Auth policy mapping:
        PUBLIC: no auth dependency
        AUTHENTICATED: Depends(get_current_user)
        ROLE: Depends(require_role(role)) (includes get_current_user)

    The GUID check is appended after auth, so a caller without access never
    learns whether an identifier was well-formed.

    Args:
        auth_policy: Authentication policy from RouteMetadata
        guid_params: Path parameters that must parse as UUIDs

    Returns:
        List of FastAPI dependencies to inject
    """
    dependencies: list[Any] = []
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            pass
        case AuthLevel.AUTHENTICATED:
            dependencies.append(Depends(get_current_user))
        case AuthLevel.ROLE:
            assert auth_policy.role is not None
            dependencies.append(Depends(require_role(auth_policy.role)))
        case _:
            # Unknown auth level - fail closed (no route)
            raise ValueError(f"Unknown auth level: {auth_policy.level}")

    if guid_params:
        dependencies.append(Depends(require_guid_params(guid_params)))
    return dependencies


def _with_response_cache(
    endpoint: Callable[..., Awaitable[Any]],
    *,
    cache_ttl: int | None,
    invalidates: Sequence[CacheTarget],
) -> Callable[..., Awaitable[Any]]:
    """Wrap an endpoint with response cache read/write and invalidation.

    The wrapper keeps the endpoint's signature and adds two keyword-only
    parameters (the request and the response cache service) so FastAPI
    injects them alongside the endpoint's own dependencies.

    Cached routes (cache_ttl set):
        - disabled cache: call the endpoint
        - hit: return the stored JSON verbatim, endpoint not called
        - miss: call the endpoint; a success is serialized (camelCase),
          stored for cache_ttl seconds, and the same bytes are returned
    Invalidating routes: after a success, remove every listed pattern.

    Endpoints signal failure by returning a Response (the error body);
    failures are neither cached nor followed by invalidation.
    """
    signature = inspect.signature(endpoint)
    extra_parameters = [
        inspect.Parameter(
            "cache_request",
            inspect.Parameter.KEYWORD_ONLY,
            annotation=Request,
        ),
        inspect.Parameter(
            "response_cache",
            inspect.Parameter.KEYWORD_ONLY,
            annotation=ResponseCacheProtocol,
            default=Depends(get_response_cache_service),
        ),
    ]

    @functools.wraps(endpoint)
    async def cached_endpoint(
        *args: Any,
        cache_request: Request,
        response_cache: ResponseCacheProtocol,
        **kwargs: Any,
    ) -> Any:
        if cache_ttl is not None and response_cache.is_enabled:
            cache_key = build_response_cache_key(
                cache_request.url.path, cache_request.query_params.multi_items()
            )
            cached = await response_cache.get_cached_response(cache_key)
            if cached is not None:
                return Response(content=cached, media_type=JSON_MEDIA_TYPE)

            result = await endpoint(*args, **kwargs)
            if isinstance(result, Response):
                return result
            body = result.model_dump_json(by_alias=True)
            await response_cache.set_cached_response(cache_key, body, cache_ttl)
            return Response(content=body, media_type=JSON_MEDIA_TYPE)

        result = await endpoint(*args, **kwargs)
        if invalidates and not isinstance(result, Response):
            for target in invalidates:
                await response_cache.remove_cached_response(
                    build_invalidation_pattern(
                        settings.api_v1_prefix, target.controller, target.action
                    )
                )
        return result

    cached_endpoint.__signature__ = signature.replace(  # type: ignore[attr-defined]
        parameters=[*signature.parameters.values(), *extra_parameters]
    )
    return cached_endpoint


def _build_responses(errors: Sequence[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error declarations.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Product not found")])
        {404: {'description': 'Product not found'}}
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        entry: dict[str, Any] = {"description": error.description}
        if error.model is not None:
            entry["model"] = error.model
        responses[error.status] = entry
    return responses
