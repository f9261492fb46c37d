"""API Route Registry - Single Source of Truth for all routes.

This module contains ROUTE_REGISTRY, the authoritative list of all API
endpoints. The generator turns each entry into a FastAPI route and composes
its filters (auth, GUID format, response cache, cache invalidation).

Registry structure:
    - 16 endpoints across 3 controllers (Authentications, Products, UserProfiles)
    - Paths are relative to the version prefix (/api/v1)
    - Auth policies explicitly declared (PUBLIC, AUTHENTICATED, ROLE)
    - Cached GET listings are cleared by the mutations that change them

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.core.config import settings
from src.core.constants import (
    AUTHENTICATIONS_CONTROLLER,
    GET_ALL_PRODUCTS,
    GET_ALL_USER_PROFILES,
    GET_USER_PROFILE_BY_ID,
    PRODUCTS_CONTROLLER,
    USER_PROFILES_CONTROLLER,
)
from src.domain.enums import UserRole
from src.presentation.routers.api.v1.authentications import login, register
from src.presentation.routers.api.v1.products import (
    create_bulk_product,
    create_product,
    delete_bulk_product,
    delete_product,
    get_all_products,
    get_product_by_id,
    update_product,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    CacheTarget,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from src.presentation.routers.api.v1.user_profiles import (
    get_all_user_profiles,
    get_information_of_user_profile,
    get_user_profile_by_id,
    remove_account,
    remove_user_profile_by_id,
    update_information_of_user_profile,
    update_user_profile_by_id,
)
from src.schemas.auth_schemas import MessageResponse, TokenResponse
from src.schemas.common_schemas import ErrorResponse
from src.schemas.product_schemas import ProductEnvelope, ProductListEnvelope
from src.schemas.user_profile_schemas import (
    UserProfileEnvelope,
    UserProfileListEnvelope,
)

# =============================================================================
# Shared policies and error specs
# =============================================================================

PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)
AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)
ADMIN_ONLY = AuthPolicy(level=AuthLevel.ROLE, role=UserRole.ADMIN.value)

PRODUCT_LIST = CacheTarget(controller=PRODUCTS_CONTROLLER, action=GET_ALL_PRODUCTS)
USER_PROFILE_LIST = CacheTarget(
    controller=USER_PROFILES_CONTROLLER, action=GET_ALL_USER_PROFILES
)
USER_PROFILE_DETAIL = CacheTarget(
    controller=USER_PROFILES_CONTROLLER, action=GET_USER_PROFILE_BY_ID
)

BAD_REQUEST = ErrorSpec(status=400, description="Validation error", model=ErrorResponse)
UNAUTHORIZED = ErrorSpec(
    status=401, description="Missing or invalid access token", model=ErrorResponse
)
FORBIDDEN = ErrorSpec(status=403, description="Role not allowed", model=ErrorResponse)
INTERNAL = ErrorSpec(status=500, description="Unexpected error", model=ErrorResponse)


def _not_found(description: str) -> ErrorSpec:
    return ErrorSpec(status=404, description=description, model=ErrorResponse)


# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Authentications (2 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path=f"/{AUTHENTICATIONS_CONTROLLER}/Register",
        handler=register,
        resource=AUTHENTICATIONS_CONTROLLER,
        tags=[AUTHENTICATIONS_CONTROLLER],
        summary="Register",
        description="Create a login identity and its user profile.",
        operation_id="register",
        response_model=MessageResponse,
        errors=[BAD_REQUEST, INTERNAL],
        auth_policy=PUBLIC,
        invalidates=[USER_PROFILE_LIST],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=f"/{AUTHENTICATIONS_CONTROLLER}/Login",
        handler=login,
        resource=AUTHENTICATIONS_CONTROLLER,
        tags=[AUTHENTICATIONS_CONTROLLER],
        summary="Login",
        description="Exchange email and password for a 2-hour access token.",
        operation_id="login",
        response_model=TokenResponse,
        errors=[BAD_REQUEST, INTERNAL],
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Products (7 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path=f"/{PRODUCTS_CONTROLLER}/{GET_ALL_PRODUCTS}",
        handler=get_all_products,
        resource=PRODUCTS_CONTROLLER,
        tags=[PRODUCTS_CONTROLLER],
        summary="List products",
        operation_id="get_all_products",
        response_model=ProductListEnvelope,
        errors=[UNAUTHORIZED, INTERNAL],
        auth_policy=AUTHENTICATED,
        cache_ttl=settings.cache_ttl_seconds,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=f"/{PRODUCTS_CONTROLLER}/GetProductById/{{product_id}}",
        handler=get_product_by_id,
        resource=PRODUCTS_CONTROLLER,
        tags=[PRODUCTS_CONTROLLER],
        summary="Get product",
        operation_id="get_product_by_id",
        response_model=ProductEnvelope,
        errors=[BAD_REQUEST, UNAUTHORIZED, _not_found("Product not found"), INTERNAL],
        auth_policy=AUTHENTICATED,
        guid_params=["product_id"],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=f"/{PRODUCTS_CONTROLLER}/CreateProduct",
        handler=create_product,
        resource=PRODUCTS_CONTROLLER,
        tags=[PRODUCTS_CONTROLLER],
        summary="Create product",
        operation_id="create_product",
        response_model=MessageResponse,
        errors=[BAD_REQUEST, UNAUTHORIZED, INTERNAL],
        auth_policy=AUTHENTICATED,
        invalidates=[PRODUCT_LIST],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path=f"/{PRODUCTS_CONTROLLER}/CreateBulkProduct",
        handler=create_bulk_product,
        resource=PRODUCTS_CONTROLLER,
        tags=[PRODUCTS_CONTROLLER],
        summary="Create products from a workbook",
        description=(
            "Upload a workbook (multipart field 'file') whose rows after the "
            "header hold name, price, and description. Any invalid row "
            "rejects the whole upload."
        ),
        operation_id="create_bulk_product",
        response_model=MessageResponse,
        errors=[BAD_REQUEST, UNAUTHORIZED, FORBIDDEN, INTERNAL],
        auth_policy=ADMIN_ONLY,
        invalidates=[PRODUCT_LIST],
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path=f"/{PRODUCTS_CONTROLLER}/UpdateProduct/{{product_id}}",
        handler=update_product,
        resource=PRODUCTS_CONTROLLER,
        tags=[PRODUCTS_CONTROLLER],
        summary="Update product",
        operation_id="update_product",
        response_model=MessageResponse,
        errors=[BAD_REQUEST, UNAUTHORIZED, _not_found("Product not found"), INTERNAL],
        auth_policy=AUTHENTICATED,
        guid_params=["product_id"],
        invalidates=[PRODUCT_LIST],
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=f"/{PRODUCTS_CONTROLLER}/DeleteProduct/{{product_id}}",
        handler=delete_product,
        resource=PRODUCTS_CONTROLLER,
        tags=[PRODUCTS_CONTROLLER],
        summary="Delete product",
        operation_id="delete_product",
        response_model=MessageResponse,
        errors=[BAD_REQUEST, UNAUTHORIZED, _not_found("Product not found"), INTERNAL],
        auth_policy=AUTHENTICATED,
        guid_params=["product_id"],
        invalidates=[PRODUCT_LIST],
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=f"/{PRODUCTS_CONTROLLER}/DeleteBulkProduct",
        handler=delete_bulk_product,
        resource=PRODUCTS_CONTROLLER,
        tags=[PRODUCTS_CONTROLLER],
        summary="Delete products",
        description="Delete every listed product, or none if any is missing.",
        operation_id="delete_bulk_product",
        response_model=MessageResponse,
        errors=[
            BAD_REQUEST,
            UNAUTHORIZED,
            FORBIDDEN,
            _not_found("A product was not found"),
            INTERNAL,
        ],
        auth_policy=ADMIN_ONLY,
        invalidates=[PRODUCT_LIST],
    ),
    # =========================================================================
    # UserProfiles - admin views (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path=f"/{USER_PROFILES_CONTROLLER}/{GET_ALL_USER_PROFILES}",
        handler=get_all_user_profiles,
        resource=USER_PROFILES_CONTROLLER,
        tags=[USER_PROFILES_CONTROLLER],
        summary="List user profiles",
        operation_id="get_all_user_profiles",
        response_model=UserProfileListEnvelope,
        errors=[UNAUTHORIZED, FORBIDDEN, INTERNAL],
        auth_policy=ADMIN_ONLY,
        cache_ttl=settings.cache_ttl_seconds,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path=f"/{USER_PROFILES_CONTROLLER}/{GET_USER_PROFILE_BY_ID}/{{user_profile_id}}",
        handler=get_user_profile_by_id,
        resource=USER_PROFILES_CONTROLLER,
        tags=[USER_PROFILES_CONTROLLER],
        summary="Get user profile",
        operation_id="get_user_profile_by_id",
        response_model=UserProfileEnvelope,
        errors=[
            BAD_REQUEST,
            UNAUTHORIZED,
            FORBIDDEN,
            _not_found("User profile not found"),
            INTERNAL,
        ],
        auth_policy=ADMIN_ONLY,
        guid_params=["user_profile_id"],
        cache_ttl=settings.cache_ttl_seconds,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path=f"/{USER_PROFILES_CONTROLLER}/UpdateUserProfileById/{{user_profile_id}}",
        handler=update_user_profile_by_id,
        resource=USER_PROFILES_CONTROLLER,
        tags=[USER_PROFILES_CONTROLLER],
        summary="Update user profile",
        operation_id="update_user_profile_by_id",
        response_model=MessageResponse,
        errors=[
            BAD_REQUEST,
            UNAUTHORIZED,
            FORBIDDEN,
            _not_found("User profile not found"),
            INTERNAL,
        ],
        auth_policy=ADMIN_ONLY,
        guid_params=["user_profile_id"],
        invalidates=[USER_PROFILE_LIST, USER_PROFILE_DETAIL],
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=f"/{USER_PROFILES_CONTROLLER}/RemoveUserProfileById/{{user_profile_id}}",
        handler=remove_user_profile_by_id,
        resource=USER_PROFILES_CONTROLLER,
        tags=[USER_PROFILES_CONTROLLER],
        summary="Remove user profile",
        description="Remove the profile and the login identity sharing its email.",
        operation_id="remove_user_profile_by_id",
        response_model=MessageResponse,
        errors=[
            BAD_REQUEST,
            UNAUTHORIZED,
            FORBIDDEN,
            _not_found("User profile not found"),
            INTERNAL,
        ],
        auth_policy=ADMIN_ONLY,
        guid_params=["user_profile_id"],
        invalidates=[USER_PROFILE_LIST, USER_PROFILE_DETAIL],
    ),
    # =========================================================================
    # UserProfiles - self views (3 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path=f"/{USER_PROFILES_CONTROLLER}/GetInformationOfUserProfile",
        handler=get_information_of_user_profile,
        resource=USER_PROFILES_CONTROLLER,
        tags=[USER_PROFILES_CONTROLLER],
        summary="Get own profile",
        operation_id="get_information_of_user_profile",
        response_model=UserProfileEnvelope,
        errors=[UNAUTHORIZED, _not_found("User profile not found"), INTERNAL],
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path=f"/{USER_PROFILES_CONTROLLER}/UpdateInformationOfUserProfile",
        handler=update_information_of_user_profile,
        resource=USER_PROFILES_CONTROLLER,
        tags=[USER_PROFILES_CONTROLLER],
        summary="Update own profile",
        operation_id="update_information_of_user_profile",
        response_model=MessageResponse,
        errors=[BAD_REQUEST, UNAUTHORIZED, _not_found("User profile not found"), INTERNAL],
        auth_policy=AUTHENTICATED,
        invalidates=[USER_PROFILE_LIST, USER_PROFILE_DETAIL],
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path=f"/{USER_PROFILES_CONTROLLER}/RemoveAccount",
        handler=remove_account,
        resource=USER_PROFILES_CONTROLLER,
        tags=[USER_PROFILES_CONTROLLER],
        summary="Remove own account",
        operation_id="remove_account",
        response_model=MessageResponse,
        errors=[UNAUTHORIZED, _not_found("User profile not found"), INTERNAL],
        auth_policy=AUTHENTICATED,
        invalidates=[USER_PROFILE_LIST, USER_PROFILE_DETAIL],
    ),
]
