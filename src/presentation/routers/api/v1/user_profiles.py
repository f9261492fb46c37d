"""UserProfiles resource handlers.

Admin views address any profile by identifier; self views act on the
profile named by the caller's ``user_profile_id`` claim.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    get_all_user_profiles              - List every profile (Admin, cached)
    get_user_profile_by_id             - Get a profile (Admin, cached)
    update_user_profile_by_id          - Update a profile (Admin)
    remove_user_profile_by_id          - Remove a profile and its identity (Admin)
    get_information_of_user_profile    - Get the caller's profile
    update_information_of_user_profile - Update the caller's profile
    remove_account                     - Remove the caller's profile and identity
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path
from fastapi.responses import JSONResponse

from src.application.commands.handlers.remove_account_handler import (
    RemoveAccountHandler,
)
from src.application.commands.handlers.update_user_profile_handler import (
    UpdateUserProfileHandler,
)
from src.application.commands.user_profile_commands import (
    RemoveAccount,
    UpdateUserProfile,
)
from src.application.queries.handlers.user_profile_handlers import (
    GetAllUserProfilesHandler,
    GetUserProfileByIdHandler,
)
from src.application.queries.user_profile_queries import (
    GetAllUserProfiles,
    GetUserProfileById,
)
from src.core.container import (
    get_get_all_user_profiles_handler,
    get_get_user_profile_by_id_handler,
    get_remove_account_handler,
    get_update_user_profile_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import MessageResponse
from src.schemas.user_profile_schemas import (
    UpdateUserProfileRequest,
    UserProfileEnvelope,
    UserProfileListEnvelope,
    UserProfileResponse,
)

UserProfileId = Annotated[str, Path(description="User profile UUID")]


async def _get_profile(
    handler: GetUserProfileByIdHandler, user_profile_id: UUID
) -> UserProfileEnvelope | JSONResponse:
    match await handler.handle(GetUserProfileById(user_profile_id=user_profile_id)):
        case Success(value=profile):
            return UserProfileEnvelope.success(UserProfileResponse.from_dto(profile))
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def _update_profile(
    handler: UpdateUserProfileHandler,
    user_profile_id: UUID,
    data: UpdateUserProfileRequest,
    updated_by: str,
) -> MessageResponse | JSONResponse:
    command = UpdateUserProfile(
        user_profile_id=user_profile_id,
        full_name=data.full_name,
        phone_number=data.phone_number,
        date_of_birth=data.date_of_birth,
        updated_by=updated_by,
    )
    match await handler.handle(command):
        case Success(value=message):
            return MessageResponse.success(message)
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def _remove_account(
    handler: RemoveAccountHandler, user_profile_id: UUID
) -> MessageResponse | JSONResponse:
    match await handler.handle(RemoveAccount(user_profile_id=user_profile_id)):
        case Success(value=message):
            return MessageResponse.success(message)
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


# =============================================================================
# Admin views
# =============================================================================


async def get_all_user_profiles(
    handler: GetAllUserProfilesHandler = Depends(get_get_all_user_profiles_handler),
) -> UserProfileListEnvelope | JSONResponse:
    """List every profile.

    GET /api/v1/UserProfiles/GetAllUserProfiles → 200 OK
    """
    match await handler.handle(GetAllUserProfiles()):
        case Success(value=profiles):
            return UserProfileListEnvelope.success(
                [UserProfileResponse.from_dto(p) for p in profiles]
            )
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def get_user_profile_by_id(
    user_profile_id: UserProfileId,
    handler: GetUserProfileByIdHandler = Depends(get_get_user_profile_by_id_handler),
) -> UserProfileEnvelope | JSONResponse:
    """Get a profile.

    GET /api/v1/UserProfiles/GetUserProfileById/{user_profile_id} → 200 OK
    """
    return await _get_profile(handler, UUID(user_profile_id))


async def update_user_profile_by_id(
    user_profile_id: UserProfileId,
    data: UpdateUserProfileRequest,
    current_user: AuthenticatedUser,
    handler: UpdateUserProfileHandler = Depends(get_update_user_profile_handler),
) -> MessageResponse | JSONResponse:
    """Update a profile's editable fields.

    PUT /api/v1/UserProfiles/UpdateUserProfileById/{user_profile_id} → 200 OK
    """
    return await _update_profile(
        handler, UUID(user_profile_id), data, current_user.full_name
    )


async def remove_user_profile_by_id(
    user_profile_id: UserProfileId,
    handler: RemoveAccountHandler = Depends(get_remove_account_handler),
) -> MessageResponse | JSONResponse:
    """Remove a profile and the identity sharing its email.

    DELETE /api/v1/UserProfiles/RemoveUserProfileById/{user_profile_id} → 200 OK
    """
    return await _remove_account(handler, UUID(user_profile_id))


# =============================================================================
# Self views
# =============================================================================


async def get_information_of_user_profile(
    current_user: AuthenticatedUser,
    handler: GetUserProfileByIdHandler = Depends(get_get_user_profile_by_id_handler),
) -> UserProfileEnvelope | JSONResponse:
    """Get the caller's own profile.

    GET /api/v1/UserProfiles/GetInformationOfUserProfile → 200 OK
    """
    return await _get_profile(handler, current_user.user_profile_id)


async def update_information_of_user_profile(
    data: UpdateUserProfileRequest,
    current_user: AuthenticatedUser,
    handler: UpdateUserProfileHandler = Depends(get_update_user_profile_handler),
) -> MessageResponse | JSONResponse:
    """Update the caller's own profile.

    PUT /api/v1/UserProfiles/UpdateInformationOfUserProfile → 200 OK
    """
    return await _update_profile(
        handler, current_user.user_profile_id, data, current_user.full_name
    )


async def remove_account(
    current_user: AuthenticatedUser,
    handler: RemoveAccountHandler = Depends(get_remove_account_handler),
) -> MessageResponse | JSONResponse:
    """Remove the caller's own profile and identity.

    DELETE /api/v1/UserProfiles/RemoveAccount → 200 OK
    """
    return await _remove_account(handler, current_user.user_profile_id)
