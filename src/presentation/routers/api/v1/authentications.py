"""Authentications resource handlers.

Handler functions for registration and login.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    register - Create an identity and its profile
    login    - Exchange credentials for an access token
"""

from fastapi import Depends
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.core.container import get_login_user_handler, get_register_user_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
)


async def register(
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> MessageResponse | JSONResponse:
    """Register a new user.

    POST /api/v1/Authentications/Register → 200 OK

    Args:
        data: Registration details.
        handler: Register user handler (injected).

    Returns:
        Envelope with the success message, or the error body (400 for
        invalid fields or an email already registered).
    """
    command = RegisterUser(
        full_name=data.full_name,
        email=data.email,
        phone_number=data.phone_number,
        date_of_birth=data.date_of_birth,
        password=data.password,
    )
    match await handler.handle(command):
        case Success(value=message):
            return MessageResponse.success(message)
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def login(
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> TokenResponse | JSONResponse:
    """Log in and receive an access token.

    POST /api/v1/Authentications/Login → 200 OK

    Wrong password and unknown email produce the same message.

    Returns:
        Envelope whose data is the bearer token (valid 120 minutes).
    """
    match await handler.handle(LoginUser(email=data.email, password=data.password)):
        case Success(value=token):
            return TokenResponse.success(token)
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)
