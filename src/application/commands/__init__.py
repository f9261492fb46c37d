"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, CreateProduct).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.product_commands import (
    CreateBulkProduct,
    CreateProduct,
    DeleteBulkProduct,
    DeleteProduct,
    UpdateProduct,
)
from src.application.commands.user_profile_commands import (
    RemoveAccount,
    UpdateUserProfile,
)

__all__ = [
    "CreateBulkProduct",
    "CreateProduct",
    "DeleteBulkProduct",
    "DeleteProduct",
    "LoginUser",
    "RegisterUser",
    "RemoveAccount",
    "UpdateProduct",
    "UpdateUserProfile",
]
