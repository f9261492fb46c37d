"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_cache, get_logger, ...

The container is organized into modules by concern:
- infrastructure: Core services (cache, db, logging, security, spreadsheet)
- auth_handlers: Registration/login handler factories
- product_handlers: Product handler factories
- user_profile_handlers: Profile handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_cache,
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_response_cache_service,
    get_spreadsheet_reader,
    get_token_service,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_login_user_handler,
    get_register_user_handler,
)

# Product handlers
from src.core.container.product_handlers import (
    get_create_bulk_product_handler,
    get_create_product_handler,
    get_delete_bulk_product_handler,
    get_delete_product_handler,
    get_get_all_products_handler,
    get_get_product_by_id_handler,
    get_update_product_handler,
)

# User profile handlers
from src.core.container.user_profile_handlers import (
    create_check_identity_consistency_handler,
    get_get_all_user_profiles_handler,
    get_get_user_profile_by_id_handler,
    get_remove_account_handler,
    get_update_user_profile_handler,
)

__all__ = [
    # Infrastructure
    "get_cache",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_response_cache_service",
    "get_spreadsheet_reader",
    "get_token_service",
    # Auth handlers
    "get_login_user_handler",
    "get_register_user_handler",
    # Product handlers
    "get_create_bulk_product_handler",
    "get_create_product_handler",
    "get_delete_bulk_product_handler",
    "get_delete_product_handler",
    "get_get_all_products_handler",
    "get_get_product_by_id_handler",
    "get_update_product_handler",
    # User profile handlers
    "create_check_identity_consistency_handler",
    "get_get_all_user_profiles_handler",
    "get_get_user_profile_by_id_handler",
    "get_remove_account_handler",
    "get_update_user_profile_handler",
]
