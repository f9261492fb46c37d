"""Domain protocols (ports).

Interfaces the application layer depends on. Infrastructure adapters
implement them structurally (no inheritance).
"""

from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.identity_user_repository import IdentityUserRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.product_repository import ProductRepository
from src.domain.protocols.response_cache_protocol import ResponseCacheProtocol
from src.domain.protocols.spreadsheet_protocol import SpreadsheetReaderProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol
from src.domain.protocols.user_profile_repository import UserProfileRepository

__all__ = [
    "CacheProtocol",
    "IdentityUserRepository",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "ProductRepository",
    "ResponseCacheProtocol",
    "SpreadsheetReaderProtocol",
    "TokenGenerationProtocol",
    "UnitOfWorkProtocol",
    "UserProfileRepository",
]
