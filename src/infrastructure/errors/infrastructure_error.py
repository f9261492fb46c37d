"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (the cache).

Architecture:
- Infrastructure catches exceptions and maps them to DomainError
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode records the original failure for logs
- Used with Result types for error propagation
- Kind is INTERNAL_SERVER_ERROR (inherited from DomainError)
"""

from dataclasses import dataclass

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache-specific errors (wraps Redis exceptions).

    Attributes:
        details: Key or pattern and the original error text.
    """
