"""Product queries (CQRS read operations).

Queries represent requests for data. They are immutable dataclasses with
question-like names and NEVER change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetAllProducts:
    """List every product."""


@dataclass(frozen=True, kw_only=True)
class GetProductById:
    """Get a single product.

    Attributes:
        product_id: Product to retrieve.
    """

    product_id: UUID
