"""Product DTOs (Data Transfer Objects).

Result dataclasses returned by product query handlers.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.product import Product


@dataclass(frozen=True, kw_only=True)
class ProductResult:
    """Product as returned to the presentation layer.

    Attributes:
        id: Product identifier.
        name: Product name.
        price: Unit price.
        description: Product description.
        created_by: Author of the record.
        created_date: Creation timestamp.
        updated_by: Author of the last update.
        updated_date: Last update timestamp.
    """

    id: UUID
    name: str
    price: float
    description: str
    created_by: str
    created_date: datetime | None
    updated_by: str
    updated_date: datetime | None

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResult":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            created_by=product.created_by,
            created_date=product.created_date,
            updated_by=product.updated_by,
            updated_date=product.updated_date,
        )
