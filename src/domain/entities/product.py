"""Product domain entity.

Catalog item with name, price, and description. State changes only go
through ``create_product`` and ``update_product``; validation runs on the
resulting entity (see ``src.domain.validators.validate_product``).
"""

from dataclasses import dataclass, field
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.audited_entity import AuditedEntity


@dataclass(kw_only=True)
class Product(AuditedEntity):
    """Catalog product.

    Attributes:
        id: Unique product identifier.
        name: Product name (1-50 characters).
        price: Unit price (greater than zero).
        description: Non-empty description.

    Example:
        >>> product = Product.create_product(
        ...     name="iphone 15 pro max",
        ...     price=30000000,
        ...     description="this is a iphone",
        ...     created_by="Jane Admin",
        ... )
        >>> product.update_product(
        ...     name="iphone 15",
        ...     price=25000000,
        ...     description="older model",
        ...     updated_by="Jane Admin",
        ... )
    """

    id: UUID = field(default_factory=uuid7)
    name: str = ""
    price: float = 0.0
    description: str = ""

    @classmethod
    def create_product(
        cls,
        *,
        name: str,
        price: float,
        description: str,
        created_by: str,
    ) -> "Product":
        """Create a new product with audit fields set.

        Args:
            name: Product name.
            price: Unit price.
            description: Product description.
            created_by: Author of the record.

        Returns:
            New Product (not yet validated or persisted).
        """
        product = cls(name=name, price=price, description=description)
        product._mark_created(created_by)
        return product

    def update_product(
        self,
        *,
        name: str,
        price: float,
        description: str,
        updated_by: str,
    ) -> None:
        """Replace the product's editable fields.

        Args:
            name: New product name.
            price: New unit price.
            description: New description.
            updated_by: Author of the change.
        """
        self.name = name
        self.price = price
        self.description = description
        self._mark_updated(updated_by)
