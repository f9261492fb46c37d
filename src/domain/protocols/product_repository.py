"""ProductRepository protocol for product persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.product import Product


class ProductRepository(Protocol):
    """Product repository protocol (port).

    Writes are staged on the current unit of work; nothing is durable until
    the handler commits.

    Methods:
        find_all: List every product
        find_by_id: Retrieve product by ID
        save: Stage a new product
        save_many: Stage several new products
        update: Stage changes to an existing product
        delete: Stage removal of a product
        delete_many: Stage removal of several products
    """

    async def find_all(self) -> list[Product]:
        """List every product.

        Returns:
            All products (empty list if none).
        """
        ...

    async def find_by_id(self, product_id: UUID) -> Product | None:
        """Find product by ID.

        Args:
            product_id: Product's unique identifier.

        Returns:
            Product if found, None otherwise.
        """
        ...

    async def save(self, product: Product) -> None:
        """Stage a new product for insertion."""
        ...

    async def save_many(self, products: list[Product]) -> None:
        """Stage several new products for insertion.

        Args:
            products: Already validated products.
        """
        ...

    async def update(self, product: Product) -> None:
        """Stage changes to an existing product."""
        ...

    async def delete(self, product: Product) -> None:
        """Stage removal of a product."""
        ...

    async def delete_many(self, products: list[Product]) -> None:
        """Stage removal of several products."""
        ...
