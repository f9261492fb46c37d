"""ProductRepository - SQLAlchemy implementation of ProductRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Product entities and database ProductModel.
Writes are staged on the session; the unit of work commits them.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.product import Product
from src.infrastructure.persistence.models.product import ProductModel


class ProductRepository:
    """SQLAlchemy implementation of ProductRepository protocol.

    This class does NOT inherit from the protocol (structural typing).

    Attributes:
        session: SQLAlchemy async session shared with the unit of work.

    Example:
        >>> repo = ProductRepository(session)
        >>> products = await repo.find_all()
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> list[Product]:
        """Find every product, oldest first.

        Returns:
            Domain Product entities (empty list if none).
        """
        stmt = select(ProductModel).order_by(ProductModel.created_date, ProductModel.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, product_id: UUID) -> Product | None:
        """Find product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            Domain Product entity if found, None otherwise.
        """
        model = await self.session.get(ProductModel, product_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def save(self, product: Product) -> None:
        """Stage a new product for insert.

        Args:
            product: Validated Product entity.
        """
        self.session.add(self._to_model(product))

    async def save_many(self, products: list[Product]) -> None:
        """Stage a batch of new products for insert.

        Args:
            products: Validated Product entities.
        """
        self.session.add_all([self._to_model(product) for product in products])

    async def update(self, product: Product) -> None:
        """Copy editable and audit fields onto the stored row.

        Raises:
            NoResultFound: If the product doesn't exist.
        """
        stmt = select(ProductModel).where(ProductModel.id == product.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.name = product.name
        model.price = product.price
        model.description = product.description
        model.updated_by = product.updated_by
        model.updated_date = product.updated_date

    async def delete(self, product: Product) -> None:
        """Delete a product row.

        Args:
            product: Product to remove.
        """
        await self.session.execute(
            delete(ProductModel).where(ProductModel.id == product.id)
        )

    async def delete_many(self, products: list[Product]) -> None:
        """Delete every given product in one statement.

        Args:
            products: Products to remove. An empty list is a no-op.
        """
        if not products:
            return
        await self.session.execute(
            delete(ProductModel).where(ProductModel.id.in_([p.id for p in products]))
        )

    def _to_domain(self, model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            price=model.price,
            description=model.description,
            created_by=model.created_by,
            created_date=model.created_date,
            updated_by=model.updated_by,
            updated_date=model.updated_date,
        )

    def _to_model(self, product: Product) -> ProductModel:
        return ProductModel(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            created_by=product.created_by,
            created_date=product.created_date,
            updated_by=product.updated_by,
            updated_date=product.updated_date,
        )
