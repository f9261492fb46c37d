"""Product database model."""

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import AuditMixin, BaseMutableModel


class ProductModel(AuditMixin, BaseMutableModel):
    """Catalog product row.

    Fields:
        name: Product name (max 50)
        price: Unit price
        description: Description text
        created_by / created_date / updated_by / updated_date: Audit (AuditMixin)
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name!r}, price={self.price})>"
