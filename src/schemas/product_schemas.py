"""Product request and response schemas.

Pydantic schemas for product API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.application.dtos import ProductResult
from src.schemas.common_schemas import CamelModel, OperationResultResponse


# =============================================================================
# Request Schemas
# =============================================================================


class ProductRequest(CamelModel):
    """Request schema for creating or updating a product.

    Attributes:
        name: Product name.
        price: Unit price.
        description: Product description.
    """

    name: str = Field(..., description="Product name", examples=["iphone 15 pro max"])
    price: float = Field(
        ..., description="Unit price", allow_inf_nan=False, examples=[30000000]
    )
    description: str = Field(..., description="Description", examples=["this is a iphone"])


# =============================================================================
# Response Schemas
# =============================================================================


class ProductResponse(CamelModel):
    """Single product response."""

    id: UUID = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Unit price")
    description: str = Field(..., description="Description")
    created_by: str = Field(..., description="Author of the record")
    created_date: datetime | None = Field(None, description="Creation timestamp")
    updated_by: str = Field(..., description="Author of the last update")
    updated_date: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: ProductResult) -> "ProductResponse":
        """Convert a ProductResult DTO to the response schema."""
        return cls(
            id=dto.id,
            name=dto.name,
            price=dto.price,
            description=dto.description,
            created_by=dto.created_by,
            created_date=dto.created_date,
            updated_by=dto.updated_by,
            updated_date=dto.updated_date,
        )


ProductEnvelope = OperationResultResponse[ProductResponse]
ProductListEnvelope = OperationResultResponse[list[ProductResponse]]
