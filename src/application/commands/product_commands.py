"""Product commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateProduct:
    """Create one product.

    Attributes:
        name: Product name.
        price: Unit price.
        description: Product description.
        created_by: Caller's full name (audit).
    """

    name: str
    price: float
    description: str
    created_by: str


@dataclass(frozen=True, kw_only=True)
class UpdateProduct:
    """Replace a product's editable fields.

    Attributes:
        product_id: Product to update.
        name: New name.
        price: New price.
        description: New description.
        updated_by: Caller's full name (audit).
    """

    product_id: UUID
    name: str
    price: float
    description: str
    updated_by: str


@dataclass(frozen=True, kw_only=True)
class DeleteProduct:
    """Delete one product."""

    product_id: UUID


@dataclass(frozen=True, kw_only=True)
class CreateBulkProduct:
    """Create products from a spreadsheet upload.

    Rows start at row 2 (row 1 is the header). Columns: name, price,
    description. The batch is all-or-nothing.

    Attributes:
        content: Raw workbook bytes.
        created_by: Caller's full name (audit).
        filename: Original upload name (logging only).
    """

    content: bytes
    created_by: str
    filename: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteBulkProduct:
    """Delete several products atomically.

    IDs arrive as raw strings; malformed values are reported as not found.

    Attributes:
        product_ids: Product identifiers to delete.
    """

    product_ids: list[str]
