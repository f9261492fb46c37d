"""Products resource handlers.

Handler functions for product management endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    get_all_products     - List every product (cached)
    get_product_by_id    - Get one product
    create_product       - Create a product
    create_bulk_product  - Create products from an uploaded workbook (Admin)
    update_product       - Replace a product's fields
    delete_product       - Delete one product
    delete_bulk_product  - Delete several products, all or nothing (Admin)

Path identifiers arrive as strings; the route's GUID filter has already
rejected malformed values when these handlers run.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Body, Depends, File, Path, UploadFile
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_bulk_product_handler import (
    CreateBulkProductHandler,
)
from src.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from src.application.commands.handlers.delete_bulk_product_handler import (
    DeleteBulkProductHandler,
)
from src.application.commands.handlers.delete_product_handler import (
    DeleteProductHandler,
)
from src.application.commands.handlers.update_product_handler import (
    UpdateProductHandler,
)
from src.application.commands.product_commands import (
    CreateBulkProduct,
    CreateProduct,
    DeleteBulkProduct,
    DeleteProduct,
    UpdateProduct,
)
from src.application.queries.handlers.product_handlers import (
    GetAllProductsHandler,
    GetProductByIdHandler,
)
from src.application.queries.product_queries import GetAllProducts, GetProductById
from src.core.container import (
    get_create_bulk_product_handler,
    get_create_product_handler,
    get_delete_bulk_product_handler,
    get_delete_product_handler,
    get_get_all_products_handler,
    get_get_product_by_id_handler,
    get_update_product_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import MessageResponse
from src.schemas.product_schemas import (
    ProductEnvelope,
    ProductListEnvelope,
    ProductRequest,
    ProductResponse,
)

ProductId = Annotated[str, Path(description="Product UUID")]


async def get_all_products(
    handler: GetAllProductsHandler = Depends(get_get_all_products_handler),
) -> ProductListEnvelope | JSONResponse:
    """List every product.

    GET /api/v1/Products/GetAllProducts → 200 OK
    """
    match await handler.handle(GetAllProducts()):
        case Success(value=products):
            return ProductListEnvelope.success(
                [ProductResponse.from_dto(p) for p in products]
            )
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def get_product_by_id(
    product_id: ProductId,
    handler: GetProductByIdHandler = Depends(get_get_product_by_id_handler),
) -> ProductEnvelope | JSONResponse:
    """Get one product.

    GET /api/v1/Products/GetProductById/{product_id} → 200 OK

    Returns:
        Envelope with the product, or 404 if it does not exist.
    """
    match await handler.handle(GetProductById(product_id=UUID(product_id))):
        case Success(value=product):
            return ProductEnvelope.success(ProductResponse.from_dto(product))
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def create_product(
    data: ProductRequest,
    current_user: AuthenticatedUser,
    handler: CreateProductHandler = Depends(get_create_product_handler),
) -> MessageResponse | JSONResponse:
    """Create a product authored by the caller.

    POST /api/v1/Products/CreateProduct → 200 OK
    """
    command = CreateProduct(
        name=data.name,
        price=data.price,
        description=data.description,
        created_by=current_user.full_name,
    )
    match await handler.handle(command):
        case Success(value=message):
            return MessageResponse.success(message)
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def create_bulk_product(
    current_user: AuthenticatedUser,
    file: Annotated[UploadFile, File(description="Workbook: name, price, description")],
    handler: CreateBulkProductHandler = Depends(get_create_bulk_product_handler),
) -> MessageResponse | JSONResponse:
    """Create products from an uploaded workbook.

    POST /api/v1/Products/CreateBulkProduct → 200 OK

    Row 1 is a header. The first invalid row rejects the whole upload.
    """
    command = CreateBulkProduct(
        content=await file.read(),
        created_by=current_user.full_name,
        filename=file.filename,
    )
    match await handler.handle(command):
        case Success(value=message):
            return MessageResponse.success(message)
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def update_product(
    product_id: ProductId,
    data: ProductRequest,
    current_user: AuthenticatedUser,
    handler: UpdateProductHandler = Depends(get_update_product_handler),
) -> MessageResponse | JSONResponse:
    """Replace a product's name, price, and description.

    PUT /api/v1/Products/UpdateProduct/{product_id} → 200 OK
    """
    command = UpdateProduct(
        product_id=UUID(product_id),
        name=data.name,
        price=data.price,
        description=data.description,
        updated_by=current_user.full_name,
    )
    match await handler.handle(command):
        case Success(value=message):
            return MessageResponse.success(message)
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def delete_product(
    product_id: ProductId,
    handler: DeleteProductHandler = Depends(get_delete_product_handler),
) -> MessageResponse | JSONResponse:
    """Delete one product.

    DELETE /api/v1/Products/DeleteProduct/{product_id} → 200 OK
    """
    match await handler.handle(DeleteProduct(product_id=UUID(product_id))):
        case Success(value=message):
            return MessageResponse.success(message)
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)


async def delete_bulk_product(
    product_ids: Annotated[list[str], Body(description="Product UUIDs to delete")],
    handler: DeleteBulkProductHandler = Depends(get_delete_bulk_product_handler),
) -> MessageResponse | JSONResponse:
    """Delete several products.

    DELETE /api/v1/Products/DeleteBulkProduct → 200 OK

    Nothing is deleted unless every identifier names an existing product.
    """
    match await handler.handle(DeleteBulkProduct(product_ids=product_ids)):
        case Success(value=message):
            return MessageResponse.success(message)
        case Failure(error=errors):
            return ErrorResponseBuilder.from_errors(errors)
