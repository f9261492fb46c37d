"""Product handler dependency factories.

Request-scoped handler instances for product commands and queries. Every
handler built for one request shares the request session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_spreadsheet_reader,
)

if TYPE_CHECKING:
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
    from src.application.queries.handlers.product_handlers import (
        GetAllProductsHandler,
        GetProductByIdHandler,
    )


async def get_get_all_products_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetAllProductsHandler":
    from src.application.queries.handlers.product_handlers import GetAllProductsHandler
    from src.infrastructure.persistence.repositories import ProductRepository

    return GetAllProductsHandler(
        product_repo=ProductRepository(session=session), logger=get_logger()
    )


async def get_get_product_by_id_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetProductByIdHandler":
    from src.application.queries.handlers.product_handlers import GetProductByIdHandler
    from src.infrastructure.persistence.repositories import ProductRepository

    return GetProductByIdHandler(
        product_repo=ProductRepository(session=session), logger=get_logger()
    )


async def get_create_product_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateProductHandler":
    from src.application.commands.handlers.create_product_handler import (
        CreateProductHandler,
    )
    from src.infrastructure.persistence.repositories import ProductRepository
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return CreateProductHandler(
        product_repo=ProductRepository(session=session),
        unit_of_work=SqlAlchemyUnitOfWork(session=session),
        logger=get_logger(),
    )


async def get_update_product_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateProductHandler":
    from src.application.commands.handlers.update_product_handler import (
        UpdateProductHandler,
    )
    from src.infrastructure.persistence.repositories import ProductRepository
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return UpdateProductHandler(
        product_repo=ProductRepository(session=session),
        unit_of_work=SqlAlchemyUnitOfWork(session=session),
        logger=get_logger(),
    )


async def get_delete_product_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteProductHandler":
    from src.application.commands.handlers.delete_product_handler import (
        DeleteProductHandler,
    )
    from src.infrastructure.persistence.repositories import ProductRepository
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return DeleteProductHandler(
        product_repo=ProductRepository(session=session),
        unit_of_work=SqlAlchemyUnitOfWork(session=session),
        logger=get_logger(),
    )


async def get_create_bulk_product_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateBulkProductHandler":
    """Get CreateBulkProduct command handler (request-scoped).

    Uses the app-scoped openpyxl spreadsheet reader.
    """
    from src.application.commands.handlers.create_bulk_product_handler import (
        CreateBulkProductHandler,
    )
    from src.infrastructure.persistence.repositories import ProductRepository
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return CreateBulkProductHandler(
        product_repo=ProductRepository(session=session),
        spreadsheet_reader=get_spreadsheet_reader(),
        unit_of_work=SqlAlchemyUnitOfWork(session=session),
        logger=get_logger(),
    )


async def get_delete_bulk_product_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteBulkProductHandler":
    from src.application.commands.handlers.delete_bulk_product_handler import (
        DeleteBulkProductHandler,
    )
    from src.infrastructure.persistence.repositories import ProductRepository
    from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return DeleteBulkProductHandler(
        product_repo=ProductRepository(session=session),
        unit_of_work=SqlAlchemyUnitOfWork(session=session),
        logger=get_logger(),
    )
