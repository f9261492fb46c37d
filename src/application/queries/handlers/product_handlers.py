"""Product query handlers.

Return DTOs (not domain entities) to prevent leaking domain to presentation.

Architecture:
- Returns Result[DTO, list[DomainError]] (explicit error handling)
- Side-effect free: no unit of work
"""

from src.application.dtos import ProductResult
from src.application.messages import ProductMessages
from src.application.queries.product_queries import GetAllProducts, GetProductById
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InternalError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, ProductRepository


class GetAllProductsHandler:
    """List every product."""

    def __init__(self, product_repo: ProductRepository, logger: LoggerProtocol) -> None:
        self._product_repo = product_repo
        self._logger = logger

    async def handle(
        self, query: GetAllProducts
    ) -> Result[list[ProductResult], list[DomainError]]:
        try:
            products = await self._product_repo.find_all()
        except Exception as e:
            self._logger.error("get_all_products_failed", error=e)
            return Failure(error=[InternalError()])
        return Success(value=[ProductResult.from_entity(p) for p in products])


class GetProductByIdHandler:
    """Get a single product."""

    def __init__(self, product_repo: ProductRepository, logger: LoggerProtocol) -> None:
        self._product_repo = product_repo
        self._logger = logger

    async def handle(
        self, query: GetProductById
    ) -> Result[ProductResult, list[DomainError]]:
        """Handle GetProductById query.

        Returns:
            Success(ProductResult) if found.
            Failure([NotFoundError]) if missing.
        """
        try:
            product = await self._product_repo.find_by_id(query.product_id)
        except Exception as e:
            self._logger.error(
                "get_product_failed", error=e, product_id=str(query.product_id)
            )
            return Failure(error=[InternalError()])

        if product is None:
            return Failure(
                error=[
                    NotFoundError(
                        code=ErrorCode.PRODUCT_NOT_FOUND,
                        message=ProductMessages.NOT_FOUND_BY_ID.format(
                            product_id=query.product_id
                        ),
                        resource_type="Product",
                        resource_id=str(query.product_id),
                    )
                ]
            )
        return Success(value=ProductResult.from_entity(product))
