"""DeleteBulkProduct command handler.

Resolves every requested ID first; a malformed or unknown ID fails the whole
request with NotFound and nothing is deleted.
"""

from uuid import UUID

from src.application.commands.product_commands import DeleteBulkProduct
from src.application.messages import ProductMessages
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InternalError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.product import Product
from src.domain.protocols import LoggerProtocol, ProductRepository, UnitOfWorkProtocol


def _not_found(raw_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.PRODUCT_NOT_FOUND,
        message=ProductMessages.NOT_FOUND_BY_ID.format(product_id=raw_id),
        resource_type="Product",
        resource_id=raw_id,
    )


class DeleteBulkProductHandler:
    """Handler for all-or-nothing product deletion."""

    def __init__(
        self,
        product_repo: ProductRepository,
        unit_of_work: UnitOfWorkProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._product_repo = product_repo
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: DeleteBulkProduct) -> Result[str, list[DomainError]]:
        """Handle bulk deletion command.

        Returns:
            Success(message) after every product is deleted.
            Failure([NotFoundError]) for an empty list or the first
            malformed/unknown ID.
        """
        if not cmd.product_ids:
            return Failure(
                error=[
                    NotFoundError(
                        code=ErrorCode.PRODUCT_IDS_EMPTY,
                        message=ProductMessages.PRODUCT_IDS_EMPTY,
                        resource_type="Product",
                        resource_id="",
                    )
                ]
            )

        try:
            await self._unit_of_work.begin()

            products: list[Product] = []
            for raw_id in cmd.product_ids:
                try:
                    product_id = UUID(str(raw_id))
                except ValueError:
                    await self._unit_of_work.rollback()
                    return Failure(error=[_not_found(str(raw_id))])

                product = await self._product_repo.find_by_id(product_id)
                if product is None:
                    await self._unit_of_work.rollback()
                    return Failure(error=[_not_found(str(raw_id))])
                products.append(product)

            await self._product_repo.delete_many(products)
            await self._unit_of_work.commit()

            self._logger.info("bulk_products_deleted", count=len(products))
            return Success(value=ProductMessages.DELETE_SUCCESS)

        except Exception as e:
            await self._unit_of_work.rollback()
            self._logger.error("bulk_product_delete_failed", error=e)
            return Failure(error=[InternalError()])
