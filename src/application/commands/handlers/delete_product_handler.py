"""DeleteProduct command handler."""

from src.application.commands.product_commands import DeleteProduct
from src.application.messages import ProductMessages
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InternalError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, ProductRepository, UnitOfWorkProtocol


class DeleteProductHandler:
    """Handler for single product deletion."""

    def __init__(
        self,
        product_repo: ProductRepository,
        unit_of_work: UnitOfWorkProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._product_repo = product_repo
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: DeleteProduct) -> Result[str, list[DomainError]]:
        try:
            await self._unit_of_work.begin()

            product = await self._product_repo.find_by_id(cmd.product_id)
            if product is None:
                await self._unit_of_work.rollback()
                return Failure(
                    error=[
                        NotFoundError(
                            code=ErrorCode.PRODUCT_NOT_FOUND,
                            message=ProductMessages.NOT_FOUND_BY_ID.format(
                                product_id=cmd.product_id
                            ),
                            resource_type="Product",
                            resource_id=str(cmd.product_id),
                        )
                    ]
                )

            await self._product_repo.delete(product)
            await self._unit_of_work.commit()

            self._logger.info("product_deleted", product_id=str(cmd.product_id))
            return Success(value=ProductMessages.DELETE_SUCCESS)

        except Exception as e:
            await self._unit_of_work.rollback()
            self._logger.error(
                "delete_product_failed", error=e, product_id=str(cmd.product_id)
            )
            return Failure(error=[InternalError()])
