"""UpdateProduct command handler.

Flow:
1. Load the product (NotFound if missing)
2. Apply ``update_product``
3. Validate the updated entity (all errors, nothing persisted on failure)
4. Commit
"""

from src.application.commands.product_commands import UpdateProduct
from src.application.messages import ProductMessages
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InternalError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, ProductRepository, UnitOfWorkProtocol
from src.domain.validators import validate_product


class UpdateProductHandler:
    """Handler for product update command."""

    def __init__(
        self,
        product_repo: ProductRepository,
        unit_of_work: UnitOfWorkProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._product_repo = product_repo
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: UpdateProduct) -> Result[str, list[DomainError]]:
        """Handle product update command.

        Returns:
            Success(message) after commit.
            Failure(errors) with NotFound or validation errors.
        """
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

            product.update_product(
                name=cmd.name,
                price=cmd.price,
                description=cmd.description,
                updated_by=cmd.updated_by,
            )
            validation_errors = validate_product(product)
            if validation_errors:
                await self._unit_of_work.rollback()
                return Failure(error=list(validation_errors))

            await self._product_repo.update(product)
            await self._unit_of_work.commit()

            self._logger.info("product_updated", product_id=str(product.id))
            return Success(value=ProductMessages.UPDATE_SUCCESS)

        except Exception as e:
            await self._unit_of_work.rollback()
            self._logger.error(
                "update_product_failed", error=e, product_id=str(cmd.product_id)
            )
            return Failure(error=[InternalError()])
