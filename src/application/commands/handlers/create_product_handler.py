"""CreateProduct command handler."""

from src.application.commands.product_commands import CreateProduct
from src.application.messages import ProductMessages
from src.core.errors import DomainError, InternalError
from src.core.result import Failure, Result, Success
from src.domain.entities.product import Product
from src.domain.protocols import LoggerProtocol, ProductRepository, UnitOfWorkProtocol
from src.domain.validators import validate_product


class CreateProductHandler:
    """Handler for single product creation.

    Flow: build entity, validate it (all errors), save, commit.
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        unit_of_work: UnitOfWorkProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._product_repo = product_repo
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: CreateProduct) -> Result[str, list[DomainError]]:
        product = Product.create_product(
            name=cmd.name,
            price=cmd.price,
            description=cmd.description,
            created_by=cmd.created_by,
        )
        validation_errors = validate_product(product)
        if validation_errors:
            return Failure(error=list(validation_errors))

        try:
            await self._unit_of_work.begin()
            await self._product_repo.save(product)
            await self._unit_of_work.commit()
        except Exception as e:
            await self._unit_of_work.rollback()
            self._logger.error("create_product_failed", error=e)
            return Failure(error=[InternalError()])

        self._logger.info("product_created", product_id=str(product.id))
        return Success(value=ProductMessages.CREATE_SUCCESS)
