"""CreateBulkProduct command handler.

Imports products from the first worksheet of an uploaded workbook.

Flow:
1. Reject an empty upload
2. Read rows from row 2 on (col 1 name, col 2 price, col 3 description)
3. Build and validate one product per row; the first invalid row aborts
   the whole batch
4. Insert every product and commit once

A failed import never stores a partial batch.
"""

import asyncio
from functools import partial
from typing import Any

from src.application.commands.product_commands import CreateBulkProduct
from src.application.messages import ProductMessages
from src.core.enums import ErrorCode
from src.core.errors import DomainError, InternalError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.product import Product
from src.domain.protocols import (
    LoggerProtocol,
    ProductRepository,
    SpreadsheetReaderProtocol,
    UnitOfWorkProtocol,
)
from src.domain.validators import validate_product

# First data row in the sheet (row 1 is the header)
_FIRST_DATA_ROW = 2


def _cell(row: list[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _to_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _to_price(value: Any) -> float:
    """Convert a price cell to float (0.0 when blank or not a number)."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


class CreateBulkProductHandler:
    """Handler for spreadsheet product import."""

    def __init__(
        self,
        product_repo: ProductRepository,
        spreadsheet_reader: SpreadsheetReaderProtocol,
        unit_of_work: UnitOfWorkProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._product_repo = product_repo
        self._spreadsheet_reader = spreadsheet_reader
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def handle(self, cmd: CreateBulkProduct) -> Result[str, list[DomainError]]:
        """Handle spreadsheet import command.

        Args:
            cmd: CreateBulkProduct command with raw workbook bytes.

        Returns:
            Success(message) when every row was inserted.
            Failure(errors) for an empty/unreadable file or the first invalid row.
        """
        if not cmd.content:
            return Failure(
                error=[
                    ValidationError(
                        code=ErrorCode.FILE_EMPTY,
                        message=ProductMessages.FILE_EMPTY,
                        field="file",
                    )
                ]
            )

        try:
            rows = await self._read_rows(cmd.content)
            built = self._build_products(rows, cmd.created_by)
        except ValueError as e:
            self._logger.warning(
                "bulk_product_file_unreadable", filename=cmd.filename, reason=str(e)
            )
            return Failure(
                error=[
                    ValidationError(
                        code=ErrorCode.FILE_UNREADABLE,
                        message=ProductMessages.FILE_UNREADABLE,
                        field="file",
                    )
                ]
            )
        except Exception as e:
            self._logger.error(
                "bulk_product_file_read_failed", error=e, filename=cmd.filename
            )
            return Failure(error=[InternalError()])

        if isinstance(built, Failure):
            return built
        products = built.value

        try:
            await self._unit_of_work.begin()
            await self._product_repo.save_many(products)
            await self._unit_of_work.commit()
        except Exception as e:
            await self._unit_of_work.rollback()
            self._logger.error(
                "bulk_product_import_failed", error=e, filename=cmd.filename
            )
            return Failure(error=[InternalError()])

        self._logger.info(
            "bulk_products_created", count=len(products), filename=cmd.filename
        )
        return Success(value=ProductMessages.CREATE_SUCCESS)

    async def _read_rows(self, content: bytes) -> list[list[Any]]:
        """Parse the workbook off the event loop (openpyxl is blocking)."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(self._spreadsheet_reader.read_rows, content, skip_header=True)
        )

    def _build_products(
        self, rows: list[list[Any]], created_by: str
    ) -> Result[list[Product], list[DomainError]]:
        products: list[Product] = []
        for offset, row in enumerate(rows):
            product = Product.create_product(
                name=_to_text(_cell(row, 0)),
                price=_to_price(_cell(row, 1)),
                description=_to_text(_cell(row, 2)),
                created_by=created_by,
            )
            validation_errors = validate_product(product)
            if validation_errors:
                self._logger.info(
                    "bulk_product_import_rejected",
                    row=offset + _FIRST_DATA_ROW,
                    error_count=len(validation_errors),
                )
                return Failure(error=list(validation_errors))
            products.append(product)
        return Success(value=products)
