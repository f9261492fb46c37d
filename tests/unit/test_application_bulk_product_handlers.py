"""Unit tests for bulk product handlers.

Tests cover:
- CreateBulkProduct: empty file, unreadable file, parser crash, first
  invalid row aborts the whole batch, blank and non-finite price cells,
  success saves every row at once
- DeleteBulkProduct: empty list, malformed ID, unknown ID (nothing
  deleted), success deletes every product in one call
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.create_bulk_product_handler import (
    CreateBulkProductHandler,
)
from src.application.commands.handlers.delete_bulk_product_handler import (
    DeleteBulkProductHandler,
)
from src.application.commands.product_commands import (
    CreateBulkProduct,
    DeleteBulkProduct,
)
from src.core.enums import ErrorCode, ErrorKind
from src.core.result import Failure, Success
from src.domain.entities.product import Product


def create_product(name: str) -> Product:
    return Product.create_product(
        name=name, price=10, description="desc", created_by="Jane Admin"
    )


@pytest.fixture
def product_repo():
    return AsyncMock()


@pytest.fixture
def spreadsheet_reader():
    return Mock()


@pytest.fixture
def bulk_create_handler(product_repo, spreadsheet_reader, mock_unit_of_work, mock_logger):
    return CreateBulkProductHandler(
        product_repo=product_repo,
        spreadsheet_reader=spreadsheet_reader,
        unit_of_work=mock_unit_of_work,
        logger=mock_logger,
    )


@pytest.fixture
def bulk_delete_handler(product_repo, mock_unit_of_work, mock_logger):
    return DeleteBulkProductHandler(
        product_repo=product_repo, unit_of_work=mock_unit_of_work, logger=mock_logger
    )


@pytest.mark.unit
class TestCreateBulkProductHandler:
    """Test spreadsheet import."""

    @pytest.mark.asyncio
    async def test_empty_file_rejected(self, bulk_create_handler, spreadsheet_reader):
        result = await bulk_create_handler.handle(
            CreateBulkProduct(content=b"", created_by="Jane Admin")
        )

        assert isinstance(result, Failure)
        assert result.error[0].code == ErrorCode.FILE_EMPTY
        spreadsheet_reader.read_rows.assert_not_called()

    @pytest.mark.asyncio
    async def test_unreadable_file_rejected(
        self, bulk_create_handler, spreadsheet_reader, product_repo
    ):
        spreadsheet_reader.read_rows.side_effect = ValueError("Unreadable workbook")

        result = await bulk_create_handler.handle(
            CreateBulkProduct(content=b"not a workbook", created_by="Jane Admin")
        )

        assert isinstance(result, Failure)
        assert result.error[0].code == ErrorCode.FILE_UNREADABLE
        assert result.error[0].kind == ErrorKind.BAD_REQUEST
        product_repo.save_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_parser_error_is_internal(
        self, bulk_create_handler, spreadsheet_reader, product_repo, mock_logger
    ):
        spreadsheet_reader.read_rows.side_effect = RuntimeError("corrupt shared strings")

        result = await bulk_create_handler.handle(
            CreateBulkProduct(content=b"xlsx", created_by="Jane Admin")
        )

        assert isinstance(result, Failure)
        assert result.error[0].kind == ErrorKind.INTERNAL_SERVER_ERROR
        product_repo.save_many.assert_not_awaited()
        mock_logger.error.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("cell", ["nan", "inf", float("-inf")])
    async def test_non_finite_price_cell_rejected(
        self, bulk_create_handler, spreadsheet_reader, product_repo, cell
    ):
        spreadsheet_reader.read_rows.return_value = [["iphone", cell, "phone"]]

        result = await bulk_create_handler.handle(
            CreateBulkProduct(content=b"xlsx", created_by="Jane Admin")
        )

        assert isinstance(result, Failure)
        assert [e.message for e in result.error] == ["Price must be greater than 0"]
        product_repo.save_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_valid_rows_saved_in_one_batch(
        self, bulk_create_handler, spreadsheet_reader, product_repo, mock_unit_of_work
    ):
        # Arrange
        spreadsheet_reader.read_rows.return_value = [
            ["iphone 15", 25000000, "older model"],
            ["  pixel 9 ", "1999.5", "phone"],
        ]

        # Act
        result = await bulk_create_handler.handle(
            CreateBulkProduct(content=b"xlsx", created_by="Jane Admin", filename="p.xlsx")
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value == "Create product success"
        saved = product_repo.save_many.call_args.args[0]
        assert [(p.name, p.price) for p in saved] == [
            ("iphone 15", 25000000.0),
            ("pixel 9", 1999.5),
        ]
        assert all(p.created_by == "Jane Admin" for p in saved)
        mock_unit_of_work.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_first_invalid_row_aborts_whole_batch(
        self, bulk_create_handler, spreadsheet_reader, product_repo, mock_unit_of_work
    ):
        # Arrange: second row has no description, third row would be valid
        spreadsheet_reader.read_rows.return_value = [
            ["iphone 15", 25000000, "older model"],
            ["pixel 9", 1999, None],
            ["galaxy", 10, "phone"],
        ]

        # Act
        result = await bulk_create_handler.handle(
            CreateBulkProduct(content=b"xlsx", created_by="Jane Admin")
        )

        # Assert
        assert isinstance(result, Failure)
        assert [e.message for e in result.error] == ["Description cannot be empty"]
        product_repo.save_many.assert_not_awaited()
        mock_unit_of_work.begin.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_numeric_price_reported_as_empty(
        self, bulk_create_handler, spreadsheet_reader
    ):
        spreadsheet_reader.read_rows.return_value = [["iphone", "abc", "phone"]]

        result = await bulk_create_handler.handle(
            CreateBulkProduct(content=b"xlsx", created_by="Jane Admin")
        )

        assert isinstance(result, Failure)
        assert [e.message for e in result.error] == ["Price cannot be empty"]

    @pytest.mark.asyncio
    async def test_short_row_reports_missing_cells(
        self, bulk_create_handler, spreadsheet_reader
    ):
        spreadsheet_reader.read_rows.return_value = [["iphone"]]

        result = await bulk_create_handler.handle(
            CreateBulkProduct(content=b"xlsx", created_by="Jane Admin")
        )

        assert isinstance(result, Failure)
        assert [e.message for e in result.error] == [
            "Price cannot be empty",
            "Description cannot be empty",
        ]

    @pytest.mark.asyncio
    async def test_save_failure_rolls_back(
        self, bulk_create_handler, spreadsheet_reader, product_repo, mock_unit_of_work
    ):
        spreadsheet_reader.read_rows.return_value = [["iphone", 1, "phone"]]
        product_repo.save_many.side_effect = RuntimeError("db down")

        result = await bulk_create_handler.handle(
            CreateBulkProduct(content=b"xlsx", created_by="Jane Admin")
        )

        assert isinstance(result, Failure)
        assert result.error[0].kind == ErrorKind.INTERNAL_SERVER_ERROR
        mock_unit_of_work.rollback.assert_awaited_once()


@pytest.mark.unit
class TestDeleteBulkProductHandler:
    """Test all-or-nothing deletion."""

    @pytest.mark.asyncio
    async def test_empty_list_is_not_found(self, bulk_delete_handler, product_repo):
        result = await bulk_delete_handler.handle(DeleteBulkProduct(product_ids=[]))

        assert isinstance(result, Failure)
        assert result.error[0].kind == ErrorKind.NOT_FOUND
        assert result.error[0].message == "List of product id cannot be empty"
        product_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_id_fails_whole_request(
        self, bulk_delete_handler, product_repo, mock_unit_of_work
    ):
        # Arrange: first ID exists, second is malformed
        existing = create_product("a")
        product_repo.find_by_id.return_value = existing

        # Act
        result = await bulk_delete_handler.handle(
            DeleteBulkProduct(product_ids=[str(existing.id), "not-a-guid"])
        )

        # Assert
        assert isinstance(result, Failure)
        assert len(result.error) == 1
        assert result.error[0].kind == ErrorKind.NOT_FOUND
        assert result.error[0].message == "No find Product with ID not-a-guid"
        product_repo.delete_many.assert_not_awaited()
        mock_unit_of_work.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_id_deletes_nothing(
        self, bulk_delete_handler, product_repo, mock_unit_of_work
    ):
        existing = create_product("a")
        missing_id = uuid7()
        product_repo.find_by_id.side_effect = [existing, None]

        result = await bulk_delete_handler.handle(
            DeleteBulkProduct(product_ids=[str(existing.id), str(missing_id)])
        )

        assert isinstance(result, Failure)
        assert result.error[0].message == f"No find Product with ID {missing_id}"
        product_repo.delete_many.assert_not_awaited()
        mock_unit_of_work.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_every_product_deleted_together(
        self, bulk_delete_handler, product_repo, mock_unit_of_work
    ):
        # Arrange
        first, second = create_product("a"), create_product("b")
        product_repo.find_by_id.side_effect = [first, second]

        # Act
        result = await bulk_delete_handler.handle(
            DeleteBulkProduct(product_ids=[str(first.id), str(second.id)])
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value == "Delete product success"
        product_repo.delete_many.assert_awaited_once_with([first, second])
        mock_unit_of_work.commit.assert_awaited_once()
