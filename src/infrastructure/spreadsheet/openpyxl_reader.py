"""Spreadsheet reader backed by openpyxl.

Implements SpreadsheetReaderProtocol for .xlsx uploads.
"""

from io import BytesIO
from typing import Any
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException


class OpenpyxlSpreadsheetReader:
    """Read the first worksheet of an .xlsx workbook.

    The workbook is opened read-only with cached values, so formula cells
    yield their last computed value.

    Example:
        >>> reader = OpenpyxlSpreadsheetReader()
        >>> rows = reader.read_rows(upload_bytes)
        >>> rows[0]
        ['iphone 15', 25000000, 'older model']
    """

    def read_rows(self, content: bytes, *, skip_header: bool = True) -> list[list[Any]]:
        """Read rows from the first worksheet.

        Args:
            content: Raw workbook bytes.
            skip_header: Skip the first row.

        Returns:
            Cell values per row. Fully blank rows are skipped.

        Raises:
            ValueError: If the content is not a readable workbook.
        """
        try:
            workbook = load_workbook(BytesIO(content), read_only=True, data_only=True)
        except (BadZipFile, InvalidFileException, KeyError, OSError) as e:
            raise ValueError(f"Unreadable workbook: {e}") from e

        try:
            worksheet = workbook.worksheets[0] if workbook.worksheets else None
            if worksheet is None:
                return []
            min_row = 2 if skip_header else 1
            return [
                list(row)
                for row in worksheet.iter_rows(min_row=min_row, values_only=True)
                if any(cell not in (None, "") for cell in row)
            ]
        finally:
            workbook.close()
