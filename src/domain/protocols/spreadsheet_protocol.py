"""Spreadsheet reader protocol for bulk imports.

Handlers depend on this interface; the infrastructure layer parses the
actual workbook format.
"""

from typing import Any, Protocol


class SpreadsheetReaderProtocol(Protocol):
    """Read data rows from the first worksheet of a workbook.

    Example:
        >>> rows = reader.read_rows(content, skip_header=True)
        >>> name, price, description = rows[0][:3]
    """

    def read_rows(self, content: bytes, *, skip_header: bool = True) -> list[list[Any]]:
        """Read rows from the first worksheet.

        Args:
            content: Raw workbook bytes.
            skip_header: Skip the first row.

        Returns:
            Cell values per row, in sheet order. Fully blank rows are skipped.

        Raises:
            ValueError: If the content is not a readable workbook.
        """
        ...
