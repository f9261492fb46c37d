"""Spreadsheet parsing adapters."""

from src.infrastructure.spreadsheet.openpyxl_reader import OpenpyxlSpreadsheetReader

__all__ = ["OpenpyxlSpreadsheetReader"]
