"""
Excel Helper Module

- excel_cell: xlrd/openpyxl cell value conversion
"""

from sheetport.core.codec.excel_helper.excel_cell import (
    EMPTY_XLS_CELL_TYPES,
    convert_xls_cell,
    convert_xlsx_cell,
)

__all__ = [
    "EMPTY_XLS_CELL_TYPES",
    "convert_xls_cell",
    "convert_xlsx_cell",
]
