# sheetport/core/codec/excel_helper/excel_cell.py
"""
Excel cell value conversion

Maps xlrd cell types and openpyxl cell values onto CellValue:
- Empty/blank cells: None
- Numbers: int when integral, float otherwise
- Dates: ISO-8601 strings
- Booleans: bool
- Error cells: error text (e.g. "#DIV/0!")
"""
import logging

import xlrd
from xlrd.biffh import error_text_from_code

from sheetport.core.functions.cell_value import CellValue, normalize_cell_value

logger = logging.getLogger("sheetport")

EMPTY_XLS_CELL_TYPES = (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK)


def convert_xls_cell(value, cell_type: int, datemode: int = 0) -> CellValue:
    """
    Convert an xlrd cell into a CellValue.

    Args:
        value: xlrd cell value
        cell_type: xlrd cell type constant
        datemode: Workbook date mode (0: 1900-based, 1: 1904-based)

    Returns:
        Cell value
    """
    if cell_type in EMPTY_XLS_CELL_TYPES:
        return None

    if cell_type == xlrd.XL_CELL_NUMBER:
        return normalize_cell_value(float(value))

    if cell_type == xlrd.XL_CELL_DATE:
        try:
            return xlrd.xldate.xldate_as_datetime(value, datemode).isoformat()
        except (xlrd.xldate.XLDateError, ValueError, OverflowError):
            logger.debug(f"Invalid XLS date serial {value!r}, keeping the number")
            return normalize_cell_value(float(value))

    if cell_type == xlrd.XL_CELL_BOOLEAN:
        return bool(value)

    if cell_type == xlrd.XL_CELL_ERROR:
        return error_text_from_code.get(value, f"#ERR{value}")

    return normalize_cell_value(value)


def convert_xlsx_cell(value) -> CellValue:
    """Convert an openpyxl cell value (data_only mode) into a CellValue."""
    if isinstance(value, str) and value == "":
        return None
    return normalize_cell_value(value)
