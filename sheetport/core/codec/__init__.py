"""
Codec - Spreadsheet format readers and writers

Modules:
- grid: Grid, Worksheet, SheetRow, Cell
- base_codec: BaseReader / BaseWriter interfaces
- csv_codec: CSVReader, CSVWriter
- excel_codec: XLSReader (xlrd), XLSXReader (openpyxl), XLSWriter (xlwt)
- io_factory: IOFactory (identify, create_reader, create_writer)

Helper Modules (subdirectories):
- csv_helper/: Encoding detection, delimiter detection, CSV parsing
- excel_helper/: Cell value conversion
"""

from sheetport.core.codec.grid import Cell, SheetRow, Worksheet, Grid
from sheetport.core.codec.base_codec import BaseReader, BaseWriter
from sheetport.core.codec.csv_codec import CSVReader, CSVWriter
from sheetport.core.codec.excel_codec import XLSReader, XLSXReader, XLSWriter
from sheetport.core.codec.io_factory import (
    TYPE_CSV,
    TYPE_EXCEL5,
    TYPE_EXCEL2007,
    IOFactory,
)

from sheetport.core.codec import csv_helper
from sheetport.core.codec import excel_helper

__all__ = [
    # Grid
    "Cell",
    "SheetRow",
    "Worksheet",
    "Grid",
    # Interfaces
    "BaseReader",
    "BaseWriter",
    # Formats
    "CSVReader",
    "CSVWriter",
    "XLSReader",
    "XLSXReader",
    "XLSWriter",
    # Factory
    "TYPE_CSV",
    "TYPE_EXCEL5",
    "TYPE_EXCEL2007",
    "IOFactory",
    # Helper subpackages
    "csv_helper",
    "excel_helper",
]
