# sheetport/__init__.py
"""
sheetport Library

Converts CSV and Excel spreadsheet files to and from in-memory rows and
records.

Package Structure:
- core: Spreadsheet import/export core module
    - SpreadsheetAdapter: Main import/export class
    - codec: CSV/XLS/XLSX readers and writers
    - functions: Delimiter-independent table logic

Usage:
    from sheetport import SpreadsheetAdapter

    adapter = SpreadsheetAdapter()
    records = adapter.import_records("upload.csv")
    adapter.export_records(records, "download", SpreadsheetAdapter.FORMAT_EXCEL)
"""

__version__ = "0.1.0"

from sheetport.core import (
    FORMAT_CSV,
    FORMAT_EXCEL,
    SpreadsheetAdapter,
    SpreadsheetConfig,
    create_adapter,
)

from sheetport import core

__all__ = [
    "__version__",
    # Core classes
    "SpreadsheetAdapter",
    "SpreadsheetConfig",
    "create_adapter",
    "FORMAT_CSV",
    "FORMAT_EXCEL",
    # Subpackages
    "core",
]
