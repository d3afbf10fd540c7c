# sheetport/core/__init__.py
"""
sheetport Core Module

Spreadsheet import/export core.

Module Structure:
- spreadsheet_adapter: SpreadsheetAdapter (export_records, import_rows, ...)
- config: SpreadsheetConfig
- exceptions: Error taxonomy
- response_sink: Download response destinations
- codec/: Format readers/writers and the IOFactory
- functions/: Cell values, table shape, record keying, encoding

Usage Example:
    from sheetport.core import SpreadsheetAdapter

    adapter = SpreadsheetAdapter()
    rows = adapter.import_rows("upload.xls")
"""

from sheetport.core.spreadsheet_adapter import (
    ExportFormat,
    FORMAT_EXCEL,
    FORMAT_CSV,
    SpreadsheetAdapter,
    create_adapter,
)
from sheetport.core.config import SpreadsheetConfig
from sheetport.core.exceptions import (
    SpreadsheetError,
    InputError,
    FileNotReadableError,
    FormatError,
    ConfigurationError,
    ResponseFinishedError,
)
from sheetport.core.response_sink import (
    ResponseSink,
    BufferedResponseSink,
    StreamResponseSink,
)

from sheetport.core import codec
from sheetport.core import functions

__all__ = [
    # Adapter
    "ExportFormat",
    "FORMAT_EXCEL",
    "FORMAT_CSV",
    "SpreadsheetAdapter",
    "create_adapter",
    # Config
    "SpreadsheetConfig",
    # Errors
    "SpreadsheetError",
    "InputError",
    "FileNotReadableError",
    "FormatError",
    "ConfigurationError",
    "ResponseFinishedError",
    # Sinks
    "ResponseSink",
    "BufferedResponseSink",
    "StreamResponseSink",
    # Subpackages
    "codec",
    "functions",
]
