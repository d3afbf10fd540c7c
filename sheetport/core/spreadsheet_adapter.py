# sheetport/core/spreadsheet_adapter.py
"""SpreadsheetAdapter - Spreadsheet Import/Export Class

Main entry point of the sheetport library. Converts in-memory datasets
into downloadable CSV/XLS files and reads CSV/XLS/XLSX files back into
row matrices or header-keyed records.

Usage Example:
    from sheetport import SpreadsheetAdapter
    from sheetport.core.response_sink import BufferedResponseSink

    adapter = SpreadsheetAdapter()

    # Export (headers taken from the record keys)
    sink = BufferedResponseSink()
    adapter.export_records(
        [{"name": "Al", "age": 30}, {"name": "Bo", "age": 25}],
        "people",
        SpreadsheetAdapter.FORMAT_CSV,
        delimiter=";",
        sink=sink,
    )

    # Import
    rows = adapter.import_rows("people.csv")
    records = adapter.to_records(rows)
"""

import io
import logging
import os
import traceback
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from sheetport.core.codec.grid import Grid
from sheetport.core.codec.csv_helper import DELIMITER_NAMES, detect_delimiter_in_file
from sheetport.core.codec.io_factory import TYPE_CSV, TYPE_EXCEL5, IOFactory
from sheetport.core.config import SpreadsheetConfig, resolve_config
from sheetport.core.exceptions import FileNotReadableError, SpreadsheetError
from sheetport.core.functions.cell_value import CellValue
from sheetport.core.functions.record_keyer import Record, to_records
from sheetport.core.functions.table_shape import header_row, is_headered_dataset
from sheetport.core.response_sink import ResponseSink, StreamResponseSink

logger = logging.getLogger("sheetport")

Row = List[CellValue]


class ExportFormat(IntEnum):
    """Export format codes"""
    EXCEL = 1
    CSV = 2


FORMAT_EXCEL = ExportFormat.EXCEL
FORMAT_CSV = ExportFormat.CSV

EXTENSIONS = {
    ExportFormat.EXCEL: "xls",
    ExportFormat.CSV: "csv",
}

WRITER_TYPES = {
    ExportFormat.EXCEL: TYPE_EXCEL5,
    ExportFormat.CSV: TYPE_CSV,
}

CONTENT_TYPES = {
    ExportFormat.EXCEL: "application/vnd.ms-excel",
    ExportFormat.CSV: "application/csv",
}

UNKNOWN = "unknown"


def get_extension(file_format: int) -> str:
    """Return the file extension for an export format ("unknown" if not recognized)."""
    return EXTENSIONS.get(file_format, UNKNOWN)


def get_writer_type(file_format: int) -> str:
    """Return the writer type tag for an export format ("unknown" if not recognized)."""
    return WRITER_TYPES.get(file_format, UNKNOWN)


class SpreadsheetAdapter:
    """
    sheetport Main Spreadsheet Class

    Every call builds its own Grid; the adapter itself only holds the
    configuration and the IOFactory, so one instance can serve
    independent calls.

    Attributes:
        config: SpreadsheetConfig instance
        io_factory: IOFactory used to identify files and create readers/writers

    Example:
        >>> adapter = SpreadsheetAdapter()
        >>> rows = adapter.import_rows("upload.csv")
        >>> records = adapter.to_records(rows)
    """

    FORMAT_EXCEL = ExportFormat.EXCEL
    FORMAT_CSV = ExportFormat.CSV

    def __init__(
        self,
        config: Optional[Union[SpreadsheetConfig, Dict[str, Any]]] = None,
        io_factory: Optional[IOFactory] = None
    ):
        """
        Initialize SpreadsheetAdapter.

        Args:
            config: SpreadsheetConfig, configuration dictionary, or None for defaults
            io_factory: Codec factory (default: IOFactory built from config)
        """
        self._config = resolve_config(config)
        self._io_factory = io_factory or IOFactory(self._config)
        self._logger = logging.getLogger("sheetport.SpreadsheetAdapter")

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def config(self) -> SpreadsheetConfig:
        """Current configuration."""
        return self._config

    @property
    def io_factory(self) -> IOFactory:
        """Codec factory."""
        return self._io_factory

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    # =========================================================================
    # Public Methods - Export
    # =========================================================================

    def export_records(
        self,
        data: Union[Sequence[Any], Mapping[Any, Any]],
        filename: str,
        file_format: int = FORMAT_CSV,
        delimiter: str = ",",
        strict_null_comparison: bool = False,
        sink: Optional[ResponseSink] = None
    ) -> bytes:
        """
        Export a dataset as a downloadable spreadsheet file.

        If the first element of data is a mapping with non-positional keys,
        its keys are written as a header row and every element follows from
        the second row. Otherwise every element is written from the first row.

        The file is encoded completely before the sink is touched, so a
        failure leaves the sink without headers or body. On success the sink
        receives the download headers and the file, then is finished.

        Args:
            data: Non-empty sequence of rows (mappings or lists)
            filename: File name without extension
            file_format: FORMAT_CSV or FORMAT_EXCEL
            delimiter: CSV field delimiter
            strict_null_comparison: Only skip None cells (otherwise "", 0
                and False are left empty too)
            sink: Response sink (default: StreamResponseSink on stdout)

        Returns:
            Encoded file bytes

        Raises:
            ValueError: If data is empty
            ConfigurationError: If file_format is not recognized
            FormatError: If the codec cannot encode the data
        """
        rows = list(data.values()) if isinstance(data, Mapping) else list(data)
        if not rows:
            raise ValueError("No data to export")

        full_filename = f"{filename}.{get_extension(file_format)}"
        self._logger.info(f"Exporting {len(rows)} rows to {full_filename}")

        try:
            grid = self._build_grid(rows, strict_null_comparison)
            payload = self._encode(grid, file_format, delimiter)
        except Exception as e:
            self._logger.error(f"Error exporting {full_filename}: {e}")
            self._logger.debug(traceback.format_exc())
            raise

        if sink is None:
            sink = StreamResponseSink()
        self._send(sink, payload, full_filename, file_format)

        self._logger.info(f"Export completed: {full_filename}, {len(payload)} bytes")
        return payload

    # =========================================================================
    # Public Methods - Import
    # =========================================================================

    def import_rows(
        self,
        filename: Union[str, Path],
        input_file_type: Optional[str] = None
    ) -> List[Row]:
        """
        Read the first sheet of a spreadsheet file into a row matrix.

        Args:
            filename: File path
            input_file_type: Reader type tag ("CSV", "Excel5", "Excel2007");
                identified from the file when None

        Returns:
            List of rows, each padded with None up to the sheet's widest row

        Raises:
            FileNotReadableError: If the file does not exist or is not readable
            FormatError: If the file cannot be identified or parsed
        """
        file_path = str(filename)

        if not self.is_readable(file_path):
            raise FileNotReadableError(file_path)

        try:
            if input_file_type is None:
                input_file_type = self._io_factory.identify(file_path)

            self._logger.info(f"Importing {file_path} (type={input_file_type})")

            reader = self._io_factory.create_reader(input_file_type)

            if input_file_type == TYPE_CSV:
                reader.set_delimiter(self.detect_delimiter(file_path))

            grid = reader.load(file_path)

        except (SpreadsheetError, OSError) as e:
            self._logger.error(f"Error importing {file_path}: {e}")
            self._logger.debug(traceback.format_exc())
            raise

        worksheet = grid.get_active_sheet()

        rows: List[Row] = []
        for sheet_row in worksheet.row_iterator():
            row: Row = []
            for cell in sheet_row.cell_iterator(iterate_only_existing_cells=False):
                if cell is not None:
                    row.append(cell.value)
            rows.append(row)

        self._logger.info(f"Import completed: {file_path}, {len(rows)} rows")
        return rows

    def import_records(
        self,
        filename: Union[str, Path],
        input_file_type: Optional[str] = None
    ) -> List[Record]:
        """Read a spreadsheet file and key its rows by the header row."""
        return self.to_records(self.import_rows(filename, input_file_type))

    # =========================================================================
    # Public Methods - Utilities
    # =========================================================================

    @staticmethod
    def to_records(rows: Sequence[Sequence[CellValue]]) -> List[Record]:
        """
        Transform imported rows into records keyed by the first row.

        Columns with an empty header, and columns beyond the header row's
        width, are dropped.
        """
        return to_records(rows)

    def detect_delimiter(self, csv_file: Union[str, Path]) -> str:
        """
        Guess the delimiter of a CSV file from its first line.

        The quality of the result depends on the values in the first line;
        it might not be correct in every case.
        """
        delimiter = detect_delimiter_in_file(
            str(csv_file),
            candidates=self._config.delimiter_candidates,
            enclosure=self._config.enclosure,
            config=self._config.encoding,
            preferred_encoding=self._config.input_encoding,
        )
        self._logger.info(f"CSV delimiter detected: {DELIMITER_NAMES.get(delimiter, repr(delimiter))}")
        return delimiter

    @staticmethod
    def get_extension(file_format: int) -> str:
        return get_extension(file_format)

    @staticmethod
    def get_writer_type(file_format: int) -> str:
        return get_writer_type(file_format)

    @staticmethod
    def is_readable(file_path: str) -> bool:
        return os.path.isfile(file_path) and os.access(file_path, os.R_OK)

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _build_grid(self, rows: List[Any], strict_null_comparison: bool) -> Grid:
        grid = Grid(sheet_title=self._config.sheet_title)
        worksheet = grid.get_active_sheet()

        if is_headered_dataset(rows):
            worksheet.from_array([header_row(rows[0])], None, "A1", strict_null_comparison)
            worksheet.from_array(rows, None, "A2", strict_null_comparison)
        else:
            worksheet.from_array(rows, None, "A1", strict_null_comparison)

        return grid

    def _encode(self, grid: Grid, file_format: int, delimiter: str) -> bytes:
        writer = self._io_factory.create_writer(grid, get_writer_type(file_format))
        if file_format == FORMAT_CSV:
            writer.set_delimiter(delimiter)

        buffer = io.BytesIO()
        writer.save(buffer)
        return buffer.getvalue()

    def _send(self, sink: ResponseSink, payload: bytes, filename: str, file_format: int) -> None:
        sink.set_header("Content-Type", CONTENT_TYPES.get(file_format, CONTENT_TYPES[FORMAT_CSV]))
        sink.set_header("Content-Disposition", f'attachment; filename="{filename}"')
        sink.set_header("Cache-Control", "max-age=0")
        sink.write(payload)
        sink.finish()

    def __repr__(self) -> str:
        return f"SpreadsheetAdapter(io_factory={self._io_factory!r})"


# === Module-level Convenience Functions ===

def create_adapter(
    config: Optional[Union[SpreadsheetConfig, Dict[str, Any]]] = None,
    io_factory: Optional[IOFactory] = None
) -> SpreadsheetAdapter:
    """
    Create a SpreadsheetAdapter instance.

    Example:
        >>> adapter = create_adapter()
        >>> adapter = create_adapter(config={"line_ending": "\\r\\n", "use_bom": True})
    """
    return SpreadsheetAdapter(config=config, io_factory=io_factory)


__all__ = [
    "ExportFormat",
    "FORMAT_EXCEL",
    "FORMAT_CSV",
    "CONTENT_TYPES",
    "get_extension",
    "get_writer_type",
    "SpreadsheetAdapter",
    "create_adapter",
]
