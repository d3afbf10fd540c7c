# sheetport/core/codec/csv_codec.py
"""
CSV Codec - Delimited text reader and writer

CSVReader:
- Decodes the file (BOM, configured encoding, chardet, candidates)
- Splits it with the configured delimiter and enclosure
- Binds field text to typed values; empty fields create no cell

CSVWriter:
- Renders the active sheet's full rectangle, empty cells as empty fields
- Configurable delimiter, enclosure, line ending and UTF-8 BOM
"""
import csv
import io
import logging
from typing import BinaryIO, Optional

from sheetport.core.codec.base_codec import BaseReader, BaseWriter
from sheetport.core.codec.csv_helper import (
    UTF8_BOM,
    CSVEncoder,
    parse_csv_content,
)
from sheetport.core.codec.csv_helper.csv_constants import TEXT_SNIFF_SIZE
from sheetport.core.codec.grid import Grid, Worksheet
from sheetport.core.config import SpreadsheetConfig
from sheetport.core.exceptions import FormatError
from sheetport.core.functions.cell_value import bind_value, cell_to_text

logger = logging.getLogger("sheetport")


class CSVReader(BaseReader):
    """Reader for delimited text files."""

    format_type = "CSV"

    def __init__(self, config: Optional[SpreadsheetConfig] = None):
        super().__init__(config)
        self._delimiter = self.config.default_delimiter
        self._enclosure = self.config.enclosure
        self._input_encoding = self.config.input_encoding

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def set_delimiter(self, delimiter: str) -> "CSVReader":
        self._delimiter = delimiter
        return self

    def set_enclosure(self, enclosure: str) -> "CSVReader":
        self._enclosure = enclosure
        return self

    def set_input_encoding(self, encoding: Optional[str]) -> "CSVReader":
        self._input_encoding = encoding
        return self

    def can_read(self, file_path: str) -> bool:
        """Delimited text is anything without NUL bytes in its first block."""
        with open(file_path, 'rb') as f:
            head = f.read(TEXT_SNIFF_SIZE)
        if head.startswith((b'\xff\xfe', b'\xfe\xff')):
            return True
        return b'\x00' not in head

    def load(self, file_path: str) -> Grid:
        self.logger.info(f"CSV loading: {file_path}, delimiter={self._delimiter!r}")

        with open(file_path, 'rb') as f:
            data = f.read()

        content, encoding = CSVEncoder(self.config.encoding).decode(data, self._input_encoding)

        try:
            rows = parse_csv_content(content, self._delimiter, self._enclosure)
        except csv.Error as e:
            raise FormatError(f"Malformed CSV file {file_path}: {e}") from e

        worksheet = Worksheet(self.config.sheet_title)
        for row_index, fields in enumerate(rows):
            for column_index, text in enumerate(fields):
                value = bind_value(text)
                if value is None:
                    continue
                worksheet.set_cell_value(row_index, column_index, value)

        self.logger.info(
            f"CSV loaded: encoding={encoding}, rows={len(rows)}, "
            f"columns={worksheet.highest_column}"
        )
        return Grid([worksheet])


class CSVWriter(BaseWriter):
    """Writer for delimited text files."""

    format_type = "CSV"

    def __init__(self, grid: Grid, config: Optional[SpreadsheetConfig] = None):
        super().__init__(grid, config)
        self._delimiter = self.config.default_delimiter
        self._enclosure = self.config.enclosure
        self._line_ending = self.config.line_ending
        self._use_bom = self.config.use_bom

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def set_delimiter(self, delimiter: str) -> "CSVWriter":
        self._delimiter = delimiter
        return self

    def set_enclosure(self, enclosure: str) -> "CSVWriter":
        self._enclosure = enclosure
        return self

    def set_line_ending(self, line_ending: str) -> "CSVWriter":
        self._line_ending = line_ending
        return self

    def set_use_bom(self, use_bom: bool) -> "CSVWriter":
        self._use_bom = use_bom
        return self

    def save(self, stream: BinaryIO) -> None:
        worksheet = self.grid.get_active_sheet()
        buffer = io.StringIO(newline='')

        try:
            writer = csv.writer(
                buffer,
                delimiter=self._delimiter,
                quotechar=self._enclosure,
                lineterminator=self._line_ending,
            )
            for row in worksheet.row_iterator():
                writer.writerow([cell_to_text(cell.value) for cell in row.cell_iterator()])
            payload = buffer.getvalue().encode(self.config.output_encoding)
        except (csv.Error, TypeError, UnicodeEncodeError) as e:
            raise FormatError(f"Unable to write CSV: {e}") from e

        if self._use_bom:
            stream.write(UTF8_BOM)
        stream.write(payload)

        self.logger.debug(
            f"CSV written: rows={worksheet.highest_row}, delimiter={self._delimiter!r}, "
            f"bytes={len(payload)}"
        )


__all__ = ["CSVReader", "CSVWriter"]
