# sheetport/core/codec/io_factory.py
"""
IO Factory - Format identification and reader/writer creation

Type tags:
- "CSV": Delimited text (read/write)
- "Excel5": Legacy binary workbook, .xls (read/write)
- "Excel2007": Office Open XML workbook, .xlsx (read only)

Usage Example:
    factory = IOFactory()
    file_type = factory.identify("upload.dat")
    reader = factory.create_reader(file_type)
    grid = reader.load("upload.dat")

    writer = factory.create_writer(grid, "CSV")
    writer.save(stream)
"""
import logging
import os
from typing import Dict, List, Optional, Type

from sheetport.core.codec.base_codec import BaseReader, BaseWriter
from sheetport.core.codec.csv_codec import CSVReader, CSVWriter
from sheetport.core.codec.excel_codec import XLSReader, XLSWriter, XLSXReader
from sheetport.core.codec.grid import Grid
from sheetport.core.config import SpreadsheetConfig
from sheetport.core.exceptions import ConfigurationError, FormatError

logger = logging.getLogger("sheetport")

TYPE_CSV = "CSV"
TYPE_EXCEL5 = "Excel5"
TYPE_EXCEL2007 = "Excel2007"

# Probe order when the extension gives no usable hint; CSV accepts almost
# anything and therefore comes last
DEFAULT_READER_TYPES: Dict[str, Type[BaseReader]] = {
    TYPE_EXCEL2007: XLSXReader,
    TYPE_EXCEL5: XLSReader,
    TYPE_CSV: CSVReader,
}

DEFAULT_WRITER_TYPES: Dict[str, Type[BaseWriter]] = {
    TYPE_EXCEL5: XLSWriter,
    TYPE_CSV: CSVWriter,
}

EXTENSION_TYPES: Dict[str, str] = {
    'xlsx': TYPE_EXCEL2007,
    'xlsm': TYPE_EXCEL2007,
    'xltx': TYPE_EXCEL2007,
    'xltm': TYPE_EXCEL2007,
    'xls': TYPE_EXCEL5,
    'xlt': TYPE_EXCEL5,
    'csv': TYPE_CSV,
    'tsv': TYPE_CSV,
    'txt': TYPE_CSV,
}


class IOFactory:
    """
    Creates readers and writers by type tag.

    Args:
        config: SpreadsheetConfig passed to every reader and writer
    """

    def __init__(self, config: Optional[SpreadsheetConfig] = None):
        self._config = config or SpreadsheetConfig()
        self._reader_types: Dict[str, Type[BaseReader]] = dict(DEFAULT_READER_TYPES)
        self._writer_types: Dict[str, Type[BaseWriter]] = dict(DEFAULT_WRITER_TYPES)
        self._logger = logging.getLogger("sheetport.IOFactory")

    @property
    def config(self) -> SpreadsheetConfig:
        return self._config

    @property
    def reader_types(self) -> List[str]:
        return list(self._reader_types)

    @property
    def writer_types(self) -> List[str]:
        return list(self._writer_types)

    def register_reader(self, type_tag: str, reader_class: Type[BaseReader]) -> None:
        self._reader_types[type_tag] = reader_class

    def register_writer(self, type_tag: str, writer_class: Type[BaseWriter]) -> None:
        self._writer_types[type_tag] = writer_class

    def identify(self, file_path: str) -> str:
        """
        Identify the reader type for a file.

        The reader suggested by the file extension is tried first, then
        every registered reader in probe order.

        Args:
            file_path: File path

        Returns:
            Reader type tag

        Raises:
            FormatError: If no reader accepts the file
        """
        ext = os.path.splitext(file_path)[1].lower().lstrip('.')
        guess = EXTENSION_TYPES.get(ext)

        candidates = [guess] if guess in self._reader_types else []
        candidates += [t for t in self._reader_types if t != guess]

        for type_tag in candidates:
            if self._can_read(type_tag, file_path):
                self._logger.debug(f"Identified {file_path} as {type_tag} (ext={ext!r})")
                return type_tag

        raise FormatError(f"Unable to identify a reader for this file: {file_path}")

    def create_reader(self, type_tag: str) -> BaseReader:
        """
        Create a reader for a type tag.

        Raises:
            ConfigurationError: If no reader is registered for the tag
        """
        reader_class = self._reader_types.get(type_tag)
        if reader_class is None:
            raise ConfigurationError(f"No reader found for type {type_tag}")
        return reader_class(self._config)

    def create_writer(self, grid: Grid, type_tag: str) -> BaseWriter:
        """
        Create a writer for a grid and a type tag.

        Raises:
            ConfigurationError: If no writer is registered for the tag
        """
        writer_class = self._writer_types.get(type_tag)
        if writer_class is None:
            raise ConfigurationError(f"No writer found for type {type_tag}")
        return writer_class(grid, self._config)

    def _can_read(self, type_tag: str, file_path: str) -> bool:
        try:
            return self._reader_types[type_tag](self._config).can_read(file_path)
        except OSError:
            raise
        except Exception as e:
            self._logger.debug(f"{type_tag} probe failed for {file_path}: {e}")
            return False

    def __repr__(self) -> str:
        return f"IOFactory(readers={self.reader_types}, writers={self.writer_types})"


__all__ = [
    "TYPE_CSV",
    "TYPE_EXCEL5",
    "TYPE_EXCEL2007",
    "EXTENSION_TYPES",
    "IOFactory",
]
