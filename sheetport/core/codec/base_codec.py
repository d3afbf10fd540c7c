# sheetport/core/codec/base_codec.py
"""
Base Codec - Abstract reader and writer interfaces

Every spreadsheet format implements a BaseReader (file -> Grid) and/or a
BaseWriter (Grid -> bytes). Instances are created per call by IOFactory
and share the adapter's SpreadsheetConfig.

Usage Example:
    class MyReader(BaseReader):
        format_type = "MyFormat"

        def can_read(self, file_path: str) -> bool:
            ...

        def load(self, file_path: str) -> Grid:
            ...
"""
import logging
from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from sheetport.core.codec.grid import Grid
from sheetport.core.config import SpreadsheetConfig

logger = logging.getLogger("sheetport")


class BaseReader(ABC):
    """
    Abstract base class for format readers.

    Attributes:
        format_type: Reader type tag (e.g. "CSV", "Excel5")
        config: SpreadsheetConfig shared with the adapter
        logger: Logging instance
    """

    format_type: str = ""

    def __init__(self, config: Optional[SpreadsheetConfig] = None):
        self._config = config or SpreadsheetConfig()
        self._logger = logging.getLogger(f"sheetport.{self.__class__.__name__}")

    @property
    def config(self) -> SpreadsheetConfig:
        return self._config

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @abstractmethod
    def can_read(self, file_path: str) -> bool:
        """
        Check whether the file looks like this reader's format.

        Args:
            file_path: File path

        Returns:
            True if load() is expected to succeed
        """
        pass

    @abstractmethod
    def load(self, file_path: str) -> Grid:
        """
        Load the file into a Grid.

        Args:
            file_path: File path

        Returns:
            Grid whose active sheet is the file's first sheet

        Raises:
            FormatError: If the file cannot be parsed
        """
        pass

    def set_delimiter(self, delimiter: str) -> "BaseReader":
        """Set the field delimiter. Only delimited-text readers support it."""
        raise NotImplementedError(f"{self.__class__.__name__} has no delimiter")


class BaseWriter(ABC):
    """
    Abstract base class for format writers.

    Attributes:
        format_type: Writer type tag (e.g. "CSV", "Excel5")
        grid: Grid to encode
        config: SpreadsheetConfig shared with the adapter
    """

    format_type: str = ""

    def __init__(self, grid: Grid, config: Optional[SpreadsheetConfig] = None):
        self._grid = grid
        self._config = config or SpreadsheetConfig()
        self._logger = logging.getLogger(f"sheetport.{self.__class__.__name__}")

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def config(self) -> SpreadsheetConfig:
        return self._config

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @abstractmethod
    def save(self, stream: BinaryIO) -> None:
        """
        Encode the grid's active sheet into a binary stream.

        Args:
            stream: Writable binary stream

        Raises:
            FormatError: If the grid cannot be encoded in this format
        """
        pass

    def set_delimiter(self, delimiter: str) -> "BaseWriter":
        """Set the field delimiter. Only delimited-text writers support it."""
        raise NotImplementedError(f"{self.__class__.__name__} has no delimiter")


__all__ = ["BaseReader", "BaseWriter"]
