# sheetport/core/exceptions.py
"""
Exceptions - Error taxonomy for spreadsheet import and export

- SpreadsheetError: Base class for every error raised by sheetport
- InputError: The input file is missing or cannot be read
- FileNotReadableError: Raised eagerly, before any codec work
- FormatError: The codec cannot identify, read or write a file
- ConfigurationError: Unknown reader/writer type requested from the codec
- ResponseFinishedError: Write attempted on a response sink that already finished
"""
from typing import Optional


class SpreadsheetError(Exception):
    """Base class for all sheetport errors."""


class InputError(SpreadsheetError):
    """The input file cannot be used."""


class FileNotReadableError(InputError):
    """
    File does not exist or is not readable.

    Attributes:
        path: Offending file path
    """

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"File does not exist or is not readable: {path}")


class FormatError(SpreadsheetError):
    """The codec failed to identify, read or write a spreadsheet format."""


class ConfigurationError(FormatError):
    """No reader or writer is registered for the requested type."""


class ResponseFinishedError(SpreadsheetError):
    """The response sink was already finished."""


__all__ = [
    "SpreadsheetError",
    "InputError",
    "FileNotReadableError",
    "FormatError",
    "ConfigurationError",
    "ResponseFinishedError",
]
