# sheetport/core/functions/cell_value.py
"""
Cell Value - Scalar cell values and their text form

Every cell read from or written to a sheet holds a CellValue:
str, int, float, bool or None (absent).

Module Components:
- CellValue: Closed union of supported scalar types
- normalize_cell_value: Coerce library values (dates, Decimals, ...) into CellValue
- bind_value: Bind CSV field text to a typed CellValue
- cell_to_text: Render a CellValue as CSV field text
- is_loose_null: Loose null check used by non-strict array import
"""
import datetime
import logging
import re
from decimal import Decimal
from typing import Any, Union

logger = logging.getLogger("sheetport")

CellValue = Union[str, int, float, bool, None]

# Optional sign, digits with optional fraction (or fraction only), optional exponent
_NUMERIC_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\d*\.\d+)([Ee][+-]?\d{1,3})?$')

_BOOLEAN_TEXT = {"TRUE": True, "FALSE": False}


def normalize_cell_value(value: Any) -> CellValue:
    """
    Coerce a value produced by a spreadsheet library into a CellValue.

    - date/datetime/time: ISO-8601 string
    - Decimal: int when integral, float otherwise
    - integral float: int
    - bytes: decoded as UTF-8 (replacing invalid sequences)
    - anything else unknown: str()

    Args:
        value: Raw library value

    Returns:
        Normalized cell value
    """
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        return value
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='replace')
    return str(value)


def bind_value(text: str) -> CellValue:
    """
    Bind a delimited-text field to a typed cell value.

    Empty text is absent, numeric text becomes int/float unless it carries
    a leading zero ("007" stays text), TRUE/FALSE become booleans.

    Args:
        text: Raw field text

    Returns:
        Typed cell value
    """
    if text == "":
        return None

    boolean = _BOOLEAN_TEXT.get(text.upper())
    if boolean is not None:
        return boolean

    if _NUMERIC_PATTERN.match(text) and not _has_leading_zero(text):
        if re.search(r'[.eE]', text):
            return float(text)
        return int(text)

    return text


def _has_leading_zero(text: str) -> bool:
    digits = text.lstrip('+-')
    integer_part = re.split(r'[.eE]', digits, maxsplit=1)[0]
    return len(integer_part) > 1 and integer_part.startswith('0')


def cell_to_text(value: CellValue) -> str:
    """
    Render a cell value as delimited-text field content.

    Args:
        value: Cell value

    Returns:
        Field text ("" for None, "TRUE"/"FALSE" for booleans,
        integral floats without a trailing ".0")
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def is_loose_null(value: Any) -> bool:
    """
    Check whether a value compares loosely equal to null.

    None, "", 0, 0.0 and False are loose nulls. "0" is not.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (bool, int, float, Decimal)):
        return value == 0
    return False


__all__ = [
    "CellValue",
    "normalize_cell_value",
    "bind_value",
    "cell_to_text",
    "is_loose_null",
]
