# sheetport/core/functions/table_shape.py
"""
Table Shape - Header detection for export datasets

A dataset is a sequence of rows handed to the exporter. When its first
row is a mapping with non-positional keys (anything other than 0..n-1),
those keys are rendered as a header row.

Only the first row is inspected; the rest of the dataset is assumed to
share its shape.
"""
import logging
from typing import Any, List, Mapping, Sequence

from sheetport.core.functions.cell_value import CellValue

logger = logging.getLogger("sheetport")


def is_headered_record(record: Any) -> bool:
    """
    Check whether a single row carries column labels as keys.

    Args:
        record: Mapping, list/tuple or scalar

    Returns:
        True for a non-empty mapping whose keys are not exactly 0..n-1
    """
    if not isinstance(record, Mapping) or not record:
        return False
    return list(record.keys()) != list(range(len(record)))


def is_headered_dataset(data: Sequence[Any]) -> bool:
    """
    Check whether a dataset should be exported with a header row.

    Args:
        data: Sequence of rows

    Returns:
        True if the first row is a headered record, False for empty data
    """
    if not data:
        return False
    return is_headered_record(data[0])


def header_row(record: Mapping[Any, Any]) -> List[Any]:
    """Return the header labels of a headered record, in key order."""
    return list(record.keys())


def row_values(row: Any) -> List[CellValue]:
    """
    Return the positional values of a dataset row.

    Mappings contribute their values in insertion order, sequences their
    items. Anything else is a single-cell row.
    """
    if isinstance(row, Mapping):
        return list(row.values())
    if isinstance(row, (list, tuple)):
        return list(row)
    return [row]


__all__ = [
    "is_headered_record",
    "is_headered_dataset",
    "header_row",
    "row_values",
]
