# sheetport/core/functions/record_keyer.py
"""
Record Keyer - Positional rows to header-keyed records

Transforms an imported matrix into a list of dictionaries. The keys are
taken from the first row of the matrix.

Column policy:
- Header cell None or "": the column is dropped from every record
- Data row wider than the header row: the extra columns are dropped
- Data row shorter than the header row: only the present columns are keyed
- Duplicate header labels: the right-most column wins, the key keeps its
  first position
"""
import logging
from typing import Dict, List, Optional, Sequence

from sheetport.core.functions.cell_value import CellValue, cell_to_text

logger = logging.getLogger("sheetport")

Record = Dict[str, CellValue]


def header_key(header_value: CellValue) -> Optional[str]:
    """
    Convert a header cell into a record key.

    Args:
        header_value: Cell value from the header row

    Returns:
        Key string, or None when the column must be dropped
    """
    if header_value is None or header_value == "":
        return None
    if isinstance(header_value, str):
        return header_value
    return cell_to_text(header_value)


def to_records(rows: Sequence[Sequence[CellValue]]) -> List[Record]:
    """
    Transform a matrix into associative records.

    Args:
        rows: Matrix whose first row is the header

    Returns:
        One record per data row (the header row itself is not emitted)
    """
    if len(rows) < 2:
        return []

    header = rows[0]
    keys = [header_key(value) for value in header]

    results: List[Record] = []
    dropped = 0
    for row in rows[1:]:
        record: Record = {}
        for index, value in enumerate(row):
            key = keys[index] if index < len(keys) else None
            if key is None:
                dropped += 1
                continue
            record[key] = value
        results.append(record)

    if dropped:
        logger.debug(f"Dropped {dropped} cells without a header label")

    return results


class RecordKeyer:
    """
    Keys positional rows by their header row.

    Example:
        >>> RecordKeyer().to_records([["name", "age"], ["Al", 30]])
        [{'name': 'Al', 'age': 30}]
    """

    def to_records(self, rows: Sequence[Sequence[CellValue]]) -> List[Record]:
        """Transform a matrix into associative records."""
        return to_records(rows)


__all__ = [
    "Record",
    "RecordKeyer",
    "header_key",
    "to_records",
]
