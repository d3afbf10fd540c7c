# sheetport/core/codec/grid.py
"""
Grid - In-memory cell grid shared by readers and writers

Structure:
- Grid: Workbook-level container, exposes the active sheet
- Worksheet: Sparse cell storage with array import/export
- SheetRow: One row of a worksheet, iterates its cells
- Cell: Positioned cell holding a CellValue

Indices are 0-based; A1 coordinates are accepted where a start cell is
given and reported through Cell.coordinate.

Usage Example:
    grid = Grid()
    sheet = grid.get_active_sheet()
    sheet.from_array([["name", "age"], ["Al", 30]])

    for row in sheet.row_iterator():
        values = [cell.value for cell in row.cell_iterator()]
"""
import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from openpyxl.utils.cell import column_index_from_string, coordinate_from_string, get_column_letter

from sheetport.core.functions.cell_value import CellValue, is_loose_null, normalize_cell_value
from sheetport.core.functions.table_shape import row_values

logger = logging.getLogger("sheetport")


class Cell:
    """
    A single positioned cell.

    Attributes:
        row: 0-based row index
        column: 0-based column index
        value: Cell value (None when empty)
    """

    __slots__ = ("row", "column", "value")

    def __init__(self, row: int, column: int, value: CellValue = None):
        self.row = row
        self.column = column
        self.value = value

    @property
    def coordinate(self) -> str:
        """A1-style coordinate of the cell."""
        return f"{get_column_letter(self.column + 1)}{self.row + 1}"

    def __repr__(self) -> str:
        return f"Cell({self.coordinate}={self.value!r})"


class SheetRow:
    """A row of a Worksheet."""

    def __init__(self, worksheet: "Worksheet", row_index: int):
        self._worksheet = worksheet
        self._row_index = row_index

    @property
    def row_index(self) -> int:
        return self._row_index

    def cell_iterator(
        self,
        iterate_only_existing_cells: bool = False,
        start_column: int = 0,
        end_column: Optional[int] = None
    ) -> Iterator[Cell]:
        """
        Iterate the cells of this row in column order.

        Args:
            iterate_only_existing_cells: Skip positions without a stored cell.
                When False every column up to the sheet's highest column
                yields a cell, empty positions yielding Cell(value=None).
            start_column: First column index
            end_column: Last column index, inclusive (None for the highest column)

        Yields:
            Cell objects
        """
        if end_column is None:
            end_column = self._worksheet.highest_column - 1

        for column in range(start_column, end_column + 1):
            cell = self._worksheet.get_cell(self._row_index, column)
            if cell is None:
                if iterate_only_existing_cells:
                    continue
                cell = Cell(self._row_index, column)
            yield cell

    def __repr__(self) -> str:
        return f"SheetRow({self._row_index + 1})"


class Worksheet:
    """
    Sparse cell storage.

    Attributes:
        title: Sheet title
        highest_row: Number of rows up to the last stored cell
        highest_column: Number of columns up to the last stored cell
    """

    def __init__(self, title: str = "Worksheet"):
        self.title = title
        self._cells: Dict[Tuple[int, int], Cell] = {}
        self._highest_row = 0
        self._highest_column = 0

    @property
    def highest_row(self) -> int:
        return self._highest_row

    @property
    def highest_column(self) -> int:
        return self._highest_column

    def set_cell_value(self, row: int, column: int, value: CellValue) -> Cell:
        """Store a value at a 0-based position and return the cell."""
        if row < 0 or column < 0:
            raise IndexError(f"Negative cell position: ({row}, {column})")

        cell = self._cells.get((row, column))
        if cell is None:
            cell = Cell(row, column, value)
            self._cells[(row, column)] = cell
        else:
            cell.value = value

        self._highest_row = max(self._highest_row, row + 1)
        self._highest_column = max(self._highest_column, column + 1)
        return cell

    def get_cell(self, row: int, column: int) -> Optional[Cell]:
        """Return the stored cell at a position, or None."""
        return self._cells.get((row, column))

    def get_cell_value(self, row: int, column: int) -> CellValue:
        cell = self._cells.get((row, column))
        return cell.value if cell is not None else None

    def from_array(
        self,
        source: Sequence[Any],
        null_value: Any = None,
        start_cell: str = "A1",
        strict_null_comparison: bool = False
    ) -> "Worksheet":
        """
        Fill the sheet from a sequence of rows.

        A flat sequence of scalars is treated as a single row. Row values
        are taken positionally (mapping values in insertion order) and
        normalized to CellValue. Values equal to null_value are left unset;
        the column still advances.

        Args:
            source: Sequence of rows
            null_value: Value treated as null
            start_cell: A1 coordinate of the top-left cell
            strict_null_comparison: When True only values identical to
                null_value are skipped; otherwise loose nulls (None, "",
                0, False) are skipped as well when null_value is None

        Returns:
            self
        """
        if not source:
            return self

        if not _is_row(source[-1]):
            source = [source]

        start_row, start_column = parse_start_cell(start_cell)

        for row_offset, row in enumerate(source):
            for column_offset, value in enumerate(row_values(row)):
                if self._is_null(value, null_value, strict_null_comparison):
                    continue
                self.set_cell_value(
                    start_row + row_offset,
                    start_column + column_offset,
                    normalize_cell_value(value),
                )

        return self

    def to_array(self, null_value: Any = None) -> List[List[CellValue]]:
        """Return the full rectangle A1..highest cell as a matrix."""
        return [
            [
                cell.value if cell.value is not None else null_value
                for cell in row.cell_iterator()
            ]
            for row in self.row_iterator()
        ]

    def row_iterator(self, start_row: int = 0, end_row: Optional[int] = None) -> Iterator[SheetRow]:
        """
        Iterate rows in order.

        Args:
            start_row: First row index
            end_row: Last row index, inclusive (None for the highest row)
        """
        if end_row is None:
            end_row = self._highest_row - 1
        for row_index in range(start_row, end_row + 1):
            yield SheetRow(self, row_index)

    @staticmethod
    def _is_null(value: Any, null_value: Any, strict: bool) -> bool:
        if strict:
            return value is null_value
        if null_value is None:
            return is_loose_null(value)
        return value == null_value

    def __repr__(self) -> str:
        return f"Worksheet({self.title!r}, rows={self._highest_row}, columns={self._highest_column})"


class Grid:
    """
    Workbook-level container.

    Only the active sheet (index 0 unless changed) takes part in import
    and export.
    """

    def __init__(self, sheets: Optional[List[Worksheet]] = None, sheet_title: str = "Worksheet"):
        self._sheets = sheets or [Worksheet(sheet_title)]
        self._active_sheet_index = 0

    @property
    def sheet_count(self) -> int:
        return len(self._sheets)

    def get_sheet(self, index: int) -> Worksheet:
        return self._sheets[index]

    def get_active_sheet(self) -> Worksheet:
        return self._sheets[self._active_sheet_index]

    def set_active_sheet_index(self, index: int) -> Worksheet:
        if not 0 <= index < len(self._sheets):
            raise IndexError(f"Sheet index {index} out of range (sheets: {len(self._sheets)})")
        self._active_sheet_index = index
        return self._sheets[index]

    def __repr__(self) -> str:
        return f"Grid(sheets={len(self._sheets)}, active={self._active_sheet_index})"


def parse_start_cell(coordinate: str) -> Tuple[int, int]:
    """Convert an A1 coordinate into 0-based (row, column)."""
    column_letter, row = coordinate_from_string(coordinate)
    return row - 1, column_index_from_string(column_letter) - 1


def _is_row(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


__all__ = [
    "Cell",
    "SheetRow",
    "Worksheet",
    "Grid",
    "parse_start_cell",
]
