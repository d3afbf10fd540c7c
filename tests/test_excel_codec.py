from __future__ import annotations

import io

import pytest
import xlrd

from sheetport.core.codec.excel_codec import XLSReader, XLSWriter, XLSXReader
from sheetport.core.codec.grid import Grid
from sheetport.core.exceptions import FormatError


def test_xls_reader_loads_first_sheet_with_typed_values(xls_file) -> None:
    grid = XLSReader().load(str(xls_file))
    sheet = grid.get_active_sheet()

    assert sheet.title == "People"
    assert sheet.to_array() == [
        ["name", None, "age", "member", "joined"],
        ["Al", None, 30, True, "2024-01-02T00:00:00"],
        ["Bo", None, 25.5, False, None],
    ]
    assert type(sheet.get_cell_value(1, 2)) is int


def test_xls_reader_can_read(xls_file, xlsx_file, write_text) -> None:
    reader = XLSReader()
    assert reader.can_read(str(xls_file)) is True
    assert reader.can_read(str(xlsx_file)) is False
    assert reader.can_read(str(write_text("a.csv", "a,b\n"))) is False


def test_xls_reader_rejects_corrupt_file(tmp_path) -> None:
    path = tmp_path / "broken.xls"
    path.write_bytes(b"not a workbook at all")
    with pytest.raises(FormatError):
        XLSReader().load(str(path))


def test_xlsx_reader_loads_first_sheet(xlsx_file) -> None:
    sheet = XLSXReader().load(str(xlsx_file)).get_active_sheet()

    assert sheet.title == "People"
    assert sheet.to_array() == [
        ["name", "age", "city"],
        ["Al", 30, None],
        ["Bo", 25.5, "Köln"],
    ]


def test_xlsx_reader_can_read(xls_file, xlsx_file) -> None:
    assert XLSXReader().can_read(str(xlsx_file)) is True
    assert XLSXReader().can_read(str(xls_file)) is False


def test_xls_writer_output_is_readable_by_xlrd() -> None:
    grid = Grid(sheet_title="Export")
    grid.get_active_sheet().from_array([["name", "age", "member"], ["Al", 30, True], ["Bo", 2.5, None]])

    stream = io.BytesIO()
    XLSWriter(grid).save(stream)

    book = xlrd.open_workbook(file_contents=stream.getvalue())
    sheet = book.sheet_by_index(0)
    assert sheet.name == "Export"
    assert sheet.row_values(0) == ["name", "age", "member"]
    assert sheet.row_values(1) == ["Al", 30.0, 1]
    assert sheet.cell_type(1, 2) == xlrd.XL_CELL_BOOLEAN
    assert sheet.cell_value(2, 1) == 2.5


def test_xls_writer_rejects_sheets_beyond_format_limits() -> None:
    grid = Grid()
    grid.get_active_sheet().set_cell_value(0, 256, "too wide")
    with pytest.raises(FormatError):
        XLSWriter(grid).save(io.BytesIO())
