from __future__ import annotations

import datetime
from pathlib import Path
from typing import Callable, List

import pytest
import xlwt
from openpyxl import Workbook

from sheetport.core.codec.io_factory import IOFactory
from sheetport.core.spreadsheet_adapter import SpreadsheetAdapter


class RecordingIOFactory(IOFactory):
    """IOFactory that records which codec entry points were used."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls: List[str] = []

    def identify(self, file_path):
        self.calls.append("identify")
        return super().identify(file_path)

    def create_reader(self, type_tag):
        self.calls.append("create_reader")
        return super().create_reader(type_tag)

    def create_writer(self, grid, type_tag):
        self.calls.append("create_writer")
        return super().create_writer(grid, type_tag)


@pytest.fixture
def adapter() -> SpreadsheetAdapter:
    return SpreadsheetAdapter()


@pytest.fixture
def recording_factory() -> RecordingIOFactory:
    return RecordingIOFactory()


@pytest.fixture
def write_text(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, content: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path

    return _write


@pytest.fixture
def xls_file(tmp_path: Path) -> Path:
    """Legacy binary workbook with a sparse header row and typed values."""
    wb = xlwt.Workbook()
    sheet = wb.add_sheet("People")
    date_style = xlwt.easyxf(num_format_str="YYYY-MM-DD")

    sheet.write(0, 0, "name")
    sheet.write(0, 2, "age")
    sheet.write(0, 3, "member")
    sheet.write(0, 4, "joined")

    sheet.write(1, 0, "Al")
    sheet.write(1, 2, 30)
    sheet.write(1, 3, True)
    sheet.write(1, 4, datetime.date(2024, 1, 2), date_style)

    sheet.write(2, 0, "Bo")
    sheet.write(2, 2, 25.5)
    sheet.write(2, 3, False)

    second = wb.add_sheet("Ignored")
    second.write(0, 0, "not imported")

    path = tmp_path / "people.xls"
    wb.save(str(path))
    return path


@pytest.fixture
def xlsx_file(tmp_path: Path) -> Path:
    """Office Open XML workbook with two sheets."""
    wb = Workbook()
    ws = wb.active
    ws.title = "People"
    ws.append(["name", "age", "city"])
    ws.append(["Al", 30, None])
    ws.append(["Bo", 25.5, "Köln"])

    other = wb.create_sheet("Ignored")
    other.append(["not imported"])

    path = tmp_path / "people.xlsx"
    wb.save(str(path))
    return path
