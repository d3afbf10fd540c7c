# sheetport/core/codec/excel_codec.py
"""
Excel Codec - Binary spreadsheet readers and writer

- XLSReader: Legacy binary workbooks (.xls, BIFF) via xlrd
- XLSXReader: Office Open XML workbooks (.xlsx/.xlsm) via openpyxl
- XLSWriter: Legacy binary workbooks via xlwt

Readers load the first sheet only. Empty cells create no stored cell.
"""
import logging
import zipfile
from typing import BinaryIO

import olefile
import xlrd
import xlwt
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from sheetport.core.codec.base_codec import BaseReader, BaseWriter
from sheetport.core.codec.excel_helper import convert_xls_cell, convert_xlsx_cell
from sheetport.core.codec.grid import Grid, Worksheet
from sheetport.core.exceptions import FormatError

logger = logging.getLogger("sheetport")

# BIFF8 limits
XLS_MAX_ROWS = 65536
XLS_MAX_COLUMNS = 256

# OLE streams holding BIFF8 / BIFF5 workbook data
XLS_WORKBOOK_STREAMS = ('Workbook', 'Book')

XLSX_WORKBOOK_PART = 'xl/workbook.xml'


# ============================================================================
# XLS Reader
# ============================================================================

class XLSReader(BaseReader):
    """Reader for legacy binary workbooks."""

    format_type = "Excel5"

    def can_read(self, file_path: str) -> bool:
        if not olefile.isOleFile(file_path):
            return False
        ole = olefile.OleFileIO(file_path)
        try:
            return any(ole.exists(stream) for stream in XLS_WORKBOOK_STREAMS)
        finally:
            ole.close()

    def load(self, file_path: str) -> Grid:
        self.logger.info(f"XLS loading: {file_path}")

        try:
            wb = xlrd.open_workbook(file_path, on_demand=True)
        except OSError:
            raise
        except Exception as e:
            raise FormatError(f"Unable to read XLS file {file_path}: {e}") from e

        try:
            if wb.nsheets == 0:
                return Grid(sheet_title=self.config.sheet_title)

            sheet = wb.sheet_by_index(0)
            worksheet = Worksheet(sheet.name or self.config.sheet_title)

            for row_index in range(sheet.nrows):
                for column_index in range(sheet.row_len(row_index)):
                    value = convert_xls_cell(
                        sheet.cell_value(row_index, column_index),
                        sheet.cell_type(row_index, column_index),
                        wb.datemode,
                    )
                    if value is not None:
                        worksheet.set_cell_value(row_index, column_index, value)

            self.logger.info(
                f"XLS loaded: sheet={sheet.name!r}, rows={sheet.nrows}, columns={sheet.ncols}"
            )
            return Grid([worksheet])

        except xlrd.XLRDError as e:
            raise FormatError(f"Unable to read XLS file {file_path}: {e}") from e
        finally:
            wb.release_resources()


# ============================================================================
# XLSX Reader
# ============================================================================

class XLSXReader(BaseReader):
    """Reader for Office Open XML workbooks (cached formula results, no evaluation)."""

    format_type = "Excel2007"

    def can_read(self, file_path: str) -> bool:
        if not zipfile.is_zipfile(file_path):
            return False
        with zipfile.ZipFile(file_path) as archive:
            return XLSX_WORKBOOK_PART in archive.namelist()

    def load(self, file_path: str) -> Grid:
        self.logger.info(f"XLSX loading: {file_path}")

        try:
            with open(file_path, 'rb') as f:
                wb = load_workbook(f, data_only=True)
        except OSError:
            raise
        except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError, TypeError) as e:
            raise FormatError(f"Unable to read XLSX file {file_path}: {e}") from e

        try:
            if not wb.worksheets:
                return Grid(sheet_title=self.config.sheet_title)

            ws = wb.worksheets[0]
            worksheet = Worksheet(ws.title or self.config.sheet_title)

            for row_index, row in enumerate(ws.iter_rows(values_only=True)):
                for column_index, raw in enumerate(row):
                    value = convert_xlsx_cell(raw)
                    if value is not None:
                        worksheet.set_cell_value(row_index, column_index, value)

            self.logger.info(
                f"XLSX loaded: sheet={ws.title!r}, rows={worksheet.highest_row}, "
                f"columns={worksheet.highest_column}"
            )
            return Grid([worksheet])
        finally:
            wb.close()


# ============================================================================
# XLS Writer
# ============================================================================

class XLSWriter(BaseWriter):
    """Writer for legacy binary workbooks."""

    format_type = "Excel5"

    def save(self, stream: BinaryIO) -> None:
        worksheet = self.grid.get_active_sheet()

        if worksheet.highest_row > XLS_MAX_ROWS or worksheet.highest_column > XLS_MAX_COLUMNS:
            raise FormatError(
                f"Sheet of {worksheet.highest_row}x{worksheet.highest_column} cells exceeds "
                f"the XLS limit of {XLS_MAX_ROWS}x{XLS_MAX_COLUMNS}"
            )

        try:
            wb = xlwt.Workbook(encoding='utf-8')
            sheet = wb.add_sheet(worksheet.title[:31] or self.config.sheet_title)

            for row in worksheet.row_iterator():
                for cell in row.cell_iterator(iterate_only_existing_cells=True):
                    if cell.value is not None:
                        sheet.write(cell.row, cell.column, cell.value)

            wb.save(stream)
        except Exception as e:
            raise FormatError(f"Unable to write XLS: {e}") from e

        self.logger.debug(
            f"XLS written: rows={worksheet.highest_row}, columns={worksheet.highest_column}"
        )


__all__ = [
    "XLS_MAX_ROWS",
    "XLS_MAX_COLUMNS",
    "XLSReader",
    "XLSXReader",
    "XLSWriter",
]
