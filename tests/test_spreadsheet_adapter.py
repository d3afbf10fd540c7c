from __future__ import annotations

import logging

import pytest
import xlrd

from sheetport import SpreadsheetAdapter, create_adapter
from sheetport.core.exceptions import (
    ConfigurationError,
    FileNotReadableError,
    FormatError,
    InputError,
)
from sheetport.core.response_sink import BufferedResponseSink
from sheetport.core.spreadsheet_adapter import FORMAT_CSV, FORMAT_EXCEL, get_extension, get_writer_type

PEOPLE = [{"name": "Al", "age": 30}, {"name": "Bo", "age": 25}]


# ============================================================================
# Format resolution
# ============================================================================

def test_extension_and_writer_type_resolution() -> None:
    assert get_extension(FORMAT_CSV) == "csv"
    assert get_writer_type(FORMAT_CSV) == "CSV"
    assert get_extension(FORMAT_EXCEL) == "xls"
    assert get_writer_type(FORMAT_EXCEL) == "Excel5"
    assert get_extension(99) == "unknown"
    assert get_writer_type(99) == "unknown"
    assert SpreadsheetAdapter.get_extension(2) == "csv"
    assert SpreadsheetAdapter.get_writer_type(1) == "Excel5"


# ============================================================================
# Export
# ============================================================================

def test_export_headered_dataset_to_csv(adapter) -> None:
    sink = BufferedResponseSink()
    payload = adapter.export_records(PEOPLE, "people", FORMAT_CSV, sink=sink)

    assert payload == b"name,age\nAl,30\nBo,25\n"
    assert sink.body == payload
    assert sink.finished is True
    assert sink.headers == {
        "Content-Type": "application/csv",
        "Content-Disposition": 'attachment; filename="people.csv"',
        "Cache-Control": "max-age=0",
    }


def test_export_matrix_has_no_header_row(adapter) -> None:
    payload = adapter.export_records([["a", "b"], ["c", "d"]], "plain", sink=BufferedResponseSink())
    assert payload == b"a,b\nc,d\n"


def test_export_positional_mappings_have_no_header_row(adapter) -> None:
    payload = adapter.export_records([{0: "a", 1: "b"}], "plain", sink=BufferedResponseSink())
    assert payload == b"a,b\n"


def test_export_csv_uses_caller_delimiter(adapter) -> None:
    payload = adapter.export_records(PEOPLE[:1], "people", FORMAT_CSV, ";", sink=BufferedResponseSink())
    assert payload == b"name;age\nAl;30\n"


def test_export_null_comparison(adapter) -> None:
    data = [{"a": 0, "b": "x", "c": None}]

    loose = adapter.export_records(data, "n", sink=BufferedResponseSink())
    strict = adapter.export_records(data, "n", strict_null_comparison=True, sink=BufferedResponseSink())

    assert loose == b"a,b,c\n,x,\n"
    assert strict == b"a,b,c\n0,x,\n"


def test_export_excel(adapter) -> None:
    sink = BufferedResponseSink()
    payload = adapter.export_records(PEOPLE, "people", FORMAT_EXCEL, delimiter=";", sink=sink)

    assert sink.headers["Content-Type"] == "application/vnd.ms-excel"
    assert sink.headers["Content-Disposition"] == 'attachment; filename="people.xls"'

    sheet = xlrd.open_workbook(file_contents=payload).sheet_by_index(0)
    assert [sheet.row_values(i) for i in range(sheet.nrows)] == [
        ["name", "age"],
        ["Al", 30.0],
        ["Bo", 25.0],
    ]


def test_export_unknown_format_sends_nothing(recording_factory) -> None:
    adapter = SpreadsheetAdapter(io_factory=recording_factory)
    sink = BufferedResponseSink()

    with pytest.raises(ConfigurationError):
        adapter.export_records(PEOPLE, "people", 99, sink=sink)

    assert recording_factory.calls == ["create_writer"]
    assert sink.headers == {}
    assert sink.body == b""
    assert sink.finished is False


def test_export_codec_failure_sends_nothing(adapter) -> None:
    sink = BufferedResponseSink()
    with pytest.raises(FormatError):
        adapter.export_records(PEOPLE, "people", FORMAT_CSV, delimiter="::", sink=sink)
    assert sink.headers == {}
    assert sink.finished is False


def test_export_empty_data_is_rejected(adapter) -> None:
    with pytest.raises(ValueError):
        adapter.export_records([], "empty", sink=BufferedResponseSink())


def test_export_defaults_to_stdout(adapter, capsysbinary) -> None:
    payload = adapter.export_records([["x"]], "out")
    assert capsysbinary.readouterr().out == payload == b"x\n"


def test_export_with_config_dict() -> None:
    adapter = create_adapter(config={"line_ending": "\r\n"})
    payload = adapter.export_records([["a", "b"]], "crlf", sink=BufferedResponseSink())
    assert payload == b"a,b\r\n"


# ============================================================================
# Import
# ============================================================================

def test_import_missing_file_fails_before_codec(tmp_path, recording_factory) -> None:
    adapter = SpreadsheetAdapter(io_factory=recording_factory)

    with pytest.raises(InputError) as excinfo:
        adapter.import_rows(tmp_path / "missing.csv")

    assert isinstance(excinfo.value, FileNotReadableError)
    assert excinfo.value.path == str(tmp_path / "missing.csv")
    assert recording_factory.calls == []


def test_import_directory_is_not_readable(tmp_path, adapter) -> None:
    with pytest.raises(FileNotReadableError):
        adapter.import_rows(tmp_path)


def test_import_csv_detects_delimiter(write_text, recording_factory) -> None:
    adapter = SpreadsheetAdapter(io_factory=recording_factory)
    path = write_text("people.csv", "name;age\nAl;30\nBo;25\n")

    assert adapter.import_rows(path) == [["name", "age"], ["Al", 30], ["Bo", 25]]
    assert recording_factory.calls == ["identify", "create_reader"]


def test_import_csv_with_explicit_type_skips_identify(write_text, recording_factory) -> None:
    adapter = SpreadsheetAdapter(io_factory=recording_factory)
    path = write_text("people.dat", "name|age\nAl|30\n")

    assert adapter.import_rows(path, "CSV") == [["name", "age"], ["Al", 30]]
    assert recording_factory.calls == ["create_reader"]


def test_import_pads_short_rows(adapter, write_text) -> None:
    path = write_text("short.csv", "a,b,c\n1\n")
    assert adapter.import_rows(path) == [["a", "b", "c"], [1, None, None]]


def test_import_xls(adapter, xls_file) -> None:
    rows = adapter.import_rows(xls_file)
    assert rows[0] == ["name", None, "age", "member", "joined"]
    assert rows[2] == ["Bo", None, 25.5, False, None]


def test_import_xlsx_reads_only_first_sheet(adapter, xlsx_file) -> None:
    assert adapter.import_rows(xlsx_file) == [
        ["name", "age", "city"],
        ["Al", 30, None],
        ["Bo", 25.5, "Köln"],
    ]


def test_import_records_drops_unlabelled_columns(adapter, xls_file) -> None:
    records = adapter.import_records(xls_file)
    assert records == [
        {"name": "Al", "age": 30, "member": True, "joined": "2024-01-02T00:00:00"},
        {"name": "Bo", "age": 25.5, "member": False, "joined": None},
    ]


def test_import_unidentifiable_file(adapter, tmp_path) -> None:
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x00\xff" * 64)
    with pytest.raises(FormatError):
        adapter.import_rows(path)


def test_import_unknown_type(adapter, write_text) -> None:
    with pytest.raises(ConfigurationError):
        adapter.import_rows(write_text("a.csv", "a\n"), "Nope")


# ============================================================================
# Round trips
# ============================================================================

@pytest.mark.parametrize("file_format, extension", [(FORMAT_CSV, "csv"), (FORMAT_EXCEL, "xls")])
def test_export_then_import_restores_records(adapter, tmp_path, file_format, extension) -> None:
    payload = adapter.export_records(PEOPLE, "people", file_format, sink=BufferedResponseSink())
    path = tmp_path / f"people.{extension}"
    path.write_bytes(payload)

    records = adapter.to_records(adapter.import_rows(path))

    assert records == PEOPLE
    assert [list(r) for r in records] == [["name", "age"], ["name", "age"]]


def test_semicolon_round_trip_with_quoting(adapter, tmp_path) -> None:
    data = [{"name": "Smith, Al", "note": 'said "hi"', "ok": True}]
    payload = adapter.export_records(data, "q", FORMAT_CSV, ";", sink=BufferedResponseSink())
    path = tmp_path / "q.csv"
    path.write_bytes(payload)

    assert adapter.import_records(path) == data


# ============================================================================
# Text encodings and line endings
# ============================================================================

def test_import_utf16_tab_separated_text(adapter, tmp_path) -> None:
    path = tmp_path / "unicode.txt"
    path.write_bytes("\ufeffname\tage\r\nAl\t30\r\n".encode("utf-16-le"))

    assert adapter.import_records(path) == [{"name": "Al", "age": 30}]


def test_import_csv_with_cr_line_endings(adapter, tmp_path) -> None:
    path = tmp_path / "mac.csv"
    path.write_bytes(b"name,age\rAl,30\rBo,25\r")

    assert adapter.import_rows(path) == [["name", "age"], ["Al", 30], ["Bo", 25]]


def test_import_uses_configured_input_encoding(write_text) -> None:
    adapter = create_adapter(config={"input_encoding": "cp1252"})
    path = write_text("latin.csv", "name;city\nAl;Köln\n", encoding="cp1252")

    assert adapter.import_records(path) == [{"name": "Al", "city": "Köln"}]


# ============================================================================
# Failure logging
# ============================================================================

class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


def test_export_grid_failure_is_logged_and_sends_nothing(adapter, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="sheetport")
    sink = BufferedResponseSink()

    with pytest.raises(RuntimeError):
        adapter.export_records([["ok", _Unprintable()]], "broken", sink=sink)

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors and "broken.csv" in errors[0].getMessage()
    assert sink.headers == {}
    assert sink.finished is False
