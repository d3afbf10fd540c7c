from __future__ import annotations

import pytest

from sheetport.core.codec.csv_helper import (
    count_fields,
    detect_delimiter,
    detect_delimiter_in_file,
    read_first_line,
)
from sheetport.core.functions.encoding import EncodingConfig


@pytest.mark.parametrize(
    "line, expected",
    [
        ("a;b,c;d", ";"),
        ("a,b,c", ","),
        ("a\tb\tc", "\t"),
        ("a|b|c|d", "|"),
        ("a,b;c;d|e", ";"),
    ],
)
def test_detect_delimiter_picks_highest_field_count(line, expected) -> None:
    assert detect_delimiter(line) == expected


def test_detect_delimiter_ties_go_to_first_candidate() -> None:
    assert detect_delimiter("a;b,c") == ";"
    assert detect_delimiter("a,b|c") == ","
    assert detect_delimiter("a\tb|c") == "\t"


def test_detect_delimiter_without_any_candidate_returns_first() -> None:
    assert detect_delimiter("single column") == ";"


def test_detect_delimiter_empty_line_counts_one_field_everywhere() -> None:
    assert count_fields("", ",") == 1
    assert detect_delimiter("") == ";"


def test_detect_delimiter_respects_quoting() -> None:
    # the semicolon sits inside a quoted field
    assert count_fields('"a;b;c",d,e', ";") == 1
    assert detect_delimiter('"a;b;c",d,e') == ","


def test_detect_delimiter_custom_candidates() -> None:
    assert detect_delimiter("a:b:c,d", candidates=(",", ":")) == ":"


def test_detect_delimiter_in_file_reads_first_line_only(write_text) -> None:
    path = write_text("data.csv", "a,b\nc;d;e;f;g\n")
    assert detect_delimiter_in_file(str(path)) == ","


def test_detect_delimiter_in_file_skips_bom(tmp_path) -> None:
    path = tmp_path / "bom.csv"
    path.write_bytes(b"\xef\xbb\xbfname|age|city\r\nAl|30|Bonn\r\n")
    assert detect_delimiter_in_file(str(path)) == "|"


def test_detect_delimiter_in_empty_file(write_text) -> None:
    path = write_text("empty.csv", "")
    assert detect_delimiter_in_file(str(path)) == ";"


def test_detect_delimiter_in_missing_file_raises(tmp_path) -> None:
    with pytest.raises(OSError):
        detect_delimiter_in_file(str(tmp_path / "missing.csv"))


def test_detect_delimiter_in_utf16_file(tmp_path) -> None:
    # Excel "Unicode Text": UTF-16LE with BOM, tab separated, CRLF
    path = tmp_path / "unicode.txt"
    path.write_bytes("\ufeffname\tage\r\nAl\t30\r\n".encode("utf-16-le"))

    assert read_first_line(str(path)) == "name\tage"
    assert detect_delimiter_in_file(str(path)) == "\t"


def test_detect_delimiter_in_file_with_cr_line_endings(tmp_path) -> None:
    path = tmp_path / "mac.csv"
    path.write_bytes(b"name,age\rAl,30\rBo,25\r")

    assert read_first_line(str(path)) == "name,age"
    assert detect_delimiter_in_file(str(path)) == ","


def test_read_first_line_drops_character_cut_at_block_end(write_text) -> None:
    # 1 + 2 * 40000 bytes; the scanned block ends inside a two-byte character
    path = write_text("long.csv", "a" + "ä" * 40000 + ",x\n")
    line = read_first_line(str(path), EncodingConfig(use_chardet=False))
    assert line == "a" + "ä" * 32767


def test_read_first_line_uses_preferred_encoding(write_text) -> None:
    path = write_text("latin.csv", "näme;äge\n", encoding="cp1252")
    assert read_first_line(str(path), preferred_encoding="cp1252") == "näme;äge"
