# sheetport/core/codec/csv_helper/csv_parser.py
"""
CSV parsing and delimiter detection

The delimiter is guessed from the first line only: the candidate that
splits it into the most fields wins, the first candidate winning ties.
The quality of the result depends on the values in the first line; it
can misfire on single-column or quote-heavy lines.
"""
import csv
import io
import logging
import re
from typing import List, Optional, Sequence

from sheetport.core.codec.csv_helper.csv_constants import (
    DEFAULT_ENCLOSURE,
    DELIMITER_CANDIDATES,
    FIRST_LINE_SCAN_SIZE,
)
from sheetport.core.codec.csv_helper.csv_encoding import CSVEncoder
from sheetport.core.functions.encoding import EncodingConfig

logger = logging.getLogger("sheetport")

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def count_fields(line: str, delimiter: str, enclosure: str = DEFAULT_ENCLOSURE) -> int:
    """
    Count the fields of a single line split with the given delimiter.

    An empty line, or one the parser rejects, counts as a single field.
    """
    try:
        fields = next(csv.reader([line], delimiter=delimiter, quotechar=enclosure), [])
    except csv.Error:
        return 1
    return len(fields) or 1


def detect_delimiter(
    sample_line: str,
    candidates: Sequence[str] = DELIMITER_CANDIDATES,
    enclosure: str = DEFAULT_ENCLOSURE
) -> str:
    """
    Guess the field delimiter of a CSV line.

    Args:
        sample_line: First line of the file
        candidates: Delimiters in priority order
        enclosure: Quote character

    Returns:
        The candidate producing the most fields
    """
    counts = {delimiter: count_fields(sample_line, delimiter, enclosure) for delimiter in candidates}
    best = max(counts.values())
    delimiter = next(d for d in candidates if counts[d] == best)
    logger.debug(f"Delimiter field counts: {counts!r}, selected {delimiter!r}")
    return delimiter


def read_first_line(
    file_path: str,
    config: Optional[EncodingConfig] = None,
    preferred_encoding: Optional[str] = None
) -> str:
    """
    Read and decode the first line of a file.

    A bounded leading block is decoded and cut at the first line break
    (\\r\\n, \\n or \\r). The handle is closed before returning.
    """
    with open(file_path, 'rb') as f:
        raw = f.read(FIRST_LINE_SCAN_SIZE)
        complete = not f.read(1)
    text, _ = CSVEncoder(config).decode(raw, preferred_encoding, final=complete)
    return _LINE_BREAK.split(text, maxsplit=1)[0]


def detect_delimiter_in_file(
    file_path: str,
    candidates: Sequence[str] = DELIMITER_CANDIDATES,
    enclosure: str = DEFAULT_ENCLOSURE,
    config: Optional[EncodingConfig] = None,
    preferred_encoding: Optional[str] = None
) -> str:
    """
    Guess the field delimiter of a CSV file from its first line.

    Args:
        file_path: CSV file path
        candidates: Delimiters in priority order
        enclosure: Quote character
        config: Encoding configuration for decoding the line
        preferred_encoding: Encoding to try first (None for auto-detect)

    Returns:
        Detected delimiter

    Raises:
        OSError: If the file cannot be opened
    """
    line = read_first_line(file_path, config, preferred_encoding)
    return detect_delimiter(line, candidates, enclosure)


def parse_csv_content(
    content: str,
    delimiter: str,
    enclosure: str = DEFAULT_ENCLOSURE
) -> List[List[str]]:
    """
    Parse decoded CSV content into rows of field text.

    Args:
        content: Decoded file content
        delimiter: Field delimiter
        enclosure: Quote character

    Returns:
        List of rows
    """
    reader = csv.reader(io.StringIO(content, newline=''), delimiter=delimiter, quotechar=enclosure)
    return [row for row in reader]
