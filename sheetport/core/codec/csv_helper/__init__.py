"""
CSV Helper Module

Modules:
- csv_constants: Delimiter candidates, BOMs, enclosure defaults
- csv_encoding: BOM/chardet based decoding (CSVEncoder)
- csv_parser: Delimiter detection and CSV parsing
"""

# Constants
from sheetport.core.codec.csv_helper.csv_constants import (
    DELIMITER_CANDIDATES,
    DELIMITER_NAMES,
    DEFAULT_ENCLOSURE,
    UTF8_BOM,
)

# Encoding
from sheetport.core.codec.csv_helper.csv_encoding import (
    CSVEncoder,
    detect_bom,
)

# Parser
from sheetport.core.codec.csv_helper.csv_parser import (
    count_fields,
    detect_delimiter,
    detect_delimiter_in_file,
    read_first_line,
    parse_csv_content,
)

__all__ = [
    # Constants
    "DELIMITER_CANDIDATES",
    "DELIMITER_NAMES",
    "DEFAULT_ENCLOSURE",
    "UTF8_BOM",
    # Encoding
    "CSVEncoder",
    "detect_bom",
    # Parser
    "count_fields",
    "detect_delimiter",
    "detect_delimiter_in_file",
    "read_first_line",
    "parse_csv_content",
]
