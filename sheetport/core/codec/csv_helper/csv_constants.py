# sheetport/core/codec/csv_helper/csv_constants.py
"""
CSV constants
"""
from sheetport.core.config import DEFAULT_DELIMITER_CANDIDATES

# Priority order: the first candidate wins ties
DELIMITER_CANDIDATES = DEFAULT_DELIMITER_CANDIDATES

DELIMITER_NAMES = {
    ';': 'Semicolon (;)',
    ',': 'Comma (,)',
    '\t': 'Tab (\\t)',
    '|': 'Pipe (|)',
}

DEFAULT_ENCLOSURE = '"'

# Byte order marks, longest first
BOM_ENCODINGS = [
    (b'\xef\xbb\xbf', 'utf-8-sig'),
    (b'\xff\xfe', 'utf-16'),
    (b'\xfe\xff', 'utf-16'),
]

UTF8_BOM = b'\xef\xbb\xbf'

# Bytes inspected when deciding whether a file is delimited text
TEXT_SNIFF_SIZE = 1024

# Bytes read when looking for the first line of a file
FIRST_LINE_SCAN_SIZE = 64 * 1024
