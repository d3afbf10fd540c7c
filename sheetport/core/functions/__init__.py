"""
Functions - Format-independent table logic

- cell_value: CellValue type, value binding and text rendering
- encoding: Encoding configuration and BaseEncoder interface
- table_shape: Header detection for export datasets
- record_keyer: Matrix to header-keyed records
"""

from sheetport.core.functions.cell_value import (
    CellValue,
    normalize_cell_value,
    bind_value,
    cell_to_text,
    is_loose_null,
)
from sheetport.core.functions.encoding import (
    ENCODING_CANDIDATES,
    EncodingConfig,
    BaseEncoder,
)
from sheetport.core.functions.table_shape import (
    is_headered_record,
    is_headered_dataset,
    header_row,
    row_values,
)
from sheetport.core.functions.record_keyer import (
    Record,
    RecordKeyer,
    header_key,
    to_records,
)

__all__ = [
    # Cell values
    "CellValue",
    "normalize_cell_value",
    "bind_value",
    "cell_to_text",
    "is_loose_null",
    # Encoding
    "ENCODING_CANDIDATES",
    "EncodingConfig",
    "BaseEncoder",
    # Table shape
    "is_headered_record",
    "is_headered_dataset",
    "header_row",
    "row_values",
    # Records
    "Record",
    "RecordKeyer",
    "header_key",
    "to_records",
]
