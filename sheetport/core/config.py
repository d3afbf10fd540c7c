# sheetport/core/config.py
"""
Config - Spreadsheet adapter configuration

SpreadsheetConfig collects the CSV dialect, text decoding and workbook
settings shared by the adapter, the readers and the writers.

Usage Example:
    from sheetport.core.config import SpreadsheetConfig

    config = SpreadsheetConfig(line_ending="\\r\\n", use_bom=True)
    config = SpreadsheetConfig.from_dict({"enclosure": "'"})
"""
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple, Union

from sheetport.core.functions.encoding import EncodingConfig

logger = logging.getLogger("sheetport")

DEFAULT_DELIMITER_CANDIDATES: Tuple[str, ...] = (";", ",", "\t", "|")


@dataclass
class SpreadsheetConfig:
    """
    Spreadsheet Configuration

    Attributes:
        default_delimiter: Delimiter used by CSV readers/writers when none is set
        enclosure: CSV quote character
        line_ending: Line terminator written by the CSV writer
        use_bom: Prefix CSV output with a UTF-8 BOM
        input_encoding: Encoding of CSV input (None for auto-detect)
        output_encoding: Encoding of CSV output
        delimiter_candidates: Candidates for delimiter detection, in priority order
        sheet_title: Title of the sheet created for exports
        encoding: Text decoding settings for CSV input
    """
    default_delimiter: str = ","
    enclosure: str = '"'
    line_ending: str = "\n"
    use_bom: bool = False
    input_encoding: Optional[str] = None
    output_encoding: str = "utf-8"
    delimiter_candidates: Tuple[str, ...] = DEFAULT_DELIMITER_CANDIDATES
    sheet_title: str = "Worksheet"
    encoding: EncodingConfig = field(default_factory=EncodingConfig)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "SpreadsheetConfig":
        """
        Build a config from a plain dictionary.

        Unknown keys are ignored with a warning. An "encoding" entry may be
        either an EncodingConfig or a dictionary of its fields.

        Args:
            values: Configuration dictionary

        Returns:
            SpreadsheetConfig instance
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            if key not in known:
                logger.warning(f"Ignoring unknown spreadsheet config option: {key}")
                continue
            kwargs[key] = value

        encoding = kwargs.get("encoding")
        if isinstance(encoding, dict):
            kwargs["encoding"] = EncodingConfig(**encoding)
        if "delimiter_candidates" in kwargs:
            kwargs["delimiter_candidates"] = tuple(kwargs["delimiter_candidates"])

        return cls(**kwargs)


def resolve_config(
    config: Optional[Union[SpreadsheetConfig, Dict[str, Any]]] = None
) -> SpreadsheetConfig:
    """Return a SpreadsheetConfig for a config object, a dict or None."""
    if config is None:
        return SpreadsheetConfig()
    if isinstance(config, SpreadsheetConfig):
        return config
    if isinstance(config, dict):
        return SpreadsheetConfig.from_dict(config)
    raise TypeError(f"Unsupported config type: {type(config).__name__}")


__all__ = [
    "DEFAULT_DELIMITER_CANDIDATES",
    "SpreadsheetConfig",
    "resolve_config",
]
