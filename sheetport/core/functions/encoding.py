# sheetport/core/functions/encoding.py
"""
Encoding - Abstract Encoding Interface Module

Provides abstract base class and configuration for text decoding.
Format-specific implementations live in the respective helper modules:
- CSV: codec/csv_helper/csv_encoding.py

Module Components:
- ENCODING_CANDIDATES: Common encoding candidates list
- EncodingConfig: Configuration dataclass for encoding operations
- BaseEncoder: Abstract base class for format-specific encoders

Usage Example:
    from sheetport.core.codec.csv_helper.csv_encoding import CSVEncoder

    text, encoding = CSVEncoder().decode(raw_bytes)
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger("sheetport")


# Tried in order after BOM and chardet detection
ENCODING_CANDIDATES = [
    'utf-8',
    'utf-8-sig',
    'cp1252',     # Western Windows (spreadsheet exports)
    'cp949',      # Korean Windows
    'euc-kr',
    'iso-8859-1',
    'latin-1',
]


@dataclass
class EncodingConfig:
    """Configuration for encoding operations.

    Attributes:
        preferred_encoding: Preferred encoding to try first
        use_chardet: Whether to use chardet library for detection
        chardet_confidence_threshold: Minimum confidence for chardet detection
        encoding_candidates: List of encodings to try in order
        fallback_encoding: Final fallback encoding (should never fail)
    """
    preferred_encoding: Optional[str] = None
    use_chardet: bool = True
    chardet_confidence_threshold: float = 0.7
    encoding_candidates: List[str] = field(default_factory=lambda: ENCODING_CANDIDATES.copy())
    fallback_encoding: str = 'latin-1'


class BaseEncoder(ABC):
    """Abstract base class for format-specific encoders.

    Implementations:
        - CSVEncoder: codec/csv_helper/csv_encoding.py (delimited text)
    """

    def __init__(self, config: Optional[EncodingConfig] = None):
        """Initialize the encoder.

        Args:
            config: Encoding configuration
        """
        self.config = config or EncodingConfig()
        self.logger = logging.getLogger(f"sheetport.{self.__class__.__name__}")

    @abstractmethod
    def decode(self, data: bytes) -> Tuple[str, str]:
        """Decode binary data to string.

        Args:
            data: Binary data to decode

        Returns:
            Tuple of (decoded_text, detected_encoding)
        """
        pass


__all__ = [
    "ENCODING_CANDIDATES",
    "EncodingConfig",
    "BaseEncoder",
]
