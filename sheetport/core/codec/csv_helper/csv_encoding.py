# sheetport/core/codec/csv_helper/csv_encoding.py
"""
CSV encoding detection and decoding

Decoding order:
1. Byte order mark
2. Preferred encoding (config or caller)
3. chardet detection above the confidence threshold
4. Encoding candidates
5. Fallback encoding (latin-1, never fails)
"""
import codecs
import logging
from typing import Optional, Tuple

import chardet

from sheetport.core.codec.csv_helper.csv_constants import BOM_ENCODINGS
from sheetport.core.functions.encoding import BaseEncoder

logger = logging.getLogger("sheetport")


def detect_bom(data: bytes) -> Optional[str]:
    """
    Detect an encoding from a byte order mark.

    Args:
        data: Raw bytes (at least the first few bytes of the file)

    Returns:
        Encoding name or None when no BOM is present
    """
    for bom, encoding in BOM_ENCODINGS:
        if data.startswith(bom):
            return encoding
    return None


class CSVEncoder(BaseEncoder):
    """Decodes delimited text files of unknown encoding."""

    def decode(
        self,
        data: bytes,
        preferred_encoding: Optional[str] = None,
        final: bool = True
    ) -> Tuple[str, str]:
        """
        Decode bytes with encoding detection.

        Args:
            data: Raw bytes data
            preferred_encoding: Preferred encoding (overrides the config)
            final: False when data is a leading block of a longer file; a
                multi-byte character cut at the end of the block is dropped
                instead of failing the decode

        Returns:
            Tuple of (decoded content, detected encoding)
        """
        bom_encoding = detect_bom(data)
        if bom_encoding:
            try:
                return _decode_bytes(data, bom_encoding, final), bom_encoding
            except UnicodeDecodeError:
                self.logger.debug(f"BOM suggested {bom_encoding} but decoding failed")

        preferred = preferred_encoding or self.config.preferred_encoding
        if preferred:
            try:
                return _decode_bytes(data, preferred, final), preferred
            except (UnicodeDecodeError, LookupError):
                self.logger.debug(f"Preferred encoding {preferred} failed")

        if self.config.use_chardet and data:
            detected = chardet.detect(data)
            encoding = detected.get('encoding')
            confidence = detected.get('confidence') or 0.0
            if encoding and confidence >= self.config.chardet_confidence_threshold:
                try:
                    return _decode_bytes(data, encoding, final), encoding
                except (UnicodeDecodeError, LookupError):
                    self.logger.debug(f"chardet suggested {encoding} but decoding failed")

        for encoding in self.config.encoding_candidates:
            try:
                return _decode_bytes(data, encoding, final), encoding
            except (UnicodeDecodeError, LookupError):
                continue

        fallback = self.config.fallback_encoding
        self.logger.warning(f"All encoding candidates failed, falling back to {fallback}")
        return data.decode(fallback, errors='replace'), fallback


def _decode_bytes(data: bytes, encoding: str, final: bool) -> str:
    decoder = codecs.getincrementaldecoder(encoding)(errors='strict')
    return decoder.decode(data, final=final)
