"""
Data types and structures for smsencoding.

Provides type-safe representations of encoding results.
"""

from dataclasses import dataclass, asdict
from enum import Enum


class EncodingType(Enum):
    """SMS character encodings."""
    GSM7 = "gsm7"   # 7-bit GSM alphabet, basic and extension tables
    UCS2 = "ucs2"   # 16-bit Unicode


@dataclass(frozen=True)
class EncodingInfo:
    """
    How a text will be encoded and segmented in GSM 03.38.

    Attributes:
        parts_count: Number of SMS parts the text needs (always >= 1)
        septets_count: Total septets including concatenation headers.
            Only meaningful for GSM7, -1 for UCS2.
        octets_count: Total octets (bytes) including concatenation headers
        chars_left: Room left in the last part. For GSM7 this counts
            septets, so an extension character takes up two of them.
        encoding: Encoding the text has to be sent with
    """
    parts_count: int
    septets_count: int
    octets_count: int
    chars_left: int
    encoding: EncodingType

    @property
    def is_multipart(self) -> bool:
        """Check if the text spans more than one SMS part."""
        return self.parts_count > 1

    def to_dict(self) -> dict:
        """Convert to a plain dictionary with the encoding as a string."""
        data = asdict(self)
        data["encoding"] = self.encoding.value
        return data
