"""
smsencoding - GSM 03.38 SMS encoding and segmentation calculator.
"""

from .version import __version__
from .analyzer import (
    is_gsm_encodable,
    get_encoding_info,
    find_non_gsm_characters,
    MESSAGE_OCTET_SIZE,
    MESSAGE_SEPTET_SIZE,
    CONCAT_HEADER_OCTET_SIZE,
    CONCAT_HEADER_SEPTET_SIZE,
)

from .charsets import (
    GSM7_BASIC,
    GSM7_EXTENDED,
    is_basic,
    is_extended,
)

from .types import (
    EncodingType,
    EncodingInfo,
)

from .exceptions import (
    SMSEncodingError,
    InvalidArgumentError,
)

__all__ = [
    "__version__",
    "is_gsm_encodable",
    "get_encoding_info",
    "find_non_gsm_characters",
    "MESSAGE_OCTET_SIZE",
    "MESSAGE_SEPTET_SIZE",
    "CONCAT_HEADER_OCTET_SIZE",
    "CONCAT_HEADER_SEPTET_SIZE",
    "GSM7_BASIC",
    "GSM7_EXTENDED",
    "is_basic",
    "is_extended",
    "EncodingType",
    "EncodingInfo",
    "SMSEncodingError",
    "InvalidArgumentError",
]
