"""
SMS encoding analysis.

Works out how a text will be sent under GSM 03.38:
- Encoding (7-bit GSM alphabet, or UCS2 as soon as one character is outside it)
- Septets and octets the text encodes to
- Number of SMS parts, with or without concatenation headers
- Room left in the last part
"""

import logging

from .charsets import is_basic, is_extended, septet_cost
from .exceptions import InvalidArgumentError
from .types import EncodingInfo, EncodingType

logger = logging.getLogger(__name__)


# Encoded size of a single SMS in octets (bytes)
MESSAGE_OCTET_SIZE = 140

# Encoded size of a single SMS in septets
MESSAGE_SEPTET_SIZE = 160

# User Data Header size of each part of a concatenated SMS
CONCAT_HEADER_OCTET_SIZE = 6
CONCAT_HEADER_SEPTET_SIZE = 7

# Octets per UTF-16 code unit in UCS2
UCS2_CHAR_OCTET_SIZE = 2

# Septet count reported for UCS2 messages
UCS2_SEPTETS_SENTINEL = -1


def _check_text(text: object) -> str:
    """Raise InvalidArgumentError unless text is a string."""
    if text is None:
        raise InvalidArgumentError("Message text must not be None", argument="text")
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"Message text must be str, got {type(text).__name__}",
            argument="text",
            value=text
        )
    return text


def _divide_ceiling(dividend: int, divisor: int) -> int:
    """Divide two integers and round the result up."""
    return (dividend + divisor - 1) // divisor


def _ucs2_octets(text: str) -> int:
    """Count UCS2 octets; characters outside the BMP take two code units."""
    return len(text.encode("utf-16-be", errors="surrogatepass"))


def is_gsm_encodable(text: str) -> bool:
    """
    Check if text can be encoded in the GSM 7-bit alphabet.

    Args:
        text: Message text

    Returns:
        True if every character is in the basic or extension set
        (also True for empty text)

    Raises:
        InvalidArgumentError: If text is None or not a string
    """
    text = _check_text(text)
    return all(is_basic(char) or is_extended(char) for char in text)


def find_non_gsm_characters(text: str) -> list[str]:
    """
    Find the characters that force a text into UCS2.

    Args:
        text: Message text

    Returns:
        Distinct characters outside the GSM 7-bit alphabet, in order of
        first appearance

    Raises:
        InvalidArgumentError: If text is None or not a string
    """
    text = _check_text(text)
    found: dict[str, None] = {}

    for char in text:
        if septet_cost(char) is None:
            found.setdefault(char)

    return list(found)


def get_encoding_info(text: str, concatenated: bool = True) -> EncodingInfo:
    """
    Calculate how a text is going to be encoded in SMS messages.

    Args:
        text: Message text
        concatenated: Calculate for a concatenated SMS (True, default) or
            for independent single messages without headers (False)

    Returns:
        EncodingInfo with parts, septets, octets and room left

    Raises:
        InvalidArgumentError: If text is None or not a string

    Example:

    .. code-block:: python

        info = get_encoding_info("Hello message with €-sign")
        print(info.encoding, info.parts_count, info.chars_left)
    """
    text = _check_text(text)

    if not text:
        return EncodingInfo(
            parts_count=1,
            septets_count=0,
            octets_count=0,
            chars_left=0,
            encoding=EncodingType.GSM7
        )

    encoding = EncodingType.GSM7
    septets = 0

    for char in text:
        cost = septet_cost(char)
        if cost is None:
            logger.debug(f"Character {char!r} not in GSM 7-bit alphabet, using UCS2")
            encoding = EncodingType.UCS2
            septets = UCS2_SEPTETS_SENTINEL
            break
        septets += cost

    if encoding is EncodingType.GSM7:
        octets = _divide_ceiling(septets * 7, 8)
    else:
        octets = _ucs2_octets(text)

    logger.debug(f"Encoding: {encoding.value}, septets: {septets}, octets: {octets}")

    parts = 1
    if octets > MESSAGE_OCTET_SIZE:
        if concatenated:
            parts = _divide_ceiling(octets, MESSAGE_OCTET_SIZE - CONCAT_HEADER_OCTET_SIZE)

            if encoding is EncodingType.GSM7:
                # Each part also has to hold its septets next to the header septets
                parts = max(
                    parts,
                    _divide_ceiling(septets, MESSAGE_SEPTET_SIZE - CONCAT_HEADER_SEPTET_SIZE)
                )
                septets += parts * CONCAT_HEADER_SEPTET_SIZE

            octets += parts * CONCAT_HEADER_OCTET_SIZE
        else:
            parts = _divide_ceiling(octets, MESSAGE_OCTET_SIZE)

        logger.debug(f"Message split into {parts} part(s), concatenated={concatenated}")

    if encoding is EncodingType.GSM7:
        chars_left = parts * MESSAGE_SEPTET_SIZE - septets
    else:
        chars_left = (parts * MESSAGE_OCTET_SIZE - octets) // UCS2_CHAR_OCTET_SIZE

    return EncodingInfo(
        parts_count=parts,
        septets_count=septets,
        octets_count=octets,
        chars_left=chars_left,
        encoding=encoding
    )
