"""
GSM 03.38 character set tables.

Provides the 7-bit default alphabet and its extension table as read-only
mappings, together with membership tests used by the encoding analyzer.
Characters from the extension table are sent as an escape septet followed
by the character's code, so each one costs two septets.
"""

from types import MappingProxyType
from typing import Mapping, Optional


# Escape to the extension table
GSM7_ESCAPE = 0x1B

# GSM 7-bit default alphabet, ordered by code
_GSM7_ALPHABET = (
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞ\x1bÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

# Basic character set, character -> code (escape excluded)
GSM7_BASIC: Mapping[str, int] = MappingProxyType({
    char: code
    for code, char in enumerate(_GSM7_ALPHABET)
    if code != GSM7_ESCAPE
})

# Extension character set, character -> code following the escape
GSM7_EXTENDED: Mapping[str, int] = MappingProxyType({
    "\f": 0x0A,  # Form feed
    "^": 0x14,   # Caret
    "{": 0x28,   # Left brace
    "}": 0x29,   # Right brace
    "\\": 0x2F,  # Backslash
    "[": 0x3C,   # Left bracket
    "~": 0x3D,   # Tilde
    "]": 0x3E,   # Right bracket
    "|": 0x40,   # Pipe
    "€": 0x65,   # Euro sign
})

BASIC_SEPTET_COST = 1
EXTENDED_SEPTET_COST = 2


def is_basic(char: str) -> bool:
    """Check if a character belongs to the GSM 7-bit basic set."""
    return char in GSM7_BASIC


def is_extended(char: str) -> bool:
    """Check if a character belongs to the GSM 7-bit extension set."""
    return char in GSM7_EXTENDED


def septet_cost(char: str) -> Optional[int]:
    """
    Get the number of septets a character takes in GSM 7-bit encoding.

    Args:
        char: Single character

    Returns:
        1 for basic characters, 2 for extension characters,
        None if the character is not in the GSM 7-bit alphabet
    """
    if char in GSM7_BASIC:
        return BASIC_SEPTET_COST
    if char in GSM7_EXTENDED:
        return EXTENDED_SEPTET_COST
    return None
