#!/usr/bin/env python3
"""
Encoding Info Example

Shows how message length and characters change the SMS encoding,
part count and remaining room.

Usage:
    python examples/encoding_info.py
"""

from smsencoding import get_encoding_info, find_non_gsm_characters


MESSAGES = [
    "Hello message with €-sign",
    "a" * 160,
    "a" * 161,
    "Price: 10€ {promo}",
    "漢字",
    "Meet at 8 😀",
]


def show(text: str, concatenated: bool = True):
    """Print the encoding breakdown of one message."""
    info = get_encoding_info(text, concatenated=concatenated)
    preview = text if len(text) <= 30 else text[:27] + "..."

    print(f"{preview!r}")
    print(f"   {info.encoding.name}, {info.parts_count} part(s), "
          f"{info.octets_count} octets, {info.chars_left} left")

    non_gsm = find_non_gsm_characters(text)
    if non_gsm:
        print(f"   UCS2 because of: {' '.join(non_gsm)}")


def main():
    print("Concatenated SMS")
    print("=" * 50)
    for text in MESSAGES:
        show(text)

    print("\nIndependent single messages")
    print("=" * 50)
    for text in MESSAGES:
        show(text, concatenated=False)


if __name__ == "__main__":
    main()
