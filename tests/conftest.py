"""
Pytest configuration and fixtures.

Provides shared message texts for smsencoding tests.
"""

import pytest
import logging


# Enable logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def single_message():
    """Short GSM message with one extension character (26 septets)."""
    return "Hello message with €-sign"


@pytest.fixture
def full_single_message():
    """GSM message filling exactly one SMS (159 chars, 160 septets)."""
    return (
        "€Lorem ipsum dolor sit amet, consetetur sadipscing elitr, sed diam nonumy eirmod tempor "
        "invidunt ut labore et dolore magna aliquyam erat, sed diam voluptua. At"
    )


@pytest.fixture
def full_concatenated_double_message():
    """GSM message filling exactly two concatenated parts (306 septets before headers)."""
    return (
        "€Lorem ipsum dolor sit amet, consetetur sadipscing elitr, sed diam nonumy eirmod tempor "
        "invidunt ut labore et dolore magna aliquyam erat, sed diam voluptua. At vero eos et accusam "
        "et justo duo dolores et ea rebum. Stet clita kasd gubergren, no sea takimata sanctus est Lorem "
        "ipsum dolor sit amet. Lorem ip"
    )


@pytest.fixture
def unicode_message():
    """Two CJK ideographs."""
    return "漢字"


@pytest.fixture
def full_unicode_single_message():
    """UCS2 message filling exactly one SMS (70 chars)."""
    return "漢字" * 35
