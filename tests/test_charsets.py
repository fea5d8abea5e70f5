"""
Tests for GSM 03.38 character set tables.
"""

import pytest
from smsencoding.charsets import (
    GSM7_BASIC,
    GSM7_EXTENDED,
    GSM7_ESCAPE,
    is_basic,
    is_extended,
    septet_cost,
)


class TestBasicSet:
    """Test the GSM 7-bit basic character set."""

    def test_table_size(self):
        """Test basic set holds every code except the escape."""
        assert len(GSM7_BASIC) == 127
        assert GSM7_ESCAPE not in GSM7_BASIC.values()
        assert "\x1b" not in GSM7_BASIC

    def test_codes(self):
        """Test characters map to their GSM 03.38 codes."""
        assert GSM7_BASIC["@"] == 0x00
        assert GSM7_BASIC["\n"] == 0x0A
        assert GSM7_BASIC["\r"] == 0x0D
        assert GSM7_BASIC["Δ"] == 0x10
        assert GSM7_BASIC["Æ"] == 0x1C
        assert GSM7_BASIC[" "] == 0x20
        assert GSM7_BASIC["¡"] == 0x40
        assert GSM7_BASIC["A"] == 0x41
        assert GSM7_BASIC["§"] == 0x5F
        assert GSM7_BASIC["¿"] == 0x60
        assert GSM7_BASIC["à"] == 0x7F

    @pytest.mark.parametrize("char", ["a", "Z", "0", "@", "£", "Ω", "é", "ß", " ", "\n", "\r"])
    def test_is_basic(self, char):
        """Test basic characters are recognised."""
        assert is_basic(char)
        assert not is_extended(char)

    @pytest.mark.parametrize("char", ["á", "ç", "`", "漢", "😀", "\t", "\x1b"])
    def test_not_basic(self, char):
        """Test characters outside the alphabet are rejected."""
        assert not is_basic(char)
        assert not is_extended(char)

    def test_multi_character_string(self):
        """Test strings longer than one character are not members."""
        assert not is_basic("ab")
        assert not is_extended("{}")
        assert not is_basic("")

    def test_read_only(self):
        """Test tables cannot be modified."""
        with pytest.raises(TypeError):
            GSM7_BASIC["x"] = 0x00
        with pytest.raises(TypeError):
            GSM7_EXTENDED["x"] = 0x00


class TestExtendedSet:
    """Test the GSM 7-bit extension character set."""

    def test_table_contents(self):
        """Test extension set holds exactly the ten escaped characters."""
        assert set(GSM7_EXTENDED) == set("€\f[\\]^{|}~")

    def test_codes(self):
        """Test extension characters map to their escaped codes."""
        assert GSM7_EXTENDED["€"] == 0x65
        assert GSM7_EXTENDED["\f"] == 0x0A
        assert GSM7_EXTENDED["^"] == 0x14
        assert GSM7_EXTENDED["|"] == 0x40

    def test_disjoint_from_basic(self):
        """Test no character is in both sets."""
        assert not set(GSM7_BASIC) & set(GSM7_EXTENDED)

    @pytest.mark.parametrize("char", list("€\f[\\]^{|}~"))
    def test_is_extended(self, char):
        """Test extension characters are recognised."""
        assert is_extended(char)
        assert not is_basic(char)


class TestSeptetCost:
    """Test septet cost lookup."""

    def test_basic_costs_one(self):
        assert septet_cost("a") == 1

    def test_extended_costs_two(self):
        assert septet_cost("€") == 2
        assert septet_cost("{") == 2

    def test_unknown_has_no_cost(self):
        assert septet_cost("漢") is None
