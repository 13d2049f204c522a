"""Tests for MPN extraction from free text."""

import pytest

from partmatch.extraction import clean_token, extract_mpns, find_mpn_in_text


class TestCleanToken:
    """Tests for clean_token function."""

    @pytest.mark.parametrize("token,expected", [
        ("lm358n", "LM358N"),
        ("MPN:lm358n", "LM358N"),
        ("P/N:LM358N", "LM358N"),
        ("value=TL072", "TL072"),
        ("(GRM188R71H104KA93D)", "GRM188R71H104KA93D"),
        ("LM358N-ROHS", "LM358N"),
        ("\"AOD4184A\".", "AOD4184A"),
        ("REF-W25Q128JVSIQ", "W25Q128JVSIQ"),
    ])
    def test_decorations_stripped(self, token, expected):
        assert clean_token(token) == expected

    def test_bare_prefix_kept(self):
        assert clean_token("MPN:") == "MPN"

    def test_empty(self):
        assert clean_token("") == ""
        assert clean_token("()") == ""


class TestFindMpnInText:
    """Tests for find_mpn_in_text function."""

    def test_first_recognized_token(self):
        text = "U1 P/N: LM358DR; C3 GRM188R71H104KA93D"
        assert find_mpn_in_text(text) == "LM358DR"

    def test_skips_unrecognized_words(self):
        assert find_mpn_in_text("Please quote the AOD4184A in reels") == "AOD4184A"

    def test_nothing_found(self):
        assert find_mpn_in_text("no part numbers here") is None

    @pytest.mark.parametrize("text", ["", None, 42])
    def test_invalid_input(self, text):
        assert find_mpn_in_text(text) is None


class TestExtractMpns:
    """Tests for extract_mpns function."""

    def test_bom_line(self):
        text = "U1 P/N: LM358DR; C3 GRM188R71H104KA93D, R1 RC0603FR-0710KL | J1 PHR-2"
        assert extract_mpns(text) == ["LM358DR", "GRM188R71H104KA93D", "RC0603FR-0710KL", "PHR-2"]

    def test_deduplicated_in_order(self):
        assert extract_mpns("W25Q128JVSIQ, lm358n, LM358N, w25q128jvsiq") == ["W25Q128JVSIQ", "LM358N"]

    def test_limit(self):
        assert extract_mpns("LM358N TL072CP MC1458 BME280", limit=2) == ["LM358N", "TL072CP"]

    def test_multiline(self):
        text = "line one: BME280\nline two: SHT31-DIS-B\n"
        assert extract_mpns(text) == ["BME280", "SHT31-DIS-B"]

    @pytest.mark.parametrize("text", ["", None, "   "])
    def test_empty(self, text):
        assert extract_mpns(text) == []
