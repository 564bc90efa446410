"""Tests for encoding and locale resolution."""

import pytest

from dictmeta import charsets, locales
from dictmeta.locales import Culture


class TestResolveEncoding:
    """Tests for charsets.resolve_encoding()."""

    def test_case_and_separator_insensitive(self):
        """Test name spelling variants."""
        for name in ("UTF-8", "utf-8", "utf8", "UTF_8"):
            assert charsets.resolve_encoding(name).name == "utf-8"

    def test_iso_8859(self):
        """Test ISO-8859 family names."""
        assert charsets.resolve_encoding("ISO-8859-2").encode("ł")[0] == b"\xb3"
        assert charsets.resolve_encoding("latin2").encode("ł")[0] == b"\xb3"
        assert not charsets.is_known_encoding("iso-8859-12")

    def test_windows_code_pages(self):
        """Test windows-125x names."""
        assert charsets.resolve_encoding("windows-1250").encode("ł")[0] == b"\xb3"
        assert charsets.resolve_encoding("cp1251").encode("я")[0] == b"\xff"

    def test_unknown(self):
        """Test unregistered names raise LookupError."""
        with pytest.raises(LookupError):
            charsets.resolve_encoding("klingon-8")

    def test_register(self):
        """Test registering a custom alias."""
        charsets.register_encoding("x-test-polish", "iso8859_2")
        assert charsets.is_known_encoding("X-Test-Polish")
        assert "x-test-polish" in charsets.list_encodings()

    def test_register_missing_codec(self):
        """Test aliases must point at a real codec."""
        with pytest.raises(LookupError):
            charsets.register_encoding("x-broken", "no_such_codec")
        assert not charsets.is_known_encoding("x-broken")


class TestResolveCulture:
    """Tests for locales.resolve_culture()."""

    def test_language_and_territory(self):
        """Test both underscore and hyphen forms."""
        assert locales.resolve_culture("pl_PL") == Culture("pl", "PL")
        assert locales.resolve_culture("pl-pl") == Culture("pl", "PL")
        assert locales.resolve_culture("en_US.UTF-8") == Culture("en", "US")

    def test_language_only(self):
        """Test bare language codes."""
        assert locales.resolve_culture("de") == Culture("de")

    @pytest.mark.parametrize("name,expected", [
        ("zh-Hant-TW", Culture("zh", "TW", "Hant")),
        ("sr-Latn-RS", Culture("sr", "RS", "Latn")),
        ("es-419", Culture("es", "419")),
        ("en-001", Culture("en", "001")),
        ("fil-PH", Culture("fil", "PH")),
        ("sr_latn", Culture("sr", script="Latn")),
    ])
    def test_script_and_numeric_region(self, name, expected):
        """Test script subtags, numeric regions and three-letter languages."""
        assert locales.resolve_culture(name) == expected

    def test_script_names(self):
        """Test name and tag keep the script between language and region."""
        culture = Culture("zh", "TW", "Hant")
        assert culture.name == "zh_Hant_TW"
        assert culture.tag == "zh-Hant-TW"

    def test_names(self):
        """Test Culture name and tag."""
        culture = Culture("pl", "PL")
        assert culture.name == "pl_PL"
        assert culture.tag == "pl-PL"
        assert str(culture) == "pl_PL"
        assert Culture("de").tag == "de"

    @pytest.mark.parametrize("name", ["", "not a locale", "pl_P1", "pl_PLX", "qqq_PL", "C", "a_b_c"])
    def test_unknown(self, name):
        """Test unknown locale names raise LookupError."""
        with pytest.raises(LookupError):
            locales.resolve_culture(name)

    def test_default_culture(self):
        """Test the default culture is resolvable and cached."""
        culture = locales.default_culture()
        assert isinstance(culture, Culture)
        assert locales.default_culture() is culture
