"""
Unit tests for locale datasets.
"""

import pytest

from httpstatus import Language, StatusRegistry, UnsupportedLocaleError, load_dataset
from httpstatus.languages import DEFAULT_LANGUAGE, get_phrase


class TestLanguage:
    """Tests for the Language enum."""

    @pytest.mark.parametrize("value, expected", [
        ("en", Language.EN),
        ("FR", Language.FR),
        (" de ", Language.DE),
        (Language.FR, Language.FR),
    ])
    def test_parse(self, value, expected):
        """Test resolving members from codes."""
        assert Language.parse(value) is expected

    @pytest.mark.parametrize("value", ["xx", "english", "", None, 42])
    def test_parse_unsupported(self, value):
        """Test that unknown identifiers are rejected."""
        with pytest.raises(UnsupportedLocaleError) as exc_info:
            Language.parse(value)
        assert exc_info.value.language == value

    def test_default(self):
        """Test the default language."""
        assert DEFAULT_LANGUAGE is Language.EN


class TestLoadDataset:
    """Tests for load_dataset()."""

    @pytest.mark.parametrize("language", list(Language))
    def test_every_language_loads(self, language):
        """Test that each language has a complete table."""
        phrases = load_dataset(language)
        assert phrases[200] == "OK"
        assert len(phrases) > 50
        assert 306 not in phrases

    @pytest.mark.parametrize("language", list(Language))
    def test_phrases_unique(self, language):
        """Test that no dataset repeats a phrase, ignoring case."""
        phrases = load_dataset(language).values()
        assert len({phrase.lower() for phrase in phrases}) == len(phrases)

    @pytest.mark.parametrize("language", list(Language))
    def test_phrases_are_clean(self, language):
        """Test that every phrase would pass the phrase filter."""
        for phrase in load_dataset(language).values():
            assert phrase == phrase.strip()
            assert "\r" not in phrase and "\n" not in phrase

    def test_returns_copy(self):
        """Test that mutating a result does not leak into the next load."""
        phrases = load_dataset("en")
        phrases[404] = "Changed"
        assert load_dataset("en")[404] == "Not Found"

    def test_unsupported(self):
        """Test an unknown language."""
        with pytest.raises(UnsupportedLocaleError, match="Unsupported language"):
            load_dataset("klingon")


class TestGetPhrase:
    """Tests for get_phrase()."""

    def test_reads_one_phrase(self):
        """Test single-phrase reads with a default."""
        assert get_phrase("de", 404) == "Nicht gefunden"
        assert get_phrase(Language.FR, 103) is None
        assert get_phrase("fr", 103, "Early Hints") == "Early Hints"

    def test_unsupported(self):
        """Test an unknown language."""
        with pytest.raises(UnsupportedLocaleError):
            get_phrase("xx", 404)


class TestLocalizedRegistry:
    """Tests for registries on non-default languages."""

    def test_french_round_trip(self):
        """Test French lookups in both directions."""
        registry = StatusRegistry("fr")
        assert registry.get_reason_phrase(418) == "Je suis une théière"
        assert registry.get_status_code("je suis une théière") == 418

    def test_german_case_insensitive(self):
        """Test German lookups ignore case."""
        registry = StatusRegistry("de")
        assert registry.get_status_code("NICHT GEFUNDEN") == 404

    def test_english_phrase_not_in_french(self):
        """Test that datasets do not mix."""
        registry = StatusRegistry("fr")
        assert registry.has_reason_phrase("Not Found") is False
