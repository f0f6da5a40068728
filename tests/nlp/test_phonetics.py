"""Tests for kana romanization."""
from kanadrill.nlp.phonetics import kana_to_romaji


class TestKanaToRomaji:
    """Test Hepburn conversion of dataset kana."""

    def test_hiragana(self):
        """Test plain hiragana words."""
        assert kana_to_romaji("でんき") == "denki"
        assert kana_to_romaji("かたな") == "katana"

    def test_katakana_folds_to_hiragana(self):
        """Test katakana romanizes like the same hiragana."""
        assert kana_to_romaji("カタナ") == kana_to_romaji("かたな")

    def test_surrounding_whitespace(self):
        """Test leading and trailing whitespace is ignored."""
        assert kana_to_romaji("  でんき ") == "denki"
