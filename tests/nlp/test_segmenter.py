"""Tests for kana glyph segmentation."""
import pytest
from kanadrill.nlp.segmenter import GlyphSegmenter
from kanadrill.tables.registry import katakana_registry


class TestGlyphSegmenter:
    """Test GlyphSegmenter."""

    @pytest.fixture
    def segmenter(self, kana):
        return GlyphSegmenter(kana)

    def test_plain_sequence(self, segmenter):
        """Test one unit per plain glyph."""
        assert segmenter.segment("かたな") == ["か", "た", "な"]

    def test_combo_kept_whole(self, segmenter):
        """Test that combination glyphs are one unit."""
        assert segmenter.segment("じゅごを") == ["じゅ", "ご", "を"]

    def test_combo_preferred_over_singles(self, segmenter):
        """Test きゃ is never split into き + ゃ."""
        assert segmenter.segment("きゃく") == ["きゃ", "く"]
        assert segmenter.segment("ばありゃ") == ["ば", "あ", "りゃ"]

    def test_katakana(self, segmenter):
        """Test katakana combos with the script-agnostic registry."""
        assert segmenter.segment("フツビョ") == ["フ", "ツ", "ビョ"]

    def test_unknown_glyph_preserved(self, segmenter):
        """Test glyphs outside the table are emitted, not dropped."""
        assert segmenter.segment("かぁな") == ["か", "ぁ", "な"]
        assert segmenter.segment("ヴァ") == ["ヴ", "ァ"]

    def test_empty(self, segmenter):
        """Test empty input yields no units."""
        assert segmenter.segment("") == []

    def test_round_trip_all_units(self, segmenter, kana):
        """Test concatenating the units reproduces the input."""
        text = "".join(unit.glyph for unit in kana)
        assert "".join(segmenter.segment(text)) == text

    def test_round_trip_mixed(self, segmenter):
        """Test round trip including unknown glyphs."""
        for text in ["しゃしん", "がっこう", "トウキョウ", "ちゅうごくご", "ー"]:
            assert "".join(segmenter.segment(text)) == text

    def test_script_specific_registry(self):
        """Test a katakana-only registry does not join hiragana combos."""
        segmenter = GlyphSegmenter(katakana_registry())
        assert segmenter.segment("キャ") == ["キャ"]
        assert segmenter.segment("きゃ") == ["き", "ゃ"]

    def test_injected_registry(self, fixture_registry):
        """Test segmentation follows whatever registry is injected."""
        segmenter = GlyphSegmenter(fixture_registry)
        assert segmenter.segment("きゃかき") == ["きゃ", "か", "き"]
