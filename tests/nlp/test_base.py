"""Tests for NLP base classes and exceptions."""
import pytest
from kanadrill.nlp.base import (
    BaseAnswerAnalyzer,
    BaseSegmenter,
    BaseTokenizer,
    ConfigurationError,
    DatasetError,
    DuplicateGlyphError,
)


class TestBaseSegmenter:
    """Test BaseSegmenter abstract class."""

    def test_cannot_instantiate(self):
        """Test that BaseSegmenter cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseSegmenter()

    def test_concrete_implementation(self):
        """Test that concrete implementation works."""
        class CharSegmenter(BaseSegmenter):
            def segment(self, text: str):
                return list(text)

        assert CharSegmenter().segment("かな") == ["か", "な"]


class TestBaseTokenizer:
    """Test BaseTokenizer abstract class."""

    def test_cannot_instantiate(self):
        """Test that BaseTokenizer cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseTokenizer()


class TestBaseAnswerAnalyzer:
    """Test BaseAnswerAnalyzer abstract class."""

    def test_cannot_instantiate(self, hiragana):
        """Test that BaseAnswerAnalyzer requires analyze()."""
        with pytest.raises(TypeError):
            BaseAnswerAnalyzer(hiragana)

    def test_shared_segmenter_and_lookup(self, fixture_registry):
        """Test that subclasses get a segmenter bound to their registry."""
        class NullAnalyzer(BaseAnswerAnalyzer):
            def analyze(self, expected, raw_answer):
                return []

        analyzer = NullAnalyzer(fixture_registry)
        assert analyzer.segmenter.registry is fixture_registry
        looked_up = analyzer.lookup_units(["か", "ぬ"])
        assert looked_up[0].glyph == "か"
        assert looked_up[1] is None


class TestExceptions:
    """Test the exception types and their messages."""

    def test_configuration_error(self):
        """Test ConfigurationError carries the setting and allowed values."""
        error = ConfigurationError("STRATEGY", "wanakana", ["tokenized-resync", "conversion-based"])
        assert isinstance(error, ValueError)
        assert error.setting == "STRATEGY"
        assert error.value == "wanakana"
        assert "tokenized-resync" in str(error)
        assert "wanakana" in str(error)

    def test_duplicate_glyph_error(self):
        """Test DuplicateGlyphError names the glyph."""
        error = DuplicateGlyphError("か")
        assert isinstance(error, ValueError)
        assert error.glyph == "か"
        assert "か" in str(error)

    def test_dataset_error(self):
        """Test DatasetError carries path and reason."""
        error = DatasetError("/tmp/x.json", "file not found")
        assert isinstance(error, RuntimeError)
        assert error.path == "/tmp/x.json"
        assert "file not found" in str(error)
