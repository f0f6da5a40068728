from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from kanadrill.schema import CharacterAnalysis, CharacterUnit
    from kanadrill.tables.registry import CharacterRegistry


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class ConfigurationError(ValueError):
    """Raised when a configuration value is not one of the recognized options."""
    def __init__(self, setting: str, value: str, allowed: Sequence[str]):
        super().__init__(
            f"Invalid value '{value}' for {setting}; "
            f"expected one of: {', '.join(allowed)}"
        )
        self.setting = setting
        self.value = value
        self.allowed = list(allowed)


class DuplicateGlyphError(ValueError):
    """Raised when two character units in one registry share a glyph."""
    def __init__(self, glyph: str):
        super().__init__(f"Glyph '{glyph}' is registered more than once")
        self.glyph = glyph


class DatasetError(RuntimeError):
    """Raised when a kanji/vocabulary dataset cannot be read at all."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to load dataset '{path}': {reason}")
        self.path = path
        self.reason = reason


class BaseSegmenter(ABC):
    """Abstract base class for splitting kana text into character units"""

    @abstractmethod
    def segment(self, text: str) -> List[str]:
        """Split text into ordered, atomic character units"""
        pass


class BaseTokenizer(ABC):
    """Abstract base class for splitting a romaji answer against expected units"""

    @abstractmethod
    def tokenize(self, raw_answer: str, expected_units: Sequence[Optional["CharacterUnit"]]) -> List[str]:
        """Return exactly one token per expected unit"""
        pass


class BaseAnswerAnalyzer(ABC):
    """Abstract base class for per-character answer analysis.

    Subclasses implement one matching strategy. The registry and segmenter are
    shared so both strategies see the same character units.
    """

    def __init__(self, registry: "CharacterRegistry"):
        from kanadrill.nlp.segmenter import GlyphSegmenter

        self.registry = registry
        self.segmenter = GlyphSegmenter(registry)

    @abstractmethod
    def analyze(self, expected: str, raw_answer: str) -> List["CharacterAnalysis"]:
        """Analyze *raw_answer* against the kana sequence *expected*."""
        pass

    def lookup_units(self, glyphs: Sequence[str]) -> List[Optional["CharacterUnit"]]:
        """Resolve each segmented glyph to its registry entry (``None`` if unknown)."""
        return [self.registry.lookup(glyph) for glyph in glyphs]
