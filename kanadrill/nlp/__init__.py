"""Answer matching and analysis for kanadrill

This module provides kana segmentation, romanization normalization,
syllable tokenization and the two interchangeable answer-analysis
strategies.
"""

from .base import (
    BaseSegmenter,
    BaseTokenizer,
    BaseAnswerAnalyzer,
    ConfigurationError,
    DuplicateGlyphError,
    DatasetError,
)

def get_analyzer(strategy, registry=None, converter=None) -> BaseAnswerAnalyzer:
    """Get an answer analyzer for the specified matching strategy.

    Args:
        strategy: 'tokenized-resync' or 'conversion-based' (or an AnalysisStrategy)
        registry: Character registry to analyze against (defaults to hiragana + katakana)
        converter: Romaji-to-kana converter, used only by 'conversion-based'

    Returns:
        Strategy-specific answer analyzer instance

    Raises:
        ConfigurationError: If strategy is not supported
    """
    from kanadrill.config import AnalysisStrategy, parse_enum
    from kanadrill.tables.registry import kana_registry

    if not isinstance(strategy, AnalysisStrategy):
        strategy = parse_enum(AnalysisStrategy, "analysis strategy", str(strategy))
    registry = registry if registry is not None else kana_registry()

    if strategy is AnalysisStrategy.tokenized_resync:
        from .analyzer import SyllableMatchingAnalyzer
        return SyllableMatchingAnalyzer(registry)
    else:
        from .conversion import ConversionAnalyzer
        return ConversionAnalyzer(registry, converter)

__all__ = [
    'BaseSegmenter',
    'BaseTokenizer',
    'BaseAnswerAnalyzer',
    'ConfigurationError',
    'DuplicateGlyphError',
    'DatasetError',
    'get_analyzer',
]
