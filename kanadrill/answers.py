"""Public answer-checking API used by the drill runner.

The analyzer is built once, from configuration, the first time it is
needed; call :func:`configure` to pick a different strategy or registry.
"""

from typing import List, Optional, Sequence

from kanadrill.config import AnalysisStrategy, load_settings
from kanadrill.logger import logger
from kanadrill.nlp import get_analyzer
from kanadrill.nlp.analyzer import is_answer_correct as _is_answer_correct
from kanadrill.nlp.analyzer import validate_reading
from kanadrill.nlp.base import BaseAnswerAnalyzer
from kanadrill.schema import CharacterAnalysis
from kanadrill.tables.registry import CharacterRegistry, get_registry

_analyzer: Optional[BaseAnswerAnalyzer] = None


def _require_str(name: str, value) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


def _require_answers(accepted: Sequence[str]) -> None:
    if isinstance(accepted, str):
        raise TypeError("accepted answers must be a sequence of str, not a single str")


def configure(
    strategy: Optional[AnalysisStrategy] = None,
    registry: Optional[CharacterRegistry] = None,
) -> BaseAnswerAnalyzer:
    """(Re)build the module analyzer. Unset arguments come from the environment."""
    global _analyzer
    settings = load_settings()
    strategy = strategy or settings.analysis_strategy
    registry = registry if registry is not None else get_registry(settings.script_mode.value)
    _analyzer = get_analyzer(strategy, registry)
    logger.debug(f"Answer analysis: strategy={AnalysisStrategy(strategy).value}, registry={registry.name}")
    return _analyzer


def get_default_analyzer() -> BaseAnswerAnalyzer:
    return _analyzer if _analyzer is not None else configure()


def segment_glyphs(text: str) -> List[str]:
    _require_str("text", text)
    return get_default_analyzer().segmenter.segment(text)


def is_answer_correct(answer: str, accepted: Sequence[str]) -> bool:
    """Whole-answer kana check (exact, case-insensitive)."""
    _require_str("answer", answer)
    _require_answers(accepted)
    return _is_answer_correct(answer, accepted)


def is_romanization_match(answer: str, accepted: Sequence[str]) -> bool:
    """Whole-word kanji/vocabulary check accepting spelling variants."""
    _require_str("answer", answer)
    _require_answers(accepted)
    return validate_reading(answer, accepted)


def analyze_multi_character_answer(expected: str, raw_answer: str) -> List[CharacterAnalysis]:
    """Per-character verdicts for a multi-character kana question."""
    _require_str("expected", expected)
    _require_str("raw_answer", raw_answer)
    return get_default_analyzer().analyze(expected, raw_answer)
