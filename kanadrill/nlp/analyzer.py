"""Answer checking: whole-answer verdicts and per-character analysis."""

from typing import Iterable, List, Optional

from kanadrill.logger import logger
from kanadrill.nlp.base import BaseAnswerAnalyzer
from kanadrill.nlp.normalizer import is_romanization_match, normalize_base
from kanadrill.nlp.tokenizer import SyllableTokenizer
from kanadrill.schema import CharacterAnalysis, CharacterUnit


def is_answer_correct(answer: str, accepted: Iterable[str]) -> bool:
    """Kana whole-answer check: exact after lower-casing and trimming."""
    normalized = normalize_base(answer)
    if not normalized:
        return False
    return any(normalize_base(a) == normalized for a in accepted)


def validate_reading(answer: str, accepted: Iterable[str]) -> bool:
    """Kanji/vocabulary whole-word check, accepting romanization variants."""
    return is_romanization_match(answer, accepted)


def build_analysis(
    glyph: str,
    unit: Optional[CharacterUnit],
    user_syllable: str,
    position: int,
    is_correct: Optional[bool] = None,
) -> CharacterAnalysis:
    """One verdict slot. Unknown glyphs (``unit is None``) are always wrong."""
    if unit is None:
        return CharacterAnalysis(
            character=glyph,
            user_syllable=user_syllable,
            correct_syllables=[],
            is_correct=False,
            position=position,
        )
    if is_correct is None:
        is_correct = unit.accepts(user_syllable)
    return CharacterAnalysis(
        character=glyph,
        user_syllable=user_syllable,
        correct_syllables=list(unit.transliterations),
        is_correct=is_correct,
        position=position,
    )


class SyllableMatchingAnalyzer(BaseAnswerAnalyzer):
    """Tokenized-resync strategy.

    The romaji answer is split into one syllable per expected glyph by
    :class:`SyllableTokenizer`, and each syllable is compared with that
    glyph's spellings exactly. Variant expansion is deliberately not used
    here: per-glyph spellings are already listed in the table.
    """

    def __init__(self, registry, tokenizer: Optional[SyllableTokenizer] = None):
        super().__init__(registry)
        self.tokenizer = tokenizer or SyllableTokenizer()

    def analyze(self, expected: str, raw_answer: str) -> List[CharacterAnalysis]:
        glyphs = self.segmenter.segment(expected)
        units = self.lookup_units(glyphs)
        tokens = self.tokenizer.tokenize(raw_answer, units)

        analyses = [
            build_analysis(glyph, unit, tokens[i] if i < len(tokens) else "", i)
            for i, (glyph, unit) in enumerate(zip(glyphs, units))
        ]
        logger.debug(
            f"Analyzed '{raw_answer}' against '{expected}': "
            f"{sum(a.is_correct for a in analyses)}/{len(analyses)} correct"
        )
        return analyses
