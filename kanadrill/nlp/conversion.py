"""Conversion-based answer analysis.

The romaji answer is converted to kana with jaconv and compared with the
expected kana unit by unit. Simpler than syllable tokenization, at the cost
of reporting the converted kana instead of the letters the user typed.
"""

import re
from typing import Any, Dict, List, Optional, Protocol, Sequence

import jaconv

from kanadrill.logger import logger
from kanadrill.nlp.analyzer import build_analysis
from kanadrill.nlp.base import BaseAnswerAnalyzer
from kanadrill.schema import CharacterAnalysis, CharacterUnit


class RomajiConverter(Protocol):
    def to_hiragana(self, text: str) -> str: ...

    def to_katakana(self, text: str) -> str: ...


# Moraic n spelled "nn" ahead of a vowel or y, e.g. "onna" (お ん な)
_MORAIC_NN_RE = re.compile(r"nn(?=[aeiouy])")


class JaconvConverter:
    """Romaji -> kana using ``jaconv.alphabet2kana``.

    jaconv turns every "nn" into ん before it converts the な row, so
    "onna" would come out as おんあ. "nn" ahead of a vowel or y is rewritten
    to the "n'n" spelling first, which jaconv reads as ん + the な row.
    """

    def to_hiragana(self, text: str) -> str:
        text = _MORAIC_NN_RE.sub("n'n", text.lower().strip())
        return jaconv.alphabet2kana(text)

    def to_katakana(self, text: str) -> str:
        return jaconv.hira2kata(self.to_hiragana(text))


def is_katakana_char(ch: str) -> bool:
    return "゠" <= ch <= "ヿ"


def align_units(
    expected_glyphs: Sequence[str],
    expected_units: Sequence[Optional[CharacterUnit]],
    user_glyphs: Sequence[str],
) -> List[CharacterAnalysis]:
    """Align two kana unit sequences of different lengths.

    Each expected unit takes the next user unit if they are equal. Otherwise
    the user units up to the next one that some later expected unit wants
    are consumed as this unit's (wrong) answer. If that next wanted unit is
    right at the cursor, the current unit was skipped and gets nothing.

    Example: にゅぺべ against converted にゆぺべ gives wrong, right, right.
    """
    results: List[CharacterAnalysis] = []
    user_index = 0

    for i, (glyph, unit) in enumerate(zip(expected_glyphs, expected_units)):
        if unit is None:
            results.append(build_analysis(glyph, None, "", i))
            continue

        if user_index < len(user_glyphs) and user_glyphs[user_index] == glyph:
            results.append(build_analysis(glyph, unit, user_glyphs[user_index], i, is_correct=True))
            user_index += 1
            continue

        remaining_expected = set(expected_glyphs[i + 1:])
        sync_point = next(
            (j for j in range(user_index, len(user_glyphs)) if user_glyphs[j] in remaining_expected),
            None,
        )

        if sync_point is None:
            consumed = "".join(user_glyphs[user_index:])
            user_index = len(user_glyphs)
        else:
            consumed = "".join(user_glyphs[user_index:sync_point])
            user_index = sync_point

        results.append(build_analysis(glyph, unit, consumed, i, is_correct=False))

    return results


class ConversionAnalyzer(BaseAnswerAnalyzer):
    """Conversion-based strategy: romaji -> kana, then kana-to-kana comparison."""

    def __init__(self, registry, converter: Optional[RomajiConverter] = None):
        super().__init__(registry)
        self.converter = converter or JaconvConverter()

    def convert(self, expected: str, raw_answer: str) -> str:
        """Convert the answer into the script of the expected sequence."""
        if expected and is_katakana_char(expected[0]):
            return self.converter.to_katakana(raw_answer)
        return self.converter.to_hiragana(raw_answer)

    def analyze(self, expected: str, raw_answer: str) -> List[CharacterAnalysis]:
        converted = self.convert(expected, raw_answer)
        expected_glyphs = self.segmenter.segment(expected)
        expected_units = self.lookup_units(expected_glyphs)
        user_glyphs = self.segmenter.segment(converted)

        if len(expected_glyphs) != len(user_glyphs):
            logger.debug(
                f"Unit count mismatch ({len(expected_glyphs)} vs {len(user_glyphs)}) "
                f"for '{raw_answer}' -> '{converted}'; aligning"
            )
            return align_units(expected_glyphs, expected_units, user_glyphs)

        return [
            build_analysis(glyph, unit, user_glyph, i, is_correct=(unit is not None and glyph == user_glyph))
            for i, (glyph, unit, user_glyph) in enumerate(zip(expected_glyphs, expected_units, user_glyphs))
        ]


def conversion_diagnostics(raw_answer: str, converter: Optional[RomajiConverter] = None) -> Dict[str, Any]:
    """What the converter makes of *raw_answer*, and which letters it left as ASCII."""
    converter = converter or JaconvConverter()
    converted = converter.to_hiragana(raw_answer)
    unconverted = [ch for ch in converted if ord(ch) < 128 and not ch.isspace()]
    return {
        "original": raw_answer,
        "converted": converted,
        "has_unconverted": bool(unconverted),
        "unconverted_chars": unconverted,
    }
