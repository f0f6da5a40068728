"""Syllable-aware splitting of a romaji answer against expected kana units."""

from typing import List, Optional, Sequence

from kanadrill.logger import logger
from kanadrill.nlp.base import BaseTokenizer
from kanadrill.schema import CharacterUnit

# Every legal romaji syllable, used to pull a plausible syllable off the
# front of an answer when it does not spell the expected one.
VALID_SYLLABLES = frozenset([
    # Vowels
    'a', 'i', 'u', 'e', 'o',
    # Basic consonants
    'ka', 'ki', 'ku', 'ke', 'ko',
    'sa', 'si', 'shi', 'su', 'se', 'so',
    'ta', 'ti', 'chi', 'tsu', 'tu', 'te', 'to',
    'na', 'ni', 'nu', 'ne', 'no',
    'ha', 'hi', 'fu', 'hu', 'he', 'ho',
    'ma', 'mi', 'mu', 'me', 'mo',
    'ya', 'yu', 'yo',
    'ra', 'ri', 'ru', 're', 'ro',
    'wa', 'wo', 'n',
    # Voiced
    'ga', 'gi', 'gu', 'ge', 'go',
    'za', 'zi', 'ji', 'zu', 'ze', 'zo',
    'da', 'di', 'du', 'de', 'do',
    'ba', 'bi', 'bu', 'be', 'bo',
    'pa', 'pi', 'pu', 'pe', 'po',
    # Combos
    'kya', 'kyu', 'kyo',
    'sha', 'sya', 'shu', 'syu', 'sho', 'syo',
    'cha', 'cya', 'tya', 'chu', 'cyu', 'tyu', 'cho', 'cyo', 'tyo',
    'nya', 'nyu', 'nyo',
    'hya', 'hyu', 'hyo',
    'mya', 'myu', 'myo',
    'rya', 'ryu', 'ryo',
    'gya', 'gyu', 'gyo',
    'ja', 'zya', 'ju', 'zyu', 'jo', 'zyo',
    'bya', 'byu', 'byo',
    'pya', 'pyu', 'pyo',
])

MAX_SYLLABLE_LEN = 3


def greedy_syllable(text: str) -> Optional[str]:
    """Longest whitelisted syllable at the start of *text* (3, then 2, then 1 chars)."""
    for length in range(min(MAX_SYLLABLE_LEN, len(text)), 0, -1):
        candidate = text[:length]
        if candidate in VALID_SYLLABLES:
            return candidate
    return None


def find_sync_point(remaining: str, future_units: Sequence[Optional[CharacterUnit]]) -> Optional[int]:
    """Earliest offset in *remaining* where any later unit's spelling occurs.

    Returns ``None`` if no later unit's spelling occurs anywhere.
    """
    best: Optional[int] = None
    for unit in future_units:
        if unit is None:
            continue
        for spelling in unit.transliterations:
            pos = remaining.find(spelling.lower())
            if pos >= 0 and (best is None or pos < best):
                best = pos
    return best


class SyllableTokenizer(BaseTokenizer):
    """Split a raw romaji answer into one token per expected character unit.

    The answer is consumed left to right. A unit whose spelling starts the
    unconsumed text takes it. Otherwise the tokenizer looks for the nearest
    spelling of any later unit (the sync point) and gives everything before
    it to the current unit, so one typo does not shift every later verdict.

    Example: ``"banana"`` against か, た, な gives ``["ba", "na", "na"]``.

    Tokens are attributions for feedback, not a lossless split: when a
    syllable is deferred to a later unit the current unit gets ``""``.
    """

    def tokenize(self, raw_answer: str, expected_units: Sequence[Optional[CharacterUnit]]) -> List[str]:
        tokens: List[str] = []
        remaining = raw_answer.lower().strip()

        for index, unit in enumerate(expected_units):
            if unit is None:
                tokens.append("")
                continue

            matched = self._match_expected(remaining, unit)
            if matched is not None:
                tokens.append(matched)
                remaining = remaining[len(matched):]
                continue

            if not remaining:
                tokens.append("")
                continue

            future_units = expected_units[index + 1:]
            sync_point = find_sync_point(remaining, future_units)

            if sync_point is None:
                # Nothing ahead to resync on: the rest is this unit's typo.
                tokens.append(remaining)
                remaining = ""
                continue

            if sync_point > 0:
                tokens.append(remaining[:sync_point])
                remaining = remaining[sync_point:]
                continue

            token = self._resolve_offset_zero(remaining, future_units)
            tokens.append(token)
            remaining = remaining[len(token):]

        logger.debug(f"Tokenized '{raw_answer}' into {tokens}")
        return tokens

    @staticmethod
    def _match_expected(remaining: str, unit: CharacterUnit) -> Optional[str]:
        for spelling in unit.transliterations:
            spelling = spelling.lower()
            if spelling and remaining.startswith(spelling):
                return spelling
        return None

    @staticmethod
    def _resolve_offset_zero(remaining: str, future_units: Sequence[Optional[CharacterUnit]]) -> str:
        """Token for the current unit when a later unit's spelling starts *remaining*.

        If the leading syllable occurs only once and a later unit expects it,
        the current unit gets nothing and the syllable is left for that unit.
        Otherwise the syllable is taken here, treating it as a repeat.
        """
        syllable = greedy_syllable(remaining)
        if syllable is None:
            return remaining[:1]

        appears_again = remaining.find(syllable, len(syllable)) >= 0
        if not appears_again and any(u is not None and u.accepts(syllable) for u in future_units):
            return ""
        return syllable
