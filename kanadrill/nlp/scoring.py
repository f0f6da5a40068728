"""Score aggregation and correct-answer display helpers."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence, Tuple

from kanadrill.schema import CharacterAnalysis


def _percentage(correct: int, total: int) -> int:
    if total == 0:
        return 0
    # Half-up, so 2/8 -> 25 and 1/8 -> 13 (round() would give 12).
    ratio = Decimal(100 * correct) / Decimal(total)
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def score_from_verdicts(verdicts: Sequence[Optional[bool]]) -> int:
    """Percentage of ``True`` verdicts, 0 for an empty sequence."""
    return _percentage(sum(1 for v in verdicts if v is True), len(verdicts))


def calculate_score(analyses: Sequence[CharacterAnalysis]) -> int:
    """Percentage of correctly answered characters, 0 when there are none."""
    return score_from_verdicts([a.is_correct for a in analyses])


def drill_stats(verdicts: Sequence[Optional[bool]]) -> Dict[str, int]:
    """Totals for a finished drill; ``None`` marks an unanswered question."""
    return {
        "total": len(verdicts),
        "correct": sum(1 for v in verdicts if v is True),
        "incorrect": sum(1 for v in verdicts if v is False),
        "unanswered": sum(1 for v in verdicts if v is None),
        "percentage": score_from_verdicts(verdicts),
    }


def format_with_indicators(analyses: Sequence[CharacterAnalysis]) -> List[Tuple[str, bool]]:
    """``(canonical syllable, is_wrong)`` per character, for "the answer was ..." feedback."""
    return [
        (a.correct_syllables[0] if a.correct_syllables else "", not a.is_correct)
        for a in analyses
    ]
