#!/usr/bin/env python3
"""Check a romaji answer from the command line.

    python check_answer.py かたな banana
    python check_answer.py かたな banana --strategy conversion-based
    python check_answer.py 東京 toukyou --reading "tōkyō,tokyo"
"""
import argparse
import sys

from kanadrill.answers import analyze_multi_character_answer, configure, is_romanization_match
from kanadrill.config import AnalysisStrategy, parse_enum
from kanadrill.logger import logger
from kanadrill.nlp.scoring import calculate_score, format_with_indicators


def check_reading(word: str, answer: str, readings: str) -> bool:
    accepted = [r.strip() for r in readings.split(",") if r.strip()]
    ok = is_romanization_match(answer, accepted)
    logger.info(f"{word}: '{answer}' {'✅ accepted' if ok else '❌ rejected'} (accepted: {', '.join(accepted)})")
    return ok


def check_kana(expected: str, answer: str) -> bool:
    analyses = analyze_multi_character_answer(expected, answer)
    for a in analyses:
        mark = "✅" if a.is_correct else "❌"
        logger.info(f"{mark} [{a.position}] {a.character}: typed '{a.user_syllable}', expected {'/'.join(a.correct_syllables) or '?'}")

    shown = "".join(s if not wrong else f"[{s}]" for s, wrong in format_with_indicators(analyses))
    score = calculate_score(analyses)
    logger.info(f"Correct answer: {shown} | score {score}%")
    return bool(analyses) and all(a.is_correct for a in analyses)


def main() -> int:
    parser = argparse.ArgumentParser(description="Check a romaji answer against Japanese text")
    parser.add_argument("expected", help="Kana sequence (or kanji/word with --reading)")
    parser.add_argument("answer", help="Romaji answer as typed")
    parser.add_argument("--strategy", choices=[s.value for s in AnalysisStrategy],
                        help="Matching strategy (default: from KANADRILL_ANALYSIS_STRATEGY)")
    parser.add_argument("--reading", help="Comma-separated accepted readings; enables whole-word variant matching")
    args = parser.parse_args()

    if args.reading:
        ok = check_reading(args.expected, args.answer, args.reading)
    else:
        configure(strategy=parse_enum(AnalysisStrategy, "--strategy", args.strategy) if args.strategy else None)
        ok = check_kana(args.expected, args.answer)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
