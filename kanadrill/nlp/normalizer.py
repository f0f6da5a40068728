"""Romanization variant normalization.

Kanji and vocabulary readings have several accepted spellings: long vowels
written with macrons or doubled letters, Hepburn vs. Kunrei syllables, and
the moraic ん written as "n" or "nn". Rather than picking one canonical form,
both the user's answer and every accepted answer are expanded into the set of
equivalent spellings and the two sets are intersected.
"""

import re
from typing import Iterable, List, Set

# Macron vowel -> plain ASCII spellings
LONG_VOWEL_RULES = {
    "ō": ("o", "ou", "oh", "oo"),
    "ū": ("u", "uu", "uh"),
    "ā": ("a", "aa", "ah"),
    "ē": ("e", "ei", "ee", "eh"),
    "ī": ("i", "ii", "ih"),
}

# Each group lists spellings of the same sound; any member may stand in for any other.
SYLLABLE_VARIANT_GROUPS = (
    ("shi", "si"),
    ("chi", "ti"),
    ("tsu", "tu"),
    ("fu", "hu"),
    ("ji", "zi", "di"),
    ("zu", "du"),
    ("sha", "sya"),
    ("shu", "syu"),
    ("sho", "syo"),
    ("cha", "tya"),
    ("chu", "tyu"),
    ("cho", "tyo"),
    ("ja", "zya"),
    ("ju", "zyu"),
    ("jo", "zyo"),
)

_SINGLE_N_RE = re.compile(r"n([^aeiou]|$)")

# Display-form rewrites, applied in order
_CANONICAL_REWRITES = (
    ("ou", "ō"),
    ("uu", "ū"),
    ("aa", "ā"),
    ("ei", "ē"),
    ("ii", "ī"),
    ("si", "shi"),
    ("ti", "chi"),
    ("tu", "tsu"),
    ("hu", "fu"),
    ("zi", "ji"),
)


def normalize_base(text: str) -> str:
    """Lower-case and trim."""
    return text.lower().strip()


def expand_long_vowels(text: str) -> Set[str]:
    results = {text}
    for macron, spellings in LONG_VOWEL_RULES.items():
        if macron not in text:
            continue
        for current in list(results):
            for spelling in spellings:
                results.add(current.replace(macron, spelling))
    return results


def expand_syllable_variants(text: str) -> Set[str]:
    results = {text}
    for group in SYLLABLE_VARIANT_GROUPS:
        for form in group:
            if form not in text:
                continue
            for current in list(results):
                for replacement in group:
                    if replacement != form:
                        results.add(current.replace(form, replacement))
    return results


def expand_double_n(text: str) -> Set[str]:
    """"nn" may be written "n", and an n before a consonant (or at the end) may be doubled."""
    results = {text}
    if "nn" in text:
        results.add(text.replace("nn", "n"))
    doubled = _SINGLE_N_RE.sub(r"nn\1", text)
    if doubled != text:
        results.add(doubled)
    return results


def _apply(rule, variants: Iterable[str]) -> Set[str]:
    expanded: Set[str] = set()
    for variant in variants:
        expanded |= rule(variant)
    return expanded


def expand_variants(text: str) -> Set[str]:
    """All spellings considered equivalent to *text*.

    Each rule runs over the whole set produced so far, so forms that need two
    rules combined (a long vowel next to a "shi"/"si" syllable, say) are
    reached. The result always contains the base-normalized input.

    >>> sorted(expand_variants("Shi"))
    ['shi', 'si']
    """
    variants = {normalize_base(text)}
    for rule in (expand_long_vowels, expand_syllable_variants, expand_double_n):
        variants |= _apply(rule, variants)
    return variants


def is_romanization_match(answer: str, accepted: Iterable[str]) -> bool:
    """True if *answer* is an accepted reading or a spelling variant of one.

    >>> is_romanization_match("toukyou", ["tōkyō"])
    True
    >>> is_romanization_match("ddenki", ["denki"])
    False
    """
    accepted = list(accepted)
    normalized = normalize_base(answer)
    if not normalized:
        return False

    # Fast path: plain case-insensitive equality
    if any(normalize_base(a) == normalized for a in accepted):
        return True

    answer_variants = expand_variants(normalized)
    for candidate in accepted:
        if answer_variants & expand_variants(candidate):
            return True
    return False


def canonical_romanization(text: str) -> str:
    """Preferred display spelling: macrons for long vowels, Hepburn syllables."""
    canonical = normalize_base(text)
    for pattern, replacement in _CANONICAL_REWRITES:
        canonical = canonical.replace(pattern, replacement)
    return canonical

