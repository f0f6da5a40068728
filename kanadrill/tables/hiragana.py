"""Hiragana character table: glyph -> accepted romanizations."""

from typing import List
from kanadrill.schema import CharacterClass, CharacterUnit

# First spelling of each entry is the canonical (display) form.
HIRAGANA_PLAIN = [
    # A-row
    ("あ", ("a",)), ("い", ("i",)), ("う", ("u",)), ("え", ("e",)), ("お", ("o",)),
    # K-row
    ("か", ("ka",)), ("き", ("ki",)), ("く", ("ku",)), ("け", ("ke",)), ("こ", ("ko",)),
    # S-row
    ("さ", ("sa",)), ("し", ("shi", "si")), ("す", ("su",)), ("せ", ("se",)), ("そ", ("so",)),
    # T-row
    ("た", ("ta",)), ("ち", ("chi", "ti")), ("つ", ("tsu", "tu")), ("て", ("te",)), ("と", ("to",)),
    # N-row
    ("な", ("na",)), ("に", ("ni",)), ("ぬ", ("nu",)), ("ね", ("ne",)), ("の", ("no",)),
    # H-row
    ("は", ("ha",)), ("ひ", ("hi",)), ("ふ", ("fu", "hu")), ("へ", ("he",)), ("ほ", ("ho",)),
    # M-row
    ("ま", ("ma",)), ("み", ("mi",)), ("む", ("mu",)), ("め", ("me",)), ("も", ("mo",)),
    # Y-row
    ("や", ("ya",)), ("ゆ", ("yu",)), ("よ", ("yo",)),
    # R-row
    ("ら", ("ra",)), ("り", ("ri",)), ("る", ("ru",)), ("れ", ("re",)), ("ろ", ("ro",)),
    # W-row
    ("わ", ("wa",)), ("を", ("wo", "o")),
    # moraic n
    ("ん", ("n", "nn")),
]

HIRAGANA_VOICED = [
    ("が", ("ga",)), ("ぎ", ("gi",)), ("ぐ", ("gu",)), ("げ", ("ge",)), ("ご", ("go",)),
    ("ざ", ("za",)), ("じ", ("ji", "zi")), ("ず", ("zu", "du")), ("ぜ", ("ze",)), ("ぞ", ("zo",)),
    ("だ", ("da",)), ("ぢ", ("ji", "di")), ("づ", ("zu", "du")), ("で", ("de",)), ("ど", ("do",)),
    ("ば", ("ba",)), ("び", ("bi",)), ("ぶ", ("bu",)), ("べ", ("be",)), ("ぼ", ("bo",)),
    ("ぱ", ("pa",)), ("ぴ", ("pi",)), ("ぷ", ("pu",)), ("ぺ", ("pe",)), ("ぽ", ("po",)),
]

HIRAGANA_COMBO = [
    ("きゃ", ("kya",)), ("きゅ", ("kyu",)), ("きょ", ("kyo",)),
    ("しゃ", ("sha", "sya")), ("しゅ", ("shu", "syu")), ("しょ", ("sho", "syo")),
    ("ちゃ", ("cha", "tya")), ("ちゅ", ("chu", "tyu")), ("ちょ", ("cho", "tyo")),
    ("にゃ", ("nya",)), ("にゅ", ("nyu",)), ("にょ", ("nyo",)),
    ("ひゃ", ("hya",)), ("ひゅ", ("hyu",)), ("ひょ", ("hyo",)),
    ("みゃ", ("mya",)), ("みゅ", ("myu",)), ("みょ", ("myo",)),
    ("りゃ", ("rya",)), ("りゅ", ("ryu",)), ("りょ", ("ryo",)),
    ("ぎゃ", ("gya",)), ("ぎゅ", ("gyu",)), ("ぎょ", ("gyo",)),
    ("じゃ", ("ja", "jya", "zya")), ("じゅ", ("ju", "jyu", "zyu")), ("じょ", ("jo", "jyo", "zyo")),
    ("びゃ", ("bya",)), ("びゅ", ("byu",)), ("びょ", ("byo",)),
    ("ぴゃ", ("pya",)), ("ぴゅ", ("pyu",)), ("ぴょ", ("pyo",)),
]


def _build(rows, character_class: CharacterClass) -> List[CharacterUnit]:
    return [
        CharacterUnit(glyph=glyph, transliterations=spellings, character_class=character_class)
        for glyph, spellings in rows
    ]


def hiragana_units() -> List[CharacterUnit]:
    """All 104 hiragana units: plain, then voiced, then combo."""
    return (
        _build(HIRAGANA_PLAIN, CharacterClass.plain)
        + _build(HIRAGANA_VOICED, CharacterClass.voiced)
        + _build(HIRAGANA_COMBO, CharacterClass.combo)
    )
