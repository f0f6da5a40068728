"""Kana to Hepburn romaji conversion used to fill in missing dataset readings."""

import jaconv
import pykakasi

# pykakasi builds its conversion tables on construction; cached for the life of the process
_kks = pykakasi.kakasi()


def kana_to_romaji(kana: str) -> str:
    """Convert *kana* (hiragana or katakana) to a single Hepburn string.

    Katakana is folded to hiragana first so both scripts romanize the same
    way, e.g. ``"トウキョウ"`` and ``"とうきょう"`` both give ``"toukyou"``.
    """
    hira = jaconv.kata2hira(kana.strip())
    return "".join(item["hepburn"] for item in _kks.convert(hira)).lower()
