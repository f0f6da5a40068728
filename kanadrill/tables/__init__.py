"""Character tables and reading datasets."""

from .registry import (
    CharacterRegistry,
    get_registry,
    hiragana_registry,
    katakana_registry,
    kana_registry,
)
from .datasets import (
    load_kanji,
    load_vocabulary,
    find_kanji,
    find_vocabulary,
    entries_for_level,
)

__all__ = [
    'CharacterRegistry',
    'get_registry',
    'hiragana_registry',
    'katakana_registry',
    'kana_registry',
    'load_kanji',
    'load_vocabulary',
    'find_kanji',
    'find_vocabulary',
    'entries_for_level',
]
