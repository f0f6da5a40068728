"""Katakana character table, mirrored from the hiragana table."""

from typing import List
import jaconv
from kanadrill.schema import CharacterUnit
from .hiragana import hiragana_units


def katakana_units() -> List[CharacterUnit]:
    """Katakana counterparts of every hiragana unit, same spellings and classes."""
    return [
        unit.model_copy(update={"glyph": jaconv.hira2kata(unit.glyph)})
        for unit in hiragana_units()
    ]
