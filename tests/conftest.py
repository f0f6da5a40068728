"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kanadrill.schema import CharacterClass, CharacterUnit
from kanadrill.tables.registry import CharacterRegistry, hiragana_registry, kana_registry


@pytest.fixture
def hiragana():
    """Shared hiragana registry."""
    return hiragana_registry()


@pytest.fixture
def kana():
    """Shared hiragana + katakana registry."""
    return kana_registry()


@pytest.fixture
def units(hiragana):
    """Look up hiragana units by glyph; unknown glyphs come back as None."""
    def _units(*glyphs):
        return [hiragana.lookup(g) for g in glyphs]
    return _units


@pytest.fixture
def fixture_registry():
    """Tiny hand-built registry, independent of the bundled tables."""
    return CharacterRegistry(
        [
            CharacterUnit(glyph="か", transliterations=("ka",)),
            CharacterUnit(glyph="き", transliterations=("ki",)),
            CharacterUnit(glyph="きゃ", transliterations=("kya",), character_class=CharacterClass.combo),
        ],
        name="fixture",
    )


@pytest.fixture
def reset_answers():
    """Drop the cached module analyzer before and after a test."""
    from kanadrill import answers
    answers._analyzer = None
    yield answers
    answers._analyzer = None
