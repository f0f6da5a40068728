"""Immutable glyph registry shared by the segmenter and the analyzers."""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional

from kanadrill.nlp.base import DuplicateGlyphError
from kanadrill.schema import CharacterClass, CharacterUnit


class CharacterRegistry:
    """Flat lookup table from glyph string to :class:`CharacterUnit`.

    Built once and never mutated; pass it into the components that need it
    rather than reaching for module globals, so tests can inject fixture
    tables.
    """

    def __init__(self, units: Iterable[CharacterUnit], name: str = "custom"):
        by_glyph: Dict[str, CharacterUnit] = {}
        for unit in units:
            if unit.glyph in by_glyph:
                raise DuplicateGlyphError(unit.glyph)
            by_glyph[unit.glyph] = unit
        self.name = name
        self._units = tuple(by_glyph.values())
        self._by_glyph = MappingProxyType(by_glyph)

    def lookup(self, glyph: str) -> Optional[CharacterUnit]:
        return self._by_glyph.get(glyph)

    def by_class(self, character_class: CharacterClass) -> List[CharacterUnit]:
        character_class = CharacterClass(character_class)
        return [u for u in self._units if u.character_class is character_class]

    def __contains__(self, glyph: object) -> bool:
        return glyph in self._by_glyph

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[CharacterUnit]:
        return iter(self._units)

    def __repr__(self) -> str:
        return f"CharacterRegistry(name={self.name!r}, units={len(self)})"


_cache: Dict[str, CharacterRegistry] = {}


def hiragana_registry() -> CharacterRegistry:
    if "hiragana" not in _cache:
        from .hiragana import hiragana_units
        _cache["hiragana"] = CharacterRegistry(hiragana_units(), name="hiragana")
    return _cache["hiragana"]


def katakana_registry() -> CharacterRegistry:
    if "katakana" not in _cache:
        from .katakana import katakana_units
        _cache["katakana"] = CharacterRegistry(katakana_units(), name="katakana")
    return _cache["katakana"]


def kana_registry() -> CharacterRegistry:
    """Script-agnostic registry holding both hiragana and katakana."""
    if "kana" not in _cache:
        _cache["kana"] = CharacterRegistry(
            [*hiragana_registry(), *katakana_registry()], name="kana"
        )
    return _cache["kana"]


def get_registry(script_mode: str) -> CharacterRegistry:
    """Registry for a script mode ('hiragana', 'katakana' or 'kana').

    Raises:
        ValueError: If script_mode is not supported
    """
    script_mode = script_mode.lower()

    if script_mode == 'hiragana':
        return hiragana_registry()
    elif script_mode == 'katakana':
        return katakana_registry()
    elif script_mode == 'kana':
        return kana_registry()
    else:
        raise ValueError(f"Unsupported script mode: {script_mode}")
