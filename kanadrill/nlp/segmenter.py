"""Kana glyph segmentation."""

from typing import List
from kanadrill.nlp.base import BaseSegmenter


class GlyphSegmenter(BaseSegmenter):
    """Split a kana string into atomic character units.

    Two-glyph combinations (きゃ, シュ, ...) are preferred over their single
    glyphs whenever the registry knows the pair. Glyphs the registry does not
    know are emitted verbatim, one code point at a time, so position
    alignment with the expected sequence is preserved.
    """

    def __init__(self, registry):
        self.registry = registry

    def segment(self, text: str) -> List[str]:
        units: List[str] = []
        i = 0

        while i < len(text):
            pair = text[i:i + 2]
            if len(pair) == 2 and pair in self.registry:
                units.append(pair)
                i += 2
                continue

            # Known single glyph or unknown code point: both consume one.
            units.append(text[i])
            i += 1

        return units
