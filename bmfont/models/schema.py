"""In-memory representation of a parsed BMFont descriptor.

A ``Font`` owns its page names, glyphs and kerning pairs. The parser fills
the records field by field; every numeric field starts at zero so tags
missing from a line keep that default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class Glyph:
    """Geometry and metrics of one character.

    Attributes:
        id: Code point the glyph renders.
        x: Left edge of the glyph rectangle on its texture page.
        y: Top edge of the glyph rectangle on its texture page.
        width: Rectangle width in pixels.
        height: Rectangle height in pixels.
        x_offset: Horizontal offset from the pen position when drawing.
        y_offset: Vertical offset from the top of the line when drawing.
        x_advance: Pen advance after drawing the glyph.
        page: Index of the texture page holding the glyph.
        channel: Texture channel mask the glyph is stored in.
    """

    id: int = 0
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    x_offset: int = 0
    y_offset: int = 0
    x_advance: int = 0
    page: int = 0
    channel: int = 0


@dataclass
class KerningPair:
    """Spacing adjustment applied between two adjacent glyphs."""

    first: int = 0
    second: int = 0
    amount: int = 0


@dataclass
class Font:
    """A parsed font descriptor.

    ``pages`` is indexed by page id; a slot is None when no page record
    named it. After a successful parse the lengths of ``pages``, ``glyphs``
    and ``kernings`` equal the counts declared in the descriptor.
    """

    name: Optional[str] = None
    size: int = 0
    line_height: int = 0
    base: int = 0
    scale_w: int = 0
    scale_h: int = 0
    alpha_channel: int = 0
    red_channel: int = 0
    green_channel: int = 0
    blue_channel: int = 0
    pages: List[Optional[str]] = field(default_factory=list)
    glyphs: List[Glyph] = field(default_factory=list)
    kernings: List[KerningPair] = field(default_factory=list)

    @property
    def num_pages(self) -> int:
        return len(self.pages)

    @property
    def num_chars(self) -> int:
        return len(self.glyphs)

    @property
    def num_kernings(self) -> int:
        return len(self.kernings)

    @property
    def display_name(self) -> Optional[str]:
        """``name`` without one surrounding pair of double quotes."""
        name = self.name
        if name is not None and len(name) >= 2 and name[0] == name[-1] == '"':
            return name[1:-1]
        return name

    def _index(self, name: str, records: list, key) -> dict:
        # Cached per list object and length; rebuilt when either changes.
        cached = self.__dict__.get(name)
        if cached is None or cached[0] is not records or cached[1] != len(records):
            cached = (records, len(records), {key(r): r for r in records})
            self.__dict__[name] = cached
        return cached[2]

    def glyph(self, codepoint: int) -> Optional[Glyph]:
        """Look up a glyph by id; the last record wins for duplicate ids."""
        index: Dict[int, Glyph] = self._index(
            "_glyph_index", self.glyphs, lambda g: g.id
        )
        return index.get(codepoint)

    def kerning(self, first: int, second: int) -> int:
        """Return the kerning amount for a glyph pair, 0 when none is defined."""
        table: Dict[Tuple[int, int], KerningPair] = self._index(
            "_kerning_index", self.kernings, lambda k: (k.first, k.second)
        )
        pair = table.get((first, second))
        return pair.amount if pair is not None else 0


__all__ = ["Font", "Glyph", "KerningPair"]
