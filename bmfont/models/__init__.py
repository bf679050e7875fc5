"""Font data model."""

from .schema import Font, Glyph, KerningPair

__all__ = ["Font", "Glyph", "KerningPair"]
