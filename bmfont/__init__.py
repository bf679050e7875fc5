"""Loader for BMFont text font descriptors."""

from bmfont.config.schema import ParserConfig
from bmfont.models.schema import Font, Glyph, KerningPair
from bmfont.parsers.base import (
    BMFontError,
    CountMismatchError,
    ParseError,
    SourceError,
)
from bmfont.runtime.api import (
    ParseResult,
    free_font,
    last_error_message,
    parse,
    parse_file,
    parse_string,
    try_parse,
)

__version__ = "0.1.0"

__all__ = [
    "BMFontError",
    "CountMismatchError",
    "Font",
    "Glyph",
    "KerningPair",
    "ParseError",
    "ParseResult",
    "ParserConfig",
    "SourceError",
    "free_font",
    "last_error_message",
    "parse",
    "parse_file",
    "parse_string",
    "try_parse",
]
