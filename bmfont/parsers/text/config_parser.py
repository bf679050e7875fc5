"""Section parser for BMFont text descriptors.

A descriptor is read in a fixed order::

    info face=... size=...
    common lineHeight=... base=... scaleW=... scaleH=... pages=N
    page id=... file="..."          (N times)
    chars count=M
    char id=... x=... y=... ...     (M times)
    kernings count=K                (optional section)
    kerning first=... second=... amount=...   (K times)

Each section is one method of ``BMFontTextParser``. Unknown tags are
skipped. Declared counts are enforced: a section with fewer or more
records than it announced aborts the parse.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from bmfont.config.schema import ParserConfig
from bmfont.models.schema import Font, Glyph, KerningPair
from bmfont.parsers.base import (
    CountMismatchError,
    MissingFieldError,
    PageIdError,
    ResourceLimitError,
    UnexpectedTokenError,
)
from bmfont.parsers.text.grammar import (
    FieldSpec,
    TokenCursor,
    integer_field,
    quoted_field,
    word_field,
)
from bmfont.parsers.text.tokens import CharacterSource, Tokenizer
from bmfont.parsers.text.values import INT16, INT32, UINT8, UINT16, UINT32

logger = logging.getLogger("bmfont.parsers.text.config_parser")


INFO_FIELDS: Dict[str, FieldSpec] = {
    "face": word_field("name"),
    "size": integer_field("size", INT16),
}

COMMON_FIELDS: Dict[str, FieldSpec] = {
    "lineHeight": integer_field("line_height", UINT16),
    "base": integer_field("base", UINT16),
    "scaleW": integer_field("scale_w", UINT16),
    "scaleH": integer_field("scale_h", UINT16),
    "pages": integer_field("pages", UINT16),
    "alphaChnl": integer_field("alpha_channel", UINT8),
    "redChnl": integer_field("red_channel", UINT8),
    "greenChnl": integer_field("green_channel", UINT8),
    "blueChnl": integer_field("blue_channel", UINT8),
}

PAGE_FIELDS: Dict[str, FieldSpec] = {
    "id": integer_field("id", INT32),
    "file": quoted_field("file"),
}

COUNT_FIELDS: Dict[str, FieldSpec] = {
    "count": integer_field("count", UINT16),
}

KERNING_FIELDS: Dict[str, FieldSpec] = {
    "first": integer_field("first", UINT32),
    "second": integer_field("second", UINT32),
    "amount": integer_field("amount", INT16),
}


def char_fields(signed_offsets: bool = False) -> Dict[str, FieldSpec]:
    """Build the key table for ``char`` records.

    Args:
        signed_offsets: Read offsets and advance as int16 instead of uint16.
    """
    metric = INT16 if signed_offsets else UINT16
    return {
        "id": integer_field("id", UINT32),
        "x": integer_field("x", UINT16),
        "y": integer_field("y", UINT16),
        "width": integer_field("width", UINT16),
        "height": integer_field("height", UINT16),
        "xoffset": integer_field("x_offset", metric),
        "yoffset": integer_field("y_offset", metric),
        "xadvance": integer_field("x_advance", metric),
        "page": integer_field("page", UINT8),
        "chnl": integer_field("channel", UINT8),
    }


class BMFontTextParser:
    """Recursive-descent parser turning a descriptor into a ``Font``.

    A parser instance handles a single source; call ``parse()`` once.
    """

    def __init__(
        self,
        source: CharacterSource,
        config: Optional[ParserConfig] = None,
    ) -> None:
        self.config = config or ParserConfig.default()
        self.cursor = TokenCursor(
            Tokenizer(source, max_token_length=self.config.max_token_length)
        )
        self._char_fields = char_fields(self.config.signed_glyph_offsets)

    def parse(self) -> Font:
        """Parse the whole descriptor.

        Returns:
            The populated Font.

        Raises:
            ParseError: On the first syntax, value or structure error.
        """
        cursor = self.cursor
        cursor.advance()

        font = Font()
        self.parse_info(font)
        self.parse_common(font)
        self.parse_pages(font)
        self.parse_chars(font)
        self.parse_kernings(font)

        if not cursor.exhausted:
            token = cursor.current
            raise UnexpectedTokenError(
                f"Expected EOF (line {token.line}, col {token.column}). "
                f"Got: {token.describe()}",
                token.line,
                token.column,
                token=token.value,
            )

        logger.debug(
            "Parsed font %r: %d pages, %d glyphs, %d kernings",
            font.name,
            font.num_pages,
            font.num_chars,
            font.num_kernings,
        )
        return font

    def parse_info(self, font: Font) -> None:
        self.cursor.expect("info")
        self._apply(font, self.cursor.read_attributes(INFO_FIELDS))

    def parse_common(self, font: Font) -> None:
        line = self.cursor.current.line
        self.cursor.expect("common")
        values = self.cursor.read_attributes(COMMON_FIELDS)
        num_pages = values.pop("pages", 0)
        self._apply(font, values)
        self._check_limit("pages", num_pages, self.config.max_pages, line)
        font.pages = [None] * num_pages

    def parse_pages(self, font: Font) -> None:
        """Read ``page`` records into the slots allocated by ``common``."""
        cursor = self.cursor
        num_pages = font.num_pages
        read = 0
        while read < num_pages:
            line = cursor.current.line
            if not cursor.match("page"):
                break
            values = cursor.read_attributes(PAGE_FIELDS)
            if "id" not in values or "file" not in values:
                raise MissingFieldError(
                    f"Page tag missing id or filename (line {line})", line
                )
            page_id = values["id"]
            if not 0 <= page_id < num_pages:
                raise PageIdError(
                    f"Page id out of range (line {line}). Got: {page_id}, "
                    f"expected 0 to {num_pages - 1}",
                    line,
                )
            font.pages[page_id] = values["file"]
            read += 1
        self._check_count("pages", "page", num_pages, read)

    def parse_chars(self, font: Font) -> None:
        cursor = self.cursor
        line = cursor.current.line
        cursor.expect("chars")
        count = cursor.read_attributes(COUNT_FIELDS).get("count", 0)
        self._check_limit("chars", count, self.config.max_chars, line)

        glyphs = []
        while len(glyphs) < count and cursor.match("char"):
            glyphs.append(Glyph(**cursor.read_attributes(self._char_fields)))
        font.glyphs = glyphs
        self._check_count("chars", "char", count, len(glyphs))

    def parse_kernings(self, font: Font) -> None:
        """Read the optional kernings section.

        A descriptor that ends after the chars section has no kerning
        pairs; ``font.kernings`` is left empty.
        """
        cursor = self.cursor
        font.kernings = []
        if not cursor.ready:
            logger.debug("No kernings section present")
            return

        line = cursor.current.line
        cursor.expect("kernings")
        count = cursor.read_attributes(COUNT_FIELDS).get("count", 0)
        self._check_limit("kernings", count, self.config.max_kernings, line)

        kernings = []
        while len(kernings) < count and cursor.match("kerning"):
            kernings.append(KerningPair(**cursor.read_attributes(KERNING_FIELDS)))
        font.kernings = kernings
        self._check_count("kernings", "kerning", count, len(kernings))

    @staticmethod
    def _apply(font: Font, values: Dict[str, object]) -> None:
        for attr, value in values.items():
            setattr(font, attr, value)

    @staticmethod
    def _check_limit(section: str, count: int, limit: int, line: int) -> None:
        if count > limit:
            raise ResourceLimitError(
                f"Declared {section} count {count} exceeds the configured "
                f"limit of {limit} (line {line})",
                line,
            )

    def _check_count(self, section: str, keyword: str, expected: int, actual: int) -> None:
        token = self.cursor.current
        if actual != expected:
            raise CountMismatchError(
                f"Fewer {section} than specified in file. "
                f"Expected: {expected}, actual: {actual}",
                section,
                expected,
                actual,
                token.line,
                token.column,
            )
        if self.cursor.at(keyword):
            raise CountMismatchError(
                f"More {section} than specified in file (line {token.line}, "
                f"col {token.column}). Expected: {expected}",
                section,
                expected,
                None,
                token.line,
                token.column,
            )


__all__ = [
    "BMFontTextParser",
    "COMMON_FIELDS",
    "COUNT_FIELDS",
    "INFO_FIELDS",
    "KERNING_FIELDS",
    "PAGE_FIELDS",
    "char_fields",
]
