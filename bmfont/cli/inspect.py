"""Inspect command implementation."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from bmfont.config.schema import ParserConfig
from bmfont.models.schema import Font
from bmfont.parsers.base import BMFontError
from bmfont.runtime.api import parse_file

logger = logging.getLogger("bmfont.cli.inspect")


def _summary_table(font: Font, source: Path) -> Table:
    table = Table(title=f"BMFont: {source.name}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Face", font.display_name or "-")
    table.add_row("Size", str(font.size))
    table.add_row("Line height", str(font.line_height))
    table.add_row("Base", str(font.base))
    table.add_row("Texture size", f"{font.scale_w}x{font.scale_h}")
    table.add_row(
        "Channels (a/r/g/b)",
        f"{font.alpha_channel}/{font.red_channel}/"
        f"{font.green_channel}/{font.blue_channel}",
    )
    for page_id, name in enumerate(font.pages):
        table.add_row(f"Page {page_id}", name or "-")
    table.add_row("Glyphs", str(font.num_chars))
    table.add_row("Kerning pairs", str(font.num_kernings))
    return table


def _glyph_table(font: Font) -> Table:
    table = Table(title="Glyphs")
    for column in ("id", "char", "x", "y", "w", "h", "xoff", "yoff", "adv", "page"):
        table.add_column(column, justify="right")
    for glyph in font.glyphs:
        printable = 32 < glyph.id < 0x110000 and not 0xD800 <= glyph.id <= 0xDFFF
        char = chr(glyph.id) if printable else ""
        table.add_row(
            str(glyph.id),
            char,
            str(glyph.x),
            str(glyph.y),
            str(glyph.width),
            str(glyph.height),
            str(glyph.x_offset),
            str(glyph.y_offset),
            str(glyph.x_advance),
            str(glyph.page),
        )
    return table


def inspect_command(
    args, config: Optional[ParserConfig] = None, console: Optional[Console] = None
) -> int:
    """Execute inspect command.

    Args:
        args: Parsed command-line arguments containing:
            - source: Descriptor file to parse
            - glyphs: Also list every glyph (optional)
        config: Parser configuration.
        console: Rich console to print to (defaults to stdout).

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    source = Path(args.source)
    console = console or Console()

    try:
        font = parse_file(source, config)
    except BMFontError as exc:
        logger.error("Failed to load %s: %s", source, exc)
        return 1

    console.print(_summary_table(font, source))
    if getattr(args, "glyphs", False):
        console.print(_glyph_table(font))
    return 0
