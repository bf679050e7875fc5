"""Library-facing entry points for loading BMFont descriptors.

``parse`` and its variants raise ``BMFontError`` subclasses. ``try_parse``
returns a ``ParseResult`` instead, for callers that prefer an explicit
result value. The message of the most recent failure is also kept per
thread and exposed through ``last_error_message`` so that concurrent
parses on different threads never see each other's errors.
"""

from __future__ import annotations

import io
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Union

from bmfont.config.schema import ParserConfig
from bmfont.models.schema import Font
from bmfont.parsers.base import BMFontError, SourceError
from bmfont.parsers.text.config_parser import BMFontTextParser

logger = logging.getLogger("bmfont.runtime.api")

FontSource = Union[str, "os.PathLike[str]", TextIO, BinaryIO]

_SUCCESS = "Success"

_state = threading.local()


@dataclass
class ParseResult:
    """Outcome of ``try_parse``: exactly one of ``font`` and ``error`` is set."""

    font: Optional[Font] = None
    error: Optional[BMFontError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return _SUCCESS if self.error is None else str(self.error)


def _set_last_error(message: str) -> None:
    _state.last_error = message


def last_error_message() -> str:
    """Message of the latest parse attempt on the calling thread.

    Returns:
        "Success" after a successful parse, the error text after a failed
        one, and an empty string if this thread has not parsed anything.
    """
    return getattr(_state, "last_error", "")


def _parse_stream(stream: TextIO, config: ParserConfig) -> Font:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        text = io.TextIOWrapper(stream, encoding=config.encoding, newline="")
        try:
            return _parse_stream(text, config)  # type: ignore[arg-type]
        finally:
            # Leave the caller's stream open.
            text.detach()
    try:
        return BMFontTextParser(stream, config).parse()
    except UnicodeDecodeError as exc:
        raise SourceError(f"Couldn't decode input. Error: {exc}") from exc


def _parse_source(source: FontSource, config: Optional[ParserConfig]) -> Font:
    config = config or ParserConfig.default()
    if hasattr(source, "read"):
        return _parse_stream(source, config)  # type: ignore[arg-type]

    path = Path(source)  # type: ignore[arg-type]
    try:
        # newline="" keeps carriage returns for the tokenizer to skip.
        handle = open(path, "r", encoding=config.encoding, newline="")
    except OSError as exc:
        raise SourceError(
            f"Couldn't open file: {path}. Error: {exc.strerror or exc}"
        ) from exc
    with handle:
        logger.info("Loading font descriptor: %s", path)
        try:
            return _parse_stream(handle, config)
        except OSError as exc:
            raise SourceError(
                f"Couldn't read file: {path}. Error: {exc.strerror or exc}"
            ) from exc


def parse(source: FontSource, config: Optional[ParserConfig] = None) -> Font:
    """Parse a BMFont text descriptor.

    Args:
        source: Path to a descriptor file, or an open text or binary stream.
                Binary streams are decoded with ``config.encoding``.
        config: Optional parser configuration; defaults apply when omitted.

    Returns:
        The parsed Font.

    Raises:
        SourceError: If the file cannot be opened, read or decoded.
        ParseError: If the descriptor is malformed.
    """
    _set_last_error(_SUCCESS)
    try:
        return _parse_source(source, config)
    except BMFontError as exc:
        _set_last_error(str(exc))
        logger.debug("Font parse failed: %s", exc)
        raise


def parse_file(
    path: Union[str, "os.PathLike[str]"], config: Optional[ParserConfig] = None
) -> Font:
    """Parse the descriptor stored at ``path``."""
    return parse(os.fspath(path), config)


def parse_string(text: str, config: Optional[ParserConfig] = None) -> Font:
    """Parse descriptor text held in memory."""
    return parse(io.StringIO(text, newline=""), config)


def try_parse(
    source: FontSource, config: Optional[ParserConfig] = None
) -> ParseResult:
    """Parse ``source`` and report failure as a value instead of raising."""
    try:
        return ParseResult(font=parse(source, config))
    except BMFontError as exc:
        return ParseResult(error=exc)


def free_font(font: Font) -> None:
    """Release the collections owned by ``font``.

    Fonts are garbage collected like any other object, so calling this is
    only useful to drop large glyph tables early while the Font itself
    stays referenced.
    """
    font.name = None
    font.pages.clear()
    font.glyphs.clear()
    font.kernings.clear()


__all__ = [
    "FontSource",
    "ParseResult",
    "free_font",
    "last_error_message",
    "parse",
    "parse_file",
    "parse_string",
    "try_parse",
]
