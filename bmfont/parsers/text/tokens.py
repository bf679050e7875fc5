"""Tokenizer for the BMFont text descriptor format.

The format is line oriented: each line starts with a tag name followed by
``key=value`` pairs separated by spaces. The tokenizer reduces a character
stream to four token kinds: words, line breaks, equals signs and the end of
the stream. Quotes carry no meaning here, so an ``=`` inside a quoted value
still splits the word.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

from bmfont.parsers.base import SourceError, TokenLengthError

logger = logging.getLogger("bmfont.parsers.text.tokens")

MAX_TOKEN_LENGTH = 1024

_READ_CHUNK_SIZE = 4096

# Characters that end a word token.
_WORD_DELIMITERS = frozenset("= \r\n")


class CharacterSource(Protocol):
    """Anything that yields text through ``read(size)``, like an open file."""

    def read(self, size: int = -1) -> str:  # pragma: no cover - protocol
        ...


class TokenKind(str, Enum):
    """Kinds of tokens produced by the tokenizer."""

    WORD = "word"
    NEWLINE = "newline"
    EQUALS = "equals"
    END = "end"


@dataclass(frozen=True)
class Token:
    """A token and the 1-based position of its first character."""

    kind: TokenKind
    value: str
    line: int
    column: int

    def describe(self) -> str:
        """Human readable form used in error messages."""
        if self.kind is TokenKind.NEWLINE:
            return "<newline>"
        if self.kind is TokenKind.END:
            return "<end of file>"
        return self.value


class Tokenizer:
    """Pulls one token at a time from a character source.

    ``current`` is the lookahead token. It is invalid until the first call
    to ``advance()``. Once the source is exhausted ``current`` stays the END
    token and further calls to ``advance()`` do nothing.
    """

    def __init__(
        self,
        source: CharacterSource,
        max_token_length: int = MAX_TOKEN_LENGTH,
    ) -> None:
        self._source = source
        self._max_token_length = max_token_length
        self._buffer = ""
        self._offset = 0
        self._line = 1
        self._column = 1
        self._next_char = self._read_char()
        self.current = Token(TokenKind.END, "", 1, 1)
        self.exhausted = False

    def _read_char(self) -> Optional[str]:
        if self._offset >= len(self._buffer):
            chunk = self._source.read(_READ_CHUNK_SIZE)
            if not isinstance(chunk, str):
                raise SourceError(
                    f"Expected a text stream, got {type(chunk).__name__} data"
                )
            self._buffer = chunk
            self._offset = 0
            if not self._buffer:
                return None
        char = self._buffer[self._offset]
        self._offset += 1
        return char

    def advance(self) -> Token:
        """Discard the current token and load the next one.

        Returns:
            The new current token.

        Raises:
            TokenLengthError: If a word is longer than the maximum length.
        """
        if self.exhausted:
            return self.current

        char = self._next_char
        while char == " " or char == "\r":
            if char == " ":
                self._column += 1
            char = self._read_char()

        line, column = self._line, self._column

        if char is None:
            self._next_char = None
            self.exhausted = True
            self.current = Token(TokenKind.END, "", line, column)
            logger.debug("Reached end of input at line %d, col %d", line, column)
            return self.current

        if char == "\n":
            self._line += 1
            self._column = 1
            self._next_char = self._read_char()
            self.current = Token(TokenKind.NEWLINE, "\n", line, column)
            return self.current

        if char == "=":
            self._column += 1
            self._next_char = self._read_char()
            self.current = Token(TokenKind.EQUALS, "=", line, column)
            return self.current

        chars: List[str] = []
        while char is not None and char not in _WORD_DELIMITERS:
            chars.append(char)
            self._column += 1
            if len(chars) > self._max_token_length:
                raise TokenLengthError(
                    f"Token length is too large to parse (line {line}, col {column}).",
                    line,
                    column,
                )
            char = self._read_char()

        self._next_char = char
        self.current = Token(TokenKind.WORD, "".join(chars), line, column)
        return self.current


__all__ = [
    "CharacterSource",
    "MAX_TOKEN_LENGTH",
    "Token",
    "TokenKind",
    "Tokenizer",
]
