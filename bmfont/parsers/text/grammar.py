"""Token cursor and key/value helpers used by the section parsers.

A section line looks like ``tag key=value key=value ...``. Section parsers
describe the keys they understand with a table mapping key names to
``FieldSpec`` entries; ``TokenCursor.read_attributes`` walks the line,
converts known values and drops unknown ``key=value`` pairs so that newer
generator tags do not break parsing.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, NamedTuple

from bmfont.parsers.base import (
    IntegerRangeError,
    InvalidIntegerError,
    QuotedStringError,
    UnexpectedEndError,
    UnexpectedTokenError,
)
from bmfont.parsers.text.tokens import Token, TokenKind, Tokenizer
from bmfont.parsers.text.values import IntRange, parse_c_integer, strip_quotes

logger = logging.getLogger("bmfont.parsers.text.grammar")

NEWLINE = "\n"
EQUALS = "="


class FieldSpec(NamedTuple):
    """Destination attribute and value reader for one tag key."""

    attr: str
    read: Callable[["TokenCursor"], Any]


def integer_field(attr: str, int_range: IntRange) -> FieldSpec:
    """Field holding an integer constrained to ``int_range``."""
    return FieldSpec(attr, lambda cursor: cursor.read_integer(int_range))


def word_field(attr: str) -> FieldSpec:
    """Field holding the raw token text."""
    return FieldSpec(attr, lambda cursor: cursor.read_word())


def quoted_field(attr: str) -> FieldSpec:
    """Field holding a double-quoted string, quotes removed."""
    return FieldSpec(attr, lambda cursor: cursor.read_quoted())


FieldTable = Mapping[str, FieldSpec]


class TokenCursor:
    """Grammar-level view over a ``Tokenizer``.

    Matching helpers compare against the current token's text. Errors are
    raised as ``ParseError`` subclasses positioned at the current token.
    """

    def __init__(self, tokenizer: Tokenizer) -> None:
        self.tokenizer = tokenizer

    @property
    def current(self) -> Token:
        return self.tokenizer.current

    @property
    def exhausted(self) -> bool:
        return self.tokenizer.exhausted

    @property
    def ready(self) -> bool:
        return not self.tokenizer.exhausted

    def advance(self) -> Token:
        return self.tokenizer.advance()

    def at(self, literal: str) -> bool:
        """Whether the current token is ``literal`` (end of input never is)."""
        token = self.current
        return token.kind is not TokenKind.END and token.value == literal

    def match(self, literal: str) -> bool:
        """Consume the current token if it equals ``literal``."""
        if not self.at(literal):
            return False
        self.advance()
        return True

    def expect(self, literal: str) -> None:
        """Consume ``literal`` or raise.

        Raises:
            UnexpectedEndError: If the input is exhausted.
            UnexpectedTokenError: If another token is current.
        """
        if self.match(literal):
            return
        token = self.current
        expected = "<newline>" if literal == NEWLINE else literal
        if self.exhausted:
            raise UnexpectedEndError(
                f"Unexpectedly reached EOF (line {token.line}, col {token.column}). "
                f"Expected token: {expected}",
                token.line,
                token.column,
            )
        raise UnexpectedTokenError(
            f"Unexpected token (line {token.line}, col {token.column}): "
            f"{token.describe()}. Expected token: {expected}",
            token.line,
            token.column,
            token=token.value,
            expected=literal,
        )

    def match_key(self, key: str) -> bool:
        """Consume ``key`` and the ``=`` after it, leaving the value current.

        Returns False without consuming anything when the current token is
        not the word ``key``.
        """
        token = self.current
        if token.kind is not TokenKind.WORD or token.value != key:
            return False
        self.advance()
        self.expect(EQUALS)
        return True

    def skip_attribute(self) -> None:
        """Discard an unrecognized ``key=value`` pair.

        A lone key without ``=`` is dropped by itself. The value is only
        consumed when it is a word, so a line break is never swallowed.
        """
        if not self.match(EQUALS):
            self.advance()
            if not self.match(EQUALS):
                return
        if self.current.kind is TokenKind.WORD:
            self.advance()

    def _value_token(self) -> Token:
        token = self.current
        if self.exhausted:
            raise UnexpectedEndError(
                f"Unexpectedly reached EOF (line {token.line}, col {token.column}). "
                "Expected token.",
                token.line,
                token.column,
            )
        return token

    def read_integer(self, int_range: IntRange) -> int:
        """Convert the current token to an integer within ``int_range``."""
        token = self._value_token()
        value = parse_c_integer(token.value) if token.kind is TokenKind.WORD else None
        if value is None:
            raise InvalidIntegerError(
                f"Expected an integer value (line {token.line}, col {token.column}). "
                f"Got: {token.describe()}",
                token.line,
                token.column,
            )
        if value not in int_range:
            raise IntegerRangeError(
                f"Integer value out of range (line {token.line}, col {token.column}). "
                f"Got: {value}, allowed {int_range.name} "
                f"[{int_range.minimum}, {int_range.maximum}]",
                token.line,
                token.column,
                value=value,
            )
        self.advance()
        return value

    def read_word(self) -> str:
        """Return the current token text verbatim."""
        token = self._value_token()
        if token.kind is not TokenKind.WORD:
            raise UnexpectedTokenError(
                f"Unexpected token (line {token.line}, col {token.column}): "
                f"{token.describe()}. Expected a value",
                token.line,
                token.column,
                token=token.value,
            )
        self.advance()
        return token.value

    def read_quoted(self) -> str:
        """Return the current token with its surrounding quotes removed."""
        token = self._value_token()
        text = strip_quotes(token.value) if token.kind is TokenKind.WORD else None
        if text is None:
            raise QuotedStringError(
                f"Expected quoted string (line {token.line}, col {token.column}). "
                f"Got: {token.describe()}",
                token.line,
                token.column,
            )
        self.advance()
        return text

    def read_attributes(self, fields: FieldTable) -> Dict[str, Any]:
        """Read ``key=value`` pairs up to and including the end of the line.

        Args:
            fields: Known keys of the section being parsed.

        Returns:
            Converted values keyed by destination attribute. A key repeated
            on the same line keeps its last value.
        """
        values: Dict[str, Any] = {}
        while self.ready and not self.match(NEWLINE):
            token = self.current
            spec = fields.get(token.value) if token.kind is TokenKind.WORD else None
            if spec is None:
                logger.debug(
                    "Skipping unknown tag %r (line %d, col %d)",
                    token.value,
                    token.line,
                    token.column,
                )
                self.skip_attribute()
                continue
            self.match_key(token.value)
            values[spec.attr] = spec.read(self)
        return values


__all__ = [
    "EQUALS",
    "FieldSpec",
    "FieldTable",
    "NEWLINE",
    "TokenCursor",
    "integer_field",
    "quoted_field",
    "word_field",
]
