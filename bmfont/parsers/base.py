"""Exception hierarchy shared by the BMFont parsers.

Every failure raised while loading a font derives from ``BMFontError`` so
callers can catch a single type. Errors that point at a location in the
input additionally derive from ``ParseError`` and carry the 1-based line and
column of the offending token.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Custom Exception Hierarchy
# =============================================================================


class BMFontError(Exception):
    """Base class for all font loading errors.

    A font parse never partially succeeds: the first error aborts the
    attempt and no Font is returned.
    """


class SourceError(BMFontError):
    """The input could not be opened or read.

    Raised when the descriptor path does not exist, is not readable, or
    the byte stream cannot be decoded with the configured encoding.
    """


class ParseError(BMFontError):
    """Error located at a specific position of the descriptor text."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


class TokenLengthError(ParseError):
    """A word token exceeded the configured maximum token length."""


class UnexpectedTokenError(ParseError):
    """The grammar required a different token than the one found."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        token: Optional[str] = None,
        expected: Optional[str] = None,
    ) -> None:
        super().__init__(message, line, column)
        self.token = token
        self.expected = expected


class UnexpectedEndError(ParseError):
    """The input ended while more tokens were required."""


class InvalidValueError(ParseError):
    """A tag value could not be converted to its field type."""


class InvalidIntegerError(InvalidValueError):
    """The value token is not a complete integer literal."""


class IntegerRangeError(InvalidValueError):
    """The integer does not fit the destination field width."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        value: Optional[int] = None,
    ) -> None:
        super().__init__(message, line, column)
        self.value = value


class QuotedStringError(InvalidValueError):
    """A value that must be wrapped in double quotes is not."""


class MissingFieldError(InvalidValueError):
    """A record omitted a tag it cannot be stored without."""


class PageIdError(InvalidValueError):
    """A page record names an id outside the declared page range."""


class CountMismatchError(ParseError):
    """The number of repeated records differs from the declared count.

    ``actual`` is ``None`` when more records follow than were declared;
    the parser stops reading at the declared count so the real total is
    not known.
    """

    def __init__(
        self,
        message: str,
        section: str,
        expected: int,
        actual: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message, line, column)
        self.section = section
        self.expected = expected
        self.actual = actual


class ResourceLimitError(ParseError):
    """A declared record count exceeds the configured ceiling."""


__all__ = [
    "BMFontError",
    "CountMismatchError",
    "IntegerRangeError",
    "InvalidIntegerError",
    "InvalidValueError",
    "MissingFieldError",
    "PageIdError",
    "ParseError",
    "QuotedStringError",
    "ResourceLimitError",
    "SourceError",
    "TokenLengthError",
    "UnexpectedEndError",
    "UnexpectedTokenError",
]
