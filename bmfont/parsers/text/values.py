"""Value conversion helpers for descriptor tags.

Integer tags are parsed the way C's ``strtol(text, &end, 0)`` reads them:
leading C whitespace is skipped, then an optional sign and a ``0x``
hexadecimal, ``0`` octal or plain decimal literal. Only whole tokens are
accepted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_INTEGER_RE = re.compile(
    r"""
    [ \t\n\v\f\r]*
    (?P<sign>[+-]?)
    (?:
        0[xX](?P<hex>[0-9a-fA-F]+)
      | (?P<oct>0[0-7]*)
      | (?P<dec>[1-9][0-9]*)
    )
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class IntRange:
    """Inclusive value range of a fixed-width integer field."""

    name: str
    minimum: int
    maximum: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.minimum <= value <= self.maximum


INT16 = IntRange("int16", -(2**15), 2**15 - 1)
INT32 = IntRange("int32", -(2**31), 2**31 - 1)
UINT8 = IntRange("uint8", 0, 2**8 - 1)
UINT16 = IntRange("uint16", 0, 2**16 - 1)
UINT32 = IntRange("uint32", 0, 2**32 - 1)


def parse_c_integer(text: str) -> Optional[int]:
    """Parse a C-style integer literal.

    Args:
        text: Complete token text.

    Returns:
        The integer value, or None if the text is not a complete literal.
    """
    match = _INTEGER_RE.fullmatch(text)
    if match is None:
        return None
    if match.group("hex") is not None:
        value = int(match.group("hex"), 16)
    elif match.group("oct") is not None:
        value = int(match.group("oct"), 8)
    else:
        value = int(match.group("dec"), 10)
    return -value if match.group("sign") == "-" else value


def strip_quotes(text: str) -> Optional[str]:
    """Remove one surrounding pair of double quotes.

    Returns None when ``text`` is shorter than two characters or does not
    both start and end with ``"``.
    """
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        return None
    return text[1:-1]


__all__ = [
    "INT16",
    "INT32",
    "IntRange",
    "UINT16",
    "UINT32",
    "UINT8",
    "parse_c_integer",
    "strip_quotes",
]
