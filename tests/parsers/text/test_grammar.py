"""TokenCursor matching helpers and typed value readers."""

from __future__ import annotations

import io

import pytest

from bmfont.parsers.base import (
    IntegerRangeError,
    InvalidIntegerError,
    QuotedStringError,
    UnexpectedEndError,
    UnexpectedTokenError,
)
from bmfont.parsers.text.grammar import (
    TokenCursor,
    integer_field,
    quoted_field,
    word_field,
)
from bmfont.parsers.text.tokens import TokenKind, Tokenizer
from bmfont.parsers.text.values import INT16, UINT16


def _cursor(text: str) -> TokenCursor:
    cursor = TokenCursor(Tokenizer(io.StringIO(text, newline="")))
    cursor.advance()
    return cursor


def test_match_consumes_only_on_equal_token() -> None:
    cursor = _cursor("info face")
    assert not cursor.match("common")
    assert cursor.current.value == "info"
    assert cursor.match("info")
    assert cursor.current.value == "face"


def test_match_is_false_at_end_of_input() -> None:
    cursor = _cursor("")
    assert not cursor.match("")
    assert not cursor.ready


def test_expect_reports_found_and_expected_tokens() -> None:
    cursor = _cursor("\n  common")
    cursor.advance()
    with pytest.raises(UnexpectedTokenError) as excinfo:
        cursor.expect("info")
    error = excinfo.value
    assert (error.line, error.column) == (2, 3)
    assert error.token == "common"
    assert error.expected == "info"
    assert str(error) == "Unexpected token (line 2, col 3): common. Expected token: info"


def test_expect_at_end_of_input_raises_end_error() -> None:
    cursor = _cursor("info")
    cursor.advance()
    with pytest.raises(UnexpectedEndError):
        cursor.expect("common")


def test_match_key_positions_cursor_on_value() -> None:
    cursor = _cursor("size=5")
    assert not cursor.match_key("face")
    assert cursor.current.value == "size"
    assert cursor.match_key("size")
    assert cursor.current.value == "5"


def test_match_key_requires_equals() -> None:
    cursor = _cursor("size 5")
    with pytest.raises(UnexpectedTokenError):
        cursor.match_key("size")


def test_read_attributes_skips_unknown_tags_and_ends_line() -> None:
    cursor = _cursor("bold=1 size=12 flag foo=bar = stray\nnext")
    values = cursor.read_attributes({"size": integer_field("size", INT16)})
    assert values == {"size": 12}
    assert cursor.current.value == "next"


def test_read_attributes_stops_at_end_of_input() -> None:
    cursor = _cursor("size=3 other=4")
    values = cursor.read_attributes({"size": integer_field("size", INT16)})
    assert values == {"size": 3}
    assert cursor.exhausted


def test_read_attributes_last_duplicate_wins() -> None:
    cursor = _cursor("size=3 size=4\n")
    assert cursor.read_attributes({"size": integer_field("size", INT16)}) == {"size": 4}


def test_unknown_key_without_value_keeps_newline() -> None:
    cursor = _cursor("flag=\nnext")
    assert cursor.read_attributes({}) == {}
    assert cursor.current.value == "next"


def test_read_integer_out_of_range() -> None:
    cursor = _cursor("999999")
    with pytest.raises(IntegerRangeError) as excinfo:
        cursor.read_integer(INT16)
    assert excinfo.value.value == 999999
    assert "out of range" in str(excinfo.value)


def test_read_integer_rejects_non_numeric_token() -> None:
    cursor = _cursor("abc")
    with pytest.raises(InvalidIntegerError) as excinfo:
        cursor.read_integer(UINT16)
    assert "Expected an integer value (line 1, col 1). Got: abc" == str(excinfo.value)


def test_read_integer_rejects_line_break() -> None:
    cursor = _cursor("size=\n")
    cursor.match_key("size")
    with pytest.raises(InvalidIntegerError):
        cursor.read_integer(UINT16)


def test_read_value_at_end_of_input() -> None:
    cursor = _cursor("size=")
    cursor.match_key("size")
    with pytest.raises(UnexpectedEndError):
        cursor.read_integer(UINT16)


def test_read_word_copies_token_verbatim() -> None:
    cursor = _cursor('face="Arial"\n')
    assert cursor.read_attributes({"face": word_field("name")}) == {"name": '"Arial"'}


def test_read_word_rejects_missing_value() -> None:
    cursor = _cursor("face=\n")
    cursor.match_key("face")
    with pytest.raises(UnexpectedTokenError):
        cursor.read_word()


def test_read_quoted_strips_quotes() -> None:
    cursor = _cursor('file="valid.png"\n')
    assert cursor.read_attributes({"file": quoted_field("file")}) == {"file": "valid.png"}
    assert cursor.current.kind is TokenKind.END


@pytest.mark.parametrize("value", ['"valid.png', 'valid.png"', '"', "valid.png"])
def test_read_quoted_rejects_malformed_strings(value: str) -> None:
    cursor = _cursor(value)
    with pytest.raises(QuotedStringError):
        cursor.read_quoted()
