"""Shared descriptor fixtures for the bmfont test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

HEADER = (
    'info face=valid size=8 bold=0 italic=0 charset="" unicode=1 stretchH=100 '
    "smooth=1 aa=1 padding=0,0,0,0 spacing=1,1\n"
    "common lineHeight=8 base=7 scaleW=128 scaleH=512 pages=1 packed=0 "
    "alphaChnl=1 redChnl=0 greenChnl=0 blueChnl=0\n"
    'page id=0 file="valid.png"\n'
)

CHARS = (
    "chars count=3\n"
    "char id=33 x=2 y=3 width=6 height=7 xoffset=0 yoffset=1 xadvance=8 page=0 chnl=15\n"
    "char id=34 x=10 y=3 width=5 height=4 xoffset=1 yoffset=1 xadvance=7 page=0 chnl=15\n"
    "char id=35 x=18 y=3 width=7 height=7 xoffset=0 yoffset=1 xadvance=8 page=0 chnl=15\n"
)

KERNINGS = (
    "kernings count=2\n"
    "kerning first=33 second=34 amount=-4\n"
    "kerning first=34 second=35 amount=2\n"
)

VALID_FNT = HEADER + CHARS + KERNINGS
VALID_NO_KERNINGS_FNT = HEADER + CHARS


@pytest.fixture
def write_fnt(tmp_path: Path):
    """Return a helper writing descriptor text to a file under tmp_path."""

    def _write(text: str, name: str = "font.fnt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def valid_fnt() -> str:
    """Complete descriptor with one page, three glyphs and two kerning pairs."""
    return VALID_FNT


@pytest.fixture
def valid_no_kernings_fnt() -> str:
    """Descriptor ending after the chars section."""
    return VALID_NO_KERNINGS_FNT


@pytest.fixture
def fnt_parts() -> dict:
    """The header, chars and kernings blocks of the valid descriptor."""
    return {"header": HEADER, "chars": CHARS, "kernings": KERNINGS}
