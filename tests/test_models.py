"""Font model lookups used by renderers."""

from __future__ import annotations

from bmfont.models.schema import Font, Glyph, KerningPair


def _font() -> Font:
    return Font(
        name='"Arial"',
        glyphs=[Glyph(id=65, x_advance=7), Glyph(id=66, x_advance=8), Glyph(id=65, x_advance=9)],
        kernings=[KerningPair(65, 66, -2), KerningPair(66, 65, 1), KerningPair(65, 66, -3)],
    )


def test_new_font_is_empty() -> None:
    font = Font()
    assert font.name is None
    assert (font.num_pages, font.num_chars, font.num_kernings) == (0, 0, 0)
    assert Glyph() == Glyph(0, 0, 0, 0, 0, 0, 0, 0, 0, 0)


def test_glyph_lookup_last_duplicate_wins() -> None:
    font = _font()
    assert font.glyph(66).x_advance == 8
    assert font.glyph(65).x_advance == 9
    assert font.glyph(67) is None


def test_kerning_lookup_defaults_to_zero() -> None:
    font = _font()
    assert font.kerning(65, 66) == -3
    assert font.kerning(66, 65) == 1
    assert font.kerning(66, 66) == 0


def test_display_name_strips_quotes() -> None:
    assert _font().display_name == "Arial"
    assert Font(name="valid").display_name == "valid"
    assert Font().display_name is None


def test_lookup_index_is_reused_between_calls() -> None:
    font = _font()
    font.glyph(65)
    index = font.__dict__["_glyph_index"][2]
    font.glyph(66)
    assert font.__dict__["_glyph_index"][2] is index


def test_lookups_follow_list_changes() -> None:
    font = _font()
    assert font.glyph(67) is None
    font.glyphs.append(Glyph(id=67, x_advance=5))
    assert font.glyph(67).x_advance == 5

    font.kernings = [KerningPair(65, 66, 4)]
    assert font.kerning(65, 66) == 4

    font.glyphs.clear()
    assert font.glyph(65) is None


def test_lookup_index_not_part_of_equality() -> None:
    font = _font()
    font.glyph(65)
    font.kerning(65, 66)
    assert font == _font()
