"""Parser configuration schema and loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from bmfont.config import ParserConfig
from bmfont.runtime.config_loader import load_parser_config


def test_defaults() -> None:
    config = ParserConfig.default()
    assert config.max_token_length == 1024
    assert config.max_pages == config.max_chars == config.max_kernings == 65535
    assert config.encoding == "utf-8-sig"
    assert config.signed_glyph_offsets is False


def test_round_trip_through_dict() -> None:
    config = ParserConfig.from_dict({"max_chars": 10, "signed_glyph_offsets": True})
    assert ParserConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize(
    "data",
    [
        {"max_chars": 70000},
        {"max_kernings": -1},
        {"max_token_length": 0},
        {"encoding": "no-such-codec"},
    ],
)
def test_invalid_values_rejected(data: dict) -> None:
    with pytest.raises(ValidationError):
        ParserConfig.from_dict(data)


def test_load_none_returns_defaults() -> None:
    assert load_parser_config(None) == ParserConfig.default()


def test_load_dict_with_parser_table() -> None:
    config = load_parser_config({"parser": {"max_pages": 4}})
    assert config.max_pages == 4


def test_load_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "bmfont.toml"
    path.write_text("[parser]\nmax_chars = 12\nencoding = \"latin-1\"\n", encoding="utf-8")
    config = load_parser_config(path)
    assert config.max_chars == 12
    assert config.encoding == "latin-1"


def test_load_json_file(tmp_path: Path) -> None:
    path = tmp_path / "bmfont.json"
    path.write_text(json.dumps({"signed_glyph_offsets": True}), encoding="utf-8")
    assert load_parser_config(str(path)).signed_glyph_offsets is True


def test_load_inline_strings() -> None:
    assert load_parser_config('{"max_kernings": 3}').max_kernings == 3
    assert load_parser_config("max_token_length = 64").max_token_length == 64


def test_load_rejects_non_mapping() -> None:
    with pytest.raises(ValueError):
        load_parser_config("[1, 2]")


def test_load_rejects_unsupported_type() -> None:
    with pytest.raises(TypeError):
        load_parser_config(42)  # type: ignore[arg-type]
