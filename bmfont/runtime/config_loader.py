"""Helpers for loading parser configuration from TOML/JSON sources.

This module provides a single entry point `load_parser_config` that
accepts various configuration sources:

* None -> default ParserConfig
* dict -> ParserConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings

Both a flat mapping and one nested under a ``parser`` table are accepted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from bmfont.config.schema import ParserConfig

logger = logging.getLogger("bmfont.runtime.config_loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _parse_toml(text: str) -> Dict[str, Any]:
    """Parse TOML text into a dict.

    Uses stdlib tomllib on Python 3.11+ and falls back to `tomli` on older
    interpreters.
    """
    try:
        import tomllib  # type: ignore[attr-defined]
    except ImportError:  # pragma: no cover - Python <3.11 path
        import tomli as tomllib  # type: ignore[import-not-found,no-redef]
    return tomllib.loads(text)


def _select_section(data: Dict[str, Any]) -> Dict[str, Any]:
    section = data.get("parser")
    if isinstance(section, dict):
        return section
    return data


def load_parser_config(source: ConfigSource) -> ParserConfig:
    """Load ParserConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns ParserConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        ParserConfig instance.

    Raises:
        ValueError: If the configuration is not a mapping.
        ValidationError: If an option has an invalid value.
    """
    if source is None:
        logger.debug("No config source provided; using default ParserConfig")
        return ParserConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading ParserConfig from provided dict")
        return ParserConfig.from_dict(_select_section(source))

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None

        try:
            is_file = path.is_file()
        except OSError:  # e.g. inline text too long for a file name
            is_file = False

        if is_file:
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                stripped = text.lstrip()
                fmt = "json" if stripped.startswith(("{", "[")) else "toml"
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            stripped = text.lstrip()
            fmt = "json" if stripped.startswith(("{", "[")) else "toml"
            logger.info("Loading configuration from inline %s string", fmt)

        if fmt == "json":
            data = json.loads(text)
        else:
            data = _parse_toml(text)

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return ParserConfig.from_dict(_select_section(data))

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_parser_config"]
