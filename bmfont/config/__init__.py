"""Configuration schema and validation for bmfont."""

from .schema import ParserConfig

__all__ = ["ParserConfig"]
