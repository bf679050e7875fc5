"""Configuration schema definitions using Pydantic for validation.

Parser limits and format options are grouped in ``ParserConfig``. Using
Pydantic ensures configuration errors are caught early with clear error
messages instead of surfacing as odd parse failures.
"""

import codecs
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from bmfont.parsers.text.tokens import MAX_TOKEN_LENGTH

# Counts are declared as 16-bit unsigned integers.
_MAX_DECLARED_COUNT = 65535


class ParserConfig(BaseModel):
    """Options for the BMFont text parser.

    Attributes:
        max_token_length: Longest word token accepted by the tokenizer.
        max_pages: Largest ``pages`` count accepted in the common line.
        max_chars: Largest ``count`` accepted in the chars line.
        max_kernings: Largest ``count`` accepted in the kernings line.
        encoding: Text encoding used for file paths and binary streams. The
            default reads UTF-8 and drops a leading byte order mark.
        signed_glyph_offsets: Read ``xoffset``, ``yoffset`` and ``xadvance``
            as signed 16-bit values instead of unsigned ones.
    """

    max_token_length: int = Field(default=MAX_TOKEN_LENGTH, ge=1)
    max_pages: int = Field(default=_MAX_DECLARED_COUNT, ge=0, le=_MAX_DECLARED_COUNT)
    max_chars: int = Field(default=_MAX_DECLARED_COUNT, ge=0, le=_MAX_DECLARED_COUNT)
    max_kernings: int = Field(
        default=_MAX_DECLARED_COUNT, ge=0, le=_MAX_DECLARED_COUNT
    )
    encoding: str = "utf-8-sig"
    signed_glyph_offsets: bool = False

    model_config = {"extra": "allow"}  # Allow extra fields for extensibility

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to the codecs registry."""
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding '{v}'") from exc
        return v

    @classmethod
    def default(cls) -> "ParserConfig":
        """Return a configuration with every option at its default."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            ParserConfig instance.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
