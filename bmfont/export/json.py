"""JSON export for parsed fonts."""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from bmfont.models.schema import Font

logger = logging.getLogger("bmfont.export.json")


def font_to_dict(font: Font) -> Dict[str, Any]:
    """Convert a Font into plain JSON-compatible data.

    The declared counts are included next to the collections so the
    document can be checked without re-counting.
    """
    data = asdict(font)
    data["num_pages"] = font.num_pages
    data["num_chars"] = font.num_chars
    data["num_kernings"] = font.num_kernings
    return data


def export_json(font: Font, output_path: Path) -> None:
    """Export font to JSON format.

    Args:
        font: Parsed font to export.
        output_path: Output file path.
    """
    logger.info("Exporting font to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(font_to_dict(font), f, indent=2, ensure_ascii=False)

    logger.info("JSON export completed: %d glyphs, %d kernings",
                font.num_chars, font.num_kernings)
