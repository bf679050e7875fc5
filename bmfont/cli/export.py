"""Export command implementation."""

import logging
from pathlib import Path
from typing import Optional

from bmfont.config.schema import ParserConfig
from bmfont.export.json import export_json
from bmfont.parsers.base import BMFontError
from bmfont.runtime.api import parse_file

logger = logging.getLogger("bmfont.cli.export")


def export_command(args, config: Optional[ParserConfig] = None) -> int:
    """Execute export command.

    Args:
        args: Parsed command-line arguments containing:
            - source: Descriptor file to parse
            - output: Output JSON file path
        config: Parser configuration.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    source = Path(args.source)
    output_path = Path(args.output)

    logger.info("Exporting font: %s", source)
    logger.info("Output path: %s", output_path)

    try:
        font = parse_file(source, config)
    except BMFontError as exc:
        logger.error("Failed to load %s: %s", source, exc)
        return 1

    try:
        export_json(font, output_path)
    except OSError as exc:
        logger.error("Failed to write %s: %s", output_path, exc)
        return 1
    return 0
