"""Main CLI entry point for bmfont.

Provides commands: inspect, export
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from bmfont.cli.export import export_command
from bmfont.cli.inspect import inspect_command
from bmfont.runtime.config_loader import load_parser_config

logger = logging.getLogger("bmfont.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="BMFont - text font descriptor loader",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional parser configuration. Can be a path to a TOML/JSON "
            "file (e.g. bmfont.toml) or an inline TOML/JSON string. When "
            "omitted, built-in defaults are used."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Inspect command
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Parse a descriptor and print a summary",
    )
    inspect_parser.add_argument(
        "source",
        help="BMFont text descriptor (.fnt)",
    )
    inspect_parser.add_argument(
        "--glyphs",
        action="store_true",
        help="Also list every glyph",
    )

    # Export command
    export_parser = subparsers.add_parser(
        "export",
        help="Parse a descriptor and write it as JSON",
    )
    export_parser.add_argument(
        "source",
        help="BMFont text descriptor (.fnt)",
    )
    export_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output JSON file",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_parser_config(args.config)
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    if args.command == "inspect":
        return inspect_command(args, config)
    elif args.command == "export":
        return export_command(args, config)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
