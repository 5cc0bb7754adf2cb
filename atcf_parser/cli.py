"""
atcf2json - Convert an ATCF deck file to JSON.

Usage:
    atcf2json INPUT [-o OUTPUT] [--indent N] [--log-level LEVEL] [--log-format text|json]

Examples:
    atcf2json bal022024.dat                  # JSON to stdout
    atcf2json bal022024.dat -o al02.json     # JSON to a file
    atcf2json bal022024.dat --indent 2       # Pretty-printed
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Config
from .logging_config import setup_logging
from .services.decode.file_parse import get_atcf_file_parser

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atcf2json",
        description="Parse an ATCF a/b-deck file and write it as JSON"
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Path to the ATCF deck file"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=Config.JSON_INDENT,
        help="Indent JSON output by N spaces (default: compact)"
    )
    parser.add_argument(
        "--log-level",
        default=Config.LOG_LEVEL,
        help=f"Log level (default: {Config.LOG_LEVEL})"
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=Config.LOG_FORMAT if Config.LOG_FORMAT in ("text", "json") else "text",
        help="Log output format (default: text)"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the atcf2json command.

    Args:
        argv: Optional argument vector

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    try:
        content = args.input.read_text(encoding=Config.INPUT_ENCODING, errors="replace")
    except OSError as e:
        logger.error(f"Failed to read {args.input}: {e}")
        return 1

    atcf_file = get_atcf_file_parser().parse_file(content)
    output = atcf_file.to_json(indent=args.indent)

    if args.output is None:
        sys.stdout.write(output + "\n")
        return 0

    try:
        args.output.write_text(output + "\n", encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to write {args.output}: {e}")
        return 1

    logger.info(f"Wrote {len(atcf_file)} records to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
