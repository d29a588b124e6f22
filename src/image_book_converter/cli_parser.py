#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - One parser per image-book-* command
# - Shared options: --config, --output-dir, --log-level
# - Argument errors exit with status 1
#

"""
cli_parser.py - Command-line argument parsing for the image-book-* commands
===========================================================================

Options default to None so that only the values given on the command line
override the configuration file.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from .cli_help_text import DESCRIPTIONS, get_epilog_text
from .common_constants import DEFAULT_CONFIG_FILE
from .config_schema import VALID_ARCHIVERS, VALID_LOG_LEVELS

COMMAND_PDF = "pdf"
COMMAND_EPUB = "epub"
COMMAND_MERGE_PDF = "merge-pdf"
COMMAND_MERGE_EPUB = "merge-epub"
COMMAND_ANALYZE = "analyze"


class ConverterArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on invalid arguments."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_page_size(value: str) -> tuple[float, float]:
    """Parse a ``WIDTHxHEIGHT`` page size in points."""
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"invalid page size '{value}', expected WIDTHxHEIGHT (e.g. 595x842)")
    try:
        width, height = float(parts[0]), float(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid page size '{value}', expected numbers in points") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"invalid page size '{value}', width and height must be positive")
    return width, height


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Base directory for the pdf/, epub/ and csv/ output folders (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging level (default: from configuration)",
    )


def _add_csv_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Encoding of the CSV file (default: auto-detect)",
    )


def _add_pdf_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--page-size",
        type=parse_page_size,
        default=None,
        metavar="WIDTHxHEIGHT",
        help="Page size in points (default: 595x842, A4)",
    )


def _add_epub_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--language",
        type=str,
        default=None,
        help="Language tag written to the EPUB metadata (default: pt-BR)",
    )
    parser.add_argument(
        "--archiver",
        type=str,
        choices=VALID_ARCHIVERS,
        default=None,
        help="Archiver used to package the EPUB (default: builtin)",
    )
    parser.add_argument(
        "--temp-root",
        type=str,
        default=None,
        help="Parent directory of the temporary build folder (default: system temp directory)",
    )
    parser.add_argument(
        "--keep-temp",
        action="store_true",
        default=None,
        help="Keep the temporary build folder after packaging",
    )


def create_parser(command: str) -> argparse.ArgumentParser:
    """Create the argument parser of one image-book-* command.

    Args:
        command: One of pdf, epub, merge-pdf, merge-epub, analyze

    Returns:
        Configured ArgumentParser
    """
    if command not in DESCRIPTIONS:
        raise ValueError(f"Unknown command: {command}")

    parser = ConverterArgumentParser(
        prog=f"image-book-{command}",
        description=DESCRIPTIONS[command],
        epilog=get_epilog_text(command),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    if command in (COMMAND_PDF, COMMAND_EPUB):
        parser.add_argument("source", help="Image folder (single mode) or CSV file (batch mode)")
        parser.add_argument(
            "output_name",
            nargs="?",
            default=None,
            help="Output file name, extension optional (single mode only)",
        )
    elif command in (COMMAND_MERGE_PDF, COMMAND_MERGE_EPUB):
        parser.add_argument("csv_file", help="CSV file listing name;path of every folder")
        parser.add_argument("output_name", help="Output file name, extension optional")
    else:
        parser.add_argument("directory", help="Directory whose subfolders are listed")

    _add_common_args(parser)
    if command != COMMAND_ANALYZE:
        _add_csv_args(parser)
    if command in (COMMAND_PDF, COMMAND_MERGE_PDF):
        _add_pdf_args(parser)
    if command in (COMMAND_EPUB, COMMAND_MERGE_EPUB):
        _add_epub_args(parser)

    return parser
