#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
image_book_cli.py - Entry points of the image-book-* commands
=============================================================

Every entry point parses its arguments, loads the configuration, applies the
command-line overrides, sets up logging and runs one conversion mode.
Entry points return the process exit status: 0 on success (batch runs
included, even when some entries failed) and 1 on any top-level error.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Callable

from .batch_processor import base_directory, process_single_folder, run_batch, run_merge
from .cli_parser import (
    COMMAND_ANALYZE,
    COMMAND_EPUB,
    COMMAND_MERGE_EPUB,
    COMMAND_MERGE_PDF,
    COMMAND_PDF,
    create_parser,
)
from .cli_setup import setup_configuration, setup_logging, setup_signal_handler
from .common_constants import FORMAT_EPUB, FORMAT_PDF
from .common_print_utils import print_error, safe_print
from .converter_errors import ConfigurationError, ConverterError
from .csv_parser import read_csv_file
from .folder_analyzer import analyze_directory

Handler = Callable[[argparse.Namespace, dict[str, Any], logging.Logger], None]


def _run(command: str, handler: Handler, argv: list[str] | None) -> int:
    parser = create_parser(command)
    args = parser.parse_args(argv)

    try:
        config_manager = setup_configuration(args.config)
    except ConfigurationError as e:
        print_error(f"Configuration error: {e}")
        safe_print("Please fix the configuration file or delete it to regenerate defaults.")
        return 1

    config = config_manager.update_with_args(args)
    logger = setup_logging(config)
    setup_signal_handler(logger)

    try:
        handler(args, config, logger)
    except (ConverterError, OSError) as e:
        logger.error(str(e))
        print_error(str(e))
        return 1
    return 0


def _convert(fmt: str) -> Handler:
    def handler(args: argparse.Namespace, config: dict[str, Any], logger: logging.Logger) -> None:
        if args.output_name is None:
            safe_print(f"[bold]Batch mode[/bold] - CSV file: [cyan]{args.source}[/cyan]")
            entries = read_csv_file(args.source, config["csv"].get("encoding"), logger)
            result = run_batch(entries, fmt, config, logger)
            safe_print(f"\n[bold green]Batch finished:[/bold green] {len(result.created)} of {result.total} document(s) created")
            for name, message in result.failed:
                safe_print(f"  [yellow]{name}: {message}[/yellow]")
            return

        safe_print(f"Folder: [cyan]{args.source}[/cyan]")
        output_path = process_single_folder(args.source, args.output_name, fmt, config, logger)
        safe_print(f"[bold green]{fmt.upper()} created successfully:[/bold green] {output_path}")

    return handler


def _merge(fmt: str) -> Handler:
    def handler(args: argparse.Namespace, config: dict[str, Any], logger: logging.Logger) -> None:
        safe_print(f"CSV file: [cyan]{args.csv_file}[/cyan]")
        safe_print(f"Output file: [cyan]{args.output_name}[/cyan]")
        entries = read_csv_file(args.csv_file, config["csv"].get("encoding"), logger)
        result = run_merge(entries, args.output_name, fmt, config, logger)
        safe_print(f"\n[bold green]Merge completed successfully:[/bold green] {result.output_path}")

    return handler


def _analyze(args: argparse.Namespace, config: dict[str, Any], logger: logging.Logger) -> None:
    csv_dir = base_directory(config) / config["output"].get("csv_dir", "csv")
    csv_path = analyze_directory(args.directory, csv_dir, logger)
    identifier = Path(csv_path).stem

    safe_print("[bold green]CSV file generated successfully![/bold green]")
    safe_print(f"Full path: {csv_path}")
    safe_print("\n[bold]Next step:[/bold]")
    safe_print(f"  image-book-pdf {csv_path}")
    safe_print(f"  image-book-merge-pdf {csv_path} {identifier}")
    safe_print(f"  image-book-merge-epub {csv_path} {identifier}")


def main_pdf(argv: list[str] | None = None) -> int:
    """Entry point of image-book-pdf."""
    return _run(COMMAND_PDF, _convert(FORMAT_PDF), argv)


def main_epub(argv: list[str] | None = None) -> int:
    """Entry point of image-book-epub."""
    return _run(COMMAND_EPUB, _convert(FORMAT_EPUB), argv)


def main_merge_pdf(argv: list[str] | None = None) -> int:
    """Entry point of image-book-merge-pdf."""
    return _run(COMMAND_MERGE_PDF, _merge(FORMAT_PDF), argv)


def main_merge_epub(argv: list[str] | None = None) -> int:
    """Entry point of image-book-merge-epub."""
    return _run(COMMAND_MERGE_EPUB, _merge(FORMAT_EPUB), argv)


def main_analyze(argv: list[str] | None = None) -> int:
    """Entry point of image-book-analyze."""
    return _run(COMMAND_ANALYZE, _analyze, argv)
