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
csv_parser.py - Batch CSV reading and writing
=============================================

Batch files list one folder per line as ``name;path``. The dialect is a
simplified one: ``;`` separates fields, a double quote toggles a quoted
region in which ``;`` is literal, and the quote characters themselves are
dropped. There is no escape for a quote inside a quoted value. Commas are
ordinary characters.

An optional header (``nome;caminho`` or ``name;path``) may appear as the
first line only.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .common_constants import CSV_DELIMITER, CSV_HEADER, CSV_HEADER_TOKENS, CSV_QUOTE
from .common_file_utils import read_text_file
from .converter_errors import EmptyInputError, InputNotFoundError, NoValidEntriesError
from .models import CsvEntry

logger = logging.getLogger(__name__)


def parse_csv_line(line: str) -> list[str]:
    """
    Split one CSV line into raw (untrimmed) fields.

    Args:
        line: A single line without its line break

    Returns:
        List of field values; always at least one element
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == CSV_QUOTE:
            in_quotes = not in_quotes
        elif char == CSV_DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def is_header_line(line: str) -> bool:
    """Return True if the line looks like a ``name;path`` header."""
    lowered = line.lower()
    return any(all(token in lowered for token in pair) for pair in CSV_HEADER_TOKENS)


def parse_csv_content(content: str, logger: logging.Logger | None = None) -> list[CsvEntry]:
    """
    Parse batch CSV text into entries.

    Malformed lines are skipped with a warning rather than failing the run.

    Args:
        content: Full CSV text
        logger: Logger for skipped-line warnings

    Returns:
        Entries in file order

    Raises:
        EmptyInputError: If the content has no non-blank lines
        NoValidEntriesError: If every line was skipped
    """
    if logger is None:
        logger = globals()["logger"]

    lines = [(number, raw.strip()) for number, raw in enumerate(content.splitlines(), 1)]
    lines = [(number, line) for number, line in lines if line]

    if not lines:
        raise EmptyInputError("CSV file is empty")

    if is_header_line(lines[0][1]):
        logger.debug(f"Skipping header line: {lines[0][1]}")
        lines = lines[1:]

    entries: list[CsvEntry] = []
    for number, line in lines:
        columns = parse_csv_line(line)

        if len(columns) < 2:
            logger.warning(f"Line {number} skipped - invalid format: {line}")
            continue

        name = columns[0].strip()
        folder_path = columns[1].strip()

        if not name or not folder_path:
            logger.warning(f"Line {number} skipped - empty name or path")
            continue

        entries.append(CsvEntry(name=name, folder_path=folder_path, line_number=number))

    if not entries:
        raise NoValidEntriesError("No valid entries found in CSV file")

    return entries


def read_csv_file(
    csv_path: str | Path,
    encoding: str | None = None,
    logger: logging.Logger | None = None,
) -> list[CsvEntry]:
    """
    Read and parse a batch CSV file.

    Args:
        csv_path: Path to the CSV file
        encoding: File encoding, or None to detect it
        logger: Logger instance

    Returns:
        Entries in file order

    Raises:
        InputNotFoundError: If the file is missing or unreadable
        EmptyInputError: If the file has no usable lines
        NoValidEntriesError: If every line was skipped
    """
    if logger is None:
        logger = globals()["logger"]

    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise InputNotFoundError(f"CSV file not found: {csv_path}")
    if not csv_path.is_file():
        raise InputNotFoundError(f"CSV path is not a file: {csv_path}")

    try:
        content = read_text_file(csv_path, encoding=encoding, logger=logger)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise InputNotFoundError(f"Error reading CSV file {csv_path}: {e}") from e

    entries = parse_csv_content(content, logger=logger)
    logger.info(f"Read {len(entries)} entr{'y' if len(entries) == 1 else 'ies'} from {csv_path.name}")
    return entries


def _clean_value(value: str) -> str:
    return value.replace(CSV_DELIMITER, ",")


def format_csv_content(rows: Iterable[CsvEntry]) -> str:
    """
    Render entries in the batch CSV format, header included.

    A literal ``;`` inside a value is replaced with ``,``.
    """
    lines = [CSV_HEADER]
    for row in rows:
        lines.append(f"{_clean_value(row.name)}{CSV_DELIMITER}{_clean_value(row.folder_path)}")
    return "\n".join(lines) + "\n"


def write_csv_file(rows: Iterable[CsvEntry], csv_path: Path) -> Path:
    """
    Write entries to a CSV file, creating parent directories.

    Returns:
        Absolute path of the written file
    """
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    csv_path.write_text(format_csv_content(rows), encoding="utf-8")
    return csv_path.resolve()
