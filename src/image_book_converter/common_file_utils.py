#!/usr/bin/env python3

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
common_file_utils.py - Shared file handling utilities

Encoding detection and text decoding for CSV files, which are often
exported from spreadsheets in a legacy code page or with a UTF-8 BOM.
"""

from __future__ import annotations

import logging
from pathlib import Path

import chardet

from .common_constants import DEFAULT_ENCODING, MIN_ENCODING_CONFIDENCE

# Default logger
logger = logging.getLogger(__name__)


def detect_file_encoding(
    file_path: Path,
    sample_size: int | None = None,  # bytes to sample (None = whole file)
    logger: logging.Logger | None = None,
) -> tuple[str, float]:
    """
    Detect file encoding with chardet.

    Parameters:
    - file_path: Path to the file to analyze
    - sample_size: Bytes to read (None reads the whole file)
    - logger: Logger instance (uses module logger if None)

    Returns: (encoding, confidence) tuple
    """
    if logger is None:
        logger = globals()["logger"]

    with file_path.open("rb") as f:
        raw_data = f.read() if sample_size is None else f.read(sample_size)

    return detect_bytes_encoding(raw_data, logger)


def detect_bytes_encoding(raw_data: bytes, logger: logging.Logger | None = None) -> tuple[str, float]:
    """Detect the encoding of an in-memory byte string."""
    if logger is None:
        logger = globals()["logger"]

    if not raw_data:
        return DEFAULT_ENCODING, 1.0

    result = chardet.detect(raw_data)
    encoding = result.get("encoding") or DEFAULT_ENCODING
    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet.detect: {encoding} (confidence: {confidence})")

    if confidence < MIN_ENCODING_CONFIDENCE:
        logger.debug(f"Low confidence {confidence}, falling back to {DEFAULT_ENCODING}")
        return DEFAULT_ENCODING, confidence

    # Pure ASCII is a subset of UTF-8
    if encoding.lower() == "ascii":
        encoding = DEFAULT_ENCODING

    return encoding, confidence


def read_text_file(
    file_path: Path,
    encoding: str | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """
    Read a text file, detecting its encoding when none is given.

    A UTF-8 byte order mark is always dropped.

    Args:
        file_path: File to read
        encoding: Explicit encoding, or None to detect it
        logger: Logger instance (uses module logger if None)

    Returns:
        Decoded file content

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the bytes do not match the encoding
    """
    if logger is None:
        logger = globals()["logger"]

    raw_data = file_path.read_bytes()

    if encoding is None:
        encoding, confidence = detect_bytes_encoding(raw_data, logger)
        logger.debug(f"Reading {file_path.name} as {encoding} (confidence: {confidence:.2f})")

    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"

    return raw_data.decode(encoding)
