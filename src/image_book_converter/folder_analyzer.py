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
Folder analyzer: lists the subfolders of a directory into a batch CSV file
that the batch and merge commands can consume directly.
"""

from __future__ import annotations

import hashlib
import logging
import time
from pathlib import Path

from .converter_errors import FolderNotFoundError
from .csv_parser import write_csv_file
from .folder_scanner import validate_folder
from .models import CsvEntry


def list_immediate_folders(directory: str | Path) -> list[CsvEntry]:
    """
    List the immediate child folders of a directory, sorted by name.

    Raises:
        FolderNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
    """
    root = validate_folder(directory).resolve()
    try:
        children = [child for child in root.iterdir() if child.is_dir()]
    except OSError as e:
        raise FolderNotFoundError(f"Error reading folder {root}: {e}") from e
    return [CsvEntry(name=child.name, folder_path=str(child)) for child in sorted(children, key=lambda p: p.name)]


def generate_uuid(folder_path: str | Path, timestamp_ms: int | None = None) -> str:
    """
    Derive a version-4 style identifier from a folder path and a timestamp.

    The SHA-1 of ``timestamp + md5(path)`` is laid out as a UUID with the
    version nibble forced to 4 and the variant nibble to 8..b.
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    path_hash = hashlib.md5(str(folder_path).encode("utf-8")).hexdigest()
    h = hashlib.sha1(f"{timestamp_ms}{path_hash}".encode("utf-8")).hexdigest()
    variant = format((int(h[16], 16) & 0x3) | 0x8, "x")
    return f"{h[0:8]}-{h[8:12]}-4{h[13:16]}-{variant}{h[17:20]}-{h[20:32]}"


def analyze_directory(
    directory: str | Path,
    csv_dir: str | Path = "csv",
    logger: logging.Logger | None = None,
) -> Path:
    """
    Write ``<uuid>.csv`` listing every subfolder of a directory.

    Args:
        directory: Directory whose subfolders are listed
        csv_dir: Folder the CSV file is written to (created if needed)
        logger: Logger instance

    Returns:
        Absolute path of the CSV file; its stem is the generated identifier
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    logger.info(f"Analyzing folder: {directory}")
    folders = list_immediate_folders(directory)
    logger.info(f"Found {len(folders)} folder(s)")

    identifier = generate_uuid(Path(directory).resolve())
    csv_path = write_csv_file(folders, Path(csv_dir) / f"{identifier}.csv")
    logger.info(f"CSV file written: {csv_path}")
    return csv_path
