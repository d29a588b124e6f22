#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2025 Emasoft
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
#
# CHANGELOG:
# - Added CsvEntry, ImageRecord and EpubManifestEntry
# - Added BatchResult and MergeResult run summaries
#

"""Data models shared by the parser, scanner, assemblers and orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CsvEntry:
    """One ``name;path`` row of a batch CSV file."""

    name: str
    folder_path: str
    line_number: int = field(default=0, compare=False)
    """1-based line in the source file, 0 when not read from a file."""


@dataclass(frozen=True)
class ImageRecord:
    """
    An image file ready to be placed in a document.

    Single-folder builds leave the folder fields unset. Merge builds fill
    them in so the EPUB navigation can group pages by source folder.
    """

    path: Path
    folder_name: str | None = None
    folder_index: int = 0
    image_index: int = 0
    total_in_folder: int = 0

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def is_merged(self) -> bool:
        return self.folder_name is not None


@dataclass
class EpubManifestEntry:
    """Manifest and spine data for one image page of an EPUB."""

    id: str
    filename: str
    media_type: str
    page_number: int
    html_file: str = ""
    source: ImageRecord | None = None


@dataclass
class BatchResult:
    """Outcome of a one-document-per-entry batch run."""

    created: list[Path] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.created) + len(self.failed)


@dataclass
class MergeResult:
    """Outcome of a merge run that produced a single document."""

    output_path: Path
    records: list[ImageRecord]
    folder_counts: dict[str, int] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)

    @property
    def total_images(self) -> int:
        return len(self.records)
