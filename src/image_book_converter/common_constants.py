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
Common constants used across multiple modules in the image book converter.

This module centralizes shared constants to avoid duplication and ensure
consistency across the codebase.
"""

# Image extensions accepted by the folder scanner (compared lowercased)
SUPPORTED_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")

# Output formats and their file extensions
FORMAT_PDF = "pdf"
FORMAT_EPUB = "epub"
FORMAT_EXTENSIONS = {
    FORMAT_PDF: ".pdf",
    FORMAT_EPUB: ".epub",
}

# CSV dialect
CSV_DELIMITER = ";"
CSV_QUOTE = '"'
CSV_HEADER = "nome;caminho"
# A first line containing both tokens of one pair is a header
CSV_HEADER_TOKENS = (("name", "path"), ("nome", "caminho"))

# Fixed page geometry for PDF output: A4 in points.
# Real image dimensions are never inspected.
DEFAULT_PAGE_WIDTH = 595
DEFAULT_PAGE_HEIGHT = 842

# File encoding defaults
DEFAULT_ENCODING = "utf-8"
MIN_ENCODING_CONFIDENCE = 0.5

# Progress reporting intervals
PDF_PROGRESS_EVERY = 10
EPUB_COPY_PROGRESS_EVERY = 25
EPUB_PAGE_PROGRESS_EVERY = 50

# Lock file placed in the output directory during batch and merge runs
BATCH_LOCK_NAME = ".image_book_converter.lock"

# Default configuration file name
DEFAULT_CONFIG_FILE = "image_book_config.yml"
