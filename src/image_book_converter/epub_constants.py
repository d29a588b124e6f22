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
Shared constants and utilities for EPUB modules.
"""

from __future__ import annotations

import os

# Constants
ENCODING = "utf-8"
MIMETYPE = "application/epub+zip"

# Fixed OCF/OPF 2.0 container layout
MIMETYPE_FILE = "mimetype"
META_INF_DIR = "META-INF"
OEBPS_DIR = "OEBPS"
IMAGES_DIR = "images"
TEXT_DIR = "text"
OPF_FILE = "content.opf"
NCX_FILE = "toc.ncx"

# Namespaces
XHTML_NS = "http://www.w3.org/1999/xhtml"
CONTAINER_NS = "urn:oasis:names:tc:opendocument:xmlns:container"

XHTML_MEDIA_TYPE = "application/xhtml+xml"
NCX_MEDIA_TYPE = "application/x-dtbncx+xml"
OPF_MEDIA_TYPE = "application/oebps-package+xml"

# Image media types by lowercased extension; anything else is JPEG
IMAGE_MEDIA_TYPES = {
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
}
DEFAULT_IMAGE_MEDIA_TYPE = "image/jpeg"

# Metadata defaults
DEFAULT_LANGUAGE = "pt-BR"
DEFAULT_CREATOR = "Images Batch EPUB"
DEFAULT_PUBLISHER = "Images Batch EPUB Converter"
DEFAULT_RIGHTS = "All rights reserved"
DEFAULT_PAGE_LABEL = "Page"
MERGED_DESCRIPTION = "EPUB generated from multiple image folders"
DEFAULT_IMAGE_PADDING = 4

# Archivers
ARCHIVER_BUILTIN = "builtin"
ARCHIVER_ZIP = "zip"
ARCHIVERS = (ARCHIVER_BUILTIN, ARCHIVER_ZIP)


def media_type_for(filename: str) -> str:
    """Return the EPUB media type for an image filename."""
    return IMAGE_MEDIA_TYPES.get(os.path.splitext(filename)[1].lower(), DEFAULT_IMAGE_MEDIA_TYPE)


def padded_name(prefix: str, number: int, extension: str, padding: int = DEFAULT_IMAGE_PADDING) -> str:
    """Build a zero-padded sequential name such as ``image_0001.png``."""
    return f"{prefix}_{str(number).zfill(padding)}{extension}"
