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
#
# CHANGELOG:
# - One page per image at a fixed page size
# - Images scaled to fit, centered, aspect ratio preserved
# - Per-image failures reported as warnings, page still emitted
#

"""
pdf_generator.py - PDF assembly from ordered images
===================================================

Every image gets its own page. Pages share a fixed size (A4 in points
unless configured otherwise); real image dimensions are not inspected.
"""

from __future__ import annotations

import logging
from pathlib import Path

from reportlab.pdfgen import canvas

from .common_constants import DEFAULT_PAGE_HEIGHT, DEFAULT_PAGE_WIDTH, PDF_PROGRESS_EVERY
from .converter_errors import AssemblyError


def create_pdf(
    image_paths: list[Path],
    output_path: Path,
    page_size: tuple[float, float] = (DEFAULT_PAGE_WIDTH, DEFAULT_PAGE_HEIGHT),
    logger: logging.Logger | None = None,
) -> Path:
    """
    Write a PDF with one page per image.

    Args:
        image_paths: Images in page order
        output_path: PDF file to write
        page_size: (width, height) of every page in points
        logger: Logger instance

    Returns:
        The absolute output path, once the file is fully written

    Raises:
        AssemblyError: If the document cannot be created or saved
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    output_path = Path(output_path).resolve()
    width, height = page_size
    total = len(image_paths)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        pdf = canvas.Canvas(str(output_path), pagesize=(width, height))
    except OSError as e:
        raise AssemblyError(f"Error creating PDF {output_path}: {e}") from e

    for number, image_path in enumerate(image_paths, 1):
        try:
            pdf.drawImage(
                str(image_path),
                0,
                0,
                width=width,
                height=height,
                preserveAspectRatio=True,
                anchor="c",
            )
        except Exception as e:
            logger.warning(f"Error processing {image_path}: {e}")
        pdf.showPage()

        if number % PDF_PROGRESS_EVERY == 0 or number == total:
            logger.info(f"Processed {number}/{total} images")

    try:
        pdf.save()
    except OSError as e:
        raise AssemblyError(f"Error saving PDF {output_path}: {e}") from e

    logger.info(f"PDF created: {output_path}")
    return output_path
