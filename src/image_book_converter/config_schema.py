#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Configuration template with output, workspace, csv, pdf, epub, batch
#   and logging sections
# - Allowed values used by the validator
#

"""
config_schema.py - Configuration schema and default template for the image book converter
"""

from .common_constants import DEFAULT_CONFIG_FILE, DEFAULT_PAGE_HEIGHT, DEFAULT_PAGE_WIDTH
from .epub_constants import (
    ARCHIVERS,
    DEFAULT_CREATOR,
    DEFAULT_IMAGE_PADDING,
    DEFAULT_LANGUAGE,
    DEFAULT_PAGE_LABEL,
    DEFAULT_PUBLISHER,
    DEFAULT_RIGHTS,
)

REQUIRED_SECTIONS = {
    "output": "Output folders (base directory, pdf/epub/csv subfolders)",
    "workspace": "Temporary working directory settings",
    "csv": "CSV input settings",
    "pdf": "PDF page settings",
    "epub": "EPUB metadata and packaging settings",
    "batch": "Batch and merge run settings",
    "logging": "Logging configuration",
}

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_ARCHIVERS = list(ARCHIVERS)

# Default configuration template with extensive comments
DEFAULT_CONFIG_TEMPLATE = f"""# Image Book Converter Configuration File
# =======================================
# Default settings for the image-book-* commands ({DEFAULT_CONFIG_FILE}).
# Any command-line arguments will override these settings.

# Output folders
# --------------
output:
  # Directory every output folder is resolved against (null = current directory)
  base_dir: null
  # Batch PDF and merged PDF output
  pdf_dir: pdf
  # EPUB output (single, batch and merged)
  epub_dir: epub
  # CSV files written by image-book-analyze
  csv_dir: csv

# Working directory for EPUB builds
# ---------------------------------
workspace:
  # Parent of the per-build temporary folders (null = system temp directory)
  temp_root: null
  # Keep the temporary folder after the build (debugging only)
  keep_temp: false

# CSV input
# ---------
csv:
  # Encoding of CSV files (null = auto-detect)
  encoding: null

# PDF output
# ----------
# Every page has the same size, in points. Images are scaled to fit and centered.
pdf:
  page_width: {DEFAULT_PAGE_WIDTH}
  page_height: {DEFAULT_PAGE_HEIGHT}

# EPUB output
# -----------
epub:
  # Language tag written to the package metadata
  language: {DEFAULT_LANGUAGE}
  creator: {DEFAULT_CREATOR}
  publisher: {DEFAULT_PUBLISHER}
  rights: {DEFAULT_RIGHTS}
  # Word used in page titles and navigation labels ("Page 1")
  page_label: {DEFAULT_PAGE_LABEL}
  # Zero padding of image_0001.jpg / page_0001.xhtml names
  image_padding: {DEFAULT_IMAGE_PADDING}
  # Archiver: builtin (Python zipfile) or zip (external zip command)
  archiver: builtin

# Batch and merge runs
# --------------------
batch:
  # Seconds to wait for another run writing into the same output folder (-1 = wait forever)
  lock_timeout: -1

# Logging
# -------
logging:
  # Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
  level: INFO
  # Also write logs to a file
  file_enabled: false
  file_path: image_book_converter.log
  format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""
