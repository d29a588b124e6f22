#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Usage examples for every image-book-* command
#

"""
cli_help_text.py - Help text and usage examples for the image-book-* commands
=============================================================================
"""

DESCRIPTIONS = {
    "pdf": "Convert a folder of numbered images into a PDF, or every folder listed in a CSV file into one PDF each.",
    "epub": "Convert a folder of numbered images into an EPUB, or every folder listed in a CSV file into one EPUB each.",
    "merge-pdf": "Merge the images of every folder listed in a CSV file into a single PDF.",
    "merge-epub": "Merge the images of every folder listed in a CSV file into a single EPUB with one chapter per folder.",
    "analyze": "List the subfolders of a directory into a CSV file ready for the batch and merge commands.",
}

CSV_FORMAT_TEXT = """
CSV FORMAT:

  name;path
  chapter-01;/path/to/folder1
  chapter-02;/path/to/folder2

  Semicolon separated, optional header, blank lines ignored.
  Values containing ';' can be wrapped in double quotes.
"""

_EXAMPLES = {
    "pdf": """
USAGE EXAMPLES:

  Single folder (written to the current directory):
    $ image-book-pdf ./images my-document
    $ image-book-pdf /home/user/photos family-album.pdf

  Batch, one PDF per CSV line (written to pdf/):
    $ image-book-pdf ./conversions.csv
""",
    "epub": """
USAGE EXAMPLES:

  Single folder (written to epub/):
    $ image-book-epub ./images my-book

  Batch, one EPUB per CSV line (written to epub/):
    $ image-book-epub ./conversions.csv

  Package with the external zip tool instead of Python's zipfile:
    $ image-book-epub ./images my-book --archiver zip
""",
    "merge-pdf": """
USAGE EXAMPLES:

  All folders of a CSV file in one PDF (written to pdf/):
    $ image-book-merge-pdf csv/folders.csv complete-document
    $ image-book-merge-pdf folders.csv final-report.pdf
""",
    "merge-epub": """
USAGE EXAMPLES:

  All folders of a CSV file in one EPUB (written to epub/):
    $ image-book-merge-epub csv/folders.csv complete-book

  Images are numbered in CSV order; the table of contents groups pages by folder.
""",
    "analyze": """
USAGE EXAMPLES:

  Write csv/<uuid>.csv listing every subfolder of a directory:
    $ image-book-analyze /home/user/scans
""",
}


def get_epilog_text(command: str) -> str:
    """Get the epilog help text for a command's argument parser."""
    epilog = _EXAMPLES.get(command, "")
    if command != "analyze":
        epilog += CSV_FORMAT_TEXT
    return epilog
