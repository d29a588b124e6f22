#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Folder validation and image listing shared by PDF and EPUB conversion
# - Existence check for every listed image before assembly
#

"""
folder_scanner.py - Image folder validation and listing
=======================================================

Validates a source folder, lists the supported images it contains and turns
them into an ordered list of full paths.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .common_constants import SUPPORTED_IMAGE_EXTENSIONS
from .converter_errors import FolderNotFoundError, MissingFileError, NoImagesFoundError
from .natural_sort import sort_files_numerically

logger = logging.getLogger(__name__)


def validate_folder(folder_path: str | Path) -> Path:
    """
    Ensure the path exists and is a directory.

    Args:
        folder_path: Folder to check

    Returns:
        The folder as a Path

    Raises:
        FolderNotFoundError: If the path does not exist
        NotADirectoryError: If the path exists but is not a directory
    """
    folder = Path(folder_path)
    if not folder.exists():
        raise FolderNotFoundError(f"Folder not found: {folder}")
    if not folder.is_dir():
        raise NotADirectoryError(f"The specified path is not a folder: {folder}")
    return folder


def is_supported_image(filename: str) -> bool:
    """Return True if the filename has a supported image extension."""
    return os.path.splitext(filename)[1].lower() in SUPPORTED_IMAGE_EXTENSIONS


def scan_image_files(folder_path: str | Path) -> list[str]:
    """
    List the supported image files of a folder.

    Args:
        folder_path: Folder to scan

    Returns:
        Bare filenames, in directory order (unsorted)

    Raises:
        FolderNotFoundError: If the folder does not exist
        NotADirectoryError: If the path is not a directory
    """
    folder = validate_folder(folder_path)
    try:
        return [entry.name for entry in folder.iterdir() if is_supported_image(entry.name) and not entry.is_dir()]
    except OSError as e:
        raise FolderNotFoundError(f"Error reading folder {folder}: {e}") from e


def ensure_files_exist(paths: list[Path]) -> None:
    """
    Check that every path still exists.

    Raises:
        MissingFileError: For the first path that is gone
    """
    for path in paths:
        if not path.exists():
            raise MissingFileError(f"File not found: {path}")


def collect_folder_images(
    folder_path: str | Path,
    require_images: bool = True,
    logger: logging.Logger | None = None,
) -> list[Path]:
    """
    Validate a folder and return its images as full paths in page order.

    Args:
        folder_path: Folder to scan
        require_images: Raise when the folder has no images (single-folder
            mode); when False an empty list is returned instead
        logger: Logger instance

    Returns:
        Sorted full image paths

    Raises:
        FolderNotFoundError: If the folder does not exist
        NotADirectoryError: If the path is not a directory
        NoImagesFoundError: If no images were found and require_images is set
        MissingFileError: If a listed image vanished before it was checked
    """
    if logger is None:
        logger = globals()["logger"]

    folder = Path(folder_path)
    image_files = scan_image_files(folder)

    if not image_files:
        if require_images:
            raise NoImagesFoundError(f"No image files found in folder: {folder}")
        return []

    logger.info(f"Found {len(image_files)} image file(s) in {folder}")
    sorted_files = sort_files_numerically(image_files)
    for position, name in enumerate(sorted_files, 1):
        logger.debug(f"  {position}. {name}")

    image_paths = [folder / name for name in sorted_files]
    ensure_files_exist(image_paths)
    return image_paths
