#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for folder_scanner module.
"""

import pytest
from pathlib import Path
from unittest.mock import patch
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from image_book_converter.converter_errors import FolderNotFoundError, MissingFileError, NoImagesFoundError
from image_book_converter.folder_scanner import (
    collect_folder_images,
    ensure_files_exist,
    is_supported_image,
    scan_image_files,
    validate_folder,
)


def _touch(folder: Path, *names: str) -> None:
    folder.mkdir(parents=True, exist_ok=True)
    for name in names:
        (folder / name).write_bytes(b"data")


class TestValidateFolder:
    """Test the validate_folder function."""

    def test_existing_folder(self, tmp_path):
        """Test that an existing folder is returned as a Path."""
        assert validate_folder(str(tmp_path)) == tmp_path

    def test_missing_folder(self, tmp_path):
        """Test a folder that does not exist."""
        with pytest.raises(FolderNotFoundError):
            validate_folder(tmp_path / "missing")

    def test_file_is_not_a_folder(self, tmp_path):
        """Test a path that is a regular file."""
        file_path = tmp_path / "file.jpg"
        file_path.write_bytes(b"x")
        with pytest.raises(NotADirectoryError, match="not a folder"):
            validate_folder(file_path)


class TestScanImageFiles:
    """Test the scan_image_files function."""

    @pytest.mark.parametrize("name", ["a.jpg", "a.JPEG", "a.Png", "a.gif", "a.BMP", "a.webp"])
    def test_supported_extensions(self, name):
        """Test case-insensitive extension matching."""
        assert is_supported_image(name)

    @pytest.mark.parametrize("name", ["readme.txt", "a.tiff", "jpg", "a.jpg.bak"])
    def test_unsupported_extensions(self, name):
        """Test files that are not images."""
        assert not is_supported_image(name)

    def test_filters_non_images(self, tmp_path):
        """Test that only images are listed."""
        _touch(tmp_path, "1.jpg", "2.PNG", "readme.txt", "10.webp")
        assert sorted(scan_image_files(tmp_path)) == ["1.jpg", "10.webp", "2.PNG"]

    def test_directories_are_ignored(self, tmp_path):
        """Test that a directory named like an image is never listed."""
        _touch(tmp_path, "1.jpg")
        (tmp_path / "2.jpg").mkdir()
        assert scan_image_files(tmp_path) == ["1.jpg"]

    def test_not_recursive(self, tmp_path):
        """Test that images in subfolders are not listed."""
        _touch(tmp_path / "sub", "1.jpg")
        assert scan_image_files(tmp_path) == []


class TestCollectFolderImages:
    """Test the collect_folder_images function."""

    def test_sorted_full_paths(self, tmp_path, mock_logger):
        """Test that images come back sorted as full paths."""
        _touch(tmp_path, "1.jpg", "2.PNG", "readme.txt", "10.webp")
        result = collect_folder_images(tmp_path, logger=mock_logger)
        assert result == [tmp_path / "1.jpg", tmp_path / "2.PNG", tmp_path / "10.webp"]

    def test_empty_folder_single_mode(self, tmp_path, mock_logger):
        """Test that single-folder mode rejects a folder without images."""
        _touch(tmp_path, "notes.txt")
        with pytest.raises(NoImagesFoundError):
            collect_folder_images(tmp_path, logger=mock_logger)

    def test_empty_folder_batch_mode(self, tmp_path, mock_logger):
        """Test that batch mode returns an empty list for a folder without images."""
        assert collect_folder_images(tmp_path, require_images=False, logger=mock_logger) == []

    def test_missing_folder(self, tmp_path, mock_logger):
        """Test that a missing folder raises even in batch mode."""
        with pytest.raises(FolderNotFoundError):
            collect_folder_images(tmp_path / "nope", require_images=False, logger=mock_logger)

    def test_vanished_file(self, tmp_path, mock_logger):
        """Test that a file removed after listing is reported."""
        _touch(tmp_path, "1.jpg", "2.jpg")
        with patch("image_book_converter.folder_scanner.scan_image_files", return_value=["1.jpg", "2.jpg", "3.jpg"]):
            with pytest.raises(MissingFileError, match="3.jpg"):
                collect_folder_images(tmp_path, logger=mock_logger)

    def test_ensure_files_exist(self, tmp_path):
        """Test the existence check on its own."""
        _touch(tmp_path, "1.jpg")
        ensure_files_exist([tmp_path / "1.jpg"])
        with pytest.raises(MissingFileError):
            ensure_files_exist([tmp_path / "1.jpg", tmp_path / "2.jpg"])
