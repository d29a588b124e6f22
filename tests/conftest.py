#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest configuration and shared fixtures for all tests
"""

import pytest
import sys
import os
from pathlib import Path
from unittest.mock import Mock

from PIL import Image

# Add src directory to path so we can import our modules
src_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
sys.path.insert(0, src_dir)


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing"""
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    return logger


def _write_image(path: Path, size=(40, 60), color=(200, 30, 30)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()
    image = Image.new("RGB", size, color)
    if suffix in (".jpg", ".jpeg"):
        image.save(path, "JPEG")
    elif suffix == ".gif":
        image.save(path, "GIF")
    elif suffix == ".bmp":
        image.save(path, "BMP")
    else:
        image.save(path, "PNG")
    return path


@pytest.fixture
def make_images():
    """Factory writing small real images into a folder.

    Usage: make_images(folder, ["1.png", "2.png"]) -> list of paths
    """

    def factory(folder: Path, names, size=(40, 60)):
        return [_write_image(Path(folder) / name, size) for name in names]

    return factory


@pytest.fixture
def image_folder(tmp_path, make_images):
    """A folder holding 1.png, 2.png and 10.png"""
    folder = tmp_path / "images"
    make_images(folder, ["10.png", "2.png", "1.png"])
    return folder


@pytest.fixture
def test_config(tmp_path):
    """A complete configuration dictionary rooted in tmp_path"""
    return {
        "output": {"base_dir": str(tmp_path / "out"), "pdf_dir": "pdf", "epub_dir": "epub", "csv_dir": "csv"},
        "workspace": {"temp_root": str(tmp_path / "work"), "keep_temp": False},
        "csv": {"encoding": None},
        "pdf": {"page_width": 595, "page_height": 842},
        "epub": {
            "language": "pt-BR",
            "creator": "Images Batch EPUB",
            "publisher": "Images Batch EPUB Converter",
            "rights": "All rights reserved",
            "page_label": "Page",
            "image_padding": 4,
            "archiver": "builtin",
        },
        "batch": {"lock_timeout": -1},
        "logging": {"level": "INFO", "file_enabled": False, "file_path": "x.log", "format": "%(message)s"},
    }


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
