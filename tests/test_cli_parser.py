#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for cli_parser module.
"""

import argparse
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from image_book_converter.cli_help_text import get_epilog_text
from image_book_converter.cli_parser import create_parser, parse_page_size


class TestParsePageSize:
    """Test the parse_page_size argument type."""

    def test_valid(self):
        """Test a WIDTHxHEIGHT value."""
        assert parse_page_size("595x842") == (595.0, 842.0)
        assert parse_page_size("612.5X792") == (612.5, 792.0)

    @pytest.mark.parametrize("value", ["595", "axb", "0x10", "10x-1", "1x2x3"])
    def test_invalid(self, value):
        """Test rejected values."""
        with pytest.raises(argparse.ArgumentTypeError):
            parse_page_size(value)


class TestCreateParser:
    """Test the per-command parsers."""

    def test_single_mode(self):
        """Test folder plus output name."""
        args = create_parser("pdf").parse_args(["./images", "doc"])
        assert args.source == "./images"
        assert args.output_name == "doc"
        assert args.config == "image_book_config.yml"
        assert args.output_dir is None
        assert args.page_size is None

    def test_batch_mode(self):
        """Test a lone CSV argument."""
        args = create_parser("epub").parse_args(["list.csv", "--archiver", "zip", "--language", "en"])
        assert args.source == "list.csv"
        assert args.output_name is None
        assert args.archiver == "zip"
        assert args.language == "en"
        assert args.keep_temp is None

    def test_merge_requires_two_arguments(self):
        """Test that merge commands need a CSV file and an output name."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser("merge-pdf").parse_args(["list.csv"])
        assert exc_info.value.code == 1

    def test_missing_arguments_exit_1(self):
        """Test that argument errors exit with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser("pdf").parse_args([])
        assert exc_info.value.code == 1

    def test_help_exits_0(self, capsys):
        """Test that --help exits with status 0 and shows examples."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser("merge-epub").parse_args(["--help"])
        assert exc_info.value.code == 0
        assert "image-book-merge-epub" in capsys.readouterr().out

    def test_log_level_is_normalized(self):
        """Test case-insensitive log levels."""
        args = create_parser("analyze").parse_args(["/data", "--log-level", "debug"])
        assert args.log_level == "DEBUG"
        assert args.directory == "/data"

    def test_format_specific_options(self):
        """Test that PDF options are not offered by EPUB commands and vice versa."""
        with pytest.raises(SystemExit):
            create_parser("epub").parse_args(["a", "b", "--page-size", "1x1"])
        with pytest.raises(SystemExit):
            create_parser("pdf").parse_args(["a", "b", "--archiver", "zip"])
        args = create_parser("merge-pdf").parse_args(["a.csv", "b", "--page-size", "300x400"])
        assert args.page_size == (300.0, 400.0)

    def test_unknown_command(self):
        """Test an unknown command name."""
        with pytest.raises(ValueError, match="Unknown command"):
            create_parser("docx")

    def test_epilog_mentions_csv_format(self):
        """Test that conversion commands document the CSV format."""
        assert "CSV FORMAT" in get_epilog_text("pdf")
        assert "CSV FORMAT" not in get_epilog_text("analyze")
