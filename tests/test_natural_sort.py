#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for natural_sort module.
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from image_book_converter.natural_sort import (
    compare_filenames,
    parse_stem_number,
    sort_files_numerically,
)


class TestParseStemNumber:
    """Test the parse_stem_number function."""

    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("1.jpg", 1),
            ("10.png", 10),
            ("007.gif", 7),
            ("12a.jpg", 12),
            ("-3.png", -3),
            ("42", 42),
        ],
    )
    def test_leading_integer(self, filename, expected):
        """Test that the leading integer of the stem is read."""
        assert parse_stem_number(filename) == expected

    @pytest.mark.parametrize("filename", ["cover.jpg", "a1.png", "page-1.png", ".png"])
    def test_non_numeric_stem(self, filename):
        """Test stems that do not start with an integer."""
        assert parse_stem_number(filename) is None

    def test_only_last_extension_is_stripped(self):
        """Test that only the final extension is removed."""
        assert parse_stem_number("3.tar.png") == 3


class TestCompareFilenames:
    """Test the compare_filenames function."""

    def test_numeric_comparison(self):
        """Test that numeric stems compare as integers."""
        assert compare_filenames("2.jpg", "10.jpg") < 0
        assert compare_filenames("10.jpg", "2.jpg") > 0

    def test_equal_numbers(self):
        """Test that equal numbers compare equal regardless of extension."""
        assert compare_filenames("5.jpg", "5.png") == 0

    def test_lexical_fallback(self):
        """Test lexical comparison when a stem is not numeric."""
        assert compare_filenames("a.png", "b.jpg") < 0
        assert compare_filenames("b.jpg", "a.png") > 0
        assert compare_filenames("a.png", "a.png") == 0

    def test_mixed_pair_is_lexical(self):
        """Test that one numeric and one non-numeric name compare lexically."""
        assert compare_filenames("10.jpg", "cover.jpg") < 0
        assert compare_filenames("cover.jpg", "10.jpg") > 0

    def test_lexical_is_case_sensitive(self):
        """Test that uppercase sorts before lowercase (codepoint order)."""
        assert compare_filenames("B.png", "a.png") < 0


class TestSortFilesNumerically:
    """Test the sort_files_numerically function."""

    def test_numeric_order(self):
        """Test ascending numeric order for numeric stems."""
        assert sort_files_numerically(["10.jpg", "2.png", "1.gif"]) == ["1.gif", "2.png", "10.jpg"]

    def test_lexical_order(self):
        """Test lexical order for non-numeric stems."""
        assert sort_files_numerically(["b.jpg", "a.png"]) == ["a.png", "b.jpg"]

    def test_input_not_modified(self):
        """Test that a new list is returned."""
        files = ["3.jpg", "1.jpg", "2.jpg"]
        result = sort_files_numerically(files)
        assert files == ["3.jpg", "1.jpg", "2.jpg"]
        assert result == ["1.jpg", "2.jpg", "3.jpg"]

    def test_stable_for_equal_numbers(self):
        """Test that equal numbers keep their input order."""
        assert sort_files_numerically(["5.png", "5.jpg"]) == ["5.png", "5.jpg"]

    def test_large_numbers(self):
        """Test many pages with multi-digit numbers."""
        files = [f"{n}.jpg" for n in (100, 9, 1000, 10, 1)]
        assert sort_files_numerically(files) == ["1.jpg", "9.jpg", "10.jpg", "100.jpg", "1000.jpg"]

    def test_empty_list(self):
        """Test sorting an empty list."""
        assert sort_files_numerically([]) == []
