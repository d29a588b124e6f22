#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for csv_parser module.
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from image_book_converter.converter_errors import EmptyInputError, InputNotFoundError, NoValidEntriesError
from image_book_converter.csv_parser import (
    format_csv_content,
    is_header_line,
    parse_csv_content,
    parse_csv_line,
    read_csv_file,
    write_csv_file,
)
from image_book_converter.models import CsvEntry


class TestParseCsvLine:
    """Test the parse_csv_line function."""

    def test_simple_line(self):
        """Test splitting on semicolons."""
        assert parse_csv_line("name;/data/folder") == ["name", "/data/folder"]

    def test_quoted_semicolon(self):
        """Test that a semicolon inside quotes does not split the field."""
        assert parse_csv_line('"Report; Q1";/data') == ["Report; Q1", "/data"]

    def test_comma_is_not_a_separator(self):
        """Test that unquoted commas are preserved verbatim."""
        assert parse_csv_line("Report, Q1;/data") == ["Report, Q1", "/data"]

    def test_quotes_are_dropped(self):
        """Test that quote characters never appear in values."""
        assert parse_csv_line('"a";"b"') == ["a", "b"]

    def test_extra_columns(self):
        """Test lines with more than two fields."""
        assert parse_csv_line("a;b;c") == ["a", "b", "c"]

    def test_no_separator(self):
        """Test a line without separator gives a single field."""
        assert parse_csv_line("only-name") == ["only-name"]


class TestIsHeaderLine:
    """Test the is_header_line function."""

    @pytest.mark.parametrize("line", ["nome;caminho", "NOME;CAMINHO", "name;path", "Name ; Path"])
    def test_header(self, line):
        """Test recognized headers."""
        assert is_header_line(line)

    @pytest.mark.parametrize("line", ["chapter1;/data/ch1", "nome;/data", "path;x"])
    def test_not_header(self, line):
        """Test ordinary data lines."""
        assert not is_header_line(line)


class TestParseCsvContent:
    """Test the parse_csv_content function."""

    def test_header_is_skipped(self, mock_logger):
        """Test that a first-line header is excluded."""
        entries = parse_csv_content("nome;caminho\nch1;/data/ch1\n", mock_logger)
        assert entries == [CsvEntry("ch1", "/data/ch1")]

    def test_header_text_not_first_is_data(self, mock_logger):
        """Test that header text on a later line is ordinary data."""
        entries = parse_csv_content("ch1;/data/ch1\nnome;caminho\n", mock_logger)
        assert entries == [CsvEntry("ch1", "/data/ch1"), CsvEntry("nome", "caminho")]

    def test_blank_lines_and_whitespace(self, mock_logger):
        """Test that blank lines are ignored and values trimmed."""
        entries = parse_csv_content("\n  a ; /x  \n\n\t\nb;/y\r\n", mock_logger)
        assert entries == [CsvEntry("a", "/x"), CsvEntry("b", "/y")]

    def test_line_numbers(self, mock_logger):
        """Test that entries remember their 1-based line."""
        entries = parse_csv_content("nome;caminho\n\nch1;/a\n", mock_logger)
        assert entries[0].line_number == 3

    def test_invalid_line_skipped_with_warning(self, mock_logger):
        """Test that single-column lines are skipped with a warning."""
        entries = parse_csv_content("broken\nok;/data\n", mock_logger)
        assert entries == [CsvEntry("ok", "/data")]
        mock_logger.warning.assert_called_once()
        assert "Line 1" in mock_logger.warning.call_args[0][0]

    def test_empty_value_skipped_with_warning(self, mock_logger):
        """Test that rows with an empty name or path are skipped."""
        entries = parse_csv_content(";/data\nname;\nok;/x\n", mock_logger)
        assert entries == [CsvEntry("ok", "/x")]
        assert mock_logger.warning.call_count == 2

    def test_empty_content(self, mock_logger):
        """Test that content without non-blank lines is rejected."""
        with pytest.raises(EmptyInputError):
            parse_csv_content("\n   \n", mock_logger)

    def test_header_only(self, mock_logger):
        """Test that a header without rows has no valid entries."""
        with pytest.raises(NoValidEntriesError):
            parse_csv_content("nome;caminho\n", mock_logger)

    def test_all_lines_invalid(self, mock_logger):
        """Test that all-invalid content has no valid entries."""
        with pytest.raises(NoValidEntriesError):
            parse_csv_content("a\nb\n", mock_logger)


class TestReadWriteCsvFile:
    """Test reading and writing CSV files."""

    def test_round_trip(self, tmp_path, mock_logger):
        """Test that written entries parse back unchanged."""
        rows = [CsvEntry("chapter 1", "/data/ch 1"), CsvEntry("Report, Q1", "/data/q1")]
        csv_path = write_csv_file(rows, tmp_path / "csv" / "list.csv")

        assert csv_path.is_absolute()
        assert read_csv_file(csv_path, logger=mock_logger) == rows

    def test_format_replaces_semicolons(self):
        """Test that a literal semicolon in a value becomes a comma."""
        content = format_csv_content([CsvEntry("a;b", "/x;y")])
        assert content == "nome;caminho\na,b;/x,y\n"

    def test_missing_file(self, tmp_path, mock_logger):
        """Test reading a file that does not exist."""
        with pytest.raises(InputNotFoundError, match="not found"):
            read_csv_file(tmp_path / "missing.csv", logger=mock_logger)

    def test_directory_is_not_a_file(self, tmp_path, mock_logger):
        """Test reading a directory path."""
        with pytest.raises(InputNotFoundError, match="not a file"):
            read_csv_file(tmp_path, logger=mock_logger)

    def test_utf8_bom(self, tmp_path, mock_logger):
        """Test that a UTF-8 byte order mark is not part of the first value."""
        csv_path = tmp_path / "bom.csv"
        csv_path.write_bytes("\ufeffcapítulo;/dados/um\n".encode("utf-8"))
        assert read_csv_file(csv_path, logger=mock_logger) == [CsvEntry("capítulo", "/dados/um")]

    def test_explicit_encoding(self, tmp_path, mock_logger):
        """Test reading a legacy encoded file with an explicit encoding."""
        csv_path = tmp_path / "latin1.csv"
        csv_path.write_bytes("ação;/pasta\n".encode("latin-1"))
        assert read_csv_file(csv_path, encoding="latin-1", logger=mock_logger) == [CsvEntry("ação", "/pasta")]

    def test_wrong_encoding_is_reported(self, tmp_path, mock_logger):
        """Test that undecodable content raises InputNotFoundError."""
        csv_path = tmp_path / "bad.csv"
        csv_path.write_bytes(b"\xff\xfe\xfa;/x\n")
        with pytest.raises(InputNotFoundError, match="Error reading CSV file"):
            read_csv_file(csv_path, encoding="utf-8", logger=mock_logger)
