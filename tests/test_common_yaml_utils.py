#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for common_yaml_utils module.
"""

import pytest
import yaml
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from image_book_converter.common_yaml_utils import load_safe_yaml, merge_yaml_configs


class TestLoadSafeYaml:
    """Test the load_safe_yaml function."""

    def test_load_valid_yaml(self, tmp_path):
        """Test loading a valid YAML file."""
        yaml_file = tmp_path / "test.yaml"
        yaml_content = {"key1": "value1", "key2": {"nested": "value2"}}
        yaml_file.write_text(yaml.dump(yaml_content))

        assert load_safe_yaml(yaml_file) == yaml_content

    def test_load_empty_yaml(self, tmp_path):
        """Test loading an empty YAML file."""
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert load_safe_yaml(yaml_file) == {}

    def test_file_not_found(self):
        """Test loading non-existent file."""
        with pytest.raises(ValueError, match="YAML file not found"):
            load_safe_yaml("/non/existent/file.yaml")

    def test_invalid_yaml_syntax(self, tmp_path):
        """Test that syntax errors keep their YAML error type."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("key: value\n- invalid mix of dict and list")

        with pytest.raises(yaml.YAMLError):
            load_safe_yaml(yaml_file)

    def test_non_dict_root(self, tmp_path):
        """Test loading YAML with non-dictionary root."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- item1\n- item2")

        with pytest.raises(ValueError, match="dictionary at the root level"):
            load_safe_yaml(yaml_file)


class TestMergeYamlConfigs:
    """Test the merge_yaml_configs function."""

    def test_deep_merge(self):
        """Test that nested keys are merged and overrides win."""
        base = {"epub": {"language": "pt-BR", "archiver": "builtin"}, "pdf": {"page_width": 595}}
        override = {"epub": {"language": "en"}}

        result = merge_yaml_configs(base, override)

        assert result == {"epub": {"language": "en", "archiver": "builtin"}, "pdf": {"page_width": 595}}

    def test_inputs_unchanged(self):
        """Test that neither input is modified."""
        base = {"a": {"b": 1}}
        override = {"a": {"b": 2}, "c": 3}
        merge_yaml_configs(base, override)
        assert base == {"a": {"b": 1}}
        assert override == {"a": {"b": 2}, "c": 3}

    def test_non_dict_replaces_dict(self):
        """Test that a scalar override replaces a mapping."""
        assert merge_yaml_configs({"a": {"b": 1}}, {"a": None}) == {"a": None}
