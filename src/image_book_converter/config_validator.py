#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Validates configuration structure and values
# - Reports only the first error, with its line in the file when known
#

"""
config_validator.py - Configuration validation utilities
"""

import logging
from typing import Any

from .config_schema import REQUIRED_SECTIONS, VALID_ARCHIVERS, VALID_LOG_LEVELS


def find_line_number(key_path: str, config_lines: list[str]) -> int | None:
    """
    Find the line of a dot-separated key in a YAML file.

    Assumes the two-space indentation of the default template.
    """
    keys = key_path.split(".")
    depth = 0

    for i, line in enumerate(config_lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        indent = len(line) - len(line.lstrip())
        if indent == depth * 2 and stripped.startswith(f"{keys[depth]}:"):
            if depth == len(keys) - 1:
                return i
            depth += 1
        elif indent < depth * 2:
            # Left the parent section without finding the key
            return None

    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration structure and values."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def validate_config_first_error(self, config: dict[str, Any], defaults: dict[str, Any], config_lines: list[str]) -> dict[str, Any] | None:
        """
        Validate configuration and return only the FIRST error found.

        Args:
            config: Configuration to validate
            defaults: Default configuration for reference
            config_lines: Configuration file lines for error reporting

        Returns:
            First error found or None if valid
        """
        for key in config.keys():
            if key not in defaults:
                return {
                    "type": "unknown_key",
                    "key": key,
                    "line": find_line_number(str(key), config_lines),
                    "message": f"Unknown or malformed key '{key}' found",
                }

        for section, description in REQUIRED_SECTIONS.items():
            if section not in config:
                return {
                    "type": "missing_section",
                    "section": section,
                    "line": None,
                    "message": f"Expected section '{section}' not found ({description})",
                }
            if not isinstance(config[section], dict):
                return {
                    "type": "invalid_type",
                    "path": section,
                    "line": find_line_number(section, config_lines),
                    "message": f"Section '{section}' must be a mapping",
                }

        for check in (self._check_output, self._check_workspace, self._check_pdf, self._check_epub, self._check_batch, self._check_logging):
            error = check(config)
            if error:
                path = error["path"]
                error["type"] = "invalid_value"
                error["value"] = self._lookup(config, path)
                error["line"] = find_line_number(path, config_lines)
                return error

        return None

    @staticmethod
    def _lookup(config: dict[str, Any], path: str) -> Any:
        value: Any = config
        for key in path.split("."):
            value = value.get(key) if isinstance(value, dict) else None
        return value

    def _check_output(self, config: dict[str, Any]) -> dict[str, Any] | None:
        output = config["output"]
        for key in ("pdf_dir", "epub_dir", "csv_dir"):
            if key in output and (not isinstance(output[key], str) or not output[key].strip()):
                return {"path": f"output.{key}", "message": f"Invalid value '{output[key]}' for output.{key}. Must be a non-empty folder name"}
        base_dir = output.get("base_dir")
        if base_dir is not None and not isinstance(base_dir, str):
            return {"path": "output.base_dir", "message": f"Invalid value '{base_dir}' for output.base_dir. Must be a path or null"}
        return None

    def _check_workspace(self, config: dict[str, Any]) -> dict[str, Any] | None:
        workspace = config["workspace"]
        temp_root = workspace.get("temp_root")
        if temp_root is not None and not isinstance(temp_root, str):
            return {"path": "workspace.temp_root", "message": f"Invalid value '{temp_root}' for workspace.temp_root. Must be a path or null"}
        if not isinstance(workspace.get("keep_temp", False), bool):
            return {"path": "workspace.keep_temp", "message": f"Invalid value '{workspace['keep_temp']}' for workspace.keep_temp. Must be true or false"}
        return None

    def _check_pdf(self, config: dict[str, Any]) -> dict[str, Any] | None:
        for key in ("page_width", "page_height"):
            if key in config["pdf"]:
                value = config["pdf"][key]
                if not _is_number(value) or value <= 0:
                    return {"path": f"pdf.{key}", "message": f"Invalid value '{value}' for pdf.{key}. Must be a positive number of points"}
        return None

    def _check_epub(self, config: dict[str, Any]) -> dict[str, Any] | None:
        epub = config["epub"]
        if "archiver" in epub and epub["archiver"] not in VALID_ARCHIVERS:
            return {"path": "epub.archiver", "message": f"Invalid value '{epub['archiver']}' for epub.archiver. Must be one of {VALID_ARCHIVERS}"}
        if "image_padding" in epub:
            padding = epub["image_padding"]
            if not isinstance(padding, int) or isinstance(padding, bool) or padding < 1:
                return {"path": "epub.image_padding", "message": f"Invalid value '{padding}' for epub.image_padding. Must be a positive integer"}
        for key in ("language", "page_label"):
            if key in epub and (not isinstance(epub[key], str) or not epub[key].strip()):
                return {"path": f"epub.{key}", "message": f"Invalid value '{epub[key]}' for epub.{key}. Must be a non-empty string"}
        return None

    def _check_batch(self, config: dict[str, Any]) -> dict[str, Any] | None:
        timeout = config["batch"].get("lock_timeout", -1)
        if timeout is not None and (not _is_number(timeout) or (timeout < 0 and timeout != -1)):
            return {"path": "batch.lock_timeout", "message": f"Invalid value '{timeout}' for batch.lock_timeout. Must be -1 or a non-negative number of seconds"}
        return None

    def _check_logging(self, config: dict[str, Any]) -> dict[str, Any] | None:
        level = config["logging"].get("level", "INFO")
        if str(level).upper() not in VALID_LOG_LEVELS:
            return {"path": "logging.level", "message": f"Invalid value '{level}' for logging.level. Must be one of {VALID_LOG_LEVELS}"}
        return None
