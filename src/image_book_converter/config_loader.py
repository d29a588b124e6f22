#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Loads the YAML configuration, creating the default file when missing
# - YAML syntax errors reported with line and column
# - Merges user values over the defaults
#

"""
config_loader.py - Configuration loading and merging utilities
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from .common_yaml_utils import load_safe_yaml, merge_yaml_configs
from .config_schema import DEFAULT_CONFIG_TEMPLATE
from .converter_errors import ConfigurationError


class ConfigLoader:
    """Handles loading and merging of configuration files."""

    def __init__(self, config_path: Path, logger: logging.Logger | None = None):
        self.config_path = Path(config_path)
        self.logger = logger or logging.getLogger(__name__)
        self._config_lines: list[str] = []

    def load_config(self) -> dict[str, Any]:
        """
        Load configuration from file, creating the default file first if needed.

        Returns:
            Raw configuration dictionary (not merged with defaults)

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        if not self.config_path.exists():
            self.logger.info(f"Configuration file not found. Creating default at: {self.config_path}")
            self._create_default_config()

        try:
            self._config_lines = self.config_path.read_text(encoding="utf-8").split("\n")
            config = load_safe_yaml(self.config_path)
        except yaml.YAMLError as e:
            raise self._yaml_error(e) from e
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Error loading configuration {self.config_path}: {e}") from e

        if not config:
            self.logger.warning("Configuration file is empty. Using defaults.")
            return self.get_default_config()

        return config

    def _yaml_error(self, error: yaml.YAMLError) -> ConfigurationError:
        mark = getattr(error, "problem_mark", None)
        problem = getattr(error, "problem", None) or str(error)
        if mark is None:
            return ConfigurationError(f"Failed to parse {self.config_path}: {problem}")
        line = mark.line + 1
        return ConfigurationError(
            f"Failed to parse {self.config_path} at line {line}, column {mark.column + 1}: {problem}. "
            "Fix the syntax error or delete the config file to regenerate defaults.",
            line,
        )

    def _create_default_config(self) -> None:
        """Create default configuration file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Failed to create configuration file {self.config_path}: {e}") from e
        self.logger.info("Default configuration file created successfully.")

    def get_default_config(self) -> dict[str, Any]:
        """Return the default configuration as a dictionary."""
        result = yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)
        return result if isinstance(result, dict) else {}

    def merge_with_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """Merge user config with defaults to ensure all keys exist."""
        return merge_yaml_configs(self.get_default_config(), config)

    def get_config_lines(self) -> list[str]:
        """Configuration file lines, for error reporting."""
        return self._config_lines
