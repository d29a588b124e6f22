#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Orchestrates loading, validation and merging of the configuration
# - Dot-notation access to configuration values
# - Command-line arguments override configuration values
#

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
config_manager.py - Configuration management for the image book converter
"""

import copy
import logging
from pathlib import Path
from typing import Any

from .common_constants import DEFAULT_CONFIG_FILE
from .config_loader import ConfigLoader
from .config_validator import ConfigValidator
from .converter_errors import ConfigurationError

# Command-line argument -> configuration key
ARG_MAPPING = {
    "output_dir": "output.base_dir",
    "log_level": "logging.level",
    "encoding": "csv.encoding",
    "language": "epub.language",
    "archiver": "epub.archiver",
    "temp_root": "workspace.temp_root",
    "keep_temp": "workspace.keep_temp",
}


def set_config_value(config: dict[str, Any], path: str, value: Any) -> None:
    """Set a value in a nested dictionary using dot notation."""
    keys = path.split(".")
    target = config
    for key in keys[:-1]:
        if not isinstance(target.get(key), dict):
            target[key] = {}
        target = target[key]
    target[keys[-1]] = value


class ConfigManager:
    """Loads, validates and serves the converter configuration."""

    def __init__(
        self,
        config_path: Path | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file (default: image_book_config.yml)
            logger: Logger instance

        Raises:
            ConfigurationError: If the file cannot be parsed or fails validation
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config_path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_FILE)

        self.loader = ConfigLoader(self.config_path, self.logger)
        self.validator = ConfigValidator(self.logger)

        self.config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        config = self.loader.load_config()
        defaults = self.loader.get_default_config()

        first_error = self.validator.validate_config_first_error(config, defaults, self.loader.get_config_lines())
        if first_error:
            line = first_error.get("line")
            location = f"line {line}" if line else str(self.config_path)
            raise ConfigurationError(f"{location}: {first_error['message']}", line)

        return self.loader.merge_with_defaults(config)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., 'epub.language')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self.config
        for key in key_path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def update_with_args(self, args: Any) -> dict[str, Any]:
        """
        Return a copy of the configuration with command-line arguments applied.

        Arguments left unset (None) keep the configured value. ``page_size``
        is a (width, height) pair that fills both pdf page keys.
        """
        config = copy.deepcopy(self.config)

        for arg_name, config_path in ARG_MAPPING.items():
            value = getattr(args, arg_name, None)
            if value is not None:
                set_config_value(config, config_path, value)

        page_size = getattr(args, "page_size", None)
        if page_size is not None:
            set_config_value(config, "pdf.page_width", page_size[0])
            set_config_value(config, "pdf.page_height", page_size[1])

        self.config = config
        return config
