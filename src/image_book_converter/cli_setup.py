#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Configuration loading, logging setup and signal handling for the CLI
#

"""
cli_setup.py - CLI setup and initialization
===========================================

Handles initialization of configuration, logging and signal handling for
the image-book-* commands.
"""

from __future__ import annotations

import logging
import signal
import sys
from pathlib import Path
from typing import Any

from .config_manager import ConfigManager

# Exit status after Ctrl-C (128 + SIGINT)
INTERRUPTED_EXIT_CODE = 130


def setup_configuration(config_path: str | Path | None = None) -> ConfigManager:
    """Load and validate configuration from config file.

    Raises:
        ConfigurationError: If the file cannot be parsed or fails validation
    """
    return ConfigManager(config_path=Path(config_path) if config_path else None)


def setup_logging(config: dict[str, Any]) -> logging.Logger:
    """Set up logging based on configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Configured logger instance
    """
    log_level = getattr(logging, str(config["logging"]["level"]).upper(), logging.INFO)
    log_format = config["logging"]["format"]

    logging.basicConfig(level=log_level, format=log_format)
    logging.getLogger().setLevel(log_level)
    logger = logging.getLogger("image_book_converter")

    if config["logging"]["file_enabled"]:
        try:
            file_handler = logging.FileHandler(config["logging"]["file_path"])
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.error(f"Failed to set up file logging to {config['logging']['file_path']}: {e}")

    return logger


def setup_signal_handler(logger: logging.Logger) -> None:
    """Exit with status 130 on Ctrl-C.

    Args:
        logger: Logger instance
    """

    def signal_handler(sig: int, frame: Any) -> None:
        logger.info("Interrupt received. Exiting.")
        sys.exit(INTERRUPTED_EXIT_CODE)

    signal.signal(signal.SIGINT, signal_handler)
