#!/usr/bin/env python3
# -*- coding: utf-8 -*-

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
converter_errors.py - Exception types raised by the conversion pipeline
=======================================================================

A path that exists but is not a directory raises the builtin
``NotADirectoryError``; everything else derives from ``ConverterError``.
"""


class ConverterError(Exception):
    """Base class for all conversion errors."""

    pass


class ArgumentError(ConverterError):
    """Raised when command-line arguments are missing or inconsistent."""

    pass


class InputNotFoundError(ConverterError):
    """Raised when an input file (CSV) or folder does not exist."""

    pass


class FolderNotFoundError(InputNotFoundError):
    """Raised when an image folder does not exist."""

    pass


class EmptyInputError(ConverterError):
    """Raised when a CSV file has no usable lines."""

    pass


class NoValidEntriesError(ConverterError):
    """Raised when every CSV line was skipped."""

    pass


class NoImagesFoundError(ConverterError):
    """Raised when a folder (or a whole merge run) holds no supported images."""

    pass


class MissingFileError(ConverterError):
    """Raised when an image disappeared between listing and use."""

    pass


class AssemblyError(ConverterError):
    """Raised when a PDF or EPUB document cannot be produced."""

    pass


class ExternalToolError(AssemblyError):
    """Raised when the external archiver is missing or exits with an error."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


class ConfigurationError(ConverterError):
    """Raised when the configuration file cannot be parsed or is invalid."""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.line = line
