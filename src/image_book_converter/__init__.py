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
Image Book Converter

Batch conversion of folders of numbered images into PDF and EPUB documents.
"""

__version__ = "1.0.0"
__author__ = "Emasoft"
__email__ = "713559+Emasoft@users.noreply.github.com"
__license__ = "Apache-2.0"

# Main modules
from . import image_book_cli
from . import batch_processor
from . import folder_analyzer

# Utility modules
from . import common_constants
from . import common_file_utils
from . import common_print_utils
from . import common_yaml_utils

# Support modules
from . import config_manager
from . import converter_errors
from . import csv_parser
from . import natural_sort
from . import folder_scanner
from . import models

# Document assemblers
from . import pdf_generator
from . import epub_builders
from . import epub_generator

__all__ = [
    "image_book_cli",
    "batch_processor",
    "folder_analyzer",
    "common_constants",
    "common_file_utils",
    "common_print_utils",
    "common_yaml_utils",
    "config_manager",
    "converter_errors",
    "csv_parser",
    "natural_sort",
    "folder_scanner",
    "models",
    "pdf_generator",
    "epub_builders",
    "epub_generator",
]
