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
natural_sort.py - Numeric ordering of page image filenames
==========================================================

Pages are expected to be named ``1.jpg``, ``2.png``, ... ``10.webp``. Two
filenames whose stems start with an integer compare by that integer; any
other pair compares by the full filename, codepoint by codepoint.

The comparison is pairwise, so a list mixing numeric and non-numeric stems
is not guaranteed a total order (``"10.jpg" < "9.jpg"`` lexically while
``"9.jpg" < "10.jpg"`` numerically, and a non-numeric name in between can
chain the two). Such lists are sorted by whatever the stable sort produces
from those pairwise answers.
"""

from __future__ import annotations

import functools
import re
from pathlib import PurePath

LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_stem_number(filename: str) -> int | None:
    """
    Read the leading integer of a filename's stem.

    Trailing characters after the digits are ignored, so ``"12a.jpg"``
    yields 12 and ``"007.png"`` yields 7.

    Args:
        filename: Bare filename, with or without extension

    Returns:
        The integer, or None if the stem does not start with one
    """
    stem = PurePath(filename).stem
    match = LEADING_INT_RE.match(stem)
    if not match:
        return None
    return int(match.group(1))


def compare_filenames(a: str, b: str) -> int:
    """Three-way comparison of two filenames (negative, zero or positive)."""
    num_a = parse_stem_number(a)
    num_b = parse_stem_number(b)

    if num_a is None or num_b is None:
        return (a > b) - (a < b)

    return num_a - num_b


def sort_files_numerically(filenames: list[str]) -> list[str]:
    """
    Return a new list of filenames in page order.

    Args:
        filenames: Bare filenames, in any order

    Returns:
        Sorted copy; the input list is left untouched
    """
    return sorted(filenames, key=functools.cmp_to_key(compare_filenames))
