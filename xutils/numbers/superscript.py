# XUtils
# Copyright (C) 2022-Present  XUtils

# This program is free software: you can redistribute it and/or modify
# it under the terms of the following licenses:
# - The Unlicense
# - GNU Affero General Public License v3.0 or later
# - GNU General Public License v2.0 or later
# - BSD 4-Clause "Original" or "Old" License
# - MIT License
# - Apache License 2.0

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the LICENSE file for more details.

from __future__ import annotations

from typing import Any

from xutils.strings import replace_chars

SUPERSCRIPT_DIGITS = {
    "0": "⁰",
    "1": "¹",
    "2": "²",
    "3": "³",
    "4": "⁴",
    "5": "⁵",
    "6": "⁶",
    "7": "⁷",
    "8": "⁸",
    "9": "⁹",
    "-": "⁻",
}

SUBSCRIPT_DIGITS = {
    "0": "₀",
    "1": "₁",
    "2": "₂",
    "3": "₃",
    "4": "₄",
    "5": "₅",
    "6": "₆",
    "7": "₇",
    "8": "₈",
    "9": "₉",
    "-": "₋",
}


def to_superscript(value: Any) -> str:
    r"""
    Write the digits and minus signs of `value` as superscripts, leaving other characters as they are.

    Examples:
        >>> to_superscript(-12)
        '⁻¹²'
        >>> "x" + to_superscript(2)
        'x²'
    """

    return replace_chars(str(value), SUPERSCRIPT_DIGITS)


def to_subscript(value: Any) -> str:
    r"""
    Write the digits and minus signs of `value` as subscripts, leaving other characters as they are.

    Examples:
        >>> "H" + to_subscript(2) + "O"
        'H₂O'
    """

    return replace_chars(str(value), SUBSCRIPT_DIGITS)
