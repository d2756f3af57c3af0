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

import re
from typing import Mapping, Optional

from lazy_imports import try_import

from xutils.exceptions import ArgumentOutOfRangeError

with try_import() as anyascii_import:
    from anyascii import anyascii

SMALL_CAPS = {
    "a": "ᴀ",
    "b": "ʙ",
    "c": "ᴄ",
    "d": "ᴅ",
    "e": "ᴇ",
    "f": "ꜰ",
    "g": "ɢ",
    "h": "ʜ",
    "i": "ɪ",
    "j": "ᴊ",
    "k": "ᴋ",
    "l": "ʟ",
    "m": "ᴍ",
    "n": "ɴ",
    "o": "ᴏ",
    "p": "ᴘ",
    "q": "ꞯ",
    "r": "ʀ",
    "s": "ꜱ",
    "t": "ᴛ",
    "u": "ᴜ",
    "v": "ᴠ",
    "w": "ᴡ",
    "x": "x",
    "y": "ʏ",
    "z": "ᴢ",
}

_WHITESPACE = re.compile(r"\s+")
_TAGS = re.compile(r"<[^>]*>")
_APOSTROPHES = re.compile(r"['’]")
_NON_ALPHANUMERIC = re.compile(r"[^0-9a-z]+", re.IGNORECASE)
_BRACKETS = {
    "round": re.compile(r"\([^)]*\)"),
    "square": re.compile(r"\[[^\]]*\]"),
    "curly": re.compile(r"\{[^}]*\}"),
    "angle": re.compile(r"<[^>]*>"),
}


def transliterate(text: str) -> str:
    r"""
    Replace every non-ASCII character with its closest ASCII spelling.

    Examples:
        >>> transliterate("Ærøskøbing")
        'Aeroskobing'
    """

    anyascii_import.check()
    return anyascii(text)


def make_slug(text: str) -> str:
    r"""
    Make a URL slug: lower-case ASCII letters and digits joined by single hyphens.

    Examples:
        >>> make_slug("Café de l'Opéra, 2nd edition!")
        'cafe-de-lopera-2nd-edition'
    """

    text = _APOSTROPHES.sub("", transliterate(text))
    return _NON_ALPHANUMERIC.sub("-", text).strip("-").lower()


def strip_whitespace(text: str) -> str:
    return _WHITESPACE.sub("", text)


def strip_tags(text: str) -> str:
    return _TAGS.sub("", text)


def strip_brackets(text: str, round: bool = True, square: bool = True, curly: bool = True, angle: bool = True) -> str:
    r"""
    Remove bracketed passages, brackets included.

    Args:
        text: Text to clean.
        round: Remove `(...)`.
        square: Remove `[...]`.
        curly: Remove `{...}`.
        angle: Remove `<...>`.

    Examples:
        >>> strip_brackets("Paris (France) [citation needed]", square=False)
        'Paris  [citation needed]'
    """

    selected = {"round": round, "square": square, "curly": curly, "angle": angle}
    for kind, pattern in _BRACKETS.items():
        if selected[kind]:
            text = pattern.sub("", text)
    return text


def is_ascii(text: str) -> bool:
    return text.isascii()


def reverse(text: str) -> str:
    return text[::-1]


def is_palindrome(text: str) -> bool:
    return text == reverse(text)


def replace_chars(text: str, mapping: Mapping[str, str], keep_unmapped: bool = True) -> str:
    r"""
    Replace each character of `text` found in `mapping`.

    Args:
        text: Text to transform.
        mapping: Replacement for each character.
        keep_unmapped: Keep characters missing from `mapping`, otherwise drop them.
    """

    return "".join(mapping.get(c, c if keep_unmapped else "") for c in text)


def to_small_caps(text: str) -> str:
    return replace_chars(text.lower(), SMALL_CAPS)


def equals_ignore_case(a: Optional[str], b: Optional[str]) -> bool:
    if a is None or b is None:
        return a is b
    return a.casefold() == b.casefold()


def group_digits(text: str, separator: str = "_", size: int = 4) -> str:
    r"""
    Insert `separator` between groups of `size` characters, counting from the right.

    Examples:
        >>> group_digits("1234567")
        '123_4567'
        >>> group_digits("11110000", " ", 4)
        '1111 0000'
    """

    if size < 1:
        raise ArgumentOutOfRangeError(f"size={size} should be at least 1.")
    head = len(text) % size
    groups = [text[:head]] if head else []
    groups.extend(text[i : i + size] for i in range(head, len(text), size))
    return separator.join(groups)


def zero_pad(text: str, width: int) -> str:
    return text.rjust(width, "0")
