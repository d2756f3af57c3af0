# XUtils
# Copyright (C) 2022-Present  XUtils

# This file is part of XUtils.

# XUtils is free software: you can redistribute it and/or modify
# it under the terms of the following licenses:
# - The Unlicense
# - GNU Affero General Public License v3.0 or later
# - GNU General Public License v2.0 or later
# - BSD 4-Clause "Original" or "Old" License
# - MIT License
# - Apache License 2.0

# XUtils is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the LICENSE file for more details.

from .case import (
    StringCase,
    get_case,
    split_words,
    to_camel_case,
    to_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)
from .text import (
    SMALL_CAPS,
    equals_ignore_case,
    group_digits,
    is_ascii,
    is_palindrome,
    make_slug,
    replace_chars,
    reverse,
    strip_brackets,
    strip_tags,
    strip_whitespace,
    to_small_caps,
    transliterate,
    zero_pad,
)

__all__ = [
    "SMALL_CAPS",
    "transliterate",
    "make_slug",
    "strip_whitespace",
    "strip_brackets",
    "strip_tags",
    "is_ascii",
    "is_palindrome",
    "reverse",
    "replace_chars",
    "to_small_caps",
    "equals_ignore_case",
    "group_digits",
    "zero_pad",
    "StringCase",
    "get_case",
    "to_case",
    "split_words",
    "to_snake_case",
    "to_kebab_case",
    "to_camel_case",
    "to_pascal_case",
]
