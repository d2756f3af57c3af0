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
from enum import Enum
from typing import List, Union

from xutils.exceptions import ArgumentOutOfRangeError

_WORDS = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


class StringCase(str, Enum):
    LOWER = "lower"
    UPPER = "upper"
    PROPER = "proper"
    MIXED = "mixed"


def get_case(text: str) -> StringCase:
    r"""
    Case of `text`.

    Text without cased characters counts as lower-case.

    Examples:
        >>> get_case("hello world")
        <StringCase.LOWER: 'lower'>
        >>> get_case("Hello World")
        <StringCase.PROPER: 'proper'>
        >>> get_case("hello World")
        <StringCase.MIXED: 'mixed'>
    """

    if text == text.lower():
        return StringCase.LOWER
    if text == text.upper():
        return StringCase.UPPER
    if text == text.title():
        return StringCase.PROPER
    return StringCase.MIXED


def to_case(text: str, case: Union[StringCase, str]) -> str:
    try:
        case = StringCase(case)
    except ValueError:
        raise ArgumentOutOfRangeError(f"Unknown case {case!r}.") from None
    if case is StringCase.LOWER:
        return text.lower()
    if case is StringCase.UPPER:
        return text.upper()
    if case is StringCase.PROPER:
        return text.title()
    raise ArgumentOutOfRangeError("Mixed case describes text, it cannot be converted to.")


def split_words(text: str) -> List[str]:
    r"""
    Split identifiers and phrases into words.

    Examples:
        >>> split_words("HTTPServerError")
        ['HTTP', 'Server', 'Error']
        >>> split_words("snake_case name")
        ['snake', 'case', 'name']
    """

    return _WORDS.findall(text)


def to_snake_case(text: str) -> str:
    return "_".join(word.lower() for word in split_words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(word.lower() for word in split_words(text))


def to_pascal_case(text: str) -> str:
    return "".join(word.capitalize() for word in split_words(text))


def to_camel_case(text: str) -> str:
    r"""
    Examples:
        >>> to_camel_case("http server error")
        'httpServerError'
    """

    pascal = to_pascal_case(text)
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + pascal[len(words[0]) :]
