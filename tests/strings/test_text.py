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

import pytest

from xutils.exceptions import ArgumentOutOfRangeError
from xutils.strings import (
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


class TestTransliterate:
    def test_ascii(self):
        assert transliterate("Ærøskøbing") == "Aeroskobing"
        assert transliterate("plain") == "plain"

    def test_slug(self):
        assert make_slug("Café de l'Opéra, 2nd edition!") == "cafe-de-lopera-2nd-edition"
        assert make_slug("  Hello,   World  ") == "hello-world"
        assert make_slug("--") == ""

    def test_slug_is_ascii(self):
        slug = make_slug("Ünïcödé Straße № 5")
        assert is_ascii(slug)
        assert slug == slug.lower()
        assert "--" not in slug
        assert not slug.startswith("-")
        assert not slug.endswith("-")


class TestStrip:
    def test_whitespace(self):
        assert strip_whitespace(" a\tb\nc d e ") == "abcde"

    def test_tags(self):
        assert strip_tags("<p>Hello <b>world</b></p>") == "Hello world"

    def test_brackets(self):
        text = "a (b) [c] {d} <e> f"
        assert strip_brackets(text) == "a     f"
        assert strip_brackets(text, round=False) == "a (b)    f"
        assert strip_brackets(text, square=False, curly=False, angle=False) == "a  [c] {d} <e> f"


class TestTransform:
    def test_reverse(self):
        assert reverse("abc") == "cba"
        assert is_palindrome("racecar")
        assert not is_palindrome("race")

    def test_replace_chars(self):
        mapping = {"a": "1", "b": "2"}
        assert replace_chars("abc", mapping) == "12c"
        assert replace_chars("abc", mapping, keep_unmapped=False) == "12"

    def test_small_caps(self):
        assert to_small_caps("Hello") == "ʜᴇʟʟᴏ"
        assert to_small_caps("xyz 1") == "xʏᴢ 1"

    def test_equals_ignore_case(self):
        assert equals_ignore_case("Straße", "STRASSE")
        assert equals_ignore_case("abc", "ABC")
        assert not equals_ignore_case("abc", None)
        assert equals_ignore_case(None, None)

    def test_group_digits(self):
        assert group_digits("1234567") == "123_4567"
        assert group_digits("11110000", " ") == "1111 0000"
        assert group_digits("1234567", ",", 3) == "1,234,567"
        assert group_digits("12", size=3) == "12"
        assert group_digits("") == ""
        with pytest.raises(ArgumentOutOfRangeError):
            group_digits("1", size=0)

    def test_zero_pad(self):
        assert zero_pad("7", 3) == "007"
        assert zero_pad("1234", 3) == "1234"
