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
    StringCase,
    get_case,
    split_words,
    to_camel_case,
    to_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)


class TestCase:
    @pytest.mark.parametrize(
        "text, case",
        [
            ("hello world", StringCase.LOWER),
            ("HELLO WORLD", StringCase.UPPER),
            ("Hello World", StringCase.PROPER),
            ("hello World", StringCase.MIXED),
            ("123", StringCase.LOWER),
        ],
    )
    def test_get_case(self, text, case):
        assert get_case(text) is case

    def test_to_case(self):
        assert to_case("hello world", StringCase.UPPER) == "HELLO WORLD"
        assert to_case("HELLO WORLD", "lower") == "hello world"
        assert to_case("hello world", "proper") == "Hello World"
        with pytest.raises(ArgumentOutOfRangeError):
            to_case("hello", StringCase.MIXED)
        with pytest.raises(ArgumentOutOfRangeError):
            to_case("hello", "sentence")


class TestIdentifiers:
    def test_split_words(self):
        assert split_words("HTTPServerError") == ["HTTP", "Server", "Error"]
        assert split_words("helloWorld") == ["hello", "World"]
        assert split_words("snake_case name") == ["snake", "case", "name"]
        assert split_words("version2Beta") == ["version", "2", "Beta"]

    def test_conversions(self):
        assert to_snake_case("HTTPServerError") == "http_server_error"
        assert to_kebab_case("helloWorld") == "hello-world"
        assert to_pascal_case("snake_case_name") == "SnakeCaseName"
        assert to_camel_case("http server error") == "httpServerError"
        assert to_camel_case("HTTPServer") == "httpServer"
        assert to_camel_case("") == ""
