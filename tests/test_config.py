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

from xutils import Config, Registry, defaults
from xutils.exceptions import ArgumentOutOfRangeError


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.letter_case is None
        assert config.decimal_precision == 28
        assert config.decimal_guard_digits == 12
        assert config.cache_size == 1024
        assert config.sexagesimal_notation == "angle"
        assert config.log_level == "WARNING"

    def test_module_defaults(self):
        assert isinstance(defaults, Config)
        assert defaults.decimal_precision == 28


class TestRegistry:
    def test_lookup_ignores_case(self):
        registry = Registry()
        registry.register(int, "integer")
        assert registry.lookup("integer") is int
        assert registry.lookup("INTEGER") is int

    def test_unknown(self):
        registry = Registry()
        registry.register(int, "integer")
        with pytest.raises(ArgumentOutOfRangeError, match="integer"):
            registry.lookup("float")

    def test_non_str(self):
        with pytest.raises(ArgumentOutOfRangeError):
            Registry().lookup(1)
