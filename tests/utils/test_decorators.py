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

from xutils.config import defaults
from xutils.utils import decorators


class Test:
    def test_memoize(self):
        calls = []

        @decorators.memoize
        def square(n):
            calls.append(n)
            return n * n

        assert square(3) == 9
        assert square(3) == 9
        assert calls == [3]
        assert square.cache_info().maxsize == defaults.cache_size
        assert square.__name__ == "square"

    def test_memoize_bounded(self):
        calls = []

        @decorators.memoize(maxsize=2)
        def identity(n):
            calls.append(n)
            return n

        for n in (1, 2, 3, 1):
            identity(n)
        assert calls == [1, 2, 3, 1]
        assert identity.cache_info().currsize == 2

    def test_memoize_clear(self):
        calls = []

        @decorators.memoize()
        def double(n):
            calls.append(n)
            return 2 * n

        double(1)
        double.cache_clear()
        double(1)
        assert calls == [1, 1]

    def test_flexible_decorator(self):
        @decorators.flexible_decorator
        def tag(label="default"):
            def decorator(func):
                func.label = label
                return func

            return decorator

        @tag
        def bare():
            pass

        @tag(label="custom")
        def called():
            pass

        assert bare.label == "default"
        assert called.label == "custom"

    def test_memoize_typed(self):
        calls = []

        @decorators.memoize(typed=True)
        def half(n):
            calls.append(n)
            return n / 2

        half(4)
        half(4.0)
        assert calls == [4, 4.0]
        assert half.cache_info().maxsize == defaults.cache_size
