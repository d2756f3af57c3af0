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

from functools import lru_cache, wraps
from inspect import isfunction
from typing import Callable, Optional

from xutils.config import defaults


def flexible_decorator(maybe_decorator: Optional[Callable] = None):
    r"""
    Let a decorator factory be applied with or without brackets.

    A factory such as [`memoize`][xutils.utils.decorators.memoize] takes only keyword options
    and returns the real decorator. Wrapped by this, `@memoize` behaves as `@memoize()`,
    while `@memoize(maxsize=16)` still passes its options through.

    Examples:
        >>> @flexible_decorator
        ... def tag(label="default"):
        ...     def decorator(func):
        ...         func.label = label
        ...         return func
        ...     return decorator
        >>> @tag
        ... def plain():
        ...     pass
        >>> plain.label
        'default'
        >>> @tag(label="custom")
        ... def labelled():
        ...     pass
        >>> labelled.label
        'custom'
    """

    def decorator(factory: Callable):
        @wraps(factory)
        def wrapper(*args, **kwargs):
            # a lone function argument is the target of a bracket-less use
            if len(args) == 1 and not kwargs and isfunction(args[0]):
                return factory()(args[0])
            return factory(*args, **kwargs)

        return wrapper

    return decorator if maybe_decorator is None else decorator(maybe_decorator)


@flexible_decorator
def memoize(maxsize: Optional[int] = None, typed: bool = False):
    r"""
    Decorator to cache the results of a pure function.

    The cache is a least-recently-used cache of at most `maxsize` entries,
    so it never grows without bound.
    The decorated function exposes `cache_info()` and `cache_clear()`.

    Args:
        maxsize: Maximum number of cached results.
            Defaults to `defaults.cache_size`.
        typed: Cache arguments of different types separately, so `f(3)` and `f(3.0)` are distinct.

    Examples:
        >>> @memoize
        ... def square(n):
        ...     return n * n
        >>> square(12)
        144
        >>> square.cache_info().hits
        0
    """

    if maxsize is None:
        maxsize = defaults.cache_size
    if maxsize < 0:
        raise ValueError(f"maxsize={maxsize} should not be negative.")

    def decorator(func: Callable):
        return lru_cache(maxsize=maxsize, typed=typed)(func)

    return decorator
