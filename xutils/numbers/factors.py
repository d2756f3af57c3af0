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

from math import prod
from typing import Any

from xutils.exceptions import ArgumentOutOfRangeError
from xutils.utils import memoize

from .integers import as_integer


def gcd(a: Any, b: Any) -> int:
    r"""
    Greatest common divisor of `a` and `b`, by Euclid's algorithm.

    The result is never negative, and `gcd(0, 0)` is `0`.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 6)
        2
    """

    a, b = abs(as_integer(a)), abs(as_integer(b))
    while b:
        a, b = b, a % b
    return a


def lcm(a: Any, b: Any) -> int:
    r"""
    Least common multiple of `a` and `b`.

    The result is never negative, and is `0` when either argument is `0`.

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(0, 5)
        0
    """

    a, b = abs(as_integer(a)), abs(as_integer(b))
    if a == 0 or b == 0:
        return 0
    if a == b:
        return a
    return a // gcd(a, b) * b


@memoize
def factorial(n: int) -> int:
    r"""
    `n!`, cached.

    Raises:
        ArgumentOutOfRangeError: If `n` is negative.
    """

    n = as_integer(n)
    if n < 0:
        raise ArgumentOutOfRangeError(f"n={n} should not be negative.")
    return prod(range(2, n + 1))
