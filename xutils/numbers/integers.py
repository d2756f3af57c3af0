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

from dataclasses import dataclass
from operator import index
from typing import Any, Optional, Union

import numpy as np

from xutils.exceptions import ArgumentOutOfRangeError, IntegerOverflowError, InvalidArgumentError
from xutils.registry import Registry


def as_integer(value: Any) -> int:
    r"""
    Convert `value` to a Python `int` without losing information.

    Anything implementing `__index__` is accepted, floats and strings are not.

    Raises:
        InvalidArgumentError: If `value` is not integer-like.
    """

    try:
        return index(value)
    except TypeError:
        raise InvalidArgumentError(
            f"{value!r} of type {type(value).__name__} cannot be interpreted as an integer."
        ) from None


@dataclass(frozen=True)
class IntegerType:
    r"""
    Fixed-width integer type, or an arbitrary-precision one when `bits` is `None`.

    Examples:
        >>> IntegerType("int8", 8).max_value
        127
        >>> IntegerType("uint8", 8, signed=False).contains(-1)
        False
    """

    name: str
    bits: Optional[int] = None
    signed: bool = True

    @property
    def min_value(self) -> Optional[int]:
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> Optional[int]:
        if self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value  # type: ignore[operator]

    def cast(self, value: Any) -> int:
        r"""
        Return `value` as an `int`, checking that it fits in this type.

        Raises:
            IntegerOverflowError: If `value` is out of range.
        """

        value = as_integer(value)
        if not self.contains(value):
            raise IntegerOverflowError(value, self.name)
        return value


INTEGER_TYPES = Registry()
for _bits in (8, 16, 32, 64, 128):
    INTEGER_TYPES.register(IntegerType(f"int{_bits}", _bits, True), f"int{_bits}")
    INTEGER_TYPES.register(IntegerType(f"uint{_bits}", _bits, False), f"uint{_bits}")
INTEGER_TYPES.register(IntegerType("bigint"), "bigint")
del _bits


def integer_type(dtype: Union[str, IntegerType, type, np.dtype]) -> IntegerType:
    r"""
    Resolve `dtype` to an [`IntegerType`][xutils.numbers.integers.IntegerType].

    Args:
        dtype: A registered name such as `"int32"` or `"bigint"`,
            a numpy integer type or dtype, or an `IntegerType`.

    Raises:
        ArgumentOutOfRangeError: If `dtype` names no known integer type.
        InvalidArgumentError: If `dtype` is not something that can name a type.
    """

    if isinstance(dtype, IntegerType):
        return dtype
    if isinstance(dtype, str):
        return INTEGER_TYPES.lookup(dtype)
    try:
        name = np.dtype(dtype).name
    except TypeError:
        raise InvalidArgumentError(f"dtype={dtype!r} does not name an integer type.") from None
    return INTEGER_TYPES.lookup(name)


def to_unsigned(value: Any, bits: int) -> int:
    r"""
    Reinterpret a signed integer as the unsigned integer with the same `bits`-bit pattern.

    Examples:
        >>> to_unsigned(-1, 8)
        255
        >>> to_unsigned(100, 8)
        100
    """

    value, bits = as_integer(value), as_integer(bits)
    if bits < 1:
        raise ArgumentOutOfRangeError(f"bits={bits} should be at least 1.")
    if not -(1 << (bits - 1)) <= value < (1 << bits):
        raise IntegerOverflowError(value, f"{bits}-bit integer")
    return value & ((1 << bits) - 1)


def num_digits(value: Any) -> int:
    return len(str(abs(as_integer(value))))


def digit_sum(value: Any) -> int:
    return sum(int(d) for d in str(abs(as_integer(value))))


def reverse_digits(value: Any) -> int:
    r"""
    Reverse the decimal digits of `value`, keeping its sign.

    Examples:
        >>> reverse_digits(1230)
        321
        >>> reverse_digits(-12)
        -21
    """

    value = as_integer(value)
    reversed_value = int(str(abs(value))[::-1])
    return -reversed_value if value < 0 else reversed_value


def is_palindromic(value: Any) -> bool:
    value = as_integer(value)
    return value == reverse_digits(value)
