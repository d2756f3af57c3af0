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

from math import floor, isfinite, isnan, log10, sqrt
from typing import Any, ClassVar, Optional, Tuple, Type, Union

import numpy as np

from xutils.exceptions import ArgumentOutOfRangeError, InvalidArgumentError
from xutils.registry import Registry
from xutils.typing import FloatLike

from .integers import as_integer


class FloatingPoint:
    r"""
    Bit layout of an IEEE-754 binary floating-point format.

    A subclass declares `total_bits`, `fraction_bits`, its numpy `dtype` and the unsigned `bits_dtype`
    of the same width; the exponent width, the bias and the field masks are derived from them.

    Values are moved to and from their bit patterns by reinterpreting numpy scalars,
    so every pattern, NaN payloads included, survives a round trip.

    Examples:
        >>> Double.disassemble(1.0)
        (0, 1023, 0)
        >>> float(Double.assemble(1, 1024, 0))
        -2.0
        >>> Half.exponent_bits, Half.bias
        (5, 15)
    """

    name: ClassVar[str]
    total_bits: ClassVar[int]
    fraction_bits: ClassVar[int]
    dtype: ClassVar[Type[np.floating]]
    bits_dtype: ClassVar[Type[np.unsignedinteger]]

    exponent_bits: ClassVar[int]
    bias: ClassVar[int]
    min_exponent: ClassVar[int]
    max_exponent: ClassVar[int]
    max_exponent_field: ClassVar[int]
    sign_mask: ClassVar[int]
    exponent_mask: ClassVar[int]
    fraction_mask: ClassVar[int]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.exponent_bits = cls.total_bits - cls.fraction_bits - 1
        cls.bias = (1 << (cls.exponent_bits - 1)) - 1
        cls.min_exponent = 1 - cls.bias
        cls.max_exponent = cls.bias
        cls.max_exponent_field = (1 << cls.exponent_bits) - 1
        cls.sign_mask = 1 << (cls.total_bits - 1)
        cls.exponent_mask = cls.max_exponent_field << cls.fraction_bits
        cls.fraction_mask = (1 << cls.fraction_bits) - 1

    @classmethod
    def to_bits(cls, x: Any) -> int:
        r"""
        Bit pattern of `x` as an unsigned integer.

        `x` is first converted to this format, rounding if it does not fit exactly.
        """

        if not isinstance(x, cls.dtype):
            try:
                x = cls.dtype(x)
            except (TypeError, ValueError):
                raise InvalidArgumentError(f"{x!r} cannot be converted to {cls.name} precision.") from None
        return int(x.view(cls.bits_dtype))

    @classmethod
    def from_bits(cls, bits: Any) -> np.floating:
        bits = as_integer(bits)
        if not 0 <= bits <= (1 << cls.total_bits) - 1:
            raise ArgumentOutOfRangeError(f"bits={bits} does not fit in {cls.total_bits} bits.")
        return cls.bits_dtype(bits).view(cls.dtype)

    @classmethod
    def disassemble(cls, x: Any) -> Tuple[int, int, int]:
        r"""
        Split `x` into its raw sign, biased exponent and fraction fields.
        """

        bits = cls.to_bits(x)
        sign = (bits & cls.sign_mask) >> (cls.total_bits - 1)
        exponent = (bits & cls.exponent_mask) >> cls.fraction_bits
        fraction = bits & cls.fraction_mask
        return sign, exponent, fraction

    @classmethod
    def assemble(cls, sign: Any, exponent: Any, fraction: Any) -> np.floating:
        r"""
        Build a value from raw sign, biased exponent and fraction fields.

        Raises:
            ArgumentOutOfRangeError: If a field does not fit its width.
        """

        sign, exponent, fraction = as_integer(sign), as_integer(exponent), as_integer(fraction)
        if sign not in (0, 1):
            raise ArgumentOutOfRangeError(f"sign={sign} should be 0 or 1.")
        if not 0 <= exponent <= cls.max_exponent_field:
            raise ArgumentOutOfRangeError(
                f"exponent={exponent} should be in the range [0, {cls.max_exponent_field}] for {cls.name} precision."
            )
        if not 0 <= fraction <= cls.fraction_mask:
            raise ArgumentOutOfRangeError(
                f"fraction={fraction} should be in the range [0, {cls.fraction_mask}] for {cls.name} precision."
            )
        return cls.from_bits((sign << (cls.total_bits - 1)) | (exponent << cls.fraction_bits) | fraction)

    @classmethod
    def get_exponent_bits(cls, x: Any) -> int:
        return cls.disassemble(x)[1]

    @classmethod
    def get_exponent(cls, x: Any) -> int:
        r"""
        Unbiased exponent of `x`.

        Subnormals and zeros report `min_exponent`, infinities and NaNs report `max_exponent + 1`.
        """

        exponent = cls.disassemble(x)[1]
        if exponent == 0:
            return cls.min_exponent
        return exponent - cls.bias

    @classmethod
    def is_subnormal(cls, x: Any) -> bool:
        _, exponent, fraction = cls.disassemble(x)
        return exponent == 0 and fraction != 0

    @classmethod
    def min_normal(cls) -> np.floating:
        return cls.assemble(0, 1, 0)

    @classmethod
    def max_normal(cls) -> np.floating:
        return cls.assemble(0, cls.max_exponent_field - 1, cls.fraction_mask)

    @classmethod
    def min_subnormal(cls) -> np.floating:
        return cls.assemble(0, 0, 1)

    @classmethod
    def max_subnormal(cls) -> np.floating:
        return cls.assemble(0, 0, cls.fraction_mask)

    @classmethod
    def infinities(cls) -> Tuple[np.floating, np.floating]:
        r"""
        Negative and positive infinity.
        """

        return cls.assemble(1, cls.max_exponent_field, 0), cls.assemble(0, cls.max_exponent_field, 0)


class Half(FloatingPoint):
    name = "half"
    total_bits = 16
    fraction_bits = 10
    dtype = np.float16
    bits_dtype = np.uint16


class Single(FloatingPoint):
    name = "single"
    total_bits = 32
    fraction_bits = 23
    dtype = np.float32
    bits_dtype = np.uint32


class Double(FloatingPoint):
    name = "double"
    total_bits = 64
    fraction_bits = 52
    dtype = np.float64
    bits_dtype = np.uint64


FLOATING_POINTS = Registry()
FLOATING_POINTS.register(Half, "half")
FLOATING_POINTS.register(Half, "float16")
FLOATING_POINTS.register(Single, "single")
FLOATING_POINTS.register(Single, "float32")
FLOATING_POINTS.register(Double, "double")
FLOATING_POINTS.register(Double, "float64")


def floating_point(precision: Union[str, type, np.dtype]) -> Type[FloatingPoint]:
    r"""
    Resolve `precision` to a [`FloatingPoint`][xutils.numbers.floating_point.FloatingPoint] subclass.

    Args:
        precision: `"half"`, `"single"`, `"double"`, a numpy float type or dtype, or a `FloatingPoint` subclass.

    Raises:
        ArgumentOutOfRangeError: If `precision` names no supported format.
    """

    if isinstance(precision, type) and issubclass(precision, FloatingPoint):
        return precision
    if isinstance(precision, str):
        return FLOATING_POINTS.lookup(precision)
    try:
        name = np.dtype(precision).name
    except TypeError:
        raise InvalidArgumentError(f"precision={precision!r} does not name a floating-point format.") from None
    return FLOATING_POINTS.lookup(name)


def infer_floating_point(x: Any) -> Type[FloatingPoint]:
    r"""
    Format of `x`: its own for numpy floats, double otherwise.
    """

    if isinstance(x, np.floating):
        return floating_point(x.dtype)
    return Double


def disassemble(x: Any, precision: Optional[Union[str, type]] = None) -> Tuple[int, int, int]:
    r"""
    Split `x` into `(sign, biased exponent, fraction)`.

    Args:
        x: Value to split.
        precision: Format to use. Defaults to the format of `x`.

    Examples:
        >>> disassemble(-2.0)
        (1, 1024, 0)
        >>> disassemble(1.0, "half")
        (0, 15, 0)
    """

    fmt = infer_floating_point(x) if precision is None else floating_point(precision)
    return fmt.disassemble(x)


def assemble(sign: Any, exponent: Any, fraction: Any, precision: Union[str, type] = "double") -> np.floating:
    return floating_point(precision).assemble(sign, exponent, fraction)


def get_exponent_bits(x: Any, precision: Optional[Union[str, type]] = None) -> int:
    fmt = infer_floating_point(x) if precision is None else floating_point(precision)
    return fmt.get_exponent_bits(x)


def get_exponent(x: Any, precision: Optional[Union[str, type]] = None) -> int:
    fmt = infer_floating_point(x) if precision is None else floating_point(precision)
    return fmt.get_exponent(x)


def fuzzy_equals(a: FloatLike, b: FloatLike, tolerance: float = 1e-9) -> bool:
    r"""
    Whether `a` and `b` differ by at most `tolerance`.

    Two NaNs compare equal, as do two infinities of the same sign.
    """

    if tolerance < 0:
        raise ArgumentOutOfRangeError(f"tolerance={tolerance} should not be negative.")
    if isnan(a) or isnan(b):
        return isnan(a) and isnan(b)
    if a == b:
        return True
    return abs(a - b) <= tolerance


def is_positive_integer(x: FloatLike) -> bool:
    return isfinite(x) and x > 0 and float(x).is_integer()


def is_negative_integer(x: FloatLike) -> bool:
    return isfinite(x) and x < 0 and float(x).is_integer()


def fuzzy_is_integer(x: FloatLike, tolerance: float = 1e-9) -> bool:
    r"""
    Whether `x` is within `tolerance` of the nearest integer.

    Examples:
        >>> fuzzy_is_integer(0.1 + 0.2 + 0.7)
        True
        >>> fuzzy_is_integer(2.5)
        False
    """

    if not isfinite(x):
        return False
    return fuzzy_equals(x, round(x), tolerance)


def fuzzy_is_positive_integer(x: FloatLike, tolerance: float = 1e-9) -> bool:
    return x > 0 and fuzzy_is_integer(x, tolerance)


def fuzzy_is_negative_integer(x: FloatLike, tolerance: float = 1e-9) -> bool:
    return x < 0 and fuzzy_is_integer(x, tolerance)


def round_sig_figs(x: FloatLike, sig_figs: int) -> float:
    r"""
    Round `x` to `sig_figs` significant figures.

    Examples:
        >>> round_sig_figs(123456.0, 2)
        120000.0
        >>> round_sig_figs(0.0012345, 3)
        0.00123
    """

    sig_figs = as_integer(sig_figs)
    if sig_figs < 1:
        raise ArgumentOutOfRangeError(f"sig_figs={sig_figs} should be at least 1.")
    if x == 0 or not isfinite(x):
        return x
    return round(x, sig_figs - 1 - floor(log10(abs(x))))


def is_perfect_square(x: float) -> bool:
    if not isfinite(x) or x < 0:
        return False
    return float(sqrt(x)).is_integer()
