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

from decimal import Decimal
from random import Random
from typing import Any, Optional

import numpy as np

from xutils.exceptions import ArgumentOutOfRangeError

from . import fixed_point
from .floating_point import floating_point
from .integers import as_integer, integer_type

_rng = Random()


def random_integer(dtype: Any = "int32", rng: Optional[Random] = None) -> int:
    r"""
    Random integer spread over the whole range of a fixed-width integer type.

    Args:
        dtype: A bounded integer type, as accepted by `integer_type`.
        rng: Source of randomness. Defaults to a module-level `random.Random`.

    Raises:
        ArgumentOutOfRangeError: If `dtype` is unbounded.

    Examples:
        >>> -128 <= random_integer("int8", Random(0)) <= 127
        True
    """

    if rng is None:
        rng = _rng
    dtype = integer_type(dtype)
    if dtype.bits is None:
        raise ArgumentOutOfRangeError(f"{dtype.name} is unbounded, so it has no uniform random values.")
    return dtype.min_value + rng.getrandbits(dtype.bits)


def random_float(precision: Any = "double", rng: Optional[Random] = None) -> np.floating:
    r"""
    Random finite value drawn from uniformly random bit patterns of a floating-point format.

    Negative zero, infinities and NaNs are never returned,
    so values spread evenly over exponents rather than over the real line.

    Args:
        precision: `"half"`, `"single"`, `"double"` or anything `floating_point` resolves.
        rng: Source of randomness. Defaults to a module-level `random.Random`.
    """

    if rng is None:
        rng = _rng
    fmt = floating_point(precision)
    while True:
        bits = rng.getrandbits(fmt.total_bits)
        if bits == fmt.sign_mask:
            continue
        if (bits & fmt.exponent_mask) == fmt.exponent_mask:
            continue
        return fmt.from_bits(bits)


def random_half(rng: Optional[Random] = None) -> np.float16:
    return random_float("half", rng)


def random_single(rng: Optional[Random] = None) -> np.float32:
    return random_float("single", rng)


def random_double(rng: Optional[Random] = None) -> np.float64:
    return random_float("double", rng)


def random_decimal(rng: Optional[Random] = None) -> Decimal:
    r"""
    Random fixed-point decimal with a 96-bit mantissa, a random sign and a scale of at most 28.

    Examples:
        >>> fixed_point.disassemble(random_decimal(Random(0)))[1] <= fixed_point.MAX_SCALE
        True
    """

    if rng is None:
        rng = _rng
    mantissa = rng.getrandbits(fixed_point.MANTISSA_BITS)
    sign = rng.getrandbits(1)
    scale = rng.randrange(fixed_point.MAX_SCALE + 1)
    return fixed_point.assemble(sign, scale, mantissa)


def die_roll(sides: int, rng: Optional[Random] = None) -> int:
    r"""
    Roll one die with `sides` faces numbered from 1.

    In dice notation, `1d20` is `die_roll(20)`.

    Raises:
        ArgumentOutOfRangeError: If `sides` is less than 1.
    """

    if rng is None:
        rng = _rng
    sides = as_integer(sides)
    if sides < 1:
        raise ArgumentOutOfRangeError(f"sides={sides} should be at least 1.")
    return rng.randint(1, sides)


def dice_roll(num_dice: int, sides: int, rng: Optional[Random] = None) -> int:
    r"""
    Total of `num_dice` dice with `sides` faces each; `3d6` is `dice_roll(3, 6)`.

    Raises:
        ArgumentOutOfRangeError: If `num_dice` is negative or `sides` is less than 1.
    """

    num_dice, sides = as_integer(num_dice), as_integer(sides)
    if sides < 1:
        raise ArgumentOutOfRangeError(f"sides={sides} should be at least 1.")
    if num_dice < 0:
        raise ArgumentOutOfRangeError(f"num_dice={num_dice} should not be negative.")
    return sum(die_roll(sides, rng) for _ in range(num_dice))
