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

import math
from decimal import Decimal
from random import Random

import numpy as np
import pytest

from xutils.exceptions import ArgumentOutOfRangeError
from xutils.numbers import fixed_point
from xutils.numbers.floating_point import Double, Half, Single
from xutils.numbers.integers import integer_type
from xutils.numbers.random import (
    dice_roll,
    die_roll,
    random_decimal,
    random_double,
    random_float,
    random_half,
    random_integer,
    random_single,
)


class TestRandomInteger:
    @pytest.mark.parametrize("dtype", ["int8", "uint8", "int16", "uint32", "int64", "uint128"])
    def test_in_range(self, rng, dtype):
        bounds = integer_type(dtype)
        for _ in range(200):
            assert bounds.contains(random_integer(dtype, rng))

    def test_covers_sign(self, rng):
        values = [random_integer("int32", rng) for _ in range(200)]
        assert min(values) < 0 < max(values)

    def test_unbounded(self, rng):
        with pytest.raises(ArgumentOutOfRangeError):
            random_integer("bigint", rng)


class TestRandomFloat:
    @pytest.mark.parametrize(
        "sample, fmt",
        [(random_half, Half), (random_single, Single), (random_double, Double)],
    )
    def test_finite(self, rng, sample, fmt):
        for _ in range(500):
            value = sample(rng)
            assert isinstance(value, fmt.dtype)
            assert math.isfinite(value)
            assert fmt.to_bits(value) != fmt.sign_mask

    def test_spread(self, rng):
        values = [random_double(rng) for _ in range(200)]
        assert any(v < 0 for v in values)
        assert any(v > 0 for v in values)
        assert len({Double.get_exponent_bits(v) for v in values}) > 50

    def test_precision_names(self, rng):
        assert isinstance(random_float("float32", rng), np.float32)
        assert isinstance(random_float(np.float16, rng), np.float16)

    def test_reproducible(self):
        assert random_double(Random(7)) == random_double(Random(7))


class TestRandomDecimal:
    def test_fields(self, rng):
        signs = set()
        for _ in range(200):
            value = random_decimal(rng)
            assert isinstance(value, Decimal)
            sign, scale, mantissa = fixed_point.disassemble(value)
            assert 0 <= scale <= fixed_point.MAX_SCALE
            assert mantissa <= fixed_point.MAX_MANTISSA
            assert fixed_point.MIN_VALUE <= value <= fixed_point.MAX_VALUE
            signs.add(value.is_signed())
        assert signs == {False, True}


class TestDice:
    def test_die_roll(self, rng):
        rolls = {die_roll(6, rng) for _ in range(500)}
        assert rolls == {1, 2, 3, 4, 5, 6}
        assert die_roll(1, rng) == 1

    def test_dice_roll(self, rng):
        for _ in range(200):
            assert 3 <= dice_roll(3, 6, rng) <= 18
        assert dice_roll(0, 6, rng) == 0
        assert dice_roll(4, 1, rng) == 4

    def test_invalid(self, rng):
        with pytest.raises(ArgumentOutOfRangeError):
            die_roll(0, rng)
        with pytest.raises(ArgumentOutOfRangeError):
            dice_roll(-1, 6, rng)
        with pytest.raises(ArgumentOutOfRangeError):
            dice_roll(0, 0, rng)
