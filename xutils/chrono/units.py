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

from enum import Enum
from typing import Union

from xutils.exceptions import ArgumentOutOfRangeError

from .gregorian import DAYS_PER_MONTH, DAYS_PER_YEAR

TICKS_PER_MICROSECOND = 10
TICKS_PER_MILLISECOND = 10_000
TICKS_PER_SECOND = 10_000_000
TICKS_PER_MINUTE = 60 * TICKS_PER_SECOND
TICKS_PER_HOUR = 60 * TICKS_PER_MINUTE
TICKS_PER_DAY = 24 * TICKS_PER_HOUR


class TimeUnit(Enum):
    r"""
    Units of time, valued in ticks of 100 nanoseconds.

    Months and years are the mean lengths of the Gregorian calendar.
    """

    NANOSECOND = 0.01
    TICK = 1
    MICROSECOND = TICKS_PER_MICROSECOND
    MILLISECOND = TICKS_PER_MILLISECOND
    SECOND = TICKS_PER_SECOND
    MINUTE = TICKS_PER_MINUTE
    HOUR = TICKS_PER_HOUR
    DAY = TICKS_PER_DAY
    WEEK = 7 * TICKS_PER_DAY
    MONTH = DAYS_PER_MONTH * TICKS_PER_DAY
    YEAR = DAYS_PER_YEAR * TICKS_PER_DAY
    DECADE = 10 * DAYS_PER_YEAR * TICKS_PER_DAY
    CENTURY = 100 * DAYS_PER_YEAR * TICKS_PER_DAY
    MILLENNIUM = 1000 * DAYS_PER_YEAR * TICKS_PER_DAY


def time_unit(unit: Union[TimeUnit, str]) -> TimeUnit:
    if isinstance(unit, TimeUnit):
        return unit
    try:
        return TimeUnit[unit.upper()]
    except (AttributeError, KeyError):
        raise ArgumentOutOfRangeError(f"Unknown time unit {unit!r}.") from None


def convert(amount: float, from_unit: Union[TimeUnit, str], to_unit: Union[TimeUnit, str] = TimeUnit.TICK) -> float:
    r"""
    Convert `amount` of `from_unit` into `to_unit`.

    Examples:
        >>> convert(90, "minute", "hour")
        1.5
        >>> convert(2, TimeUnit.WEEK, TimeUnit.DAY)
        14.0
    """

    return amount * time_unit(from_unit).value / time_unit(to_unit).value
