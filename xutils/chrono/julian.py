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

from datetime import datetime, time, timedelta, timezone

from xutils.typing import DateLike

# Julian day of 0001-01-01T00:00 in the proleptic Gregorian calendar
JULIAN_PERIOD_OFFSET = 1721425.5

_EPOCH = datetime(1, 1, 1)
_DAY = timedelta(days=1)


def total_days(value: DateLike) -> float:
    r"""
    Days elapsed since 0001-01-01T00:00, including the fraction of the current day.

    Aware datetimes are converted to UTC first.

    Examples:
        >>> total_days(date(1, 1, 2))
        1
        >>> total_days(datetime(1, 1, 1, 18))
        0.75
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.toordinal() - 1 + (value - datetime.combine(value.date(), time())) / _DAY
    return value.toordinal() - 1


def from_total_days(days: float) -> datetime:
    return _EPOCH + timedelta(days=days)


def to_julian_day(value: DateLike) -> float:
    r"""
    Julian day number of `value`, counting from noon UT on 1 January 4713 BC (Julian calendar).

    Naive datetimes are taken as UT.

    Examples:
        >>> to_julian_day(date(2022, 6, 8))
        2459738.5
        >>> to_julian_day(datetime(2000, 1, 1, 12))
        2451545.0
    """

    return JULIAN_PERIOD_OFFSET + total_days(value)


def from_julian_day(julian_day: float) -> datetime:
    r"""
    Naive UT datetime of a Julian day number.

    Examples:
        >>> from_julian_day(2451545.0)
        datetime.datetime(2000, 1, 1, 12, 0)
    """

    return from_total_days(julian_day - JULIAN_PERIOD_OFFSET)
