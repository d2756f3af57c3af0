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

from calendar import FRIDAY, MONDAY, THURSDAY, WEDNESDAY
from datetime import date, timedelta
from typing import Dict, Optional, Tuple

from xutils.exceptions import ArgumentOutOfRangeError
from xutils.numbers.integers import as_integer

MIN_YEAR = 1
MAX_YEAR = 9999
MONTHS_PER_YEAR = 12
DAYS_PER_WEEK = 7
DAYS_PER_COMMON_YEAR = 365
DAYS_PER_LEAP_YEAR = 366
YEARS_PER_SOLAR_CYCLE = 400
DAYS_PER_SOLAR_CYCLE = 146097
DAYS_PER_YEAR = DAYS_PER_SOLAR_CYCLE / YEARS_PER_SOLAR_CYCLE
DAYS_PER_MONTH = DAYS_PER_YEAR / MONTHS_PER_YEAR
WEEKS_PER_YEAR = DAYS_PER_YEAR / DAYS_PER_WEEK

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# country code -> (month, n, weekday), or (month, day, None) for a fixed date
THANKSGIVING: Dict[str, Tuple[int, int, Optional[int]]] = {
    "US": (11, 4, THURSDAY),
    "NL": (11, 4, THURSDAY),
    "PH": (11, 4, THURSDAY),
    "BR": (11, 4, THURSDAY),
    "CA": (10, 2, MONDAY),
    "NF": (11, -1, WEDNESDAY),
    "GD": (10, 25, None),
    "LR": (11, 1, THURSDAY),
    "RW": (8, 1, FRIDAY),
    "LC": (10, 1, MONDAY),
}


def _check_year(year: int) -> int:
    year = as_integer(year)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ArgumentOutOfRangeError(f"year={year} should be in the range [{MIN_YEAR}, {MAX_YEAR}].")
    return year


def _check_month(month: int) -> int:
    month = as_integer(month)
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ArgumentOutOfRangeError(f"month={month} should be in the range [1, {MONTHS_PER_YEAR}].")
    return month


def is_leap_year(year: int) -> bool:
    r"""
    Whether `year` is a leap year of the proleptic Gregorian calendar.

    Years before 1 are counted astronomically, so year 0 is 1 BC and a leap year.

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(-4)
        (True, False, True)
    """

    year = as_integer(year)
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_year(year: int) -> int:
    return DAYS_PER_LEAP_YEAR if is_leap_year(year) else DAYS_PER_COMMON_YEAR


def days_in_month(year: int, month: int) -> int:
    month = _check_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def day_of_year(value: date) -> int:
    r"""
    Position of `value` in its year, starting from 1.
    """

    return value.timetuple().tm_yday


def date_from_day_of_year(year: int, day: int) -> date:
    r"""
    Date of the `day`-th day of `year`.

    Raises:
        ArgumentOutOfRangeError: If `year` is not in [1, 9999] or `day` is not in the year.

    Examples:
        >>> date_from_day_of_year(2024, 60)
        datetime.date(2024, 2, 29)
    """

    year, day = _check_year(year), as_integer(day)
    if not 1 <= day <= days_in_year(year):
        raise ArgumentOutOfRangeError(f"day={day} should be in the range [1, {days_in_year(year)}] for {year}.")
    return date(year, 1, 1) + timedelta(days=day - 1)


def easter(year: int) -> date:
    r"""
    Date of Easter Sunday in the Gregorian calendar.

    Examples:
        >>> easter(2000)
        datetime.date(2000, 4, 23)
    """

    year = _check_year(year)
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    g = (8 * b + 13) // 25
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 19 * l) // 433
    q = h + l - 7 * m
    month = (q + 90) // 25
    day = (q + 33 * month + 19) % 32
    return date(year, month, day)


def christmas(year: int) -> date:
    return date(_check_year(year), 12, 25)


def nth_weekday_in_month(year: int, month: int, n: int, weekday: int) -> date:
    r"""
    Date of the `n`-th `weekday` of a month.

    Args:
        year: Year.
        month: Month, from 1 to 12.
        n: 1 to 5 counts from the start of the month, -1 to -5 from its end.
        weekday: Day of the week, 0 for Monday through 6 for Sunday, as in `date.weekday()`.

    Raises:
        ArgumentOutOfRangeError: If an argument is out of range or the month has no such day.

    Examples:
        >>> nth_weekday_in_month(2023, 11, 4, THURSDAY)
        datetime.date(2023, 11, 23)
        >>> nth_weekday_in_month(2023, 11, -1, WEDNESDAY)
        datetime.date(2023, 11, 29)
    """

    year, month, n, weekday = _check_year(year), _check_month(month), as_integer(n), as_integer(weekday)
    if not 1 <= abs(n) <= 5:
        raise ArgumentOutOfRangeError(f"n={n} should be in the range [1, 5] or [-5, -1].")
    if not 0 <= weekday < DAYS_PER_WEEK:
        raise ArgumentOutOfRangeError(f"weekday={weekday} should be in the range [0, 6].")
    last = days_in_month(year, month)
    if n > 0:
        offset = (weekday - date(year, month, 1).weekday()) % DAYS_PER_WEEK
        day = 1 + offset + (n - 1) * DAYS_PER_WEEK
    else:
        offset = (date(year, month, last).weekday() - weekday) % DAYS_PER_WEEK
        day = last - offset + (n + 1) * DAYS_PER_WEEK
    if not 1 <= day <= last:
        raise ArgumentOutOfRangeError(f"{year}-{month:02d} has no weekday {weekday} number {n}.")
    return date(year, month, day)


def thanksgiving(year: int, country: str = "US") -> date:
    r"""
    Date of Thanksgiving Day in `country`, given as an ISO 3166 alpha-2 code.

    Examples:
        >>> thanksgiving(2023)
        datetime.date(2023, 11, 23)
        >>> thanksgiving(2023, "CA")
        datetime.date(2023, 10, 9)
    """

    try:
        month, n, weekday = THANKSGIVING[country.upper()]
    except KeyError:
        raise ArgumentOutOfRangeError(
            f"Thanksgiving of {country!r} is unknown, expected one of {', '.join(THANKSGIVING)}."
        ) from None
    if weekday is None:
        return date(_check_year(year), month, n)
    return nth_weekday_in_month(year, month, n, weekday)
