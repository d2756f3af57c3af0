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

from calendar import FRIDAY, MONDAY, SUNDAY, THURSDAY
from datetime import date

import pytest

from xutils.chrono.gregorian import (
    DAYS_PER_SOLAR_CYCLE,
    DAYS_PER_YEAR,
    christmas,
    date_from_day_of_year,
    day_of_year,
    days_in_month,
    days_in_year,
    easter,
    is_leap_year,
    nth_weekday_in_month,
    thanksgiving,
)
from xutils.exceptions import ArgumentOutOfRangeError


class TestYears:
    @pytest.mark.parametrize(
        "year, leap", [(2000, True), (1900, False), (2024, True), (2023, False), (0, True), (-4, True), (-100, False)]
    )
    def test_is_leap_year(self, year, leap):
        assert is_leap_year(year) is leap

    def test_solar_cycle(self):
        assert sum(days_in_year(year) for year in range(1, 401)) == DAYS_PER_SOLAR_CYCLE
        assert DAYS_PER_YEAR == 365.2425

    def test_days_in_month(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31
        with pytest.raises(ArgumentOutOfRangeError):
            days_in_month(2023, 13)


class TestDayOfYear:
    def test_day_of_year(self):
        assert day_of_year(date(2023, 1, 1)) == 1
        assert day_of_year(date(2024, 12, 31)) == 366
        assert day_of_year(date(2023, 3, 1)) == 60

    def test_from_day_of_year(self):
        assert date_from_day_of_year(2024, 60) == date(2024, 2, 29)
        assert date_from_day_of_year(2023, 60) == date(2023, 3, 1)
        assert date_from_day_of_year(2023, 365) == date(2023, 12, 31)
        for day in range(1, 367):
            assert day_of_year(date_from_day_of_year(2024, day)) == day

    @pytest.mark.parametrize("year, day", [(2023, 0), (2023, 366), (0, 1), (10000, 1)])
    def test_from_day_of_year_out_of_range(self, year, day):
        with pytest.raises(ArgumentOutOfRangeError):
            date_from_day_of_year(year, day)


class TestSpecialDays:
    @pytest.mark.parametrize(
        "expected",
        [
            date(1818, 3, 22),
            date(1886, 4, 25),
            date(1943, 4, 25),
            date(1954, 4, 18),
            date(1991, 3, 31),
            date(1992, 4, 19),
            date(1993, 4, 11),
            date(2000, 4, 23),
            date(2038, 4, 25),
            date(2285, 3, 22),
        ],
    )
    def test_easter(self, expected):
        assert easter(expected.year) == expected
        assert easter(expected.year).weekday() == SUNDAY

    def test_christmas(self):
        assert christmas(2023) == date(2023, 12, 25)

    def test_nth_weekday(self):
        assert nth_weekday_in_month(2023, 11, 1, THURSDAY) == date(2023, 11, 2)
        assert nth_weekday_in_month(2023, 11, 4, THURSDAY) == date(2023, 11, 23)
        assert nth_weekday_in_month(2023, 11, 5, THURSDAY) == date(2023, 11, 30)
        assert nth_weekday_in_month(2023, 11, -1, THURSDAY) == date(2023, 11, 30)
        assert nth_weekday_in_month(2023, 11, -5, THURSDAY) == date(2023, 11, 2)
        assert nth_weekday_in_month(2023, 5, -1, MONDAY) == date(2023, 5, 29)

    def test_nth_weekday_missing(self):
        with pytest.raises(ArgumentOutOfRangeError):
            nth_weekday_in_month(2023, 11, 5, FRIDAY)
        with pytest.raises(ArgumentOutOfRangeError):
            nth_weekday_in_month(2023, 11, 0, FRIDAY)
        with pytest.raises(ArgumentOutOfRangeError):
            nth_weekday_in_month(2023, 11, 6, FRIDAY)
        with pytest.raises(ArgumentOutOfRangeError):
            nth_weekday_in_month(2023, 11, 1, 7)

    @pytest.mark.parametrize(
        "country, expected",
        [
            ("US", date(2023, 11, 23)),
            ("br", date(2023, 11, 23)),
            ("CA", date(2023, 10, 9)),
            ("NF", date(2023, 11, 29)),
            ("GD", date(2023, 10, 25)),
            ("LR", date(2023, 11, 2)),
            ("RW", date(2023, 8, 4)),
            ("LC", date(2023, 10, 2)),
        ],
    )
    def test_thanksgiving(self, country, expected):
        assert thanksgiving(2023, country) == expected

    def test_thanksgiving_unknown(self):
        with pytest.raises(ArgumentOutOfRangeError):
            thanksgiving(2023, "FR")
