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

from datetime import date, datetime, timedelta, timezone

import pytest

from xutils.chrono.julian import JULIAN_PERIOD_OFFSET, from_julian_day, from_total_days, to_julian_day, total_days


class TestJulianDay:
    @pytest.mark.parametrize(
        "value, julian_day",
        [
            (date(1, 1, 1), 1721425.5),
            (date(2022, 6, 8), 2459738.5),
            (date(5000, 7, 2), 3547454.5),
            (date(9999, 12, 31), 5373483.5),
        ],
    )
    def test_dates(self, value, julian_day):
        assert to_julian_day(value) == julian_day
        assert from_julian_day(julian_day) == datetime(value.year, value.month, value.day)

    def test_datetime(self):
        assert to_julian_day(datetime(2000, 1, 1, 12)) == 2451545.0
        assert from_julian_day(2451545.0) == datetime(2000, 1, 1, 12)

    def test_aware_datetime(self):
        value = datetime(2000, 1, 1, 14, tzinfo=timezone(timedelta(hours=2)))
        assert to_julian_day(value) == 2451545.0

    def test_total_days(self):
        assert total_days(date(1, 1, 1)) == 0
        assert total_days(datetime(1, 1, 1, 18)) == 0.75
        assert from_total_days(0.75) == datetime(1, 1, 1, 18)
        assert JULIAN_PERIOD_OFFSET == 1721425.5
