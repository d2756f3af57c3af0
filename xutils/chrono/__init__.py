# XUtils
# Copyright (C) 2022-Present  XUtils

# This file is part of XUtils.

# XUtils is free software: you can redistribute it and/or modify
# it under the terms of the following licenses:
# - The Unlicense
# - GNU Affero General Public License v3.0 or later
# - GNU General Public License v2.0 or later
# - BSD 4-Clause "Original" or "Old" License
# - MIT License
# - Apache License 2.0

# XUtils is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the LICENSE file for more details.

from .gregorian import (
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
from .julian import JULIAN_PERIOD_OFFSET, from_julian_day, from_total_days, to_julian_day, total_days
from .units import TimeUnit, convert

__all__ = [
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "day_of_year",
    "date_from_day_of_year",
    "easter",
    "christmas",
    "nth_weekday_in_month",
    "thanksgiving",
    "JULIAN_PERIOD_OFFSET",
    "total_days",
    "from_total_days",
    "to_julian_day",
    "from_julian_day",
    "TimeUnit",
    "convert",
]
