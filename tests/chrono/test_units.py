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

import pytest

from xutils.chrono.units import TICKS_PER_SECOND, TimeUnit, convert
from xutils.exceptions import ArgumentOutOfRangeError


class TestTimeUnit:
    def test_ticks(self):
        assert TimeUnit.SECOND.value == TICKS_PER_SECOND == 10**7
        assert TimeUnit.DAY.value == 864 * 10**9

    def test_convert(self):
        assert convert(90, "minute", "hour") == 1.5
        assert convert(2, TimeUnit.WEEK, TimeUnit.DAY) == 14
        assert convert(1, "second") == 10**7
        assert convert(1, "year", "day") == pytest.approx(365.2425)
        assert convert(1, "month", "day") == pytest.approx(365.2425 / 12)
        assert convert(1, "millennium", "century") == pytest.approx(10)
        assert convert(1500, "nanosecond", "microsecond") == pytest.approx(1.5)

    def test_unknown(self):
        with pytest.raises(ArgumentOutOfRangeError):
            convert(1, "fortnight")
        with pytest.raises(ArgumentOutOfRangeError):
            convert(1, None)
