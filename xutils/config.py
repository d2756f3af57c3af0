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

from typing import Optional

import chanfig


class Config(chanfig.Config):
    r"""
    Library-wide defaults.

    Every function that reads a value from here also accepts it as an argument,
    the argument always wins.

    Attributes:
        letter_case: Letter case used when writing digits of base 11 and above.
            One of `"lower"`, `"upper"`, `"canonical"` or `None` (canonical alphabet, which is lower-case except for `L`).
        decimal_precision: Significant digits of results from `xutils.numbers.fixed_point`.
        decimal_guard_digits: Extra digits carried while a fixed-point series is being summed.
        cache_size: Number of entries kept by functions decorated with `memoize`.
        sexagesimal_notation: Notation used by `format_sexagesimal` when none is given.
        log_level: Level used by `configure_logging` when none is given.
    """

    letter_case: Optional[str] = None
    decimal_precision: int = 28
    decimal_guard_digits: int = 12
    cache_size: int = 1024
    sexagesimal_notation: str = "angle"
    log_level: str = "WARNING"


defaults = Config()
