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

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

import numpy as np

IntegerLike = Union[int, np.integer]
FloatLike = Union[float, np.floating]
DecimalLike = Union[Decimal, int, float, str]
DateLike = Union[date, datetime]
LetterCase = Optional[str]
