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

from .iterables import diff, is_empty
from .mappings import flip, has_unique_values, to_index

__all__ = [
    "is_empty",
    "diff",
    "has_unique_values",
    "flip",
    "to_index",
]
