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

from . import chrono, collections, numbers, strings, utils
from .config import Config, defaults
from .exceptions import (
    ArgumentFormatError,
    ArgumentOutOfRangeError,
    EmptyArgumentError,
    IntegerOverflowError,
    InvalidArgumentError,
)
from .numbers import from_base, to_base
from .registry import Registry
from .utils import configure_logging, memoize

__all__ = [
    "chrono",
    "collections",
    "numbers",
    "strings",
    "utils",
    "Config",
    "defaults",
    "Registry",
    "ArgumentOutOfRangeError",
    "ArgumentFormatError",
    "EmptyArgumentError",
    "InvalidArgumentError",
    "IntegerOverflowError",
    "to_base",
    "from_base",
    "configure_logging",
    "memoize",
]
