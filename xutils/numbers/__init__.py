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

from . import fixed_point, floating_point
from .angles import (
    degrees_to_dms,
    degrees_to_radians,
    dms_to_degrees,
    normalize_degrees,
    normalize_radians,
    radians_to_degrees,
)
from .basex import (
    DIGITS,
    MAX_BASE,
    MIN_BASE,
    BaseX,
    from_base,
    from_bin,
    from_hex,
    from_oct,
    from_quat,
    from_tetra,
    from_tria,
    to_base,
    to_bin,
    to_hex,
    to_oct,
    to_quat,
    to_tetra,
    to_tria,
)
from .factors import factorial, gcd, lcm
from .floating_point import FLOATING_POINTS, Double, FloatingPoint, Half, Single
from .integers import INTEGER_TYPES, IntegerType, as_integer, integer_type, to_unsigned
from .random import (
    dice_roll,
    die_roll,
    random_decimal,
    random_double,
    random_float,
    random_half,
    random_integer,
    random_single,
)
from .sexagesimal import SexagesimalNotation, decompose, format_sexagesimal, neugebauer
from .superscript import to_subscript, to_superscript

__all__ = [
    "fixed_point",
    "floating_point",
    "DIGITS",
    "MIN_BASE",
    "MAX_BASE",
    "BaseX",
    "to_base",
    "from_base",
    "to_bin",
    "from_bin",
    "to_quat",
    "from_quat",
    "to_oct",
    "from_oct",
    "to_hex",
    "from_hex",
    "to_tria",
    "from_tria",
    "to_tetra",
    "from_tetra",
    "IntegerType",
    "INTEGER_TYPES",
    "as_integer",
    "integer_type",
    "to_unsigned",
    "gcd",
    "lcm",
    "factorial",
    "FloatingPoint",
    "Half",
    "Single",
    "Double",
    "FLOATING_POINTS",
    "random_integer",
    "random_float",
    "random_half",
    "random_single",
    "random_double",
    "random_decimal",
    "die_roll",
    "dice_roll",
    "SexagesimalNotation",
    "decompose",
    "format_sexagesimal",
    "neugebauer",
    "normalize_degrees",
    "normalize_radians",
    "degrees_to_radians",
    "radians_to_degrees",
    "dms_to_degrees",
    "degrees_to_dms",
    "to_superscript",
    "to_subscript",
]
