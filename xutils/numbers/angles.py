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

import math
from typing import Tuple

DEGREES_PER_CIRCLE = 360
DEGREES_PER_SEMICIRCLE = 180
DEGREES_PER_QUADRANT = 90
ARCMINUTES_PER_DEGREE = 60
ARCSECONDS_PER_ARCMINUTE = 60
ARCSECONDS_PER_DEGREE = ARCMINUTES_PER_DEGREE * ARCSECONDS_PER_ARCMINUTE
RADIANS_PER_CIRCLE = math.tau
RADIANS_PER_SEMICIRCLE = math.pi
RADIANS_PER_QUADRANT = math.pi / 2
RADIANS_PER_DEGREE = math.tau / DEGREES_PER_CIRCLE
DEGREES_PER_RADIAN = DEGREES_PER_CIRCLE / math.tau


def _normalize(angle: float, circle: float, signed: bool) -> float:
    angle -= math.floor(angle / circle) * circle
    if signed and angle >= circle / 2:
        angle -= circle
    return angle


def normalize_degrees(degrees: float, signed: bool = True) -> float:
    r"""
    Bring an angle in degrees into `[-180, 180)` when `signed`, or `[0, 360)` otherwise.

    Examples:
        >>> normalize_degrees(270)
        -90
        >>> normalize_degrees(-90, signed=False)
        270
    """

    return _normalize(degrees, DEGREES_PER_CIRCLE, signed)


def normalize_radians(radians: float, signed: bool = True) -> float:
    r"""
    Bring an angle in radians into `[-π, π)` when `signed`, or `[0, 2π)` otherwise.
    """

    return _normalize(radians, RADIANS_PER_CIRCLE, signed)


def degrees_to_radians(degrees: float) -> float:
    return degrees * RADIANS_PER_DEGREE


def radians_to_degrees(radians: float) -> float:
    return radians * DEGREES_PER_RADIAN


def dms_to_degrees(degrees: float, minutes: float = 0, seconds: float = 0) -> float:
    r"""
    Combine degrees, arcminutes and arcseconds into degrees.

    Examples:
        >>> dms_to_degrees(12, 30, 36)
        12.51
    """

    return degrees + minutes / ARCMINUTES_PER_DEGREE + seconds / ARCSECONDS_PER_DEGREE


def degrees_to_dms(degrees: float) -> Tuple[float, float, float]:
    r"""
    Split degrees into whole degrees, whole arcminutes and arcseconds, all sharing the sign of `degrees`.
    """

    whole = math.trunc(degrees)
    minutes = (degrees - whole) * ARCMINUTES_PER_DEGREE
    whole_minutes = math.trunc(minutes)
    seconds = (minutes - whole_minutes) * ARCSECONDS_PER_ARCMINUTE
    return whole, whole_minutes, seconds


def sin_deg(degrees: float) -> float:
    return math.sin(degrees_to_radians(degrees))


def cos_deg(degrees: float) -> float:
    return math.cos(degrees_to_radians(degrees))


def tan_deg(degrees: float) -> float:
    return math.tan(degrees_to_radians(degrees))
