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

from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from xutils.config import defaults
from xutils.exceptions import ArgumentOutOfRangeError

from .fixed_point import CONTEXT, WORKING_CONTEXT, to_decimal
from .integers import as_integer

BASE = 60

_PRIMES = {-3: "‴", -2: "″", -1: "′", 0: "°", 1: "‵", 2: "‶", 3: "‷"}


class SexagesimalNotation(str, Enum):
    r"""
    Ways of writing a sexagesimal value.

    Examples:
        | Notation     | 12.5824       |
        |--------------|---------------|
        | `ANGLE`      | `12°34′56.64″`|
        | `COLONS`     | `12:34:56.64` |
        | `TIME_UNITS` | `12h 34m 56.64s` |
        | `NEUGEBAUER` | `12;34,56.64` |
        | `PRIMES`     | `12°34′56″`   |
    """

    ANGLE = "angle"
    COLONS = "colons"
    TIME_UNITS = "time_units"
    NEUGEBAUER = "neugebauer"
    PRIMES = "primes"


def position_to_primes(position: int) -> str:
    r"""
    Mark of a sexagesimal place, `°` for units, `′` `″` `‴` for fractions and `‵` `‶` `‷` for multiples.

    Places beyond the third repeat the third mark.

    Examples:
        >>> position_to_primes(-2)
        '″'
        >>> position_to_primes(-5)
        '‴″'
    """

    position = as_integer(position)
    if position in _PRIMES:
        return _PRIMES[position]
    direction = 1 if position > 0 else -1
    groups, remainder = divmod(abs(position), 3)
    marks = _PRIMES[3 * direction] * groups
    if remainder:
        marks += _PRIMES[remainder * direction]
    return marks


def decompose(n: Any) -> Tuple[int, int, Decimal]:
    r"""
    Split `n` into whole units, minutes and seconds.

    All three parts share the sign of `n`.

    Examples:
        >>> decompose(Decimal("29.53"))
        (29, 31, Decimal('48.00'))
    """

    n = to_decimal(n)
    with localcontext(WORKING_CONTEXT):
        units = int(n)
        fraction = n - units
        minutes = int(fraction * BASE)
        seconds = fraction * BASE * BASE - minutes * BASE
    return units, minutes, seconds


def _round_seconds(units: int, minutes: int, seconds: Decimal, precision: int) -> Tuple[int, int, Decimal]:
    seconds = seconds.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_EVEN, context=CONTEXT)
    if seconds >= BASE:
        seconds -= BASE
        minutes += 1
    if minutes >= BASE:
        minutes -= BASE
        units += 1
    return units, minutes, seconds


def format_sexagesimal(
    n: Any, notation: Optional[Union[SexagesimalNotation, str]] = None, precision: Optional[int] = None
) -> str:
    r"""
    Write `n` in sexagesimal notation.

    Args:
        n: Value to write.
        notation: One of [`SexagesimalNotation`][xutils.numbers.sexagesimal.SexagesimalNotation].
            Defaults to `defaults.sexagesimal_notation`.
        precision: Decimal places of the seconds, which are rounded and carried into minutes and units.
            For `PRIMES` it is the number of sexagesimal places, 2 by default.

    Examples:
        >>> format_sexagesimal(Decimal("12.5824"), "angle")
        '12°34′56.6400″'
        >>> format_sexagesimal(Decimal("-1.5"), "colons", 0)
        '-1:30:00'
        >>> format_sexagesimal(Decimal("12.5824"), "time_units", 1)
        '12h 34m 56.6s'
    """

    if notation is None:
        notation = defaults.sexagesimal_notation
    try:
        notation = SexagesimalNotation(notation)
    except ValueError:
        raise ArgumentOutOfRangeError(f"Unknown sexagesimal notation {notation!r}.") from None
    if precision is not None:
        precision = as_integer(precision)
        if precision < 0:
            raise ArgumentOutOfRangeError(f"precision={precision} should not be negative.")

    n = to_decimal(n)
    if n < 0:
        return "-" + format_sexagesimal(-n, notation, precision)

    if notation is SexagesimalNotation.PRIMES:
        return _format_primes(n, 2 if precision is None else precision)

    units, minutes, seconds = decompose(n)
    if precision is not None:
        units, minutes, seconds = _round_seconds(units, minutes, seconds, precision)

    if notation is SexagesimalNotation.ANGLE:
        return f"{units}°{minutes}′{seconds:f}″"
    if notation is SexagesimalNotation.COLONS:
        seconds_text = f"{seconds:f}"
        if seconds < 10:
            seconds_text = "0" + seconds_text
        return f"{units}:{minutes:02d}:{seconds_text}"
    if notation is SexagesimalNotation.TIME_UNITS:
        return f"{units}h {minutes}m {seconds:f}s"
    return f"{units};{minutes},{seconds:f}"


def _format_primes(n: Decimal, places: int) -> str:
    integer_digits, fraction_digits = to_digits(n, places)
    marks = []
    for position, digit in zip(range(len(integer_digits) - 1, -1, -1), integer_digits):
        marks.append(f"{digit}{position_to_primes(position)}")
    for position, digit in enumerate(fraction_digits, 1):
        marks.append(f"{digit}{position_to_primes(-position)}")
    return "".join(marks)


def to_digits(n: Any, places: int) -> Tuple[List[int], List[int]]:
    r"""
    Sexagesimal digits of `|n|`, most significant first.

    The fraction is rounded to `places` digits, with carries into earlier places.

    Returns:
        The digits of the whole part, and the `places` digits of the fraction.

    Examples:
        >>> to_digits(Decimal("3661.5"), 1)
        ([1, 1, 1], [30])
    """

    places = as_integer(places)
    if places < 0:
        raise ArgumentOutOfRangeError(f"places={places} should not be negative.")
    n = abs(to_decimal(n))
    with localcontext(WORKING_CONTEXT):
        whole = int(n)
        scaled = int(((n - whole) * BASE**places).to_integral_value(rounding=ROUND_HALF_EVEN))
    if scaled == BASE**places:
        whole, scaled = whole + 1, 0

    fraction_digits = []
    for _ in range(places):
        scaled, digit = divmod(scaled, BASE)
        fraction_digits.append(digit)
    fraction_digits.reverse()

    integer_digits = []
    while whole:
        whole, digit = divmod(whole, BASE)
        integer_digits.append(digit)
    integer_digits.reverse()
    return integer_digits or [0], fraction_digits


def neugebauer(n: Any, places: int = 2) -> str:
    r"""
    Write `n` in full Neugebauer notation: sexagesimal places separated by commas,
    with a semicolon between the whole part and the fraction.

    Examples:
        >>> neugebauer(Decimal("1.5"), 1)
        '1;30'
        >>> neugebauer(Decimal("3661"), 0)
        '1,1,1'
    """

    integer_digits, fraction_digits = to_digits(n, places)
    text = ",".join(map(str, integer_digits))
    if fraction_digits:
        text += ";" + ",".join(map(str, fraction_digits))
    if to_decimal(n) < 0:
        text = "-" + text
    return text
