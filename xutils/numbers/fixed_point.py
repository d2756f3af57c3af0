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

import logging
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation, localcontext
from operator import index
from typing import Any, Tuple

import numpy as np

from xutils.config import defaults
from xutils.exceptions import ArgumentFormatError, ArgumentOutOfRangeError, InvalidArgumentError
from xutils.typing import DecimalLike

from .integers import as_integer

logger = logging.getLogger(__name__)

SIGN_BITS = 1
SCALE_BITS = 8
MANTISSA_BITS = 96
MAX_SCALE = 28
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
MAX_VALUE = Decimal(MAX_MANTISSA)
MIN_VALUE = Decimal(-MAX_MANTISSA)
EPSILON = Decimal(1).scaleb(-MAX_SCALE)

CONTEXT = Context(prec=defaults.decimal_precision, rounding=ROUND_HALF_EVEN)
WORKING_CONTEXT = Context(prec=defaults.decimal_precision + defaults.decimal_guard_digits, rounding=ROUND_HALF_EVEN)

E = Decimal("2.7182818284590452353602874714")
LN2 = Decimal("0.6931471805599453094172321215")
LN10 = Decimal("2.3025850929940456840179914547")
_LN10 = Decimal("2.30258509299404568401799145468436420760110148862877297603")


def to_decimal(value: DecimalLike) -> Decimal:
    r"""
    Convert `value` to a `Decimal`.

    Floats go through their shortest decimal representation, so `0.1` becomes `Decimal("0.1")`.

    Raises:
        ArgumentFormatError: If `value` is a string that is not a number.
        InvalidArgumentError: If `value` is of a type that cannot be converted.
    """

    if isinstance(value, Decimal):
        return value
    if isinstance(value, (float, np.floating)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise ArgumentFormatError(f"{value!r} is not a decimal number.") from None
    try:
        return Decimal(index(value))
    except TypeError:
        raise InvalidArgumentError(
            f"{value!r} of type {type(value).__name__} cannot be converted to a decimal."
        ) from None


def disassemble(x: Any) -> Tuple[int, int, int]:
    r"""
    Split `x` into `(sign, scale, mantissa)` so that `x == (-1) ** sign * mantissa / 10 ** scale`.

    Values with a positive exponent are rescaled to scale 0,
    and trailing zeros are dropped from values whose scale exceeds `MAX_SCALE`.

    Raises:
        ArgumentOutOfRangeError: If `x` is not finite or does not fit in 96 mantissa bits and a scale of at most 28.

    Examples:
        >>> disassemble(Decimal("-1.50"))
        (1, 2, 150)
        >>> disassemble(Decimal("1E+3"))
        (0, 0, 1000)
    """

    x = to_decimal(x)
    if not x.is_finite():
        raise ArgumentOutOfRangeError(f"{x} has no fixed-point representation.")
    sign, digits, exponent = x.as_tuple()
    mantissa = int("".join(map(str, digits)))
    if exponent > 0:
        mantissa *= 10**exponent
        exponent = 0
    scale = -exponent
    while scale > MAX_SCALE and mantissa % 10 == 0:
        mantissa //= 10
        scale -= 1
    if scale > MAX_SCALE:
        raise ArgumentOutOfRangeError(f"{x} needs a scale of {scale}, but at most {MAX_SCALE} is supported.")
    if mantissa > MAX_MANTISSA:
        raise ArgumentOutOfRangeError(f"{x} does not fit in a {MANTISSA_BITS}-bit mantissa.")
    return sign, scale, mantissa


def assemble(sign: Any, scale: Any, mantissa: Any) -> Decimal:
    r"""
    Build a decimal from its sign, scale and mantissa fields.

    Raises:
        ArgumentOutOfRangeError: If a field is out of range.
    """

    sign, scale, mantissa = as_integer(sign), as_integer(scale), as_integer(mantissa)
    if sign not in (0, 1):
        raise ArgumentOutOfRangeError(f"sign={sign} should be 0 or 1.")
    if not 0 <= scale <= MAX_SCALE:
        raise ArgumentOutOfRangeError(f"scale={scale} should be in the range [0, {MAX_SCALE}].")
    if not 0 <= mantissa <= MAX_MANTISSA:
        raise ArgumentOutOfRangeError(f"mantissa={mantissa} should be in the range [0, 2**{MANTISSA_BITS} - 1].")
    return Decimal((sign, tuple(int(d) for d in str(mantissa)), -scale))


def get_scale_bits(x: Any) -> int:
    return disassemble(x)[1]


def is_integer(m: Any) -> bool:
    m = to_decimal(m)
    return m.is_finite() and m == m.to_integral_value()


def round_sig_figs(m: Any, sig_figs: int) -> Decimal:
    r"""
    Round `m` to `sig_figs` significant figures, half to even.

    Examples:
        >>> round_sig_figs(Decimal("12345"), 3) == 12300
        True
    """

    m = to_decimal(m)
    sig_figs = as_integer(sig_figs)
    if sig_figs < 1:
        raise ArgumentOutOfRangeError(f"sig_figs={sig_figs} should be at least 1.")
    if m.is_zero() or not m.is_finite():
        return m
    return m.quantize(Decimal(1).scaleb(m.adjusted() - sig_figs + 1), rounding=ROUND_HALF_EVEN)


def log(m: Any, base: Any = None) -> Decimal:
    r"""
    Natural logarithm of `m`, or logarithm to `base` when given.

    The value is brought close to 1 by a power of ten, the Mercator series
    `ln(1 + x) = x - x**2 / 2 + x**3 / 3 - ...` is summed at working precision
    until its terms vanish, and the power of ten is added back as multiples of `ln 10`.

    Args:
        m: Positive value.
        base: Base of the logarithm. `log(1, 0)` is `0` by convention.

    Raises:
        ArgumentOutOfRangeError: If `m` is not positive or `base` is 1.

    Examples:
        >>> log(1)
        Decimal('0')
        >>> log(2) == LN2
        True
    """

    if base is not None:
        return _log_base(m, base)

    m = _check_log_argument(to_decimal(m))
    if m == 1:
        return Decimal(0)
    if m == 2:
        return LN2
    if m == 10:
        return LN10
    if m == E:
        return Decimal(1)

    return CONTEXT.plus(_ln(m))


def _check_log_argument(m: Decimal) -> Decimal:
    if not m.is_finite():
        raise ArgumentOutOfRangeError(f"The logarithm of {m} has no fixed-point representation.")
    if m.is_zero():
        raise ArgumentOutOfRangeError(
            "The logarithm of 0 is undefined, as the fixed-point type cannot represent negative infinity."
        )
    if m < 0:
        raise ArgumentOutOfRangeError(f"The logarithm of a negative value ({m}) is a complex number.")
    return m


def _ln(m: Decimal) -> Decimal:
    # m > 0, result carries the guard digits of WORKING_CONTEXT
    if m == 1:
        return Decimal(0)
    scale = 0 if Decimal("0.5") <= m <= Decimal("1.5") else m.adjusted() + 1
    with localcontext(WORKING_CONTEXT) as ctx:
        epsilon = Decimal(1).scaleb(-ctx.prec)
        x = m.scaleb(-scale) - 1
        power = x
        total = Decimal(0)
        n = 1
        while True:
            term = power / n
            if abs(term) < epsilon:
                break
            total += term if n % 2 else -term
            power *= x
            n += 1
        total += scale * _LN10
    logger.debug("ln(%s) summed %d terms", m, n - 1)
    return total


def _log_base(m: Any, base: Any) -> Decimal:
    m, base = to_decimal(m), to_decimal(base)
    if base == 1:
        raise ArgumentOutOfRangeError("The logarithm to base 1 is undefined.")
    if m == 1 and base.is_zero():
        return Decimal(0)
    m, base = _check_log_argument(m), _check_log_argument(base)
    with localcontext(WORKING_CONTEXT):
        result = _ln(m) / _ln(base)
    return CONTEXT.plus(result)


def log2(m: Any) -> Decimal:
    return _log_base(m, 2)


def log10(m: Any) -> Decimal:
    return _log_base(m, 10)


def exp2(m: Any) -> Decimal:
    return CONTEXT.power(Decimal(2), to_decimal(m))


def exp10(m: Any) -> Decimal:
    return CONTEXT.power(Decimal(10), to_decimal(m))


def sinh(x: Any) -> Decimal:
    x = to_decimal(x)
    with localcontext(WORKING_CONTEXT):
        result = (x.exp() - (-x).exp()) / 2
    return CONTEXT.plus(result)


def cosh(x: Any) -> Decimal:
    x = to_decimal(x)
    with localcontext(WORKING_CONTEXT):
        result = (x.exp() + (-x).exp()) / 2
    return CONTEXT.plus(result)


def tanh(x: Any) -> Decimal:
    x = to_decimal(x)
    with localcontext(WORKING_CONTEXT):
        f = (2 * x).exp()
        result = (f - 1) / (f + 1)
    return CONTEXT.plus(result)


def coth(x: Any) -> Decimal:
    x = to_decimal(x)
    if x.is_zero():
        raise ArgumentOutOfRangeError("coth(0) is undefined.")
    with localcontext(WORKING_CONTEXT):
        f = (2 * x).exp()
        result = (f + 1) / (f - 1)
    return CONTEXT.plus(result)


def sech(x: Any) -> Decimal:
    x = to_decimal(x)
    with localcontext(WORKING_CONTEXT):
        result = 2 / (x.exp() + (-x).exp())
    return CONTEXT.plus(result)


def csch(x: Any) -> Decimal:
    x = to_decimal(x)
    if x.is_zero():
        raise ArgumentOutOfRangeError("csch(0) is undefined.")
    with localcontext(WORKING_CONTEXT):
        result = 2 / (x.exp() - (-x).exp())
    return CONTEXT.plus(result)


def asinh(x: Any) -> Decimal:
    r"""
    Inverse hyperbolic sine, `ln(x + sqrt(x**2 + 1))`.
    """

    x = to_decimal(x)
    if x < 0:
        return -asinh(-x)
    with localcontext(WORKING_CONTEXT):
        argument = x + (x * x + 1).sqrt()
    return CONTEXT.plus(_ln(argument))


def acosh(x: Any) -> Decimal:
    r"""
    Inverse hyperbolic cosine, `ln(x + sqrt(x**2 - 1))`.

    Raises:
        ArgumentOutOfRangeError: If `x` is less than 1.
    """

    x = to_decimal(x)
    if x < 1:
        raise ArgumentOutOfRangeError(f"acosh is only defined for values of at least 1, but got {x}.")
    with localcontext(WORKING_CONTEXT):
        argument = x + (x * x - 1).sqrt()
    return CONTEXT.plus(_ln(argument))


def atanh(x: Any) -> Decimal:
    r"""
    Inverse hyperbolic tangent, `ln((1 + x) / (1 - x)) / 2`.

    Raises:
        ArgumentOutOfRangeError: If `|x|` is not less than 1.
    """

    x = to_decimal(x)
    if abs(x) >= 1:
        raise ArgumentOutOfRangeError(f"atanh is only defined for values in (-1, 1), but got {x}.")
    with localcontext(WORKING_CONTEXT):
        argument = (1 + x) / (1 - x)
    return CONTEXT.divide(_ln(argument), 2)


def acoth(x: Any) -> Decimal:
    x = to_decimal(x)
    if abs(x) <= 1:
        raise ArgumentOutOfRangeError(f"acoth is only defined for values outside [-1, 1], but got {x}.")
    with localcontext(WORKING_CONTEXT):
        argument = (x + 1) / (x - 1)
    return CONTEXT.divide(_ln(argument), 2)


def asech(x: Any) -> Decimal:
    x = to_decimal(x)
    if not 0 < x <= 1:
        raise ArgumentOutOfRangeError(f"asech is only defined for values in (0, 1], but got {x}.")
    with localcontext(WORKING_CONTEXT):
        reciprocal = 1 / x
        argument = reciprocal + (reciprocal * reciprocal - 1).sqrt()
    return CONTEXT.plus(_ln(argument))


def acsch(x: Any) -> Decimal:
    x = to_decimal(x)
    if x.is_zero():
        raise ArgumentOutOfRangeError("acsch(0) is undefined.")
    if x < 0:
        return -acsch(-x)
    with localcontext(WORKING_CONTEXT):
        reciprocal = 1 / x
        argument = reciprocal + (reciprocal * reciprocal + 1).sqrt()
    return CONTEXT.plus(_ln(argument))
