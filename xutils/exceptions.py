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

from typing import Any, Optional


class ArgumentOutOfRangeError(ValueError):
    r"""
    Raised when an argument has the right type but lies outside the accepted range.

    Examples:
        A radix of 65, a negative factorial, or the logarithm of 0.
    """


class ArgumentFormatError(ValueError):
    r"""
    Raised when a string argument does not follow the expected format.
    """


class EmptyArgumentError(ValueError):
    r"""
    Raised when a required string argument is empty or consists only of whitespace.
    """


class InvalidArgumentError(TypeError):
    r"""
    Raised when an argument cannot be interpreted as the required type.
    """


class IntegerOverflowError(OverflowError):
    r"""
    Raised when an integer does not fit in the requested integer type.

    Args:
        value: The offending value.
        dtype: Name of the integer type the value was meant to fit in.
        message: Optional message, a default one is built from `value` and `dtype`.
    """

    def __init__(self, value: Any, dtype: str, message: Optional[str] = None) -> None:
        self.value = value
        self.dtype = dtype
        if message is None:
            message = f"{value} is outside the range of {dtype}."
        super().__init__(message)
