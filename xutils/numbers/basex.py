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

import re
from typing import Any, Dict, Optional, Union

import numpy as np

from xutils.config import defaults
from xutils.exceptions import ArgumentFormatError, ArgumentOutOfRangeError, EmptyArgumentError, InvalidArgumentError
from xutils.typing import IntegerLike, LetterCase

from .integers import IntegerType, as_integer, integer_type

MIN_BASE = 2
MAX_BASE = 64

# `L` is upper-case so it cannot be mistaken for `1`.
DIGITS = "0123456789abcdefghijkLmnopqrstuvwxyz!#$%&'()*+-/:;<=>?@[\\]^`{|}~"

LETTER_CASES = ("lower", "upper", "canonical")


class BaseX:
    r"""
    Codec between integers and strings of digits taken from `alphabet`.

    The value of a digit is its position in `alphabet`.
    Letters are read case-insensitively unless the alphabet has both cases of the same letter.
    A leading `-` is a sign, so when `-` is itself a digit and would lead the output,
    the encoder writes a leading zero in front of it.

    Examples:
        >>> hexadecimal = BaseX("0123456789abcdef")
        >>> hexadecimal.encode(255)
        'ff'
        >>> hexadecimal.decode("FF")
        255
        >>> hexadecimal.encode(-255, width=4)
        '-00ff'
    """

    alphabet: str

    def __init__(self, alphabet: Optional[str] = None) -> None:
        if alphabet is not None:
            self.alphabet = alphabet
        self.num_alphabets = len(self.alphabet)
        if self.num_alphabets < MIN_BASE:
            raise ArgumentOutOfRangeError(f"An alphabet needs at least {MIN_BASE} digits, but got {self.alphabet!r}.")
        if len(set(self.alphabet)) != self.num_alphabets:
            raise ArgumentFormatError(f"Digits of an alphabet should be unique, but got {self.alphabet!r}.")
        self.alphabet_dict: Dict[str, int] = {a: i for i, a in enumerate(self.alphabet)}
        for i, a in enumerate(self.alphabet):
            for variant in (a.lower(), a.upper()):
                self.alphabet_dict.setdefault(variant, i)
        separators = "".join(c for c in ".,_ " if c not in self.alphabet_dict)
        self.separators = re.compile(rf"[\s{re.escape(separators)}]")

    def encode(self, value: Any, width: int = 1, letter_case: Optional[str] = None) -> str:
        r"""
        Write `value` as digits of this alphabet.

        Args:
            value: Integer to encode.
            width: Minimum number of digits, the output is left-padded with the zero digit.
            letter_case: `"lower"`, `"upper"`, or `"canonical"` or `None` to keep the alphabet as-is.

        Raises:
            InvalidArgumentError: If `value` is not integer-like.
            ArgumentOutOfRangeError: If `width` is less than 1 or `letter_case` is unknown.
        """

        value = as_integer(value)
        width = as_integer(width)
        if width < 1:
            raise ArgumentOutOfRangeError(f"width={width} should be at least 1.")
        if letter_case is not None and letter_case not in LETTER_CASES:
            raise ArgumentOutOfRangeError(f"letter_case={letter_case!r} should be one of {LETTER_CASES} or None.")
        if value < 0:
            return "-" + self.encode(-value, width, letter_case)

        digits = []
        while value != 0:
            value, digit = divmod(value, self.num_alphabets)
            digits.append(self.alphabet[digit])
        encoded = "".join(reversed(digits)) or self.alphabet[0]
        if encoded[0] == "-":
            encoded = self.alphabet[0] + encoded
        encoded = encoded.rjust(width, self.alphabet[0])

        if letter_case == "lower":
            return encoded.lower()
        if letter_case == "upper":
            return encoded.upper()
        return encoded

    def decode(self, string: str) -> int:
        r"""
        Read an integer written in this alphabet.

        Whitespace and the separators `.`, `,`, `_` and thin space are ignored,
        unless they are digits of the alphabet.

        Raises:
            InvalidArgumentError: If `string` is not a `str`.
            EmptyArgumentError: If `string` is empty or whitespace.
            ArgumentFormatError: If `string` holds anything but digits of this alphabet.
        """

        if not isinstance(string, str):
            raise InvalidArgumentError(f"string={string!r} should be a str, but got {type(string)}.")
        if not string or string.isspace():
            raise EmptyArgumentError("Cannot decode an empty string.")
        string = self.separators.sub("", string)
        sign = 1
        if string.startswith("-"):
            sign, string = -1, string[1:]
        if not string:
            raise ArgumentFormatError("A number needs at least one digit after its sign.")

        decoded = 0
        for a in string:
            try:
                digit = self.alphabet_dict[a]
            except KeyError:
                raise ArgumentFormatError(
                    f"A string representing a number in base {self.num_alphabets} "
                    f"may only include the digits {self.listing()}."
                ) from None
            decoded = decoded * self.num_alphabets + digit
        return sign * decoded

    def listing(self) -> str:
        return ", ".join(self.alphabet[:-1]) + " and " + self.alphabet[-1]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.alphabet!r})"


CODECS: Dict[int, BaseX] = {base: BaseX(DIGITS[:base]) for base in range(MIN_BASE, MAX_BASE + 1)}


def codec(base: int) -> BaseX:
    r"""
    Return the codec for `base`, which uses the first `base` characters of `DIGITS`.

    Raises:
        ArgumentOutOfRangeError: If `base` is not in [2, 64].
    """

    base = as_integer(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise ArgumentOutOfRangeError(f"base={base} should be in the range [{MIN_BASE}, {MAX_BASE}].")
    return CODECS[base]


def to_base(value: IntegerLike, base: int, width: int = 1, letter_case: LetterCase = None) -> str:
    r"""
    Convert an integer to a string of digits in `base`.

    Args:
        value: Integer to convert.
        base: Radix, between 2 and 64.
        width: Minimum number of digits.
        letter_case: `"lower"`, `"upper"` or `"canonical"`.
            Defaults to `defaults.letter_case`, whose default keeps the canonical digits.
            `"canonical"` keeps them whatever the default is.

    Examples:
        >>> to_base(255, 16)
        'ff'
        >>> to_base(255, 16, letter_case="upper")
        'FF'
        >>> to_base(5, 2, width=8)
        '00000101'
        >>> to_base(46, 64)
        '0-'
    """

    if letter_case is None:
        letter_case = defaults.get("letter_case")
    return codec(base).encode(value, width, letter_case)


def from_base(digits: str, base: int, dtype: Union[str, IntegerType, type] = "bigint") -> Any:
    r"""
    Convert a string of digits in `base` to an integer.

    Args:
        digits: Digits to read. Letters are case-insensitive, separators are ignored.
        base: Radix, between 2 and 64.
        dtype: Integer type the result must fit in.
            A numpy integer type returns a numpy scalar of that type.

    Raises:
        EmptyArgumentError: If `digits` is empty or whitespace.
        ArgumentOutOfRangeError: If `base` is not in [2, 64].
        ArgumentFormatError: If `digits` holds a character that is not a digit of `base`.
        IntegerOverflowError: If the result does not fit in `dtype`.

    Examples:
        >>> from_base("ff", 16)
        255
        >>> from_base("1111_0000", 2, "uint8")
        240
    """

    if isinstance(digits, str) and (not digits or digits.isspace()):
        raise EmptyArgumentError("Cannot convert an empty string to an integer.")
    value = integer_type(dtype).cast(codec(base).decode(digits))
    if isinstance(dtype, type) and issubclass(dtype, np.integer):
        return dtype(value)
    return value


def to_bin(value: Any, width: int = 1) -> str:
    return to_base(value, 2, width)


def from_bin(digits: str, dtype: Union[str, IntegerType, type] = "bigint") -> Any:
    return from_base(digits, 2, dtype)


def to_quat(value: Any, width: int = 1) -> str:
    return to_base(value, 4, width)


def from_quat(digits: str, dtype: Union[str, IntegerType, type] = "bigint") -> Any:
    return from_base(digits, 4, dtype)


def to_oct(value: Any, width: int = 1) -> str:
    return to_base(value, 8, width)


def from_oct(digits: str, dtype: Union[str, IntegerType, type] = "bigint") -> Any:
    return from_base(digits, 8, dtype)


def to_hex(value: Any, width: int = 1, letter_case: Optional[str] = None) -> str:
    return to_base(value, 16, width, letter_case)


def from_hex(digits: str, dtype: Union[str, IntegerType, type] = "bigint") -> Any:
    return from_base(digits, 16, dtype)


def to_tria(value: Any, width: int = 1, letter_case: Optional[str] = None) -> str:
    return to_base(value, 32, width, letter_case)


def from_tria(digits: str, dtype: Union[str, IntegerType, type] = "bigint") -> Any:
    return from_base(digits, 32, dtype)


def to_tetra(value: Any, width: int = 1, letter_case: Optional[str] = None) -> str:
    return to_base(value, 64, width, letter_case)


def from_tetra(digits: str, dtype: Union[str, IntegerType, type] = "bigint") -> Any:
    return from_base(digits, 64, dtype)
