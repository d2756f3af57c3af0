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

from xutils.numbers.superscript import to_subscript, to_superscript


class TestSuperscript:
    def test_digits(self):
        assert to_superscript(1234567890) == "¹²³⁴⁵⁶⁷⁸⁹⁰"
        assert to_superscript(-12) == "⁻¹²"
        assert to_superscript("x2") == "x²"

    def test_subscript(self):
        assert to_subscript(1234567890) == "₁₂₃₄₅₆₇₈₉₀"
        assert to_subscript(-9) == "₋₉"
        assert "H" + to_subscript(2) + "O" == "H₂O"
