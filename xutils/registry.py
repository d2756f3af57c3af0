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

from typing import Any

from chanfig import Registry as Registry_

from .exceptions import ArgumentOutOfRangeError


class Registry(Registry_):
    r"""
    Registry whose names are matched case-insensitively.

    Examples:
        >>> registry = Registry()
        >>> _ = registry.register(int, "integer")
        >>> registry.lookup("Integer")
        <class 'int'>
    """

    case_sensitive = False

    def lookup(self, name: str) -> Any:  # type: ignore[override]
        if not isinstance(name, str):
            raise ArgumentOutOfRangeError(f"name={name!r} should be a str, but got {type(name)}.")
        key = name.lower()
        if key not in self:
            raise ArgumentOutOfRangeError(f"Unknown name {name!r}, expected one of {', '.join(self.keys())}.")
        return self[key]
