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

from collections import Counter
from typing import Any, Iterable, List, Optional, Sized


def is_empty(collection: Optional[Sized]) -> bool:
    return collection is None or len(collection) == 0


def diff(a: Iterable[Any], b: Iterable[Any]) -> List[Any]:
    r"""
    Items of `a` that are not matched by an item of `b`, in the order of `a`.

    Each item of `b` cancels one equal item of `a`.

    Examples:
        >>> diff([1, 2, 2, 3, 2], [2, 3])
        [1, 2, 2]
    """

    remaining = Counter(b)
    result = []
    for item in a:
        if remaining[item] > 0:
            remaining[item] -= 1
        else:
            result.append(item)
    return result
