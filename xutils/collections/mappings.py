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

from typing import Any, Dict, Hashable, Iterable, Mapping, TypeVar

from xutils.exceptions import InvalidArgumentError

K = TypeVar("K")
V = TypeVar("V")


def has_unique_values(mapping: Mapping) -> bool:
    values = list(mapping.values())
    try:
        return len(set(values)) == len(values)
    except TypeError:
        return all(values.index(v) == i for i, v in enumerate(values))


def flip(mapping: Mapping[K, V]) -> Dict[V, K]:
    r"""
    Swap the keys and values of `mapping`.

    Raises:
        InvalidArgumentError: If two keys share a value.

    Examples:
        >>> flip({"a": 1, "b": 2})
        {1: 'a', 2: 'b'}
    """

    flipped: Dict[V, K] = {}
    for key, value in mapping.items():
        if value in flipped:
            raise InvalidArgumentError(
                f"Cannot flip a mapping whose keys {flipped[value]!r} and {key!r} share the value {value!r}."
            )
        flipped[value] = key
    return flipped


def to_index(items: Iterable[Any], key: str = "id") -> Dict[Hashable, Any]:
    r"""
    Index `items` by their `key` attribute, or their `key` item for mappings.

    Raises:
        InvalidArgumentError: If an item has no `key`.

    Examples:
        >>> to_index([{"id": 2, "name": "b"}, {"id": 1, "name": "a"}])
        {2: {'id': 2, 'name': 'b'}, 1: {'id': 1, 'name': 'a'}}
    """

    index = {}
    for item in items:
        try:
            identifier = item[key] if isinstance(item, Mapping) else getattr(item, key)
        except (KeyError, AttributeError):
            raise InvalidArgumentError(f"{item!r} has no {key!r}.") from None
        index[identifier] = item
    return index
