"""Line sets and dot-path access.

A line set is the decoded content of one group for one locale: a mapping
from item keys to either a translated string or a nested mapping (plural
groupings, sub-items). Items are addressed by dot path ("errors.not_found").

Line sets handed to the translator cache are never mutated in place.
Writers build a new mapping with set_path() (path copying) and swap it in
with a single assignment, so concurrent readers always see a complete set.
Values coming from outside (injected lines) and mappings handed back to
callers go through freeze(), which copies them into read-only views.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from phrasebook.constants import PATH_SEPARATOR

__all__ = [
    "MISSING",
    "LineSet",
    "LineValue",
    "Missing",
    "freeze",
    "get_path",
    "is_hit",
    "merge_recursive",
    "set_path",
]

type LineValue = str | Mapping[str, LineValue]
"""A translated string or a nested mapping of further line values."""

type LineSet = Mapping[str, LineValue]
"""Decoded contents of one (namespace, group, locale) source."""


class Missing(Enum):
    """Sentinel type for a dot path that resolves to nothing."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing.MISSING


def get_path(lines: Mapping[str, object], path: str) -> object | Missing:
    """Look up an item by dot path.

    The whole path is tried as a literal key first, so flat sources with
    dotted keys ("errors.not_found": "...") resolve without nesting.

    Args:
        lines: Line set (or any nested mapping)
        path: Dot-separated item path

    Returns:
        The stored value, or MISSING. An empty string is a stored value.

    Example:
        >>> get_path({"a": {"b": "x"}}, "a.b")
        'x'
        >>> get_path({"a": "x"}, "a.b")
        MISSING
    """
    if path in lines:
        return lines[path]

    node: object = lines
    for segment in path.split(PATH_SEPARATOR):
        if not isinstance(node, Mapping) or segment not in node:
            return MISSING
        node = node[segment]
    return node


def set_path(lines: Mapping[str, LineValue], path: str, value: LineValue) -> dict[str, LineValue]:
    """Return a copy of lines with value stored at the dot path.

    Only the mappings along the path are copied; siblings are shared with
    the source mapping. Non-mapping values in the way are replaced by new mappings.

    Args:
        lines: Source line set (left untouched)
        path: Dot-separated item path
        value: Value to store

    Returns:
        New line set containing the value
    """
    head, separator, rest = path.partition(PATH_SEPARATOR)
    result = dict(lines)
    if not separator:
        result[head] = value
        return result

    child = lines.get(head)
    result[head] = set_path(child if isinstance(child, Mapping) else {}, rest, value)
    return result


def merge_recursive(
    base: Mapping[str, LineValue], override: Mapping[str, LineValue]
) -> dict[str, LineValue]:
    """Merge override into base, descending into nested mappings.

    Keys present only in base are kept. Where both sides hold a mapping the
    merge recurses; anywhere else the override value replaces the base value.

    Example:
        >>> merge_recursive({"a": {"x": "1", "y": "2"}}, {"a": {"y": "3"}})
        {'a': {'x': '1', 'y': '3'}}
    """
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = merge_recursive(current, value)
        else:
            result[key] = value
    return result


def freeze(value: LineValue) -> LineValue:
    """Return a read-only deep copy of a line value.

    Nested mappings become MappingProxyType views over fresh dicts, so
    neither the caller nor the original owner can change the result.
    Strings and foreign values are returned as they are.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(child) for key, child in value.items()})
    return value


def is_hit(value: object) -> bool:
    """Whether a looked-up value counts as a translation.

    Non-empty strings and non-empty mappings count; MISSING, empty strings,
    empty mappings and foreign types (numbers, lists from JSON) do not.
    """
    if isinstance(value, str):
        return value != ""
    if isinstance(value, Mapping):
        return len(value) > 0
    return False
