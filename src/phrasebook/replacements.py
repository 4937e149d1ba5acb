"""Placeholder substitution for translated lines.

Placeholders are ":name" tokens. Each parameter fills three spellings:

    :name  -> value
    :NAME  -> value in upper case
    :Name  -> value with its first character upper-cased

Parameters are applied longest name first so that ":count" is never
clobbered by a shorter ":c".

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from phrasebook.constants import PLACEHOLDER_PREFIX

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["make_replacements", "sort_replacements", "ucfirst"]


def ucfirst(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched.

    Unlike str.capitalize() the tail keeps its case. Works on code points,
    so "élan" becomes "Élan".
    """
    return text[:1].upper() + text[1:]


def sort_replacements(params: Mapping[str, object]) -> list[tuple[str, object]]:
    """Order parameters by descending name length.

    Ties keep their insertion order (sorted() is stable).
    """
    return sorted(params.items(), key=lambda item: -len(item[0]))


def make_replacements(line: str, params: Mapping[str, object] | None) -> str:
    """Substitute ":name" placeholders in a line.

    Args:
        line: Translated line
        params: Placeholder values; non-string values are rendered with str()

    Returns:
        Line with every placeholder variant replaced

    Example:
        >>> make_replacements(":NAME says :Name", {"name": "jo"})
        'JO says Jo'
    """
    if not params:
        return line

    for name, raw_value in sort_replacements(params):
        value = str(raw_value)
        line = (
            line.replace(PLACEHOLDER_PREFIX + name, value)
            .replace(PLACEHOLDER_PREFIX + name.upper(), value.upper())
            .replace(PLACEHOLDER_PREFIX + ucfirst(name), ucfirst(value))
        )
    return line
