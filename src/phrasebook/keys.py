"""Translation key parsing.

A raw key addresses one item inside one group, optionally inside a
namespace contributed by a vendor package:

    "messages.welcome"               -> ("*", "messages", "welcome")
    "messages.errors.not_found"      -> ("*", "messages", "errors.not_found")
    "billing::invoice.title"         -> ("billing", "invoice", "title")

Bare words ("welcome") are rejected: group and item are both required.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from phrasebook.constants import (
    MAX_PARSED_KEY_CACHE_SIZE,
    NAMESPACE_SEPARATOR,
    PATH_SEPARATOR,
    WILDCARD,
)
from phrasebook.errors import MalformedKeyError

__all__ = ["TranslationKey", "parse_key", "split_group_item"]


@dataclass(frozen=True, slots=True)
class TranslationKey:
    """Parsed translation key.

    Frozen so parsed keys can be memoized and shared.

    Attributes:
        namespace: Namespace name, or "*" for application keys
        group: Group (one logical source file) holding the item
        item: Dot path of the item inside the group
    """

    namespace: str
    group: str
    item: str

    def __str__(self) -> str:
        """Render the key back into its raw form."""
        prefix = "" if self.namespace == WILDCARD else f"{self.namespace}{NAMESPACE_SEPARATOR}"
        return f"{prefix}{self.group}{PATH_SEPARATOR}{self.item}"


def split_group_item(raw: str, segment: str) -> tuple[str, str]:
    """Split "group.item" on its first separator.

    Args:
        raw: Full raw key (for error messages)
        segment: The part of the key after namespace extraction

    Returns:
        (group, item) tuple

    Raises:
        MalformedKeyError: If there is no separator or a side is empty
    """
    group, separator, item = segment.partition(PATH_SEPARATOR)
    if not separator:
        raise MalformedKeyError(raw, "expected 'group.item'")
    if not group:
        raise MalformedKeyError(raw, "group is empty")
    if not item:
        raise MalformedKeyError(raw, "item is empty")
    return group, item


@functools.lru_cache(maxsize=MAX_PARSED_KEY_CACHE_SIZE)
def parse_key(raw: str) -> TranslationKey:
    """Parse a raw key into namespace, group and item.

    Args:
        raw: Raw key such as "messages.welcome" or "vendor::group.item"

    Returns:
        TranslationKey with namespace defaulting to "*"

    Raises:
        MalformedKeyError: If group and item cannot both be derived

    Example:
        >>> parse_key("auth::passwords.reset")
        TranslationKey(namespace='auth', group='passwords', item='reset')
    """
    namespace, separator, rest = raw.partition(NAMESPACE_SEPARATOR)
    if not separator:
        namespace, rest = WILDCARD, raw
    elif not namespace:
        raise MalformedKeyError(raw, "namespace is empty")

    group, item = split_group_item(raw, rest)
    return TranslationKey(namespace=namespace, group=group, item=item)
