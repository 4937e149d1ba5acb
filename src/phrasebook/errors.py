"""Exception hierarchy for phrasebook.

Missing translations are not errors: the translator echoes the requested key
instead. Exceptions are reserved for programmer errors (malformed keys) and
for broken translation sources.

Hierarchy:
    PhrasebookError (base)
    ├─ MalformedKeyError (also a ValueError)
    └─ InvalidTranslationSourceError

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "InvalidTranslationSourceError",
    "MalformedKeyError",
    "PhrasebookError",
]


class PhrasebookError(Exception):
    """Base exception for all phrasebook errors."""


class MalformedKeyError(PhrasebookError, ValueError):
    """Translation key cannot be split into namespace, group and item.

    Raised by the key parser when no group/item separator exists, or when one
    of the segments would be empty. Subclasses ValueError so callers that
    validate user-supplied keys can catch it generically.

    Attributes:
        key: The raw key that failed to parse
    """

    def __init__(self, key: str, reason: str) -> None:
        """Initialize MalformedKeyError.

        Args:
            key: The raw key that failed to parse
            reason: Short description of what is wrong with it
        """
        super().__init__(f"Malformed translation key {key!r}: {reason}")
        self.key = key


class InvalidTranslationSourceError(PhrasebookError):
    """Translation source exists but cannot be decoded.

    Not recoverable by the translator: propagates to the caller so broken
    deployments fail loudly instead of silently serving untranslated keys.

    Attributes:
        source: Path of the offending file
    """

    def __init__(self, source: Path | str, reason: str) -> None:
        """Initialize InvalidTranslationSourceError.

        Args:
            source: Path of the offending file
            reason: Decoder message or structural problem
        """
        super().__init__(f"Translation file [{source}] contains an invalid structure: {reason}")
        self.source = Path(source)
