"""Enumerations for phrasebook type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category.

    Member order is the canonical CLDR order. Plural rules use it to turn a
    category into the position of the matching variant in a line.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


__all__ = [
    "PluralCategory",
]
