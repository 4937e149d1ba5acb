"""Pluralization: plural rules and variant selection.

Submodules:
    rules    - PluralRule protocol, CLDRPluralRule (Babel), ClassicPluralRule
    selector - MessageSelector (variant selection for "a|b" lines)

Python 3.13+. Depends on Babel for CLDR data.
"""

from phrasebook.plurals.rules import (
    ClassicPluralRule,
    CLDRPluralRule,
    Count,
    PluralRule,
    select_plural_category,
)
from phrasebook.plurals.selector import MessageSelector

__all__ = [
    "CLDRPluralRule",
    "ClassicPluralRule",
    "Count",
    "MessageSelector",
    "PluralRule",
    "select_plural_category",
]
