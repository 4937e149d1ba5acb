"""Plural rules: map a count to the position of a plural variant.

A rule answers "which variant of 'apple|apples' applies to this count in
this locale" by returning a zero-based index. Two implementations:

    CLDRPluralRule     - Babel's CLDR plural data (default, all CLDR locales)
    ClassicPluralRule  - fixed per-language-family table

Custom rules only need an index(count, locale) method (see PluralRule).

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal
from typing import Protocol

from babel.core import UnknownLocaleError

from phrasebook.enums import PluralCategory
from phrasebook.locale_utils import get_babel_locale, get_language, normalize_locale

__all__ = [
    "CLDRPluralRule",
    "ClassicPluralRule",
    "Count",
    "PluralRule",
    "select_plural_category",
]

logger = logging.getLogger(__name__)

type Count = int | float | Decimal
"""Numeric count accepted by plural rules."""


class PluralRule(Protocol):
    """Strategy turning a count into a plural variant index."""

    def index(self, count: Count, locale: str | None) -> int:
        """Return the zero-based variant index for count in locale."""


def _binary_index(count: Count) -> int:
    return 0 if abs(count) == 1 else 1


def select_plural_category(count: Count, locale: str) -> PluralCategory:
    """Select the CLDR plural category for a count.

    Args:
        count: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en-US", "ar")

    Returns:
        PluralCategory; unknown locales use the one/other rule

    Examples:
        >>> select_plural_category(1, "en_US")
        <PluralCategory.ONE: 'one'>
        >>> select_plural_category(5, "ru")
        <PluralCategory.MANY: 'many'>
    """
    try:
        plural_form = get_babel_locale(locale).plural_form
    except (UnknownLocaleError, ValueError):
        return PluralCategory.ONE if abs(count) == 1 else PluralCategory.OTHER
    return PluralCategory(plural_form(count))


class CLDRPluralRule:
    """Plural rule backed by Babel's CLDR data.

    The category chosen by CLDR is mapped to its position among the
    categories the locale actually uses, in canonical order. Russian uses
    one/few/many/other, so 1 -> 0, 3 -> 1, 5 -> 2 and 1.5 -> 3; English uses
    one/other, so 1 -> 0 and anything else -> 1.

    Unknown or unparsable locales fall back to the one/other rule.
    """

    __slots__ = ()

    def index(self, count: Count, locale: str | None) -> int:
        if not locale:
            return _binary_index(count)
        try:
            plural_form = get_babel_locale(locale).plural_form
        except (UnknownLocaleError, ValueError):
            logger.warning("No CLDR plural data for locale '%s', using one/other rule", locale)
            return _binary_index(count)

        used = [
            category
            for category in PluralCategory
            if category is PluralCategory.OTHER or category in plural_form.tags
        ]
        return used.index(PluralCategory(plural_form(count)))


# Modulo arithmetic below works on the integer part, equality on the value.


def _single(n: Count) -> int:
    return 0


def _one_other(n: Count) -> int:
    return 0 if n == 1 else 1


def _zero_one_other(n: Count) -> int:
    return 0 if n in (0, 1) else 1


def _east_slavic(n: Count) -> int:
    i = int(n)
    if i % 10 == 1 and i % 100 != 11:
        return 0
    if 2 <= i % 10 <= 4 and (i % 100 < 10 or i % 100 >= 20):
        return 1
    return 2


def _czech(n: Count) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _irish(n: Count) -> int:
    if n == 1:
        return 0
    return 1 if n == 2 else 2


def _lithuanian(n: Count) -> int:
    i = int(n)
    if i % 10 == 1 and i % 100 != 11:
        return 0
    if i % 10 >= 2 and (i % 100 < 10 or i % 100 >= 20):
        return 1
    return 2


def _slovenian(n: Count) -> int:
    i = int(n) % 100
    if i == 1:
        return 0
    if i == 2:
        return 1
    return 2 if i in (3, 4) else 3


def _macedonian(n: Count) -> int:
    return 0 if int(n) % 10 == 1 else 1


def _maltese(n: Count) -> int:
    i = int(n) % 100
    if n == 1:
        return 0
    if n == 0 or 1 < i < 11:
        return 1
    return 2 if 10 < i < 20 else 3


def _latvian(n: Count) -> int:
    i = int(n)
    if n == 0:
        return 0
    return 1 if i % 10 == 1 and i % 100 != 11 else 2


def _polish(n: Count) -> int:
    i = int(n)
    if n == 1:
        return 0
    if 2 <= i % 10 <= 4 and (i % 100 < 12 or i % 100 > 14):
        return 1
    return 2


def _welsh(n: Count) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2 if n in (8, 11) else 3


def _romanian(n: Count) -> int:
    i = int(n) % 100
    if n == 1:
        return 0
    return 1 if n == 0 or 0 < i < 20 else 2


def _arabic(n: Count) -> int:
    i = int(n) % 100
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= i <= 10:
        return 3
    return 4 if 11 <= i <= 99 else 5


_FAMILIES: dict[Callable[[Count], int], tuple[str, ...]] = {
    _single: (
        "az", "bo", "dz", "id", "ja", "jv", "ka", "km", "kn",
        "ko", "ms", "th", "tr", "vi", "zh",
    ),
    _one_other: (
        "af", "bn", "bg", "ca", "da", "de", "el", "en", "eo", "es", "et", "eu",
        "fa", "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he", "hu", "is", "it",
        "ku", "lb", "ml", "mn", "mr", "nah", "nb", "ne", "nl", "nn", "no", "om",
        "or", "pa", "pap", "ps", "pt", "so", "sq", "sv", "sw", "ta", "te", "tk",
        "ur", "zu",
    ),
    _zero_one_other: (
        "am", "bh", "fil", "fr", "gun", "hi", "hy", "ln", "mg", "nso", "xbr",
        "ti", "wa",
    ),
    _east_slavic: ("be", "bs", "hr", "ru", "sh", "sr", "uk"),
    _czech: ("cs", "sk"),
    _irish: ("ga",),
    _lithuanian: ("lt",),
    _slovenian: ("sl",),
    _macedonian: ("mk",),
    _maltese: ("mt",),
    _latvian: ("lv",),
    _polish: ("pl",),
    _welsh: ("cy",),
    _romanian: ("ro",),
    _arabic: ("ar",),
}

_CLASSIC_TABLE: dict[str, Callable[[Count], int]] = {
    language: rule for rule, languages in _FAMILIES.items() for language in languages
}


class ClassicPluralRule:
    """Plural rule from a fixed language-family table.

    Covers the classic gettext-era families: single-form East Asian
    languages, Germanic/Romance one/other, French-style 0-and-1 singular,
    three-form Slavic and Baltic rules, Slovenian and Welsh four-form rules
    and the six-form Arabic rule. Brazilian Portuguese uses the French-style
    rule. Languages outside the table always get index 0.
    """

    __slots__ = ()

    def index(self, count: Count, locale: str | None) -> int:
        if not locale:
            return _binary_index(count)
        language = "xbr" if normalize_locale(locale) == "pt_BR" else get_language(locale)
        rule = _CLASSIC_TABLE.get(language, _single)
        return rule(abs(count))
