"""Plural variant selection for pipe-delimited lines.

A pluralized line holds variants separated by "|":

    "one apple|many apples"                 positional
    "{0}no apples|{1}one apple|[2,*]:count apples"
                                            explicit conditions

Explicit conditions are checked first, in order:

    {n}          count equals n
    [n1,n2]      n1 <= count <= n2
    [n1,*]       count >= n1
    [*,n2]       count <= n2

Either bracket style may wrap either condition form. When no condition
matches, conditions are stripped and the plural rule picks a positional
variant. An index past the last variant selects the last variant.

Python 3.13+.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from phrasebook.constants import VARIANT_SEPARATOR, WILDCARD
from phrasebook.plurals.rules import CLDRPluralRule, Count, PluralRule

__all__ = ["MessageSelector"]

_CONDITION_PATTERN = re.compile(r"^[\{\[]([^\[\]\{\}]*)[\}\]](.*)", re.DOTALL)
_CONDITION_PREFIX = re.compile(r"^[\{\[]([^\[\]\{\}]*)[\}\]]")


def _to_number(text: str) -> Decimal | None:
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def _comparable(count: Count) -> int | Decimal | None:
    """Convert count for exact comparison against condition bounds.

    Floats go through their shortest repr, so 0.1 equals the condition {0.1}.
    NaN matches no condition.
    """
    value = Decimal(str(count)) if isinstance(count, float) else count
    if isinstance(value, Decimal) and value.is_nan():
        return None
    return value


def _matches(condition: str, count: int | Decimal) -> bool:
    """Check a single explicit condition against count."""
    if "," not in condition:
        exact = _to_number(condition)
        return exact is not None and count == exact

    low_text, high_text = (part.strip() for part in condition.split(",", 1))
    low = None if low_text == WILDCARD else _to_number(low_text)
    high = None if high_text == WILDCARD else _to_number(high_text)
    if (low is None and low_text != WILDCARD) or (high is None and high_text != WILDCARD):
        return False
    return (low is None or count >= low) and (high is None or count <= high)


class MessageSelector:
    """Pick the variant of a pluralized line that applies to a count.

    Attributes:
        rule: Plural rule used for positional variants (CLDR by default)

    Example:
        >>> selector = MessageSelector()
        >>> selector.choose("one apple|many apples", 5, "en")
        'many apples'
        >>> selector.choose("{0}none|[1,*]some", 0, "en")
        'none'
    """

    __slots__ = ("_rule",)

    def __init__(self, rule: PluralRule | None = None) -> None:
        """Initialize selector.

        Args:
            rule: Plural rule strategy; defaults to CLDRPluralRule()
        """
        self._rule: PluralRule = rule if rule is not None else CLDRPluralRule()

    @property
    def rule(self) -> PluralRule:
        """Plural rule used for positional variants."""
        return self._rule

    def choose(self, line: str, count: Count, locale: str | None) -> str:
        """Select the variant of line for count.

        Args:
            line: Pipe-delimited variants, optionally condition-prefixed
            count: Number being pluralized
            locale: Locale whose plural rule applies

        Returns:
            Selected variant with surrounding whitespace stripped
        """
        segments = line.split(VARIANT_SEPARATOR)

        explicit = self.extract(segments, count)
        if explicit is not None:
            return explicit.strip()

        variants = self.strip_conditions(segments)
        if len(variants) == 1:
            return variants[0].strip()

        index = self._rule.index(count, locale)
        return variants[min(index, len(variants) - 1)].strip()

    @staticmethod
    def extract(segments: list[str], count: Count) -> str | None:
        """Return the first variant whose explicit condition matches count."""
        number = _comparable(count)
        if number is None:
            return None
        for segment in segments:
            match = _CONDITION_PATTERN.match(segment)
            if match is not None and _matches(match.group(1), number):
                return match.group(2)
        return None

    @staticmethod
    def strip_conditions(segments: list[str]) -> list[str]:
        """Remove explicit condition prefixes from every variant."""
        return [_CONDITION_PREFIX.sub("", segment, count=1) for segment in segments]
