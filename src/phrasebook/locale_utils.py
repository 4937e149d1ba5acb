"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale normalization for Babel lookups and system-locale
detection for configuration defaults. Translation sources are addressed with
the locale exactly as given; normalization only applies where Babel is
consulted.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from phrasebook.constants import DEFAULT_SYSTEM_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_language",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def get_language(locale_code: str) -> str:
    """Return the lowercase language subtag of a locale code.

    Example:
        >>> get_language("pt-BR")
        'pt'
        >>> get_language("sr_Latn_RS")
        'sr'
    """
    return normalize_locale(locale_code).split("_", 1)[0].lower()


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result, keeping Locale.parse()
    out of the plural selection hot path. Thread-safe via lru_cache.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop all cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable
    3. LC_MESSAGES environment variable
    4. LANG environment variable

    "C" and "POSIX" pseudo-locales are ignored and encoding suffixes
    (".UTF-8") are stripped.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_SYSTEM_LOCALE
