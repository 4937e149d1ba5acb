"""Shared constants for phrasebook.

Single source of truth for the key grammar, file layout and cache limits
used by the key parser, the loaders and the translator.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Key grammar
    "WILDCARD",
    "NAMESPACE_SEPARATOR",
    "PATH_SEPARATOR",
    "PLACEHOLDER_PREFIX",
    "VARIANT_SEPARATOR",
    "COUNT_PARAMETER",
    # File layout
    "GROUP_FILE_SUFFIX",
    "FLAT_FILE_SUFFIX",
    "VENDOR_DIRECTORY",
    "SOURCE_ENCODING",
    # Cache limits
    "MAX_PARSED_KEY_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_SYSTEM_LOCALE",
]

# ============================================================================
# KEY GRAMMAR
# ============================================================================

# Namespace used for application keys and, paired with a wildcard group,
# for the flat JSON line set.
WILDCARD: str = "*"

# "vendor::group.item" -> namespace "vendor"
NAMESPACE_SEPARATOR: str = "::"

# Separates group from item, and item path segments from each other.
PATH_SEPARATOR: str = "."

# ":name" placeholder marker inside translated lines.
PLACEHOLDER_PREFIX: str = ":"

# "one apple|many apples"
VARIANT_SEPARATOR: str = "|"

# Parameter injected by Translator.choice() with the resolved count.
COUNT_PARAMETER: str = "count"

# ============================================================================
# FILE LAYOUT
# ============================================================================

# {path}/{locale}/{group}.json
GROUP_FILE_SUFFIX: str = ".json"

# {path}/{locale}.json
FLAT_FILE_SUFFIX: str = ".json"

# {path}/vendor/{namespace}/{locale}/{group}.json
VENDOR_DIRECTORY: str = "vendor"

SOURCE_ENCODING: str = "utf-8"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Parsed keys are memoized. Typical UIs use a few hundred distinct keys.
MAX_PARSED_KEY_CACHE_SIZE: int = 4096

# Cached Babel Locale objects (plural rule lookups).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Returned by get_system_locale() when nothing can be detected.
DEFAULT_SYSTEM_LOCALE: str = "en_US"
