"""phrasebook - translation key resolution with locale fallback.

Resolves keys such as "messages.welcome" or "billing::invoice.title" to
translated lines, walking a default/fallback locale chain, caching each
(namespace, group, locale) line set after its first load, substituting
":placeholders" and selecting plural variants with CLDR rules.

Public API:
    Translator - Key resolution, fallback, caching, pluralization
    TranslatorConfig - Frozen configuration (files, locales, namespaces)
    FileLoader - JSON files on disk with namespace hints and vendor overrides
    MemoryLoader - In-memory line sets
    Loader - Protocol for custom loaders
    MessageSelector - Plural variant selection
    CLDRPluralRule / ClassicPluralRule - Plural rule strategies
    TranslationKey / parse_key - Key parsing

Exceptions:
    PhrasebookError - Base exception class
    MalformedKeyError - Key without a 'group.item' part
    InvalidTranslationSourceError - Undecodable translation file

Submodules:
    phrasebook.lines - Dot-path helpers over nested line sets
    phrasebook.replacements - Placeholder substitution
    phrasebook.locale_utils - Locale normalization and detection
"""

from .config import TranslatorConfig
from .errors import InvalidTranslationSourceError, MalformedKeyError, PhrasebookError
from .keys import TranslationKey, parse_key
from .loading import FileLoader, Loader, MemoryLoader
from .plurals import ClassicPluralRule, CLDRPluralRule, MessageSelector, PluralRule
from .translator import Translator

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("phrasebook")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CLDRPluralRule",
    "ClassicPluralRule",
    "FileLoader",
    "InvalidTranslationSourceError",
    "Loader",
    "MalformedKeyError",
    "MemoryLoader",
    "MessageSelector",
    "PhrasebookError",
    "PluralRule",
    "TranslationKey",
    "Translator",
    "TranslatorConfig",
    "__version__",
    "parse_key",
]
