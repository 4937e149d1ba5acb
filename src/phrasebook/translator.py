"""Key resolution with locale fallback, lazy caching and pluralization.

Translator is the entry point applications talk to:

    >>> loader = FileLoader("lang")
    >>> translator = Translator(loader, "lv", fallback="en")
    >>> translator.get("messages.welcome", {"name": "anna"})
    'Sveika, anna!'
    >>> translator.choice("messages.apples", 3)
    '3 āboli'

Resolution of "namespace::group.item":
    1. Parse the key.
    2. Build the locale chain: requested (or default) locale, then fallback.
    3. For each locale, load the (namespace, group, locale) line set once and
       look the item up by dot path. The first non-empty hit wins.
    4. Substitute ":placeholders" in string hits; mapping hits are returned
       as read-only views.
    5. Nothing found: the key itself is returned. Missing lines never raise.

Thread Safety:
    Reads take no lock. Line sets stored in the cache are never mutated;
    cache fills, add_lines() and flush() swap whole line sets under a
    private lock. Two threads racing on the first load of one line set may
    both call the loader; the first stored result wins.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sized
from pathlib import Path
from typing import TYPE_CHECKING

from phrasebook.constants import COUNT_PARAMETER, WILDCARD
from phrasebook.errors import MalformedKeyError
from phrasebook.keys import TranslationKey, parse_key, split_group_item
from phrasebook.lines import LineSet, LineValue, freeze, get_path, is_hit, set_path
from phrasebook.loading import FileLoader, Loader
from phrasebook.plurals import Count, MessageSelector
from phrasebook.replacements import make_replacements

if TYPE_CHECKING:
    from phrasebook.config import TranslatorConfig

__all__ = ["Translator"]

logger = logging.getLogger(__name__)

type CacheKey = tuple[str, str, str]
"""(namespace, group, locale) identifying one cached line set."""

type Params = Mapping[str, object]
"""Placeholder values keyed by placeholder name."""


def _validate_locale(locale: str) -> None:
    if not isinstance(locale, str) or not locale:
        msg = f"Locale must be a non-empty string, got {locale!r}"
        raise ValueError(msg)


class Translator:
    """Resolve translation keys against a loader with locale fallback.

    Line sets are loaded lazily, once per (namespace, group, locale), and
    kept until flush(). An empty load result is cached too: a source
    created after its first miss is only seen after flush().

    Attributes:
        loader: Loader supplying line sets
        locale: Default locale for lookups
        fallback: Locale consulted when the requested locale has no line
        selector: MessageSelector used by choice()
    """

    __slots__ = ("_fallback", "_loaded", "_loader", "_locale", "_lock", "_selector")

    def __init__(
        self,
        loader: Loader,
        locale: str,
        *,
        fallback: str | None = None,
        selector: MessageSelector | None = None,
    ) -> None:
        """Initialize translator.

        Args:
            loader: Loader supplying line sets
            locale: Default locale (e.g., 'en', 'pt_BR')
            fallback: Fallback locale (optional)
            selector: Plural variant selector; defaults to CLDR plural rules

        Raises:
            ValueError: If locale is empty
        """
        _validate_locale(locale)
        self._loader = loader
        self._locale = locale
        self._fallback = fallback
        self._selector = selector if selector is not None else MessageSelector()
        self._loaded: dict[CacheKey, LineSet] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: TranslatorConfig) -> Translator:
        """Create a translator reading files as described by config.

        Args:
            config: Translator configuration

        Returns:
            Translator backed by a FileLoader
        """
        loader = FileLoader(config.path)
        for json_path in config.json_paths:
            loader.add_json_path(json_path)
        for namespace, hint in config.namespaces.items():
            loader.add_namespace(namespace, hint)

        logger.info(
            "Translator created for %s (fallback: %s, path: %s)",
            config.locale,
            config.fallback_locale,
            config.path,
        )
        return cls(loader, config.locale, fallback=config.fallback_locale)

    def __repr__(self) -> str:
        return (
            f"Translator(locale={self._locale!r}, fallback={self._fallback!r}, "
            f"loaded={len(self._loaded)})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def loader(self) -> Loader:
        """Loader supplying line sets."""
        return self._loader

    @property
    def locale(self) -> str:
        """Default locale."""
        return self._locale

    @locale.setter
    def locale(self, locale: str) -> None:
        _validate_locale(locale)
        self._locale = locale

    @property
    def fallback(self) -> str | None:
        """Fallback locale."""
        return self._fallback

    @fallback.setter
    def fallback(self, fallback: str | None) -> None:
        self._fallback = fallback

    @property
    def selector(self) -> MessageSelector:
        """Plural variant selector."""
        return self._selector

    @selector.setter
    def selector(self, selector: MessageSelector) -> None:
        self._selector = selector

    def add_namespace(self, namespace: str, hint: str | Path) -> None:
        """Register a namespace's source location with the loader."""
        self._loader.add_namespace(namespace, hint)

    def add_json_path(self, path: str | Path) -> None:
        """Register an additional flat JSON source with the loader."""
        self._loader.add_json_path(path)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    @staticmethod
    def parse_key(key: str) -> TranslationKey:
        """Parse a raw key into namespace, group and item.

        Raises:
            MalformedKeyError: If the key has no 'group.item' part
        """
        return parse_key(key)

    def locale_chain(self, locale: str | None = None, fallback: bool = True) -> tuple[str, ...]:
        """Locales consulted for a lookup, in order.

        Args:
            locale: Requested locale; the default locale when None or empty
            fallback: Whether to append the fallback locale

        Returns:
            De-duplicated tuple without empty entries
        """
        primary = locale or self._locale
        candidates = (primary, self._fallback) if fallback else (primary,)
        # dict.fromkeys() removes duplicates while maintaining insertion order
        return tuple(dict.fromkeys(c for c in candidates if c))

    def get(
        self,
        key: str,
        params: Params | None = None,
        locale: str | None = None,
        fallback: bool = True,
    ) -> str | Mapping[str, LineValue]:
        """Resolve a key to its translation.

        Args:
            key: Raw key ("group.item" or "namespace::group.item")
            params: Placeholder values for string lines
            locale: Locale to resolve in; the default locale when None
            fallback: Whether to consult the fallback locale

        Returns:
            Translated string with placeholders substituted, a read-only
            mapping when the key addresses a group of lines, or the key
            itself when no locale in the chain has a translation

        Raises:
            MalformedKeyError: If the key cannot be parsed
        """
        parsed = parse_key(key)
        chain = self.locale_chain(locale, fallback)

        for candidate in chain:
            line = self._get_line(parsed, candidate, params)
            if line is not None:
                if candidate != chain[0]:
                    logger.debug("Resolved '%s' from fallback locale '%s'", key, candidate)
                return line

        logger.debug("No translation for '%s' in %s", key, chain)
        return key

    def _get_line(
        self, key: TranslationKey, locale: str, params: Params | None
    ) -> str | Mapping[str, LineValue] | None:
        """Look an item up in one locale; None when it is not a hit."""
        value = get_path(self._line_set(key.namespace, key.group, locale), key.item)
        if not is_hit(value):
            return None
        if isinstance(value, str):
            return make_replacements(value, params)
        return freeze(value)  # type: ignore[arg-type]

    def has(self, key: str, locale: str | None = None, fallback: bool = True) -> bool:
        """Whether a translation exists for key.

        A translation whose text equals its own key is indistinguishable from
        a missing one and reports False.
        """
        return self.get(key, {}, locale, fallback) != key

    def has_for_locale(self, key: str, locale: str | None = None) -> bool:
        """Whether a translation exists without consulting the fallback."""
        return self.has(key, locale, fallback=False)

    def get_from_json(
        self,
        key: str,
        params: Params | None = None,
        locale: str | None = None,
    ) -> str | Mapping[str, LineValue]:
        """Resolve a key against the flat JSON lines first.

        JSON keys are usually the source-language text itself ("Log out").
        When the flat lines of the locale lack the key, regular resolution
        is attempted; keys that are not 'group.item' shaped skip that step.

        Args:
            key: JSON key, or a regular key
            params: Placeholder values
            locale: Locale to resolve in; the default locale when None

        Returns:
            Translated line, the regular resolution result, or the key with
            placeholders substituted
        """
        locale = locale or self._locale
        line = self._line_set(WILDCARD, WILDCARD, locale).get(key)

        if not isinstance(line, str) or not line:
            try:
                resolved = self.get(key, params, locale)
            except MalformedKeyError:
                resolved = key
            if resolved != key:
                return resolved
            line = key

        return make_replacements(line, params)

    def choice(
        self,
        key: str,
        count: Count | Sized,
        params: Params | None = None,
        locale: str | None = None,
    ) -> str:
        """Resolve a key and select the plural variant for count.

        The count is available to the line as ":count". Sized collections
        are counted with len().

        Args:
            key: Raw key of a pipe-delimited plural line
            count: Number (or collection) being pluralized
            params: Placeholder values
            locale: Locale to resolve in; the default locale when None

        Returns:
            Selected variant with placeholders substituted, or the key when
            it resolves to a group of lines
        """
        locale = locale or self._locale
        line = self.get(key, params, locale)

        if isinstance(count, Sized):
            count = len(count)

        if not isinstance(line, str):
            logger.warning("Cannot pluralize '%s': key addresses a group of lines", key)
            return key

        replacements = {**(params or {}), COUNT_PARAMETER: count}
        return make_replacements(self._selector.choose(line, count, locale), replacements)

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    def _line_set(self, namespace: str, group: str, locale: str) -> LineSet:
        """Return the cached line set, loading it on first access."""
        cache_key = (namespace, group, locale)
        lines = self._loaded.get(cache_key)
        if lines is not None:
            return lines

        logger.debug("Loading lines for %s::%s (%s)", namespace, group, locale)
        loaded = self._loader.load(locale, group, namespace)
        with self._lock:
            return self._loaded.setdefault(cache_key, loaded)

    def load(self, namespace: str, group: str, locale: str) -> None:
        """Ensure the (namespace, group, locale) line set is cached.

        No-op when already cached, including when the earlier load was
        empty.
        """
        self._line_set(namespace, group, locale)

    def is_loaded(self, namespace: str, group: str, locale: str) -> bool:
        """Whether the (namespace, group, locale) line set is cached."""
        return (namespace, group, locale) in self._loaded

    def add_lines(
        self,
        lines: Mapping[str, LineValue],
        locale: str,
        namespace: str = WILDCARD,
    ) -> None:
        """Inject lines into the cache without going through the loader.

        Keys are "group.item" (item may be a dot path). Each touched line set
        counts as loaded afterwards, so the loader is not consulted for it.
        Values are copied, so later changes to lines do not reach the cache.

        Args:
            lines: Mapping of "group.item" keys to lines
            locale: Locale the lines belong to
            namespace: Namespace the lines belong to

        Raises:
            MalformedKeyError: If a key has no 'group.item' part
        """
        with self._lock:
            for raw, value in lines.items():
                group, item = split_group_item(raw, raw)
                cache_key = (namespace, group, locale)
                self._loaded[cache_key] = set_path(
                    self._loaded.get(cache_key, {}), item, freeze(value)
                )

        logger.debug("Added %d lines for %s (%s)", len(lines), namespace, locale)

    def flush(self) -> None:
        """Drop every cached line set; the next lookups reload from the loader."""
        with self._lock:
            count = len(self._loaded)
            self._loaded = {}
        logger.debug("Flushed %d cached line sets", count)
