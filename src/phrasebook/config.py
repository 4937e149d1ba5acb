"""Translator configuration.

Provides a single frozen dataclass describing where translations live and
which locales a Translator starts with, plus environment-based construction
for applications that configure through the process environment.

Environment variables read by TranslatorConfig.from_environment():

    PHRASEBOOK_PATH              primary translation directory (required)
    PHRASEBOOK_LOCALE            default locale (system locale if unset)
    PHRASEBOOK_FALLBACK_LOCALE   fallback locale (none if unset)
    PHRASEBOOK_JSON_PATHS        extra flat JSON directories, os.pathsep-separated

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from phrasebook.locale_utils import get_system_locale

__all__ = ["ENV_FALLBACK_LOCALE", "ENV_JSON_PATHS", "ENV_LOCALE", "ENV_PATH", "TranslatorConfig"]

logger = logging.getLogger(__name__)

ENV_PATH = "PHRASEBOOK_PATH"
ENV_LOCALE = "PHRASEBOOK_LOCALE"
ENV_FALLBACK_LOCALE = "PHRASEBOOK_FALLBACK_LOCALE"
ENV_JSON_PATHS = "PHRASEBOOK_JSON_PATHS"


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable configuration for Translator.from_config().

    Attributes:
        path: Primary translation directory ({path}/{locale}/{group}.json)
        locale: Default locale
        fallback_locale: Locale consulted when the default lacks a line
        json_paths: Extra directories of {locale}.json files, lowest priority first
        namespaces: Namespace name -> translation directory

    Example:
        >>> config = TranslatorConfig("lang", "lv", fallback_locale="en")
        >>> translator = Translator.from_config(config)
        >>> translator.fallback
        'en'
    """

    path: Path
    locale: str
    fallback_locale: str | None = None
    json_paths: tuple[Path, ...] = ()
    namespaces: Mapping[str, Path] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate and normalize configuration values.

        Raises:
            ValueError: If locale is empty or fallback_locale is an empty string
        """
        if not self.locale:
            msg = "locale must be a non-empty locale code"
            raise ValueError(msg)
        if self.fallback_locale == "":
            msg = "fallback_locale must be None or a non-empty locale code"
            raise ValueError(msg)

        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "json_paths", tuple(Path(p) for p in self.json_paths))
        object.__setattr__(
            self,
            "namespaces",
            MappingProxyType({name: Path(hint) for name, hint in self.namespaces.items()}),
        )

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> TranslatorConfig:
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            TranslatorConfig

        Raises:
            ValueError: If PHRASEBOOK_PATH is not set
        """
        env = os.environ if environ is None else environ

        path = env.get(ENV_PATH)
        if not path:
            msg = f"{ENV_PATH} must point at the translation directory"
            raise ValueError(msg)

        locale = env.get(ENV_LOCALE) or get_system_locale()
        fallback = env.get(ENV_FALLBACK_LOCALE) or None
        json_paths: Iterable[str] = filter(None, env.get(ENV_JSON_PATHS, "").split(os.pathsep))

        config = cls(
            path=Path(path),
            locale=locale,
            fallback_locale=fallback,
            json_paths=tuple(Path(p) for p in json_paths),
        )
        logger.info(
            "Configured translations from environment: path=%s locale=%s fallback=%s",
            config.path,
            config.locale,
            config.fallback_locale,
        )
        return config
