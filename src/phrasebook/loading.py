"""Translation source loading.

Provides the protocol the translator consumes, a filesystem implementation
and an in-memory implementation.

Components:
    Loader       - Protocol for loading line sets (structural typing)
    FileLoader   - JSON files on disk, namespace hints, vendor overrides
    MemoryLoader - Dict-backed loader for tests and runtime registration

Disk layout understood by FileLoader:

    {path}/{locale}/{group}.json                         application groups
    {hint}/{locale}/{group}.json                         namespaced groups
    {path}/vendor/{namespace}/{locale}/{group}.json      namespace overrides
    {json_path}/{locale}.json                            flat JSON lines

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from phrasebook.constants import (
    FLAT_FILE_SUFFIX,
    GROUP_FILE_SUFFIX,
    SOURCE_ENCODING,
    VENDOR_DIRECTORY,
    WILDCARD,
)
from phrasebook.errors import InvalidTranslationSourceError
from phrasebook.lines import LineSet, LineValue, merge_recursive

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "Loader",
    # Concrete loaders
    "FileLoader",
    "MemoryLoader",
]

logger = logging.getLogger(__name__)


class Loader(Protocol):
    """Protocol for loading translation line sets.

    This is a Protocol (structural typing) rather than ABC so applications
    can plug in database- or network-backed loaders without inheriting.

    Contract:
        - load() returns an empty mapping, never raises, when the source
          does not exist.
        - group == "*" and namespace == "*" asks for the merged flat JSON
          lines of the locale.
    """

    def load(self, locale: str, group: str, namespace: str | None = None) -> LineSet:
        """Load the lines of one group for one locale.

        Args:
            locale: Locale code (e.g., 'en', 'pt_BR')
            group: Group name, or "*" for flat JSON lines
            namespace: Namespace name; None or "*" for application lines

        Returns:
            Mapping of item keys to strings or nested mappings
        """

    def add_namespace(self, namespace: str, hint: str | Path) -> None:
        """Register where a namespace's sources live."""

    def add_json_path(self, path: str | Path) -> None:
        """Register an additional flat JSON source directory."""

    def namespaces(self) -> Mapping[str, str | Path]:
        """Return registered namespace hints."""


def _segment_problem(kind: str, value: str) -> str | None:
    """Describe why a path component could escape the source directory."""
    if not value:
        return f"{kind} cannot be empty"
    if ".." in value:
        return f"Path traversal sequences not allowed in {kind}: '{value}'"
    if "/" in value or "\\" in value:
        return f"Path separators not allowed in {kind}: '{value}'"
    return None


def _validate_segment(kind: str, value: str) -> None:
    """Reject path components that could escape the source directory.

    Raises:
        ValueError: If value is empty or contains traversal sequences/separators
    """
    msg = _segment_problem(kind, value)
    if msg is not None:
        raise ValueError(msg)


def _read_json_object(path: Path) -> dict[str, LineValue] | None:
    """Decode a JSON object file.

    Returns:
        Decoded mapping, or None if the file does not exist

    Raises:
        InvalidTranslationSourceError: If the file is not UTF-8 or not a JSON object
        OSError: If the file exists but cannot be read
    """
    try:
        text = path.read_text(encoding=SOURCE_ENCODING)
    except FileNotFoundError:
        return None
    except UnicodeDecodeError as e:
        raise InvalidTranslationSourceError(path, str(e)) from e

    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidTranslationSourceError(path, str(e)) from e

    if not isinstance(decoded, dict):
        raise InvalidTranslationSourceError(
            path, f"expected a JSON object, got {type(decoded).__name__}"
        )

    logger.debug("Loaded %d lines from %s", len(decoded), path)
    return decoded


class FileLoader:
    """Loader reading JSON translation files from disk.

    Missing files are treated as absent sources and produce empty mappings.
    Other I/O failures (permissions, a directory where a file is expected)
    propagate unchanged.

    Security:
        The locale is validated before being joined into a path: empty
        values, ".." and path separators raise ValueError. Groups and
        namespaces come from translation keys, so unsafe ones are treated
        as absent sources and never reach the filesystem.

    Example:
        >>> loader = FileLoader("lang")
        >>> loader.load("en", "messages")
        # Reads: lang/en/messages.json
        >>> loader.add_namespace("billing", "vendor_pkg/lang")
        >>> loader.load("en", "invoice", "billing")
        # Reads: vendor_pkg/lang/en/invoice.json,
        # then merges lang/vendor/billing/en/invoice.json over it

    Attributes:
        path: Primary translation directory
    """

    __slots__ = ("_hints", "_json_paths", "path")

    def __init__(self, path: str | Path) -> None:
        """Initialize file loader.

        Args:
            path: Primary translation directory
        """
        self.path = Path(path)
        self._json_paths: list[Path] = []
        self._hints: dict[str, Path] = {}

    def __repr__(self) -> str:
        return (
            f"FileLoader(path={str(self.path)!r}, "
            f"json_paths={len(self._json_paths)}, "
            f"namespaces={sorted(self._hints)})"
        )

    def load(self, locale: str, group: str, namespace: str | None = None) -> LineSet:
        """Load the lines of one group for one locale.

        Args:
            locale: Locale code
            group: Group name, or "*" (with namespace "*") for flat JSON lines
            namespace: Namespace name; None or "*" for application lines

        Returns:
            Decoded lines, or an empty mapping if no source exists or the
            group or namespace is not a safe path component

        Raises:
            ValueError: If the locale contains path traversal sequences
            InvalidTranslationSourceError: If a source file is malformed
        """
        _validate_segment("locale", locale)

        if group == WILDCARD and namespace == WILDCARD:
            return self._load_json_paths(locale)

        problem = _segment_problem("group", group)
        if problem is None and namespace is not None and namespace != WILDCARD:
            problem = _segment_problem("namespace", namespace)
        if problem is not None:
            logger.debug("Skipping unloadable source: %s", problem)
            return {}

        if namespace is None or namespace == WILDCARD:
            return self._load_path(self.path, locale, group)

        return self._load_namespaced(locale, group, namespace)

    def _load_namespaced(self, locale: str, group: str, namespace: str) -> LineSet:
        """Load a namespaced group and apply application overrides."""
        hint = self._hints.get(namespace)
        if hint is None:
            logger.debug("Namespace '%s' has no registered hint", namespace)
            return {}

        lines = self._load_path(hint, locale, group)
        return self._load_namespace_overrides(lines, locale, group, namespace)

    def _load_namespace_overrides(
        self, lines: LineSet, locale: str, group: str, namespace: str
    ) -> LineSet:
        """Merge {path}/vendor/{namespace}/{locale}/{group}.json over lines."""
        override_file = (
            self.path / VENDOR_DIRECTORY / namespace / locale / f"{group}{GROUP_FILE_SUFFIX}"
        )
        overrides = _read_json_object(override_file)
        if overrides is None:
            return lines

        logger.debug("Applying overrides for %s::%s (%s)", namespace, group, locale)
        return merge_recursive(lines, overrides)

    @staticmethod
    def _load_path(path: Path, locale: str, group: str) -> LineSet:
        """Load {path}/{locale}/{group}.json."""
        lines = _read_json_object(path / locale / f"{group}{GROUP_FILE_SUFFIX}")
        return lines if lines is not None else {}

    def _load_json_paths(self, locale: str) -> LineSet:
        """Merge {json_path}/{locale}.json over all JSON paths.

        Registered paths are merged in registration order and the primary
        path last, so the primary path wins key by key.
        """
        output: dict[str, LineValue] = {}
        for json_path in (*self._json_paths, self.path):
            decoded = _read_json_object(json_path / f"{locale}{FLAT_FILE_SUFFIX}")
            if decoded is not None:
                output.update(decoded)
        return output

    def add_namespace(self, namespace: str, hint: str | Path) -> None:
        """Register the directory holding a namespace's translations.

        Args:
            namespace: Namespace name used in keys ("billing::invoice.title")
            hint: Directory laid out as {hint}/{locale}/{group}.json
        """
        self._hints[namespace] = Path(hint)
        logger.debug("Registered namespace '%s' at %s", namespace, hint)

    def add_json_path(self, path: str | Path) -> None:
        """Register an additional directory of {locale}.json files."""
        self._json_paths.append(Path(path))
        logger.debug("Registered JSON path %s", path)

    def namespaces(self) -> dict[str, Path]:
        """Return a copy of the registered namespace hints."""
        return dict(self._hints)

    def json_paths(self) -> tuple[Path, ...]:
        """Return registered JSON paths in registration order."""
        return tuple(self._json_paths)


class MemoryLoader:
    """Loader serving line sets held in memory.

    Namespaced groups live under their namespace name; the hint passed to
    add_namespace() is recorded for introspection only. Flat JSON lines are
    stored per locale.

    Example:
        >>> loader = MemoryLoader()
        >>> loader.add_messages("en", "messages", {"welcome": "Welcome!"})
        >>> translator = Translator(loader, "en")
        >>> translator.get("messages.welcome")
        'Welcome!'
    """

    __slots__ = ("_groups", "_hints", "_json_lines", "_json_paths")

    def __init__(self) -> None:
        """Initialize an empty memory loader."""
        self._groups: dict[tuple[str, str, str], dict[str, LineValue]] = {}
        self._json_lines: dict[str, dict[str, LineValue]] = {}
        self._hints: dict[str, str | Path] = {}
        self._json_paths: list[str | Path] = []

    def add_messages(
        self,
        locale: str,
        group: str,
        messages: Mapping[str, LineValue],
        namespace: str | None = None,
    ) -> None:
        """Register (or recursively extend) the lines of a group.

        Args:
            locale: Locale code
            group: Group name
            messages: Lines to add; nested mappings merge key by key
            namespace: Namespace name; None for application lines
        """
        triple = (namespace or WILDCARD, group, locale)
        self._groups[triple] = merge_recursive(self._groups.get(triple, {}), messages)

    def add_json_messages(self, locale: str, messages: Mapping[str, LineValue]) -> None:
        """Register flat JSON lines for a locale; later calls override keys."""
        self._json_lines.setdefault(locale, {}).update(messages)

    def load(self, locale: str, group: str, namespace: str | None = None) -> LineSet:
        if group == WILDCARD and namespace == WILDCARD:
            return dict(self._json_lines.get(locale, {}))
        return dict(self._groups.get((namespace or WILDCARD, group, locale), {}))

    def add_namespace(self, namespace: str, hint: str | Path) -> None:
        self._hints[namespace] = hint

    def add_json_path(self, path: str | Path) -> None:
        self._json_paths.append(path)

    def namespaces(self) -> dict[str, str | Path]:
        return dict(self._hints)
