"""Tests for lines.py - dot-path access over nested line sets."""

from __future__ import annotations

import pytest
from hypothesis import given

from phrasebook.lines import MISSING, freeze, get_path, is_hit, merge_recursive, set_path
from tests.strategies import line_sets


class TestGetPath:
    """Test get_path() lookups."""

    def test_top_level_item(self) -> None:
        assert get_path({"welcome": "Hi"}, "welcome") == "Hi"

    def test_nested_item(self) -> None:
        assert get_path({"errors": {"not_found": "Nope"}}, "errors.not_found") == "Nope"

    def test_literal_dotted_key_wins(self) -> None:
        """Flat sources with dotted keys resolve before nesting is walked."""
        lines = {"errors.not_found": "flat", "errors": {"not_found": "nested"}}

        assert get_path(lines, "errors.not_found") == "flat"

    def test_missing_item(self) -> None:
        assert get_path({"welcome": "Hi"}, "goodbye") is MISSING

    def test_path_through_string_is_missing(self) -> None:
        """A string cannot be descended into."""
        assert get_path({"welcome": "Hi"}, "welcome.extra") is MISSING

    def test_returns_subtree(self) -> None:
        assert get_path({"nav": {"home": "Home"}}, "nav") == {"home": "Home"}

    def test_empty_string_is_returned(self) -> None:
        """Empty strings are stored values, not misses."""
        assert get_path({"empty": ""}, "empty") == ""

    def test_missing_repr(self) -> None:
        assert repr(MISSING) == "MISSING"


class TestSetPath:
    """Test set_path() path copying."""

    def test_sets_top_level(self) -> None:
        assert set_path({}, "welcome", "Hi") == {"welcome": "Hi"}

    def test_creates_intermediate_mappings(self) -> None:
        assert set_path({}, "a.b.c", "x") == {"a": {"b": {"c": "x"}}}

    def test_source_untouched(self) -> None:
        source = {"nav": {"home": "Home"}}

        result = set_path(source, "nav.back", "Back")

        assert source == {"nav": {"home": "Home"}}
        assert result == {"nav": {"home": "Home", "back": "Back"}}

    def test_siblings_are_shared(self) -> None:
        """Only mappings along the path are copied."""
        errors = {"not_found": "Nope"}
        source = {"errors": errors, "nav": {"home": "Home"}}

        result = set_path(source, "nav.home", "Start")

        assert result["errors"] is errors

    def test_replaces_string_in_the_way(self) -> None:
        assert set_path({"nav": "flat"}, "nav.home", "Home") == {"nav": {"home": "Home"}}

    @given(lines=line_sets())
    def test_set_then_get(self, lines: dict[str, object]) -> None:
        """A value stored at a fresh path is returned by get_path."""
        result = set_path(lines, "zz_new.item", "value")  # type: ignore[arg-type]

        assert get_path(result, "zz_new.item") == "value"


class TestMergeRecursive:
    """Test merge_recursive() override semantics."""

    def test_override_replaces_strings(self) -> None:
        assert merge_recursive({"a": "1"}, {"a": "2"}) == {"a": "2"}

    def test_base_only_keys_kept(self) -> None:
        assert merge_recursive({"a": "1", "b": "2"}, {"a": "3"}) == {"a": "3", "b": "2"}

    def test_nested_mappings_merge(self) -> None:
        base = {"labels": {"total": "Total", "tax": "Tax"}}
        override = {"labels": {"total": "Grand total"}}

        assert merge_recursive(base, override) == {
            "labels": {"total": "Grand total", "tax": "Tax"}
        }

    def test_mapping_replaces_string(self) -> None:
        assert merge_recursive({"a": "flat"}, {"a": {"b": "x"}}) == {"a": {"b": "x"}}

    def test_inputs_untouched(self) -> None:
        base = {"a": {"x": "1"}}
        override = {"a": {"y": "2"}}

        merge_recursive(base, override)

        assert base == {"a": {"x": "1"}}
        assert override == {"a": {"y": "2"}}

    @given(lines=line_sets())
    def test_merge_with_empty_is_identity(self, lines: dict[str, object]) -> None:
        assert merge_recursive(lines, {}) == lines  # type: ignore[arg-type]
        assert merge_recursive({}, lines) == lines  # type: ignore[arg-type]


class TestFreeze:
    """Test freeze() read-only deep copies."""

    def test_strings_pass_through(self) -> None:
        assert freeze("Hello") == "Hello"

    def test_nested_levels_read_only(self) -> None:
        frozen = freeze({"a": {"b": {"c": "1"}}})

        with pytest.raises(TypeError):
            frozen["a"]["b"]["c"] = "2"  # type: ignore[index]

    def test_detached_from_source(self) -> None:
        source = {"a": {"b": "1"}}
        frozen = freeze(source)
        source["a"]["b"] = "2"

        assert frozen == {"a": {"b": "1"}}

    @given(lines=line_sets())
    def test_equal_to_source(self, lines: dict[str, object]) -> None:
        assert freeze(lines) == lines  # type: ignore[arg-type]


class TestIsHit:
    """Test is_hit() classification."""

    def test_non_empty_string(self) -> None:
        assert is_hit("Hi")

    def test_empty_string(self) -> None:
        assert not is_hit("")

    def test_non_empty_mapping(self) -> None:
        assert is_hit({"a": "b"})

    def test_empty_mapping(self) -> None:
        assert not is_hit({})

    def test_missing(self) -> None:
        assert not is_hit(MISSING)

    def test_foreign_types(self) -> None:
        """Numbers and lists decoded from JSON are not translations."""
        assert not is_hit(3)
        assert not is_hit(["a"])
        assert not is_hit(None)
