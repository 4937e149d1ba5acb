"""Tests for locale_utils.py.

Covers normalize_locale, get_language, get_babel_locale and
get_system_locale. Includes property-based tests for normalization.

Python 3.13+.
"""

import os
import string
from unittest.mock import patch

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from phrasebook.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    get_language,
    get_system_locale,
    normalize_locale,
)

_CODE_ALPHABET = string.ascii_letters + "-_"


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_posix_unchanged(self) -> None:
        assert normalize_locale("pt_BR") == "pt_BR"

    def test_language_only(self) -> None:
        assert normalize_locale("lv") == "lv"

    def test_multiple_subtags(self) -> None:
        assert normalize_locale("sr-Latn-RS") == "sr_Latn_RS"

    @given(st.text(alphabet=_CODE_ALPHABET, max_size=12))
    def test_no_hyphens_remain(self, code: str) -> None:
        """Normalized codes never contain hyphens and keep their length."""
        event(f"has_hyphen={'-' in code}")
        result = normalize_locale(code)

        assert "-" not in result
        assert len(result) == len(code)


class TestGetLanguage:
    """Test get_language function."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en", "en"), ("pt-BR", "pt"), ("sr_Latn_RS", "sr"), ("DE_de", "de")],
    )
    def test_language_subtag(self, code: str, expected: str) -> None:
        assert get_language(code) == expected


class TestGetBabelLocale:
    """Test get_babel_locale caching and parsing."""

    def test_returns_locale(self) -> None:
        result = get_babel_locale("en-US")

        assert isinstance(result, Locale)
        assert result.language == "en"
        assert result.territory == "US"

    def test_cached(self) -> None:
        assert get_babel_locale("lv_LV") is get_babel_locale("lv_LV")

    def test_clear_cache(self) -> None:
        get_babel_locale("de")
        clear_locale_cache()

        assert get_babel_locale.cache_info().currsize == 0

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises((UnknownLocaleError, ValueError)):
            get_babel_locale("xx_UNKNOWN")


class TestGetSystemLocale:
    """Test get_system_locale with environment and OS detection."""

    def test_getlocale_success(self) -> None:
        with patch("locale.getlocale", return_value=("en_US", "UTF-8")):
            assert get_system_locale() == "en_US"

    def test_getlocale_with_encoding(self) -> None:
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de_DE"

    @pytest.mark.parametrize("pseudo", ["C", "POSIX"])
    def test_pseudo_locales_ignored(self, pseudo: str) -> None:
        with patch("locale.getlocale", return_value=(pseudo, None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "fr_FR"}, clear=True):
                assert get_system_locale() == "fr_FR"

    def test_getlocale_error_falls_back_to_env(self) -> None:
        with patch("locale.getlocale", side_effect=ValueError("mock error")):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "pt_BR.UTF-8"}, clear=True):
                assert get_system_locale() == "pt_BR"

    def test_lc_all_priority(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_ALL": "de_DE", "LC_MESSAGES": "fr_FR", "LANG": "en_US"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "de_DE"

    def test_lc_messages_before_lang(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_MESSAGES": "fr_FR", "LANG": "en_US"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "fr_FR"

    def test_default_when_nothing_detected(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "C"}, clear=True):
                assert get_system_locale() == "en_US"

    def test_raise_on_failure(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, {}, clear=True):
                with pytest.raises(RuntimeError, match="Could not determine system locale"):
                    get_system_locale(raise_on_failure=True)
