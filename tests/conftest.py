"""Pytest configuration for the phrasebook test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from phrasebook import Translator
from tests.helpers.files import write_json
from tests.helpers.loaders import CountingLoader

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def loader() -> CountingLoader:
    """Memory loader with English and Latvian lines, counting load calls."""
    counting = CountingLoader()
    counting.add_messages(
        "en",
        "messages",
        {
            "welcome": "Welcome, :name!",
            "apples": "one apple|many apples",
            "counted": ":count apple|:count apples",
            "nav": {"home": "Home", "back": "Back"},
            "only_english": "English only",
            "empty": "",
        },
    )
    counting.add_messages(
        "lv",
        "messages",
        {
            "welcome": "Sveiki, :name!",
            "nav": {"home": "Sākums"},
        },
    )
    counting.add_json_messages("en", {"Log out": "Log out", "Hello :name": "Hi :name"})
    counting.add_json_messages("lv", {"Log out": "Iziet"})
    return counting


@pytest.fixture
def translator(loader: CountingLoader) -> Translator:
    """Translator with Latvian default locale and English fallback."""
    return Translator(loader, "lv", fallback="en")


@pytest.fixture
def lang_dir(tmp_path: Path) -> Path:
    """Translation directory with groups, a namespace, overrides and flat JSON.

    Layout:
        lang/en/messages.json
        lang/lv/messages.json
        lang/en.json
        lang/vendor/billing/en/invoice.json      (override)
        billing/en/invoice.json                  (namespace hint target)
        extra/en.json                            (additional JSON path)
    """
    root = tmp_path / "lang"
    write_json(root / "en" / "messages.json", {"welcome": "Welcome!", "nav": {"home": "Home"}})
    write_json(root / "lv" / "messages.json", {"welcome": "Laipni lūdzam!"})
    write_json(root / "en.json", {"Log out": "Sign out", "Shared": "from primary"})
    write_json(
        root / "vendor" / "billing" / "en" / "invoice.json",
        {"labels": {"total": "Grand total"}},
    )
    write_json(
        tmp_path / "billing" / "en" / "invoice.json",
        {"title": "Invoice", "labels": {"total": "Total", "tax": "Tax"}},
    )
    write_json(tmp_path / "extra" / "en.json", {"Shared": "from extra", "Extra only": "Extra"})
    return root
