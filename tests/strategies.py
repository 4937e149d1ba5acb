"""Hypothesis strategies for phrasebook property-based testing.

Provides reusable strategies for generating:
- Raw translation keys (plain and namespaced)
- Placeholder names and parameter mappings
- Nested line sets

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

    from phrasebook.lines import LineValue

# Key segments: identifier-like, no separators.
_SEGMENT_CHARS = string.ascii_lowercase + string.digits + "_"

segments: SearchStrategy[str] = st.text(alphabet=_SEGMENT_CHARS, min_size=1, max_size=12)

# Locales used in translator property tests.
locales: SearchStrategy[str] = st.sampled_from(["en", "lv", "de", "ru", "pl", "ar", "fr", "ja"])


@st.composite
def raw_keys(draw: DrawFn) -> str:
    """Generate valid raw keys: [namespace::]group.item[.sub...].

    Events emitted:
    - key_namespaced=yes|no
    - key_depth=N (number of item segments)
    """
    group = draw(segments)
    item = draw(st.lists(segments, min_size=1, max_size=3))
    namespaced = draw(st.booleans())
    event(f"key_namespaced={'yes' if namespaced else 'no'}")
    event(f"key_depth={len(item)}")
    raw = f"{group}.{'.'.join(item)}"
    if namespaced:
        raw = f"{draw(segments)}::{raw}"
    return raw


# Placeholder names are letters only so case variants are distinguishable.
placeholder_names: SearchStrategy[str] = st.text(
    alphabet=string.ascii_lowercase, min_size=1, max_size=10
)

# Values without ":" cannot introduce new placeholders during substitution.
placeholder_values: SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_characters=":", blacklist_categories=("Cs",)),
    max_size=20,
)


def line_values(max_leaves: int = 10) -> SearchStrategy[LineValue]:
    """Generate nested line values: strings or mappings of line values."""
    return st.recursive(
        st.text(max_size=15),
        lambda children: st.dictionaries(segments, children, max_size=4),
        max_leaves=max_leaves,
    )


def line_sets(max_leaves: int = 10) -> SearchStrategy[dict[str, LineValue]]:
    """Generate nested line sets."""
    return st.dictionaries(segments, line_values(max_leaves), max_size=5)
