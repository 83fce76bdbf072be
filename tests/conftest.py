"""Hypothesis strategies and profiles shared by the opal test suite."""

from __future__ import annotations

import os

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from opal.collect.property_set import PropertySet

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


# ===================================================================
# PROPERTY SET STRATEGIES
# ===================================================================


def property_keys() -> SearchStrategy[str]:
    """Short dotted key names, e.g. ``curve.name``."""
    return st.from_regex(r"[a-z]{1,6}(\.[a-z]{1,6}){0,2}", fullmatch=True)


def property_values() -> SearchStrategy[str]:
    """Any short text, empty string included."""
    return st.text(max_size=12)


def single_value_maps(max_size: int = 6) -> SearchStrategy[dict[str, str]]:
    return st.dictionaries(property_keys(), property_values(), max_size=max_size)


def multi_value_maps(max_size: int = 6) -> SearchStrategy[dict[str, list[str]]]:
    """Key to non-empty value lists."""
    return st.dictionaries(
        property_keys(),
        st.lists(property_values(), min_size=1, max_size=4),
        max_size=max_size,
    )


@st.composite
def property_sets(draw: st.DrawFn, max_size: int = 6) -> PropertySet:
    return PropertySet.of_multi(draw(multi_value_maps(max_size=max_size)))
