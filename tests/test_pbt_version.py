# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and ordering.

These tests validate:
- Round-trip: str(parse_version(s)) == s for alphanumeric labels
- Segment count: anything but three segments is rejected
- Build irrelevance: build metadata never affects ordering
- Ordering laws: antisymmetry, consistency with version_key
- Pessimistic reflexivity: every version satisfies ~> itself
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from lexver import (
    MalformedVersionError,
    Ordering,
    Version,
    compare_versions,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

segment = st.from_regex(r"[0-9]{1,3}", fullmatch=True)
label = st.from_regex(r"[a-zA-Z0-9]{1,8}", fullmatch=True)
optional_label = st.one_of(st.just(""), label)


@st.composite
def version_strings(draw) -> str:
    """Generate well-formed version strings with alphanumeric labels."""
    text = f"{draw(segment)}.{draw(segment)}.{draw(segment)}"
    pre = draw(optional_label)
    build = draw(optional_label)
    if pre:
        text += f"-{pre}"
    if build:
        text += f"+{build}"
    return text


versions = version_strings().map(parse_version)


# =============================================================================
# Parsing properties
# =============================================================================


class TestParsingProperties:
    """Round-trip and segment-count properties of parse_version."""

    @given(text=version_strings())
    @settings(max_examples=200)
    def test_round_trip(self, text: str) -> None:
        """Serializing a parsed version reproduces the input."""
        assert str(parse_version(text)) == text

    @given(pieces=st.lists(segment, min_size=0, max_size=8).filter(lambda p: len(p) != 3))
    @settings(max_examples=100)
    def test_wrong_segment_count_rejected(self, pieces: list[str]) -> None:
        """Only strings with exactly two dots parse."""
        with pytest.raises(MalformedVersionError):
            parse_version(".".join(pieces) if pieces else "1")

    @given(major=segment, minor=segment, patch=segment, pre=label, build=label)
    @settings(max_examples=100)
    def test_fields(self, major: str, minor: str, patch: str, pre: str, build: str) -> None:
        """Each field lands where it was written."""
        v = parse_version(f"{major}.{minor}.{patch}-{pre}+{build}")
        assert v == Version(major, minor, patch, pre)
        assert v.build == build


# =============================================================================
# Ordering properties
# =============================================================================


class TestOrderingProperties:
    """Ordering laws of compare_versions."""

    @given(v=versions, build1=label, build2=label)
    @settings(max_examples=100)
    def test_build_irrelevance(self, v: Version, build1: str, build2: str) -> None:
        """Versions differing only in build compare equal."""
        a = Version(v.major, v.minor, v.patch, v.pre, build1)
        b = Version(v.major, v.minor, v.patch, v.pre, build2)
        assert compare_versions(a, b) is Ordering.EQUAL
        assert a.less_than(b) is False
        assert a.greater_than(b) is False

    @given(a=versions, b=versions)
    @settings(max_examples=200)
    def test_antisymmetry(self, a: Version, b: Version) -> None:
        """Swapping the arguments negates the result."""
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(a=versions, b=versions)
    @settings(max_examples=200)
    def test_consistent_with_sort_key(self, a: Version, b: Version) -> None:
        """compare_versions agrees with tuple ordering of version_key."""
        ka, kb = version_key(a), version_key(b)
        expected = Ordering.LESS if ka < kb else Ordering.GREATER if ka > kb else Ordering.EQUAL
        assert compare_versions(a, b) is expected

    @given(a=versions, b=versions)
    @settings(max_examples=100)
    def test_equality_matches_compare(self, a: Version, b: Version) -> None:
        """== holds exactly when compare reports EQUAL."""
        assert (a == b) is (compare_versions(a, b) is Ordering.EQUAL)

    @given(v=versions)
    def test_pessimistic_reflexive(self, v: Version) -> None:
        """Every version satisfies ~> itself."""
        assert v.pessimistic_greater_than(v) is True
