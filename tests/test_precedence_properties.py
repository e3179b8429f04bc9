# SPDX-License-Identifier: MIT
"""Property-based tests for parsing and precedence.

These tests verify that:
- Every generated valid version round-trips through str() and parse()
- parse() and SEMVER_PATTERN accept exactly the same strings
- compare() is reflexive, antisymmetric, transitive and total
- Build metadata never changes precedence
"""

from __future__ import annotations

from hypothesis import assume, given, strategies as st

from semver_precedence import (
    SEMVER_PATTERN,
    Ordering,
    Version,
    classify,
    compare,
    is_valid_semver,
    parse,
    precedes,
    sort_versions,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=10**12)
small_numbers = st.integers(min_value=0, max_value=3)

# Small alphabets make equal prefixes and ties likely
alphanumeric_texts = st.from_regex(r"[0-9]{0,2}[a-cA-C-][0-9a-cA-C-]{0,3}", fullmatch=True)
build_identifiers = st.from_regex(r"[0-9a-zA-Z-]{1,6}", fullmatch=True)


@st.composite
def prerelease_identifiers(draw):
    if draw(st.booleans()):
        return classify(str(draw(small_numbers)))
    return classify(draw(alphanumeric_texts))


@st.composite
def versions(draw):
    """Generate a valid Version with small, collision-prone components."""
    return Version(
        major=draw(small_numbers),
        minor=draw(small_numbers),
        patch=draw(small_numbers),
        prerelease=tuple(draw(st.lists(prerelease_identifiers(), max_size=3))),
        build=tuple(draw(st.lists(build_identifiers, max_size=2))),
    )


@st.composite
def version_strings(draw):
    major, minor, patch = draw(numbers), draw(numbers), draw(numbers)
    text = f"{major}.{minor}.{patch}"
    prerelease = draw(st.lists(prerelease_identifiers(), max_size=4))
    if prerelease:
        text += "-" + ".".join(str(ident) for ident in prerelease)
    build = draw(st.lists(build_identifiers, max_size=3))
    if build:
        text += "+" + ".".join(build)
    return text


# Mostly near-miss strings built from the version alphabet
near_misses = st.text(alphabet="0123456789.-+abZ_ ", max_size=16)


# =============================================================================
# Parsing properties
# =============================================================================


class TestParseProperties:
    """Properties of parse()."""

    @given(version_strings())
    def test_valid_strings_round_trip(self, raw):
        """str(parse(raw)) reproduces the input exactly."""
        result = parse(raw)
        assert isinstance(result, Version)
        assert str(result) == raw

    @given(versions())
    def test_str_parses_back_to_same_value(self, version):
        assert parse(str(version)) == version

    @given(st.one_of(near_misses, st.text(max_size=12), version_strings()))
    def test_parser_agrees_with_pattern(self, raw):
        assert is_valid_semver(raw) == (SEMVER_PATTERN.fullmatch(raw) is not None)


# =============================================================================
# Ordering properties
# =============================================================================


class TestOrderingProperties:
    """Properties of compare()."""

    @given(versions())
    def test_reflexive(self, a):
        assert compare(a, a) is Ordering.EQUAL

    @given(versions(), versions())
    def test_antisymmetric(self, a, b):
        assert compare(a, b) is compare(b, a).reverse()

    @given(versions(), versions())
    def test_exactly_one_relation_holds(self, a, b):
        relations = [precedes(a, b), compare(a, b) is Ordering.EQUAL, precedes(b, a)]
        assert relations.count(True) == 1

    @given(versions(), versions(), versions())
    def test_transitive(self, a, b, c):
        ordered = sort_versions([a, b, c])
        assert compare(ordered[0], ordered[2]) is not Ordering.GREATER
        if precedes(a, b) and precedes(b, c):
            assert precedes(a, c)

    @given(versions(), st.lists(build_identifiers, max_size=2))
    def test_build_never_affects_precedence(self, a, build):
        other = Version(a.major, a.minor, a.patch, a.prerelease, tuple(build))
        assert compare(a, other) is Ordering.EQUAL

    @given(versions(), versions())
    def test_prerelease_below_release(self, a, b):
        assume(a.is_prerelease)
        release = Version(a.major, a.minor, a.patch, (), b.build)
        assert precedes(a, release)

    @given(st.lists(versions(), max_size=6))
    def test_sort_key_matches_compare(self, items):
        ordered = sorted(items, key=version_key)
        for lower, higher in zip(ordered, ordered[1:]):
            assert not precedes(higher, lower)
