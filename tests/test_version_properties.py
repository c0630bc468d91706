# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and precedence.

These tests verify that:
- Formatting then parsing reproduces an equal version with the same fields
- Precedence is a total order (trichotomy, antisymmetry, transitivity)
- Sort keys, equality and hashing all agree with the comparator
- A release always outranks its own pre-releases
"""

from __future__ import annotations

from hypothesis import HealthCheck, assume, given, settings, strategies as st

from semver_value import Version, compare_versions
from semver_value.precedence import compare_identifiers


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=20)

# Small pools so that ties and shared prefixes come up often
identifiers = st.one_of(
    st.integers(min_value=0, max_value=12).map(str),
    st.sampled_from(["alpha", "beta", "rc", "a", "0a", "-", "x-1", "01", "Alpha"]),
    st.from_regex(r"[0-9A-Za-z-]{1,6}", fullmatch=True),
)

prereleases = st.lists(identifiers, max_size=4).map(tuple)

builds = st.one_of(
    st.just(""),
    st.from_regex(r"[0-9A-Za-z.-]{1,12}", fullmatch=True),
)


@st.composite
def versions(draw):
    """Generate a valid Version."""
    major = draw(numbers)
    minor = draw(numbers)
    patch = draw(numbers)
    assume(major or minor or patch)
    return Version(
        major, minor, patch, prerelease=draw(prereleases), build=draw(builds)
    )


# =============================================================================
# Properties
# =============================================================================


@given(versions())
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_round_trip(v):
    parsed = Version.parse(str(v))
    assert parsed == v
    assert parsed.prerelease == v.prerelease
    assert parsed.build == v.build


@given(versions(), versions())
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_trichotomy(a, b):
    outcomes = [a < b, a == b, a > b]
    assert outcomes.count(True) == 1


@given(versions(), versions())
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_antisymmetry(a, b):
    assert a.compare_to(b) == -b.compare_to(a)


@given(versions(), versions(), versions())
@settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
def test_transitivity(a, b, c):
    if a < b and b < c:
        assert a < c
    if a == b and b == c:
        assert a == c


@given(versions(), versions())
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_sort_key_agrees_with_comparator(a, b):
    key_a, key_b = a.sort_key(), b.sort_key()
    expected = (key_a > key_b) - (key_a < key_b)
    assert compare_versions(a, b) == expected


@given(versions(), versions())
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_equal_versions_hash_equal(a, b):
    if a == b:
        assert hash(a) == hash(b)


@given(versions(), builds)
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_build_never_affects_precedence(v, build):
    other = Version(v.major, v.minor, v.patch, prerelease=v.prerelease, build=build)
    assert other == v
    assert hash(other) == hash(v)


@given(versions(), st.lists(identifiers, min_size=1, max_size=4))
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_release_outranks_prerelease(v, prerelease):
    release = Version(v.major, v.minor, v.patch)
    candidate = Version(v.major, v.minor, v.patch, prerelease=prerelease)
    assert release > candidate


@given(st.integers(min_value=0, max_value=10**6), st.integers(min_value=0, max_value=10**6))
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_numeric_identifiers_compare_numerically(x, y):
    expected = (x > y) - (x < y)
    assert compare_identifiers(str(x), str(y)) == expected


@given(versions())
@settings(suppress_health_check=[HealthCheck.too_slow])
def test_increments_rank_higher(v):
    assert v.increment_patch() > v
    assert v.increment_minor() > v
    assert v.increment_major() > v
