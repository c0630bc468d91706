# SPDX-License-Identifier: MIT
"""Precedence rules for semantic version identifiers.

Implements the ordering half of SemVer 2.0.0 section 11:

1. major, minor and patch compare numerically.
2. A version without pre-release identifiers outranks one that has them.
3. Pre-release identifiers compare left to right. Numeric identifiers compare
   numerically, numeric identifiers rank below alphanumeric ones, and
   alphanumeric identifiers compare as plain strings.
4. When every shared identifier ties, the longer list wins.

Build metadata never takes part.
"""

from __future__ import annotations

from typing import Sequence

_DIGITS = frozenset("0123456789")


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the identifier consists only of ASCII digits."""
    return bool(identifier) and all(ch in _DIGITS for ch in identifier)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _numeric_key(identifier: str) -> tuple[int, str]:
    # Orders digit strings by value; int() is limited by sys.get_int_max_str_digits().
    digits = identifier.lstrip("0")
    return (len(digits), digits)


def compare_identifiers(a: str, b: str) -> int:
    """Compare two pre-release identifiers.

    Returns -1, 0 or 1. Identifiers with the same numeric value but
    different spelling (``"01"`` and ``"1"``) are ordered by their text.
    """
    if a == b:
        return 0

    a_numeric = is_numeric_identifier(a)
    b_numeric = is_numeric_identifier(b)

    if a_numeric and b_numeric:
        return _cmp(_numeric_key(a), _numeric_key(b)) or _cmp(a, b)
    if a_numeric:
        # Numeric < alphanumeric
        return -1
    if b_numeric:
        return 1
    return _cmp(a, b)


def compare_prerelease(pre1: Sequence[str], pre2: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    An empty sequence means "no pre-release" and outranks any non-empty one.
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1

    for p1, p2 in zip(pre1, pre2):
        result = compare_identifiers(p1, p2)
        if result:
            return result

    # All shared identifiers equal - longer list has higher precedence
    return _cmp(len(pre1), len(pre2))


def compare_precedence(
    core1: tuple[int, int, int],
    pre1: Sequence[str],
    core2: tuple[int, int, int],
    pre2: Sequence[str],
) -> int:
    """Compare two versions given as (major, minor, patch) and pre-release."""
    for val1, val2 in zip(core1, core2):
        if val1 != val2:
            return -1 if val1 < val2 else 1
    return compare_prerelease(pre1, pre2)


def _identifier_key(identifier: str) -> tuple:
    if is_numeric_identifier(identifier):
        return (0, _numeric_key(identifier), identifier)
    return (1, (0, ""), identifier)


def precedence_key(core: tuple[int, int, int], prerelease: Sequence[str]) -> tuple:
    """Return a tuple that sorts the same way ``compare_precedence`` does.

    Releases get ``(1,)`` so they sort after every pre-release of the same
    core. Tuple comparison already ranks a shorter prefix below a longer
    sequence, which matches the "more identifiers wins" rule.
    """
    if not prerelease:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(_identifier_key(part) for part in prerelease))
    return (*core, prerelease_key)
