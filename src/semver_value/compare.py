# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: numeric identifiers compare numerically, alphanumeric
identifiers compare as strings, numeric < alphanumeric, and more identifiers
win when the shared ones tie. Any pre-release < release.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Iterable, Union

from .version import Version, coerce_version, versions_from


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-10", "1.0.0-2")
        1
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
    """
    return coerce_version(version1).compare_to(coerce_version(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    The key orders exactly as ``compare_versions`` does.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return coerce_version(version).sort_key()


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Version]:
    """Return the versions as Version objects in precedence order.

    Versions of equal precedence (differing only in build metadata) keep
    their input order.
    """
    return sorted(versions_from(versions), reverse=reverse)


def max_version(versions: Iterable[Union[str, Version]]) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If ``versions`` is empty
        InvalidVersionError: If any version string is invalid
    """
    candidates = versions_from(versions)
    if not candidates:
        raise ValueError("max_version() arg is an empty iterable")
    return max(candidates)
