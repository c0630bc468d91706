# SPDX-License-Identifier: MIT
"""Immutable semantic version numbers.

This package provides a SemVer 2.0.0 version value type with parsing,
canonical formatting, precedence comparison and increment helpers.

Example:
    >>> from semver_value import Version, compare_versions
    >>>
    >>> current = Version(1, 0, 3)
    >>> latest = Version.parse("2.1.0")
    >>> latest > current
    True
    >>> Version(2, 1, 0, prerelease=["beta"]) > latest
    False
    >>> str(latest.increment_minor())
    '2.2.0'
    >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    VersionArgumentError,
    InvalidVersionError,
)
from .version import (
    Version,
    parse_version,
    is_valid_version,
    VERSION_PATTERN,
    PRERELEASE_SEGMENT_PATTERN,
    BUILD_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    max_version,
)

__all__ = [
    # Errors
    "VersionError",
    "VersionArgumentError",
    "InvalidVersionError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "VERSION_PATTERN",
    "PRERELEASE_SEGMENT_PATTERN",
    "BUILD_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
]
