# SPDX-License-Identifier: MIT
"""Exceptions raised by semver_value.

There are two kinds of failure:

- ``VersionArgumentError``: a well-typed value breaks a constraint, such as a
  negative number or the all-zero version ``0.0.0``.
- ``InvalidVersionError``: text does not follow the version grammar, or a
  pre-release segment or build string contains characters that are not allowed.

Both derive from ``VersionError`` and from ``ValueError``.
"""

from __future__ import annotations


class VersionError(Exception):
    """Base class for all version errors."""

    pass


class VersionArgumentError(VersionError, ValueError):
    """Raised when a version component violates a value constraint."""

    pass


class InvalidVersionError(VersionError, ValueError):
    """Raised when a version string or component is malformed."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)
