# SPDX-License-Identifier: MIT
"""Immutable semantic version value type.

Supports MAJOR[.MINOR[.PATCH]] cores with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101

Missing MINOR and PATCH components default to 0 when parsing, so ``"2"`` and
``"2.1"`` are accepted and read as ``2.0.0`` and ``2.1.0``.

The all-zero version ``0.0.0`` is rejected. SemVer itself allows it, but this
library treats it as a missing version number.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable

from .errors import InvalidVersionError, VersionArgumentError
from .precedence import compare_precedence, precedence_key

# Relaxed SemVer grammar: one to three numeric components, then an optional
# dot-separated pre-release and an opaque build string.
VERSION_PATTERN = re.compile(
    r"(?P<core>[0-9]+(?:\.[0-9]+(?:\.[0-9]+)?)?)"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?"
)

PRERELEASE_SEGMENT_PATTERN = re.compile(r"[0-9A-Za-z-]+")

BUILD_PATTERN = re.compile(r"[0-9A-Za-z.-]+")

# int() and str() refuse numbers longer than sys.get_int_max_str_digits(),
# so long numbers are converted in chunks of this many digits.
_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def _parse_number(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _format_number(value: int) -> str:
    chunks = []
    while value >= _CHUNK:
        value, low = divmod(value, _CHUNK)
        chunks.append(str(low).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def _check_number(name: str, value: Any) -> None:
    if value is None:
        raise VersionArgumentError(f"{name} must not be None")
    if isinstance(value, bool) or not isinstance(value, int):
        raise VersionArgumentError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise VersionArgumentError(f"{name} must not be negative")


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Instances are immutable. Equality, hashing and ordering follow SemVer
    precedence, so build metadata is ignored: ``1.0.0+a == 1.0.0+b``.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers in order, e.g. ``("alpha", "1")``
        build: Build metadata (e.g., "build.123", "20240101"), "" if absent

    Raises:
        VersionArgumentError: If a number is negative or not an integer, all
            three numbers are zero, or a pre-release identifier is blank
        InvalidVersionError: If a pre-release identifier or the build string
            contains characters outside the allowed set
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: str = ""

    def __post_init__(self) -> None:
        _check_number("major", self.major)
        _check_number("minor", self.minor)
        _check_number("patch", self.patch)

        if self.prerelease is None:
            raise VersionArgumentError("prerelease must not be None")
        if isinstance(self.prerelease, str):
            raise VersionArgumentError(
                "prerelease must be a sequence of identifiers, not a string"
            )
        prerelease = tuple(self.prerelease)
        for segment in prerelease:
            if not isinstance(segment, str):
                raise VersionArgumentError(
                    f"prerelease identifiers must be strings, got {type(segment).__name__}"
                )

        if self.build is None:
            raise VersionArgumentError("build must not be None")
        if not isinstance(self.build, str):
            raise VersionArgumentError(
                f"build must be a string, got {type(self.build).__name__}"
            )

        if self.major == 0 and self.minor == 0 and self.patch == 0:
            raise VersionArgumentError(
                "At least one component of the version number must be greater than 0"
            )

        for segment in prerelease:
            if not segment.strip():
                raise VersionArgumentError("prerelease identifiers must not be empty")
            if not PRERELEASE_SEGMENT_PATTERN.fullmatch(segment):
                raise InvalidVersionError(
                    segment, "prerelease identifiers must only contain [0-9A-Za-z-]"
                )

        if self.build and not BUILD_PATTERN.fullmatch(self.build):
            raise InvalidVersionError(
                self.build, "build metadata must only contain [0-9A-Za-z-.]"
            )

        object.__setattr__(self, "prerelease", prerelease)

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version string into a Version object.

        Args:
            version_string: A string of the form
                MAJOR[.MINOR[.PATCH]][-prerelease][+build]

        Returns:
            A Version object with parsed components

        Raises:
            InvalidVersionError: If the string is empty, does not follow the
                grammar, or names the all-zero version

        Examples:
            >>> Version.parse("1.2.3-alpha.1+build.456")
            Version(major=1, minor=2, patch=3, prerelease=('alpha', '1'), build='build.456')

            >>> Version.parse("2.1")
            Version(major=2, minor=1, patch=0, prerelease=(), build='')
        """
        if not isinstance(version_string, str):
            raise InvalidVersionError(
                str(version_string),
                f"Version must be a string, got {type(version_string).__name__}",
            )

        if not version_string.strip():
            raise InvalidVersionError(version_string, "Cannot parse empty string into version")

        match = VERSION_PATTERN.fullmatch(version_string)
        if not match:
            raise InvalidVersionError(
                version_string, f"Not a properly formatted version string: {version_string!r}"
            )

        numbers = [_parse_number(part) for part in match.group("core").split(".")]
        numbers += [0] * (3 - len(numbers))

        prerelease = match.group("prerelease")
        segments = tuple(prerelease.split(".")) if prerelease else ()

        try:
            return cls(
                numbers[0],
                numbers[1],
                numbers[2],
                prerelease=segments,
                build=match.group("build") or "",
            )
        except VersionArgumentError as e:
            raise InvalidVersionError(version_string, str(e)) from e

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        build = self.build.strip()
        if build:
            version += f"+{build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return ".".join(_format_number(n) for n in self.core)

    @property
    def core(self) -> tuple[int, int, int]:
        """Return ``(major, minor, patch)``."""
        return (self.major, self.minor, self.patch)

    # Precedence

    def compare_to(self, other: Version) -> int:
        """Compare with another version by SemVer precedence.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other

        Raises:
            TypeError: If other is not a Version
        """
        if not isinstance(other, Version):
            raise TypeError(
                f"Cannot compare Version with {type(other).__name__}"
            )
        return compare_precedence(self.core, self.prerelease, other.core, other.prerelease)

    def sort_key(self) -> tuple:
        """Return a tuple that orders versions by precedence."""
        return precedence_key(self.core, self.prerelease)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        # Must agree with __eq__, so build metadata is left out.
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    # Increments

    def increment_major(self) -> Version:
        """Return a new Version with major incremented.

        minor and patch reset to 0; pre-release and build are cleared.
        """
        return Version(self.major + 1, 0, 0)

    def increment_minor(self) -> Version:
        """Return a new Version with minor incremented, patch reset to 0."""
        return Version(self.major, self.minor + 1, 0)

    def increment_patch(self) -> Version:
        """Return a new Version with patch incremented."""
        return Version(self.major, self.minor, self.patch + 1)


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Shorthand for ``Version.parse``.

    Raises:
        InvalidVersionError: If the string is not a valid version
    """
    return Version.parse(version_string)


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.0.0-alpha")
        True
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("0.0.0")
        False
        >>> is_valid_version("not.a.version!")
        False
    """
    try:
        Version.parse(version_string)
    except InvalidVersionError:
        return False
    return True


def coerce_version(version: Version | str) -> Version:
    """Return ``version`` unchanged if it is a Version, else parse it."""
    if isinstance(version, Version):
        return version
    return Version.parse(version)


def versions_from(values: Iterable[Version | str]) -> list[Version]:
    """Coerce every item of ``values`` to a Version."""
    return [coerce_version(value) for value in values]
