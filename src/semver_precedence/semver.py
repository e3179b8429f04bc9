# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Accepts ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` as described by
SemVer 2.0.0:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

:func:`parse` never raises for malformed text; it returns an :class:`InvalidFormat`
describing the first problem found. :func:`parse_version` is the raising
variant for callers that prefer exceptions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .identifier import (
    Alphanumeric,
    Identifier,
    Numeric,
    classify,
    has_leading_zero,
    is_all_digits,
    is_identifier_text,
)

# With fullmatch(), accepts exactly the strings parse() accepts.
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)


class FormatRule(str, Enum):
    """The rule an invalid version string breaks."""

    WRONG_SEGMENT_COUNT = "wrong-segment-count"
    NON_DIGIT = "non-digit"
    LEADING_ZERO = "leading-zero"
    EMPTY_IDENTIFIER = "empty-identifier"
    INVALID_CHARACTER = "invalid-character"
    INVALID_SEPARATOR = "invalid-separator"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class InvalidFormat:
    """Failed parse result.

    Attributes:
        raw: The complete input that was rejected
        segment: The offending part of the input
        reason: Which rule the segment breaks
    """

    raw: str
    segment: str
    reason: FormatRule

    def __str__(self) -> str:
        return f"Invalid semantic version {self.raw!r}: {self.reason} in {self.segment!r}"


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Instances come from :func:`parse`. Equality and hashing compare every
    field, build metadata included; use :func:`~semver_precedence.compare`
    for precedence.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, empty for a release
        build: Build metadata identifiers, never used for ordering
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = field(default=())
    build: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative int, got {value!r}")
        if not isinstance(self.prerelease, tuple) or not all(
            isinstance(ident, (Numeric, Alphanumeric)) for ident in self.prerelease
        ):
            raise ValueError(f"prerelease must be a tuple of identifiers, got {self.prerelease!r}")
        if not isinstance(self.build, tuple) or not all(
            isinstance(ident, str) and is_identifier_text(ident) for ident in self.build
        ):
            raise ValueError(f"build must be a tuple of identifier strings, got {self.build!r}")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += "-" + ".".join(str(ident) for ident in self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


ParseResult = Union[Version, InvalidFormat]


class InvalidVersionError(Exception):
    """Raised by :func:`parse_version` when a string is not a semantic version."""

    def __init__(self, version: str, message: str = "", failure: InvalidFormat | None = None):
        self.version = version
        self.failure = failure
        self.message = message or (str(failure) if failure else f"Invalid semantic version: {version}")
        super().__init__(self.message)


class _Reject(Exception):
    """Internal early exit carrying the first violation."""

    def __init__(self, segment: str, reason: FormatRule):
        super().__init__(segment, reason)
        self.segment = segment
        self.reason = reason


def _base_number(segment: str) -> int:
    if not segment:
        raise _Reject(segment, FormatRule.EMPTY_IDENTIFIER)
    if not is_all_digits(segment):
        raise _Reject(segment, FormatRule.NON_DIGIT)
    if has_leading_zero(segment):
        raise _Reject(segment, FormatRule.LEADING_ZERO)
    return int(segment)


def _check_identifier(segment: str, *, is_build: bool) -> None:
    if not segment:
        raise _Reject(segment, FormatRule.EMPTY_IDENTIFIER)
    if not is_identifier_text(segment):
        if is_build and "+" in segment:
            raise _Reject(segment, FormatRule.INVALID_SEPARATOR)
        raise _Reject(segment, FormatRule.INVALID_CHARACTER)


def _prerelease_identifier(segment: str) -> Identifier:
    _check_identifier(segment, is_build=False)
    if is_all_digits(segment) and has_leading_zero(segment):
        raise _Reject(segment, FormatRule.LEADING_ZERO)
    return classify(segment)


def _build_identifier(segment: str) -> str:
    _check_identifier(segment, is_build=True)
    return segment


def _parse(raw: str) -> Version:
    if not raw:
        raise _Reject(raw, FormatRule.EMPTY_IDENTIFIER)

    core, has_build, build_text = raw.partition("+")
    base_text, has_prerelease, prerelease_text = core.partition("-")

    segments = base_text.split(".")
    if len(segments) != 3:
        raise _Reject(base_text, FormatRule.WRONG_SEGMENT_COUNT)
    major, minor, patch = (_base_number(segment) for segment in segments)

    prerelease: tuple[Identifier, ...] = ()
    if has_prerelease:
        prerelease = tuple(_prerelease_identifier(s) for s in prerelease_text.split("."))

    build: tuple[str, ...] = ()
    if has_build:
        build = tuple(_build_identifier(s) for s in build_text.split("."))

    return Version(major, minor, patch, prerelease, build)


def parse(raw: str) -> ParseResult:
    """Parse a semantic version string.

    Validation is fail-fast and runs left to right through the base
    version, the pre-release identifiers and then the build metadata; the
    first violation is the one reported.

    Args:
        raw: Text of the form ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``

    Returns:
        A :class:`Version` on success, otherwise an :class:`InvalidFormat`

    Raises:
        TypeError: If raw is not a str

    Examples:
        >>> parse("1.4.2")
        Version(major=1, minor=4, patch=2, prerelease=(), build=())

        >>> parse("1.0.0-alpha.1").prerelease
        (Alphanumeric(text='alpha'), Numeric(value=1))

        >>> parse("1.02.3")
        InvalidFormat(raw='1.02.3', segment='02', reason=<FormatRule.LEADING_ZERO: 'leading-zero'>)
    """
    if not isinstance(raw, str):
        raise TypeError(f"Version must be a string, got {type(raw).__name__}")

    try:
        return _parse(raw)
    except _Reject as reject:
        return InvalidFormat(raw=raw, segment=reject.segment, reason=reject.reason)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string, raising on failure.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    result = parse(version_string)
    if isinstance(result, InvalidFormat):
        raise InvalidVersionError(version_string, failure=result)
    return result


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return isinstance(parse(version_string), Version)
