# SPDX-License-Identifier: MIT
"""Semantic version parsing and precedence.

This package parses version strings following the SemVer 2.0.0
specification into immutable values and orders them by precedence.

Example:
    >>> from semver_precedence import parse, compare, precedes, Ordering
    >>>
    >>> version = parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> parse("1.2").reason
    <FormatRule.WRONG_SEGMENT_COUNT: 'wrong-segment-count'>
    >>>
    >>> compare(parse("1.0.0-alpha"), parse("1.0.0")) is Ordering.LESS
    True
"""

__version__ = "0.1.0"

from .identifier import (
    Alphanumeric,
    Identifier,
    Numeric,
    classify,
)
from .semver import (
    FormatRule,
    InvalidFormat,
    InvalidVersionError,
    ParseResult,
    SEMVER_PATTERN,
    Version,
    is_valid_semver,
    parse,
    parse_version,
)
from .compare import (
    Ordering,
    compare,
    max_version,
    precedes,
    sort_versions,
    version_key,
)

__all__ = [
    # Identifiers
    "Alphanumeric",
    "Identifier",
    "Numeric",
    "classify",
    # Version parsing
    "FormatRule",
    "InvalidFormat",
    "InvalidVersionError",
    "ParseResult",
    "SEMVER_PATTERN",
    "Version",
    "is_valid_semver",
    "parse",
    "parse_version",
    # Version precedence
    "Ordering",
    "compare",
    "max_version",
    "precedes",
    "sort_versions",
    "version_key",
]
