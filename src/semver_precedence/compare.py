# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0, section 11.

Precedence is decided by the first of these steps that tells two versions
apart:

1. major, minor and patch, compared numerically
2. a version with a pre-release tag is lower than the same version without
3. pre-release identifiers, left to right: numeric by value, alphanumeric
   by codepoint, numeric always lower than alphanumeric
4. a shorter pre-release that is a prefix of a longer one is lower

Build metadata is ignored, so ``1.0.0+a`` and ``1.0.0+b`` have equal
precedence although the values differ.
"""

from __future__ import annotations

import functools
from enum import IntEnum
from typing import Any, Iterable

from .identifier import Identifier, Numeric
from .semver import Version


class Ordering(IntEnum):
    """Result of a precedence comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        """Return the ordering as seen from the other operand."""
        return Ordering(-self.value)


def _order(left: Any, right: Any) -> Ordering:
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def _compare_identifiers(left: Identifier, right: Identifier) -> Ordering:
    if isinstance(left, Numeric):
        if isinstance(right, Numeric):
            return _order(left.value, right.value)
        return Ordering.LESS
    if isinstance(right, Numeric):
        return Ordering.GREATER
    return _order(left.text, right.text)


def _compare_prerelease(
    pre1: tuple[Identifier, ...], pre2: tuple[Identifier, ...]
) -> Ordering:
    """Compare two pre-release identifier sequences.

    An empty sequence means "no pre-release" and ranks above any tag.
    """
    if not pre1 and not pre2:
        return Ordering.EQUAL
    if not pre1:
        return Ordering.GREATER
    if not pre2:
        return Ordering.LESS

    for ident1, ident2 in zip(pre1, pre2):
        result = _compare_identifiers(ident1, ident2)
        if result is not Ordering.EQUAL:
            return result

    # All shared positions equal: the shorter sequence is lower
    return _order(len(pre1), len(pre2))


def _require_version(value: object, name: str) -> None:
    if not isinstance(value, Version):
        raise TypeError(
            f"{name} must be a parsed Version, got {type(value).__name__}; "
            "use parse() on version strings first"
        )


def compare(version1: Version, version2: Version) -> Ordering:
    """Compare two parsed versions by precedence.

    Args:
        version1: First version
        version2: Second version

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Raises:
        TypeError: If either argument is not a Version

    Examples:
        >>> from semver_precedence import parse_version
        >>> compare(parse_version("1.0.0"), parse_version("2.0.0"))
        <Ordering.LESS: -1>
        >>> compare(parse_version("1.0.0-rc.1"), parse_version("1.0.0"))
        <Ordering.LESS: -1>
        >>> compare(parse_version("1.0.0+a"), parse_version("1.0.0+b"))
        <Ordering.EQUAL: 0>
    """
    _require_version(version1, "version1")
    _require_version(version2, "version2")

    result = _order(version1.base, version2.base)
    if result is not Ordering.EQUAL:
        return result

    return _compare_prerelease(version1.prerelease, version2.prerelease)


def precedes(version1: Version, version2: Version) -> bool:
    """Return True if version1 has lower precedence than version2."""
    return compare(version1, version2) is Ordering.LESS


_precedence_key = functools.cmp_to_key(compare)


def version_key(version: Version) -> Any:
    """Return a sort key for a version, consistent with :func:`compare`.

    Examples:
        >>> from semver_precedence import parse_version
        >>> versions = [parse_version("1.0.0"), parse_version("1.0.0-alpha")]
        >>> [str(v) for v in sorted(versions, key=version_key)]
        ['1.0.0-alpha', '1.0.0']
    """
    _require_version(version, "version")
    return _precedence_key(version)


def sort_versions(versions: Iterable[Version], reverse: bool = False) -> list[Version]:
    """Return versions sorted by precedence.

    The sort is stable, so versions of equal precedence (differing only in
    build metadata) keep their input order.
    """
    return sorted(versions, key=version_key, reverse=reverse)


def max_version(versions: Iterable[Version]) -> Version:
    """Return the version with the highest precedence.

    Among versions of equal precedence the first one wins.

    Raises:
        ValueError: If versions is empty
    """
    iterator = iter(versions)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("max_version() arg is an empty iterable") from None

    for version in iterator:
        if precedes(best, version):
            best = version
    return best
