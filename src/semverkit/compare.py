# SPDX-License-Identifier: MIT
"""Version precedence following the SemVer 2.0.0 ordering rules.

Pre-release ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-beta < 1.0.0
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

import enum
import functools
from typing import Any, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]


class Ordering(enum.IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class VersionDiff(enum.Enum):
    """The most significant field in which two versions differ."""

    NONE = "none"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE_RELEASE = "pre-release"
    BUILD = "build"


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _compare_identifier(id1: str, id2: str) -> int:
    """Compare two pre-release identifiers at the same position."""
    is_num1 = id1.isdigit()
    is_num2 = id2.isdigit()

    if is_num1 and is_num2:
        n1, n2 = int(id1), int(id2)
        if n1 != n2:
            return -1 if n1 < n2 else 1
        return 0
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return -1
    if is_num2:
        return 1
    if id1 != id2:
        return -1 if id1 < id2 else 1
    return 0


def _compare_prerelease(pre1: tuple[str, ...], pre2: tuple[str, ...]) -> int:
    """Compare two pre-release identifier sequences.

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for p1, p2 in zip(pre1, pre2):
        result = _compare_identifier(p1, p2)
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1

    return 0


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1), Ordering.EQUAL (0) or Ordering.GREATER (1)

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0+build.1", "1.0.0") == 0
        True
        >>> compare_versions("1.0.0-rc.1", "1.0.0") < 0
        True
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return Ordering.LESS if val1 < val2 else Ordering.GREATER

    # Compare pre-release (build metadata is ignored)
    return Ordering(_compare_prerelease(v1.prerelease, v2.prerelease))


_precedence_key = functools.cmp_to_key(compare_versions)


def is_greater_than(version1: VersionLike, version2: VersionLike) -> bool:
    return compare_versions(version1, version2) > 0


def is_greater_than_or_equal_to(version1: VersionLike, version2: VersionLike) -> bool:
    return compare_versions(version1, version2) >= 0


def is_lower_than(version1: VersionLike, version2: VersionLike) -> bool:
    return compare_versions(version1, version2) < 0


def is_lower_than_or_equal_to(version1: VersionLike, version2: VersionLike) -> bool:
    return compare_versions(version1, version2) <= 0


def is_equivalent_to(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if both versions have the same precedence (build ignored)."""
    return compare_versions(version1, version2) == 0


def is_equal_to(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if both versions are structurally identical.

    Unlike :func:`is_equivalent_to` this takes build metadata and the
    original source text into account.
    """
    return _coerce(version1) == _coerce(version2)


def diff(version1: VersionLike, version2: VersionLike) -> VersionDiff:
    """Return the most significant field that differs between two versions.

    Examples:
        >>> diff("1.2.3", "1.3.0")
        <VersionDiff.MINOR: 'minor'>
        >>> diff("1.0.0+a", "1.0.0+b")
        <VersionDiff.BUILD: 'build'>
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1.major != v2.major:
        return VersionDiff.MAJOR
    if v1.minor != v2.minor:
        return VersionDiff.MINOR
    if v1.patch != v2.patch:
        return VersionDiff.PATCH
    if v1.prerelease != v2.prerelease:
        return VersionDiff.PRE_RELEASE
    if v1.build != v2.build:
        return VersionDiff.BUILD
    return VersionDiff.NONE


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version that orders with compare_versions.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _precedence_key(_coerce(version))
