# SPDX-License-Identifier: MIT
"""Derive new versions from existing ones.

Every function returns a new :class:`Version`; the input is never changed.
"""

from __future__ import annotations

from dataclasses import replace

from .semver import InvalidVersionError, Version, parse


def next_major(version: Version) -> Version:
    """Return the next major release.

    A pre-release of a major release (``2.0.0-rc.1``) bumps to that release.
    """
    major = version.major
    if version.minor != 0 or version.patch != 0 or not version.prerelease:
        major += 1
    return Version(major, 0, 0)


def next_minor(version: Version) -> Version:
    """Return the next minor release.

    A pre-release of a minor release (``1.3.0-beta``) bumps to that release.
    """
    minor = version.minor
    if version.patch != 0 or not version.prerelease:
        minor += 1
    return Version(version.major, minor, 0)


def next_patch(version: Version) -> Version:
    """Return the next patch release; a pre-release bumps to its own release."""
    patch = version.patch
    if not version.prerelease:
        patch += 1
    return Version(version.major, version.minor, patch)


def _incremented(value: int, number: int, name: str) -> int:
    result = value + number
    if result < 0:
        raise ValueError(f"Cannot decrement {name} version below zero")
    return result


def with_inc_major(version: Version, number: int = 1) -> Version:
    """Add ``number`` to major, reset minor and patch, keep pre-release and build."""
    return Version(
        _incremented(version.major, number, "major"),
        0,
        0,
        version.prerelease,
        version.build,
    )


def with_inc_minor(version: Version, number: int = 1) -> Version:
    """Add ``number`` to minor, reset patch, keep pre-release and build."""
    return Version(
        version.major,
        _incremented(version.minor, number, "minor"),
        0,
        version.prerelease,
        version.build,
    )


def with_inc_patch(version: Version, number: int = 1) -> Version:
    """Add ``number`` to patch, keep pre-release and build."""
    return Version(
        version.major,
        version.minor,
        _incremented(version.patch, number, "patch"),
        version.prerelease,
        version.build,
    )


def with_prerelease(version: Version, prerelease: str) -> Version:
    """Replace the pre-release section.

    Raises:
        InvalidVersionError: If ``prerelease`` is not a valid pre-release
    """
    result = parse(f"{version.base_version}-{prerelease}")
    if not result.ok:
        raise InvalidVersionError(prerelease, f"Invalid pre-release: {result.error}", result.error)
    return Version(version.major, version.minor, version.patch, result.version.prerelease, version.build)


def with_build(version: Version, build: str) -> Version:
    """Replace the build metadata section.

    Raises:
        InvalidVersionError: If ``build`` is not valid build metadata
    """
    result = parse(f"{version.base_version}+{build}")
    if not result.ok:
        raise InvalidVersionError(build, f"Invalid build metadata: {result.error}", result.error)
    return Version(version.major, version.minor, version.patch, version.prerelease, result.version.build)


def with_cleared_prerelease(version: Version) -> Version:
    return _rebuilt(version, prerelease=())


def with_cleared_build(version: Version) -> Version:
    return _rebuilt(version, build=())


def with_cleared_prerelease_and_build(version: Version) -> Version:
    return _rebuilt(version, prerelease=(), build=())


def _rebuilt(version: Version, **changes) -> Version:
    # The original text no longer describes the result
    return replace(version, original="", **changes)
