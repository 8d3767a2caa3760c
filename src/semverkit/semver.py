# SPDX-License-Identifier: MIT
"""Semantic version model and strict parser.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +001, +exp.sha.5114f85

Parsing never raises: :func:`parse` returns a :class:`ParseResult` holding
either the version or a :class:`ParseError` describing the violated rule.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

# Numeric components must fit an unsigned 32-bit integer
MAX_COMPONENT = 2**32 - 1

_IDENTIFIER_CHARS = frozenset("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-")


class ParseErrorKind(enum.Enum):
    """The grammar rule a rejected input violated."""

    MALFORMED_STRUCTURE = "malformed-structure"
    INVALID_NUMERIC_COMPONENT = "invalid-numeric-component"
    LEADING_ZERO = "leading-zero"
    INVALID_IDENTIFIER_CHARACTER = "invalid-identifier-character"
    EMPTY_IDENTIFIER_SEGMENT = "empty-identifier-segment"
    INVALID_RANGE_SYNTAX = "invalid-range-syntax"


@dataclass(frozen=True, slots=True)
class ParseError:
    """Structured description of a parse failure.

    Attributes:
        kind: The rule that was violated
        text: The offending substring
        offset: Position of ``text`` within the trimmed input
        message: Human readable description
    """

    kind: ParseErrorKind
    text: str
    offset: int
    message: str

    def __str__(self) -> str:
        return f"{self.message} (at offset {self.offset}: {self.text!r})"


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = "", error: Optional[ParseError] = None):
        self.version = version
        self.error = error
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Two versions are ``==`` only when every field matches, including the
    text they were parsed from. Use :func:`semverkit.compare.is_equivalent_to`
    for precedence equality.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1"))
        build: Build metadata identifiers (e.g., ("build", "123"))
        original: Source text; defaults to the canonical form
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()
    original: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
            if not 0 <= value <= MAX_COMPONENT:
                raise ValueError(f"{name} must be an integer between 0 and {MAX_COMPONENT}")
        # Field-built versions follow the same identifier rules as parsed ones
        for label, identifiers, strict_numeric in (
            ("pre-release", self.prerelease, True),
            ("build", self.build, False),
        ):
            if not isinstance(identifiers, tuple):
                raise ValueError(f"{label} identifiers must be a tuple of strings")
            for identifier in identifiers:
                if not isinstance(identifier, str) or "." in identifier:
                    raise ValueError(f"Invalid {label} identifier {identifier!r}")
                _, error = _split_identifiers(identifier, 0, label, strict_numeric)
                if error is not None:
                    raise ValueError(error.message)
        if not self.original:
            object.__setattr__(self, "original", str(self))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``text``, raising :class:`InvalidVersionError` on failure."""
        return parse_version(text)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def is_stable(self) -> bool:
        """Return True for versions with a positive major and no pre-release."""
        return self.major > 0 and not self.prerelease

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


ZERO = Version(0, 0, 0)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of :func:`parse`: exactly one of ``version`` or ``error`` is set."""

    text: str
    version: Optional[Version] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.version is not None

    def unwrap(self) -> Version:
        """Return the parsed version or raise :class:`InvalidVersionError`."""
        if self.version is None:
            raise InvalidVersionError(self.text, str(self.error), self.error)
        return self.version


def _fail(text: str, kind: ParseErrorKind, part: str, offset: int, message: str) -> ParseResult:
    return ParseResult(text=text, error=ParseError(kind, part, offset, message))


def _check_numeric(part: str, offset: int, name: str) -> Optional[ParseError]:
    if not part:
        return ParseError(
            ParseErrorKind.MALFORMED_STRUCTURE, part, offset, f"Missing {name} version number"
        )
    if not part.isascii() or not part.isdigit():
        return ParseError(
            ParseErrorKind.INVALID_NUMERIC_COMPONENT,
            part,
            offset,
            f"{name.capitalize()} version must be numeric",
        )
    if len(part) > 1 and part[0] == "0":
        return ParseError(
            ParseErrorKind.LEADING_ZERO,
            part,
            offset,
            f"{name.capitalize()} version must not have leading zeros",
        )
    if len(part) > len(str(MAX_COMPONENT)) or int(part) > MAX_COMPONENT:
        return ParseError(
            ParseErrorKind.INVALID_NUMERIC_COMPONENT,
            part,
            offset,
            f"{name.capitalize()} version exceeds {MAX_COMPONENT}",
        )
    return None


def _split_identifiers(
    section: str, offset: int, label: str, strict_numeric: bool
) -> tuple[tuple[str, ...], Optional[ParseError]]:
    """Split a pre-release or build section into validated identifiers."""
    identifiers = []
    position = offset
    for identifier in section.split("."):
        if not identifier:
            return (), ParseError(
                ParseErrorKind.EMPTY_IDENTIFIER_SEGMENT,
                section,
                offset,
                f"Empty {label} identifier",
            )
        for index, char in enumerate(identifier):
            if char not in _IDENTIFIER_CHARS:
                return (), ParseError(
                    ParseErrorKind.INVALID_IDENTIFIER_CHARACTER,
                    char,
                    position + index,
                    f"Invalid character in {label} identifier {identifier!r}",
                )
        if strict_numeric and identifier.isdigit() and len(identifier) > 1 and identifier[0] == "0":
            return (), ParseError(
                ParseErrorKind.LEADING_ZERO,
                identifier,
                position,
                f"Numeric {label} identifier must not have leading zeros",
            )
        identifiers.append(identifier)
        position += len(identifier) + 1
    return tuple(identifiers), None


def parse(text: str) -> ParseResult:
    """Parse a semantic version string without raising.

    Args:
        text: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A ParseResult holding the Version or the ParseError

    Examples:
        >>> parse("1.2.3-alpha.1+build.456").version.prerelease
        ('alpha', '1')

        >>> parse("1.02.3").error.kind
        <ParseErrorKind.LEADING_ZERO: 'leading-zero'>
    """
    if not isinstance(text, str):
        return _fail(
            str(text),
            ParseErrorKind.MALFORMED_STRUCTURE,
            str(text),
            0,
            f"Version must be a string, got {type(text).__name__}",
        )

    source = text.strip()
    if not source:
        return _fail(text, ParseErrorKind.MALFORMED_STRUCTURE, "", 0, "Version string cannot be empty")

    # Build metadata starts at the first "+", pre-release at the first "-" before it
    core, plus, build_section = source.partition("+")
    core, dash, prerelease_section = core.partition("-")

    parts = core.split(".")
    if len(parts) != 3:
        return _fail(
            text,
            ParseErrorKind.MALFORMED_STRUCTURE,
            core,
            0,
            "Expected MAJOR.MINOR.PATCH",
        )

    numbers = []
    offset = 0
    for name, part in zip(("major", "minor", "patch"), parts):
        error = _check_numeric(part, offset, name)
        if error is not None:
            return ParseResult(text=text, error=error)
        numbers.append(int(part))
        offset += len(part) + 1

    prerelease: tuple[str, ...] = ()
    if dash:
        prerelease, error = _split_identifiers(
            prerelease_section, len(core) + 1, "pre-release", strict_numeric=True
        )
        if error is not None:
            return ParseResult(text=text, error=error)

    build: tuple[str, ...] = ()
    if plus:
        build_offset = len(source) - len(build_section)
        build, error = _split_identifiers(build_section, build_offset, "build", strict_numeric=False)
        if error is not None:
            return ParseResult(text=text, error=error)

    version = Version(
        major=numbers[0],
        minor=numbers[1],
        patch=numbers[2],
        prerelease=prerelease,
        build=build,
        original=text,
    )
    return ParseResult(text=text, version=version)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("2.0.0-rc.1+build.456").build
        ('build', '456')
    """
    return parse(version_string).unwrap()


def try_parse(version_string: str) -> Optional[Version]:
    """Parse a version string, returning None when it is not valid."""
    return parse(version_string).version


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-01")
        False
    """
    return parse(version_string).ok
