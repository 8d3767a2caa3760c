# SPDX-License-Identifier: MIT
"""Semantic version parsing, precedence and range matching.

This package provides utilities for parsing and comparing semantic versions
following the SemVer 2.0.0 specification, and for checking versions against
npm style range expressions (caret, tilde, hyphen, wildcard) and Ivy ranges.

Example:
    >>> from semverkit import parse_version, compare_versions, satisfies
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    <Ordering.LESS: -1>
    >>>
    >>> satisfies("1.4.0", "^1.2.3")
    True
"""

__version__ = "0.1.0"

from .semver import (
    MAX_COMPONENT,
    ZERO,
    InvalidVersionError,
    ParseError,
    ParseErrorKind,
    ParseResult,
    Version,
    is_valid_semver,
    parse,
    parse_version,
    try_parse,
)
from .compare import (
    Ordering,
    VersionDiff,
    compare_versions,
    diff,
    is_equal_to,
    is_equivalent_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_lower_than,
    is_lower_than_or_equal_to,
    version_key,
)
from .config import (
    ConfigError,
    RangeOptions,
    load_options,
)
from .range import (
    BoundPair,
    InvalidRangeError,
    Operator,
    Range,
    parse_hyphen_range,
    parse_ivy_range,
    parse_range,
)
from .ranges_list import (
    RangesList,
    RangesParseResult,
    build_ranges_list,
    satisfies,
    try_build_ranges_list,
)
from .expressions import RangesExpression
from .modify import (
    next_major,
    next_minor,
    next_patch,
    with_build,
    with_cleared_build,
    with_cleared_prerelease,
    with_cleared_prerelease_and_build,
    with_inc_major,
    with_inc_minor,
    with_inc_patch,
    with_prerelease,
)
from .coerce import coerce

__all__ = [
    # Version parsing
    "MAX_COMPONENT",
    "ZERO",
    "InvalidVersionError",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "Version",
    "is_valid_semver",
    "parse",
    "parse_version",
    "try_parse",
    # Version comparison
    "Ordering",
    "VersionDiff",
    "compare_versions",
    "diff",
    "is_equal_to",
    "is_equivalent_to",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_lower_than",
    "is_lower_than_or_equal_to",
    "version_key",
    # Ranges
    "BoundPair",
    "ConfigError",
    "InvalidRangeError",
    "Operator",
    "Range",
    "RangeOptions",
    "RangesExpression",
    "RangesList",
    "RangesParseResult",
    "build_ranges_list",
    "load_options",
    "parse_hyphen_range",
    "parse_ivy_range",
    "parse_range",
    "satisfies",
    "try_build_ranges_list",
    # Modifiers
    "coerce",
    "next_major",
    "next_minor",
    "next_patch",
    "with_build",
    "with_cleared_build",
    "with_cleared_prerelease",
    "with_cleared_prerelease_and_build",
    "with_inc_major",
    "with_inc_minor",
    "with_inc_patch",
    "with_prerelease",
]
