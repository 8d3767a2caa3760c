# SPDX-License-Identifier: MIT
"""Ranges-list engine: OR-ed groups of AND-ed bound pairs.

Example:
    >>> ranges = build_ranges_list(">=1.0.0 <2.0.0 || ^3.1")
    >>> str(ranges)
    '>=1.0.0 <2.0.0 || >=3.1.0 <4.0.0'
    >>> ranges.is_satisfied_by("3.4.0")
    True
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from .compare import VersionLike
from .config import DEFAULT_OPTIONS, RangeOptions
from .range import (
    ANY,
    BoundPair,
    InvalidRangeError,
    is_ivy_range,
    parse_hyphen_range,
    parse_ivy_range,
    parse_range,
)
from .semver import ParseError, Version, parse_version

if TYPE_CHECKING:
    from .expressions import RangesExpression

logger = logging.getLogger(__name__)

# An Ivy range may contain a comma and spaces but never nested brackets
_IVY_SPAN = r"[\[\](][^\[\]()]*[\]\[)]"

_TOKEN = re.compile(rf"{_IVY_SPAN}|\S+")

_BARE_OPERATORS = frozenset({"=", "<", "<=", ">", ">=", "~", "~>", "^"})

Group = tuple[BoundPair, ...]


@dataclass(frozen=True, slots=True)
class RangesList:
    """A disjunction of groups, each a conjunction of bound pairs.

    Attributes:
        groups: The OR-ed groups in source order
        include_prerelease: Disable the pre-release exclusion rule
    """

    groups: tuple[Group, ...] = ()
    include_prerelease: bool = False

    @property
    def matches_all(self) -> bool:
        """Return True if some group consists only of wildcards."""
        return any(group and all(pair.is_unbounded for pair in group) for group in self.groups)

    def is_satisfied_by(self, version: VersionLike) -> bool:
        """Return True if ``version`` satisfies at least one group."""
        v = parse_version(version) if isinstance(version, str) else version
        return any(self._is_group_satisfied_by(group, v) for group in self.groups)

    def _is_group_satisfied_by(self, group: Group, version: Version) -> bool:
        if not group:
            return False
        if not all(pair.is_satisfied_by(version) for pair in group):
            return False
        if not version.prerelease or self.include_prerelease:
            return True

        # A pre-release only matches when some bound opts into pre-releases
        # of the same MAJOR.MINOR.PATCH
        endpoints = [endpoint for pair in group for endpoint in pair.endpoints]
        if not endpoints:
            return True
        triple = (version.major, version.minor, version.patch)
        return any(
            endpoint.prerelease and (endpoint.major, endpoint.minor, endpoint.patch) == triple
            for endpoint in endpoints
        )

    def __str__(self) -> str:
        rendered = []
        for group in self.groups:
            bounded = [str(pair) for pair in group if not pair.is_unbounded]
            rendered.append(" ".join(bounded) or "*")
        return " || ".join(rendered)


@dataclass(frozen=True, slots=True)
class RangesParseResult:
    """Outcome of :func:`try_build_ranges_list`, holding ``ranges`` or ``error``."""

    text: str
    ranges: Optional[RangesList] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.ranges is not None

    def unwrap(self) -> RangesList:
        """Return the built ranges or raise :class:`InvalidRangeError`."""
        if self.ranges is None:
            raise InvalidRangeError(self.error.text, self.error.message, self.error.offset)
        return self.ranges


def _split_groups(text: str, separators: tuple[str, ...]) -> list[tuple[int, str]]:
    """Split ``text`` on OR separators, keeping Ivy ranges intact.

    Returns (offset, group text) pairs.
    """
    alternatives = "|".join(re.escape(s) for s in sorted(separators, key=len, reverse=True))
    pattern = re.compile(rf"(?P<ivy>{_IVY_SPAN})|(?P<sep>{alternatives})")

    groups = []
    start = 0
    for match in pattern.finditer(text):
        if match.group("sep") is not None:
            groups.append((start, text[start : match.start()]))
            start = match.end()
    groups.append((start, text[start:]))
    return groups


def _parse_group(text: str, offset: int, options: RangeOptions) -> Group:
    tokens = [(offset + m.start(), m.group()) for m in _TOKEN.finditer(text)]
    if not tokens:
        return (ANY,)

    pairs = []
    index = 0
    while index < len(tokens):
        position, token = tokens[index]
        try:
            if (
                index + 2 < len(tokens)
                and tokens[index + 1][1] == "-"
                and token not in _BARE_OPERATORS
            ):
                pairs.append(parse_hyphen_range(token, tokens[index + 2][1], options))
                index += 3
                continue
            if token in _BARE_OPERATORS and index + 1 < len(tokens):
                # ">= 1.2.3" is the same as ">=1.2.3"
                token += tokens[index + 1][1]
                index += 1
            if is_ivy_range(token):
                pairs.append(parse_ivy_range(token))
            else:
                pairs.append(parse_range(token, options))
        except InvalidRangeError as e:
            raise InvalidRangeError(e.token, e.message, position) from e
        index += 1

    return tuple(pairs)


def build_ranges_list(text: str, options: Optional[RangeOptions] = None) -> RangesList:
    """Parse a full range expression into a RangesList.

    Args:
        text: Range expression, e.g. ``">=1.2.0 <2.0.0 || 3.x"``
        options: Range options (defaults to :data:`DEFAULT_OPTIONS`)

    Returns:
        A RangesList with one group per OR-ed alternative

    Raises:
        InvalidRangeError: If any token in any group is invalid
    """
    options = options or DEFAULT_OPTIONS
    if not isinstance(text, str):
        raise InvalidRangeError(str(text), f"Range must be a string, got {type(text).__name__}")

    groups = tuple(
        _parse_group(group, offset, options)
        for offset, group in _split_groups(text, options.or_separators)
    )
    ranges_list = RangesList(groups, options.include_prerelease)
    logger.debug("Parsed range %r as %s", text, ranges_list)
    return ranges_list


def try_build_ranges_list(text: str, options: Optional[RangeOptions] = None) -> RangesParseResult:
    """Build a RangesList without raising.

    Examples:
        >>> try_build_ranges_list("^1.2 || 3.x").ok
        True
        >>> try_build_ranges_list(">=1.0.0 <two").error.offset
        8
    """
    try:
        return RangesParseResult(text=text, ranges=build_ranges_list(text, options))
    except InvalidRangeError as e:
        return RangesParseResult(text=text, error=e.error)


def satisfies(
    version: VersionLike,
    ranges: Union[str, RangesList, "RangesExpression"],
    options: Optional[RangeOptions] = None,
) -> bool:
    """Check if a version satisfies a range.

    Args:
        version: Version string or Version object
        ranges: Range text, a built RangesList or a RangesExpression
        options: Range options used when ``ranges`` needs building

    Raises:
        InvalidVersionError: If ``version`` is an invalid string
        InvalidRangeError: If ``ranges`` is invalid range text

    Examples:
        >>> satisfies("1.2.3", "^1.2.3")
        True
        >>> satisfies("1.2.3-alpha", ">=1.2.0 <2.0.0")
        False
    """
    if isinstance(ranges, str):
        ranges = build_ranges_list(ranges, options)
    elif not isinstance(ranges, RangesList):
        ranges = ranges.to_ranges_list(options)
    return ranges.is_satisfied_by(version)
