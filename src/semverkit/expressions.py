# SPDX-License-Identifier: MIT
"""Build ranges in code instead of parsing range text.

Example:
    >>> from semverkit.expressions import greater_or_equal, less, equal
    >>> expr = greater_or_equal("1.0.0").and_(less("2.0.0")).or_(equal("3.0.0"))
    >>> str(expr)
    '>=1.0.0 <2.0.0 || =3.0.0'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .compare import VersionLike
from .config import DEFAULT_OPTIONS, RangeOptions
from .range import BoundPair, Operator, Range
from .ranges_list import Group, RangesList
from .semver import Version, parse_version


@dataclass(frozen=True, slots=True)
class RangesExpression:
    """An immutable disjunction of conjunctions of bound pairs."""

    groups: tuple[Group, ...]

    def and_(self, other: "RangesExpression") -> "RangesExpression":
        """Conjoin two expressions, distributing over their alternatives."""
        return RangesExpression(
            tuple(left + right for left in self.groups for right in other.groups)
        )

    def or_(self, other: "RangesExpression") -> "RangesExpression":
        return RangesExpression(self.groups + other.groups)

    def to_ranges_list(self, options: Optional[RangeOptions] = None) -> RangesList:
        options = options or DEFAULT_OPTIONS
        return RangesList(self.groups, options.include_prerelease)

    def __str__(self) -> str:
        return str(self.to_ranges_list())


def _leaf(pair: BoundPair) -> RangesExpression:
    return RangesExpression(((pair,),))


def _version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def equal(version: VersionLike) -> RangesExpression:
    return _leaf(BoundPair.exact(_version(version)))


def greater(version: VersionLike) -> RangesExpression:
    return _leaf(BoundPair(lower=Range(Operator.GT, _version(version))))


def greater_or_equal(version: VersionLike) -> RangesExpression:
    return _leaf(BoundPair(lower=Range(Operator.GTE, _version(version))))


def less(version: VersionLike) -> RangesExpression:
    return _leaf(BoundPair(upper=Range(Operator.LT, _version(version))))


def less_or_equal(version: VersionLike) -> RangesExpression:
    return _leaf(BoundPair(upper=Range(Operator.LTE, _version(version))))
