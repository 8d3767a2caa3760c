# SPDX-License-Identifier: MIT
"""Range grammar: turn one constraint token into a normalized bound pair.

Supported forms:
- comparators: =1.2.3, <1.2.3, <=1.2.3, >1.2.3, >=1.2.3
- partial versions and wildcards: 1, 1.2, 1.x, 1.2.*, *
- tilde: ~1.2.3, ~1.2, ~1 (``~>`` is accepted as an alias)
- caret: ^1.2.3, ^0.2.3, ^0.0.3, ^1.x
- hyphen ranges: 1.2.3 - 2.3.4 (see :func:`parse_hyphen_range`)
- Ivy ranges: [1.0,2.0), ]1.0,), (,2.0] (see :func:`parse_ivy_range`)
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional

from .compare import compare_versions
from .config import DEFAULT_OPTIONS, RangeOptions
from .semver import MAX_COMPONENT, ParseError, ParseErrorKind, Version, parse


class InvalidRangeError(Exception):
    """Raised when a range expression cannot be parsed."""

    def __init__(self, token: str, message: str = "", offset: int = 0):
        self.token = token
        self.offset = offset
        self.message = message or f"Invalid range syntax: {token!r}"
        super().__init__(self.message)

    @property
    def error(self) -> ParseError:
        """The failure as a structured ParseError."""
        return ParseError(ParseErrorKind.INVALID_RANGE_SYNTAX, self.token, self.offset, self.message)


class Operator(enum.Enum):
    """Comparison operator of a single range."""

    EQ = "="
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="

    def matches(self, ordering: int) -> bool:
        """Return True if a comparison result satisfies this operator."""
        if self is Operator.EQ:
            return ordering == 0
        if self is Operator.LT:
            return ordering < 0
        if self is Operator.LTE:
            return ordering <= 0
        if self is Operator.GT:
            return ordering > 0
        return ordering >= 0


@dataclass(frozen=True, slots=True)
class Range:
    """A single comparator: an operator applied to a full version."""

    operator: Operator
    version: Version

    def is_satisfied_by(self, version: Version) -> bool:
        return self.operator.matches(compare_versions(version, self.version))

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"


@dataclass(frozen=True, slots=True)
class BoundPair:
    """A normalized interval: an optional lower and an optional upper bound.

    A pair without bounds matches every version.
    """

    lower: Optional[Range] = None
    upper: Optional[Range] = None

    def __post_init__(self) -> None:
        if self.lower is not None and self.lower.operator not in (Operator.GT, Operator.GTE):
            raise ValueError(f"Lower bound must use > or >=, got {self.lower}")
        if self.upper is not None and self.upper.operator not in (Operator.LT, Operator.LTE):
            raise ValueError(f"Upper bound must use < or <=, got {self.upper}")

    @classmethod
    def exact(cls, version: Version) -> "BoundPair":
        return cls(Range(Operator.GTE, version), Range(Operator.LTE, version))

    @property
    def is_unbounded(self) -> bool:
        return self.lower is None and self.upper is None

    @property
    def endpoints(self) -> tuple[Version, ...]:
        return tuple(r.version for r in (self.lower, self.upper) if r is not None)

    def is_satisfied_by(self, version: Version) -> bool:
        """Check both bounds using the shared precedence comparator."""
        if self.lower is not None and not self.lower.is_satisfied_by(version):
            return False
        if self.upper is not None and not self.upper.is_satisfied_by(version):
            return False
        return True

    def __str__(self) -> str:
        if self.is_unbounded:
            return "*"
        if (
            self.lower is not None
            and self.upper is not None
            and self.lower.operator is Operator.GTE
            and self.upper.operator is Operator.LTE
            and self.lower.version == self.upper.version
        ):
            return f"={self.lower.version}"
        return " ".join(str(r) for r in (self.lower, self.upper) if r is not None)


ANY = BoundPair()

# Nothing has lower precedence than 0.0.0-0
EMPTY = BoundPair(upper=Range(Operator.LT, Version(0, 0, 0, ("0",))))

_WILDCARDS = frozenset({"x", "X", "*"})

_PARTIAL = re.compile(
    r"^(?P<major>0|[1-9][0-9]*|[xX*])"
    r"(?:\.(?P<minor>0|[1-9][0-9]*|[xX*])"
    r"(?:\.(?P<patch>0|[1-9][0-9]*|[xX*])(?P<rest>[-+].*)?)?)?$"
)

_OPERATOR = re.compile(r"^(?P<op>~>|~|\^|<=|>=|<|>|=)?(?P<body>.*)$", re.DOTALL)

_IVY = re.compile(
    r"^(?P<open>[\[\](])\s*(?P<low>[^\s,\[\]()]*)\s*,"
    r"\s*(?P<high>[^\s,\[\]()]*)\s*(?P<close>[\]\[)])$"
)

_IVY_LATEST = frozenset({"latest", "latest.integration"})


@dataclass(frozen=True, slots=True)
class _Partial:
    """A version with possibly missing or wildcard trailing components."""

    numbers: tuple[int, ...]
    version: Optional[Version] = None
    has_wildcard: bool = False

    @property
    def arity(self) -> int:
        return len(self.numbers)

    def floor(self) -> Version:
        """Complete missing components with zeros."""
        if self.version is not None:
            return self.version
        padded = self.numbers + (0,) * (3 - self.arity)
        return Version(*padded)

    def ceiling(self) -> Optional[Version]:
        """Return the first version past the partial, None if that overflows."""
        if self.arity == 0 or self.arity == 3:
            raise ValueError("ceiling() is only defined for partial versions")
        head = list(self.numbers)
        head[-1] += 1
        if head[-1] > MAX_COMPONENT:
            return None
        return Version(*(head + [0] * (3 - len(head))))


def _parse_partial(body: str) -> Optional[_Partial]:
    match = _PARTIAL.match(body)
    if match is None:
        return None

    numbers: list[int] = []
    has_wildcard = False
    for name in ("major", "minor", "patch"):
        value = match.group(name)
        if value is None:
            break
        if value in _WILDCARDS:
            has_wildcard = True
            break
        if len(value) > len(str(MAX_COMPONENT)) or int(value) > MAX_COMPONENT:
            return None
        numbers.append(int(value))

    if match.group("rest") is not None and (has_wildcard or len(numbers) < 3):
        return None

    if len(numbers) == 3:
        # Pre-release and build are validated by the strict grammar
        result = parse(body)
        if not result.ok:
            return None
        return _Partial(tuple(numbers), result.version, has_wildcard)

    return _Partial(tuple(numbers), None, has_wildcard)


def _exclusive_upper(version: Version, options: RangeOptions) -> Range:
    """Build an exclusive upper bound.

    With ``include_prerelease`` the bound becomes ``X.Y.Z-0``, which is below
    every pre-release of ``X.Y.Z``.
    """
    if options.include_prerelease and not version.prerelease:
        version = Version(version.major, version.minor, version.patch, ("0",))
    return Range(Operator.LT, version)


def _inclusive_lower(
    partial: _Partial, options: RangeOptions, version: Optional[Version] = None
) -> Range:
    """Build the inclusive lower bound of a partial version.

    With ``include_prerelease`` a zero-filled bound becomes ``X.Y.Z-0`` so the
    pre-releases of ``X.Y.Z`` are inside it. An explicit full version is kept.
    """
    if partial.version is not None:
        return Range(Operator.GTE, partial.version)
    if version is None:
        version = partial.floor()
    if options.include_prerelease:
        version = Version(version.major, version.minor, version.patch, ("0",))
    return Range(Operator.GTE, version)


def _widened(partial: _Partial, options: RangeOptions) -> BoundPair:
    """A partial version as the interval it covers: ``1.2`` is ``>=1.2.0 <1.3.0``."""
    ceiling = partial.ceiling()
    lower = _inclusive_lower(partial, options)
    if ceiling is None:
        return BoundPair(lower)
    return BoundPair(lower, _exclusive_upper(ceiling, options))


def _equal(partial: _Partial, options: RangeOptions) -> BoundPair:
    if partial.arity == 0:
        return ANY
    if partial.arity == 3:
        return BoundPair.exact(partial.floor())
    return _widened(partial, options)


def _greater(partial: _Partial, options: RangeOptions) -> BoundPair:
    if partial.arity == 0:
        return EMPTY
    if partial.arity == 3:
        return BoundPair(lower=Range(Operator.GT, partial.floor()))
    # >1.2 means >=1.3.0
    ceiling = partial.ceiling()
    if ceiling is None:
        return EMPTY
    return BoundPair(lower=_inclusive_lower(partial, options, ceiling))


def _greater_or_equal(partial: _Partial, options: RangeOptions) -> BoundPair:
    if partial.arity == 0:
        return ANY
    return BoundPair(lower=_inclusive_lower(partial, options))


def _less(partial: _Partial, options: RangeOptions) -> BoundPair:
    if partial.arity == 0:
        return EMPTY
    if partial.arity == 3:
        return BoundPair(upper=Range(Operator.LT, partial.floor()))
    # <1.2 means <1.2.0
    return BoundPair(upper=_exclusive_upper(partial.floor(), options))


def _less_or_equal(partial: _Partial, options: RangeOptions) -> BoundPair:
    if partial.arity == 0:
        return ANY
    if partial.arity == 3:
        return BoundPair(upper=Range(Operator.LTE, partial.floor()))
    # <=1.2 means <1.3.0
    ceiling = partial.ceiling()
    if ceiling is None:
        return ANY
    return BoundPair(upper=_exclusive_upper(ceiling, options))


def _tilde(partial: _Partial, options: RangeOptions) -> BoundPair:
    if partial.arity == 0:
        return ANY
    if partial.arity == 1:
        return _widened(partial, options)
    # ~1.2 and ~1.2.3 both allow patch-level changes
    return _widened(_Partial(partial.numbers[:2], partial.version), options)


def _caret(partial: _Partial, options: RangeOptions) -> BoundPair:
    if partial.arity == 0:
        return ANY

    floor = partial.floor()
    major, minor, patch = floor.major, floor.minor, floor.patch
    lower = _inclusive_lower(partial, options)
    if partial.arity == 1 or major > 0:
        fixed: tuple[int, ...] = (major,)
    elif partial.arity == 2 or minor > 0:
        fixed = (major, minor)
    else:
        fixed = (major, minor, patch)

    if len(fixed) == 3:
        if patch == MAX_COMPONENT:
            return BoundPair(lower)
        return BoundPair(lower, _exclusive_upper(Version(major, minor, patch + 1), options))

    ceiling = _Partial(fixed).ceiling()
    if ceiling is None:
        return BoundPair(lower)
    return BoundPair(lower, _exclusive_upper(ceiling, options))


_HANDLERS = {
    None: _equal,
    "=": _equal,
    ">": _greater,
    ">=": _greater_or_equal,
    "<": _less,
    "<=": _less_or_equal,
    "~": _tilde,
    "~>": _tilde,
    "^": _caret,
}


def parse_range(token: str, options: Optional[RangeOptions] = None) -> BoundPair:
    """Parse a single space-free range token into a BoundPair.

    Args:
        token: A constraint such as ``^1.2.3``, ``>=1.0`` or ``1.x``
        options: Range options (defaults to :data:`DEFAULT_OPTIONS`)

    Returns:
        The normalized BoundPair

    Raises:
        InvalidRangeError: If the operator or version body is malformed

    Examples:
        >>> str(parse_range("^0.2.3"))
        '>=0.2.3 <0.3.0'
        >>> str(parse_range(">1.2"))
        '>=1.3.0'
    """
    options = options or DEFAULT_OPTIONS
    if not token or token in _WILDCARDS:
        return ANY

    match = _OPERATOR.match(token)
    operator, body = match.group("op"), match.group("body")
    partial = _parse_partial(body)
    if partial is None:
        raise InvalidRangeError(token)

    return _HANDLERS[operator](partial, options)


def parse_hyphen_range(
    low: str, high: str, options: Optional[RangeOptions] = None
) -> BoundPair:
    """Parse an inclusive hyphen range ``low - high``.

    A partial lower bound is completed with zeros. A partial upper bound is
    widened to the next unit, exclusive: ``1.2.3 - 2.3`` is ``>=1.2.3 <2.4.0``.

    Raises:
        InvalidRangeError: If either side is not a (partial) version
    """
    options = options or DEFAULT_OPTIONS
    start = _parse_partial(low)
    if start is None:
        raise InvalidRangeError(low)
    end = _parse_partial(high)
    if end is None:
        raise InvalidRangeError(high)

    lower = None if start.arity == 0 else _inclusive_lower(start, options)

    upper: Optional[Range] = None
    if end.arity == 3:
        upper = Range(Operator.LTE, end.floor())
    elif end.arity > 0:
        ceiling = end.ceiling()
        if ceiling is not None:
            upper = _exclusive_upper(ceiling, options)

    return BoundPair(lower, upper)


def is_ivy_range(text: str) -> bool:
    """Return True if ``text`` looks like an Ivy range or ``latest`` keyword."""
    return text in _IVY_LATEST or text[:1] in ("[", "]", "(")


def _ivy_version(body: str, text: str) -> Version:
    partial = _parse_partial(body)
    if partial is None or partial.has_wildcard or partial.arity == 0:
        raise InvalidRangeError(text, f"Invalid version {body!r} in Ivy range {text!r}")
    return partial.floor()


def parse_ivy_range(text: str) -> BoundPair:
    """Parse an Ivy (Maven style) range.

    ``[`` and ``]`` on the inside of a bound make it inclusive; ``(``, ``)``
    and an outward facing bracket make it exclusive. Missing components are
    completed with zeros.

    Examples:
        >>> str(parse_ivy_range("[1.0,2.0)"))
        '>=1.0.0 <2.0.0'
        >>> str(parse_ivy_range("]1.0,)"))
        '>1.0.0'
    """
    if text in _IVY_LATEST:
        return ANY

    match = _IVY.match(text)
    if match is None:
        raise InvalidRangeError(text)

    lower: Optional[Range] = None
    if match.group("low"):
        operator = Operator.GTE if match.group("open") == "[" else Operator.GT
        lower = Range(operator, _ivy_version(match.group("low"), text))

    upper: Optional[Range] = None
    if match.group("high"):
        operator = Operator.LTE if match.group("close") == "]" else Operator.LT
        upper = Range(operator, _ivy_version(match.group("high"), text))

    if lower is None and upper is None:
        raise InvalidRangeError(text, f"Ivy range {text!r} has no bounds")

    return BoundPair(lower, upper)
