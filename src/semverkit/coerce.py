# SPDX-License-Identifier: MIT
"""Best-effort conversion of loosely formatted strings into versions."""

from __future__ import annotations

import logging
import re
from typing import Optional

from .semver import Version, parse

logger = logging.getLogger(__name__)

# First run of one to three dot separated numbers not embedded in a longer number
COERCE_PATTERN = re.compile(
    r"(?:^|[^0-9])(?P<major>[0-9]{1,16})"
    r"(?:\.(?P<minor>[0-9]{1,16}))?"
    r"(?:\.(?P<patch>[0-9]{1,16}))?"
    r"(?:$|[^0-9])"
)


def coerce(text: str) -> Optional[Version]:
    """Coerce a string into a version when possible.

    Valid versions are returned unchanged. Otherwise the first
    ``MAJOR[.MINOR[.PATCH]]`` found in the text is used with missing parts
    set to zero; pre-release and build metadata are dropped.

    Returns:
        The Version, or None if no usable numbers were found

    Examples:
        >>> str(coerce("v1.2"))
        '1.2.0'
        >>> str(coerce("release-3 build 7"))
        '3.0.0'
        >>> coerce("no digits") is None
        True
    """
    if not isinstance(text, str):
        return None

    result = parse(text)
    if result.ok:
        return result.version

    match = COERCE_PATTERN.search(text)
    if match is None:
        return None

    candidate = "{}.{}.{}".format(
        int(match.group("major")),
        int(match.group("minor") or 0),
        int(match.group("patch") or 0),
    )
    logger.debug("Coerced %r to %s", text, candidate)
    return parse(candidate).version
