# SPDX-License-Identifier: MIT
"""Bump and coerce versions."""

from __future__ import annotations

import sys
from typing import Optional

import click

from ...coerce import coerce as coerce_version
from ...modify import next_major, next_minor, next_patch, with_prerelease
from ...semver import InvalidVersionError
from ..main import echo_error, echo_info
from .versions import parse_or_exit

_BUMPS = {
    "major": next_major,
    "minor": next_minor,
    "patch": next_patch,
}


@click.command()
@click.argument("part", type=click.Choice(["major", "minor", "patch", "prerelease"]))
@click.argument("version")
@click.option(
    "--pre",
    "pre",
    default=None,
    help="Pre-release label to attach, e.g. rc.1 (required for 'prerelease').",
)
def bump(part: str, version: str, pre: Optional[str]) -> None:
    """Print VERSION with PART bumped.

    \b
    Examples:
        semverkit bump minor 1.2.3            # 1.3.0
        semverkit bump major 2.0.0-rc.1       # 2.0.0
        semverkit bump patch 1.2.3 --pre rc.1 # 1.2.4-rc.1
        semverkit bump prerelease 1.2.3 --pre beta
    """
    current = parse_or_exit(version)

    if part == "prerelease":
        if pre is None:
            echo_error("--pre is required when bumping the pre-release")
            sys.exit(2)
        result = current
    else:
        result = _BUMPS[part](current)

    if pre is not None:
        try:
            result = with_prerelease(result, pre)
        except InvalidVersionError as e:
            echo_error(e.message)
            sys.exit(2)

    echo_info(str(result))


@click.command()
@click.argument("text")
def coerce(text: str) -> None:
    """Print the version found in loosely formatted TEXT."""
    version = coerce_version(text)
    if version is None:
        echo_error(f"No version found in {text!r}")
        sys.exit(1)
    echo_info(str(version))
