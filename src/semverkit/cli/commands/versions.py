# SPDX-License-Identifier: MIT
"""Validate, compare, sort and diff versions."""

from __future__ import annotations

import sys

import click

from ...compare import compare_versions, diff as diff_versions, version_key
from ...semver import Version, parse
from ..main import echo_error, echo_info, echo_success

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def parse_or_exit(text: str) -> Version:
    """Parse a version argument, exiting with status 2 when it is invalid."""
    result = parse(text)
    if not result.ok:
        echo_error(f"{text!r}: {result.error}")
        sys.exit(2)
    return result.version


@click.command()
@click.argument("versions", nargs=-1, required=True)
def validate(versions: tuple[str, ...]) -> None:
    """Check that each VERSION follows semantic versioning.

    Exits with status 1 if any version is invalid.

    \b
    Examples:
        semverkit validate 1.0.0 1.0.0-rc.1+build.5
        semverkit validate 1.02.3   # leading zero: invalid
    """
    failed = False
    for text in versions:
        result = parse(text)
        if result.ok:
            echo_success(f"{text}: valid")
        else:
            failed = True
            echo_error(f"{text}: {result.error.kind.value}: {result.error}")

    if failed:
        sys.exit(1)


@click.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """Print <, = or > for the precedence of FIRST relative to SECOND."""
    ordering = compare_versions(parse_or_exit(first), parse_or_exit(second))
    echo_info(_SYMBOLS[int(ordering)])


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Newest version first.")
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order, one per line."""
    parsed = [parse_or_exit(text) for text in versions]
    for version in sorted(parsed, key=version_key, reverse=reverse):
        echo_info(version.original.strip())


@click.command()
@click.argument("first")
@click.argument("second")
def diff(first: str, second: str) -> None:
    """Print the most significant field that differs between two versions."""
    result = diff_versions(parse_or_exit(first), parse_or_exit(second))
    echo_info(result.name)
