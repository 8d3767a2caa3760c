# SPDX-License-Identifier: MIT
"""Check versions against ranges and print normalized ranges."""

from __future__ import annotations

import sys

import click

from ...config import ConfigError, RangeOptions
from ...range import InvalidRangeError
from ...ranges_list import RangesList, build_ranges_list
from ..main import Context, echo_error, echo_info, pass_context
from .versions import parse_or_exit


def _build_or_exit(ctx: Context, text: str) -> RangesList:
    try:
        options: RangeOptions = ctx.load_options()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(2)

    try:
        return build_ranges_list(text, options)
    except InvalidRangeError as e:
        echo_error(f"{e.message} (at offset {e.offset})")
        sys.exit(2)


@click.command()
@click.argument("version")
@click.argument("range_text", metavar="RANGE")
@pass_context
def satisfies(ctx: Context, version: str, range_text: str) -> None:
    """Check whether VERSION satisfies RANGE.

    Prints true or false and exits with status 0 or 1.

    \b
    Examples:
        semverkit satisfies 1.4.0 "^1.2.3"
        semverkit satisfies 1.2.3-beta ">=1.2.3-0 <2.0.0"
    """
    ranges = _build_or_exit(ctx, range_text)
    if ranges.is_satisfied_by(parse_or_exit(version)):
        echo_info("true")
    else:
        echo_info("false")
        sys.exit(1)


@click.command(name="range")
@click.argument("range_text", metavar="RANGE")
@pass_context
def range_(ctx: Context, range_text: str) -> None:
    """Print RANGE in its normalized comparator form.

    \b
    Examples:
        semverkit range "~1.2"          # >=1.2.0 <1.3.0
        semverkit range "1.2.3 - 2.3"   # >=1.2.3 <2.4.0
    """
    echo_info(str(_build_or_exit(ctx, range_text)))
