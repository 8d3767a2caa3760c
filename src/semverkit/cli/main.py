# SPDX-License-Identifier: MIT
"""CLI entry point for semverkit command."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from ..config import ConfigError, RangeOptions, load_options


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.options: Optional[RangeOptions] = None
        self.verbose: bool = False
        self.include_prerelease: bool = False
        self.project_dir: Optional[Path] = None

    def load_options(self) -> RangeOptions:
        """Load range options, caching the result."""
        if self.options is None:
            options = load_options(self.project_dir)
            if self.include_prerelease:
                options = replace(options, include_prerelease=True)
            self.options = options
        return self.options


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="semverkit")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.semverkit] options from this directory's pyproject.toml.",
)
@click.option(
    "--include-prerelease",
    is_flag=True,
    help="Let pre-release versions satisfy any range they fall into.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path], include_prerelease: bool) -> None:
    """Semantic version toolkit.

    Validate, compare, sort and bump versions, and check them against ranges.

    \b
    Examples:
        semverkit validate 1.2.3 1.02.3
        semverkit compare 1.0.0-rc.1 1.0.0
        semverkit satisfies 1.4.0 "^1.2.3"
        semverkit range "1.2.3 - 2.3"
        semverkit bump minor 1.2.3
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    ctx.include_prerelease = include_prerelease
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s][%(name)s]: %(message)s",
    )


# Import and register commands
from .commands import bump, ranges, versions

cli.add_command(versions.validate)
cli.add_command(versions.compare)
cli.add_command(versions.sort)
cli.add_command(versions.diff)
cli.add_command(ranges.satisfies)
cli.add_command(ranges.range_)
cli.add_command(bump.bump)
cli.add_command(bump.coerce)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(2)


if __name__ == "__main__":
    main()
