# SPDX-License-Identifier: MIT
"""Command line front end for semverkit."""

from .main import cli, main

__all__ = ["cli", "main"]
