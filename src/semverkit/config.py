# SPDX-License-Identifier: MIT
"""Range evaluation options, optionally loaded from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


# Separators accepted between OR-ed range groups
SUPPORTED_OR_SEPARATORS = ("||", ",")


@dataclass(frozen=True, slots=True)
class RangeOptions:
    """Options controlling how range expressions are built and evaluated.

    Attributes:
        include_prerelease: Let pre-release versions satisfy ranges whose
            bounds carry no pre-release of the same MAJOR.MINOR.PATCH
        or_separators: Tokens splitting a range expression into OR-ed groups
    """

    include_prerelease: bool = False
    or_separators: tuple[str, ...] = ("||",)

    def __post_init__(self) -> None:
        if not self.or_separators:
            raise ConfigError("At least one OR separator is required")
        for separator in self.or_separators:
            if separator not in SUPPORTED_OR_SEPARATORS:
                raise ConfigError(
                    f"Unsupported OR separator {separator!r}, "
                    f"expected one of {', '.join(SUPPORTED_OR_SEPARATORS)}"
                )

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "RangeOptions":
        """Create RangeOptions from a parsed pyproject.toml dictionary.

        Reads the ``[tool.semverkit]`` table. Keys may use dashes or
        underscores.

        Raises:
            ConfigError: If the table has unknown keys or wrong value types
        """
        table = pyproject.get("tool", {}).get("semverkit", {})
        if not isinstance(table, dict):
            raise ConfigError("[tool.semverkit] must be a table")

        values: dict[str, Any] = {}
        for key, value in table.items():
            name = key.replace("-", "_")
            if name == "include_prerelease":
                if not isinstance(value, bool):
                    raise ConfigError(f"{key} must be a boolean")
                values[name] = value
            elif name == "or_separators":
                if isinstance(value, str):
                    value = [value]
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigError(f"{key} must be a string or a list of strings")
                values[name] = tuple(value)
            else:
                raise ConfigError(f"Unknown option in [tool.semverkit]: {key}")

        return cls(**values)


DEFAULT_OPTIONS = RangeOptions()


def load_options(project_dir: Optional[str | Path] = None) -> RangeOptions:
    """Load range options from pyproject.toml.

    Args:
        project_dir: Directory containing pyproject.toml (defaults to cwd)

    Returns:
        RangeOptions, the defaults when there is no pyproject.toml

    Raises:
        ConfigError: If the file is invalid TOML or has invalid options
    """
    project_path = Path(project_dir) if project_dir is not None else Path.cwd()
    pyproject_path = project_path / "pyproject.toml"

    if not pyproject_path.exists():
        return DEFAULT_OPTIONS

    try:
        with open(pyproject_path, "rb") as f:
            pyproject = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax: {e}") from e

    return RangeOptions.from_pyproject_dict(pyproject)
