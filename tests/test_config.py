# SPDX-License-Identifier: MIT
"""Tests for range options loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from semverkit import ConfigError, RangeOptions, load_options


class TestRangeOptions:
    """Tests for RangeOptions."""

    def test_defaults(self):
        """Test default option values."""
        options = RangeOptions()
        assert options.include_prerelease is False
        assert options.or_separators == ("||",)

    def test_unsupported_separator(self):
        """Test that unknown separators are rejected."""
        with pytest.raises(ConfigError):
            RangeOptions(or_separators=(";",))

    def test_empty_separators(self):
        """Test that at least one separator is required."""
        with pytest.raises(ConfigError):
            RangeOptions(or_separators=())

    def test_from_dict_with_dashes(self):
        """Test that dashed and underscored keys are accepted."""
        options = RangeOptions.from_pyproject_dict(
            {"tool": {"semverkit": {"include-prerelease": True, "or_separators": ["||", ","]}}}
        )
        assert options.include_prerelease is True
        assert options.or_separators == ("||", ",")

    def test_from_dict_single_separator_string(self):
        """Test that a single separator may be given as a string."""
        options = RangeOptions.from_pyproject_dict({"tool": {"semverkit": {"or-separators": ","}}})
        assert options.or_separators == (",",)

    def test_from_dict_without_section(self):
        """Test that a missing section yields defaults."""
        assert RangeOptions.from_pyproject_dict({"project": {"name": "x"}}) == RangeOptions()

    @pytest.mark.parametrize(
        "table",
        [
            {"include-prerelease": "yes"},
            {"or-separators": [1]},
            {"loose": True},
        ],
    )
    def test_from_dict_invalid(self, table):
        """Test that invalid options raise ConfigError."""
        with pytest.raises(ConfigError):
            RangeOptions.from_pyproject_dict({"tool": {"semverkit": table}})


class TestLoadOptions:
    """Tests for load_options."""

    def test_missing_pyproject(self, tmp_path: Path) -> None:
        """Test that a directory without pyproject.toml yields defaults."""
        assert load_options(tmp_path) == RangeOptions()

    def test_load(self, tmp_path: Path) -> None:
        """Test loading options from pyproject.toml."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.semverkit]\ninclude-prerelease = true\nor-separators = ["||", ","]\n'
        )
        options = load_options(tmp_path)
        assert options.include_prerelease is True
        assert options.or_separators == ("||", ",")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test that invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[tool.semverkit\n")
        with pytest.raises(ConfigError):
            load_options(tmp_path)
