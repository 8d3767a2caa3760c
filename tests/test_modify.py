# SPDX-License-Identifier: MIT
"""Unit tests for version modifiers and coercion."""

import pytest

from semverkit import (
    InvalidVersionError,
    coerce,
    next_major,
    next_minor,
    next_patch,
    parse_version,
    with_build,
    with_cleared_build,
    with_cleared_prerelease,
    with_cleared_prerelease_and_build,
    with_inc_major,
    with_inc_minor,
    with_inc_patch,
    with_prerelease,
)


class TestNextVersions:
    """Tests for next_major, next_minor and next_patch."""

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.2.3", "2.0.0"),
            ("1.2.3-rc.1+build", "2.0.0"),
            ("2.0.0-rc.1", "2.0.0"),
            ("2.0.1-rc.1", "3.0.0"),
        ],
    )
    def test_next_major(self, version, expected):
        """Test next_major, where pre-releases of a major bump to it."""
        assert str(next_major(parse_version(version))) == expected

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.2.3", "1.3.0"),
            ("1.3.0-beta", "1.3.0"),
            ("1.3.1-beta", "1.4.0"),
        ],
    )
    def test_next_minor(self, version, expected):
        """Test next_minor, where pre-releases of a minor bump to it."""
        assert str(next_minor(parse_version(version))) == expected

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.2.3", "1.2.4"),
            ("1.2.3-alpha", "1.2.3"),
            ("1.2.3+build", "1.2.4"),
        ],
    )
    def test_next_patch(self, version, expected):
        """Test next_patch, where a pre-release bumps to its release."""
        assert str(next_patch(parse_version(version))) == expected

    def test_input_unchanged(self):
        """Test that modifiers return new versions."""
        original = parse_version("1.2.3-rc.1")
        next_major(original)
        assert str(original) == "1.2.3-rc.1"


class TestIncrements:
    """Tests for with_inc_* helpers."""

    def test_inc_major(self):
        """Test that incrementing major keeps pre-release and build."""
        v = parse_version("1.2.3-rc.1+b5")
        assert str(with_inc_major(v)) == "2.0.0-rc.1+b5"
        assert str(with_inc_major(v, 3)) == "4.0.0-rc.1+b5"

    def test_inc_minor(self):
        """Test incrementing minor."""
        assert str(with_inc_minor(parse_version("1.2.3"), 2)) == "1.4.0"

    def test_inc_patch(self):
        """Test incrementing patch."""
        assert str(with_inc_patch(parse_version("1.2.3-beta"))) == "1.2.4-beta"

    def test_negative_increment(self):
        """Test that negative increments are allowed down to zero."""
        assert str(with_inc_patch(parse_version("1.2.3"), -3)) == "1.2.0"
        with pytest.raises(ValueError):
            with_inc_major(parse_version("1.2.3"), -2)


class TestSections:
    """Tests for replacing and clearing pre-release and build."""

    def test_with_prerelease(self):
        """Test replacing the pre-release."""
        v = with_prerelease(parse_version("1.2.3-alpha+b1"), "rc.2")
        assert v.prerelease == ("rc", "2")
        assert v.build == ("b1",)

    def test_with_invalid_prerelease(self):
        """Test that an invalid pre-release is rejected."""
        with pytest.raises(InvalidVersionError):
            with_prerelease(parse_version("1.2.3"), "rc.01")

    def test_with_build(self):
        """Test replacing build metadata."""
        v = with_build(parse_version("1.2.3-alpha"), "001.sha")
        assert str(v) == "1.2.3-alpha+001.sha"

    def test_with_invalid_build(self):
        """Test that invalid build metadata is rejected."""
        with pytest.raises(InvalidVersionError):
            with_build(parse_version("1.2.3"), "a..b")

    def test_cleared(self):
        """Test clearing sections."""
        v = parse_version("1.2.3-alpha+b1")
        assert str(with_cleared_prerelease(v)) == "1.2.3+b1"
        assert str(with_cleared_build(v)) == "1.2.3-alpha"
        assert str(with_cleared_prerelease_and_build(v)) == "1.2.3"

    def test_cleared_original_text(self):
        """Test that a derived version records its own canonical text."""
        v = with_cleared_build(parse_version(" 1.2.3+b1 "))
        assert v.original == "1.2.3"
        assert v == parse_version("1.2.3")


class TestCoerce:
    """Tests for coerce."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.2.3", "1.2.3"),
            ("1.2.3-rc.1", "1.2.3-rc.1"),
            ("v1.2", "1.2.0"),
            ("1", "1.0.0"),
            ("release-3 build 7", "3.0.0"),
            ("1.2.3.4", "1.2.3"),
            ("version 01.002.3 final", "1.2.3"),
            ("1.2.3_beta", "1.2.3"),
        ],
    )
    def test_coerce(self, text, expected):
        """Test coercion of loosely formatted versions."""
        assert str(coerce(text)) == expected

    @pytest.mark.parametrize("text", ["", "no digits", "v.x", "99999999999999999"])
    def test_not_coercible(self, text):
        """Test that text without usable numbers yields None."""
        assert coerce(text) is None

    def test_non_string(self):
        """Test that non-string input yields None."""
        assert coerce(None) is None  # type: ignore
