# SPDX-License-Identifier: MIT
"""Unit tests for programmatic range expressions."""

import pytest

from semverkit import InvalidVersionError, RangeOptions, parse_version, satisfies
from semverkit.expressions import equal, greater, greater_or_equal, less, less_or_equal


class TestRangesExpression:
    """Tests for RangesExpression builders."""

    def test_leaves(self):
        """Test the string form of each leaf."""
        assert str(equal("1.0.0")) == "=1.0.0"
        assert str(greater("1.0.0")) == ">1.0.0"
        assert str(greater_or_equal("1.0.0")) == ">=1.0.0"
        assert str(less("1.0.0")) == "<1.0.0"
        assert str(less_or_equal(parse_version("1.0.0"))) == "<=1.0.0"

    def test_and_or(self):
        """Test combining expressions."""
        expr = greater_or_equal("1.0.0").and_(less("2.0.0")).or_(equal("3.0.0"))
        assert str(expr) == ">=1.0.0 <2.0.0 || =3.0.0"
        assert satisfies("1.5.0", expr) is True
        assert satisfies("3.0.0", expr) is True
        assert satisfies("2.5.0", expr) is False

    def test_and_distributes_over_or(self):
        """Test that and_ conjoins with every alternative."""
        expr = greater("1.0.0").and_(less("2.0.0").or_(less_or_equal("1.5.0")))
        assert str(expr) == ">1.0.0 <2.0.0 || >1.0.0 <=1.5.0"

    def test_prerelease_rule_applies(self):
        """Test that expressions follow the pre-release exclusion rule."""
        expr = greater_or_equal("1.0.0").and_(less("2.0.0"))
        assert satisfies("1.5.0-beta", expr) is False
        assert satisfies("1.5.0-beta", expr, RangeOptions(include_prerelease=True)) is True

    def test_invalid_version(self):
        """Test that leaves reject invalid versions."""
        with pytest.raises(InvalidVersionError):
            greater("1.0")
