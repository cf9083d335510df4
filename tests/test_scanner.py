# SPDX-License-Identifier: MIT
"""Unit tests for the single-pass version scanner."""

import pytest

from semverkit import InvalidVersionError, NumericIdentifier
from semverkit.scanner import (
    accepts_prefix,
    scan,
    scan_build,
    scan_core,
    scan_number,
    scan_prefix,
    scan_prerelease,
)


class TestScan:
    """Tests for segment positions reported by scan."""

    def test_full_version_positions(self):
        result = scan("v1.2.3-rc.1+build.5")
        assert result.prefix_end == 1
        assert result.core_end == 6
        assert result.prerelease_end == 11
        assert result.end == 19
        assert result.core == (1, 2, 3)
        assert result.core_count == 3
        assert result.prerelease[1] == NumericIdentifier(1)
        assert result.build == ("build", "5")

    def test_release_positions(self):
        result = scan("1.2.3")
        assert result.prefix_end == 0
        assert result.core_end == result.prerelease_end == result.end == 5

    def test_lax_core_count(self):
        result = scan("1.2+meta", lax=True)
        assert result.core == (1, 2, 0)
        assert result.core_count == 2
        assert result.prerelease_end == 3

    def test_strict_needs_three_numbers(self):
        with pytest.raises(InvalidVersionError):
            scan("1.2+meta")

    def test_non_ascii_checked_first(self):
        with pytest.raises(InvalidVersionError, match="non-ASCII") as exc_info:
            scan("x1.2.3-é")
        assert exc_info.value.position is None


class TestScanSteps:
    """Tests for the individual scanning steps."""

    def test_prefix(self):
        assert scan_prefix("1.0.0") == 0
        assert scan_prefix("v1.0.0") == 1
        assert scan_prefix("release-1.0.0", ["release-"]) == 8

    @pytest.mark.parametrize("version", ["v", "vv1", "x1.0.0", "release", "-1"])
    def test_bad_prefix(self, version):
        with pytest.raises(InvalidVersionError):
            scan_prefix(version, ["release"])

    def test_accepts_prefix(self):
        assert accepts_prefix("1.0.0", 0)
        assert accepts_prefix("v1.0.0", 1)
        assert not accepts_prefix("x1.0.0", 1)
        assert accepts_prefix("go1.0.0", 2, ("go",))
        assert not accepts_prefix("go1.0.0", 2, ("g",))

    def test_number(self):
        assert scan_number("123.4", 0) == (123, 3)
        assert scan_number("v0", 1) == (0, 2)

    @pytest.mark.parametrize("text", ["", ".1", "01", "a"])
    def test_bad_number(self, text):
        with pytest.raises(InvalidVersionError):
            scan_number(text, 0)

    def test_core(self):
        assert scan_core("1.2.3-rc", 0) == ((1, 2, 3), 3, 5)
        assert scan_core("7-rc", 0, lax=True) == ((7, 0, 0), 1, 1)

    def test_core_stops_after_three_numbers(self):
        with pytest.raises(InvalidVersionError, match="invalid character '.'"):
            scan_core("1.2.3.4", 0)

    def test_prerelease(self):
        identifiers, pos = scan_prerelease("1.2.3-a.b+c", 5)
        assert [str(i) for i in identifiers] == ["a", "b"]
        assert pos == 9

    def test_empty_prerelease(self):
        with pytest.raises(InvalidVersionError, match="empty pre-release identifier"):
            scan_prerelease("1.2.3-+c", 5)

    def test_build(self):
        assert scan_build("1.2.3+a.001", 5) == (("a", "001"), 11)

    @pytest.mark.parametrize("version", ["1.2.3+", "1.2.3+a.", "1.2.3+a+b", "1.2.3+a_b"])
    def test_bad_build(self, version):
        with pytest.raises(InvalidVersionError):
            scan_build(version, 5)
