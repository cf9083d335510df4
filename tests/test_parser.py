# SPDX-License-Identifier: MIT
"""Unit tests for semantic version parsing."""

import pytest

from semverkit import (
    AlphanumericIdentifier,
    InvalidVersionError,
    MustParseError,
    NumericIdentifier,
    Version,
    must_parse,
    must_parse_lax,
    parse,
    parse_lax,
)

from version_cases import VERSION_CASES


class TestParse:
    """Tests for the strict parse function."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = parse("1.2.3")
        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.prerelease == ()
        assert v.build == ()

    def test_version_with_zeros(self):
        v = parse("0.0.0")
        assert (v.major, v.minor, v.patch) == (0, 0, 0)

    def test_v_prefix(self):
        v = parse("v1.2.3")
        assert v.core_string() == "1.2.3"

    def test_prerelease_identifiers_are_classified(self):
        """Test that digit-only identifiers become numeric."""
        v = parse("1.0.0-alpha.1.0a.456-789")
        assert v.prerelease == (
            AlphanumericIdentifier("alpha"),
            NumericIdentifier(1),
            AlphanumericIdentifier("0a"),
            AlphanumericIdentifier("456-789"),
        )

    def test_build_metadata(self):
        v = parse("1.0.0+build.123")
        assert v.build == ("build", "123")
        assert v.prerelease == ()

    def test_build_keeps_leading_zeros(self):
        v = parse("1.0.0+001.0")
        assert v.build == ("001", "0")

    def test_prerelease_and_build(self):
        v = parse("1.0.0-alpha.1+build.456")
        assert str(v.prerelease[0]) == "alpha"
        assert v.prerelease[1] == NumericIdentifier(1)
        assert v.build == ("build", "456")

    def test_hyphen_in_build_is_not_prerelease(self):
        v = parse("1.0.0+build-1")
        assert v.prerelease == ()
        assert v.build == ("build-1",)

    def test_plus_ends_prerelease(self):
        v = parse("1.0.0-rc-1+exp")
        assert v.prerelease == (AlphanumericIdentifier("rc-1"),)
        assert v.build == ("exp",)

    def test_max_uint64(self):
        v = parse("18446744073709551615.0.0")
        assert v.major == 2**64 - 1

    def test_overflow(self):
        with pytest.raises(InvalidVersionError, match="overflows"):
            parse("18446744073709551616.0.0")

    def test_prerelease_overflow(self):
        with pytest.raises(InvalidVersionError):
            parse("1.0.0-18446744073709551616")

    def test_caller_prefix(self):
        v = parse("release-2.0.0", prefixes=["release-"])
        assert v == Version(2, 0, 0)

    def test_caller_prefix_keeps_v(self):
        assert parse("v2.0.0", prefixes=["release-"]) == Version(2, 0, 0)

    def test_caller_prefix_as_plain_string(self):
        assert parse("go1.2.3", prefixes="go") == Version(1, 2, 3)
        with pytest.raises(InvalidVersionError):
            parse("o1.2.3", prefixes="go")

    def test_unknown_prefix(self):
        with pytest.raises(InvalidVersionError, match="accepted prefix"):
            parse("release-2.0.0")


class TestParseErrors:
    """Tests for invalid version strings."""

    @pytest.mark.parametrize(
        "version",
        ["01.2.3", "1.2.3-0123", "1.2.3-", "+1.0.0", "1.0.0-alpha_beta"],
    )
    def test_rejected(self, version):
        with pytest.raises(InvalidVersionError):
            parse(version)

    def test_empty_string(self):
        with pytest.raises(InvalidVersionError, match="empty"):
            parse("")

    def test_missing_patch(self):
        with pytest.raises(InvalidVersionError, match="core version numbers"):
            parse("1.0")

    def test_non_ascii(self):
        with pytest.raises(InvalidVersionError, match="non-ASCII"):
            parse("1.0.0-bēta")

    def test_error_position(self):
        """Test that errors point at the offending character."""
        with pytest.raises(InvalidVersionError) as exc_info:
            parse("1.2.3-alpha_beta")
        assert exc_info.value.position == 11
        assert exc_info.value.version == "1.2.3-alpha_beta"

    def test_trailing_garbage_position(self):
        with pytest.raises(InvalidVersionError, match="at position 5") as exc_info:
            parse("1.2.3.4")
        assert exc_info.value.position == 5

    def test_leading_zero_message(self):
        with pytest.raises(InvalidVersionError, match="leading zero"):
            parse("1.2.3-0123")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse("not a version")

    def test_non_string_input(self):
        with pytest.raises(InvalidVersionError):
            parse(123)  # type: ignore

    def test_none_input(self):
        with pytest.raises(InvalidVersionError):
            parse(None)  # type: ignore


class TestParseLax:
    """Tests for the lax parse function."""

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("v1", "1.0.0"),
            ("1", "1.0.0"),
            ("1.2", "1.2.0"),
            ("1.2.3", "1.2.3"),
            ("1.2-beta", "1.2.0-beta"),
            ("1-rc.1+build.5", "1.0.0-rc.1+build.5"),
            ("v0+meta", "0.0.0+meta"),
        ],
    )
    def test_partial_versions(self, version, expected):
        assert str(parse_lax(version)) == expected

    @pytest.mark.parametrize("version", ["", "v", "1.", "01", "1..2", "1.2.3.4", "1.2-", "1.2a"])
    def test_rejected(self, version):
        with pytest.raises(InvalidVersionError):
            parse_lax(version)

    def test_caller_prefix(self):
        assert str(parse_lax("go1.21", prefixes=("go",))) == "1.21.0"


class TestMustParse:
    """Tests for the must_parse helpers."""

    def test_valid(self):
        assert must_parse("1.2.3") == Version(1, 2, 3)
        assert must_parse_lax("1.2") == Version(1, 2, 0)

    def test_invalid_raises_must_parse_error(self):
        with pytest.raises(MustParseError) as exc_info:
            must_parse("1.2")
        assert isinstance(exc_info.value.__cause__, InvalidVersionError)

    def test_not_a_value_error(self):
        """Test that the failure escapes ordinary validation handlers."""
        with pytest.raises(MustParseError):
            try:
                must_parse_lax("x")
            except ValueError:
                pytest.fail("MustParseError must not be a ValueError")

    def test_prefixes(self):
        assert must_parse("go1.2.3", prefixes=["go"]) == Version(1, 2, 3)


class TestCaseTable:
    """Run the shared table through both parse modes."""

    @pytest.mark.parametrize("version,prefixes,strict_ok,lax_ok", VERSION_CASES)
    def test_strict(self, version, prefixes, strict_ok, lax_ok):
        if strict_ok:
            assert isinstance(parse(version, prefixes=prefixes), Version)
        else:
            with pytest.raises(InvalidVersionError):
                parse(version, prefixes=prefixes)

    @pytest.mark.parametrize("version,prefixes,strict_ok,lax_ok", VERSION_CASES)
    def test_lax(self, version, prefixes, strict_ok, lax_ok):
        if lax_ok:
            assert isinstance(parse_lax(version, prefixes=prefixes), Version)
        else:
            with pytest.raises(InvalidVersionError):
                parse_lax(version, prefixes=prefixes)
