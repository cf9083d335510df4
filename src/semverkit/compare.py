# SPDX-License-Identifier: MIT
"""Version comparison and sorting following semver precedence.

Pre-release ordering: numeric identifiers compare by value, alphanumeric ones
in ASCII order, numeric < alphanumeric, and a release ranks above all of its
pre-releases. Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Iterable, Union

from .identifiers import NumericIdentifier
from .parser import parse, parse_lax
from .scanner import normalize_prefixes
from .version import Version


def compare(a: Version, b: Version) -> int:
    """Compare two versions.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    return a.compare(b)


def compare_versions(
    version1: Union[str, Version], version2: Union[str, Version], *, lax: bool = False
) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        lax: Parse strings with :func:`parse_lax` instead of :func:`parse`

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
        >>> compare_versions("1", "1.0.0", lax=True)
        0
    """
    parse_func = parse_lax if lax else parse
    v1 = parse_func(version1) if isinstance(version1, str) else version1
    v2 = parse_func(version2) if isinstance(version2, str) else version2

    return compare(v1, v2)


def version_key(version: Union[str, Version], *, lax: bool = False) -> tuple:
    """Return a sort key for a version that agrees with :func:`compare`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    if isinstance(version, str):
        v = parse_lax(version) if lax else parse(version)
    else:
        v = version

    # A release sorts after every pre-release of the same core version.
    # Identifier keys put numeric (0, n) before alphanumeric (1, s).
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (
            0,
            tuple(
                (0, i.value) if isinstance(i, NumericIdentifier) else (1, i.value)
                for i in v.prerelease
            ),
        )

    return (v.major, v.minor, v.patch, prerelease_key)


class Versions(list):
    """A list of Version objects that sorts by semver precedence.

    Examples:
        >>> vs = Versions.from_strings(["1.2.3", "1.0", "1.3", "2", "0.4.2"], lax=True)
        >>> vs.sort()
        >>> [str(v) for v in vs]
        ['0.4.2', '1.0.0', '1.2.3', '1.3.0', '2.0.0']
    """

    @classmethod
    def from_strings(
        cls, version_strings: Iterable[str], *, lax: bool = False, prefixes: Iterable[str] = ()
    ) -> "Versions":
        """Parse every string into a Version.

        Raises:
            InvalidVersionError: If any string is not a valid version
        """
        parse_func = parse_lax if lax else parse
        prefixes = normalize_prefixes(prefixes)
        return cls(parse_func(s, prefixes=prefixes) for s in version_strings)

    def sort(self, *, reverse: bool = False) -> None:
        """Sort in place by precedence; versions of equal precedence keep their order."""
        super().sort(key=version_key, reverse=reverse)

    def strings(self) -> list[str]:
        return [str(v) for v in self]
