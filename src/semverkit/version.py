# SPDX-License-Identifier: MIT
"""The Version value object.

A Version renders in three forms:

- ``str(v)``: 1.2.3-rc.1+build.5
- ``v.comparable_string()``: 1.2.3-rc.1
- ``v.core_string()``: 1.2.3

Equality (``==`` and :meth:`Version.equal`) and ordering ignore build metadata;
:meth:`Version.strict_equal` also requires identical build identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from .errors import InvalidVersionError
from .identifiers import (
    MAX_UINT64,
    BuildIdentifiers,
    Prerelease,
    compare_prerelease,
    new_build,
    new_prerelease,
    parse_prerelease,
    render_build,
    render_prerelease,
)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers; empty for a release
        build: Build metadata identifiers; never affects precedence

    ``prerelease`` and ``build`` may be given as sequences or as dot-joined
    strings when constructing a Version directly; they are stored as tuples.
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: Prerelease = ()
    build: BuildIdentifiers = ()

    def __post_init__(self) -> None:
        for attr in ("major", "minor", "patch"):
            value = getattr(self, attr)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidVersionError(
                    value, f"{attr} must be an int, got {type(value).__name__}"
                )
            if value < 0 or value > MAX_UINT64:
                raise InvalidVersionError(value, f"{attr} {value} is out of range")

        prerelease = self.prerelease
        if isinstance(prerelease, str):
            prerelease = parse_prerelease(prerelease) if prerelease else ()
        else:
            prerelease = new_prerelease(*prerelease)

        build = self.build
        if isinstance(build, str):
            build = build.split(".") if build else ()

        object.__setattr__(self, "prerelease", prerelease)
        object.__setattr__(self, "build", new_build(*build))

    def __str__(self) -> str:
        """Return the full string form, including build metadata."""
        version = self.comparable_string()
        if self.build:
            version += f"+{render_build(self.build)}"
        return version

    def comparable_string(self) -> str:
        """Return the string form without build metadata."""
        version = self.core_string()
        if self.prerelease:
            version += f"-{render_prerelease(self.prerelease)}"
        return version

    def core_string(self) -> str:
        """Return only major.minor.patch."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    def compare(self, other: Version) -> int:
        """Compare precedence with another version.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        return compare_prerelease(self.prerelease, other.prerelease)

    def equal(self, other: Version) -> bool:
        """Return True if both versions have the same precedence fields."""
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.patch == other.patch
            and self.prerelease == other.prerelease
        )

    def strict_equal(self, other: Version) -> bool:
        """Return True if both versions are equal including build metadata."""
        return self.equal(other) and self.build == other.build

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.equal(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))
