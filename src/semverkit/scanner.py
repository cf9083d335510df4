# SPDX-License-Identifier: MIT
"""Single-pass scanner for semantic version strings.

The scanner walks the input left to right exactly once:

    [prefix] major[.minor[.patch]] [-prerelease] [+build]

Each step takes the current position and returns the position just past the
segment it consumed, so :class:`ScanResult` can report where every segment
ends. Any grammar violation raises :class:`InvalidVersionError` pointing at the
offending position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidVersionError
from .identifiers import (
    BuildIdentifiers,
    Prerelease,
    is_digit,
    is_identifier_char,
    parse_identifier,
    parse_uint64,
)

DEFAULT_PREFIX = "v"
CORE_NUMBERS = 3


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Values and segment end positions produced by :func:`scan`.

    Attributes:
        prefix_end: Index of the first core digit
        core_end: Index just past the last core number
        prerelease_end: Index just past the pre-release (``core_end`` if none)
        end: Index just past the build metadata, i.e. the input length
        core: The major, minor, and patch numbers, missing ones as zero
        core_count: How many core numbers the input actually spelled out
        prerelease: Parsed pre-release identifiers
        build: Build identifiers
    """

    prefix_end: int
    core_end: int
    prerelease_end: int
    end: int
    core: tuple[int, int, int]
    core_count: int
    prerelease: Prerelease
    build: BuildIdentifiers


def normalize_prefixes(prefixes: Iterable[str]) -> tuple[str, ...]:
    """Return prefixes as a tuple; a bare string is a single prefix."""
    if isinstance(prefixes, str):
        return (prefixes,)
    return tuple(prefixes)


def accepts_prefix(s: str, end: int, prefixes: Iterable[str] = ()) -> bool:
    """Return True if ``s[:end]`` is an accepted version prefix.

    An empty prefix and ``"v"`` are always accepted.
    """
    if end == 0:
        return True
    if end == 1 and s[0] == DEFAULT_PREFIX:
        return True
    for prefix in normalize_prefixes(prefixes):
        if len(prefix) == end and s.startswith(prefix):
            return True
    return False


def scan_prefix(s: str, prefixes: Iterable[str] = ()) -> int:
    """Skip the optional prefix and return the position of the first digit."""
    pos = 0
    while pos < len(s) and not is_digit(s[pos]):
        pos += 1

    if pos == len(s):
        raise InvalidVersionError(s, f"version {s!r} contains no core version number", pos)

    if not accepts_prefix(s, pos, prefixes):
        raise InvalidVersionError(
            s, f"version {s!r} does not start with a digit or an accepted prefix", 0
        )

    return pos


def scan_number(s: str, pos: int) -> tuple[int, int]:
    """Consume one core version number.

    Returns:
        Tuple of (value, position after the number)
    """
    start = pos
    while pos < len(s) and is_digit(s[pos]):
        pos += 1

    if pos == start:
        if pos < len(s):
            message = f"expected a digit but found {s[pos]!r} at position {pos}"
        else:
            message = f"expected a digit at position {pos} but the version ended"
        raise InvalidVersionError(s, message, pos)

    return parse_uint64(s[start:pos], s, start), pos


def scan_core(s: str, pos: int, lax: bool = False) -> tuple[tuple[int, int, int], int, int]:
    """Consume the dot-separated core version numbers.

    In strict mode all three numbers are required. In lax mode one or two are
    enough and the rest default to zero.

    Returns:
        Tuple of ((major, minor, patch), number count, position after the core)
    """
    numbers = [0, 0, 0]
    count = 0

    while True:
        numbers[count], pos = scan_number(s, pos)
        count += 1
        if count == CORE_NUMBERS or pos >= len(s) or s[pos] != ".":
            break
        pos += 1

    if count < CORE_NUMBERS and not lax:
        raise InvalidVersionError(
            s, f"expected {CORE_NUMBERS} core version numbers but found {count}", pos
        )

    if pos < len(s) and s[pos] != "-" and s[pos] != "+":
        raise InvalidVersionError(s, f"invalid character {s[pos]!r} at position {pos}", pos)

    return (numbers[0], numbers[1], numbers[2]), count, pos


def scan_prerelease(s: str, pos: int) -> tuple[Prerelease, int]:
    """Consume a pre-release segment starting at its leading hyphen.

    Returns:
        Tuple of (identifiers, position of the ``+`` or end of input)
    """
    pos += 1
    identifiers = []

    while True:
        start = pos
        while pos < len(s) and s[pos] != "." and s[pos] != "+":
            pos += 1

        identifiers.append(parse_identifier(s[start:pos], s, start))

        if pos < len(s) and s[pos] == ".":
            pos += 1
            continue

        return tuple(identifiers), pos


def scan_build(s: str, pos: int) -> tuple[BuildIdentifiers, int]:
    """Consume a build metadata segment starting at its leading plus sign.

    Returns:
        Tuple of (identifiers, end of input)
    """
    pos += 1
    identifiers = []

    while True:
        start = pos
        while pos < len(s) and s[pos] != ".":
            if not is_identifier_char(s[pos]):
                raise InvalidVersionError(
                    s, f"invalid character {s[pos]!r} in build metadata at position {pos}", pos
                )
            pos += 1

        if pos == start:
            raise InvalidVersionError(s, f"empty build identifier at position {pos}", pos)

        identifiers.append(s[start:pos])

        if pos == len(s):
            return tuple(identifiers), pos
        pos += 1


def scan(s: str, lax: bool = False, prefixes: Iterable[str] = ()) -> ScanResult:
    """Scan a complete version string.

    Args:
        s: The version string
        lax: Accept one or two core numbers instead of exactly three
        prefixes: Prefixes accepted in addition to ``"v"``

    Returns:
        ScanResult describing every segment

    Raises:
        InvalidVersionError: On the first grammar violation
    """
    if not s:
        raise InvalidVersionError(s, "empty version string", 0)

    if not s.isascii():
        raise InvalidVersionError(s, f"version {s!r} contains non-ASCII characters")

    prefix_end = scan_prefix(s, prefixes)
    core, count, pos = scan_core(s, prefix_end, lax)
    core_end = pos

    prerelease: Prerelease = ()
    if pos < len(s) and s[pos] == "-":
        prerelease, pos = scan_prerelease(s, pos)
    prerelease_end = pos

    build: BuildIdentifiers = ()
    if pos < len(s) and s[pos] == "+":
        build, pos = scan_build(s, pos)

    if pos != len(s):
        raise InvalidVersionError(s, f"invalid character {s[pos]!r} at position {pos}", pos)

    return ScanResult(
        prefix_end=prefix_end,
        core_end=core_end,
        prerelease_end=prerelease_end,
        end=pos,
        core=core,
        core_count=count,
        prerelease=prerelease,
        build=build,
    )
