# SPDX-License-Identifier: MIT
"""Version string validation without parsing.

:func:`is_valid` and :func:`is_valid_lax` answer whether :func:`parse` and
:func:`parse_lax` would accept a string. They walk the string by index and
never build a Version or any identifier objects, which makes them suitable
for filtering large numbers of candidate tags.
"""

from __future__ import annotations

from typing import Iterable

from .identifiers import MAX_UINT64_DIGITS, is_digit, is_identifier_char
from .scanner import CORE_NUMBERS, accepts_prefix

_INVALID = -1
_MAX_UINT64_TEXT = "18446744073709551615"


def is_valid(version_string: str, *, prefixes: Iterable[str] = ()) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        prefixes: Extra literal prefixes to accept before the core version

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid("1.0.0")
        True
        >>> is_valid("1.0")
        False
        >>> is_valid("v1.0.0-alpha")
        True
    """
    return _is_valid(version_string, False, prefixes)


def is_valid_lax(version_string: str, *, prefixes: Iterable[str] = ()) -> bool:
    """Check if a string is a valid, possibly partial, semantic version.

    Examples:
        >>> is_valid_lax("v1")
        True
        >>> is_valid_lax("1.2-beta")
        True
    """
    return _is_valid(version_string, True, prefixes)


def _is_valid(s: str, lax: bool, prefixes: Iterable[str]) -> bool:
    if not isinstance(s, str) or not s or not s.isascii():
        return False

    pos = _prefix_end(s, prefixes)
    if pos == _INVALID:
        return False

    pos = _core_end(s, pos, lax)
    if pos == _INVALID:
        return False

    if pos < len(s) and s[pos] == "-":
        pos = _prerelease_end(s, pos + 1)
        if pos == _INVALID:
            return False

    if pos < len(s) and s[pos] == "+":
        return _is_build_valid(s, pos + 1)

    return pos == len(s)


def _prefix_end(s: str, prefixes: Iterable[str]) -> int:
    pos = 0
    while pos < len(s) and not is_digit(s[pos]):
        pos += 1

    if pos == len(s) or not accepts_prefix(s, pos, prefixes):
        return _INVALID
    return pos


def _fits_uint64(s: str, start: int, end: int) -> bool:
    length = end - start
    if length != MAX_UINT64_DIGITS:
        return length < MAX_UINT64_DIGITS

    # Same number of digits: compare digit by digit.
    for i in range(length):
        if s[start + i] != _MAX_UINT64_TEXT[i]:
            return s[start + i] < _MAX_UINT64_TEXT[i]
    return True


def _is_number_valid(s: str, start: int, end: int) -> bool:
    if end == start:
        return False
    if end - start > 1 and s[start] == "0":
        return False
    return _fits_uint64(s, start, end)


def _core_end(s: str, pos: int, lax: bool) -> int:
    count = 0

    while True:
        start = pos
        while pos < len(s) and is_digit(s[pos]):
            pos += 1

        if not _is_number_valid(s, start, pos):
            return _INVALID

        count += 1
        if count == CORE_NUMBERS or pos >= len(s) or s[pos] != ".":
            break
        pos += 1

    if count < CORE_NUMBERS and not lax:
        return _INVALID

    if pos < len(s) and s[pos] != "-" and s[pos] != "+":
        return _INVALID

    return pos


def _prerelease_end(s: str, pos: int) -> int:
    while True:
        start = pos
        numeric = True

        while pos < len(s) and s[pos] != "." and s[pos] != "+":
            c = s[pos]
            if not is_identifier_char(c):
                return _INVALID
            if numeric and not is_digit(c):
                numeric = False
            pos += 1

        if pos == start:
            return _INVALID

        # Only all-digit identifiers are held to the number rules.
        if numeric and not _is_number_valid(s, start, pos):
            return _INVALID

        if pos < len(s) and s[pos] == ".":
            pos += 1
            continue

        return pos


def _is_build_valid(s: str, pos: int) -> bool:
    while True:
        start = pos
        while pos < len(s) and s[pos] != ".":
            if not is_identifier_char(s[pos]):
                return False
            pos += 1

        if pos == start:
            return False

        if pos == len(s):
            return True
        pos += 1
