# SPDX-License-Identifier: MIT
"""Version string parsing.

:func:`parse` accepts only complete versions such as ``1.2.3``,
``1.2.3-beta.1`` or ``v1.2.3-beta.1+darwin.amd64``. :func:`parse_lax` also
accepts partial core versions and fills the missing numbers with zero, so
``v1`` parses as ``1.0.0`` and ``1.2-beta`` as ``1.2.0-beta``.

Both raise :class:`InvalidVersionError` on bad input. The ``must_parse``
variants are for input that has already been validated: they raise
:class:`MustParseError` instead, which ordinary ``ValueError`` handlers do not
catch.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .errors import InvalidVersionError, MustParseError
from .scanner import scan
from .version import Version

logger = logging.getLogger(__name__)


def _parse(version_string: str, lax: bool, prefixes: Iterable[str]) -> Version:
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    try:
        result = scan(version_string, lax=lax, prefixes=prefixes)
    except InvalidVersionError as e:
        logger.debug("Rejected version %r: %s", version_string, e.message)
        raise

    major, minor, patch = result.core
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=result.prerelease,
        build=result.build,
    )


def parse(version_string: str, *, prefixes: Iterable[str] = ()) -> Version:
    """Parse a complete semantic version string into a Version object.

    Args:
        version_string: MAJOR.MINOR.PATCH[-prerelease][+build], optionally
            prefixed with "v" or one of ``prefixes``
        prefixes: Extra literal prefixes to accept before the core version

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> str(parse("v1.0.0-alpha.1"))
        '1.0.0-alpha.1'
        >>> parse("release-2.0.0", prefixes=["release-"]).major
        2
    """
    return _parse(version_string, False, prefixes)


def parse_lax(version_string: str, *, prefixes: Iterable[str] = ()) -> Version:
    """Parse a possibly partial version string into a Version object.

    Missing minor and patch numbers default to zero. Pre-release and build
    metadata are parsed as in :func:`parse`.

    Raises:
        InvalidVersionError: If the string is not a valid (partial) version

    Examples:
        >>> str(parse_lax("v1"))
        '1.0.0'
        >>> str(parse_lax("1.2-beta"))
        '1.2.0-beta'
    """
    return _parse(version_string, True, prefixes)


def must_parse(version_string: str, *, prefixes: Iterable[str] = ()) -> Version:
    """Parse a version string that is known to be valid.

    Raises:
        MustParseError: If the string is not a valid version
    """
    try:
        return parse(version_string, prefixes=prefixes)
    except InvalidVersionError as e:
        raise MustParseError(
            f"failed to parse the string {version_string!r} into a version: {e}"
        ) from e


def must_parse_lax(version_string: str, *, prefixes: Iterable[str] = ()) -> Version:
    """Parse a possibly partial version string that is known to be valid.

    Raises:
        MustParseError: If the string is not a valid version
    """
    try:
        return parse_lax(version_string, prefixes=prefixes)
    except InvalidVersionError as e:
        raise MustParseError(
            f"failed to parse the string {version_string!r} into a version: {e}"
        ) from e
