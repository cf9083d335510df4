# SPDX-License-Identifier: MIT
"""Exceptions raised by semverkit."""

from __future__ import annotations

from typing import Optional


class InvalidVersionError(ValueError):
    """Raised when a string does not follow the semantic versioning grammar.

    Every grammar violation maps onto this one exception. The ``position`` and
    ``message`` attributes are diagnostic only; callers should not branch on
    them.
    """

    def __init__(self, version: object, message: str = "", position: Optional[int] = None):
        self.version = version
        self.position = position
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


class MustParseError(RuntimeError):
    """Raised by the ``must_parse`` helpers when their input does not parse."""

    pass


class ConfigError(Exception):
    """Raised when parser configuration loading fails."""

    pass
