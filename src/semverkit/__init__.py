# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation, and comparison.

This package implements Semantic Versioning 2.0.0 with a hand-written
single-pass scanner instead of regular expressions.

Example:
    >>> from semverkit import parse, parse_lax, is_valid, compare_versions
    >>>
    >>> version = parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version.prerelease[0])
    'alpha'
    >>> version.comparable_string()
    '1.2.3-alpha.1'
    >>>
    >>> is_valid("v1.0.0")
    True
    >>> str(parse_lax("1.2"))
    '1.2.0'
    >>>
    >>> compare_versions("1.0.0-rc.1", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    ConfigError,
    InvalidVersionError,
    MustParseError,
)
from .identifiers import (
    AlphanumericIdentifier,
    BuildIdentifiers,
    NumericIdentifier,
    Prerelease,
    PrereleaseIdentifier,
    new_build,
    new_prerelease,
    parse_prerelease,
)
from .version import Version
from .parser import (
    must_parse,
    must_parse_lax,
    parse,
    parse_lax,
)
from .validation import (
    is_valid,
    is_valid_lax,
)
from .compare import (
    Versions,
    compare,
    compare_versions,
    version_key,
)
from .config import (
    ParseMode,
    ParserConfig,
)

__all__ = [
    # Errors
    "ConfigError",
    "InvalidVersionError",
    "MustParseError",
    # Identifiers
    "AlphanumericIdentifier",
    "BuildIdentifiers",
    "NumericIdentifier",
    "Prerelease",
    "PrereleaseIdentifier",
    "new_build",
    "new_prerelease",
    "parse_prerelease",
    # Version parsing
    "Version",
    "must_parse",
    "must_parse_lax",
    "parse",
    "parse_lax",
    # Validation
    "is_valid",
    "is_valid_lax",
    # Version comparison
    "Versions",
    "compare",
    "compare_versions",
    "version_key",
    # Configuration
    "ParseMode",
    "ParserConfig",
]
