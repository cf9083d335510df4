# SPDX-License-Identifier: MIT
"""Parser configuration.

A :class:`ParserConfig` bundles a parse mode with the set of accepted version
prefixes so call sites that filter many candidate tags can share one object.
Configuration can be loaded from the ``[tool.semverkit]`` table of a
``pyproject.toml`` or from environment variables.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError
from .parser import must_parse, must_parse_lax, parse, parse_lax
from .scanner import normalize_prefixes
from .validation import is_valid, is_valid_lax
from .version import Version

logger = logging.getLogger(__name__)


class ParseMode(str, Enum):
    """How many core version numbers the parser requires."""

    STRICT = "strict"
    LAX = "lax"


@dataclass(frozen=True)
class ParserConfig:
    """Parsing options shared by the parse and validate entry points.

    Attributes:
        mode: STRICT requires major.minor.patch, LAX accepts 1-3 numbers
        prefixes: Literal prefixes accepted in addition to "v"
    """

    mode: ParseMode = ParseMode.STRICT
    prefixes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Allow callers to pass any iterable or a plain mode string.
        object.__setattr__(self, "mode", ParseMode(self.mode))
        object.__setattr__(self, "prefixes", normalize_prefixes(self.prefixes))

    @property
    def is_lax(self) -> bool:
        return self.mode is ParseMode.LAX

    def parse(self, version_string: str) -> Version:
        """Parse a version string using this configuration.

        Raises:
            InvalidVersionError: If the string is not a valid version
        """
        func = parse_lax if self.is_lax else parse
        return func(version_string, prefixes=self.prefixes)

    def must_parse(self, version_string: str) -> Version:
        """Parse a pre-validated version string.

        Raises:
            MustParseError: If the string is not a valid version
        """
        func = must_parse_lax if self.is_lax else must_parse
        return func(version_string, prefixes=self.prefixes)

    def is_valid(self, version_string: str) -> bool:
        """Report whether :meth:`parse` would accept the string."""
        func = is_valid_lax if self.is_lax else is_valid
        return func(version_string, prefixes=self.prefixes)

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "ParserConfig":
        """Load configuration from the ``[tool.semverkit]`` table.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            ParserConfig instance; defaults when the table is absent

        Raises:
            ConfigError: If the file is invalid or holds bad values
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        logger.debug("Loaded parser configuration from %s", pyproject_path)
        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "ParserConfig":
        """Create a ParserConfig from a parsed pyproject.toml dictionary."""
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")

        table = tool.get("semverkit", {})
        if not isinstance(table, dict):
            raise ConfigError("[tool.semverkit] must be a table")

        mode = table.get("mode", ParseMode.STRICT.value)
        prefixes = table.get("prefixes", [])

        if isinstance(prefixes, str):
            prefixes = [prefixes]
        if not isinstance(prefixes, list) or not all(isinstance(p, str) for p in prefixes):
            raise ConfigError("tool.semverkit.prefixes must be a list of strings")

        return cls._build(mode, prefixes)

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Create configuration from environment variables.

        ``SEMVERKIT_MODE`` selects the mode and ``SEMVERKIT_PREFIXES`` holds a
        comma separated list of accepted prefixes.
        """
        mode = os.getenv("SEMVERKIT_MODE", ParseMode.STRICT.value).strip().lower()
        prefixes = [p.strip() for p in os.getenv("SEMVERKIT_PREFIXES", "").split(",") if p.strip()]
        return cls._build(mode, prefixes)

    @classmethod
    def _build(cls, mode: Any, prefixes: Iterable[str]) -> "ParserConfig":
        try:
            parse_mode = ParseMode(mode)
        except ValueError as e:
            raise ConfigError(
                f"Invalid parse mode {mode!r}, expected one of: "
                + ", ".join(m.value for m in ParseMode)
            ) from e

        prefixes = normalize_prefixes(prefixes)
        for prefix in prefixes:
            if not prefix or any("0" <= c <= "9" for c in prefix):
                raise ConfigError(f"Invalid version prefix {prefix!r}")

        logger.debug("Parser configuration: mode=%s prefixes=%s", parse_mode.value, prefixes)
        return cls(mode=parse_mode, prefixes=prefixes)
