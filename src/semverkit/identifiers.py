# SPDX-License-Identifier: MIT
"""Pre-release and build identifiers.

A pre-release is an ordered tuple of identifiers, each either numeric or
alphanumeric:

- Numeric: only ASCII digits, no leading zero unless the identifier is "0".
  Compared by integer value.
- Alphanumeric: anything else drawn from ``[0-9A-Za-z-]``. Compared in ASCII
  order, and always ranked above numeric identifiers.

Build metadata is an ordered tuple of plain strings from the same character
set. It has no ordering of its own; two builds are either identical or not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .errors import InvalidVersionError

# Core numbers and numeric identifiers are unsigned 64-bit values.
MAX_UINT64 = 2**64 - 1
MAX_UINT64_DIGITS = len(str(MAX_UINT64))


def is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_identifier_char(c: str) -> bool:
    """Return True if ``c`` may appear in a pre-release or build identifier."""
    return "0" <= c <= "9" or "a" <= c <= "z" or "A" <= c <= "Z" or c == "-"


def is_numeric_text(text: str) -> bool:
    for c in text:
        if not is_digit(c):
            return False
    return True


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """A pre-release identifier made only of digits, e.g. the ``1`` in ``rc.1``."""

    value: int

    @property
    def is_numeric(self) -> bool:
        return True

    @property
    def is_alphanumeric(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(str(self.value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class AlphanumericIdentifier:
    """A pre-release identifier holding at least one letter or hyphen."""

    value: str

    @property
    def is_numeric(self) -> bool:
        return False

    @property
    def is_alphanumeric(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value


PrereleaseIdentifier = Union[NumericIdentifier, AlphanumericIdentifier]
Prerelease = Tuple[PrereleaseIdentifier, ...]
BuildIdentifiers = Tuple[str, ...]


def parse_uint64(text: str, version: str, offset: int = 0) -> int:
    """Convert a run of ASCII digits into an unsigned 64-bit integer.

    Args:
        text: The digit run, already known to contain only digits
        version: The full input, used for error reporting
        offset: Position of ``text`` within ``version``

    Raises:
        InvalidVersionError: If the run has a leading zero or overflows
    """
    if len(text) > 1 and text[0] == "0":
        raise InvalidVersionError(
            version, f"leading zero in {text!r} at position {offset}", offset
        )

    # Checking the length first keeps int() away from huge inputs.
    if len(text) > MAX_UINT64_DIGITS or int(text) > MAX_UINT64:
        raise InvalidVersionError(
            version, f"number {text!r} at position {offset} overflows uint64", offset
        )

    return int(text)


def parse_identifier(text: str, version: str | None = None, offset: int = 0) -> PrereleaseIdentifier:
    """Classify a single pre-release identifier.

    The identifier is numeric iff every character is a digit; anything else
    that only uses identifier characters is alphanumeric.

    Args:
        text: One dot-separated identifier, without the dots
        version: The full input the identifier came from, for error reporting
        offset: Position of ``text`` within ``version``

    Returns:
        NumericIdentifier or AlphanumericIdentifier

    Raises:
        InvalidVersionError: If the identifier is empty, contains a character
            outside ``[0-9A-Za-z-]``, or is numeric with a leading zero

    Examples:
        >>> parse_identifier("11")
        NumericIdentifier(value=11)
        >>> parse_identifier("456-789")
        AlphanumericIdentifier(value='456-789')
    """
    source = text if version is None else version

    if not text:
        raise InvalidVersionError(
            source, f"empty pre-release identifier at position {offset}", offset
        )

    if is_numeric_text(text):
        return NumericIdentifier(parse_uint64(text, source, offset))

    for i, c in enumerate(text):
        if not is_identifier_char(c):
            raise InvalidVersionError(
                source,
                f"invalid character {c!r} in pre-release identifier at position {offset + i}",
                offset + i,
            )

    return AlphanumericIdentifier(text)


def parse_prerelease(text: str) -> Prerelease:
    """Parse a dot-separated pre-release segment without its leading hyphen.

    Examples:
        >>> parse_prerelease("rc.1")
        (AlphanumericIdentifier(value='rc'), NumericIdentifier(value=1))
    """
    if not isinstance(text, str) or not text.isascii():
        raise InvalidVersionError(text, f"pre-release {text!r} is not an ASCII string")

    identifiers = []
    offset = 0
    for part in text.split("."):
        identifiers.append(parse_identifier(part, text, offset))
        offset += len(part) + 1

    return tuple(identifiers)


def new_prerelease(*parts: Union[int, str, PrereleaseIdentifier]) -> Prerelease:
    """Build a pre-release from ints, strings, or identifiers.

    Integers become numeric identifiers; strings are classified with
    :func:`parse_identifier`.

    Raises:
        InvalidVersionError: If a part is negative, too large, not a valid
            identifier, or of an unsupported type

    Examples:
        >>> new_prerelease("beta", 2)
        (AlphanumericIdentifier(value='beta'), NumericIdentifier(value=2))
    """
    identifiers: list[PrereleaseIdentifier] = []

    for part in parts:
        if isinstance(part, (NumericIdentifier, AlphanumericIdentifier)):
            identifiers.append(part)
        elif isinstance(part, int) and not isinstance(part, bool):
            if part < 0 or part > MAX_UINT64:
                raise InvalidVersionError(part, f"numeric identifier {part} is out of range")
            identifiers.append(NumericIdentifier(part))
        elif isinstance(part, str):
            if not part.isascii():
                raise InvalidVersionError(part, f"identifier {part!r} contains non-ASCII characters")
            identifiers.append(parse_identifier(part))
        else:
            raise InvalidVersionError(
                part, f"unsupported pre-release identifier type: {type(part).__name__}"
            )

    return tuple(identifiers)


def new_build(*parts: str) -> BuildIdentifiers:
    """Build validated build metadata from identifier strings.

    Raises:
        InvalidVersionError: If a part is empty or uses a character outside
            ``[0-9A-Za-z-]``
    """
    for part in parts:
        if not isinstance(part, str) or not part:
            raise InvalidVersionError(part, f"invalid build identifier {part!r}")
        for c in part:
            if not is_identifier_char(c):
                raise InvalidVersionError(part, f"invalid character {c!r} in build identifier")

    return tuple(parts)


def compare_identifiers(a: PrereleaseIdentifier, b: PrereleaseIdentifier) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b

    Numeric identifiers always rank below alphanumeric ones.
    """
    if isinstance(a, NumericIdentifier):
        if not isinstance(b, NumericIdentifier):
            return -1
    elif isinstance(b, NumericIdentifier):
        return 1

    if a.value == b.value:
        return 0
    return -1 if a.value < b.value else 1


def compare_prerelease(p1: Prerelease, p2: Prerelease) -> int:
    """Compare two pre-release sequences by semver precedence.

    Returns:
        -1 if p1 < p2, 0 if equal, 1 if p1 > p2

    An empty sequence marks a release and ranks above any pre-release. Two
    non-empty sequences are compared identifier by identifier; when one is a
    prefix of the other, the shorter one ranks lower.
    """
    if not p1 or not p2:
        if not p1 and not p2:
            return 0
        return 1 if not p1 else -1

    for a, b in zip(p1, p2):
        d = compare_identifiers(a, b)
        if d != 0:
            return d

    if len(p1) != len(p2):
        return -1 if len(p1) < len(p2) else 1

    return 0


def render_prerelease(prerelease: Prerelease) -> str:
    return ".".join(str(i) for i in prerelease)


def render_build(build: BuildIdentifiers) -> str:
    return ".".join(build)
