# SPDX-License-Identifier: MIT
"""Version parsing and the Version value type.

Accepts dotted numeric versions with any number of segments, plus optional
pre-release and build metadata:
- Core: 1, 1.2, 1.2.3, 1.2.3.4, v1.2.3
- Pre-release: -alpha, -alpha.1, -rc.2, -0.3.7
- Build metadata: +build, +build.123, +20240101

Strict mode follows the SemVer 2.0.0 core grammar: exactly three segments,
no leading zeros and no ``v`` prefix.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from .compare import compare_prerelease, compare_segments, version_key
from .errors import IncrementOverflowError, ParseError
from .segments import (
    MAX_SEGMENT,
    has_leading_zero,
    is_numeric_only,
    parse_segments,
    split_numeric,
)

logger = logging.getLogger(__name__)

# Pre-release and build identifiers: ASCII alphanumerics and hyphens
IDENTIFIER_PATTERN = re.compile(r"^[0-9A-Za-z-]+$")
_INVALID_IDENTIFIER_CHAR = re.compile(r"[^0-9A-Za-z-]")


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed version.

    Equality, ordering and hashing follow ``compare_versions``: missing
    segments count as zero and build metadata is ignored, so ``1.2``,
    ``1.2.0`` and ``1.2.0+build`` are all equal.

    Attributes:
        segments: Numeric core segments (at least one)
        prerelease: Pre-release identifiers (e.g., "alpha.1"), empty if absent
        metadata: Build metadata (e.g., "build.123"), empty if absent
        original: The string this version was parsed from
    """

    segments: tuple[int, ...]
    prerelease: str = ""
    metadata: str = ""
    original: str = ""

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        if not segments:
            raise ValueError("Version requires at least one segment")
        for value in segments:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Segment must be an int, got {type(value).__name__}")
            if value < 0 or value > MAX_SEGMENT:
                raise ValueError(f"Segment out of range: {value}")
        object.__setattr__(self, "segments", segments)
        if self.prerelease:
            _check_identifiers(self.prerelease, self.prerelease, 0, "pre-release")
        if self.metadata:
            _check_identifiers(self.metadata, self.metadata, 0, "build metadata")
        if not self.original:
            object.__setattr__(self, "original", self._render())

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a version string in loose mode. See ``parse_version``."""
        return parse_version(text)

    @classmethod
    def parse_strict(cls, text: str) -> "Version":
        """Parse a version string following the SemVer 2.0.0 core grammar."""
        return parse_version(text, strict=True)

    def _render(self) -> str:
        version = ".".join(str(s) for s in self.segments)
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.metadata:
            version += f"+{self.metadata}"
        return version

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self._render()

    def __repr__(self) -> str:
        return f"Version({self._render()!r})"

    @property
    def major(self) -> int:
        """First segment."""
        return self.segments[0]

    @property
    def minor(self) -> int:
        """Second segment, 0 if absent."""
        return self.segments[1] if len(self.segments) > 1 else 0

    @property
    def patch(self) -> int:
        """Third segment, 0 if absent."""
        return self.segments[2] if len(self.segments) > 2 else 0

    @property
    def precision(self) -> int:
        """Number of segments the version was written with."""
        return len(self.segments)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def is_stable(self) -> bool:
        """Return True if this version has no pre-release identifiers."""
        return not self.prerelease

    def core(self) -> "Version":
        """Return MAJOR.MINOR.PATCH without pre-release or build metadata."""
        return Version((self.major, self.minor, self.patch))

    # Comparison

    def compare(self, other: Union["Version", str]) -> int:
        """Compare with another version.

        Returns:
            -1, 0 or 1 as this version is lower than, equal to, or higher
            than ``other``
        """
        if isinstance(other, str):
            other = parse_version(other)
        result = compare_segments(self.segments, other.segments)
        if result:
            return result
        return compare_prerelease(self.prerelease, other.prerelease)

    def equal(self, other: Union["Version", str]) -> bool:
        return self.compare(other) == 0

    def less_than(self, other: Union["Version", str]) -> bool:
        return self.compare(other) < 0

    def less_than_or_equal(self, other: Union["Version", str]) -> bool:
        return self.compare(other) <= 0

    def greater_than(self, other: Union["Version", str]) -> bool:
        return self.compare(other) > 0

    def greater_than_or_equal(self, other: Union["Version", str]) -> bool:
        return self.compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        # The sort key is equal exactly when compare() returns 0
        return hash(version_key(self))

    # Derived versions

    def increment_major(self) -> "Version":
        """Return the next major version (1.2.3 -> 2.0.0)."""
        return self._increment(0)

    def increment_minor(self) -> "Version":
        """Return the next minor version (1.2.3 -> 1.3.0)."""
        return self._increment(1)

    def increment_patch(self) -> "Version":
        """Return the next patch version (1.2.3 -> 1.2.4)."""
        return self._increment(2)

    def _increment(self, index: int) -> "Version":
        padded = self.segments + (0,) * max(0, index + 1 - len(self.segments))
        if padded[index] >= MAX_SEGMENT:
            raise IncrementOverflowError(str(self), index)
        bumped = padded[:index] + (padded[index] + 1,) + (0,) * (len(padded) - index - 1)
        return Version(bumped)


def _check_identifiers(
    value: str,
    text: str,
    position: int,
    label: str,
    reject_leading_zeros: bool = False,
) -> None:
    """Validate a dot-separated identifier list.

    Raises:
        ParseError: If the list or any identifier is empty, contains a
            character outside [0-9A-Za-z-], or (when requested) is numeric
            with a leading zero
    """
    if not value:
        raise ParseError(text, f"Empty {label} at position {position} in {text!r}", position)
    for part in value.split("."):
        if not part:
            raise ParseError(
                text, f"Empty {label} identifier at position {position} in {text!r}", position
            )
        if not IDENTIFIER_PATTERN.match(part):
            bad = _INVALID_IDENTIFIER_CHAR.search(part)
            offset = position + (bad.start() if bad else 0)
            raise ParseError(
                text,
                f"Invalid character {part[offset - position]!r} in {label} "
                f"identifier {part!r} at position {offset}",
                offset,
            )
        if reject_leading_zeros and part.isdigit() and has_leading_zero(part):
            raise ParseError(
                text,
                f"Numeric {label} identifier {part!r} has a leading zero at position {position}",
                position,
            )
        position += len(part) + 1


def _check_strict_core(core: str, segments: tuple[int, ...], text: str, offset: int) -> None:
    """Enforce MAJOR.MINOR.PATCH with no leading zeros."""
    if len(segments) != 3:
        raise ParseError(
            text,
            f"Strict mode requires exactly three segments, got {len(segments)} in {text!r}",
            offset,
        )
    position = offset
    for run in core.split("."):
        if has_leading_zero(run):
            raise ParseError(
                text, f"Segment {run!r} has a leading zero at position {position}", position
            )
        position += len(run) + 1


def parse_version(
    version_string: str,
    strict: bool = False,
    *,
    allow_prerelease_leading_zeros: bool = False,
) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string in the form
            [v]N(.N)*[-prerelease][+metadata]
        strict: Require the SemVer 2.0.0 core grammar (exactly three
            segments, no leading zeros, no ``v`` prefix)
        allow_prerelease_leading_zeros: In strict mode, accept numeric
            pre-release identifiers such as ``01``

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string is malformed
        SegmentOverflowError: If a segment exceeds the signed 64-bit maximum

    Examples:
        >>> parse_version("1.2.3")
        Version('1.2.3')

        >>> parse_version("v1.2.3.4-rc.1+build.5").segments
        (1, 2, 3, 4)

        >>> parse_version("1.2", strict=True)
        Traceback (most recent call last):
        ...
        flexver.errors.ParseError: Strict mode requires exactly three segments, got 2 in '1.2'
    """
    if not isinstance(version_string, str):
        raise ParseError(
            str(version_string),
            f"Version must be a string, got {type(version_string).__name__}",
        )

    body = version_string.strip()
    if not body:
        raise ParseError(version_string, "Version string cannot be empty", 0)
    lead = len(version_string) - len(version_string.lstrip())

    try:
        if is_numeric_only(body):
            segments = split_numeric(body, lead)
            if strict:
                _check_strict_core(body, segments, version_string, lead)
            return Version(segments, "", "", version_string)
        return _parse_general(version_string, body, lead, strict, allow_prerelease_leading_zeros)
    except ParseError as e:
        logger.debug("Failed to parse version %r: %s", version_string, e.message)
        raise


def _parse_general(
    text: str,
    body: str,
    lead: int,
    strict: bool,
    allow_prerelease_leading_zeros: bool,
) -> Version:
    position = lead
    if body.startswith("v"):
        if strict:
            raise ParseError(text, "Leading 'v' is not allowed in strict mode", position)
        body = body[1:]
        position += 1

    metadata: Optional[str] = None
    prerelease: Optional[str] = None
    rest = body
    plus = rest.find("+")
    if plus >= 0:
        metadata = rest[plus + 1 :]
        rest = rest[:plus]
    dash = rest.find("-")
    if dash >= 0:
        prerelease = rest[dash + 1 :]
        rest = rest[:dash]

    if not rest:
        raise ParseError(
            text, f"Missing numeric version at position {position} in {text!r}", position
        )
    segments = parse_segments(rest, text, position)
    if strict:
        _check_strict_core(rest, segments, text, position)

    if prerelease is not None:
        _check_identifiers(
            prerelease,
            text,
            position + dash + 1,
            "pre-release",
            reject_leading_zeros=strict and not allow_prerelease_leading_zeros,
        )
    if metadata is not None:
        _check_identifiers(metadata, text, position + plus + 1, "build metadata")

    return Version(segments, prerelease or "", metadata or "", text)


def is_valid_version(version_string: str, strict: bool = False) -> bool:
    """Check if a string parses as a version.

    Args:
        version_string: The string to validate
        strict: Validate against the SemVer 2.0.0 core grammar

    Returns:
        True if the string is a valid version, False otherwise

    Examples:
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("1.0", strict=True)
        False
        >>> is_valid_version("1.0.0-")
        False
    """
    try:
        parse_version(version_string, strict=strict)
    except ParseError:
        return False
    return True
