# SPDX-License-Identifier: MIT
"""Exception types raised by flexver."""

from __future__ import annotations

from typing import Optional


class VersionError(Exception):
    """Base class for all flexver errors."""

    pass


class ParseError(VersionError, ValueError):
    """Raised when a version or constraint string cannot be parsed.

    Attributes:
        text: The input that failed to parse
        message: Human readable description of the failure
        position: Offset into ``text`` where the problem was found, if known
    """

    def __init__(self, text: str, message: str = "", position: Optional[int] = None):
        self.text = text
        self.message = message or f"Invalid version: {text!r}"
        self.position = position
        super().__init__(self.message)

    def relocate(self, text: str, offset: int) -> "ParseError":
        """Return the same error reported against ``text``, an enclosing input.

        Args:
            text: The enclosing input
            offset: Where this error's input starts within ``text``
        """
        position = None if self.position is None else self.position + offset
        return type(self)(text, self.message, position)


class SegmentOverflowError(ParseError):
    """Raised when a numeric segment exceeds the signed 64-bit range."""

    pass


class InvalidConstraintError(ParseError):
    """Raised when a constraint clause has an unknown operator or is empty."""

    pass


class IncrementOverflowError(VersionError, OverflowError):
    """Raised when incrementing a segment that is already at its maximum."""

    def __init__(self, version: str, index: int):
        self.version = version
        self.index = index
        super().__init__(f"Cannot increment segment {index} of {version}: already at maximum")


class ConfigError(VersionError):
    """Raised when parser configuration loading fails."""

    pass
