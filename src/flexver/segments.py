# SPDX-License-Identifier: MIT
"""Numeric segment parsing for version cores.

A version core is one or more dot-separated runs of ASCII digits. Each run
becomes an int bounded by the signed 64-bit maximum:

- ``1.2.3`` -> (1, 2, 3)
- ``2024.01.15.7`` -> (2024, 1, 15, 7)
"""

from __future__ import annotations

import logging
import re

from .errors import ParseError, SegmentOverflowError

logger = logging.getLogger(__name__)

# Largest value a single segment may hold (signed 64-bit maximum)
MAX_SEGMENT = 2**63 - 1
_MAX_SEGMENT_DIGITS = len(str(MAX_SEGMENT))

# Inputs made of digits and dots only take the fast path
NUMERIC_PATTERN = re.compile(r"^[0-9]+(?:\.[0-9]+)*$")


def is_numeric_only(text: str) -> bool:
    """Return True if ``text`` contains only digit runs separated by dots."""
    return NUMERIC_PATTERN.match(text) is not None


def to_segment(run: str, text: str, position: int) -> int:
    """Convert a run of ASCII digits into a segment value.

    Args:
        run: The digit run to convert
        text: The full input, used for error reporting
        position: Offset of ``run`` within ``text``

    Returns:
        The integer value of the run

    Raises:
        SegmentOverflowError: If the value exceeds MAX_SEGMENT
    """
    digits = run.lstrip("0") or "0"
    # Checked by length first so huge runs never reach int()
    if len(digits) > _MAX_SEGMENT_DIGITS or int(digits) > MAX_SEGMENT:
        logger.debug("Segment %r at position %d overflows in %r", run, position, text)
        raise SegmentOverflowError(
            text,
            f"Segment too large at position {position}: {run!r} exceeds {MAX_SEGMENT}",
            position,
        )
    return int(digits)


def split_numeric(text: str, offset: int = 0) -> tuple[int, ...]:
    """Split a digits-and-dots string into segments without validation.

    Callers must have checked the input with ``is_numeric_only`` first.
    """
    segments = []
    position = offset
    for run in text.split("."):
        segments.append(to_segment(run, text, position))
        position += len(run) + 1
    return tuple(segments)


def parse_segments(core: str, text: str, offset: int = 0) -> tuple[int, ...]:
    """Parse and validate the numeric core of a version string.

    Args:
        core: The dot-separated numeric portion of the input
        text: The full input, used for error reporting
        offset: Offset of ``core`` within ``text``

    Returns:
        Tuple of segment values, never empty

    Raises:
        ParseError: If a segment is empty or contains a non-digit character
        SegmentOverflowError: If a segment exceeds MAX_SEGMENT

    Examples:
        >>> parse_segments("1.2.3", "1.2.3")
        (1, 2, 3)
        >>> parse_segments("1..3", "1..3")
        Traceback (most recent call last):
        ...
        flexver.errors.ParseError: Empty segment at position 2 in '1..3'
    """
    segments = []
    position = offset
    for run in core.split("."):
        if not run:
            logger.debug("Empty segment at position %d in %r", position, text)
            raise ParseError(text, f"Empty segment at position {position} in {text!r}", position)
        for index, char in enumerate(run):
            if not ("0" <= char <= "9"):
                bad = position + index
                logger.debug("Non-digit %r at position %d in %r", char, bad, text)
                raise ParseError(
                    text,
                    f"Unexpected character {char!r} at position {bad} in segment {run!r}",
                    bad,
                )
        segments.append(to_segment(run, text, position))
        position += len(run) + 1
    return tuple(segments)


def has_leading_zero(run: str) -> bool:
    """Return True if a numeric run has a redundant leading zero (e.g. ``01``)."""
    return len(run) > 1 and run[0] == "0"
