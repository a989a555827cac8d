# SPDX-License-Identifier: MIT
"""Version comparison.

Segments are compared numerically with missing segments treated as zero,
so 1.2 == 1.2.0. Pre-release ordering follows SemVer precedence:
1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta < 1.0.0
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

if TYPE_CHECKING:
    from .version import Version


def compare_segments(segments1: Sequence[int], segments2: Sequence[int]) -> int:
    """Compare two segment sequences, zero-padding the shorter one.

    Returns:
        -1 if segments1 < segments2
        0 if segments1 == segments2
        1 if segments1 > segments2
    """
    length = max(len(segments1), len(segments2))
    for index in range(length):
        s1 = segments1[index] if index < len(segments1) else 0
        s2 = segments2[index] if index < len(segments2) else 0
        if s1 != s2:
            return -1 if s1 < s2 else 1
    return 0


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _numeric_key(identifier: str) -> tuple[int, str]:
    """Order numeric identifiers by value without converting them to int."""
    digits = identifier.lstrip("0") or "0"
    return (len(digits), digits)


def compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        is_num1 = _is_numeric(p1)
        is_num2 = _is_numeric(p2)

        if is_num1 and is_num2:
            n1, n2 = _numeric_key(p1), _numeric_key(p2)
            if n1 != n2:
                return -1 if n1 < n2 else 1
        elif is_num1:
            # Numeric < alphanumeric per SemVer
            return -1
        elif is_num2:
            return 1
        elif p1 != p2:
            return -1 if p1 < p2 else 1

    # All compared parts equal - longer pre-release has higher precedence
    if len(parts1) != len(parts2):
        return -1 if len(parts1) < len(parts2) else 1

    return 0


def _coerce(version: Union[str, "Version"]) -> "Version":
    from .version import parse_version

    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, "Version"], version2: Union[str, "Version"]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.2", "1.2.0")
        0
        >>> compare_versions("1.10.0", "1.9.0")
        1
        >>> compare_versions("1.0.0-alpha", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    result = compare_segments(v1.segments, v2.segments)
    if result:
        return result

    # Compare pre-release (build metadata is ignored)
    return compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, "Version"]) -> tuple:
    """Return a sort key for a version, ordering exactly like compare_versions.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.10.0", "1.2.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.2.0', '1.10.0']
    """
    v = _coerce(version)

    # Trailing zeros are dropped so 1.2 and 1.2.0 produce the same key
    segments = list(v.segments)
    while segments and segments[-1] == 0:
        segments.pop()

    # Release sorts after every pre-release of the same core
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease.split("."):
            if _is_numeric(part):
                parts.append((0,) + _numeric_key(part))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (tuple(segments), prerelease_key)
