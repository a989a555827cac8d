# SPDX-License-Identifier: MIT
"""Version parsing, comparison and constraints.

This package parses semantic-version-like strings with any number of
numeric segments, compares them with SemVer pre-release precedence, and
evaluates constraints such as ``>= 1.2, < 2.0`` or ``~> 1.4``.

Example:
    >>> from flexver import parse_version, parse_constraints, VersionCollection
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.segments
    (1, 2, 3)
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> parse_constraints(">= 1.0, < 2.0").check("1.5.0")
    True
    >>>
    >>> [str(v) for v in VersionCollection.from_strings(["1.10.0", "1.2.0"])]
    ['1.2.0', '1.10.0']
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    ParseError,
    SegmentOverflowError,
    InvalidConstraintError,
    IncrementOverflowError,
    ConfigError,
)
from .segments import MAX_SEGMENT
from .version import (
    Version,
    parse_version,
    is_valid_version,
)
from .compare import (
    compare_versions,
    compare_segments,
    compare_prerelease,
    version_key,
)
from .constraint import (
    Constraint,
    OPERATORS,
    parse_constraint,
    at_least,
    below,
    exactly,
    pessimistic,
)
from .constraint_set import (
    ConstraintSet,
    parse_constraints,
    constraint_range,
)
from .collection import VersionCollection
from .config import ParserConfig

__all__ = [
    # Errors
    "VersionError",
    "ParseError",
    "SegmentOverflowError",
    "InvalidConstraintError",
    "IncrementOverflowError",
    "ConfigError",
    # Version parsing
    "MAX_SEGMENT",
    "Version",
    "parse_version",
    "is_valid_version",
    # Version comparison
    "compare_versions",
    "compare_segments",
    "compare_prerelease",
    "version_key",
    # Constraints
    "Constraint",
    "OPERATORS",
    "parse_constraint",
    "at_least",
    "below",
    "exactly",
    "pessimistic",
    "ConstraintSet",
    "parse_constraints",
    "constraint_range",
    # Collections
    "VersionCollection",
    # Configuration
    "ParserConfig",
]
