# SPDX-License-Identifier: MIT
"""Single version constraints such as ``>= 1.2.0`` or ``~> 1.4``.

Supported operators:
- ``=`` (also ``==``), ``!=``: equal / not equal under version comparison
- ``>``, ``<``, ``>=``, ``<=``: ordering
- ``~>``: pessimistic; allows upgrades up to the next boundary implied by
  the target's precision:

      "~> 1"        1     ... 2
      "~> 1.2"      1.2   ... 1.3
      "~> 1.2.3"    1.2.3 ... 1.3
      "~> 1.2.3.4"  1.2.3.4 ... 1.2.4
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .compare import compare_segments
from .errors import InvalidConstraintError, ParseError
from .segments import MAX_SEGMENT
from .version import Version, parse_version

logger = logging.getLogger(__name__)

EQ = "="
NE = "!="
GT = ">"
LT = "<"
GE = ">="
LE = "<="
PESSIMISTIC = "~>"

# Operator aliases accepted when parsing
_ALIASES = {"==": EQ}

# Leading operator characters, then the version text
CONSTRAINT_PATTERN = re.compile(r"(?P<operator>[<>=!~]*)\s*(?P<version>.*)", re.DOTALL)


def _pessimistic_upper(target: Version) -> Optional[Version]:
    """Return the exclusive upper edge for ``~> target``.

    The segment one level above the least significant specified one is
    bumped; single and two segment targets bump their last segment.
    """
    precision = target.precision
    if precision <= 2:
        index = precision - 1
    else:
        index = precision - 2
    if target.segments[index] >= MAX_SEGMENT:
        return None
    return Version(target.segments[:index] + (target.segments[index] + 1,))


def _check_pessimistic(version: Version, target: Version) -> bool:
    if version.compare(target) < 0:
        return False
    upper = _pessimistic_upper(target)
    # Pre-releases of the upper edge are outside the range too
    return upper is None or compare_segments(version.segments, upper.segments) < 0


OPERATORS: dict[str, Callable[[Version, Version], bool]] = {
    EQ: lambda v, t: v.compare(t) == 0,
    NE: lambda v, t: v.compare(t) != 0,
    GT: lambda v, t: v.compare(t) > 0,
    LT: lambda v, t: v.compare(t) < 0,
    GE: lambda v, t: v.compare(t) >= 0,
    LE: lambda v, t: v.compare(t) <= 0,
    PESSIMISTIC: _check_pessimistic,
}

# Operators that establish a lower or upper bound
LOWER_BOUND_OPERATORS = frozenset({GT, GE, EQ, PESSIMISTIC})
UPPER_BOUND_OPERATORS = frozenset({LT, LE, EQ, PESSIMISTIC})


@dataclass(frozen=True, slots=True)
class Constraint:
    """A comparison operator paired with a target version.

    Attributes:
        operator: One of ``=``, ``!=``, ``>``, ``<``, ``>=``, ``<=``, ``~>``
        version: The target version, with its original precision
    """

    operator: str
    version: Version

    def __post_init__(self) -> None:
        if self.operator not in OPERATORS:
            raise InvalidConstraintError(
                self.operator, f"Unknown constraint operator: {self.operator!r}", 0
            )

    @classmethod
    def parse(cls, text: str) -> "Constraint":
        """Parse a constraint clause. See ``parse_constraint``."""
        return parse_constraint(text)

    def __str__(self) -> str:
        return f"{self.operator} {self.version}"

    def check(self, version: Union[Version, str]) -> bool:
        """Return True if ``version`` satisfies this constraint.

        Raises:
            ParseError: If ``version`` is a string that fails to parse
        """
        if isinstance(version, str):
            version = parse_version(version)
        return OPERATORS[self.operator](version, self.version)

    @property
    def upper_bound(self) -> Optional[Version]:
        """Exclusive upper edge of a pessimistic constraint, else None."""
        if self.operator != PESSIMISTIC:
            return None
        return _pessimistic_upper(self.version)


def parse_constraint(text: str) -> Constraint:
    """Parse a single constraint clause.

    Args:
        text: An optional operator followed by a version, e.g. ">= 1.2.0",
            "~>1.4" or "2.0.0" (the operator defaults to ``=``)

    Returns:
        The parsed Constraint

    Raises:
        InvalidConstraintError: If the operator token is not recognised or
            the clause is empty
        ParseError: If the version part fails to parse

    Examples:
        >>> parse_constraint(">= 1.0.0").check("1.0.0")
        True
        >>> str(parse_constraint("1.2"))
        '= 1.2'
    """
    if not isinstance(text, str):
        raise InvalidConstraintError(
            str(text), f"Constraint must be a string, got {type(text).__name__}"
        )

    clause = text.strip()
    if not clause:
        raise InvalidConstraintError(text, "Constraint cannot be empty", 0)

    lead = len(text) - len(text.lstrip())
    match = CONSTRAINT_PATTERN.fullmatch(clause)
    token, version_text = match.group("operator", "version")
    operator = _ALIASES.get(token, token) or EQ
    if operator not in OPERATORS:
        logger.debug("Unknown operator %r in constraint %r", token, text)
        raise InvalidConstraintError(
            text, f"Unknown constraint operator {token!r} in {text!r}", lead
        )

    if not version_text:
        raise ParseError(
            text, f"Missing version after operator {token!r} in {text!r}", lead + len(clause)
        )
    try:
        version = parse_version(version_text)
    except ParseError as e:
        raise e.relocate(text, lead + match.start("version")) from e
    return Constraint(operator, version)


def _to_version(version: Union[Version, str]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def at_least(version: Union[Version, str]) -> Constraint:
    """Return ``>= version``."""
    return Constraint(GE, _to_version(version))


def below(version: Union[Version, str]) -> Constraint:
    """Return ``< version``."""
    return Constraint(LT, _to_version(version))


def exactly(version: Union[Version, str]) -> Constraint:
    """Return ``= version``."""
    return Constraint(EQ, _to_version(version))


def pessimistic(version: Union[Version, str]) -> Constraint:
    """Return ``~> version``."""
    return Constraint(PESSIMISTIC, _to_version(version))
