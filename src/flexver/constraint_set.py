# SPDX-License-Identifier: MIT
"""Comma-separated constraint sets such as ``>= 1.0.0, < 2.0.0``.

A set is satisfied only when every member constraint is satisfied. An empty
set allows any version.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from .constraint import (
    GE,
    LOWER_BOUND_OPERATORS,
    LT,
    PESSIMISTIC,
    UPPER_BOUND_OPERATORS,
    Constraint,
    parse_constraint,
)
from .errors import InvalidConstraintError, ParseError
from .version import Version, parse_version


@dataclass(frozen=True, slots=True)
class ConstraintSet:
    """An ordered conjunction of constraints.

    Attributes:
        constraints: Member constraints in the order they were written
    """

    constraints: tuple[Constraint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "constraints", tuple(self.constraints))

    @classmethod
    def parse(cls, text: str) -> "ConstraintSet":
        """Parse a comma-separated constraint string. See ``parse_constraints``."""
        return parse_constraints(text)

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self.constraints)

    def __len__(self) -> int:
        return len(self.constraints)

    def __iter__(self) -> Iterator[Constraint]:
        return iter(self.constraints)

    def allows_any(self) -> bool:
        """Return True if the set has no members."""
        return not self.constraints

    def check(self, version: Union[Version, str]) -> bool:
        """Return True if ``version`` satisfies every member constraint.

        Raises:
            ParseError: If ``version`` is a string that fails to parse
        """
        if isinstance(version, str):
            version = parse_version(version)
        return all(c.check(version) for c in self.constraints)

    def min_version(self) -> Optional[Version]:
        """Return the greatest lower bound among the members, or None.

        This is an advisory summary: sets that no version can satisfy
        (e.g. ``>= 2.0, < 1.0``) are not detected.
        """
        best: Optional[Version] = None
        for constraint in self.constraints:
            if constraint.operator not in LOWER_BOUND_OPERATORS:
                continue
            if best is None or constraint.version > best:
                best = constraint.version
        return best

    def max_version(self) -> Optional[Version]:
        """Return the least upper bound among the members, or None.

        For ``~>`` members the bound is the exclusive upper edge.
        """
        best: Optional[Version] = None
        for constraint in self.constraints:
            if constraint.operator not in UPPER_BOUND_OPERATORS:
                continue
            if constraint.operator == PESSIMISTIC:
                bound = constraint.upper_bound
                if bound is None:
                    continue
            else:
                bound = constraint.version
            if best is None or bound < best:
                best = bound
        return best

    def filter(self, versions: Iterable[Union[Version, str]]) -> list[Version]:
        """Return the versions that satisfy the set, in input order."""
        result = []
        for version in versions:
            if isinstance(version, str):
                version = parse_version(version)
            if self.check(version):
                result.append(version)
        return result

    def best_match(self, versions: Iterable[Union[Version, str]]) -> Optional[Version]:
        """Return the highest version that satisfies the set, or None."""
        matches = self.filter(versions)
        if not matches:
            return None
        return max(matches)


def parse_constraints(text: str) -> ConstraintSet:
    """Parse a comma-separated list of constraints.

    Each clause is trimmed and parsed with ``parse_constraint``. Empty or
    whitespace-only input yields an empty set.

    Raises:
        InvalidConstraintError: If a clause between commas is empty or has an
            unknown operator
        ParseError: If a clause's version fails to parse (the first failing
            clause is reported)

    Examples:
        >>> constraints = parse_constraints(">= 1.0.0, < 2.0.0")
        >>> constraints.check("1.5.0"), constraints.check("2.0.0")
        (True, False)
        >>> parse_constraints("").allows_any()
        True
    """
    if not isinstance(text, str):
        raise InvalidConstraintError(
            str(text), f"Constraints must be a string, got {type(text).__name__}"
        )
    if not text.strip():
        return ConstraintSet()

    constraints = []
    position = 0
    for clause in text.split(","):
        if not clause.strip():
            raise InvalidConstraintError(
                text, f"Empty constraint at position {position} in {text!r}", position
            )
        try:
            constraints.append(parse_constraint(clause))
        except ParseError as e:
            raise e.relocate(text, position) from e
        position += len(clause) + 1
    return ConstraintSet(tuple(constraints))


def constraint_range(
    minimum: Union[Version, str],
    maximum: Union[Version, str],
) -> ConstraintSet:
    """Return the set ``>= minimum, < maximum``.

    Raises:
        ParseError: If either bound is a string that fails to parse
    """
    if isinstance(minimum, str):
        minimum = parse_version(minimum)
    if isinstance(maximum, str):
        maximum = parse_version(maximum)
    return ConstraintSet((Constraint(GE, minimum), Constraint(LT, maximum)))
