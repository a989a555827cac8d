# SPDX-License-Identifier: MIT
"""Sortable collections of versions."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Iterable, Optional, Union

from .compare import version_key
from .version import Version, parse_version


class VersionCollection(MutableSequence):
    """A mutable, ordered sequence of Version objects.

    The collection is not kept sorted on mutation; call ``sort()`` when an
    ordered view is needed and ``is_sorted()`` to check the current order.
    Not safe for concurrent mutation without external locking.
    """

    def __init__(self, versions: Iterable[Union[Version, str]] = ()):
        self._versions: list[Version] = [_to_version(v) for v in versions]

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "VersionCollection":
        """Parse each string and return the versions sorted ascending.

        Raises:
            ParseError: For the first string that fails to parse
            TypeError: If ``strings`` is a single string

        Examples:
            >>> [str(v) for v in VersionCollection.from_strings(["1.10.0", "1.2.0"])]
            ['1.2.0', '1.10.0']
        """
        if isinstance(strings, str):
            raise TypeError("from_strings expects an iterable of version strings, not a str")
        collection = cls(parse_version(s) for s in strings)
        collection.sort()
        return collection

    def __repr__(self) -> str:
        return f"VersionCollection({[str(v) for v in self._versions]!r})"

    def __getitem__(self, index):
        if isinstance(index, slice):
            return VersionCollection(self._versions[index])
        return self._versions[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._versions[index] = [_to_version(v) for v in value]
        else:
            self._versions[index] = _to_version(value)

    def __delitem__(self, index) -> None:
        del self._versions[index]

    def __len__(self) -> int:
        return len(self._versions)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VersionCollection):
            return self._versions == other._versions
        if isinstance(other, list):
            return self._versions == other
        return NotImplemented

    def insert(self, index: int, value: Union[Version, str]) -> None:
        self._versions.insert(index, _to_version(value))

    def sort(self, reverse: bool = False) -> None:
        """Sort in place by version precedence."""
        self._versions.sort(key=version_key, reverse=reverse)

    def is_sorted(self) -> bool:
        """Return True if the versions are currently in ascending order."""
        return all(a <= b for a, b in zip(self._versions, self._versions[1:]))

    def latest(self) -> Optional[Version]:
        """Return the highest version, or None if the collection is empty."""
        if not self._versions:
            return None
        return max(self._versions, key=version_key)

    def stable(self) -> "VersionCollection":
        """Return a new collection without pre-release versions."""
        return VersionCollection(v for v in self._versions if v.is_stable)


def _to_version(value: Union[Version, str]) -> Version:
    if isinstance(value, str):
        return parse_version(value)
    if not isinstance(value, Version):
        raise TypeError(f"Expected Version or str, got {type(value).__name__}")
    return value
