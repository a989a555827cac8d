# SPDX-License-Identifier: MIT
"""Parser configuration loading from pyproject.toml.

Projects can pin parser defaults in a ``[tool.flexver]`` table:

    [tool.flexver]
    strict = true
    allow_prerelease_leading_zeros = false
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ConfigError, ParseError
from .version import Version, parse_version


@dataclass(frozen=True)
class ParserConfig:
    """Default options for parsing versions.

    Attributes:
        strict: Require the SemVer 2.0.0 core grammar
        allow_prerelease_leading_zeros: In strict mode, accept numeric
            pre-release identifiers with leading zeros (e.g. ``1.0.0-01``)
    """

    strict: bool = False
    allow_prerelease_leading_zeros: bool = False

    def parse(self, text: str) -> Version:
        """Parse a version string using these options."""
        return parse_version(
            text,
            strict=self.strict,
            allow_prerelease_leading_zeros=self.allow_prerelease_leading_zeros,
        )

    def is_valid(self, text: str) -> bool:
        """Return True if ``text`` parses under these options."""
        try:
            self.parse(text)
        except ParseError:
            return False
        return True

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "ParserConfig":
        """Create ParserConfig from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml, or the directory holding it

        Returns:
            ParserConfig instance (defaults when [tool.flexver] is absent)

        Raises:
            ConfigError: If the file is invalid TOML or the table is malformed
            FileNotFoundError: If the file does not exist
        """
        path = Path(pyproject_path)
        if path.is_dir():
            path = path / "pyproject.toml"
        if not path.exists():
            raise FileNotFoundError(f"pyproject.toml not found: {path}")

        try:
            with open(path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "ParserConfig":
        """Create ParserConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If [tool.flexver] has unknown keys or non-boolean values
        """
        table = pyproject.get("tool", {}).get("flexver", {})
        if not isinstance(table, dict):
            raise ConfigError("[tool.flexver] must be a table")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(table) - known)
        if unknown:
            raise ConfigError(f"Unknown keys in [tool.flexver]: {', '.join(unknown)}")

        for key, value in table.items():
            if not isinstance(value, bool):
                raise ConfigError(
                    f"[tool.flexver] {key} must be a boolean, got {type(value).__name__}"
                )

        return cls(**table)
