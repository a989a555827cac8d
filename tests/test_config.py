# SPDX-License-Identifier: MIT
"""Unit tests for parser configuration loading."""

import pytest

from flexver import ConfigError, ParseError, ParserConfig


class TestParserConfig:
    """Tests for ParserConfig options."""

    def test_defaults(self):
        """Test the default options parse loosely."""
        config = ParserConfig()
        assert config.strict is False
        assert config.parse("1.2").segments == (1, 2)

    def test_strict(self):
        """Test strict parsing through the config."""
        config = ParserConfig(strict=True)
        assert config.is_valid("1.2.3") is True
        assert config.is_valid("1.2") is False
        with pytest.raises(ParseError):
            config.parse("1.0.0-01")

    def test_prerelease_leading_zeros(self):
        """Test the pre-release leading zero opt-in."""
        config = ParserConfig(strict=True, allow_prerelease_leading_zeros=True)
        assert config.parse("1.0.0-01").prerelease == "01"

    def test_overlong_segment_is_invalid(self):
        """Test that digit runs past the segment limit are invalid."""
        assert ParserConfig().is_valid("1" * 5000) is False
        assert ParserConfig(strict=True).is_valid("1.0." + "1" * 5000) is False


class TestFromPyproject:
    """Tests for loading [tool.flexver] from pyproject.toml."""

    def test_from_dict(self):
        """Test loading from a parsed dictionary."""
        config = ParserConfig.from_pyproject_dict({"tool": {"flexver": {"strict": True}}})
        assert config == ParserConfig(strict=True)

    def test_missing_table(self):
        """Test that a missing table yields defaults."""
        assert ParserConfig.from_pyproject_dict({"project": {"name": "x"}}) == ParserConfig()

    def test_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ConfigError, match="loose"):
            ParserConfig.from_pyproject_dict({"tool": {"flexver": {"loose": True}}})

    def test_wrong_type(self):
        """Test that non-boolean values are rejected."""
        with pytest.raises(ConfigError):
            ParserConfig.from_pyproject_dict({"tool": {"flexver": {"strict": "yes"}}})

    def test_not_a_table(self):
        """Test that a non-table value is rejected."""
        with pytest.raises(ConfigError):
            ParserConfig.from_pyproject_dict({"tool": {"flexver": True}})

    def test_from_file(self, tmp_path):
        """Test loading from a pyproject.toml file."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[project]\nname = "demo"\n\n'
            "[tool.flexver]\nstrict = true\nallow_prerelease_leading_zeros = true\n"
        )
        config = ParserConfig.from_pyproject(pyproject)
        assert config.strict is True
        assert config.allow_prerelease_leading_zeros is True

    def test_from_directory(self, tmp_path):
        """Test that a directory argument finds pyproject.toml."""
        (tmp_path / "pyproject.toml").write_text("[tool.flexver]\nstrict = false\n")
        assert ParserConfig.from_pyproject(tmp_path) == ParserConfig()

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ParserConfig.from_pyproject(tmp_path / "pyproject.toml")

    def test_invalid_toml(self, tmp_path):
        """Test that invalid TOML raises ConfigError."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.flexver\nstrict = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            ParserConfig.from_pyproject(pyproject)
