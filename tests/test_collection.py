# SPDX-License-Identifier: MIT
"""Unit tests for version collections."""

import pytest

from flexver import ParseError, VersionCollection, parse_version


def _strings(collection):
    return [str(v) for v in collection]


class TestFromStrings:
    """Tests for VersionCollection.from_strings."""

    def test_numeric_sort(self):
        """Test that segments sort numerically, not lexically."""
        collection = VersionCollection.from_strings(["1.4.0", "1.2.0", "1.10.0", "1.4.1"])
        assert _strings(collection) == ["1.2.0", "1.4.0", "1.4.1", "1.10.0"]

    def test_prerelease_sort(self):
        """Test that pre-releases sort before their release."""
        collection = VersionCollection.from_strings(["1.0.0", "1.0.0-rc.1", "0.9", "1.0.0-beta"])
        assert _strings(collection) == ["0.9", "1.0.0-beta", "1.0.0-rc.1", "1.0.0"]

    def test_sorted_result(self):
        """Test that the result reports itself sorted."""
        assert VersionCollection.from_strings(["3", "1", "2"]).is_sorted() is True

    def test_empty(self):
        """Test an empty input."""
        collection = VersionCollection.from_strings([])
        assert len(collection) == 0
        assert collection.is_sorted() is True

    def test_parse_error(self):
        """Test that the first invalid string fails the whole call."""
        with pytest.raises(ParseError) as exc_info:
            VersionCollection.from_strings(["1.0", "bad", "1..0"])
        assert exc_info.value.text == "bad"

    def test_rejects_single_string(self):
        """Test that a bare string is not split into characters."""
        with pytest.raises(TypeError):
            VersionCollection.from_strings("1.0.0")


class TestMutation:
    """Tests for sorting and mutating collections."""

    def test_sort_in_place(self):
        """Test that sort reorders the collection."""
        collection = VersionCollection(["2.0", "1.0", "1.5"])
        assert collection.is_sorted() is False
        collection.sort()
        assert _strings(collection) == ["1.0", "1.5", "2.0"]

    def test_sort_reverse(self):
        """Test descending sort."""
        collection = VersionCollection(["1.0", "2.0", "1.5"])
        collection.sort(reverse=True)
        assert _strings(collection) == ["2.0", "1.5", "1.0"]
        assert collection.is_sorted() is False

    def test_is_sorted_with_equal_versions(self):
        """Test that equal-comparing versions count as sorted."""
        collection = VersionCollection(["1.2.0", "1.2", "1.2.0+build"])
        assert collection.is_sorted() is True

    def test_is_sorted_does_not_mutate(self):
        """Test that is_sorted leaves the order alone."""
        collection = VersionCollection(["2.0", "1.0"])
        collection.is_sorted()
        assert _strings(collection) == ["2.0", "1.0"]

    def test_append_breaks_sortedness(self):
        """Test that mutation does not keep the collection sorted."""
        collection = VersionCollection.from_strings(["1.0", "2.0"])
        collection.append("1.5")
        assert collection.is_sorted() is False
        assert collection[-1] == parse_version("1.5")

    def test_sequence_protocol(self):
        """Test indexing, slicing, assignment and deletion."""
        collection = VersionCollection(["1.0", "2.0", "3.0"])
        assert collection[0] == parse_version("1.0")
        assert _strings(collection[1:]) == ["2.0", "3.0"]
        collection[0] = "0.5"
        del collection[1]
        collection.insert(0, parse_version("0.1"))
        assert _strings(collection) == ["0.1", "0.5", "3.0"]
        assert parse_version("3.0.0") in collection

    def test_rejects_other_types(self):
        """Test that only versions and strings are accepted."""
        with pytest.raises(TypeError):
            VersionCollection([1.0])  # type: ignore

    def test_equality(self):
        """Test collection equality."""
        assert VersionCollection(["1.0"]) == VersionCollection(["1.0.0"])
        assert VersionCollection(["1.0"]) == [parse_version("1")]


class TestQueries:
    """Tests for latest and stable."""

    def test_latest(self):
        """Test latest returns the highest version."""
        collection = VersionCollection(["1.0", "2.0-rc.1", "1.10"])
        assert str(collection.latest()) == "2.0-rc.1"

    def test_latest_empty(self):
        """Test latest on an empty collection."""
        assert VersionCollection().latest() is None

    def test_stable(self):
        """Test stable drops pre-releases."""
        collection = VersionCollection(["1.0", "2.0-rc.1", "1.10"])
        assert _strings(collection.stable()) == ["1.0", "1.10"]
