# SPDX-License-Identifier: MIT
"""Unit tests for version comparison and sorting."""

import pytest

from relaxed_semver import (
    Version,
    Ordering,
    parse_version,
    compare_versions,
    version_key,
    sort_versions,
    InvalidVersionError,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == Ordering.EQUAL

    def test_equal_across_spellings(self):
        """Test that elided and prefixed forms compare equal."""
        assert compare_versions("V1", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == Ordering.LESS
        assert compare_versions("2.0.0", "1.0.0") == Ordering.GREATER

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_numeric_not_lexicographic(self):
        """Test that components compare as numbers."""
        assert compare_versions("v1.10", "v1.9") == 1

    def test_components_outrank_suffix(self):
        assert compare_versions("1.0.0-zzz", "1.0.1") == -1

    def test_no_suffix_sorts_first(self):
        """Test that a release sorts before its suffixed forms."""
        assert compare_versions("1.0.0", "1.0.0-alpha") == Ordering.LESS
        assert compare_versions("1.0.0-alpha", "1.0.0") == Ordering.GREATER

    def test_suffix_lexicographic(self):
        """Test that suffixes compare as plain strings."""
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") == -1
        assert compare_versions("1.0.0-rc.10", "1.0.0-rc.9") == -1

    def test_suffix_case_sensitive(self):
        """Test that uppercase sorts before lowercase by code point."""
        assert compare_versions("1.0.0-RC", "1.0.0-rc") == -1

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(Version(1), Version(2)) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("v1", v) == 0

    def test_invalid_string(self):
        """Test that an invalid version string raises error."""
        with pytest.raises(InvalidVersionError):
            compare_versions("1.2.3.4", "1.0.0")

    def test_returns_ordering(self):
        assert isinstance(compare_versions("v1", "v2"), Ordering)


class TestRichComparison:
    """Tests for Version comparison operators."""

    def test_operators_follow_comparator(self):
        assert Version(1, 2, 3) < Version(1, 3)
        assert Version(1, 0, 0, "beta") > Version(1, 0, 0, "alpha")
        assert Version(2) >= Version(2)
        assert Version(1, 0, 0) <= Version(1, 0, 0, "rc")

    def test_max_of_versions(self):
        versions = [parse_version(s) for s in ("v1.2", "v1.10", "v1.9.9")]
        assert str(max(versions)) == "v1.10"


class TestVersionKey:
    """Tests for version_key function."""

    def test_key_fields(self):
        assert version_key("v1.2-rc") == (1, 2, 0, "rc")

    def test_sorting_strings(self):
        """Test sorting version strings."""
        versions = ["v2", "1.0.0", "1.1", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1", "v2"]


class TestSortVersions:
    """Tests for sort_versions function."""

    def test_sorts_in_place(self):
        """Test that the list is reordered and nothing is returned."""
        versions = [parse_version(s) for s in ("v2", "v1.0.3", "v1.2", "v1")]
        original = list(versions)
        assert sort_versions(versions) is None
        assert [str(v) for v in versions] == ["v1", "v1.0.3", "v1.2", "v2"]
        assert sorted(map(id, versions)) == sorted(map(id, original))

    def test_sorting_with_suffixes(self):
        """Test that suffixed versions sort after the bare release."""
        versions = [
            parse_version("1.0.0-rc"),
            parse_version("1.0.0"),
            parse_version("1.0.0-beta"),
            parse_version("0.9"),
            parse_version("1.0.0-alpha"),
        ]
        sort_versions(versions)
        assert [str(v) for v in versions] == [
            "v0.9",
            "v1",
            "v1-alpha",
            "v1-beta",
            "v1-rc",
        ]

    def test_empty_list(self):
        versions: list[Version] = []
        sort_versions(versions)
        assert versions == []


class TestTransitivity:
    """Tests for comparison order properties."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        a = "1.0.0"
        b = "1.0.0-alpha"
        c = "1.0.1"

        assert compare_versions(a, b) == -1
        assert compare_versions(b, c) == -1
        assert compare_versions(a, c) == -1

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["v0", "1.0.0-alpha", "1.2.3-rc-1"]:
            assert compare_versions(v, v) == 0
