# SPDX-License-Identifier: MIT
"""Version comparison and sorting.

Components compare numerically in major, minor, patch order. Ties are broken
by comparing suffixes as plain strings, so ``v1`` < ``v1-alpha`` < ``v1-beta``.
This is not SemVer precedence: a release does not outrank its pre-releases.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .semver import Version, parse_version


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _as_version(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def version_key(version: Union[str, Version]) -> tuple[int, int, int, str]:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A (major, minor, patch, suffix) tuple

    Examples:
        >>> sorted(["v2", "v1.0.1", "v1-rc"], key=version_key)
        ['v1-rc', 'v1.0.1', 'v2']
    """
    v = _as_version(version)
    return (v.major, v.minor, v.patch, v.suffix)


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER, which compare
        equal to -1, 0 and 1

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("v1", "v2")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0", "v1")
        <Ordering.EQUAL: 0>
        >>> compare_versions("v1-alpha", "v1")
        <Ordering.GREATER: 1>
    """
    key1 = version_key(version1)
    key2 = version_key(version2)
    if key1 == key2:
        return Ordering.EQUAL
    return Ordering.LESS if key1 < key2 else Ordering.GREATER


def sort_versions(versions: list[Version]) -> None:
    """Sort a list of versions in place, lowest first."""
    versions.sort(key=version_key)
