# SPDX-License-Identifier: MIT
"""Relaxed semantic version parsing, formatting and comparison.

Versions look like ``v1.2.3-beta``: an optional ``v``, one to three numeric
components and an optional free-text suffix after a hyphen.

Example:
    >>> from relaxed_semver import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("V1.2-rc.1")
    >>> version.minor
    2
    >>> str(version)
    'v1.2-rc.1'
    >>>
    >>> str(Version().set(1, 0, 3))
    'v1.0.3'
    >>>
    >>> compare_versions("v1", "v1.0.1")
    <Ordering.LESS: -1>
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    format_version,
    new_version,
    new_version_from_string,
    is_valid_version_string,
    InvalidVersionError,
    InvalidComponentError,
    VERSION_PATTERN,
)
from .compare import (
    Ordering,
    compare_versions,
    version_key,
    sort_versions,
)

__all__ = [
    # Version parsing and formatting
    "Version",
    "parse_version",
    "format_version",
    "new_version",
    "new_version_from_string",
    "is_valid_version_string",
    "InvalidVersionError",
    "InvalidComponentError",
    "VERSION_PATTERN",
    # Version comparison
    "Ordering",
    "compare_versions",
    "version_key",
    "sort_versions",
]
