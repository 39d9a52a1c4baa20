# SPDX-License-Identifier: MIT
"""Relaxed semantic version parsing and formatting.

Accepted input is ``[vV]?MAJOR[.MINOR[.PATCH]][-SUFFIX]``:
- The leading ``v``/``V`` is optional and dropped.
- Missing MINOR or PATCH components default to 0.
- Everything after the first hyphen is kept verbatim as the suffix, further
  hyphens included.

Canonical output always starts with a lowercase ``v`` and elides trailing
zero components: ``v1``, ``v1.2``, ``v1.0.3``, ``v0-rc.1``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Whole-input grammar. The numeric run is validated piece by piece after the
# match so that a bad component can be reported by name.
VERSION_PATTERN = re.compile(
    r"^[vV]?"
    r"(?P<numbers>[^-]*)"
    r"(?:-(?P<suffix>.*))?$",
    re.DOTALL,
)

_COMPONENT_PATTERN = re.compile(r"[0-9]+")

COMPONENTS = ("major", "minor", "patch")

# Components are capped at the smallest int/str conversion limit Python can be
# configured with (sys.int_info.str_digits_check_threshold), so every valid
# Version can be formatted and reparsed.
MAX_COMPONENT_DIGITS = 640
_COMPONENT_LIMIT = 10**MAX_COMPONENT_DIGITS


class InvalidVersionError(Exception):
    """Raised when a string is not a valid version identifier."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"invalid version format: {version}"
        super().__init__(self.message)


class InvalidComponentError(InvalidVersionError):
    """Raised when a major, minor or patch component is not a decimal number."""

    def __init__(self, version: str, component: str, value: str):
        self.component = component
        self.value = value
        super().__init__(version, f"invalid {component} version: {value}")


def _check_component(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} version must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} version must be non-negative, got {value}")
    if value >= _COMPONENT_LIMIT:
        raise ValueError(f"{name} version exceeds {MAX_COMPONENT_DIGITS} digits")
    return value


@dataclass(order=True, slots=True)
class Version:
    """A mutable (major, minor, patch, suffix) version value.

    Field order doubles as the comparison order: components numerically,
    then the suffix as a plain string. An empty suffix therefore sorts
    before any non-empty one.

    Setters modify the instance in place and return it, so calls chain:

        >>> Version().set_major(1).set_suffix("rc", "1")
        Version(major=1, minor=0, patch=0, suffix='rc.1')

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        suffix: Text that followed the first hyphen, without the hyphen.
            The suffix itself may start with a hyphen: ``1--x`` parses to
            suffix ``-x``, and the constructor and set_suffix accept it too.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    suffix: str = ""

    def __post_init__(self) -> None:
        for name in COMPONENTS:
            _check_component(name, getattr(self, name))
        if not isinstance(self.suffix, str):
            raise TypeError(f"suffix must be a str, got {type(self.suffix).__name__}")

    def __str__(self) -> str:
        return format_version(self)

    @property
    def has_suffix(self) -> bool:
        return self.suffix != ""

    @property
    def suffix_segments(self) -> tuple[str, ...]:
        """Return the dot-separated segments of the suffix."""
        if not self.suffix:
            return ()
        return tuple(self.suffix.split("."))

    @property
    def base_version(self) -> str:
        """Return the canonical form without the suffix."""
        return _format_numbers(self.major, self.minor, self.patch)

    def set_major(self, major: int) -> Version:
        self.major = _check_component("major", major)
        return self

    def set_minor(self, minor: int) -> Version:
        self.minor = _check_component("minor", minor)
        return self

    def set_patch(self, patch: int) -> Version:
        self.patch = _check_component("patch", patch)
        return self

    def set_suffix(self, *segments: str) -> Version:
        """Join ``segments`` with dots into the suffix.

        Calling with no segments clears the suffix.
        """
        self.suffix = ".".join(segments)
        return self

    def set(self, major: int, minor: int, patch: int, *segments: str) -> Version:
        """Set every field at once.

        All components are checked before any is assigned, so a rejected
        value leaves the version unchanged.
        """
        for name, value in zip(COMPONENTS, (major, minor, patch)):
            _check_component(name, value)
        return self.set_major(major).set_minor(minor).set_patch(patch).set_suffix(*segments)

    def set_from_string(self, version_string: str) -> Version:
        """Overwrite this version with the parsed value of ``version_string``.

        This is the best-effort form: if the string does not parse, the
        version is left unchanged and no error is raised. Use
        :func:`parse_version` when the failure needs to be seen.
        """
        try:
            parsed = parse_version(version_string)
        except InvalidVersionError as e:
            logger.debug(f"Ignoring unparseable version {version_string!r}: {e.message}")
            return self

        self.major = parsed.major
        self.minor = parsed.minor
        self.patch = parsed.patch
        self.suffix = parsed.suffix
        return self


def _format_numbers(major: int, minor: int, patch: int) -> str:
    if patch:
        return f"v{major}.{minor}.{patch}"
    if minor:
        return f"v{major}.{minor}"
    return f"v{major}"


def format_version(version: Version) -> str:
    """Return the canonical text form of a version.

    Minor is shown when minor or patch is non-zero, patch only when it is
    non-zero, and ``-suffix`` only when there is a suffix.

    Examples:
        >>> format_version(Version(1, 0, 0))
        'v1'
        >>> format_version(Version(1, 0, 3))
        'v1.0.3'
        >>> format_version(Version(0, 0, 0, "rc.1"))
        'v0-rc.1'
    """
    text = _format_numbers(version.major, version.minor, version.patch)
    if version.suffix:
        text += f"-{version.suffix}"
    return text


def new_version() -> Version:
    """Return a new zero version (``v0``)."""
    return Version()


def parse_version(version_string: str) -> Version:
    """Parse a relaxed version string into a Version object.

    Args:
        version_string: A string of the form ``[vV]?N[.N[.N]][-suffix]``

    Returns:
        A Version object with parsed components

    Raises:
        InvalidComponentError: If a major, minor or patch component is not
            a decimal number
        InvalidVersionError: If the string has no numeric components, more
            than three of them, or is not a string at all

    Examples:
        >>> parse_version("v1.2.3-beta")
        Version(major=1, minor=2, patch=3, suffix='beta')

        >>> parse_version("V2")
        Version(major=2, minor=0, patch=0, suffix='')

        >>> parse_version("1.0-rc-2")
        Version(major=1, minor=0, patch=0, suffix='rc-2')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    match = VERSION_PATTERN.match(version_string)
    if not match or not match.group("numbers"):
        raise InvalidVersionError(version_string)

    pieces = match.group("numbers").split(".")
    if len(pieces) > len(COMPONENTS):
        raise InvalidVersionError(version_string)

    values = []
    for name, piece in zip(COMPONENTS, pieces):
        if not _COMPONENT_PATTERN.fullmatch(piece):
            raise InvalidComponentError(version_string, name, piece)
        try:
            value = int(piece)
        except ValueError:
            raise InvalidComponentError(version_string, name, piece) from None
        if value >= _COMPONENT_LIMIT:
            raise InvalidComponentError(version_string, name, piece)
        values.append(value)

    version = Version(*values)
    version.suffix = match.group("suffix") or ""
    return version


# Same contract as parse_version, kept for callers that construct by name.
new_version_from_string = parse_version


def is_valid_version_string(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version_string("v1.2.3-beta")
        True
        >>> is_valid_version_string("1.2.3.4")
        False
        >>> is_valid_version_string("vX")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
