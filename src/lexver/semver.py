# SPDX-License-Identifier: MIT
"""Version parsing for dotted MAJOR.MINOR.PATCH[-PRE][+BUILD] identifiers.

All five fields are kept as the strings found in the input. Nothing is
validated beyond the number of dot-separated segments:
- Build metadata: everything after the first ``+`` in the last segment
- Pre-release: everything after the first ``-`` in what remains
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .ordering import Ordering, compare_parts

MALFORMED_VERSION_MESSAGE = "Malformed version (too short or too long)."

SEGMENT_COUNT = 3


class MalformedVersionError(ValueError):
    """Raised when a version string does not have exactly three segments."""

    def __init__(self, version: str):
        self.version = version
        self.message = MALFORMED_VERSION_MESSAGE
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed version.

    Attributes:
        major: First dot-separated segment
        minor: Second dot-separated segment
        patch: Third segment with pre-release and build suffixes removed
        pre: Pre-release label (e.g., "beta1"), empty if absent
        build: Build metadata (e.g., "322"), empty if absent. Never
            takes part in equality, hashing or ordering.
    """

    major: str
    minor: str
    patch: str
    pre: str = ""
    build: str = field(default="", compare=False)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            version += f"-{self.pre}"
        if self.build:
            version += f"+{self.build}"
        return version

    @classmethod
    def from_string(cls, version_string: str) -> Version:
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this version carries a pre-release label."""
        return self.pre != ""

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def parts(self) -> tuple[str, str, str, str]:
        """Return the (major, minor, patch, pre) tuple used for ordering."""
        return (self.major, self.minor, self.patch, self.pre)

    # Comparison

    def compare(self, other: Version) -> Ordering:
        """Compare with another version, ignoring build metadata."""
        return compare_parts(self.parts(), other.parts())

    def less_than(self, other: Version) -> bool:
        return self.compare(other) == Ordering.LESS

    def greater_than(self, other: Version) -> bool:
        return self.compare(other) == Ordering.GREATER

    def equal(self, other: Version) -> bool:
        return self.compare(other) == Ordering.EQUAL

    def not_equal(self, other: Version) -> bool:
        return self.compare(other) != Ordering.EQUAL

    def greater_or_equal(self, other: Version) -> bool:
        return self.compare(other) != Ordering.LESS

    def less_or_equal(self, other: Version) -> bool:
        return self.compare(other) != Ordering.GREATER

    def pessimistic_greater_than(self, floor: Version) -> bool:
        """Check this version against a compatible-release floor (``~>``).

        True when the versions are identical (ignoring build metadata),
        when the floor has minor ``"0"`` and the majors match, or when
        major and minor match and this patch is not below the floor's.
        Pre-release and build metadata are not consulted otherwise.

        Examples:
            >>> parse_version("1.2.3").pessimistic_greater_than(parse_version("1.0.0"))
            True
            >>> parse_version("1.2.3").pessimistic_greater_than(parse_version("1.4.3"))
            False
        """
        if self.parts() == floor.parts():
            return True

        if floor.minor == "0" and self.major == floor.major:
            return True

        return (
            self.major == floor.major
            and self.minor == floor.minor
            and self.patch >= floor.patch
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.less_or_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.greater_or_equal(other)

    # Pydantic integration: validate from str, serialize back to str

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(
            parse_version, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


def _split_off(value: str, delimiter: str) -> tuple[str, str]:
    """Split value once at the first delimiter.

    Returns (head, tail); tail is empty when the delimiter is absent.
    """
    head, _, tail = value.partition(delimiter)
    return head, tail


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form MAJOR.MINOR.PATCH[-PRE][+BUILD]

    Returns:
        A Version object with the string components

    Raises:
        MalformedVersionError: If the string does not split into exactly
            three dot-separated segments
        TypeError: If version_string is not a string

    Examples:
        >>> parse_version("1.2.3")
        Version(major='1', minor='2', patch='3', pre='', build='')

        >>> parse_version("1.2.5-beta1+322")
        Version(major='1', minor='2', patch='5', pre='beta1', build='322')
    """
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")

    segments = version_string.split(".")
    if len(segments) != SEGMENT_COUNT:
        raise MalformedVersionError(version_string)

    major, minor, last = segments
    last, build = _split_off(last, "+")
    patch, pre = _split_off(last, "-")

    return Version(major=major, minor=minor, patch=patch, pre=pre, build=build)


def is_well_formed(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_well_formed("1.0.0")
        True
        >>> is_well_formed("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return len(version_string.split(".")) == SEGMENT_COUNT
