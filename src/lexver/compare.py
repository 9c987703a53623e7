# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or Version objects.

Ordering is lexicographic over (major, minor, patch, pre) as strings, so
"1.9.0" > "1.10.0", and a release sorts before its pre-releases
("1.2.5" < "1.2.5-beta1"). Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .ordering import Ordering
from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 == version2
        Ordering.GREATER (1) if version1 > version2

    Raises:
        MalformedVersionError: If either version string is malformed

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.2.4+322", "1.2.4+939")
        <Ordering.EQUAL: 0>
        >>> compare_versions("1.9.0", "1.10.0")
        <Ordering.GREATER: 1>
    """
    return _coerce(version1).compare(_coerce(version2))


def is_compatible(version: VersionLike, floor: VersionLike) -> bool:
    """Check whether version satisfies the pessimistic constraint ``~> floor``.

    Raises:
        MalformedVersionError: If either version string is malformed
    """
    return _coerce(version).pessimistic_greater_than(_coerce(floor))


def version_key(version: VersionLike) -> tuple[str, str, str, str]:
    """Return a sort key for a version, consistent with compare_versions.

    Examples:
        >>> sorted(["1.2.0", "1.10.0", "1.2.0-rc1"], key=version_key)
        ['1.10.0', '1.2.0', '1.2.0-rc1']
    """
    return _coerce(version).parts()


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions, oldest first unless reverse is set."""
    return sorted((_coerce(v) for v in versions), key=version_key, reverse=reverse)


def latest_version(versions: Iterable[VersionLike]) -> Optional[Version]:
    """Return the newest of the given versions, or None if there are none.

    Of several equal versions, the first one given wins.
    """
    latest: Optional[Version] = None
    for candidate in versions:
        parsed = _coerce(candidate)
        if latest is None or parsed.greater_than(latest):
            latest = parsed
    return latest
