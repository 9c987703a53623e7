# SPDX-License-Identifier: MIT
"""Parsing and ordering of MAJOR.MINOR.PATCH[-PRE][+BUILD] version strings.

Every field is an opaque string and ordering is lexicographic over
(major, minor, patch, pre), so "1.9.0" sorts after "1.10.0". Build
metadata never affects equality or ordering.

Example:
    >>> from lexver import parse_version, compare_versions, is_compatible
    >>>
    >>> version = parse_version("1.2.5-beta1+322")
    >>> version.patch
    '5'
    >>> version.pre
    'beta1'
    >>>
    >>> compare_versions(version, "1.2.5-beta4")
    <Ordering.LESS: -1>
    >>>
    >>> is_compatible("1.2.3", "1.0.0")
    True
"""

__version__ = "0.1.0"

from .ordering import (
    Ordering,
    compare_parts,
)
from .semver import (
    Version,
    parse_version,
    is_well_formed,
    MalformedVersionError,
    MALFORMED_VERSION_MESSAGE,
)
from .compare import (
    compare_versions,
    is_compatible,
    version_key,
    sort_versions,
    latest_version,
)
from .serialize import (
    dumps,
    json_default,
)

__all__ = [
    # Ordering
    "Ordering",
    "compare_parts",
    # Version parsing
    "Version",
    "parse_version",
    "is_well_formed",
    "MalformedVersionError",
    "MALFORMED_VERSION_MESSAGE",
    # Version comparison
    "compare_versions",
    "is_compatible",
    "version_key",
    "sort_versions",
    "latest_version",
    # Serialization
    "dumps",
    "json_default",
]
