# SPDX-License-Identifier: MIT
"""Three-way ordering of version part tuples.

Parts are compared as plain strings, so ``"10" < "9"``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_parts(parts1: Sequence[str], parts2: Sequence[str]) -> Ordering:
    """Compare two sequences of version parts element by element.

    Returns:
        Ordering.EQUAL if both sequences are identical, otherwise the
        ordering decided by the first differing element. If one sequence
        is a prefix of the other, the shorter one is LESS.

    Examples:
        >>> compare_parts(("1", "2", "3", ""), ("1", "2", "3", ""))
        <Ordering.EQUAL: 0>
        >>> compare_parts(("1", "9", "0", ""), ("1", "10", "0", ""))
        <Ordering.GREATER: 1>
    """
    if tuple(parts1) == tuple(parts2):
        return Ordering.EQUAL

    for p1, p2 in zip(parts1, parts2):
        if p1 > p2:
            return Ordering.GREATER
        if p1 < p2:
            return Ordering.LESS

    return Ordering.LESS if len(parts1) < len(parts2) else Ordering.GREATER
