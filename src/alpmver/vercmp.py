# SPDX-License-Identifier: MIT
"""Segment comparison following ALPM/RPM version ordering.

A string is read as alternating separator runs and alphanumeric segments.
Segments are maximal runs of ASCII digits or ASCII letters; separators are
any other characters and only their length takes part in the comparison.
"""

from __future__ import annotations

import re
from enum import IntEnum

# ASCII only: str.isdigit()/isalpha() would accept other scripts
_DIGITS = re.compile(r"[0-9]*")
_ALPHA = re.compile(r"[A-Za-z]*")
_SEPARATOR = re.compile(r"[^0-9A-Za-z]*")


class Ordering(IntEnum):
    """Result of a version comparison.

    Members carry the conventional ``-1/0/1`` values, so an Ordering can be
    used anywhere an integer comparison result is expected.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def __str__(self) -> str:
        return self.name.capitalize()

    def reverse(self) -> "Ordering":
        """Return the ordering seen from the other operand."""
        return Ordering(-self.value)

    def then(self, other: "Ordering") -> "Ordering":
        """Return self unless it is EQUAL, in which case return other."""
        return other if self is Ordering.EQUAL else self

    @classmethod
    def of(cls, left, right) -> "Ordering":
        """Compare two plain values with ``<`` and ``>``."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


def _take(pattern: re.Pattern[str], text: str, pos: int) -> int:
    """Return the end of the run matched by pattern at pos."""
    return pattern.match(text, pos).end()


def _is_alpha_at(text: str, pos: int) -> bool:
    return _take(_ALPHA, text, pos) > pos


def vercmp(a: str, b: str) -> Ordering:
    """Compare two version fragments segment by segment.

    Args:
        a: First fragment (epoch, version or release text)
        b: Second fragment

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Note:
        When segment kinds disagree a numeric segment is always newer than an
        alphabetic one. When one side runs out first, the shorter side is
        older unless the longer side continues with a letter, in which case
        the roles flip. Both rules come from rpm and are kept as-is.

    Examples:
        >>> vercmp("1.0.0", "1.0.1")
        <Ordering.LESS: -1>
        >>> vercmp("1.05", "1.5")
        <Ordering.EQUAL: 0>
        >>> vercmp("1.0a", "1.0")
        <Ordering.LESS: -1>
    """
    if a == b:
        return Ordering.EQUAL

    pos1 = pos2 = 0
    len1, len2 = len(a), len(b)

    while pos1 < len1 and pos2 < len2:
        seg1 = _take(_SEPARATOR, a, pos1)
        seg2 = _take(_SEPARATOR, b, pos2)

        if seg1 == len1 or seg2 == len2:
            pos1, pos2 = seg1, seg2
            break

        # separators are compared by length only
        sep1, sep2 = seg1 - pos1, seg2 - pos2
        if sep1 != sep2:
            return Ordering.of(sep1, sep2)

        is_num = "0" <= a[seg1] <= "9"
        pattern = _DIGITS if is_num else _ALPHA

        end1 = _take(pattern, a, seg1)
        end2 = _take(pattern, b, seg2)

        if end2 == seg2:
            # b's next segment is of the other kind
            return Ordering.GREATER if is_num else Ordering.LESS

        chunk1, chunk2 = a[seg1:end1], b[seg2:end2]
        if is_num:
            result = Ordering.of(int(chunk1), int(chunk2))
        else:
            result = Ordering.of(chunk1, chunk2)

        if result is not Ordering.EQUAL:
            return result

        pos1, pos2 = end1, end2

    if pos1 == len1 and pos2 == len2:
        return Ordering.EQUAL

    if (pos1 == len1 and not _is_alpha_at(b, pos2)) or _is_alpha_at(a, pos1):
        return Ordering.LESS
    return Ordering.GREATER
