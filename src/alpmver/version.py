# SPDX-License-Identifier: MIT
"""Full ``[epoch:]version[-release]`` parsing and comparison.

Version strings are never validated: any text decomposes into an epoch, a
version and an optional release, and any two strings can be ordered.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Optional, Union

from .vercmp import Ordering, vercmp

logger = logging.getLogger(__name__)

_EPOCH = re.compile(r"[0-9]*")

DEFAULT_EPOCH = "0"
DEFAULT_RELEASE = "1"


@dataclass(frozen=True, slots=True, eq=False)
class VersionComponents:
    """The epoch, version and release of a version string.

    Attributes:
        epoch: Epoch text, ``"0"`` when the string has none
        version: Upstream version text
        release: Release text after the last ``-``, or None without a ``-``

    Equality and ordering follow :func:`compare_components`, so components
    that differ only in leading zeros are equal.
    """

    epoch: str
    version: str
    release: Optional[str] = None

    def to_string(self) -> str:
        """Render the components back to ``[epoch:]version-release`` text."""
        return compose(self)

    def to_version(self) -> "Version":
        return Version(compose(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionComponents):
            return NotImplemented
        return compare_components(self, other) is Ordering.EQUAL

    def __lt__(self, other: "VersionComponents") -> bool:
        if not isinstance(other, VersionComponents):
            return NotImplemented
        return compare_components(self, other) is Ordering.LESS

    def __le__(self, other: "VersionComponents") -> bool:
        if not isinstance(other, VersionComponents):
            return NotImplemented
        return compare_components(self, other) is not Ordering.GREATER

    def __gt__(self, other: "VersionComponents") -> bool:
        if not isinstance(other, VersionComponents):
            return NotImplemented
        return compare_components(self, other) is Ordering.GREATER

    def __ge__(self, other: "VersionComponents") -> bool:
        if not isinstance(other, VersionComponents):
            return NotImplemented
        return compare_components(self, other) is not Ordering.LESS

    # equal components can differ in text
    __hash__ = None  # type: ignore[assignment]


def decompose(version_string: str) -> VersionComponents:
    """Split a version string into epoch, version and release.

    A leading digit run is an epoch only when a ``:`` follows it. The
    release is whatever follows the last ``-``.

    Args:
        version_string: Raw version text, possibly malformed or empty

    Returns:
        The VersionComponents of the string

    Examples:
        >>> decompose("2:1.2.3-4")
        VersionComponents(epoch='2', version='1.2.3', release='4')
        >>> decompose("1.0")
        VersionComponents(epoch='0', version='1.0', release=None)
        >>> decompose("12abc")
        VersionComponents(epoch='0', version='12abc', release=None)
    """
    end = _EPOCH.match(version_string).end()

    if end and version_string.startswith(":", end):
        epoch = version_string[:end]
        rest = version_string[end + 1 :]
    else:
        epoch = DEFAULT_EPOCH
        rest = version_string

    version, sep, release = rest.rpartition("-")
    if not sep:
        return VersionComponents(epoch=epoch, version=rest, release=None)
    return VersionComponents(epoch=epoch, version=version, release=release)


def compose(components: VersionComponents) -> str:
    """Render components as a version string.

    A missing release is written as ``"1"`` and a ``"0"`` epoch is left out,
    so ``compose(decompose(s))`` only reproduces ``s`` when it already had a
    release and either no epoch or a non-zero one.

    Examples:
        >>> compose(decompose("2:1.0-1"))
        '2:1.0-1'
        >>> compose(decompose("1.0"))
        '1.0-1'
    """
    release = DEFAULT_RELEASE if components.release is None else components.release

    if components.epoch == DEFAULT_EPOCH:
        return f"{components.version}-{release}"
    return f"{components.epoch}:{components.version}-{release}"


def compare_components(left: VersionComponents, right: VersionComponents) -> Ordering:
    """Compare decomposed versions.

    Epochs are compared first, then versions. Releases only break a tie when
    both sides have one; a missing release never takes part.
    """
    result = vercmp(left.epoch, right.epoch).then(vercmp(left.version, right.version))

    if result is Ordering.EQUAL and left.release is not None and right.release is not None:
        return vercmp(left.release, right.release)
    return result


class Version:
    """A version string ordered by ALPM/RPM rules.

    The text is kept exactly as given; nothing is normalized or validated.
    Two versions are equal when they compare EQUAL, which does not require
    equal text:

        >>> Version("1.0") == Version("1.0-1")
        True
        >>> Version("1:0") > Version("2")
        True
    """

    __slots__ = ("_text",)

    def __init__(self, text: Union[str, "Version"]) -> None:
        if isinstance(text, Version):
            text = text._text
        elif not isinstance(text, str):
            raise TypeError(f"Version must be a string, got {type(text).__name__}")
        self._text = text

    @classmethod
    def from_components(cls, components: VersionComponents) -> "Version":
        """Build a version from components, see :func:`compose`."""
        return cls(compose(components))

    def components(self) -> VersionComponents:
        """Return the epoch, version and release of this version."""
        return decompose(self._text)

    def as_str(self) -> str:
        return self._text

    def compare(self, other: Union[str, "Version"]) -> Ordering:
        return total_compare(self, other)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Version({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return total_compare(self, other) is Ordering.EQUAL

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return total_compare(self, other) is Ordering.LESS

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return total_compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return total_compare(self, other) is Ordering.GREATER

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return total_compare(self, other) is not Ordering.LESS

    __hash__ = None  # type: ignore[assignment]


def _text_of(version: Union[str, Version]) -> str:
    if isinstance(version, Version):
        return version.as_str()
    if isinstance(version, str):
        return version
    raise TypeError(f"Version must be a string, got {type(version).__name__}")


def total_compare(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two full version strings.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        The Ordering of version1 relative to version2

    Raises:
        TypeError: If either argument is neither a string nor a Version

    Examples:
        >>> total_compare("1.0.0", "1.0.1")
        <Ordering.LESS: -1>
        >>> total_compare("1:1.0-1", "2.0-1")
        <Ordering.GREATER: 1>
        >>> total_compare("1.0", "1.0-1")
        <Ordering.EQUAL: 0>
    """
    left = decompose(_text_of(version1))
    right = decompose(_text_of(version2))
    result = compare_components(left, right)
    logger.debug("%r vs %r: %s", left, right, result)
    return result


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions, returning -1, 0 or 1.

    Examples:
        >>> compare_versions("1.0-1", "1.0-2")
        -1
        >>> compare_versions("1.05", "1.5")
        0
    """
    return int(total_compare(version1, version2))


_VersionKey = cmp_to_key(total_compare)


def version_key(version: Union[str, Version]):
    """Return a sort key for a version string or Version object.

    Examples:
        >>> sorted(["1.0-2", "1:0.1", "1.0-1"], key=version_key)
        ['1.0-1', '1.0-2', '1:0.1']
    """
    return _VersionKey(version)


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Union[str, Version]]:
    """Return the given versions sorted oldest first (newest first if reverse).

    The sort is stable, so versions comparing EQUAL keep their input order.
    """
    return sorted(versions, key=version_key, reverse=reverse)
