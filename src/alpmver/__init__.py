# SPDX-License-Identifier: MIT
"""ALPM/RPM style version parsing and comparison.

Versions have the form ``[epoch:]version[-release]`` and are ordered the way
pacman and rpm order package versions.

Example:
    >>> from alpmver import Version, total_compare, decompose
    >>>
    >>> decompose("2:1.2.3-4")
    VersionComponents(epoch='2', version='1.2.3', release='4')
    >>>
    >>> str(total_compare("1.0a", "1.0"))
    'Less'
    >>>
    >>> Version("1:0") > Version("2")
    True
"""

__version__ = "0.1.0"

from .vercmp import (
    Ordering,
    vercmp,
)
from .version import (
    Version,
    VersionComponents,
    decompose,
    compose,
    compare_components,
    total_compare,
    compare_versions,
    version_key,
    sort_versions,
)

__all__ = [
    # Segment comparison
    "Ordering",
    "vercmp",
    # Full versions
    "Version",
    "VersionComponents",
    "decompose",
    "compose",
    "compare_components",
    "total_compare",
    "compare_versions",
    "version_key",
    "sort_versions",
]
