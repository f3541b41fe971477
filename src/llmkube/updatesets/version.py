"""Version comparison helpers.

Implements a tolerant dotted-numeric comparator: an optional leading "v" is
dropped, components are compared as integers, missing trailing components
count as zero and anything that is not a plain integer counts as zero too.
There is deliberately no pre-release or build-metadata ordering.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import List


def parse_version(version: str) -> List[int]:
    """Decode ``version`` into one non-negative integer per dotted component.

    Never raises: unparsable components (``"x"``, ``""``, ``"-1"``, ``" 2"``)
    are ``0``. Only a leading ``v``/``V`` is removed beforehand.
    """
    version = version or ""
    if version[:1] in ("v", "V"):
        version = version[1:]
    parts: List[int] = []
    for chunk in version.split("."):
        parts.append(int(chunk) if chunk.isascii() and chunk.isdigit() else 0)
    return parts


def compare_versions(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` is older than, equal to or newer than ``b``."""
    for left, right in zip_longest(parse_version(a), parse_version(b), fillvalue=0):
        if left < right:
            return -1
        if left > right:
            return 1
    return 0


def is_version_newer(current: str, candidate: str) -> bool:
    """Return True if ``candidate`` is strictly newer than ``current``."""
    return compare_versions(current, candidate) < 0


__all__ = ["parse_version", "compare_versions", "is_version_newer"]
