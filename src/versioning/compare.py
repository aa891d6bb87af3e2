"""Version comparison and final result ordering.

The comparators are intentionally simple: versions are dot separated numeric
segments, anything non-numeric counts as 0, and the ordering is descending
(the bigger version sorts first). This is not a semver implementation.
"""

from __future__ import annotations

import functools
import itertools
import re
from typing import Iterable, List, Optional

from .models import Distrib

_LEADING_NUMBER = re.compile(r"\d+(?:\.\d+)?")


def _segment(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def _strip_prerelease(version: str) -> str:
    return version.split("-", 1)[0]


def _compare_segments(a: Iterable[str], b: Iterable[str]) -> int:
    for left, right in zip(a, b):
        left_value, right_value = _segment(left), _segment(right)
        if left_value != right_value:
            # bigger version first
            return -1 if left_value > right_value else 1
    return 0


def compare(a: str, b: str) -> int:
    """Compare two versions with descending intent.

    Returns -1 when ``a`` sorts before ``b`` (``a`` is bigger), 1 when it sorts
    after, 0 when equal up to the shorter of the two.

    >>> compare("10", "9")
    -1
    """
    return _compare_segments(
        _strip_prerelease(a).split("."), _strip_prerelease(b).split(".")
    )


def compare_loose(a: str, b: str) -> int:
    """Like ``compare`` but only looks at major and minor."""
    return _compare_segments(
        _strip_prerelease(a).split(".")[:2], _strip_prerelease(b).split(".")[:2]
    )


def version_number(version: str) -> Optional[float]:
    """Parse the leading number of a dataset version.

    ``"10.0-10.1"`` reads as 10.0 and ``"4.4.3-4.4.4"`` as 4.4. Returns None
    for versions that are not numeric at all (``TP``, ``all``).
    """
    match = _LEADING_NUMBER.match(version)
    if match is None:
        return None
    return float(match.group(0))


def major_of(version: str) -> int:
    """Return the numeric major component of a version (0 when not numeric)."""
    return _segment(version.split(".", 1)[0])


def compare_padded(a: str, b: str) -> int:
    """Like ``compare`` but missing segments count as 0, so ``9.5`` sorts before ``9``."""
    pairs = itertools.zip_longest(
        _strip_prerelease(a).split("."), _strip_prerelease(b).split("."), fillvalue="0"
    )
    return _compare_segments(*zip(*pairs))


def _distrib_order(a: Distrib, b: Distrib) -> int:
    if a.name != b.name:
        return -1 if a.name < b.name else 1
    return compare_padded(a.version, b.version)


def sort_and_dedup(distribs: Iterable[Distrib]) -> List[Distrib]:
    """Sort by name ascending then version descending, dropping duplicates.

    The sort is stable, and of two equal entries the first one is kept.
    """
    ordered = sorted(distribs, key=functools.cmp_to_key(_distrib_order))
    seen = set()
    result: List[Distrib] = []
    for distrib in ordered:
        if distrib in seen:
            continue
        seen.add(distrib)
        result.append(distrib)
    return result
