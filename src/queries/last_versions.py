"""``last N versions`` style selectors over the browser dataset."""

from __future__ import annotations

from typing import List, Match, Sequence

from data.caniuse import (
    count_android_filter,
    get_browser_stat,
    get_browsers,
    should_filter_android,
)
from versioning.compare import major_of
from versioning.models import Distrib, Opts

from .base import COUNT, Selector, parse_count, pattern, require_browser


def last_released(released: Sequence[str], count: int) -> List[str]:
    """Return the newest ``count`` entries of ``released``, newest first."""
    if count <= 0:
        return []
    return list(reversed(released[-count:]))


def last_major_released(released: Sequence[str], count: int) -> List[str]:
    """Return released versions within the newest ``count`` majors, newest first."""
    if count <= 0:
        return []
    majors: List[int] = []
    for version in reversed(released):
        major = major_of(version)
        if not majors or majors[-1] != major:
            majors.append(major)
    minimum = majors[count - 1] if count <= len(majors) else 0
    return [v for v in reversed(released) if major_of(v) >= minimum]


def _effective_count(name: str, count: int, opts: Opts) -> int:
    if should_filter_android(name, opts.mobile_to_desktop):
        return count_android_filter(count, opts.mobile_to_desktop)
    return count


def _every_browser(opts: Opts):
    for key in get_browsers():
        lookup = get_browser_stat(key, opts.mobile_to_desktop)
        if lookup is not None:
            yield lookup


class LastNMajorBrowsersSelector(Selector):
    """``last N major versions`` of every browser."""

    regex = pattern(r"last\s+" + COUNT + r"\s+major\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        count = parse_count(match.group(1))
        result: List[Distrib] = []
        for name, stat in _every_browser(opts):
            versions = last_major_released(stat.released, _effective_count(name, count, opts))
            result.extend(Distrib(name, version) for version in versions)
        return result


class LastNBrowsersSelector(Selector):
    """``last N versions`` of every browser."""

    regex = pattern(r"last\s+" + COUNT + r"\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        count = parse_count(match.group(1))
        result: List[Distrib] = []
        for name, stat in _every_browser(opts):
            versions = last_released(stat.released, _effective_count(name, count, opts))
            result.extend(Distrib(name, version) for version in versions)
        return result


class LastNXMajorBrowsersSelector(Selector):
    """``last N <browser> major versions``."""

    regex = pattern(r"last\s+" + COUNT + r"\s+(\w+)\s+major\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        count = parse_count(match.group(1))
        name, stat = require_browser(match.group(2), opts)
        versions = last_major_released(stat.released, _effective_count(name, count, opts))
        return [Distrib(name, version) for version in versions]


class LastNXBrowsersSelector(Selector):
    """``last N <browser> versions``."""

    regex = pattern(r"last\s+" + COUNT + r"\s+(\w+)\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        count = parse_count(match.group(1))
        name, stat = require_browser(match.group(2), opts)
        versions = last_released(stat.released, _effective_count(name, count, opts))
        return [Distrib(name, version) for version in versions]
