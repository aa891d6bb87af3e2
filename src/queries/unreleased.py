"""Selectors for versions that are known but not released yet."""

from __future__ import annotations

from typing import List, Match

from data.caniuse import get_browser_stat, get_browsers
from versioning.models import BrowserStat, Distrib, Opts

from .base import Selector, pattern, require_browser


def _unreleased(name: str, stat: BrowserStat) -> List[Distrib]:
    released = set(stat.released)
    return [Distrib(name, v) for v in stat.versions if v not in released]


class UnreleasedBrowsersSelector(Selector):
    """``unreleased versions`` of every browser."""

    regex = pattern(r"unreleased\s+versions")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        result: List[Distrib] = []
        for key in get_browsers():
            lookup = get_browser_stat(key, opts.mobile_to_desktop)
            if lookup is not None:
                result.extend(_unreleased(*lookup))
        return result


class UnreleasedXBrowsersSelector(Selector):
    """``unreleased <browser> versions``."""

    regex = pattern(r"unreleased\s+(\w+)\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        return _unreleased(*require_browser(match.group(1), opts))
