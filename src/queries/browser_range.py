"""Version selectors for a single named browser."""

from __future__ import annotations

from typing import List, Match, Optional

from data.caniuse import get_version_aliases
from versioning.compare import version_number
from versioning.errors import UnknownBrowserVersion
from versioning.models import BrowserStat, Distrib, Opts

from .base import NUMBER, Selector, compare_sign, pattern, require_browser


def resolve_version(stat: BrowserStat, version: str) -> Optional[str]:
    """Return ``version`` as it is spelled in the dataset, following range aliases."""
    if version in stat.versions:
        return version
    return get_version_aliases().get(stat.name, {}).get(version)


def normalize_version(stat: BrowserStat, version: str) -> Optional[str]:
    """Like ``resolve_version`` but any version matches a single-version browser."""
    resolved = resolve_version(stat, version)
    if resolved is None and len(stat.versions) == 1:
        return stat.versions[0]
    return resolved


def _bound(stat: BrowserStat, version: str) -> Optional[float]:
    return version_number(normalize_version(stat, version) or version)


class BrowserBoundedRangeSelector(Selector):
    """``<browser> A - B``, inclusive, compared as numbers."""

    regex = pattern(r"(\w+)\s+" + NUMBER + r"\s*-\s*" + NUMBER)

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        name, stat = require_browser(match.group(1), opts)
        low, high = _bound(stat, match.group(2)), _bound(stat, match.group(3))
        if low is None or high is None:
            return []
        result: List[Distrib] = []
        for version in stat.released:
            number = version_number(version)
            if number is not None and low <= number <= high:
                result.append(Distrib(name, version))
        return result


class BrowserUnboundedRangeSelector(Selector):
    """``<browser> >= V`` and the other comparison signs."""

    regex = pattern(r"(\w+)\s*(>=?|<=?)\s*" + NUMBER)

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        name, stat = require_browser(match.group(1), opts)
        sign = match.group(2)
        version = match.group(3)
        target = version_number(get_version_aliases().get(stat.name, {}).get(version, version))
        if target is None:
            return []
        result: List[Distrib] = []
        for candidate in stat.released:
            number = version_number(candidate)
            if number is None:
                continue
            if compare_sign(sign, number, target):
                result.append(Distrib(name, candidate))
        return result


class BrowserAccurateSelector(Selector):
    """``<browser> V`` or ``<browser> tp``."""

    regex = pattern(r"(\w+)\s+(tp|[\d.]+)")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        typed_name, typed_version = match.group(1), match.group(2)
        name, stat = require_browser(typed_name, opts)
        version = "TP" if typed_version.lower() == "tp" else typed_version

        found = normalize_version(stat, version)
        if found is None:
            if "." in version:
                alternative = version[:-2] if version.endswith(".0") else version
            else:
                alternative = version + ".0"
            found = normalize_version(stat, alternative)
        if found is None:
            if opts.ignore_unknown_versions:
                return []
            raise UnknownBrowserVersion(typed_name, typed_version)
        return [Distrib(name, found)]
