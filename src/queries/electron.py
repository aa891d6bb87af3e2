"""Electron selectors. Results are reported as the matching Chrome versions."""

from __future__ import annotations

from typing import List, Match

from data.electron import find_chromium, get_electron_versions, is_known_electron
from versioning.compare import compare_loose
from versioning.errors import UnknownElectronVersion
from versioning.models import Distrib, Opts

from .base import COUNT, NUMBER, Selector, parse_count, pattern, satisfies
from .last_versions import last_major_released, last_released


def _as_chrome(electron_versions) -> List[Distrib]:
    chromium = dict(get_electron_versions())
    return [Distrib("chrome", chromium[version]) for version in electron_versions]


def _electron_keys() -> List[str]:
    return [electron for electron, _ in get_electron_versions()]


class LastNElectronMajorSelector(Selector):
    """``last N electron major versions``."""

    regex = pattern(r"last\s+" + COUNT + r"\s+electron\s+major\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        count = parse_count(match.group(1))
        return _as_chrome(last_major_released(_electron_keys(), count))


class LastNElectronSelector(Selector):
    """``last N electron versions``."""

    regex = pattern(r"last\s+" + COUNT + r"\s+electron\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        count = parse_count(match.group(1))
        return _as_chrome(last_released(_electron_keys(), count))


class UnreleasedElectronSelector(Selector):
    """``unreleased electron versions``: the bundled map only holds releases."""

    regex = pattern(r"unreleased\s+electron\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        return []


class ElectronBoundedRangeSelector(Selector):
    """``electron A - B``, inclusive on both ends."""

    regex = pattern(r"electron\s+" + NUMBER + r"\s*-\s*" + NUMBER)

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        low, high = match.group(1), match.group(2)
        for bound in (low, high):
            if not is_known_electron(bound):
                raise UnknownElectronVersion(bound)
        selected = [
            electron
            for electron in _electron_keys()
            if compare_loose(electron, low) <= 0 and compare_loose(electron, high) >= 0
        ]
        return _as_chrome(selected)


class ElectronUnboundedRangeSelector(Selector):
    """``electron >= V`` and the other comparison signs."""

    regex = pattern(r"electron\s*(>=?|<=?)\s*" + NUMBER)

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        sign, version = match.group(1), match.group(2)
        selected = [
            electron
            for electron in _electron_keys()
            if satisfies(sign, compare_loose(electron, version))
        ]
        return _as_chrome(selected)


class ElectronAccurateSelector(Selector):
    """``electron V``."""

    regex = pattern(r"electron\s+" + NUMBER)

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        version = match.group(1)
        chromium = find_chromium(version)
        if chromium is None:
            raise UnknownElectronVersion(version)
        return [Distrib("chrome", chromium)]
