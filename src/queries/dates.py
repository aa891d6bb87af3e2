"""Selectors filtering by release date."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import List, Match

from data.caniuse import get_browser_stat, get_browsers
from versioning.errors import InvalidDate, ParseYears
from versioning.models import Distrib, Opts

from .base import NUMBER, Selector, pattern

SECONDS_PER_YEAR = 365.25 * 24 * 60 * 60


def released_since(timestamp: float, opts: Opts) -> List[Distrib]:
    """Every browser version with a known release date at or after ``timestamp``."""
    result: List[Distrib] = []
    for key in get_browsers():
        lookup = get_browser_stat(key, opts.mobile_to_desktop)
        if lookup is None:
            continue
        name, stat = lookup
        for version in stat.versions:
            date = stat.release_date.get(version)
            if date is not None and date >= timestamp:
                result.append(Distrib(name, version))
    return result


class YearsSelector(Selector):
    """``last 2 years`` (fractions allowed)."""

    regex = pattern(r"last\s+" + NUMBER + r"\s+years?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        text = match.group(1)
        try:
            years = float(text)
        except ValueError as exc:
            raise ParseYears(text) from exc
        return released_since(time.time() - years * SECONDS_PER_YEAR, opts)


class SinceSelector(Selector):
    """``since 2017``, ``since 2017-02`` or ``since 2017-02-15`` (UTC)."""

    regex = pattern(r"since\s+((\d+)(?:-(\d+)(?:-(\d+))?)?)")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        text = match.group(1)
        year = int(match.group(2))
        month = int(match.group(3)) if match.group(3) else 1
        day = int(match.group(4)) if match.group(4) else 1
        try:
            since = datetime(year, month, day, tzinfo=timezone.utc)
        except (ValueError, OverflowError) as exc:
            raise InvalidDate(text) from exc
        return released_since(since.timestamp(), opts)
