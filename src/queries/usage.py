"""Selectors over the global usage table."""

from __future__ import annotations

from typing import List, Match

from data.caniuse import get_usage
from versioning.models import Distrib, Opts

from .base import NUMBER, Selector, compare_sign, parse_percentage, pattern


class PercentageSelector(Selector):
    """``> 0.5%``, ``>= 1%``, ``< 5%``, ``<= 5%``."""

    regex = pattern(r"([<>]=?)\s*" + NUMBER + r"%")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        sign = match.group(1)
        popularity = parse_percentage(match.group(2))
        result: List[Distrib] = []
        for entry in get_usage():
            if compare_sign(sign, entry.usage, popularity):
                result.append(Distrib(entry.name, entry.version))
        return result


class CoverSelector(Selector):
    """``cover 99.5%``: the most used versions that together reach the target.

    The running total is checked before each entry is added, so the entry
    that crosses the target is still included. The walk also stops at the
    first entry with no usage at all.
    """

    regex = pattern(r"cover\s+" + NUMBER + r"%")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        coverage = parse_percentage(match.group(1))
        result: List[Distrib] = []
        total = 0.0
        for entry in get_usage():
            if total >= coverage or entry.usage == 0:
                break
            result.append(Distrib(entry.name, entry.version))
            total += entry.usage
        return result
