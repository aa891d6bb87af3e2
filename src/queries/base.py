"""Base class for query selectors."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import List, Match, Optional, Pattern

from data.caniuse import get_browser_stat
from versioning.errors import BrowserNotFound, ParsePercentage, ParseVersionsCount
from versioning.models import BrowserLookup, Distrib, Opts


# Numeric captures take any run of digits and dots; the parse helpers below
# reject malformed values.
COUNT = r"([\d.]+)"
NUMBER = r"([\d.]+)"


def pattern(expression: str) -> Pattern[str]:
    """Compile a selector pattern (anchored by ``fullmatch``, case-insensitive)."""
    return re.compile(expression, re.IGNORECASE | re.ASCII)


class Selector(ABC):
    """One clause shape of the query language.

    Subclasses set ``regex`` and implement ``resolve``. ``select`` returns None
    when the clause is not of this shape, so the registry can try the next
    selector.
    """

    regex: Pattern[str]

    @property
    def name(self) -> str:
        """Selector name used in logs."""
        return type(self).__name__

    def select(self, text: str, opts: Opts) -> Optional[List[Distrib]]:
        """Resolve ``text`` if it matches this selector, else return None."""
        match = self.regex.fullmatch(text)
        if match is None:
            return None
        return self.resolve(match, opts)

    @abstractmethod
    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        """Produce the distributions for a matched clause."""


def parse_count(text: str) -> int:
    """Parse a ``last N`` count."""
    try:
        return int(text)
    except ValueError as exc:
        raise ParseVersionsCount(text) from exc


def parse_percentage(text: str) -> float:
    """Parse the number in front of a ``%`` sign."""
    try:
        return float(text)
    except ValueError as exc:
        raise ParsePercentage(text) from exc


def satisfies(sign: str, order: int) -> bool:
    """Apply a ``>``/``>=``/``<``/``<=`` sign to a descending comparator result.

    ``order`` is ``compare(candidate, target)``: negative when the candidate
    is the bigger version.
    """
    if sign == ">":
        return order < 0
    if sign == ">=":
        return order <= 0
    if sign == "<":
        return order > 0
    return order >= 0


def compare_sign(sign: str, left: float, right: float) -> bool:
    """Apply a ``>``/``>=``/``<``/``<=`` sign to two numbers."""
    if sign == ">":
        return left > right
    if sign == ">=":
        return left >= right
    if sign == "<":
        return left < right
    return left <= right


def require_browser(name: str, opts: Opts) -> BrowserLookup:
    """Look up a browser or raise ``BrowserNotFound``."""
    lookup = get_browser_stat(name, opts.mobile_to_desktop)
    if lookup is None:
        raise BrowserNotFound(name)
    return lookup
