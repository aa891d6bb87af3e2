"""Fixed-answer selectors and the query shortcuts."""

from __future__ import annotations

from typing import List, Match

from constants import Constants
from versioning.models import Distrib, Opts

from .base import Selector, pattern


class FirefoxESRSelector(Selector):
    """``firefox esr``: the currently supported extended support releases."""

    regex = pattern(r"(?:firefox|fx|ff)\s+esr")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        return [Distrib("firefox", version) for version in Constants.FIREFOX_ESR_VERSIONS]


class OperaMiniSelector(Selector):
    regex = pattern(r"(?:operamini|op_mini)\s+all")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        return [Distrib("op_mini", "all")]


class PhantomSelector(Selector):
    """``phantomjs 1.9`` and ``phantomjs 2.1`` map to the Safari they embed."""

    regex = pattern(r"phantomjs\s+(1\.9|2\.1)")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        return [Distrib("safari", Constants.PHANTOM_VERSIONS[match.group(1)])]


class DefaultsSelector(Selector):
    """``defaults``: shorthand for the default query list."""

    regex = pattern(r"defaults")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        from versioning.service import resolve  # pylint: disable=import-outside-toplevel
        return resolve(Constants.DEFAULT_QUERIES, opts)


class DeadSelector(Selector):
    """``dead``: browsers without official support or updates."""

    regex = pattern(r"dead")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        from versioning.service import resolve  # pylint: disable=import-outside-toplevel
        return resolve(Constants.DEAD_QUERIES, opts)
