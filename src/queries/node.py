"""Node.js selectors."""

from __future__ import annotations

import time
from typing import List, Match, Optional

import semantic_version

from data.node import current_node_version, get_node_schedule, get_node_versions, release_line
from versioning.compare import compare_loose
from versioning.errors import UnknownNodeVersion
from versioning.models import Distrib, Opts

from .base import COUNT, NUMBER, Selector, parse_count, pattern, satisfies
from .last_versions import last_major_released, last_released


def _is_prefix(prefix: str, version: str) -> bool:
    wanted = prefix.split(".")
    return version.split(".")[: len(wanted)] == wanted


def newest_release(prefix: str) -> Optional[str]:
    """Return the newest bundled release whose leading segments equal ``prefix``."""
    matches = [v for v in get_node_versions() if _is_prefix(prefix, v)]
    if not matches:
        return None
    return str(max(semantic_version.Version.coerce(v) for v in matches))


def _as_node(versions) -> List[Distrib]:
    return [Distrib("node", version) for version in versions]


class LastNNodeMajorSelector(Selector):
    """``last N node major versions``."""

    regex = pattern(r"last\s+" + COUNT + r"\s+node\s+major\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        count = parse_count(match.group(1))
        return _as_node(last_major_released(get_node_versions(), count))


class LastNNodeSelector(Selector):
    """``last N node versions``."""

    regex = pattern(r"last\s+" + COUNT + r"\s+node\s+versions?")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        count = parse_count(match.group(1))
        return _as_node(last_released(get_node_versions(), count))


class NodeBoundedRangeSelector(Selector):
    """``node A - B``, inclusive, compared on major.minor."""

    regex = pattern(r"node\s+" + NUMBER + r"\s*-\s*" + NUMBER)

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        low, high = match.group(1), match.group(2)
        return _as_node(
            v for v in get_node_versions()
            if compare_loose(v, low) <= 0 and compare_loose(v, high) >= 0
        )


class NodeUnboundedRangeSelector(Selector):
    """``node >= V`` and the other comparison signs."""

    regex = pattern(r"node\s*(>=?|<=?)\s*" + NUMBER)

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        sign, version = match.group(1), match.group(2)
        return _as_node(v for v in get_node_versions() if satisfies(sign, compare_loose(v, version)))


class NodeAccurateSelector(Selector):
    """``node 18``, ``node 18.2`` or ``node 18.2.0``: the newest matching release."""

    regex = pattern(r"node\s+(\d+(?:\.\d+)?(?:\.\d+)?)")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        version = match.group(1)
        found = newest_release(version)
        if found is None:
            if opts.ignore_unknown_versions:
                return []
            raise UnknownNodeVersion(version)
        return [Distrib("node", found)]


class CurrentNodeSelector(Selector):
    """``current node``: the Node.js found on PATH."""

    regex = pattern(r"current\s+node")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        return [Distrib("node", current_node_version())]


class MaintainedNodeSelector(Selector):
    """``maintained node versions``: newest release of every supported line."""

    regex = pattern(r"maintained\s+node\s+versions")

    def resolve(self, match: Match[str], opts: Opts) -> List[Distrib]:
        now = time.time()
        result: List[Distrib] = []
        for line in get_node_schedule():
            if not line.start < now < line.end:
                continue
            found = newest_release(line.major)
            if found is not None and release_line(found) == line.major:
                result.append(Distrib("node", found))
        return result
