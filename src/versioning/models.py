"""Data models for browser targets and query resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple


class QueryKind(Enum):
    """How a parsed clause combines with the running result."""
    OR = "or"
    AND = "and"


@dataclass(frozen=True)
class ParsedQuery:
    """A single clause produced by the query parser."""
    kind: QueryKind
    text: str


@dataclass(frozen=True)
class Distrib:
    """A resolved browser (or ``node``) name and version.

    Equality is structural. There is no ordering here: results
    are sorted through ``versioning.compare`` only.
    """
    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.name} {self.version}"


@dataclass(frozen=True)
class BrowserStat:
    """Release history of one browser as bundled in the dataset."""
    name: str
    versions: Tuple[str, ...]
    released: Tuple[str, ...]
    release_date: Mapping[str, Optional[int]] = field(default_factory=dict)


@dataclass(frozen=True)
class UsageEntry:
    """Global usage share of one browser version, in percent."""
    name: str
    version: str
    usage: float


@dataclass(frozen=True)
class NodeRelease:
    """A single Node.js release and the day it shipped (epoch seconds)."""
    version: str
    date: int


@dataclass(frozen=True)
class NodeSchedule:
    """Support window of a Node.js release line (epoch seconds, inclusive)."""
    major: str
    start: int
    end: int


@dataclass
class Opts:
    """Resolution options.

    ``mobile_to_desktop`` and ``ignore_unknown_versions`` change how queries
    resolve; ``path``, ``env`` and ``config`` only affect where ``execute``
    reads its queries from.
    """
    mobile_to_desktop: bool = False
    ignore_unknown_versions: bool = False
    path: Optional[str] = None
    env: Optional[str] = None
    config: Optional[str] = None


# Type alias for the (canonical name, stat) pair returned by the data layer.
BrowserLookup = Tuple[str, BrowserStat]
