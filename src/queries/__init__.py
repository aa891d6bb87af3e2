"""Selector registry: maps one query clause to the distributions it names.

Selectors are tried in order and the first whose pattern matches the whole
clause wins, so more specific shapes must come before the general ones
(``last 2 node versions`` before ``last 2 <browser> versions``, ``node 18``
before ``<browser> 18``).
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from common.logging_utils import extra_context, is_debug_enabled
from data.caniuse import get_browser_stat
from versioning.errors import UnknownQuery, VersionRequired
from versioning.models import Distrib, Opts

from .base import Selector
from .browser_range import (
    BrowserAccurateSelector,
    BrowserBoundedRangeSelector,
    BrowserUnboundedRangeSelector,
)
from .dates import SinceSelector, YearsSelector
from .electron import (
    ElectronAccurateSelector,
    ElectronBoundedRangeSelector,
    ElectronUnboundedRangeSelector,
    LastNElectronMajorSelector,
    LastNElectronSelector,
    UnreleasedElectronSelector,
)
from .last_versions import (
    LastNBrowsersSelector,
    LastNMajorBrowsersSelector,
    LastNXBrowsersSelector,
    LastNXMajorBrowsersSelector,
)
from .node import (
    CurrentNodeSelector,
    LastNNodeMajorSelector,
    LastNNodeSelector,
    MaintainedNodeSelector,
    NodeAccurateSelector,
    NodeBoundedRangeSelector,
    NodeUnboundedRangeSelector,
)
from .special import (
    DeadSelector,
    DefaultsSelector,
    FirefoxESRSelector,
    OperaMiniSelector,
    PhantomSelector,
)
from .unreleased import UnreleasedBrowsersSelector, UnreleasedXBrowsersSelector
from .usage import CoverSelector, PercentageSelector

logger = logging.getLogger(__name__)

SELECTORS: Sequence[Selector] = (
    LastNMajorBrowsersSelector(),
    LastNBrowsersSelector(),
    LastNElectronMajorSelector(),
    LastNNodeMajorSelector(),
    LastNXMajorBrowsersSelector(),
    LastNElectronSelector(),
    LastNNodeSelector(),
    LastNXBrowsersSelector(),
    UnreleasedBrowsersSelector(),
    UnreleasedElectronSelector(),
    UnreleasedXBrowsersSelector(),
    YearsSelector(),
    SinceSelector(),
    PercentageSelector(),
    CoverSelector(),
    ElectronBoundedRangeSelector(),
    NodeBoundedRangeSelector(),
    BrowserBoundedRangeSelector(),
    ElectronUnboundedRangeSelector(),
    NodeUnboundedRangeSelector(),
    BrowserUnboundedRangeSelector(),
    FirefoxESRSelector(),
    OperaMiniSelector(),
    ElectronAccurateSelector(),
    NodeAccurateSelector(),
    CurrentNodeSelector(),
    MaintainedNodeSelector(),
    PhantomSelector(),
    BrowserAccurateSelector(),
    DefaultsSelector(),
    DeadSelector(),
)


def query(text: str, opts: Opts) -> List[Distrib]:
    """Resolve a single clause (without ``not``) to distributions.

    Args:
        text: The clause, e.g. ``last 2 chrome versions``.
        opts: Resolution options.

    Returns:
        Distributions in selector order; not sorted or deduplicated.

    Raises:
        VersionRequired: The clause is a bare browser name.
        UnknownQuery: No selector recognizes the clause.
    """
    for selector in SELECTORS:
        result = selector.select(text, opts)
        if result is None:
            continue
        if is_debug_enabled(logger):
            logger.debug(
                "Query clause resolved",
                extra=extra_context(
                    event="query_dispatch",
                    component="queries",
                    action="select",
                    target=text,
                    outcome=selector.name,
                ),
            )
        return result

    if _is_browser_name(text, opts):
        raise VersionRequired(text)
    raise UnknownQuery(text)


def _is_browser_name(text: str, opts: Opts) -> bool:
    return get_browser_stat(text, opts.mobile_to_desktop) is not None


__all__ = ["SELECTORS", "Selector", "query"]
