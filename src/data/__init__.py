"""Bundled compatibility datasets.

Browser stats and usage (``caniuse``), the Electron to Chromium map
(``electron``) and Node.js releases (``node``). All tables are read-only once
loaded.
"""

from .caniuse import get_browser_stat, get_browsers, get_usage, get_version_aliases
from .electron import get_electron_versions
from .node import get_node_releases, get_node_schedule, get_node_versions

__all__ = [
    "get_browser_stat",
    "get_browsers",
    "get_usage",
    "get_version_aliases",
    "get_electron_versions",
    "get_node_releases",
    "get_node_schedule",
    "get_node_versions",
]
