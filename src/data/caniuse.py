"""Browser statistics: release history, usage share and name aliases.

The raw tables come from the bundled ``browsers.json`` snapshot. Two derived
stats exist for the mobile-to-desktop option: Android with its evergreen
releases replaced by Chrome's, and Opera with the ``10.0-10.1`` bucket
renamed so it lines up with Opera Mobile.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from constants import Constants
from versioning.models import BrowserLookup, BrowserStat, UsageEntry

from .store import cached, load_json

ANDROID_EVERGREEN_FIRST = Constants.ANDROID_EVERGREEN_FIRST

_NON_DESKTOP_ANDROID = re.compile(r"^(?:[2-4]\.|[34]$)")

BROWSER_ALIASES = {
    "fx": "firefox",
    "ff": "firefox",
    "ios": "ios_saf",
    "explorer": "ie",
    "blackberry": "bb",
    "explorermobile": "ie_mob",
    "operamini": "op_mini",
    "operamobile": "op_mob",
    "chromeandroid": "and_chr",
    "firefoxandroid": "and_ff",
    "ucandroid": "and_uc",
    "qqandroid": "and_qq",
}

DESKTOP_NAMES = {
    "and_chr": "chrome",
    "and_ff": "firefox",
    "ie_mob": "ie",
    "op_mob": "opera",
    "android": "chrome",
}


def _build_browsers() -> Mapping[str, BrowserStat]:
    raw = load_json("browsers.json")
    browsers: Dict[str, BrowserStat] = {}
    for key, entry in raw.items():
        browsers[key] = BrowserStat(
            name=entry["name"],
            versions=tuple(entry["versions"]),
            released=tuple(entry["released"]),
            release_date=MappingProxyType(dict(entry["release_date"])),
        )
    return MappingProxyType(browsers)


def _build_usage() -> Tuple[UsageEntry, ...]:
    raw = load_json("browsers.json")
    entries: List[UsageEntry] = []
    for key, entry in raw.items():
        usage_global = entry.get("usage_global", {})
        for version in entry["versions"]:
            entries.append(UsageEntry(key, version, float(usage_global.get(version) or 0)))
    # stable: ties keep dataset order
    entries.sort(key=lambda item: item.usage, reverse=True)
    return tuple(entries)


def _build_version_aliases() -> Mapping[str, Mapping[str, str]]:
    aliases: Dict[str, Mapping[str, str]] = {}
    for name, stat in get_browsers().items():
        table: Dict[str, str] = {}
        for version in stat.versions:
            if "-" not in version:
                continue
            for part in version.split("-"):
                table[part] = version
        aliases[name] = MappingProxyType(table)
    return MappingProxyType(aliases)


def _build_android_to_desktop() -> BrowserStat:
    browsers = get_browsers()
    chrome = browsers["chrome"]
    android = browsers["android"]
    first = str(ANDROID_EVERGREEN_FIRST)

    def normalize(android_versions, chrome_versions):
        kept = [v for v in android_versions if _NON_DESKTOP_ANDROID.match(v)]
        return tuple(kept + list(chrome_versions[chrome_versions.index(first):]))

    released = normalize(android.released, chrome.released)
    versions = normalize(android.versions, chrome.versions)
    release_date = {}
    for version in versions:
        if version in android.release_date and _NON_DESKTOP_ANDROID.match(version):
            release_date[version] = android.release_date[version]
        else:
            release_date[version] = chrome.release_date.get(version)
    return BrowserStat(
        name=android.name,
        versions=versions,
        released=released,
        release_date=MappingProxyType(release_date),
    )


def _build_opera_mobile_to_desktop() -> BrowserStat:
    opera = get_browsers()["opera"]
    bucket, renamed = "10.0-10.1", "10"

    def rename(version):
        return renamed if version == bucket else version

    release_date = {rename(k): v for k, v in opera.release_date.items()}
    return BrowserStat(
        name=opera.name,
        versions=tuple(rename(v) for v in opera.versions),
        released=tuple(rename(v) for v in opera.released),
        release_date=MappingProxyType(release_date),
    )


def get_browsers() -> Mapping[str, BrowserStat]:
    """Return the browser stat table keyed by canonical name."""
    return cached("caniuse.browsers", _build_browsers)


def get_usage() -> Tuple[UsageEntry, ...]:
    """Return the global usage table sorted by usage, biggest first."""
    return cached("caniuse.usage", _build_usage)


def get_version_aliases() -> Mapping[str, Mapping[str, str]]:
    """Return per-browser version aliases (range endpoints to range version)."""
    return cached("caniuse.version_aliases", _build_version_aliases)


def android_to_desktop() -> BrowserStat:
    """Android stat with evergreen releases taken from Chrome."""
    return cached("caniuse.android_to_desktop", _build_android_to_desktop)


def opera_mobile_to_desktop() -> BrowserStat:
    """Opera stat with the ``10.0-10.1`` bucket renamed to ``10``."""
    return cached("caniuse.opera_mobile_to_desktop", _build_opera_mobile_to_desktop)


def normalize_name(name: str) -> str:
    """Lowercase (when needed) and resolve a colloquial browser name."""
    if not (name.isascii() and name.islower()):
        name = name.lower()
    return get_browser_alias(name)


def get_browser_alias(name: str) -> str:
    """Map a short or colloquial name to the dataset key."""
    return BROWSER_ALIASES.get(name, name)


def to_desktop_name(name: str) -> Optional[str]:
    """Return the desktop counterpart of a mobile browser, if there is one."""
    return DESKTOP_NAMES.get(name)


def get_browser_stat(name: str, mobile_to_desktop: bool) -> Optional[BrowserLookup]:
    """Look up a browser by any of its names.

    Args:
        name: Browser name as typed in a query (any case, aliases allowed).
        mobile_to_desktop: Substitute desktop release history for mobile
            browsers that have a desktop counterpart.

    Returns:
        Tuple of (canonical name, stat) or None if the browser is unknown.
    """
    name = normalize_name(name)
    browsers = get_browsers()

    if mobile_to_desktop:
        desktop_name = to_desktop_name(name)
        if desktop_name is not None:
            if name == "android":
                return name, android_to_desktop()
            if name == "op_mob":
                return name, opera_mobile_to_desktop()
            stat = browsers.get(desktop_name)
            return (name, stat) if stat is not None else None

    stat = browsers.get(name)
    if stat is None:
        return None
    return name, stat


def should_filter_android(name: str, mobile_to_desktop: bool) -> bool:
    """True when ``last N`` counts for Android need adjusting."""
    return name == "android" and not mobile_to_desktop


def count_android_filter(count: int, mobile_to_desktop: bool) -> int:
    """Adjust a ``last N`` count for Android.

    The raw dataset buckets every evergreen Android release as one version, so
    "last N" normally means only that single newest entry. When N reaches back
    past the evergreen cutoff the count grows by the difference.
    """
    lookup = get_browser_stat("android", mobile_to_desktop)
    released = lookup[1].released if lookup else ()
    if not released:
        return count
    diff = int(float(released[-1]) - ANDROID_EVERGREEN_FIRST - count)
    if diff > 0:
        return 1
    return 1 - diff
