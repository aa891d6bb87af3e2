"""Electron to Chromium version map."""
from __future__ import annotations

from typing import Optional, Tuple

from versioning.compare import compare_loose

from .store import cached, load_json

# (electron major.minor, chromium major), oldest Electron first.
ElectronEntry = Tuple[str, str]


def _build_electron_versions() -> Tuple[ElectronEntry, ...]:
    return tuple((str(electron), str(chromium)) for electron, chromium in load_json("electron.json"))


def get_electron_versions() -> Tuple[ElectronEntry, ...]:
    """Return every known Electron release line with its Chromium version."""
    return cached("electron.versions", _build_electron_versions)


def find_chromium(version: str) -> Optional[str]:
    """Return the Chromium version of an Electron version, matching major.minor."""
    for electron, chromium in get_electron_versions():
        if compare_loose(electron, version) == 0:
            return chromium
    return None


def is_known_electron(version: str) -> bool:
    """True when ``version`` names a bundled Electron release line."""
    return find_chromium(version) is not None
