"""Node.js release list, release schedule and local Node.js detection."""
from __future__ import annotations

import logging
import shutil
import subprocess
import threading
from typing import Optional, Tuple

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from versioning.errors import CurrentNodeUnavailable
from versioning.models import NodeRelease, NodeSchedule

from .store import cached, load_json, parse_day

logger = logging.getLogger(__name__)

# Detected once per process; the Node.js binary on PATH does not change under us.
_current_node: Optional[str] = None
_current_node_lock = threading.Lock()


def _build_releases() -> Tuple[NodeRelease, ...]:
    return tuple(
        NodeRelease(version=item["version"], date=parse_day(item["date"]))
        for item in load_json("node_releases.json")
    )


def _build_schedule() -> Tuple[NodeSchedule, ...]:
    return tuple(
        NodeSchedule(major=item["major"], start=parse_day(item["start"]), end=parse_day(item["end"]))
        for item in load_json("node_schedule.json")
    )


def get_node_releases() -> Tuple[NodeRelease, ...]:
    """Return all bundled Node.js releases, oldest first."""
    return cached("node.releases", _build_releases)


def get_node_versions() -> Tuple[str, ...]:
    """Return the version strings of all bundled Node.js releases, oldest first."""
    return cached("node.versions", lambda: tuple(r.version for r in get_node_releases()))


def get_node_schedule() -> Tuple[NodeSchedule, ...]:
    """Return the support windows of all Node.js release lines."""
    return cached("node.schedule", _build_schedule)


def release_line(version: str) -> str:
    """Return the release line of a Node.js version (``0.10`` or ``18``)."""
    parts = version.split(".")
    if parts[0] == "0" and len(parts) > 1:
        return f"0.{parts[1]}"
    return parts[0]


def _probe_node_version() -> str:
    binary = shutil.which("node")
    if binary is None:
        raise CurrentNodeUnavailable("node executable not found on PATH")
    try:
        result = subprocess.run(
            [binary, "--version"],
            capture_output=True,
            text=True,
            timeout=Constants.NODE_PROBE_TIMEOUT,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise CurrentNodeUnavailable(str(exc)) from exc
    output = result.stdout.strip()
    if result.returncode != 0 or not output:
        raise CurrentNodeUnavailable(f"`node --version` exited with {result.returncode}")
    return output.lstrip("v")


def current_node_version() -> str:
    """Return the version of the Node.js binary on PATH (without the ``v``)."""
    global _current_node  # pylint: disable=global-statement
    with _current_node_lock:
        if _current_node is None:
            _current_node = _probe_node_version()
            if is_debug_enabled(logger):
                logger.debug(
                    "Detected Node.js",
                    extra=extra_context(
                        event="probe", component="data", action="current_node", target=_current_node
                    ),
                )
        return _current_node
