"""Compute-once storage for the bundled dataset tables.

Tables are parsed from the JSON snapshots shipped next to this module the
first time they are requested and then served from a module-level cache.
The cache is guarded by a re-entrant lock: derived tables are built from
other tables while the lock is held, and query resolution may recurse.
"""
from __future__ import annotations

import calendar
import json
import logging
import os
import threading
from datetime import datetime
from typing import Any, Callable, Dict, TypeVar

from common.logging_utils import extra_context, is_debug_enabled, Timer

logger = logging.getLogger(__name__)

T = TypeVar("T")

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "json")

# Populated once per key; entries are never replaced or mutated afterwards.
_table_cache: Dict[str, Any] = {}
_table_cache_lock = threading.RLock()


def cached(key: str, builder: Callable[[], T]) -> T:
    """Return the table stored under ``key``, building it on first use."""
    value = _table_cache.get(key)
    if value is not None:
        return value
    with _table_cache_lock:
        value = _table_cache.get(key)
        if value is None:
            with Timer() as timer:
                value = builder()
            if is_debug_enabled(logger):
                logger.debug(
                    "Dataset table initialized",
                    extra=extra_context(
                        event="table_init",
                        component="data",
                        action="build",
                        target=key,
                        duration_ms=timer.duration_ms(),
                    ),
                )
            _table_cache[key] = value
        return value


def load_json(file_name: str) -> Any:
    """Read one of the bundled JSON snapshots."""
    path = os.path.join(DATA_DIR, file_name)
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def parse_day(text: str) -> int:
    """Convert a ``YYYY-MM-DD`` day to epoch seconds at UTC midnight."""
    return calendar.timegm(datetime.strptime(text, "%Y-%m-%d").timetuple())
