"""Centralized logging helpers.

Provides a single place to configure the root logger and small helpers for
emitting structured DEBUG records (``extra=extra_context(...)``) without
paying the formatting cost when DEBUG is disabled.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from constants import Constants

_CONTEXT_KEYS = ("event", "component", "action", "outcome", "target", "duration_ms")


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger.

    The level comes from ``level`` or the ``BROWSERSLIST_LOG_LEVEL``
    environment variable and defaults to INFO. Calling this more than once
    replaces the handlers installed by a previous call.

    Args:
        level: Optional level name (DEBUG, INFO, ...).
        log_file: Optional path of a log file to write in addition to stderr.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_browserslist_handler", False):
            root.removeHandler(handler)

    formatter = logging.Formatter(Constants.LOG_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    stream._browserslist_handler = True  # type: ignore[attr-defined]
    root.addHandler(stream)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler._browserslist_handler = True  # type: ignore[attr-defined]
        root.addHandler(file_handler)

    root.setLevel(level_value)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records of ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**kwargs: Any) -> Dict[str, Any]:
    """Build the ``extra`` mapping for a structured log record.

    Extra keyword arguments that are ``None`` are dropped. The standard context
    keys are always present and default to ``None`` when not supplied.
    """
    context = {key: value for key, value in kwargs.items() if value is not None}
    for key in _CONTEXT_KEYS:
        context.setdefault(key, None)
    return context


class Timer:
    """Context manager measuring wall time in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> float:
        """Return elapsed milliseconds (running total while inside the block)."""
        end = self._end if self._end is not None else time.perf_counter()
        return round((end - self._start) * 1000, 3)
