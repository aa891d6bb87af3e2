"""Query resolution: combine selector results into the final target list."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Union

from cli_config import load_config
from common.logging_utils import extra_context, is_debug_enabled, Timer
from queries import query

from .compare import sort_and_dedup
from .models import Distrib, Opts, ParsedQuery, QueryKind
from .parser import parse, strip_negation

logger = logging.getLogger(__name__)

Queries = Union[str, Sequence[str]]


def _parse_all(queries: Queries) -> List[ParsedQuery]:
    if isinstance(queries, str):
        queries = [queries]
    clauses: List[ParsedQuery] = []
    for item in queries:
        clauses.extend(parse(item))
    return clauses


def _fold(clauses: Iterable[ParsedQuery], opts: Opts) -> List[Distrib]:
    result: List[Distrib] = []
    for clause in clauses:
        negated, text = strip_negation(clause.text)
        selected = query(text, opts)
        if negated:
            excluded = set(selected)
            result = [d for d in result if d not in excluded]
        elif clause.kind is QueryKind.AND:
            kept = set(selected)
            result = [d for d in result if d in kept]
        else:
            result.extend(selected)
    return result


def resolve(queries: Queries, opts: Optional[Opts] = None) -> List[Distrib]:
    """Resolve browser queries to a sorted, deduplicated list of targets.

    Clauses of all queries are folded left to right into one running result:
    ``or`` (or a new query) adds, ``and`` intersects, ``not`` removes.

    Args:
        queries: A query string or a sequence of query strings.
        opts: Resolution options; defaults to ``Opts()``.

    Returns:
        Distributions sorted by name, then version newest first.

    Raises:
        BrowserslistError: Any clause fails to resolve.
    """
    opts = opts or Opts()
    clauses = _parse_all(queries)
    with Timer() as timer:
        result = sort_and_dedup(_fold(clauses, opts))
    if is_debug_enabled(logger):
        logger.debug(
            "Queries resolved",
            extra=extra_context(
                event="resolve",
                component="versioning",
                action="resolve",
                target=len(clauses),
                outcome=len(result),
                duration_ms=timer.duration_ms(),
            ),
        )
    return result


def resolve_to_strings(queries: Queries, opts: Optional[Opts] = None) -> List[str]:
    """Same as ``resolve`` but rendered as ``"name version"`` strings."""
    return [str(distrib) for distrib in resolve(queries, opts)]


def execute(opts: Optional[Opts] = None) -> List[Distrib]:
    """Resolve the queries configured for ``opts.path``.

    Queries come from the environment or the nearest browserslist config (see
    ``cli_config.load_config``), falling back to ``defaults``.
    """
    opts = opts or Opts()
    return resolve(load_config(opts), opts)
