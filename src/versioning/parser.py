"""Query string parsing.

The grammar is two levels deep: a query is a list of OR groups (separated by
``or`` or a comma), each group a list of clauses separated by ``and``. There is
no nesting and no precedence beyond that.
"""

import re
from typing import List

from .models import ParsedQuery, QueryKind

_OR_SPLIT = re.compile(r"\s+or\s+|\s*,\s*", re.IGNORECASE)
_AND_SPLIT = re.compile(r"\s+and\s+", re.IGNORECASE)
_NOT_PREFIX = re.compile(r"^not\s+", re.IGNORECASE)


def split_groups(query: str) -> List[str]:
    """Return the OR groups of a query string, without empty pieces."""
    return [group.strip() for group in _OR_SPLIT.split(query) if group.strip()]


def parse(query: str) -> List[ParsedQuery]:
    """Parse a query string into a flat list of tagged clauses.

    The first clause of every OR group is tagged ``OR``, the following ones
    ``AND``.

    >>> [(q.kind.value, q.text) for q in parse("> 1%, last 2 versions and not dead")]
    [('or', '> 1%'), ('or', 'last 2 versions'), ('and', 'not dead')]
    """
    clauses: List[ParsedQuery] = []
    for group in split_groups(query):
        parts = [part.strip() for part in _AND_SPLIT.split(group) if part.strip()]
        for index, part in enumerate(parts):
            kind = QueryKind.OR if index == 0 else QueryKind.AND
            clauses.append(ParsedQuery(kind=kind, text=part))
    return clauses


def strip_negation(text: str):
    """Split a leading ``not`` off a clause.

    Returns:
        Tuple of (is_negated, remaining clause text).
    """
    match = _NOT_PREFIX.match(text)
    if match is None:
        return False, text
    return True, text[match.end():].strip()
