"""Tests for the query grammar parser."""

import pytest

from versioning.models import ParsedQuery, QueryKind
from versioning.parser import parse, split_groups, strip_negation


class TestParse:
    """Clause splitting and OR/AND tagging."""

    def test_comma_and_and(self):
        assert parse("> 1%, last 2 versions and not dead") == [
            ParsedQuery(QueryKind.OR, "> 1%"),
            ParsedQuery(QueryKind.OR, "last 2 versions"),
            ParsedQuery(QueryKind.AND, "not dead"),
        ]

    def test_or_keyword(self):
        assert [q.text for q in parse("ie 11 or ie 10")] == ["ie 11", "ie 10"]
        assert all(q.kind is QueryKind.OR for q in parse("ie 11 or ie 10"))

    def test_keywords_are_case_insensitive(self):
        clauses = parse("ie 11 OR chrome 100 AND chrome 100")
        assert [(q.kind, q.text) for q in clauses] == [
            (QueryKind.OR, "ie 11"),
            (QueryKind.OR, "chrome 100"),
            (QueryKind.AND, "chrome 100"),
        ]

    def test_empty_pieces_are_dropped(self):
        assert parse(" , ,ie 11, ") == [ParsedQuery(QueryKind.OR, "ie 11")]
        assert parse("") == []

    def test_words_containing_or_are_not_split(self):
        assert [q.text for q in parse("operamini all")] == ["operamini all"]
        assert [q.text for q in parse("cover 99%")] == ["cover 99%"]

    def test_split_groups_strips(self):
        assert split_groups("  a ,b  or   c ") == ["a", "b", "c"]


class TestStripNegation:
    """Leading ``not`` handling."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("not dead", (True, "dead")),
            ("NOT  ie 11", (True, "ie 11")),
            ("Not ie <= 8", (True, "ie <= 8")),
            ("dead", (False, "dead")),
            ("nothing 1", (False, "nothing 1")),
        ],
    )
    def test_cases(self, text, expected):
        assert strip_negation(text) == expected
