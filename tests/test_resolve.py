"""Tests for combining clauses into the final result."""

import pytest

from constants import Constants
from versioning.errors import BrowserslistError, BrowserNotFound, UnknownQuery
from versioning.models import Distrib, Opts
from versioning.service import resolve, resolve_to_strings


class TestCombination:
    """OR / AND / NOT folding."""

    @pytest.mark.parametrize("query", ["ie 11", "last 2 versions", "> 1%", "dead"])
    def test_query_minus_itself_is_empty(self, query):
        assert resolve([query, f"not {query}"]) == []

    def test_negation_inside_one_query(self):
        assert resolve("ie >= 10, not ie 10") == [Distrib("ie", "11")]

    def test_and_intersects(self):
        left = set(resolve("last 2 versions"))
        right = set(resolve("> 1%"))
        combined = resolve("last 2 versions and > 1%")
        assert set(combined) == left & right
        assert combined

    def test_and_not(self):
        assert resolve("ie >= 9 and not ie 10") == [Distrib("ie", "11"), Distrib("ie", "9")]

    def test_or_is_idempotent(self):
        assert resolve("ie 11, ie 11") == resolve("ie 11")
        assert resolve("last 2 versions or last 2 versions") == resolve("last 2 versions")

    def test_or_keyword_matches_list(self):
        assert resolve("ie 11 or ie 10") == resolve(["ie 11", "ie 10"])

    def test_leading_negation_removes_nothing(self):
        assert resolve("not ie 11") == []

    def test_keywords_case_insensitive(self):
        assert resolve("LAST 2 IE VERSIONS") == resolve("last 2 ie versions")

    def test_defaults_shortcut(self):
        assert resolve("defaults") == resolve(Constants.DEFAULT_QUERIES)

    def test_empty_input(self):
        assert resolve([]) == []
        assert resolve("") == []


class TestResultShape:
    """Sorting, deduplication and rendering."""

    def test_sorted_and_unique(self):
        result = resolve("last 2 versions, > 0.5%, ie 11, ie 11")
        assert len(result) == len(set(result))
        names = [d.name for d in result]
        assert names == sorted(names)

    def test_fresh_list_per_call(self):
        first = resolve("ie 11")
        second = resolve("ie 11")
        assert first == second
        assert first is not second

    def test_resolve_to_strings(self):
        assert resolve_to_strings("ie <= 6") == ["ie 6", "ie 5.5"]

    def test_default_opts(self):
        assert resolve("ie 11", None) == resolve("ie 11", Opts())


class TestErrors:
    """Error propagation."""

    def test_error_aborts_whole_query(self):
        with pytest.raises(UnknownQuery):
            resolve("ie 11, wat")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            resolve("yuru 1.0")

    def test_error_equality(self):
        assert BrowserNotFound("yuru") == BrowserNotFound("yuru")
        assert BrowserNotFound("yuru") != BrowserNotFound("other")
        assert BrowserNotFound("yuru") != UnknownQuery("yuru")
        assert isinstance(BrowserNotFound("yuru"), BrowserslistError)
