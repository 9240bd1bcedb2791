"""Tests for the matching strategies."""

import pytest
from textual.fuzzy import Matcher as TextualFuzzyMatcher

from shuttle.exceptions import ConfigurationError
from shuttle.matchers import FuzzyMatcher, Matcher, SimpleMatcher, get_matcher
from shuttle.models import Item


def labels(items):
    return [item.label for item in items]


class TestSimpleMatcher:
    def test_substring_query(self, example_items):
        result = SimpleMatcher().matches("al", example_items)
        assert labels(result) == ["alpha/one", "alpha/three"]

    def test_all_tokens_must_match(self, example_items):
        result = SimpleMatcher().matches("alpha t", example_items)
        assert labels(result) == ["alpha/three"]

    def test_tokens_match_in_any_order(self, example_items):
        result = SimpleMatcher().matches("three alpha", example_items)
        assert labels(result) == ["alpha/three"]

    def test_query_is_case_insensitive(self, example_items):
        result = SimpleMatcher().matches("BETA", example_items)
        assert labels(result) == ["beta/two"]

    @pytest.mark.parametrize("query", ["", "   "])
    def test_empty_query_returns_everything_in_order(self, example_items, query):
        assert SimpleMatcher().matches(query, example_items) == example_items

    def test_no_match(self, example_items):
        assert SimpleMatcher().matches("gamma", example_items) == []

    def test_returns_same_objects_in_input_order(self, url_items):
        result = SimpleMatcher().matches("acme", url_items)
        assert all(any(r is i for i in url_items) for r in result)
        positions = [next(n for n, i in enumerate(url_items) if i is r) for r in result]
        assert positions == sorted(positions)

    def test_every_result_contains_every_token(self, url_items):
        query = "acme api"
        for item in SimpleMatcher().matches(query, url_items):
            assert all(token in item.haystack for token in query.split())


class TestFuzzyMatcher:
    def test_excludes_items_without_match(self, example_items):
        result = FuzzyMatcher().matches("al", example_items)
        assert set(labels(result)) == {"alpha/one", "alpha/three"}

    def test_sorted_by_non_increasing_score(self, url_items):
        result = FuzzyMatcher().matches("api", url_items)
        assert result
        fuzzy = TextualFuzzyMatcher("api")
        scores = [fuzzy.match(item.haystack) for item in result]
        assert all(score > 0 for score in scores)
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self):
        items = [
            Item(value=f"https://x/{n}", label=f"copy {n}", haystack="same name")
            for n in range(5)
        ]
        result = FuzzyMatcher().matches("same", items)
        assert result == items
        assert [i.value for i in result] == [i.value for i in items]

    def test_subsequence_match(self):
        item = Item.create(label="web-frontend", value="https://x/web-frontend")
        assert FuzzyMatcher().matches("wfe", [item]) == [item]

    def test_query_is_case_insensitive(self, example_items):
        assert FuzzyMatcher().matches("BETA", example_items) == [example_items[1]]

    def test_empty_query_returns_everything_in_order(self, example_items):
        assert FuzzyMatcher().matches("", example_items) == example_items

    def test_no_match(self, example_items):
        assert FuzzyMatcher().matches("zzz", example_items) == []

    def test_deterministic(self, url_items):
        matcher = FuzzyMatcher()
        assert matcher.matches("ac", url_items) == matcher.matches("ac", url_items)


class TestMatcherRegistry:
    @pytest.mark.parametrize("name,cls", [("simple", SimpleMatcher), ("fuzzy", FuzzyMatcher), ("FUZZY", FuzzyMatcher)])
    def test_get_matcher(self, name, cls):
        matcher = get_matcher(name)
        assert isinstance(matcher, cls)
        assert isinstance(matcher, Matcher)

    def test_unknown_matcher(self):
        with pytest.raises(ConfigurationError, match="Unknown matcher"):
            get_matcher("regex")
