"""Fuzzy subsequence matcher scored by Textual's fuzzy search."""

import logging
from typing import List, Sequence, Tuple

from textual.fuzzy import Matcher as TextualFuzzyMatcher

from shuttle.models import Item

from .base import Matcher

logger = logging.getLogger(__name__)


class FuzzyMatcher(Matcher):
    """Scores each haystack and sorts by descending score.

    Items without a match are dropped. Equal scores keep their input order.
    An empty query returns every item in input order, unscored.
    """

    name = "fuzzy"

    def matches(self, query: str, items: Sequence[Item]) -> List[Item]:
        query = query.lower()
        if not query:
            return list(items)

        fuzzy = TextualFuzzyMatcher(query)
        scored: List[Tuple[float, Item]] = []
        for item in items:
            score = fuzzy.match(item.haystack)
            if score > 0:
                scored.append((score, item))

        # list.sort is stable, so ties keep their input order
        scored.sort(key=lambda pair: -pair[0])
        logger.debug("Fuzzy query %r matched %d/%d items", query, len(scored), len(items))
        return [item for _score, item in scored]
