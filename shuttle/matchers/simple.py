"""Substring matcher: every query token must appear in the haystack."""

from typing import List, Sequence

from shuttle.models import Item

from .base import Matcher


class SimpleMatcher(Matcher):
    """AND-of-substrings filter that keeps the input order."""

    name = "simple"

    def matches(self, query: str, items: Sequence[Item]) -> List[Item]:
        query_parts = query.lower().split()
        if not query_parts:
            return list(items)

        return [
            item for item in items
            if all(part in item.haystack for part in query_parts)
        ]
