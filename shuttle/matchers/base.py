"""Matcher strategy interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from shuttle.models import Item


class Matcher(ABC):
    """Applies a query to a list of items.

    Implementations return references to the given items (never copies),
    ordered by relevance with the best match first, without duplicates.
    They must not raise for any query string.
    """

    name: str = "base"

    @abstractmethod
    def matches(self, query: str, items: Sequence[Item]) -> List[Item]:
        """Return the items matching ``query``, best match first."""
