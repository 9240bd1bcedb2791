"""
Matching strategies.

Provides:
- Matcher: the strategy interface
- SimpleMatcher: substring AND filter, stable
- FuzzyMatcher: fuzzy subsequence scoring, sorted by score
- get_matcher: resolve a matcher by its configured name
"""

from typing import Dict, Type

from shuttle.exceptions import ConfigurationError

from .base import Matcher
from .fuzzy import FuzzyMatcher
from .simple import SimpleMatcher

MATCHERS: Dict[str, Type[Matcher]] = {
    SimpleMatcher.name: SimpleMatcher,
    FuzzyMatcher.name: FuzzyMatcher,
}


def get_matcher(name: str) -> Matcher:
    """Instantiate the matcher registered under ``name``."""
    try:
        matcher_cls = MATCHERS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown matcher '{name}'. Valid matchers: {sorted(MATCHERS)}",
            setting="matcher",
        ) from None
    return matcher_cls()


__all__ = [
    "FuzzyMatcher",
    "MATCHERS",
    "Matcher",
    "SimpleMatcher",
    "get_matcher",
]
