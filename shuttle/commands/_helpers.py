"""Shared helpers for CLI commands."""

from functools import partial
from typing import Callable, List, Optional

from shuttle.config.settings import ShuttleConfig
from shuttle.matchers import Matcher, get_matcher
from shuttle.models import Item
from shuttle.providers import build_providers
from shuttle.services.item_cache import ItemCache
from shuttle.services.loader import load_items


def resolve_matcher(config: ShuttleConfig, override: Optional[str] = None) -> Matcher:
    """Matcher from the command line option, falling back to the config."""
    return get_matcher(override or config.matcher)


def make_loader(config: ShuttleConfig, refresh: bool = False) -> Callable[[], List[Item]]:
    """Build the load-phase callable for a configuration.

    Providers are created eagerly so configuration errors surface before the
    TUI starts.
    """
    providers = build_providers(config)
    return partial(load_items, providers, ItemCache(config.cache_path), refresh)
