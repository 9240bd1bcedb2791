"""Load phase: cache first, aggregation on a miss."""

import logging
from typing import List, Sequence

from shuttle.exceptions import CacheReadError, CacheWriteError
from shuttle.models import Item
from shuttle.providers import Provider

from .aggregator import Aggregator
from .item_cache import ItemCache

logger = logging.getLogger(__name__)


def load_items(
    providers: Sequence[Provider],
    cache: ItemCache,
    refresh: bool = False,
) -> List[Item]:
    """Return the full item list for a session.

    A cached snapshot is returned verbatim without invoking any provider.
    On a miss, a corrupt snapshot, or ``refresh``, all providers are loaded
    and the result is written through the cache. A failed write is logged
    and does not affect the returned items.

    Raises:
        AggregationError: If any provider fails
    """
    if not refresh:
        try:
            cached = cache.load()
        except CacheReadError as e:
            logger.warning("Ignoring unreadable cache, reloading from providers: %s", e)
            cached = None
        if cached is not None:
            logger.info("Using %d cached items from %s", len(cached), cache.path)
            return cached

    items = Aggregator(providers).load()
    try:
        cache.store(items)
    except CacheWriteError as e:
        logger.warning("Could not store items in cache, continuing without it: %s", e)
    return items
