"""Aggregator - loads every provider concurrently and merges the batches.

Providers run in a thread pool sized to the number of providers. The first
provider failure aborts the aggregation: pending providers are cancelled, the
join point does not wait for the ones still running, and the error is raised
as an AggregationError. There is never a partial result.
"""

import logging
import time
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Dict, List, Optional, Sequence

from shuttle.exceptions import AggregationError
from shuttle.models import Item
from shuttle.providers import Provider

logger = logging.getLogger(__name__)


def sort_items(items: List[Item]) -> List[Item]:
    """Stable, case-sensitive ordinal sort by label."""
    return sorted(items, key=lambda item: item.label)


class Aggregator:
    """Fan-out/fan-in coordinator over all providers."""

    def __init__(self, providers: Sequence[Provider], max_workers: Optional[int] = None):
        self.providers = list(providers)
        self.max_workers = max_workers or max(1, len(self.providers))

    def load(self) -> List[Item]:
        """Load all providers and return the merged, label-sorted item list.

        Raises:
            AggregationError: If any provider fails
        """
        if not self.providers:
            logger.info("No providers configured")
            return []

        start_time = time.time()
        executor = ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="shuttle-provider"
        )
        futures: Dict[Future, int] = {
            executor.submit(provider.load): index
            for index, provider in enumerate(self.providers)
        }

        batches: List[Optional[List[Item]]] = [None] * len(self.providers)
        try:
            pending = set(futures)
            while pending:
                done, pending = wait(pending, return_when=FIRST_EXCEPTION)
                for future in done:
                    index = futures[future]
                    provider = self.providers[index]
                    error = future.exception()
                    if error is not None:
                        logger.error("Provider %s failed: %s", provider.title(), error)
                        raise AggregationError(
                            f"Loading from {provider.title()} failed: {error}",
                            provider=provider.title(),
                        ) from error
                    batches[index] = future.result()
                    logger.debug(
                        "Provider %s returned %d items", provider.title(), len(batches[index])
                    )
        except BaseException:
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        executor.shutdown(wait=True)

        merged = [item for batch in batches if batch for item in batch]
        logger.info(
            "Loaded %d items from %d providers in %.2fs",
            len(merged), len(self.providers), time.time() - start_time,
        )
        return sort_items(merged)
