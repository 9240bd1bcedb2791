"""
Item cache - persisted snapshot of the merged item list.

The cache is a read-through gate keyed on existence only: if the snapshot
file exists its items are used verbatim and no provider is contacted. There
is no TTL and no checksum; deleting the file (``shuttle cache clear``) is the
only way to invalidate it.

Layout: a JSON array of ``{"label", "value", "haystack"}`` records, in order.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

from shuttle.exceptions import CacheReadError, CacheWriteError
from shuttle.models import Item

logger = logging.getLogger(__name__)


class ItemCache:
    """JSON snapshot of items at a fixed path."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Optional[List[Item]]:
        """
        Read the snapshot.

        Returns:
            The cached items, or None when no snapshot exists

        Raises:
            CacheReadError: If the snapshot is unreadable or corrupt
        """
        if not self.path.exists():
            return None

        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(records, list):
                raise ValueError("snapshot is not a list")
            items = [Item.from_dict(record) for record in records]
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise CacheReadError(f"Corrupt item cache: {e}", path=str(self.path)) from e

        logger.debug("Loaded %d items from cache %s", len(items), self.path)
        return items

    def store(self, items: Sequence[Item]) -> None:
        """
        Write the snapshot atomically.

        Raises:
            CacheWriteError: If the snapshot cannot be written
        """
        payload = json.dumps([item.to_dict() for item in items], indent=1)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise CacheWriteError(f"Cannot write item cache: {e}", path=str(self.path)) from e

        logger.info("Stored %d items in cache %s", len(items), self.path)

    def clear(self) -> bool:
        """Delete the snapshot. Returns True if a snapshot was removed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        logger.info("Cleared item cache %s", self.path)
        return True
