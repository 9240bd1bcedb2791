"""Line-oriented provider reading one URL per line from a local file."""

import logging
from pathlib import Path
from typing import List, Union

from shuttle.exceptions import ProviderError
from shuttle.models import Item

from .base import Provider

logger = logging.getLogger(__name__)


class UrlFileProvider(Provider):
    """Reads items from a text file; blank lines are skipped."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def title(self) -> str:
        return f"File {self.path}"

    def load(self) -> List[Item]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProviderError(f"Cannot read {self.path}: {e}", provider=self.title()) from e

        items = [Item.parse(line) for line in text.splitlines() if line.strip()]
        logger.debug("Read %d items from %s", len(items), self.path)
        return items
