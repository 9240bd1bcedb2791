"""Jenkins provider - jobs of one Jenkins instance."""

from typing import Any, List, Optional

import httpx

from shuttle.config.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from shuttle.exceptions import ProviderError
from shuttle.models import Item

from .base import HttpProvider


class JenkinsProvider(HttpProvider):
    """Lists the top-level jobs reported by ``{endpoint}/api/json``."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        super().__init__(timeout=timeout, client=client)
        self.endpoint = endpoint

    def title(self) -> str:
        return f"Jenkins {self.endpoint}"

    @property
    def url(self) -> str:
        return f"{self.endpoint.rstrip('/')}/api/json"

    def load(self) -> List[Item]:
        response = self._get_json(self.url)
        jobs = response.get("jobs") if isinstance(response, dict) else None
        if not isinstance(jobs, list):
            raise ProviderError("Response has no 'jobs' list", provider=self.title())
        return [self._to_item(job) for job in jobs]

    def _to_item(self, job: Any) -> Item:
        try:
            name = job["name"]
            url = job["url"]
        except (KeyError, TypeError) as e:
            raise ProviderError(f"Malformed job entry: {e}", provider=self.title()) from e
        return Item.create(label=name, value=url, search=name)
