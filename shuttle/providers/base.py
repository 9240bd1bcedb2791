"""Provider interface and the shared HTTP provider base."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from shuttle.config.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from shuttle.exceptions import ProviderError
from shuttle.models import Item

logger = logging.getLogger(__name__)


class Provider(ABC):
    """A source of launchable items."""

    def title(self) -> str:
        return "Unknown"

    @abstractmethod
    def load(self) -> List[Item]:
        """Load all items this provider can provide.

        Raises:
            ShuttleError: If the source cannot be read or parsed
        """


class HttpProvider(Provider):
    """Base for providers that read a single JSON document over HTTP.

    Args:
        timeout: Request timeout in seconds
        headers: Extra request headers
        client: Pre-configured httpx client (tests inject a MockTransport here)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.timeout = timeout
        self.headers = {"Accept": "application/json", **(headers or {})}
        self._client = client

    def _get_json(self, url: str) -> Any:
        """GET ``url`` and decode the JSON body, mapping failures to ProviderError."""
        logger.debug("%s: GET %s", self.title(), url)
        try:
            if self._client is not None:
                response = self._client.get(url, headers=self.headers, timeout=self.timeout)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(url, headers=self.headers)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise ProviderError(
                f"HTTP {status} from {url}",
                provider=self.title(),
                retryable=status >= 500 or status == 429,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(
                f"Request to {url} failed: {e}",
                provider=self.title(),
                retryable=True,
            ) from e
        except ValueError as e:
            raise ProviderError(f"Invalid JSON from {url}", provider=self.title()) from e
