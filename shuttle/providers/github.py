"""GitHub provider - repositories of one organization."""

from typing import Any, List, Optional

import httpx

from shuttle.config.constants import (
    DEFAULT_GITHUB_ENDPOINT,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    GITHUB_PAGE_SIZE,
)
from shuttle.exceptions import ProviderError
from shuttle.models import Item

from .base import HttpProvider


class GitHubProvider(HttpProvider):
    """Lists the repositories of a GitHub organization.

    Only the first page (most recently updated first) is fetched.
    """

    def __init__(
        self,
        organization: str,
        endpoint: str = DEFAULT_GITHUB_ENDPOINT,
        token: Optional[str] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        headers = {"Authorization": f"Bearer {token}"} if token else None
        super().__init__(timeout=timeout, headers=headers, client=client)
        self.organization = organization
        self.endpoint = endpoint

    def title(self) -> str:
        return f"GitHub {self.organization}"

    @property
    def url(self) -> str:
        return (
            f"{self.endpoint.rstrip('/')}/orgs/{self.organization}/repos"
            f"?sort=updated&per_page={GITHUB_PAGE_SIZE}"
        )

    def load(self) -> List[Item]:
        repositories = self._get_json(self.url)
        if not isinstance(repositories, list):
            raise ProviderError("Expected a list of repositories", provider=self.title())
        return [self._to_item(repo) for repo in repositories]

    def _to_item(self, repo: Any) -> Item:
        try:
            full_name = repo["full_name"]
            html_url = repo["html_url"]
        except (KeyError, TypeError) as e:
            raise ProviderError(f"Malformed repository entry: {e}", provider=self.title()) from e
        return Item.create(label=full_name, value=html_url, search=full_name)
