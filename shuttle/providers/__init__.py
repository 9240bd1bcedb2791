"""
Item providers.

Provides:
- Provider: the provider interface
- GitHubProvider, JenkinsProvider, UrlFileProvider: concrete sources
- build_providers: instantiate providers from configuration entries
"""

from typing import Any, Dict, List

from shuttle.config.constants import DEFAULT_GITHUB_ENDPOINT
from shuttle.config.settings import ShuttleConfig, get_env_var
from shuttle.exceptions import ConfigurationError

from .base import HttpProvider, Provider
from .github import GitHubProvider
from .jenkins import JenkinsProvider
from .url_file import UrlFileProvider

PROVIDER_TYPES = ("github", "jenkins", "file")


def _require(entry: Dict[str, Any], key: str) -> str:
    value = entry.get(key)
    if not value:
        raise ConfigurationError(
            f"Provider '{entry.get('type')}' requires '{key}'", setting="providers"
        )
    return str(value)


def build_provider(entry: Dict[str, Any], timeout: float) -> Provider:
    """Create one provider from a configuration entry."""
    provider_type = entry.get("type")

    if provider_type == "github":
        return GitHubProvider(
            organization=_require(entry, "organization"),
            endpoint=entry.get("endpoint", DEFAULT_GITHUB_ENDPOINT),
            token=entry.get("token") or get_env_var("GITHUB_TOKEN"),
            timeout=timeout,
        )
    if provider_type == "jenkins":
        return JenkinsProvider(endpoint=_require(entry, "endpoint"), timeout=timeout)
    if provider_type == "file":
        return UrlFileProvider(_require(entry, "path"))

    raise ConfigurationError(
        f"Unknown provider type '{provider_type}'. Valid types: {list(PROVIDER_TYPES)}",
        setting="providers",
    )


def build_providers(config: ShuttleConfig) -> List[Provider]:
    """Create all configured providers in declaration order."""
    return [build_provider(entry, config.http_timeout) for entry in config.providers]


__all__ = [
    "GitHubProvider",
    "HttpProvider",
    "JenkinsProvider",
    "PROVIDER_TYPES",
    "Provider",
    "UrlFileProvider",
    "build_provider",
    "build_providers",
]
