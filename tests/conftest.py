"""Shared pytest fixtures for shuttle tests."""

from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

from shuttle.models import Item


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point config, cache and log files at a temp directory."""
    monkeypatch.setenv("SHUTTLE_CONFIG", str(tmp_path / "config.json"))
    monkeypatch.setenv("SHUTTLE_CACHE", str(tmp_path / "cache" / "items.json"))
    monkeypatch.delenv("SHUTTLE_MATCHER", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    with patch("shuttle.utils.logging_utils.get_log_file", return_value=tmp_path / "shuttle.log"):
        yield tmp_path


@pytest.fixture
def example_items() -> List[Item]:
    """Three items whose haystacks are 'alpha one', 'beta two', 'alpha three'."""
    return [
        Item.create(label="alpha/one", value="https://example.com/alpha/one"),
        Item.create(label="beta/two", value="https://example.com/beta/two"),
        Item.create(label="alpha/three", value="https://example.com/alpha/three"),
    ]


@pytest.fixture
def url_items() -> List[Item]:
    """Items parsed from raw URLs, as read from a URL file."""
    return [
        Item.parse("https://github.com/acme/api_gateway"),
        Item.parse("https://github.com/acme/billing-service/"),
        Item.parse("https://ci.acme.dev/job/Deploy_API"),
        Item.parse("https://github.com/acme/web-frontend"),
    ]
