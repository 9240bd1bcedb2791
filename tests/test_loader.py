"""Tests for the cache-first load phase."""

from unittest.mock import MagicMock

import pytest

from shuttle.exceptions import AggregationError, ProviderError
from shuttle.models import Item
from shuttle.providers import Provider
from shuttle.services.item_cache import ItemCache
from shuttle.services.loader import load_items


def make_provider(items=None, error=None) -> MagicMock:
    provider = MagicMock(spec=Provider)
    provider.title.return_value = "mock"
    if error is not None:
        provider.load.side_effect = error
    else:
        provider.load.return_value = items or []
    return provider


@pytest.fixture
def cache(tmp_path):
    return ItemCache(tmp_path / "items.json")


class TestLoadItems:
    def test_cold_run_aggregates_and_stores(self, cache, example_items):
        provider = make_provider(example_items)
        items = load_items([provider], cache)

        provider.load.assert_called_once()
        assert [i.label for i in items] == ["alpha/one", "alpha/three", "beta/two"]
        assert cache.load() == items

    def test_cache_hit_skips_providers(self, cache, example_items):
        cache.store(example_items)
        provider = make_provider([Item.parse("https://other/x")])

        items = load_items([provider], cache)

        provider.load.assert_not_called()
        assert items == example_items

    def test_corrupt_cache_falls_back_to_providers(self, cache, example_items):
        cache.path.write_text("{broken")
        provider = make_provider(example_items)

        items = load_items([provider], cache)

        provider.load.assert_called_once()
        assert len(items) == 3
        assert cache.load() == items

    def test_refresh_ignores_cache(self, cache, example_items):
        cache.store(example_items)
        fresh = [Item.parse("https://other/x")]
        provider = make_provider(fresh)

        items = load_items([provider], cache, refresh=True)

        assert items == fresh
        assert cache.load() == fresh

    def test_failure_propagates_and_leaves_cache_empty(self, cache, example_items):
        providers = [make_provider(example_items), make_provider(error=ProviderError("down"))]
        with pytest.raises(AggregationError):
            load_items(providers, cache)
        assert not cache.exists()

    def test_unwritable_cache_still_returns_items(self, tmp_path, example_items):
        blocker = tmp_path / "file_not_dir"
        blocker.write_text("")
        cache = ItemCache(blocker / "items.json")
        provider = make_provider(example_items)

        items = load_items([provider], cache)

        assert [i.label for i in items] == ["alpha/one", "alpha/three", "beta/two"]
        assert not cache.exists()
