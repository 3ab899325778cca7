"""Tests for the single-slot TTL cache."""

import pytest

from core.cache import TTLCache
from core.exceptions import UpstreamError

pytestmark = pytest.mark.anyio


class CountingFetcher:
    def __init__(self):
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        return {"payload": self.calls}


async def test_second_read_within_ttl_returns_same_object_without_fetching(clock):
    cache = TTLCache("heroes", clock=clock)
    fetcher = CountingFetcher()

    first = await cache.get_or_fetch(fetcher, ttl=300)
    clock.advance(299)
    second = await cache.get_or_fetch(fetcher, ttl=300)

    assert second is first
    assert fetcher.calls == 1


async def test_read_after_expiry_fetches_exactly_once_more(clock):
    cache = TTLCache("heroes", clock=clock)
    fetcher = CountingFetcher()

    first = await cache.get_or_fetch(fetcher, ttl=300)
    clock.advance(300)
    second = await cache.get_or_fetch(fetcher, ttl=300)
    third = await cache.get_or_fetch(fetcher, ttl=300)

    assert fetcher.calls == 2
    assert second is not first
    assert third is second


async def test_failed_fetch_propagates_and_leaves_entry_untouched(clock):
    cache = TTLCache("heroes", clock=clock)
    fetcher = CountingFetcher()
    stale = await cache.get_or_fetch(fetcher, ttl=10)
    entry_before = cache.entry
    clock.advance(60)

    async def failing():
        raise UpstreamError("boom", status=503)

    with pytest.raises(UpstreamError):
        await cache.get_or_fetch(failing, ttl=10)

    assert cache.entry is entry_before
    assert cache.entry.payload is stale


async def test_empty_cache_is_never_fresh(clock):
    cache = TTLCache("heroes", clock=clock)
    assert cache.entry.payload is None
    assert not cache.is_fresh(ttl=300)


async def test_invalidate_forces_refetch(clock):
    cache = TTLCache("heroes", clock=clock)
    fetcher = CountingFetcher()
    await cache.get_or_fetch(fetcher, ttl=300)

    cache.invalidate()
    await cache.get_or_fetch(fetcher, ttl=300)

    assert fetcher.calls == 2
