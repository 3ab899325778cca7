# core/cache.py
"""
Single-slot TTL cache used by the provider clients.

Each cacheable resource (the hero-stat listing, the now-playing movie list)
gets its own instance, so there is no key space. Refresh only happens lazily,
when a read finds the slot empty or expired.
"""
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    payload: Optional[T] = None
    fetched_at: float = 0.0


class TTLCache(Generic[T]):
    """
    Memoizes the result of one fetcher for `ttl` seconds.

    Not synchronized: two concurrent misses both call the fetcher and the later
    result overwrites the earlier one. Payloads are read-only snapshots, so
    that race is harmless.
    """

    def __init__(self, name: str, clock: Callable[[], float] = time.monotonic):
        self.name = name
        self._clock = clock
        self._entry: CacheEntry[T] = CacheEntry()

    @property
    def entry(self) -> CacheEntry[T]:
        return self._entry

    def is_fresh(self, ttl: float) -> bool:
        if self._entry.payload is None:
            return False
        return self._clock() - self._entry.fetched_at < ttl

    async def get_or_fetch(self, fetcher: Callable[[], Awaitable[T]], ttl: float) -> T:
        """
        Returns the cached payload while fresh, otherwise awaits `fetcher` once.

        If the fetcher raises, the error propagates and the existing entry is
        left exactly as it was.
        """
        if self.is_fresh(ttl):
            logger.debug(f"Cache '{self.name}' hit.")
            return self._entry.payload

        logger.info(f"Cache '{self.name}' miss or expired. Fetching a fresh payload.")
        payload = await fetcher()
        self._entry = CacheEntry(payload=payload, fetched_at=self._clock())
        return payload

    def invalidate(self) -> None:
        self._entry = CacheEntry()
