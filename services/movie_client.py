# services/movie_client.py
"""
Client for TMDB's "now playing" listing and the random recommendation picker
built on top of it.
"""
import asyncio
import logging
import random
from typing import List, Optional

import httpx
from pydantic import ValidationError

from core.cache import TTLCache
from core.exceptions import ConfigurationError, ParseError
from schemas.movie_schemas import Movie, MovieRecommendation, NowPlayingPage
from services.upstream import get_json

logger = logging.getLogger(__name__)

PROVIDER_NAME = "TMDB"
# Two pages give a large enough pool to randomize from.
NOW_PLAYING_PAGES = (1, 2)
OVERVIEW_LIMIT = 120
NO_OVERVIEW = "No overview available."


class MovieClient:
    """Fetch-and-validate wrapper around TMDB, plus the recommendation picker."""

    def __init__(
            self,
            http_client: httpx.AsyncClient,
            api_key: Optional[str],
            base_url: str,
            image_base_url: str,
            now_playing_cache: TTLCache[List[Movie]],
            now_playing_ttl: float,
            rng: Optional[random.Random] = None,
    ):
        self._http = http_client
        self._api_key = api_key
        self._base_url = base_url.rstrip('/')
        self._image_base_url = image_base_url.rstrip('/')
        self._cache = now_playing_cache
        self._ttl = now_playing_ttl
        self._rng = rng or random.Random()

    async def fetch_now_playing(self) -> List[Movie]:
        """Returns rated movies currently in theaters, cached for the configured TTL."""
        return await self._cache.get_or_fetch(self._request_now_playing, self._ttl)

    async def _request_now_playing(self) -> List[Movie]:
        if not self._api_key:
            logger.error("TMDB_API_KEY is not set. Movie commands are unavailable.")
            raise ConfigurationError("Missing TMDB_API_KEY in the environment")

        pages = await asyncio.gather(*(self._request_page(page) for page in NOW_PLAYING_PAGES))
        movies = [movie for page in pages for movie in page.results if movie.vote_average > 0]
        logger.info(f"Fetched {len(movies)} rated now-playing movies from TMDB.")
        return movies

    async def _request_page(self, page: int) -> NowPlayingPage:
        raw_data = await get_json(
            self._http,
            f"{self._base_url}/movie/now_playing",
            provider=PROVIDER_NAME,
            params={"api_key": self._api_key, "language": "en-US", "page": page},
        )
        try:
            return NowPlayingPage.model_validate(raw_data)
        except ValidationError as e:
            logger.error(f"TMDB now_playing page {page} failed validation: {e}")
            raise ParseError("TMDB now_playing has an unexpected shape") from e

    async def random_top_movies(self, count: int = 5) -> List[MovieRecommendation]:
        """
        Picks `count` random movies from the best-rated part of the listing.

        The pool is the top max(count * 3, 15) by rating, so repeated calls
        vary while staying among well-reviewed titles.
        """
        movies = await self.fetch_now_playing()
        ranked = sorted(movies, key=lambda m: m.vote_average, reverse=True)
        pool = ranked[:max(count * 3, 15)]
        picked = self._rng.sample(pool, k=max(0, min(count, len(pool))))
        return [self._to_recommendation(m) for m in picked]

    def _to_recommendation(self, movie: Movie) -> MovieRecommendation:
        return MovieRecommendation(
            title=movie.title,
            overview=truncate_overview(movie.overview),
            release_date=movie.release_date,
            rating=movie.vote_average,
            poster_url=f"{self._image_base_url}{movie.poster_path}" if movie.poster_path else None,
        )


def truncate_overview(overview: Optional[str]) -> str:
    if not overview:
        return NO_OVERVIEW
    if len(overview) > OVERVIEW_LIMIT:
        return overview[:OVERVIEW_LIMIT - 3] + "..."
    return overview
