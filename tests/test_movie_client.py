"""Tests for the TMDB client and movie recommendations."""

import random
from typing import Any, Dict, List

import httpx
import pytest

from conftest import json_response, mock_http_client
from core.cache import TTLCache
from core.exceptions import ConfigurationError, UpstreamError
from services.movie_client import MovieClient, truncate_overview

TMDB_URL = "https://api.tmdb.test/3"
IMAGE_URL = "https://image.tmdb.test/t/p/w500"

pytestmark = pytest.mark.anyio


def make_movie(movie_id: int, rating: float, **extra: Any) -> Dict[str, Any]:
    movie = {
        "id": movie_id,
        "title": f"Movie {movie_id}",
        "overview": f"Overview of movie {movie_id}.",
        "release_date": "2024-06-01",
        "vote_average": rating,
        "poster_path": f"/poster{movie_id}.jpg",
        "popularity": 12.5,
    }
    movie.update(extra)
    return movie


def build_movie_client(handler, api_key="tmdb-key", clock=None, rng=None) -> MovieClient:
    cache = TTLCache("now_playing", clock=clock) if clock else TTLCache("now_playing")
    return MovieClient(
        mock_http_client(handler), api_key, TMDB_URL, IMAGE_URL,
        now_playing_cache=cache, now_playing_ttl=300, rng=rng or random.Random(7),
    )


def paged_handler(pages: Dict[int, List[Dict[str, Any]]], calls: List[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        page = int(request.url.params["page"])
        return json_response({"page": page, "results": pages.get(page, [])})
    return handler


async def test_missing_api_key_fails_before_any_request():
    calls = []
    client = build_movie_client(paged_handler({}, calls), api_key=None)

    with pytest.raises(ConfigurationError):
        await client.fetch_now_playing()
    assert calls == []


async def test_fetches_two_pages_and_drops_unrated(clock):
    calls = []
    pages = {
        1: [make_movie(1, 7.5), make_movie(2, 0)],
        2: [make_movie(3, 6.1)],
    }
    client = build_movie_client(paged_handler(pages, calls), clock=clock)

    movies = await client.fetch_now_playing()

    assert sorted(m.id for m in movies) == [1, 3]
    assert sorted(int(r.url.params["page"]) for r in calls) == [1, 2]
    assert all(r.url.path == "/3/movie/now_playing" for r in calls)
    assert all(r.url.params["api_key"] == "tmdb-key" for r in calls)
    assert all(r.url.params["language"] == "en-US" for r in calls)

    again = await client.fetch_now_playing()
    assert again is movies
    assert len(calls) == 2

    clock.advance(301)
    await client.fetch_now_playing()
    assert len(calls) == 4


async def test_upstream_failure_propagates():
    client = build_movie_client(lambda request: httpx.Response(401))

    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_now_playing()

    assert exc_info.value.status == 401


async def test_random_top_movies_draws_from_best_rated_pool():
    movies = [make_movie(i, rating=float(i) / 4) for i in range(1, 41)]
    client = build_movie_client(paged_handler({1: movies[:20], 2: movies[20:]}, []))

    picks = await client.random_top_movies(count=3)

    assert len(picks) == 3
    assert len({p.title for p in picks}) == 3
    # Pool is the 15 best rated: ids 26..40.
    assert all(p.rating >= 26 / 4 for p in picks)


async def test_random_top_movies_returns_everything_when_pool_is_small():
    client = build_movie_client(paged_handler({1: [make_movie(1, 5.0), make_movie(2, 6.0)]}, []))

    picks = await client.random_top_movies(count=5)

    assert sorted(p.title for p in picks) == ["Movie 1", "Movie 2"]


async def test_recommendation_fields():
    long_overview = "x" * 200
    pages = {1: [make_movie(1, 8.2, overview=long_overview, poster_path=None)]}
    client = build_movie_client(paged_handler(pages, []))

    (pick,) = await client.random_top_movies(count=1)

    assert pick.title == "Movie 1"
    assert pick.rating == 8.2
    assert pick.release_date == "2024-06-01"
    assert pick.overview == "x" * 117 + "..."
    assert pick.poster_url is None


async def test_poster_url_joins_image_base():
    client = build_movie_client(paged_handler({1: [make_movie(9, 7.0)]}, []))

    (pick,) = await client.random_top_movies(count=1)

    assert pick.poster_url == f"{IMAGE_URL}/poster9.jpg"


@pytest.mark.parametrize("overview, expected", [
    (None, "No overview available."),
    ("", "No overview available."),
    ("Short.", "Short."),
    ("y" * 120, "y" * 120),
])
def test_truncate_overview(overview, expected):
    assert truncate_overview(overview) == expected
