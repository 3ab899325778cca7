# services/dota_logic/api_client.py
"""
Client for the OpenDota public API.

The hero-stat listing is memoized through a TTLCache owned by the client.
Match details are never cached: the payload is large and specific to one
question.
"""
import logging
from typing import List, Union
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from core.cache import TTLCache
from core.exceptions import NotFoundError, ParseError
from schemas.hero_schemas import HeroStat
from schemas.match_schemas import MatchDetail
from services.upstream import get_json

logger = logging.getLogger(__name__)

PROVIDER_NAME = "OpenDota"
MATCH_NOT_FOUND = "Match not found"

_HERO_STATS_ADAPTER = TypeAdapter(List[HeroStat])


class OpenDotaClient:
    """Fetch-and-validate wrapper around `api.opendota.com`."""

    def __init__(
            self,
            http_client: httpx.AsyncClient,
            base_url: str,
            hero_stats_cache: TTLCache[List[HeroStat]],
            hero_stats_ttl: float,
    ):
        self._http = http_client
        self._base_url = base_url.rstrip('/')
        self._hero_stats_cache = hero_stats_cache
        self._hero_stats_ttl = hero_stats_ttl

    async def fetch_hero_stats(self) -> List[HeroStat]:
        """Returns every hero with its public pick/win counters, cached for the configured TTL."""
        return await self._hero_stats_cache.get_or_fetch(self._request_hero_stats, self._hero_stats_ttl)

    async def _request_hero_stats(self) -> List[HeroStat]:
        raw_data = await get_json(self._http, f"{self._base_url}/api/heroStats", provider=PROVIDER_NAME)
        if not isinstance(raw_data, list):
            raise ParseError("OpenDota heroStats did not return a list")
        try:
            heroes = _HERO_STATS_ADAPTER.validate_python(raw_data)
        except ValidationError as e:
            logger.error(f"OpenDota heroStats failed validation: {e}")
            raise ParseError("OpenDota heroStats has an unexpected shape") from e

        logger.info(f"Fetched stats for {len(heroes)} heroes from OpenDota.")
        return heroes

    async def fetch_match(self, match_id: Union[str, int]) -> MatchDetail:
        """
        Fetches the full detail of one match.

        Match ids travel as strings; they exceed the range some JSON consumers
        handle exactly, though the LLM sometimes sends a bare number. An id that
        is not plain ASCII digits cannot exist, so it is reported as not found
        without asking the upstream.
        """
        match_id = str(match_id).strip()
        if not (match_id.isascii() and match_id.isdigit()):
            logger.warning(f"Rejecting non-numeric match id '{match_id}'.")
            raise NotFoundError(MATCH_NOT_FOUND, context={"match_id": match_id})

        raw_data = await get_json(
            self._http,
            f"{self._base_url}/api/matches/{quote(match_id)}",
            provider=PROVIDER_NAME,
            not_found_message=MATCH_NOT_FOUND,
        )
        if isinstance(raw_data, dict) and "error" in raw_data:
            logger.warning(f"OpenDota reported an error for match {match_id}: {raw_data['error']}")
            raise NotFoundError(MATCH_NOT_FOUND, context={"match_id": match_id})

        try:
            return MatchDetail.model_validate(raw_data)
        except ValidationError as e:
            logger.error(f"OpenDota match {match_id} failed validation: {e}")
            raise ParseError("OpenDota match detail has an unexpected shape") from e
