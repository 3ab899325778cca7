# services/dota_tools.py
"""
This is the primary module for the high-level Dota operations that the HTTP
shell and the LLM call. It acts as a manager, fetching through the OpenDota
client and handing the data to the specialist modules in the `dota_logic`
sub-package.

Provider failures propagate unchanged, with one exception: a match that does
not exist comes back as a summary-shaped error so the LLM always receives
something it can read.
"""
import logging
from typing import Dict, List, Optional, Union

from core.exceptions import NotFoundError
from schemas.hero_schemas import HeroDetail, HeroStat, RankedHero
from schemas.match_schemas import MatchLookupError, MatchSummary
from services.dota_logic import data_parser, hero_finder, hero_rankings
from services.dota_logic.api_client import OpenDotaClient

logger = logging.getLogger(__name__)


async def fetch_hero_stats(client: OpenDotaClient) -> List[HeroStat]:
    return await client.fetch_hero_stats()


async def top_heroes_by_role(client: OpenDotaClient, role: str, count: int = 5) -> List[RankedHero]:
    """Gets the highest win-rate heroes for one role."""
    logger.info(f"Tool 'top_heroes_by_role' called for role='{role}', count={count}")
    heroes = await client.fetch_hero_stats()
    return hero_rankings.top_heroes_by_role(heroes, role, count)


async def all_roles_top(client: OpenDotaClient, count: int = 5) -> Dict[str, List[RankedHero]]:
    """Gets the highest win-rate heroes for every role, from a single fetch."""
    logger.info(f"Tool 'all_roles_top' called with count={count}")
    heroes = await client.fetch_hero_stats()
    return hero_rankings.all_roles_top(heroes, count)


async def lookup_hero(client: OpenDotaClient, query: str) -> Optional[HeroDetail]:
    """Finds one hero by (partial) name."""
    logger.info(f"Tool 'lookup_hero' called for query='{query}'")
    heroes = await client.fetch_hero_stats()
    return hero_finder.lookup_hero(heroes, query)


async def fetch_match_summary(client: OpenDotaClient, match_id: Union[str, int]) -> Union[MatchSummary, MatchLookupError]:
    """Fetches one match and reduces it to a compact summary."""
    logger.info(f"Tool 'fetch_match_summary' called for match_id='{match_id}'")
    try:
        detail = await client.fetch_match(match_id)
    except NotFoundError:
        logger.info(f"Match '{match_id}' was not found. Returning an error summary.")
        return MatchLookupError()
    return data_parser.summarize_match(detail)
