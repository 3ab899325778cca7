# api/routers/heroes.py
"""
Defines the FastAPI router for hero rankings and hero lookup.
"""
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.exceptions import DotaBotError
from core.interaction_logger import track_interaction
from schemas.hero_schemas import HeroDetail, HeroRole, RankedHero
from services import dota_tools
from services.dota_logic.api_client import OpenDotaClient
from ..dependencies import get_dota_client, get_user_tag, to_http_exception

logger = logging.getLogger(__name__)

HERO_DATA_UNAVAILABLE = "Failed to fetch hero data. Please try again later."

router = APIRouter(
    prefix="/api/heroes",
    tags=["Heroes"]
)


@router.get("/top", response_model=Dict[str, List[RankedHero]])
async def top_heroes_endpoint(
        role: Optional[HeroRole] = Query(default=None, description="Filter by a specific role."),
        count: int = Query(default=5, ge=1, le=10, description="Number of heroes per role."),
        client: OpenDotaClient = Depends(get_dota_client),
        user: Optional[str] = Depends(get_user_tag),
) -> Dict[str, List[RankedHero]]:
    """
    Shows the top heroes by public win rate, for one role or for every role.
    """
    with track_interaction("topheroes", user) as interaction:
        try:
            if role:
                return {role: await dota_tools.top_heroes_by_role(client, role, count)}
            return await dota_tools.all_roles_top(client, count)
        except DotaBotError as e:
            logger.error(f"Error handling /topheroes: {e}", exc_info=True)
            http_error = to_http_exception(e, HERO_DATA_UNAVAILABLE)
            interaction.status = http_error.status_code
            raise http_error


@router.get("/lookup", response_model=HeroDetail)
async def lookup_hero_endpoint(
        name: str = Query(..., min_length=1, max_length=100, examples=["Anti-Mage"]),
        client: OpenDotaClient = Depends(get_dota_client),
        user: Optional[str] = Depends(get_user_tag),
) -> HeroDetail:
    """
    Looks up a hero by name (case-insensitive, partial names allowed).
    """
    with track_interaction("hero", user) as interaction:
        try:
            hero = await dota_tools.lookup_hero(client, name)
        except DotaBotError as e:
            logger.error(f"Error handling /hero: {e}", exc_info=True)
            http_error = to_http_exception(e, HERO_DATA_UNAVAILABLE)
            interaction.status = http_error.status_code
            raise http_error

        if hero is None:
            interaction.status = status.HTTP_404_NOT_FOUND
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No hero found matching '{name}'. Try a different name."
            )
        return hero
