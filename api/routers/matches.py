# api/routers/matches.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from core.exceptions import DotaBotError
from core.interaction_logger import track_interaction
from schemas.match_schemas import MatchLookupError, MatchSummary
from services import dota_tools
from services.dota_logic.api_client import OpenDotaClient
from ..dependencies import get_dota_client, get_user_tag, to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/matches",
    tags=["Matches"]
)


@router.get("/{match_id}/summary", response_model=MatchSummary)
async def match_summary_endpoint(
        match_id: str,
        client: OpenDotaClient = Depends(get_dota_client),
        user: Optional[str] = Depends(get_user_tag),
) -> MatchSummary:
    """
    Returns the compact summary of one match: scores, outcome and per-player stats.
    """
    with track_interaction("match", user) as interaction:
        try:
            summary = await dota_tools.fetch_match_summary(client, match_id)
        except DotaBotError as e:
            logger.error(f"Error handling /match for '{match_id}': {e}", exc_info=True)
            http_error = to_http_exception(e, "Failed to fetch match data. Please try again later.")
            interaction.status = http_error.status_code
            raise http_error

        if isinstance(summary, MatchLookupError):
            interaction.status = status.HTTP_404_NOT_FOUND
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=summary.error)
        return summary
