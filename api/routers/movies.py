# api/routers/movies.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from core.exceptions import DotaBotError
from core.interaction_logger import track_interaction
from schemas.movie_schemas import MovieRecommendation
from services.movie_client import MovieClient
from ..dependencies import get_movie_client, get_user_tag, to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Movies"]
)


@router.get("/movies", response_model=List[MovieRecommendation])
async def movies_endpoint(
        count: int = Query(default=5, ge=1, le=10),
        client: MovieClient = Depends(get_movie_client),
        user: Optional[str] = Depends(get_user_tag),
) -> List[MovieRecommendation]:
    """
    Returns random picks among the best-rated movies now playing.
    """
    with track_interaction("movies", user) as interaction:
        try:
            return await client.random_top_movies(count)
        except DotaBotError as e:
            logger.error(f"Error handling /movies: {e}", exc_info=True)
            http_error = to_http_exception(e, "Failed to fetch movie data. Please try again later.")
            interaction.status = http_error.status_code
            raise http_error
