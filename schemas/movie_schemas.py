# schemas/movie_schemas.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """A TMDB `now_playing` result."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    id: int
    title: str
    overview: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: float = 0.0
    poster_path: Optional[str] = None


class NowPlayingPage(BaseModel):
    model_config = ConfigDict(extra='ignore')

    page: int = 1
    results: List[Movie] = Field(default_factory=list)


class MovieRecommendation(BaseModel):
    title: str
    overview: str
    release_date: Optional[str] = None
    rating: float = Field(..., examples=[7.4])
    poster_url: Optional[str] = None
