# schemas/match_schemas.py
"""
Defines the Pydantic data models for OpenDota match details and the compact
summary handed to the LLM.

The upstream payload for a single match is very large (per-minute gold, chat,
objectives, ...); only the fields the summarizer reads are declared here.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MatchPlayer(BaseModel):
    """One of the ten entries in `players[]` of `GET /api/matches/<id>`."""
    model_config = ConfigDict(extra='ignore')

    account_id: Optional[int] = None
    personaname: Optional[str] = None
    name: Optional[str] = None
    hero_id: int = 0
    player_slot: Optional[int] = None
    isRadiant: Optional[bool] = None

    kills: int = 0
    deaths: int = 0
    assists: int = 0
    last_hits: int = 0
    denies: int = 0
    gold_per_min: int = 0
    xp_per_min: int = 0
    net_worth: Optional[int] = None
    hero_damage: Optional[int] = None
    tower_damage: Optional[int] = None
    hero_healing: Optional[int] = None
    level: Optional[int] = None

    item_0: Optional[int] = None
    item_1: Optional[int] = None
    item_2: Optional[int] = None
    item_3: Optional[int] = None
    item_4: Optional[int] = None
    item_5: Optional[int] = None
    item_neutral: Optional[int] = None

    @property
    def primary_item_ids(self) -> List[Optional[int]]:
        return [self.item_0, self.item_1, self.item_2, self.item_3, self.item_4, self.item_5]


class MatchDetail(BaseModel):
    """The subset of `GET /api/matches/<id>` the summarizer consumes."""
    model_config = ConfigDict(extra='ignore')

    match_id: int
    radiant_win: Optional[bool] = None
    duration: int = 0
    radiant_score: int = 0
    dire_score: int = 0
    start_time: Optional[int] = None
    game_mode: Optional[int] = None
    players: List[MatchPlayer] = Field(default_factory=list)


class PlayerSummary(BaseModel):
    name: str
    hero: str
    side: str = Field(..., examples=["Radiant", "Dire"])
    kills: int
    deaths: int
    assists: int
    kda: float
    last_hits: int
    denies: int
    gold_per_min: int
    xp_per_min: int
    net_worth: Optional[int] = None
    hero_damage: Optional[int] = None
    level: Optional[int] = None
    items: List[str] = Field(default_factory=list)
    neutral_item: Optional[str] = None


class MatchSummary(BaseModel):
    """Compact, LLM-friendly view of one match."""
    match_id: str
    winner: str = Field(..., examples=["Radiant", "Dire", "Unknown"])
    duration: str = Field(..., examples=["41:07"])
    duration_seconds: int
    radiant_score: int
    dire_score: int
    players: List[PlayerSummary]


class MatchLookupError(BaseModel):
    """Summary-shaped payload returned when the match does not exist."""
    error: str = "Match not found"
