# schemas/hero_schemas.py
"""
Data contracts for the OpenDota hero-stat listing and the views derived from it.
"""
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

HeroRole = Literal['Carry', 'Support', 'Nuker', 'Disabler', 'Initiator', 'Durable', 'Escape', 'Pusher']


class HeroStat(BaseModel):
    """A single record of `GET /api/heroStats`, as published by OpenDota."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    id: int
    name: str = ""
    localized_name: str
    primary_attr: str = ""
    attack_type: str = ""
    roles: List[str] = Field(default_factory=list)
    img: str = ""
    icon: str = ""

    base_health: float = 0
    base_health_regen: float | None = None
    base_mana: float = 0
    base_mana_regen: float | None = None
    base_armor: float = 0
    base_attack_min: int = 0
    base_attack_max: int = 0
    base_str: int = 0
    base_agi: int = 0
    base_int: int = 0
    str_gain: float = 0
    agi_gain: float = 0
    int_gain: float = 0
    attack_range: int = 0
    move_speed: int = 0

    pub_pick: int = 0
    pub_win: int = 0
    pro_pick: int = 0
    pro_win: int = 0

    @field_validator('pub_pick', 'pub_win', 'pro_pick', 'pro_win', mode='before')
    @classmethod
    def _null_counter_is_zero(cls, value):
        # Heroes released mid-patch come back with null counters.
        return 0 if value is None else value


class RankedHero(BaseModel):
    """A hero as it appears in a win-rate ranking."""
    id: int
    name: str
    win_rate: float = Field(..., examples=[53.2])
    picks: int
    img: str
    icon: str
    primary_attr: str


class HeroDetail(RankedHero):
    """Everything the hero card shows: the ranking view plus base and combat attributes."""
    primary_attr_label: str
    attack_type: str
    roles: List[str]
    base_str: int
    base_agi: int
    base_int: int
    str_gain: float
    agi_gain: float
    int_gain: float
    move_speed: int
    base_armor: float
    attack_range: int
    base_attack_min: int
    base_attack_max: int
    base_health: float
    base_mana: float
