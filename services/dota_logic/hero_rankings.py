# services/dota_logic/hero_rankings.py
"""
Win-rate rankings over the OpenDota hero-stat listing. Pure functions: the
caller fetches the listing and passes it in.
"""
from typing import Dict, List, Sequence

from schemas.hero_schemas import HeroStat, RankedHero
from .constants import HERO_IMAGE_CDN, ROLES


def win_rate(hero: HeroStat) -> float:
    """Public win rate as a percentage; 0 for a hero nobody has picked."""
    if not hero.pub_pick:
        return 0
    return (hero.pub_win / hero.pub_pick) * 100


def hero_image_url(path: str) -> str:
    if not path:
        return ""
    return f"{HERO_IMAGE_CDN}{path}"


def to_ranked_hero(hero: HeroStat) -> RankedHero:
    return RankedHero(
        id=hero.id,
        name=hero.localized_name,
        win_rate=win_rate(hero),
        picks=hero.pub_pick,
        img=hero_image_url(hero.img),
        icon=hero_image_url(hero.icon),
        primary_attr=hero.primary_attr,
    )


def top_heroes_by_role(heroes: Sequence[HeroStat], role: str, count: int = 5) -> List[RankedHero]:
    """
    The `count` highest win-rate heroes that can play `role`.

    Ties keep fetch order (sorted() is stable). `count` is not capped here.
    """
    ranked = [to_ranked_hero(h) for h in heroes if role in h.roles]
    ranked = sorted(ranked, key=lambda h: h.win_rate, reverse=True)
    return ranked[:max(count, 0)]


def all_roles_top(heroes: Sequence[HeroStat], count: int = 5) -> Dict[str, List[RankedHero]]:
    return {role: top_heroes_by_role(heroes, role, count) for role in ROLES}
