# services/dota_logic/hero_finder.py
"""
This module contains the logic for finding a single hero from a free-text
name, as typed by a user ("pudge", "Anti-Mage", "crystal").
"""
import logging
from typing import Optional, Sequence

from schemas.hero_schemas import HeroDetail, HeroStat
from .constants import ATTR_LABELS
from .hero_rankings import hero_image_url, win_rate

logger = logging.getLogger(__name__)


def find_hero(heroes: Sequence[HeroStat], query: str) -> Optional[HeroStat]:
    """
    Case-insensitive search by display name.

    An exact match wins; otherwise the first hero (in fetch order) whose name
    contains the query.
    """
    q = query.lower().strip()
    if not q:
        return None

    hero = next((h for h in heroes if h.localized_name.lower() == q), None)
    if hero is None:
        hero = next((h for h in heroes if q in h.localized_name.lower()), None)
    return hero


def to_hero_detail(hero: HeroStat) -> HeroDetail:
    return HeroDetail(
        id=hero.id,
        name=hero.localized_name,
        win_rate=win_rate(hero),
        picks=hero.pub_pick,
        img=hero_image_url(hero.img),
        icon=hero_image_url(hero.icon),
        primary_attr=hero.primary_attr,
        primary_attr_label=ATTR_LABELS.get(hero.primary_attr, hero.primary_attr),
        attack_type=hero.attack_type,
        roles=list(hero.roles),
        base_str=hero.base_str,
        base_agi=hero.base_agi,
        base_int=hero.base_int,
        str_gain=hero.str_gain,
        agi_gain=hero.agi_gain,
        int_gain=hero.int_gain,
        move_speed=hero.move_speed,
        base_armor=hero.base_armor,
        attack_range=hero.attack_range,
        base_attack_min=hero.base_attack_min,
        base_attack_max=hero.base_attack_max,
        base_health=hero.base_health,
        base_mana=hero.base_mana,
    )


def lookup_hero(heroes: Sequence[HeroStat], query: str) -> Optional[HeroDetail]:
    hero = find_hero(heroes, query)
    if hero is None:
        logger.info(f"No hero matches '{query}'.")
        return None
    logger.info(f"Resolved '{query}' to hero '{hero.localized_name}' (id {hero.id}).")
    return to_hero_detail(hero)
