# services/dota_logic/data_parser.py
"""
This module is the data-cleaning expert. Its sole responsibility is to take a
validated OpenDota match and reduce it into a compact, predictable summary
suitable for the LLM.
"""
import logging
from typing import List, Optional

from schemas.match_schemas import MatchDetail, MatchPlayer, MatchSummary, PlayerSummary
from .constants import DIRE, RADIANT
from .game_tables import HERO_NAMES, ITEM_IDS, ITEM_NAMES

logger = logging.getLogger(__name__)

ANONYMOUS_PLAYER = "Anonymous"


def resolve_item_name(item_id: Optional[int]) -> Optional[str]:
    """
    Maps an item id to its display name.

    Returns None for an empty slot (id 0 or missing). Ids without a display
    name, including recipes, render as "Unknown Item <id>".
    """
    if not item_id:
        return None
    item_key = ITEM_IDS.get(item_id)
    if item_key is None or item_key not in ITEM_NAMES:
        return f"Unknown Item {item_id}"
    return ITEM_NAMES[item_key]


def resolve_hero_name(hero_id: int) -> str:
    return HERO_NAMES.get(hero_id, str(hero_id))


def format_duration(seconds: int) -> str:
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes}:{secs:02d}"


def _player_side(player: MatchPlayer) -> str:
    if player.isRadiant is not None:
        return RADIANT if player.isRadiant else DIRE
    if player.player_slot is not None:
        return RADIANT if player.player_slot < 128 else DIRE
    return "Unknown"


def summarize_player(player: MatchPlayer) -> PlayerSummary:
    items: List[str] = [name for name in map(resolve_item_name, player.primary_item_ids) if name]
    kda = round((player.kills + player.assists) / max(player.deaths, 1), 2)

    return PlayerSummary(
        name=player.name or player.personaname or ANONYMOUS_PLAYER,
        hero=resolve_hero_name(player.hero_id),
        side=_player_side(player),
        kills=player.kills,
        deaths=player.deaths,
        assists=player.assists,
        kda=kda,
        last_hits=player.last_hits,
        denies=player.denies,
        gold_per_min=player.gold_per_min,
        xp_per_min=player.xp_per_min,
        net_worth=player.net_worth,
        hero_damage=player.hero_damage,
        level=player.level,
        items=items,
        neutral_item=resolve_item_name(player.item_neutral),
    )


def summarize_match(detail: MatchDetail) -> MatchSummary:
    """
    Takes a full match and creates the final, concise summary for the LLM.

    Args:
        detail (MatchDetail): The validated upstream match.

    Returns:
        MatchSummary: Scores, outcome and one entry per player in upstream order.
    """
    if detail.radiant_win is None:
        winner = "Unknown"
    else:
        winner = RADIANT if detail.radiant_win else DIRE

    summary = MatchSummary(
        match_id=str(detail.match_id),
        winner=winner,
        duration=format_duration(detail.duration),
        duration_seconds=detail.duration,
        radiant_score=detail.radiant_score,
        dire_score=detail.dire_score,
        players=[summarize_player(p) for p in detail.players],
    )
    logger.info(f"Summarized match {summary.match_id}: {winner} victory, {len(summary.players)} players.")
    return summary
