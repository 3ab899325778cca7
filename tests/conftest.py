"""Shared fixtures: sample OpenDota/TMDB payloads and mock-transport clients."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from core.cache import TTLCache
from services.dota_logic.api_client import OpenDotaClient

OPENDOTA_URL = "https://api.opendota.test"


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeClock:
    """Monotonic clock the tests advance by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def make_hero(hero_id: int, name: str, roles: List[str], picks: int, wins: int, **extra: Any) -> Dict[str, Any]:
    hero = {
        "id": hero_id,
        "name": f"npc_dota_hero_{name.lower().replace(' ', '_').replace('-', '')}",
        "localized_name": name,
        "primary_attr": "agi",
        "attack_type": "Melee",
        "roles": roles,
        "img": f"/apps/dota2/images/dota_react/heroes/{hero_id}.png?",
        "icon": f"/apps/dota2/images/dota_react/heroes/icons/{hero_id}.png?",
        "base_health": 120,
        "base_health_regen": 0.25,
        "base_mana": 75,
        "base_mana_regen": 0,
        "base_armor": 1,
        "base_attack_min": 29,
        "base_attack_max": 33,
        "base_str": 21,
        "base_agi": 24,
        "base_int": 12,
        "str_gain": 1.6,
        "agi_gain": 2.8,
        "int_gain": 1.8,
        "attack_range": 150,
        "move_speed": 310,
        "pub_pick": picks,
        "pub_win": wins,
        "pro_pick": 12,
        "pro_win": 6,
    }
    hero.update(extra)
    return hero


@pytest.fixture
def hero_stats_payload() -> List[Dict[str, Any]]:
    return [
        make_hero(1, "Anti-Mage", ["Carry", "Escape", "Nuker"], picks=1000, wins=480),
        make_hero(2, "Axe", ["Initiator", "Durable", "Disabler", "Carry"], picks=2000, wins=1060,
                  primary_attr="str", attack_type="Melee"),
        make_hero(5, "Crystal Maiden", ["Support", "Disabler", "Nuker"], picks=1500, wins=780,
                  primary_attr="int", attack_type="Ranged"),
        make_hero(14, "Pudge", ["Disabler", "Initiator", "Durable", "Nuker"], picks=3000, wins=1500,
                  primary_attr="str"),
        make_hero(8, "Juggernaut", ["Carry", "Pusher", "Escape"], picks=500, wins=260),
        make_hero(126, "Void Spirit", ["Carry", "Escape", "Nuker", "Disabler"], picks=0, wins=0,
                  primary_attr="all"),
        make_hero(12, "Phantom Lancer", ["Carry", "Escape", "Pusher", "Nuker"], picks=1000, wins=520),
    ]


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode(),
                          headers={"content-type": "application/json"})


def mock_http_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def build_dota_client(handler: Callable[[httpx.Request], httpx.Response], clock: FakeClock | None = None,
                      ttl: float = 300.0) -> OpenDotaClient:
    cache = TTLCache("hero_stats", clock=clock) if clock else TTLCache("hero_stats")
    return OpenDotaClient(mock_http_client(handler), OPENDOTA_URL, hero_stats_cache=cache, hero_stats_ttl=ttl)


@pytest.fixture
def match_payload() -> Dict[str, Any]:
    """A trimmed-down OpenDota match: one Radiant and one Dire player."""
    return {
        "match_id": 7891234567,
        "radiant_win": True,
        "duration": 2467,
        "radiant_score": 42,
        "dire_score": 27,
        "start_time": 1718000000,
        "game_mode": 22,
        "chat": [{"type": "chat", "key": "gg"}],
        "players": [
            {
                "account_id": 111, "personaname": "Rylai", "name": None, "hero_id": 5,
                "player_slot": 0, "isRadiant": True,
                "kills": 4, "deaths": 6, "assists": 21, "last_hits": 45, "denies": 3,
                "gold_per_min": 310, "xp_per_min": 420, "net_worth": 9800,
                "hero_damage": 15000, "tower_damage": 300, "hero_healing": 0, "level": 21,
                "item_0": 214, "item_1": 254, "item_2": 0, "item_3": 35, "item_4": 36, "item_5": None,
                "item_neutral": 349,
            },
            {
                "account_id": None, "personaname": None, "name": None, "hero_id": 999,
                "player_slot": 128, "isRadiant": None,
                "kills": 0, "deaths": 0, "assists": 3, "last_hits": 210, "denies": 12,
                "gold_per_min": 520, "xp_per_min": 610, "net_worth": 21000,
                "hero_damage": 12000, "tower_damage": 0, "hero_healing": 0, "level": 24,
                "item_0": 116, "item_1": 9999, "item_2": 0, "item_3": 0, "item_4": 0, "item_5": 0,
                "item_neutral": 0,
            },
        ],
    }
