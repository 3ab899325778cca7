"""Tests for match summarization and item/hero name resolution."""

import httpx
import pytest

from conftest import build_dota_client, json_response
from core.exceptions import UpstreamError
from schemas.match_schemas import MatchDetail, MatchLookupError, MatchSummary
from services import dota_tools
from services.dota_logic.data_parser import (
    format_duration,
    resolve_hero_name,
    resolve_item_name,
    summarize_match,
)
from services.dota_logic.game_tables import ITEM_IDS, ITEM_NAMES


class TestItemResolution:

    def test_known_item_resolves_to_display_name(self):
        assert resolve_item_name(116) == "Black King Bar"

    def test_item_missing_from_name_table_gets_placeholder(self):
        assert 35 in ITEM_IDS
        assert ITEM_IDS[35] not in ITEM_NAMES
        assert resolve_item_name(35) == "Unknown Item 35"

    def test_item_missing_from_id_table_gets_placeholder(self):
        assert resolve_item_name(9999) == "Unknown Item 9999"

    @pytest.mark.parametrize("item_id", [0, None])
    def test_empty_slot_resolves_to_nothing(self, item_id):
        assert resolve_item_name(item_id) is None


def test_hero_name_falls_back_to_raw_id():
    assert resolve_hero_name(14) == "Pudge"
    assert resolve_hero_name(999) == "999"


def test_format_duration():
    assert format_duration(2467) == "41:07"
    assert format_duration(59) == "0:59"


def test_summarize_match(match_payload):
    summary = summarize_match(MatchDetail.model_validate(match_payload))

    assert summary.match_id == "7891234567"
    assert summary.winner == "Radiant"
    assert summary.duration == "41:07"
    assert summary.duration_seconds == 2467
    assert (summary.radiant_score, summary.dire_score) == (42, 27)

    radiant, dire = summary.players
    assert radiant.name == "Rylai"
    assert radiant.hero == "Crystal Maiden"
    assert radiant.side == "Radiant"
    assert radiant.kda == pytest.approx(4.17)
    assert radiant.items == ["Tranquil Boots", "Glimmer Cape", "Unknown Item 35", "Magic Wand"]
    assert radiant.neutral_item == "Arcane Ring"

    assert dire.name == "Anonymous"
    assert dire.hero == "999"
    assert dire.side == "Dire"
    assert dire.kda == pytest.approx(3.0)
    assert dire.items == ["Black King Bar", "Unknown Item 9999"]
    assert dire.neutral_item is None


def test_summarize_match_without_outcome(match_payload):
    match_payload["radiant_win"] = None
    assert summarize_match(MatchDetail.model_validate(match_payload)).winner == "Unknown"


@pytest.mark.anyio
async def test_fetch_match_summary_returns_summary(match_payload):
    client = build_dota_client(lambda request: json_response(match_payload))

    result = await dota_tools.fetch_match_summary(client, "7891234567")

    assert isinstance(result, MatchSummary)
    assert len(result.players) == 2


@pytest.mark.anyio
async def test_fetch_match_summary_not_found_returns_error_payload():
    client = build_dota_client(lambda request: json_response({"error": "Not Found"}, status_code=404))

    result = await dota_tools.fetch_match_summary(client, "42")

    assert isinstance(result, MatchLookupError)
    assert result.model_dump() == {"error": "Match not found"}


@pytest.mark.anyio
async def test_fetch_match_summary_propagates_other_failures():
    client = build_dota_client(lambda request: httpx.Response(502))

    with pytest.raises(UpstreamError):
        await dota_tools.fetch_match_summary(client, "42")


@pytest.mark.parametrize("item_id, expected", [
    (609, "Aghanim's Shard"),
    (610, "Wind Waker"),
    (1466, "Gleipnir"),
    (600, "Overwhelming Blink"),
    (1806, "Khanda"),
])
def test_current_items_resolve(item_id, expected):
    assert resolve_item_name(item_id) == expected


def test_recent_hero_resolves():
    assert resolve_hero_name(155) == "Largo"
