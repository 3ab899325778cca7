# api/routers/commands.py
"""
Small commands that need no upstream data.
"""
import random
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends

from core.interaction_logger import track_interaction
from ..dependencies import get_user_tag

router = APIRouter(
    prefix="/api",
    tags=["Commands"]
)

COMMANDS_INFO: List[Dict[str, str]] = [
    {"name": "/topheroes", "description": "Show the top Dota 2 heroes by role (win rate)"},
    {"name": "/hero", "description": "Look up a Dota 2 hero by name"},
    {"name": "/match", "description": "Summarize a Dota 2 match by its match ID"},
    {"name": "/ask", "description": "Ask the AI a Dota 2 question"},
    {"name": "/investigate", "description": "Deep-research a Dota 2 question on the web"},
    {"name": "/movies", "description": "Get 5 random top movie recommendations (now playing)"},
    {"name": "/coinflip", "description": "Flip a coin (Heads or Tails)"},
    {"name": "/help", "description": "Show all available commands"},
]


@router.get("/coinflip")
async def coinflip_endpoint(user: Optional[str] = Depends(get_user_tag)) -> Dict[str, str]:
    with track_interaction("coinflip", user):
        return {"result": random.choice(["Heads", "Tails"])}


@router.get("/help")
async def help_endpoint(user: Optional[str] = Depends(get_user_tag)) -> Dict[str, List[Dict[str, str]]]:
    with track_interaction("help", user):
        return {"commands": COMMANDS_INFO}
