# core/tool_definitions.py
"""
Defines the tools that the OpenAI chat model can use.
The schemas point to the high-level functions in `services.dota_tools`.
"""
import logging
from typing import Any, Awaitable, Callable, Dict, List

from services.dota_tools import fetch_match_summary

logger = logging.getLogger(__name__)

FETCH_MATCH_DETAILS = "fetch_match_details"

# --- Tool Function Declarations ---

fetch_match_details_func: Dict[str, Any] = {
    "type": "function",
    "function": {
        "name": FETCH_MATCH_DETAILS,
        "description": "Fetch a summary of a specific Dota 2 match by its numeric Match ID.",
        "parameters": {
            "type": "object",
            "properties": {
                "match_id": {
                    "type": "string",
                    "description": "The Dota 2 Match ID (e.g. '7891234567'). Keep as string to avoid precision loss.",
                },
            },
            "required": ["match_id"],
        },
    },
}

# --- Final, Assembled Toolset for the LLM ---
OPENAI_TOOLS: List[Dict[str, Any]] = [fetch_match_details_func]

# --- Final, Assembled Registry for the Backend ---
# Every handler takes the OpenDota client first, then the tool's arguments.
TOOL_REGISTRY: Dict[str, Callable[..., Awaitable[Any]]] = {
    FETCH_MATCH_DETAILS: fetch_match_summary,
}
