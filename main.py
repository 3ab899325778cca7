# main.py

"""
The main entry point of the application.

This module initializes the FastAPI application, configures basic logging,
builds the shared upstream clients at startup, includes the API routers, and
defines the main execution block to start the Uvicorn server.
"""

import logging
from contextlib import asynccontextmanager
from typing import Dict

import httpx
import uvicorn
from fastapi import FastAPI

from api.routers.chat import router as chat_router
from api.routers.commands import router as commands_router
from api.routers.heroes import router as heroes_router
from api.routers.matches import router as matches_router
from api.routers.movies import router as movies_router
from config import settings
from core.ai_orchestrator import DotaAssistant
from core.cache import TTLCache
from core.exceptions import ConfigurationError
from core.llm.factory import create_openai_client
from services.dota_logic.api_client import OpenDotaClient
from services.movie_client import MovieClient

# --- Logging Configuration ---
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Builds one HTTP client, one cache per cacheable resource and the provider
    clients, and shares them through `app.state` for the life of the process.
    """
    http_client = httpx.AsyncClient()
    dota_client = OpenDotaClient(
        http_client,
        settings.opendota_base_url,
        hero_stats_cache=TTLCache("hero_stats"),
        hero_stats_ttl=settings.hero_stats_ttl_seconds,
    )
    app.state.dota_client = dota_client
    app.state.movie_client = MovieClient(
        http_client,
        api_key=settings.tmdb_api_key,
        base_url=settings.tmdb_base_url,
        image_base_url=settings.tmdb_image_base_url,
        now_playing_cache=TTLCache("now_playing"),
        now_playing_ttl=settings.now_playing_ttl_seconds,
    )
    if not settings.tmdb_api_key:
        logger.warning("TMDB_API_KEY is not set. The /movies command will fail until it is configured.")

    openai_client = None
    try:
        openai_client = create_openai_client(settings)
        app.state.assistant = DotaAssistant(
            openai_client,
            dota_client,
            ask_model=settings.ask_model_name,
            investigate_model=settings.investigate_model_name,
            max_tokens=settings.ask_max_tokens,
            temperature=settings.ai_temperature,
        )
    except ConfigurationError as e:
        logger.warning(f"{e.message} The /ask and /investigate commands are disabled.")
        app.state.assistant = None

    logger.info("Upstream clients initialized.")
    yield

    if openai_client is not None:
        await openai_client.close()
    await http_client.aclose()
    logger.info("Upstream clients closed.")


# --- FastAPI Application Initialization ---
app = FastAPI(
    title="Dota Companion Bot API",
    version="1.0.0",
    description="Hero rankings, match summaries and AI answers for Dota 2, plus movie picks.",
    lifespan=lifespan,
)

# --- Include API Routers ---
app.include_router(heroes_router)
app.include_router(matches_router)
app.include_router(chat_router)
app.include_router(movies_router)
app.include_router(commands_router)
logger.info("Hero, match, chat, movie and command routers included successfully.")


@app.get("/", tags=["Health Check"])
def root() -> Dict[str, str]:
    """
    Root endpoint for basic health checks.
    """
    logger.info("Health check endpoint '/' was accessed.")
    return {"status": "online", "message": "Welcome to the Dota Companion Bot API"}


# --- Main Execution Block ---
if __name__ == "__main__":
    logger.info("Starting Uvicorn server...")
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
