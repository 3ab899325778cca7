# config.py
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(override=True)


class Settings(BaseSettings):
    """
    Defines the application's configuration settings.
    Credentials are optional at load time; the operations that need them fail
    with a ConfigurationError when they are missing.
    """
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # --- Provider Credentials ---
    openai_api_key: str | None = None
    tmdb_api_key: str | None = None

    # --- Upstream Hosts ---
    opendota_base_url: str = "https://api.opendota.com"
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_image_base_url: str = "https://image.tmdb.org/t/p/w500"

    # --- Cache Freshness Windows ---
    hero_stats_ttl_seconds: float = Field(default=300.0, gt=0)
    now_playing_ttl_seconds: float = Field(default=300.0, gt=0)

    # --- OpenAI Model Configuration ---
    ask_model_name: str = Field(
        default='gpt-4o-mini',
        description="Chat model used for tool-calling Q&A."
    )
    investigate_model_name: str = Field(
        default='gpt-4o',
        description="Model used for web-search research requests."
    )
    ask_max_tokens: int = 1024
    ai_temperature: float = 0.7

    # --- General Settings ---
    log_level: str = "INFO"


try:
    settings = Settings()
except Exception as e:
    print(f"FATAL: Failed to load application settings. Error: {e}")
    print("Please ensure a valid .env file exists and contains valid values.")
    raise
