# core/llm/factory.py
"""
Factory module to instantiate the OpenAI client from settings.
"""
import logging
from typing import Optional

import httpx
from openai import AsyncOpenAI

from config import Settings
from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_openai_client(settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> AsyncOpenAI:
    """
    Builds the AsyncOpenAI client used by the assistant.

    Automatic retries are disabled: every failure surfaces once to the caller.
    """
    if not settings.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY is not set in the environment.")

    client = AsyncOpenAI(api_key=settings.openai_api_key, max_retries=0, http_client=http_client)
    logger.info(f"OpenAI client created for models '{settings.ask_model_name}' and '{settings.investigate_model_name}'.")
    return client
